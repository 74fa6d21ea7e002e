"""Optional Helmert datum shift between WGS84 and OSGB36.

The default grid reference conversion treats GPS degrees as if they were already OSGB36
degrees. Callers who want the datum corrected opt in to this stage, which moves a point
from one ellipsoid's cartesian frame to the other's with the seven-parameter Helmert
transformation published by the Ordnance Survey. Accuracy is about 5 meters.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from osgridref.projection.ellipsoid import AIRY_1830, GRS80, Ellipsoid

# Fixed number of latitude refinements when returning from cartesian coordinates
LATITUDE_ITERATIONS = 10

ARCSECONDS_PER_RADIAN = 180 * 3600 / np.pi


class HelmertParameters(NamedTuple):
    """
    Seven-parameter similarity transform between two cartesian datum frames.

    Attributes:
        tx: Translation along x, meters
        ty: Translation along y, meters
        tz: Translation along z, meters
        s_ppm: Scale change, parts per million
        rx_sec: Rotation about x, arcseconds
        ry_sec: Rotation about y, arcseconds
        rz_sec: Rotation about z, arcseconds
    """

    tx: float
    ty: float
    tz: float
    s_ppm: float
    rx_sec: float
    ry_sec: float
    rz_sec: float

    def inverse(self) -> HelmertParameters:
        """
        Get the parameters of the reverse transformation.

        Negating every parameter is the standard approximation for small rotations and
        is good to the millimeter level for the OSGB36 set.
        """
        return HelmertParameters(*(-p for p in self))


# Ordnance Survey published parameters, WGS84 -> OSGB36
WGS84_TO_OSGB36 = HelmertParameters(
    tx=-446.448,
    ty=125.157,
    tz=-542.060,
    s_ppm=20.4894,
    rx_sec=-0.1502,
    ry_sec=-0.2470,
    rz_sec=-0.8421,
)


def _to_cartesian(phi, lam, ellipsoid: Ellipsoid):
    e2 = ellipsoid.e2
    nu = ellipsoid.a / np.sqrt(1 - e2 * np.sin(phi) ** 2)

    # ellipsoidal height is taken as zero
    x = nu * np.cos(phi) * np.cos(lam)
    y = nu * np.cos(phi) * np.sin(lam)
    z = nu * (1 - e2) * np.sin(phi)

    return x, y, z


def _from_cartesian(x, y, z, ellipsoid: Ellipsoid):
    e2 = ellipsoid.e2
    p = np.sqrt(x**2 + y**2)

    phi = np.arctan2(z, p * (1 - e2))
    for _ in range(LATITUDE_ITERATIONS):
        nu = ellipsoid.a / np.sqrt(1 - e2 * np.sin(phi) ** 2)
        phi = np.arctan2(z + e2 * nu * np.sin(phi), p)

    lam = np.arctan2(y, x)

    return phi, lam


def helmert_transform(
    latitude,
    longitude,
    source: Ellipsoid,
    target: Ellipsoid,
    params: HelmertParameters,
):
    """
    Move a geodetic coordinate from one datum to another.

    The coordinate is converted to cartesian x, y, z on the source ellipsoid, shifted
    with the Helmert parameters and converted back to latitude/longitude on the target
    ellipsoid. Arguments may be floats or numpy arrays.

    Args:
        latitude: The latitude in decimal degrees on the source datum
        longitude: The longitude in decimal degrees on the source datum
        source: The ellipsoid of the input coordinate
        target: The ellipsoid of the output coordinate
        params: The transformation parameters, source frame to target frame

    Returns:
        A tuple of (latitude, longitude) in decimal degrees on the target datum
    """
    x, y, z = _to_cartesian(np.radians(latitude), np.radians(longitude), source)

    s = params.s_ppm * 1e-6
    rx = params.rx_sec / ARCSECONDS_PER_RADIAN
    ry = params.ry_sec / ARCSECONDS_PER_RADIAN
    rz = params.rz_sec / ARCSECONDS_PER_RADIAN

    x2 = params.tx + (1 + s) * x - rz * y + ry * z
    y2 = params.ty + rz * x + (1 + s) * y - rx * z
    z2 = params.tz - ry * x + rx * y + (1 + s) * z

    phi, lam = _from_cartesian(x2, y2, z2, target)

    return np.degrees(phi), np.degrees(lam)


def wgs84_to_osgb36(latitude, longitude):
    """
    Shift a GPS (WGS84) coordinate onto the OSGB36 datum.

    Args:
        latitude: The WGS84 latitude in decimal degrees
        longitude: The WGS84 longitude in decimal degrees

    Returns:
        A tuple of (latitude, longitude) in decimal degrees on OSGB36 (Airy 1830)

    Examples:
        >>> # Airy transit circle, Greenwich; OSGB36 longitude is close to zero
        >>> lat, lon = wgs84_to_osgb36(51.477811, -0.001475)
    """
    return helmert_transform(latitude, longitude, GRS80, AIRY_1830, WGS84_TO_OSGB36)


def osgb36_to_wgs84(latitude, longitude):
    """
    Shift an OSGB36 coordinate onto the WGS84 datum.

    Args:
        latitude: The OSGB36 latitude in decimal degrees
        longitude: The OSGB36 longitude in decimal degrees

    Returns:
        A tuple of (latitude, longitude) in decimal degrees on WGS84 (GRS80)
    """
    return helmert_transform(
        latitude, longitude, AIRY_1830, GRS80, WGS84_TO_OSGB36.inverse()
    )
