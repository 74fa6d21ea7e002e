"""Transverse Mercator projection between geodetic coordinates and the National Grid.

Implements the forward and inverse series from Appendix C of the Ordnance Survey
"A guide to coordinate systems in Great Britain". The forward projection is a direct
closed-form evaluation; only the inverse needs to iterate, to recover the latitude
whose meridional arc matches the northing.
"""

from __future__ import annotations

import logging
import math
from typing import Tuple

import numpy as np

from osgridref.projection.ellipsoid import AIRY_1830, E0, F0, LAT0, LON0, N0, Ellipsoid

log = logging.getLogger(__name__)

# Northing residual below which the inverse latitude solve stops, meters (0.01 mm)
INVERSE_TOLERANCE = 1e-5
INVERSE_MAX_ITERATIONS = 100


def meridional_arc(phi, ellipsoid: Ellipsoid = AIRY_1830):
    """
    Compute the meridional arc distance from the true origin latitude to phi.

    Args:
        phi: The latitude in radians (a float or a numpy array)
        ellipsoid: The ellipsoid to measure on. Default is Airy 1830.

    Returns:
        The scaled arc length in meters, negative south of the true origin
    """
    n = ellipsoid.n
    n2 = n * n
    n3 = n2 * n

    dphi = phi - LAT0
    sphi = phi + LAT0

    ma = (1 + n + (5.0 / 4.0) * n2 + (5.0 / 4.0) * n3) * dphi
    mb = (3 * n + 3 * n2 + (21.0 / 8.0) * n3) * np.sin(dphi) * np.cos(sphi)
    mc = ((15.0 / 8.0) * n2 + (15.0 / 8.0) * n3) * np.sin(2 * dphi) * np.cos(2 * sphi)
    md = (35.0 / 24.0) * n3 * np.sin(3 * dphi) * np.cos(3 * sphi)

    return ellipsoid.b * F0 * (ma - mb + mc - md)


def latlon_to_easting_northing(latitude, longitude, ellipsoid: Ellipsoid = AIRY_1830):
    """
    Project a geodetic latitude/longitude onto the National Grid.

    The coordinate is taken to be referenced to the given ellipsoid already; no datum
    shift is applied here. Feeding raw GPS (WGS84) degrees in treats them as OSGB36,
    which displaces the result by roughly a hundred meters but is the documented
    behavior of the default conversion path. See osgridref.projection.helmert for the
    optional shift.

    Both arguments may be floats or numpy arrays of equal shape; the computation is
    element-wise.

    Args:
        latitude: The latitude in decimal degrees
        longitude: The longitude in decimal degrees
        ellipsoid: The ellipsoid the coordinate is referenced to. Default is Airy 1830.

    Returns:
        A tuple of (easting, northing) in meters

    Examples:
        >>> # Ordnance Survey worked example
        >>> e, n = latlon_to_easting_northing(52.65757030556, 1.71792158333)
        >>> print(f"{e:.3f} {n:.3f}")
        651409.903 313177.270
    """
    phi = np.radians(latitude)
    lam = np.radians(longitude)

    a = ellipsoid.a
    e2 = ellipsoid.e2

    sin_phi = np.sin(phi)
    cos_phi = np.cos(phi)
    tan2_phi = np.tan(phi) ** 2
    tan4_phi = tan2_phi**2
    cos3_phi = cos_phi**3
    cos5_phi = cos3_phi * cos_phi**2

    # transverse and meridional radii of curvature
    nu = a * F0 / np.sqrt(1 - e2 * sin_phi**2)
    rho = a * F0 * (1 - e2) / (1 - e2 * sin_phi**2) ** 1.5
    eta2 = nu / rho - 1

    m = meridional_arc(phi, ellipsoid)

    I = m + N0
    II = (nu / 2) * sin_phi * cos_phi
    III = (nu / 24) * sin_phi * cos3_phi * (5 - tan2_phi + 9 * eta2)
    IIIA = (nu / 720) * sin_phi * cos5_phi * (61 - 58 * tan2_phi + tan4_phi)
    IV = nu * cos_phi
    V = (nu / 6) * cos3_phi * (nu / rho - tan2_phi)
    VI = (
        (nu / 120)
        * cos5_phi
        * (5 - 18 * tan2_phi + tan4_phi + 14 * eta2 - 58 * tan2_phi * eta2)
    )

    dlam = lam - LON0

    northing = I + II * dlam**2 + III * dlam**4 + IIIA * dlam**6
    easting = E0 + IV * dlam + V * dlam**3 + VI * dlam**5

    return easting, northing


def easting_northing_to_latlon(
    easting: float, northing: float, ellipsoid: Ellipsoid = AIRY_1830
) -> Tuple[float, float]:
    """
    Convert National Grid easting/northing back to geodetic latitude/longitude.

    The latitude is first solved iteratively so that the meridional arc matches the
    northing, then corrected with the standard VII to XIIA series terms.

    Args:
        easting: The easting in meters
        northing: The northing in meters
        ellipsoid: The ellipsoid of the result. Default is Airy 1830.

    Returns:
        A tuple of (latitude, longitude) in decimal degrees on the given ellipsoid

    Raises:
        ValueError: If the latitude solve does not converge

    Examples:
        >>> lat, lon = easting_northing_to_latlon(651409.903, 313177.270)
        >>> print(f"{lat:.6f} {lon:.6f}")
        52.657570 1.717922
    """
    a = ellipsoid.a
    e2 = ellipsoid.e2

    phi = LAT0
    m = 0.0
    for iteration in range(INVERSE_MAX_ITERATIONS):
        phi = (northing - N0 - m) / (a * F0) + phi
        m = float(meridional_arc(phi, ellipsoid))
        if abs(northing - N0 - m) < INVERSE_TOLERANCE:
            break
    else:
        raise ValueError(
            f"latitude did not converge for easting {easting}, northing {northing}"
        )
    log.debug("inverse projection converged after %d iterations", iteration + 1)

    sin_phi = math.sin(phi)
    cos_phi = math.cos(phi)
    tan_phi = math.tan(phi)
    tan2_phi = tan_phi**2
    tan4_phi = tan2_phi**2
    tan6_phi = tan4_phi * tan2_phi

    nu = a * F0 / math.sqrt(1 - e2 * sin_phi**2)
    rho = a * F0 * (1 - e2) / (1 - e2 * sin_phi**2) ** 1.5
    eta2 = nu / rho - 1

    VII = tan_phi / (2 * rho * nu)
    VIII = (
        tan_phi
        / (24 * rho * nu**3)
        * (5 + 3 * tan2_phi + eta2 - 9 * tan2_phi * eta2)
    )
    IX = tan_phi / (720 * rho * nu**5) * (61 + 90 * tan2_phi + 45 * tan4_phi)
    X = 1 / (cos_phi * nu)
    XI = 1 / (6 * cos_phi * nu**3) * (nu / rho + 2 * tan2_phi)
    XII = 1 / (120 * cos_phi * nu**5) * (5 + 28 * tan2_phi + 24 * tan4_phi)
    XIIA = (
        1
        / (5040 * cos_phi * nu**7)
        * (61 + 662 * tan2_phi + 1320 * tan4_phi + 720 * tan6_phi)
    )

    de = easting - E0

    lat = phi - VII * de**2 + VIII * de**4 - IX * de**6
    lon = LON0 + X * de - XI * de**3 + XII * de**5 - XIIA * de**7

    return math.degrees(lat), math.degrees(lon)
