"""Conversion between GPS latitude/longitude and Ordnance Survey grid references.

The forward conversion runs two stages: an ellipsoidal projection onto the National
Grid, then encoding into the lettered grid reference. An optional Helmert datum shift
may be applied before projecting; without it, GPS degrees are projected as if they were
OSGB36 degrees, which is how previously stored references were produced.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple, Union

from osgridref.constructs.coordinate import GeodeticCoordinate, PlanarGridCoordinate
from osgridref.constructs.gps_fix import GPSFix
from osgridref.constructs.grid_reference import GridReference
from osgridref.encoding.grid_encoder import decode, encode
from osgridref.projection.helmert import osgb36_to_wgs84, wgs84_to_osgb36
from osgridref.projection.transverse_mercator import (
    easting_northing_to_latlon,
    latlon_to_easting_northing,
)
from osgridref.utils.geo import pyproj_national_grid

log = logging.getLogger(__name__)


def to_national_grid(
    latitude: float,
    longitude: float,
    datum_shift: bool = False,
    use_proj: bool = False,
) -> PlanarGridCoordinate:
    """
    Project a latitude/longitude onto the National Grid without encoding it.

    Args:
        latitude: The latitude in decimal degrees (range: -90 to 90)
        longitude: The longitude in decimal degrees (range: -180 to 180)
        datum_shift: If True, shift the coordinate from WGS84 to OSGB36 before projecting. Default is False.
        use_proj: If True, let PROJ do the projection (and its own datum transformation when datum_shift is set) instead of the built-in series. Default is False.

    Returns:
        The easting/northing in meters; may lie outside Great Britain

    Raises:
        InvalidCoordinateError: If the degrees are out of range

    Examples:
        >>> # the National Grid true origin
        >>> to_national_grid(49.0, -2.0)
        PlanarGridCoordinate(easting=400000.0, northing=-100000.0)
    """
    coord = GeodeticCoordinate.from_lat_lon(latitude, longitude)

    lat, lon = coord
    if use_proj:
        easting, northing = pyproj_national_grid(lat, lon, datum_shift=datum_shift)
    else:
        if datum_shift:
            lat, lon = wgs84_to_osgb36(lat, lon)
        easting, northing = latlon_to_easting_northing(lat, lon)

    return PlanarGridCoordinate(float(easting), float(northing))


def convert_to_grid_reference(
    latitude: float, longitude: float, datum_shift: bool = False
) -> Optional[str]:
    """
    Convert a latitude/longitude to an Ordnance Survey grid reference string.

    Positions outside the National Grid (anywhere beyond Great Britain and its islands)
    are an expected case and give None rather than an error.

    Args:
        latitude: The latitude in decimal degrees (range: -90 to 90)
        longitude: The longitude in decimal degrees (range: -180 to 180)
        datum_shift: If True, shift the coordinate from WGS84 to OSGB36 before projecting. Default is False.

    Returns:
        A grid reference of the form "XY eeee nnnn" at 10 m resolution, or None if the
        position is outside the grid

    Raises:
        InvalidCoordinateError: If the degrees are out of range

    Examples:
        >>> ref = convert_to_grid_reference(51.5074, -0.1278)  # central London
        >>> ref.startswith("TQ")
        True
        >>> convert_to_grid_reference(48.8566, 2.3522) is None  # Paris
        True
    """
    planar = to_national_grid(latitude, longitude, datum_shift=datum_shift)

    reference = encode(planar)
    if reference is None:
        log.debug(
            "no grid reference for latitude %s, longitude %s", latitude, longitude
        )
        return None

    return reference.to_string()


def fix_to_grid_reference(fix: GPSFix, datum_shift: bool = False) -> Optional[str]:
    """
    Convert a GPS fix to a grid reference string.

    Only the fix position is used; its accuracy and timestamp do not affect the result.

    Args:
        fix: The GPS fix to convert
        datum_shift: If True, shift the coordinate from WGS84 to OSGB36 before projecting. Default is False.

    Returns:
        A grid reference of the form "XY eeee nnnn", or None if outside the grid

    Raises:
        InvalidCoordinateError: If the fix position is out of range
    """
    coord = fix.to_coordinate()

    return convert_to_grid_reference(
        coord.latitude, coord.longitude, datum_shift=datum_shift
    )


def grid_reference_to_lat_lon(
    reference: Union[str, GridReference],
    datum_shift: bool = False,
    centre: bool = True,
) -> Tuple[float, float]:
    """
    Convert a grid reference back to latitude/longitude.

    Args:
        reference: A grid reference string (see GridReference.from_string) or GridReference
        datum_shift: If True, shift the result from OSGB36 to WGS84. Use the same setting that produced the reference. Default is False.
        centre: If True, return the centre of the referenced 10 m cell, otherwise its south-west corner. Default is True.

    Returns:
        A tuple of (latitude, longitude) in decimal degrees

    Raises:
        GridReferenceError: If the reference cannot be parsed

    Examples:
        >>> lat, lon = grid_reference_to_lat_lon("TG 5140 1317")
        >>> print(f"{lat:.2f} {lon:.2f}")
        52.66 1.72
    """
    if isinstance(reference, str):
        reference = GridReference.from_string(reference)

    easting, northing = decode(reference, centre=centre)
    lat, lon = easting_northing_to_latlon(easting, northing)

    if datum_shift:
        lat, lon = osgb36_to_wgs84(lat, lon)

    return float(lat), float(lon)
