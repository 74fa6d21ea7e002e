"""PROJ and shapely helpers for National Grid geometry."""

from typing import Tuple

import shapely
from pyproj import Transformer

from osgridref.constructs.coordinate import PlanarGridCoordinate
from osgridref.utils.crs import BNG_CRS, LATLON_CRS, OSGB36_LATLON_CRS


def pyproj_national_grid(lat, lon, datum_shift: bool = False) -> Tuple:
    """
    Project latitude/longitude onto the National Grid with PROJ.

    This is an independent implementation of the same projection, used by
    Track.to_national_grid(use_proj=True) and to check the series evaluation in
    osgridref.projection.transverse_mercator. Scalars and numpy arrays are accepted.

    Args:
        lat: The latitude in decimal degrees
        lon: The longitude in decimal degrees
        datum_shift: If False, the coordinate is read as OSGB36 (EPSG:4277) and only projected. If True, it is read as WGS84 (EPSG:4326) and PROJ chooses the datum transformation. Default is False.

    Returns:
        A tuple of (easting, northing) in meters (EPSG:27700), shaped like the input

    Examples:
        >>> e, n = pyproj_national_grid(52.65757030556, 1.71792158333)
        >>> print(f"{e:.1f} {n:.1f}")
        651409.9 313177.3
    """
    source = LATLON_CRS if datum_shift else OSGB36_LATLON_CRS
    transformer = Transformer.from_crs(source, BNG_CRS, always_xy=True)

    return transformer.transform(lon, lat)


def coord_to_coord_dist(a: PlanarGridCoordinate, b: PlanarGridCoordinate) -> float:
    """
    Get the straight-line distance in meters between two National Grid coordinates.

    Examples:
        >>> coord_to_coord_dist(
        ...     PlanarGridCoordinate(530000.0, 180000.0),
        ...     PlanarGridCoordinate(530030.0, 180040.0),
        ... )
        50.0
    """
    return float(shapely.distance(a.geom, b.geom))
