from __future__ import annotations

import math
from typing import NamedTuple

from pyproj import CRS
from shapely.geometry import Point

from osgridref.utils.crs import BNG_CRS, LATLON_CRS
from osgridref.utils.exceptions import InvalidCoordinateError


class GeodeticCoordinate(NamedTuple):
    """
    Represents a single geodetic position as latitude and longitude in decimal degrees.

    A GeodeticCoordinate is the input of the grid reference conversion. It is immutable
    and carries no identity; two coordinates with the same degrees are interchangeable.

    Attributes:
        latitude: The latitude in decimal degrees, positive north
        longitude: The longitude in decimal degrees, positive east
        geom: A Shapely Point of (longitude, latitude)
        crs: The pyproj CRS of the coordinate (EPSG:4326)

    Examples:
        >>> from osgridref.constructs.coordinate import GeodeticCoordinate
        >>> # Central London
        >>> coord = GeodeticCoordinate.from_lat_lon(51.5074, -0.1278)
        >>> print(coord.geom)
        POINT (-0.1278 51.5074)
    """

    latitude: float
    longitude: float

    def __repr__(self):
        return f"GeodeticCoordinate(latitude={self.latitude}, longitude={self.longitude})"

    @classmethod
    def from_lat_lon(cls, lat: float, lon: float) -> GeodeticCoordinate:
        """
        Create a coordinate from latitude and longitude values, checking their ranges.

        Args:
            lat: The latitude in decimal degrees (range: -90 to 90)
            lon: The longitude in decimal degrees (range: -180 to 180)

        Returns:
            A new GeodeticCoordinate

        Raises:
            InvalidCoordinateError: If either value is not finite or lies outside its range
            ValueError: If either value cannot be read as a number

        Examples:
            >>> GeodeticCoordinate.from_lat_lon(91.0, 0.0)
            Traceback (most recent call last):
            ...
            osgridref.utils.exceptions.InvalidCoordinateError: latitude 91.0 is outside [-90, 90]
        """
        lat = float(lat)
        lon = float(lon)

        if not math.isfinite(lat) or not -90 <= lat <= 90:
            raise InvalidCoordinateError(f"latitude {lat} is outside [-90, 90]")
        if not math.isfinite(lon) or not -180 <= lon <= 180:
            raise InvalidCoordinateError(f"longitude {lon} is outside [-180, 180]")

        return cls(latitude=lat, longitude=lon)

    @property
    def geom(self) -> Point:
        return Point(self.longitude, self.latitude)

    @property
    def crs(self) -> CRS:
        return LATLON_CRS


class PlanarGridCoordinate(NamedTuple):
    """
    Represents a position on the OSGB36 National Grid as easting and northing meters.

    A PlanarGridCoordinate is the output of the ellipsoidal projection and the input of
    the grid reference encoder. Any value is representable, including positions far
    outside Great Britain; the encoder decides whether a point is covered by the grid
    letter table.

    Attributes:
        easting: Meters east of the National Grid false origin
        northing: Meters north of the National Grid false origin
        geom: A Shapely Point of (easting, northing)
        crs: The pyproj CRS of the coordinate (EPSG:27700)

    Examples:
        >>> from osgridref.constructs.coordinate import PlanarGridCoordinate
        >>> origin = PlanarGridCoordinate(400000.0, -100000.0)
        >>> origin.northing < 0
        True
    """

    easting: float
    northing: float

    def __repr__(self):
        return f"PlanarGridCoordinate(easting={self.easting}, northing={self.northing})"

    @property
    def geom(self) -> Point:
        return Point(self.easting, self.northing)

    @property
    def crs(self) -> CRS:
        return BNG_CRS
