from __future__ import annotations

from typing import NamedTuple, Optional

from osgridref.constructs.coordinate import GeodeticCoordinate


class GPSFix(NamedTuple):
    """
    A single position report from the device geolocation service.

    Attributes:
        latitude: The WGS84 latitude in decimal degrees
        longitude: The WGS84 longitude in decimal degrees
        accuracy_m: The reported horizontal accuracy radius in meters, if known
        timestamp: The time of the fix in milliseconds since the epoch, if known

    Examples:
        >>> fix = GPSFix(51.5074, -0.1278, accuracy_m=8.0)
        >>> fix.to_coordinate()
        GeodeticCoordinate(latitude=51.5074, longitude=-0.1278)
    """

    latitude: float
    longitude: float
    accuracy_m: Optional[float] = None
    timestamp: Optional[float] = None

    def to_coordinate(self) -> GeodeticCoordinate:
        """
        Get the position of this fix as a validated coordinate.

        Accuracy and timestamp are not part of the coordinate; grid conversion does not
        depend on them.

        Returns:
            A GeodeticCoordinate for the fix position

        Raises:
            InvalidCoordinateError: If the fix reports out of range degrees
        """
        return GeodeticCoordinate.from_lat_lon(self.latitude, self.longitude)
