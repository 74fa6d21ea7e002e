from __future__ import annotations

import logging
from functools import cached_property
from typing import Iterable, List, Optional

import numpy as np
import pandas as pd
from geopandas import GeoDataFrame, points_from_xy
from pyproj import CRS

from osgridref.constructs.coordinate import PlanarGridCoordinate
from osgridref.constructs.gps_fix import GPSFix
from osgridref.encoding.grid_encoder import encode
from osgridref.projection.helmert import wgs84_to_osgb36
from osgridref.projection.transverse_mercator import latlon_to_easting_northing
from osgridref.utils.crs import BNG_CRS, LATLON_CRS
from osgridref.utils.exceptions import InvalidCoordinateError
from osgridref.utils.geo import coord_to_coord_dist, pyproj_national_grid
from osgridref.utils.keys import (
    DEFAULT_ACCURACY_KEY,
    DEFAULT_EASTING_KEY,
    DEFAULT_GRID_REFERENCE_KEY,
    DEFAULT_NORTHING_KEY,
    DEFAULT_TIMESTAMP_KEY,
)

log = logging.getLogger(__name__)

# fixes reporting a worse accuracy radius than this are dropped from a track
DEFAULT_MAX_ACCURACY_M = 50.0


class Track:
    """
    A GPS trail recorded during a detecting session.

    A Track wraps a GeoDataFrame of WGS84 points, one row per GPS fix, with the
    reported accuracy and timestamp of each fix. It provides the National Grid view of
    the trail: projected points, a grid reference per fix and the walked length.

    The underlying GeoDataFrame must have unique indices - duplicate indices will raise
    an IndexError during initialization. It must also carry the accuracy_m and
    timestamp columns (NaN where unknown), otherwise a ValueError is raised.

    Attributes:
        fixes: A list of GPSFix objects, one per point
        crs: The coordinate reference system of the track (EPSG:4326)
        index: The pandas Index from the underlying GeoDataFrame

    Examples:
        >>> from osgridref.constructs.gps_fix import GPSFix
        >>> from osgridref.constructs.track import Track
        >>>
        >>> track = Track.from_fixes([
        ...     GPSFix(51.5074, -0.1278, accuracy_m=5.0),
        ...     GPSFix(51.5080, -0.1270, accuracy_m=80.0),
        ...     GPSFix(51.5086, -0.1262, accuracy_m=6.0),
        ... ])
        >>> len(track.filter_accuracy())  # the 80 m fix is dropped
        2
        >>> refs = track.grid_references()
    """

    _frame: GeoDataFrame

    def __init__(self, frame: GeoDataFrame):
        if frame.index.has_duplicates:
            duplicates = frame.index[frame.index.duplicated()].values
            raise IndexError(
                f"Track cannot have duplicates in the index but found {duplicates}"
            )
        missing = [
            key
            for key in (DEFAULT_ACCURACY_KEY, DEFAULT_TIMESTAMP_KEY)
            if key not in frame.columns
        ]
        if missing:
            raise ValueError(
                f"Track frame is missing columns {missing}; use Track.from_dataframe "
                "to build a track without them"
            )
        self._frame = frame

    def __getitem__(self, i) -> Track:
        if isinstance(i, int):
            i = [i]
        new_frame = self._frame.iloc[i]
        return Track(new_frame)

    def __add__(self, other: Track) -> Track:
        new_frame = pd.concat([self._frame, other._frame])
        return Track(new_frame)

    def __len__(self):
        """Number of fixes."""
        return len(self._frame)

    def __str__(self):
        output_lines = [
            "osgridref Track object",
            f"frame: {self._frame}",
        ]
        return "\n".join(output_lines)

    def __repr__(self):
        return self.__str__()

    @property
    def index(self) -> pd.Index:
        """Get index to underlying GeoDataFrame."""
        return self._frame.index

    @property
    def crs(self) -> CRS:
        """Get Coordinate Reference System(CRS) to underlying GeoDataFrame."""
        return self._frame.crs

    @cached_property
    def fixes(self) -> List[GPSFix]:
        """
        Get all points in the track as GPSFix objects, in track order.

        Missing accuracy or timestamp values come back as None.
        """

        def _optional(value) -> Optional[float]:
            return None if pd.isna(value) else float(value)

        return [
            GPSFix(
                latitude=g.y,
                longitude=g.x,
                accuracy_m=_optional(accuracy),
                timestamp=_optional(timestamp),
            )
            for g, accuracy, timestamp in zip(
                self._frame.geometry,
                self._frame[DEFAULT_ACCURACY_KEY],
                self._frame[DEFAULT_TIMESTAMP_KEY],
            )
        ]

    @classmethod
    def from_dataframe(
        cls,
        dataframe: pd.DataFrame,
        lat_column: str = "latitude",
        lon_column: str = "longitude",
        accuracy_column: Optional[str] = DEFAULT_ACCURACY_KEY,
        timestamp_column: Optional[str] = DEFAULT_TIMESTAMP_KEY,
    ) -> Track:
        """
        Create a track from a pandas DataFrame with latitude/longitude columns.

        The DataFrame must contain WGS84 (EPSG:4326) latitude and longitude values. The
        accuracy and timestamp columns are optional; when a column is absent the values
        are recorded as missing.

        Args:
            dataframe: A pandas DataFrame of GPS fixes
            lat_column: The name of the column containing latitude values. Default is "latitude".
            lon_column: The name of the column containing longitude values. Default is "longitude".
            accuracy_column: The name of the column containing accuracy radii in meters. Default is "accuracy_m".
            timestamp_column: The name of the column containing fix timestamps. Default is "timestamp".

        Returns:
            A new Track instance

        Raises:
            ValueError: If the latitude or longitude column is missing
            InvalidCoordinateError: If any latitude or longitude is out of range

        Examples:
            >>> df = pd.DataFrame({
            ...     'lat': [51.5074, 51.5080],
            ...     'lon': [-0.1278, -0.1270],
            ... })
            >>> track = Track.from_dataframe(df, lat_column='lat', lon_column='lon')
        """
        if lat_column not in dataframe.columns or lon_column not in dataframe.columns:
            raise ValueError(
                f"Could not find columns {lat_column!r} and {lon_column!r} in the dataframe"
            )

        lat = dataframe[lat_column].to_numpy(dtype=float)
        lon = dataframe[lon_column].to_numpy(dtype=float)

        bad_lat = ~((lat >= -90) & (lat <= 90))
        bad_lon = ~((lon >= -180) & (lon <= 180))
        if bad_lat.any() or bad_lon.any():
            bad_rows = dataframe.index[bad_lat | bad_lon].values
            raise InvalidCoordinateError(
                f"found out of range latitude/longitude at index {bad_rows}"
            )

        def _column(name: Optional[str]) -> np.ndarray:
            if name is not None and name in dataframe.columns:
                return dataframe[name].to_numpy(dtype=float)
            return np.full(len(dataframe), np.nan)

        frame = GeoDataFrame(
            {
                DEFAULT_ACCURACY_KEY: _column(accuracy_column),
                DEFAULT_TIMESTAMP_KEY: _column(timestamp_column),
            },
            geometry=points_from_xy(lon, lat),
            index=dataframe.index,
            crs=LATLON_CRS,
        )

        return Track(frame)

    @classmethod
    def from_fixes(cls, fixes: Iterable[GPSFix]) -> Track:
        """
        Create a track from GPS fixes in the order they were recorded.

        Args:
            fixes: The GPS fixes of the trail

        Returns:
            A new Track indexed 0..n-1

        Examples:
            >>> track = Track.from_fixes([GPSFix(51.5074, -0.1278), GPSFix(51.5080, -0.1270)])
            >>> len(track)
            2
        """
        df = pd.DataFrame(
            [
                {
                    "latitude": f.latitude,
                    "longitude": f.longitude,
                    DEFAULT_ACCURACY_KEY: f.accuracy_m,
                    DEFAULT_TIMESTAMP_KEY: f.timestamp,
                }
                for f in fixes
            ],
            columns=["latitude", "longitude", DEFAULT_ACCURACY_KEY, DEFAULT_TIMESTAMP_KEY],
        )
        return Track.from_dataframe(df)

    def filter_accuracy(self, max_accuracy_m: float = DEFAULT_MAX_ACCURACY_M) -> Track:
        """
        Drop fixes whose reported accuracy is worse than a threshold.

        The first fix is always kept so that a trail has a starting point even if the
        receiver had not settled yet. Fixes with unknown accuracy are kept.

        Args:
            max_accuracy_m: The largest acceptable accuracy radius in meters. Default is 50.

        Returns:
            A new Track without the inaccurate fixes
        """
        accuracy = self._frame[DEFAULT_ACCURACY_KEY]
        keep = ~(accuracy > max_accuracy_m)
        if len(keep) > 0:
            keep.iloc[0] = True

        dropped = int((~keep).sum())
        if dropped:
            log.info(
                "dropped %d of %d fixes with accuracy worse than %s m",
                dropped,
                len(keep),
                max_accuracy_m,
            )

        return Track(self._frame[keep])

    def to_national_grid(
        self, datum_shift: bool = False, use_proj: bool = False
    ) -> GeoDataFrame:
        """
        Project every point of the track onto the National Grid.

        Args:
            datum_shift: If True, shift the points from WGS84 to OSGB36 before projecting. Default is False.
            use_proj: If True, let PROJ do the projection (and its own datum transformation when datum_shift is set) instead of the built-in series. Default is False.

        Returns:
            A GeoDataFrame in EPSG:27700 with the track index, easting and northing
            columns and Point geometries of (easting, northing)
        """
        lat = self._frame.geometry.y.to_numpy()
        lon = self._frame.geometry.x.to_numpy()

        if use_proj:
            easting, northing = pyproj_national_grid(lat, lon, datum_shift=datum_shift)
        else:
            if datum_shift:
                lat, lon = wgs84_to_osgb36(lat, lon)
            easting, northing = latlon_to_easting_northing(lat, lon)

        return GeoDataFrame(
            {
                DEFAULT_EASTING_KEY: easting,
                DEFAULT_NORTHING_KEY: northing,
            },
            geometry=points_from_xy(easting, northing),
            index=self._frame.index,
            crs=BNG_CRS,
        )

    def grid_references(self, datum_shift: bool = False) -> pd.Series:
        """
        Get the grid reference of every fix in the track.

        Args:
            datum_shift: If True, shift the points from WGS84 to OSGB36 before projecting. Default is False.

        Returns:
            A pandas Series aligned with the track index holding "XY eeee nnnn" strings,
            or None for fixes outside the National Grid
        """
        frame = self.to_national_grid(datum_shift=datum_shift)

        def _encode(easting: float, northing: float) -> Optional[str]:
            reference = encode(PlanarGridCoordinate(easting, northing))
            return None if reference is None else reference.to_string()

        references = [
            _encode(e, n)
            for e, n in zip(frame[DEFAULT_EASTING_KEY], frame[DEFAULT_NORTHING_KEY])
        ]
        return pd.Series(
            references,
            index=self._frame.index,
            dtype=object,
            name=DEFAULT_GRID_REFERENCE_KEY,
        )

    def length_m(self, datum_shift: bool = False) -> float:
        """
        Get the walked length of the track in meters, measured on the National Grid.

        Args:
            datum_shift: If True, shift the points from WGS84 to OSGB36 before projecting. Default is False.

        Returns:
            The summed distance between consecutive fixes in track order; 0 for tracks
            with fewer than two points
        """
        if len(self) < 2:
            return 0.0

        frame = self.to_national_grid(datum_shift=datum_shift)
        points = [
            PlanarGridCoordinate(e, n)
            for e, n in zip(frame[DEFAULT_EASTING_KEY], frame[DEFAULT_NORTHING_KEY])
        ]

        return sum(
            (coord_to_coord_dist(a, b) for a, b in zip(points, points[1:])), 0.0
        )
