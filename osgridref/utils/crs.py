"""Coordinate Reference System (CRS) constants used throughout osgridref.

This module defines the standard CRS objects used for geographic transformations:
- LATLON_CRS: WGS84 geographic coordinates (EPSG:4326), as reported by device GPS
- OSGB36_LATLON_CRS: OSGB36 geographic coordinates on the Airy 1830 ellipsoid (EPSG:4277)
- BNG_CRS: OSGB36 / British National Grid projected coordinates (EPSG:27700)
"""

from pyproj import CRS

# WGS84 latitude/longitude coordinate system (EPSG:4326)
# Standard GPS coordinates in decimal degrees
# Range: latitude [-90, 90], longitude [-180, 180]
LATLON_CRS = CRS(4326)

# OSGB36 latitude/longitude coordinate system (EPSG:4277)
# The geographic base of the National Grid, referenced to the Airy 1830 ellipsoid
OSGB36_LATLON_CRS = CRS(4277)

# OSGB36 / British National Grid (EPSG:27700)
# Easting and northing in meters from the National Grid false origin
BNG_CRS = CRS(27700)
