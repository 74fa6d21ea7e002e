"""Reference ellipsoids and National Grid projection constants.

Values follow the Ordnance Survey publication "A guide to coordinate systems in Great
Britain". They must match exactly for grid references to agree with ones already stored.
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np


class Ellipsoid(NamedTuple):
    """
    A reference ellipsoid defined by its semi-major and semi-minor axes.

    Attributes:
        a: The semi-major axis in meters
        b: The semi-minor axis in meters

    Examples:
        >>> from osgridref.projection.ellipsoid import AIRY_1830
        >>> eccentricity_squared = AIRY_1830.e2  # about 0.00667054
    """

    a: float
    b: float

    @property
    def e2(self) -> float:
        """Eccentricity squared."""
        return 1 - (self.b**2) / (self.a**2)

    @property
    def n(self) -> float:
        """The flattening ratio n used by the meridional arc series."""
        return (self.a - self.b) / (self.a + self.b)


# Airy 1830, the ellipsoid of OSGB36
AIRY_1830 = Ellipsoid(a=6377563.396, b=6356256.909)

# GRS80, the ellipsoid of WGS84 / ETRS89 as used by GPS
GRS80 = Ellipsoid(a=6378137.0, b=6356752.3141)

# National Grid scale factor on the central meridian
F0 = 0.9996012717

# National Grid true origin
LAT0 = np.radians(49.0)
LON0 = np.radians(-2.0)

# Northing and easting of the true origin, meters
N0 = -100000.0
E0 = 400000.0
