from osgridref.convert import (
    convert_to_grid_reference,
    fix_to_grid_reference,
    grid_reference_to_lat_lon,
    to_national_grid,
)

__all__ = [
    "convert_to_grid_reference",
    "fix_to_grid_reference",
    "grid_reference_to_lat_lon",
    "to_national_grid",
]
