from __future__ import annotations

import logging
import math
from typing import Optional

from osgridref.constructs.coordinate import PlanarGridCoordinate
from osgridref.constructs.grid_reference import (
    OFFSET_DIGITS,
    OFFSET_RESOLUTION_M,
    GridReference,
)
from osgridref.encoding.grid_letters import (
    GRID_COLUMNS,
    GRID_ROWS,
    SQUARE_SIZE_M,
    square_at,
    square_index,
)
from osgridref.utils.exceptions import GridReferenceError

log = logging.getLogger(__name__)

# extent covered by the letter table, meters; upper bounds are exclusive
MAX_EASTING = GRID_COLUMNS * SQUARE_SIZE_M
MAX_NORTHING = GRID_ROWS * SQUARE_SIZE_M

# offsets count 10 m cells within a square
MAX_OFFSET = 10**OFFSET_DIGITS


def encode(planar: PlanarGridCoordinate) -> Optional[GridReference]:
    """
    Encode a National Grid coordinate as a 10 meter grid reference.

    Offsets within the 100 km square are truncated to 10 m, not rounded, so every point
    inside a 10 m cell encodes to the cell's south-west corner.

    Args:
        planar: The easting/northing to encode

    Returns:
        The grid reference, or None if the point lies outside the letter table
        (easting outside [0, 700000) or northing outside [0, 1300000))

    Examples:
        >>> str(encode(PlanarGridCoordinate(651409.903, 313177.270)))
        'TG 5140 1317'
        >>> encode(PlanarGridCoordinate(700000.0, 500000.0)) is None
        True
    """
    easting, northing = planar

    # written so NaN falls outside
    if not (0 <= easting < MAX_EASTING and 0 <= northing < MAX_NORTHING):
        log.debug("%s is outside the National Grid coverage", planar)
        return None

    square = square_at(
        math.floor(northing / SQUARE_SIZE_M), math.floor(easting / SQUARE_SIZE_M)
    )
    if square is None:
        return None

    easting_offset = math.floor((easting % SQUARE_SIZE_M) / OFFSET_RESOLUTION_M)
    northing_offset = math.floor((northing % SQUARE_SIZE_M) / OFFSET_RESOLUTION_M)

    return GridReference(square, easting_offset, northing_offset)


def decode(reference: GridReference, centre: bool = False) -> PlanarGridCoordinate:
    """
    Get the National Grid coordinate a grid reference points at.

    Args:
        reference: The grid reference to decode
        centre: If True, return the centre of the 10 m cell instead of its south-west corner. Default is False.

    Returns:
        The easting/northing of the referenced cell corner (or centre)

    Raises:
        GridReferenceError: If the square is not in the letter table or an offset does
            not fit in its four digits

    Examples:
        >>> decode(GridReference("TG", 5140, 1317))
        PlanarGridCoordinate(easting=651400.0, northing=313170.0)
    """
    index = square_index(reference.square)
    if index is None:
        raise GridReferenceError(
            f"{reference.square} is not a National Grid square"
        )
    n_index, e_index = index

    for offset in (reference.easting_offset, reference.northing_offset):
        if not 0 <= offset < MAX_OFFSET:
            raise GridReferenceError(
                f"offset {offset} in {reference.square} is outside [0, {MAX_OFFSET})"
            )

    easting = float(
        e_index * SQUARE_SIZE_M + reference.easting_offset * OFFSET_RESOLUTION_M
    )
    northing = float(
        n_index * SQUARE_SIZE_M + reference.northing_offset * OFFSET_RESOLUTION_M
    )

    if centre:
        easting += OFFSET_RESOLUTION_M / 2
        northing += OFFSET_RESOLUTION_M / 2

    return PlanarGridCoordinate(easting, northing)
