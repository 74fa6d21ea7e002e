"""The National Grid 100 km square letter table.

Rows run from the southernmost band (northing 0 to 100 km) to the northernmost
(1200 to 1300 km); columns run west to east in 100 km steps of easting. The letters are
looked up, never computed.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

GRID_SQUARES: Tuple[Tuple[str, ...], ...] = (
    ("SV", "SW", "SX", "SY", "SZ", "TV", "TW"),
    ("SQ", "SR", "SS", "ST", "SU", "TQ", "TR"),
    ("SL", "SM", "SN", "SO", "SP", "TL", "TM"),
    ("SF", "SG", "SH", "SJ", "SK", "TF", "TG"),
    ("SA", "SB", "SC", "SD", "SE", "TA", "TB"),
    ("NV", "NW", "NX", "NY", "NZ", "OV", "OW"),
    ("NQ", "NR", "NS", "NT", "NU", "OQ", "OR"),
    ("NL", "NM", "NN", "NO", "NP", "OL", "OM"),
    ("NF", "NG", "NH", "NJ", "NK", "OF", "OG"),
    ("NA", "NB", "NC", "ND", "NE", "OA", "OB"),
    ("HV", "HW", "HX", "HY", "HZ", "JV", "JW"),
    ("HQ", "HR", "HS", "HT", "HU", "JQ", "JR"),
    ("HL", "HM", "HN", "HO", "HP", "JL", "JM"),
)

SQUARE_SIZE_M = 100000
GRID_ROWS = len(GRID_SQUARES)
GRID_COLUMNS = len(GRID_SQUARES[0])

# square letters -> (northing index, easting index)
_SQUARE_INDEX: Dict[str, Tuple[int, int]] = {
    square: (n_index, e_index)
    for n_index, row in enumerate(GRID_SQUARES)
    for e_index, square in enumerate(row)
}


def square_at(n_index: int, e_index: int) -> Optional[str]:
    """
    Get the two-letter code of a 100 km square.

    Args:
        n_index: The northing band, 0 for the southernmost
        e_index: The easting band, 0 for the westernmost

    Returns:
        The square letters, or None if the indices fall outside the table

    Examples:
        >>> square_at(1, 5)
        'TQ'
        >>> square_at(13, 0) is None
        True
    """
    if not (0 <= n_index < GRID_ROWS and 0 <= e_index < GRID_COLUMNS):
        return None
    return GRID_SQUARES[n_index][e_index]


def square_index(square: str) -> Optional[Tuple[int, int]]:
    """
    Get the table position of a 100 km square.

    Args:
        square: The two-letter square code, in any case

    Returns:
        A tuple of (northing index, easting index), or None for an unknown square
    """
    return _SQUARE_INDEX.get(square.upper())
