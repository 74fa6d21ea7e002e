from __future__ import annotations

import re
from typing import NamedTuple

from osgridref.encoding.grid_letters import square_index
from osgridref.utils.exceptions import GridReferenceError

# offsets are counted in 10 m steps and written with this many digits
OFFSET_DIGITS = 4
OFFSET_RESOLUTION_M = 10

_GRID_REFERENCE_PATTERN = re.compile(r"^([A-Z]{2})\s*(\d*)\s*(\d*)$")


class GridReference(NamedTuple):
    """
    An Ordnance Survey grid reference at 10 meter resolution.

    A GridReference names a 100 km square and the south-west corner of a 10 m cell
    within it. Its string form, "XY eeee nnnn", is what field records store.

    Attributes:
        square: The two-letter 100 km square code, e.g. "TQ"
        easting_offset: The easting within the square in 10 m steps (0 to 9999)
        northing_offset: The northing within the square in 10 m steps (0 to 9999)

    Examples:
        >>> ref = GridReference("TQ", 3004, 8038)
        >>> str(ref)
        'TQ 3004 8038'
        >>> GridReference.from_string("tq30048038") == ref
        True
    """

    square: str
    easting_offset: int
    northing_offset: int

    def __str__(self):
        return self.to_string()

    def to_string(self) -> str:
        """Render as "XY eeee nnnn" with zero-padded offsets."""
        return (
            f"{self.square} "
            f"{self.easting_offset:0{OFFSET_DIGITS}d} "
            f"{self.northing_offset:0{OFFSET_DIGITS}d}"
        )

    @classmethod
    def from_string(cls, text: str) -> GridReference:
        """
        Parse a grid reference string.

        Accepts the stored "XY eeee nnnn" form as well as compact and lower precision
        forms. The digits are split into an easting half and a northing half; each half
        may be 0 to 5 digits long and is read as the leading digits of a 5 digit meter
        offset. One meter references are truncated to 10 m.

        Args:
            text: The grid reference, e.g. "TQ 3004 8038", "TQ30048038", "SU 1 2", "NT"

        Returns:
            A new GridReference pointing at the south-west corner of the referenced cell

        Raises:
            GridReferenceError: If the text is not a grid reference or names an unknown square

        Examples:
            >>> GridReference.from_string("TQ 30 80")
            GridReference(square='TQ', easting_offset=3000, northing_offset=8000)
            >>> GridReference.from_string("TQ 30049 80381")
            GridReference(square='TQ', easting_offset=3004, northing_offset=8038)
        """
        match = _GRID_REFERENCE_PATTERN.match(text.strip().upper())
        if match is None:
            raise GridReferenceError(f"{text!r} is not a grid reference")

        square, first, second = match.groups()
        if square_index(square) is None:
            raise GridReferenceError(f"{square} is not a National Grid square")

        if second:
            easting_digits, northing_digits = first, second
        else:
            half = len(first) // 2
            easting_digits, northing_digits = first[:half], first[half:]

        if len(easting_digits) != len(northing_digits) or len(easting_digits) > 5:
            raise GridReferenceError(
                f"{text!r} must have an equal number of easting and northing digits, "
                "at most 5 each"
            )

        def _offset(digits: str) -> int:
            meters = int(digits.ljust(5, "0"))
            return meters // OFFSET_RESOLUTION_M

        return cls(square, _offset(easting_digits), _offset(northing_digits))
