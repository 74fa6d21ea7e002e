"""
# Grid Reference Example

An example of turning GPS fixes from a detecting session into Ordnance Survey grid references
"""


def main():
    """
    First, we convert a single GPS fix.
    A device reports latitude and longitude in WGS84 decimal degrees; the grid reference is returned as a string,
    ready to be stored on a find record:
    """

    from osgridref import convert_to_grid_reference

    print(convert_to_grid_reference(52.6309, 1.2974))

    """
    Notice that nothing is raised for a fix taken outside Great Britain.
    The grid reference is an optional field, so the conversion just gives back None and the field can be left blank:
    """

    print(convert_to_grid_reference(48.8566, 2.3522))

    """
    By default the GPS degrees are projected as if they were already OSGB36 degrees.
    That is quick and matches references recorded earlier, but it is roughly a hundred meters off a rigorous conversion.
    Passing `datum_shift=True` applies the Ordnance Survey Helmert transformation first:
    """

    print(convert_to_grid_reference(52.6309, 1.2974, datum_shift=True))

    """
    A hand-entered grid reference can be turned back into a latitude and longitude, e.g. to place it on a map.
    The centre of the referenced 10 m cell is returned:
    """

    from osgridref import grid_reference_to_lat_lon

    print(grid_reference_to_lat_lon("TG 2290 0879"))

    """
    Finally, a whole GPS trail can be handled at once.
    We drop the fixes the receiver reported as poor (worse than 50 m, keeping the first fix) and then look up a
    grid reference for each remaining point:
    """

    from osgridref.constructs.gps_fix import GPSFix
    from osgridref.constructs.track import Track

    track = Track.from_fixes(
        [
            GPSFix(52.6309, 1.2974, accuracy_m=12.0),
            GPSFix(52.6312, 1.2979, accuracy_m=75.0),
            GPSFix(52.6315, 1.2984, accuracy_m=9.0),
        ]
    )
    track = track.filter_accuracy()

    print(track.grid_references())
    print(f"walked {track.length_m():.0f} m")


if __name__ == "__main__":
    main()
