import re
from unittest import TestCase

from osgridref.constructs.coordinate import PlanarGridCoordinate
from osgridref.constructs.gps_fix import GPSFix
from osgridref.convert import (
    convert_to_grid_reference,
    fix_to_grid_reference,
    grid_reference_to_lat_lon,
    to_national_grid,
)
from osgridref.utils.exceptions import InvalidCoordinateError
from osgridref.utils.geo import coord_to_coord_dist, pyproj_national_grid

GRID_REFERENCE_FORMAT = re.compile(r"^[A-Z]{2} \d{4} \d{4}$")

LONDON = (51.5074, -0.1278)
PARIS = (48.8566, 2.3522)


class TestConvertToGridReference(TestCase):
    def test_london_is_in_tq(self):
        reference = convert_to_grid_reference(*LONDON)

        self.assertIsNotNone(reference)
        self.assertRegex(reference, GRID_REFERENCE_FORMAT)

        square, easting, northing = reference.split(" ")
        self.assertEqual(square, "TQ")
        self.assertTrue(2800 <= int(easting) <= 3200, reference)
        self.assertTrue(7800 <= int(northing) <= 8200, reference)

    def test_paris_is_out_of_coverage(self):
        self.assertIsNone(convert_to_grid_reference(*PARIS))

    def test_true_origin_is_out_of_coverage(self):
        planar = to_national_grid(49.0, -2.0)

        self.assertAlmostEqual(planar.easting, 400000.0, places=6)
        self.assertAlmostEqual(planar.northing, -100000.0, places=6)
        self.assertIsNone(convert_to_grid_reference(49.0, -2.0))

    def test_far_away_points_are_out_of_coverage(self):
        for lat, lon in [(40.7128, -74.0060), (-33.8688, 151.2093), (0.0, 0.0),
                         (90.0, 0.0), (-90.0, 180.0)]:
            with self.subTest(lat=lat, lon=lon):
                self.assertIsNone(convert_to_grid_reference(lat, lon))

    def test_os_worked_example(self):
        reference = convert_to_grid_reference(
            52 + 39 / 60 + 27.2531 / 3600, 1 + 43 / 60 + 4.5177 / 3600
        )

        self.assertEqual(reference, "TG 5140 1317")

    def test_deterministic(self):
        results = {convert_to_grid_reference(*LONDON) for _ in range(10)}

        self.assertEqual(len(results), 1)

    def test_invalid_degrees_raise(self):
        for lat, lon in [(90.0001, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0),
                         (float("nan"), 0.0), (0.0, float("inf"))]:
            with self.subTest(lat=lat, lon=lon):
                with self.assertRaises(InvalidCoordinateError):
                    convert_to_grid_reference(lat, lon)

    def test_invalid_degrees_error_is_value_error(self):
        with self.assertRaises(ValueError):
            convert_to_grid_reference(100.0, 0.0)

    def test_fix_conversion_ignores_accuracy(self):
        fix = GPSFix(*LONDON, accuracy_m=250.0, timestamp=1700000000000.0)

        self.assertEqual(fix_to_grid_reference(fix), convert_to_grid_reference(*LONDON))

    def test_fix_conversion_validates_position(self):
        with self.assertRaises(InvalidCoordinateError):
            fix_to_grid_reference(GPSFix(123.0, 0.0))

    def test_proj_projection_agrees_with_series(self):
        for shift in (False, True):
            series = to_national_grid(*LONDON, datum_shift=shift)
            proj = to_national_grid(*LONDON, datum_shift=shift, use_proj=True)

            self.assertLess(coord_to_coord_dist(series, proj), 10.0 if shift else 0.05)


class TestDatumShift(TestCase):
    def test_shift_moves_point_by_about_a_hundred_meters(self):
        plain = to_national_grid(*LONDON)
        shifted = to_national_grid(*LONDON, datum_shift=True)

        distance = coord_to_coord_dist(plain, shifted)
        self.assertTrue(50 < distance < 200, distance)

    def test_shifted_matches_proj(self):
        for lat, lon in [LONDON, (55.9533, -3.1883), (50.3755, -4.1427)]:
            shifted = to_national_grid(lat, lon, datum_shift=True)
            ref = PlanarGridCoordinate(*pyproj_national_grid(lat, lon, datum_shift=True))

            self.assertLess(coord_to_coord_dist(shifted, ref), 10.0)

    def test_shifted_reference_is_well_formed(self):
        reference = convert_to_grid_reference(*LONDON, datum_shift=True)

        self.assertRegex(reference, GRID_REFERENCE_FORMAT)
        self.assertTrue(reference.startswith("TQ"))


class TestGridReferenceToLatLon(TestCase):
    def test_round_trip_reproduces_reference(self):
        points = [LONDON, (50.0657, -5.7132), (53.4808, -2.2426), (57.1497, -2.0943),
                  (60.1546, -1.1493)]
        for datum_shift in (False, True):
            for lat, lon in points:
                with self.subTest(lat=lat, lon=lon, datum_shift=datum_shift):
                    reference = convert_to_grid_reference(lat, lon, datum_shift=datum_shift)
                    lat2, lon2 = grid_reference_to_lat_lon(reference, datum_shift=datum_shift)

                    self.assertEqual(
                        convert_to_grid_reference(lat2, lon2, datum_shift=datum_shift),
                        reference,
                    )

    def test_round_trip_is_within_resolution(self):
        reference = convert_to_grid_reference(*LONDON)
        lat, lon = grid_reference_to_lat_lon(reference)

        distance = coord_to_coord_dist(to_national_grid(*LONDON), to_national_grid(lat, lon))
        self.assertLess(distance, 15.0)

    def test_south_west_corner(self):
        lat, lon = grid_reference_to_lat_lon("TG 5140 1317", centre=False)
        planar = to_national_grid(lat, lon)

        self.assertAlmostEqual(planar.easting, 651400.0, delta=0.01)
        self.assertAlmostEqual(planar.northing, 313170.0, delta=0.01)
