from unittest import TestCase

from osgridref.constructs.coordinate import PlanarGridCoordinate
from osgridref.constructs.grid_reference import GridReference
from osgridref.convert import grid_reference_to_lat_lon
from osgridref.encoding.grid_encoder import decode, encode
from osgridref.encoding.grid_letters import GRID_SQUARES, square_at, square_index
from osgridref.utils.exceptions import GridReferenceError


class TestGridLetters(TestCase):
    def test_table_shape(self):
        self.assertEqual(len(GRID_SQUARES), 13)
        for row in GRID_SQUARES:
            self.assertEqual(len(row), 7)

    def test_table_corners(self):
        self.assertEqual(GRID_SQUARES[0][0], "SV")
        self.assertEqual(GRID_SQUARES[0][6], "TW")
        self.assertEqual(GRID_SQUARES[12][0], "HL")
        self.assertEqual(GRID_SQUARES[12][4], "HP")
        self.assertEqual(GRID_SQUARES[12][6], "JM")

    def test_squares_are_unique(self):
        squares = [s for row in GRID_SQUARES for s in row]
        self.assertEqual(len(squares), len(set(squares)))

    def test_square_at(self):
        self.assertEqual(square_at(1, 5), "TQ")
        self.assertEqual(square_at(5, 5), "OV")
        self.assertEqual(square_at(10, 6), "JW")
        self.assertIsNone(square_at(13, 0))
        self.assertIsNone(square_at(0, 7))
        self.assertIsNone(square_at(-1, 0))

    def test_square_index(self):
        self.assertEqual(square_index("TQ"), (1, 5))
        self.assertEqual(square_index("hp"), (12, 4))
        self.assertIsNone(square_index("ZZ"))


class TestEncode(TestCase):
    def test_os_worked_example(self):
        reference = encode(PlanarGridCoordinate(651409.903, 313177.270))

        self.assertEqual(reference, GridReference("TG", 5140, 1317))
        self.assertEqual(str(reference), "TG 5140 1317")

    def test_offsets_are_zero_padded(self):
        reference = encode(PlanarGridCoordinate(500050.0, 100990.0))

        self.assertEqual(str(reference), "TQ 0005 0099")

    def test_truncates_rather_than_rounds(self):
        """Test that a remainder of 99999 m gives offset 9999, not 0000"""
        reference = encode(PlanarGridCoordinate(599999.0, 199999.0))

        self.assertEqual(str(reference), "TQ 9999 9999")

    def test_points_in_same_ten_meter_cell_share_reference(self):
        a = encode(PlanarGridCoordinate(530000.0, 180000.0))
        b = encode(PlanarGridCoordinate(530009.99, 180009.99))
        c = encode(PlanarGridCoordinate(530010.0, 180000.0))

        self.assertEqual(a, b)
        self.assertNotEqual(a, c)

    def test_easting_upper_bound_is_exclusive(self):
        self.assertIsNone(encode(PlanarGridCoordinate(700000.0, 500000.0)))

        reference = encode(PlanarGridCoordinate(699999.999, 500000.0))
        self.assertEqual(str(reference), "OW 9999 0000")

    def test_northing_upper_bound_is_exclusive(self):
        self.assertIsNone(encode(PlanarGridCoordinate(450000.0, 1300000.0)))

        reference = encode(PlanarGridCoordinate(450000.0, 1299999.99))
        self.assertEqual(str(reference), "HP 5000 9999")

    def test_lower_bounds_are_inclusive(self):
        self.assertEqual(str(encode(PlanarGridCoordinate(0.0, 0.0))), "SV 0000 0000")
        self.assertIsNone(encode(PlanarGridCoordinate(-0.001, 0.0)))
        self.assertIsNone(encode(PlanarGridCoordinate(0.0, -0.001)))

    def test_true_origin_is_not_encodable(self):
        self.assertIsNone(encode(PlanarGridCoordinate(400000.0, -100000.0)))

    def test_nan_is_not_encodable(self):
        self.assertIsNone(encode(PlanarGridCoordinate(float("nan"), 200000.0)))
        self.assertIsNone(encode(PlanarGridCoordinate(200000.0, float("nan"))))


class TestDecode(TestCase):
    def test_south_west_corner(self):
        planar = decode(GridReference("TG", 5140, 1317))

        self.assertEqual(planar, PlanarGridCoordinate(651400.0, 313170.0))

    def test_centre(self):
        planar = decode(GridReference("TG", 5140, 1317), centre=True)

        self.assertEqual(planar, PlanarGridCoordinate(651405.0, 313175.0))

    def test_decode_then_encode(self):
        reference = GridReference("NT", 2573, 7371)

        self.assertEqual(encode(decode(reference)), reference)
        self.assertEqual(encode(decode(reference, centre=True)), reference)

    def test_unknown_square_raises(self):
        with self.assertRaises(GridReferenceError):
            decode(GridReference("ZZ", 0, 0))

    def test_offset_out_of_range_raises(self):
        """Test that an offset which would spill into a neighbouring square is rejected"""
        with self.assertRaises(GridReferenceError):
            decode(GridReference("TQ", 12345, 0))
        with self.assertRaises(GridReferenceError):
            decode(GridReference("TQ", 0, -1))
        with self.assertRaises(GridReferenceError):
            decode(GridReference("TQ", 0, 10000))

        # the largest offsets still decode inside the square
        planar = decode(GridReference("TQ", 9999, 9999))
        self.assertEqual(encode(planar), GridReference("TQ", 9999, 9999))

    def test_reverse_conversion_rejects_bad_offsets(self):
        with self.assertRaises(GridReferenceError):
            grid_reference_to_lat_lon(GridReference("TQ", 12345, -1))


class TestGridReferenceParsing(TestCase):
    def test_stored_form(self):
        self.assertEqual(
            GridReference.from_string("TQ 3004 8038"), GridReference("TQ", 3004, 8038)
        )

    def test_compact_lower_case_form(self):
        self.assertEqual(
            GridReference.from_string("  tq30048038 "), GridReference("TQ", 3004, 8038)
        )

    def test_lower_precision(self):
        self.assertEqual(
            GridReference.from_string("SU 1 2"), GridReference("SU", 1000, 2000)
        )
        self.assertEqual(GridReference.from_string("NT"), GridReference("NT", 0, 0))

    def test_one_meter_reference_is_truncated(self):
        self.assertEqual(
            GridReference.from_string("TQ 30049 80381"),
            GridReference("TQ", 3004, 8038),
        )

    def test_to_string_round_trip(self):
        text = "HU 0450 0009"

        self.assertEqual(GridReference.from_string(text).to_string(), text)

    def test_invalid_references(self):
        for text in ["", "T", "ZZ 1234 5678", "TQ 123 45", "TQ12345", "TQ 1234 56a8",
                     "TQ 123456 123456", "TQ 1 2 3"]:
            with self.subTest(text=text):
                with self.assertRaises(GridReferenceError):
                    GridReference.from_string(text)

    def test_error_is_value_error(self):
        with self.assertRaises(ValueError):
            GridReference.from_string("not a reference")
