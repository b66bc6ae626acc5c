"""
Unit tests for precision models.
"""

import math
import unittest

import numpy as np

from dwgwriter.geometry.precision import PrecisionModel, PrecisionType


class TestPrecisionModel(unittest.TestCase):

    def test_floating_is_identity(self):
        pm = PrecisionModel()
        self.assertIs(pm.precision_type, PrecisionType.FLOATING)
        self.assertTrue(pm.is_floating)
        self.assertEqual(pm.make_precise(1.23456789012345), 1.23456789012345)
        self.assertEqual(pm.maximum_significant_digits, 16)

    def test_fixed_rounds_to_two_decimals(self):
        pm = PrecisionModel.fixed(100)
        self.assertEqual(pm.make_precise(1.23456), 1.23)
        self.assertEqual(pm.make_precise(2.34567), 2.35)
        self.assertFalse(pm.is_floating)

    def test_fixed_rounds_half_up(self):
        pm = PrecisionModel.fixed(1)
        self.assertEqual(pm.make_precise(2.5), 3.0)
        self.assertEqual(pm.make_precise(-2.5), -2.0)

    def test_from_decimals_matches_fixed_scale(self):
        self.assertEqual(PrecisionModel.from_decimals(2), PrecisionModel.fixed(100))
        self.assertEqual(hash(PrecisionModel.from_decimals(2)), hash(PrecisionModel.fixed(100)))

    def test_from_grid_size_below_one(self):
        pm = PrecisionModel.from_grid_size(0.5)
        self.assertEqual(pm.scale, 2.0)
        self.assertEqual(pm.make_precise(1.3), 1.5)

    def test_large_grid_snaps_to_multiples(self):
        pm = PrecisionModel.from_grid_size(100)
        self.assertEqual(pm.grid_size, 100.0)
        self.assertEqual(pm.make_precise(1234.0), 1200.0)
        self.assertEqual(pm.make_precise(1250.0), 1300.0)

    def test_fractional_grid_is_kept_exactly(self):
        pm = PrecisionModel.from_grid_size(2.5)
        self.assertEqual(pm.grid_size, 2.5)
        self.assertEqual(pm.make_precise(5.0), 5.0)
        self.assertEqual(pm.make_precise(6.0), 5.0)
        self.assertEqual(pm.make_precise(6.3), 7.5)

    def test_fixed_scale_below_one_is_not_rounded(self):
        pm = PrecisionModel.fixed(0.3)
        self.assertAlmostEqual(pm.grid_size, 10.0 / 3.0)
        self.assertAlmostEqual(pm.make_precise(10.0), 10.0)
        self.assertAlmostEqual(pm.make_precise(5.1), 20.0 / 3.0)

    def test_huge_values_pass_through(self):
        pm = PrecisionModel.from_decimals(10)
        self.assertEqual(pm.make_precise(1e300), 1e300)
        self.assertEqual(pm.make_precise(-1e300), -1e300)
        self.assertEqual(pm.make_precise_coordinate((1e300, 1.23456789012)),
                         (1e300, 1.2345678901))

    def test_floating_single_rounds_to_float32(self):
        pm = PrecisionModel.floating_single()
        self.assertEqual(pm.make_precise(0.1), float(np.float32(0.1)))
        self.assertNotEqual(pm.make_precise(0.1), 0.1)
        self.assertEqual(pm.maximum_significant_digits, 6)

    def test_nan_passes_through(self):
        for pm in (PrecisionModel(), PrecisionModel.floating_single(), PrecisionModel.fixed(10)):
            self.assertTrue(math.isnan(pm.make_precise(float("nan"))))

    def test_make_precise_coordinate(self):
        pm = PrecisionModel.fixed(10)
        self.assertEqual(pm.make_precise_coordinate((1.04, 2.06, 3.0)), (1.0, 2.1, 3.0))

    def test_fixed_significant_digits(self):
        self.assertEqual(PrecisionModel.fixed(100).maximum_significant_digits, 3)

    def test_fixed_requires_valid_scale(self):
        with self.assertRaises(ValueError):
            PrecisionModel(PrecisionType.FIXED)
        with self.assertRaises(ValueError):
            PrecisionModel.fixed(0)
        with self.assertRaises(ValueError):
            PrecisionModel.from_grid_size(-1)

    def test_type_accepts_string_value(self):
        pm = PrecisionModel("fixed", 10)
        self.assertEqual(pm, PrecisionModel.fixed(10))
        self.assertNotEqual(pm, PrecisionModel())


if __name__ == '__main__':
    unittest.main()
