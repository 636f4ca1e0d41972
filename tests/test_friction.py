"""
Unit tests for flow regime classification and friction factor correlations.
"""

import math
import unittest

from headloss.friction import (
    FlowRegime,
    classify_regime,
    friction_factor,
    laminar_friction_factor,
    swamee_jain_friction_factor,
)


class TestClassifyRegime(unittest.TestCase):

    def test_boundaries_are_transitional(self):
        self.assertEqual(classify_regime(2300.0), FlowRegime.TRANSITIONAL)
        self.assertEqual(classify_regime(4000.0), FlowRegime.TRANSITIONAL)

    def test_just_outside_boundaries(self):
        self.assertEqual(classify_regime(2299.999), FlowRegime.LAMINAR)
        self.assertEqual(classify_regime(4000.001), FlowRegime.TURBULENT)

    def test_typical_values(self):
        self.assertEqual(classify_regime(100), FlowRegime.LAMINAR)
        self.assertEqual(classify_regime(3000), FlowRegime.TRANSITIONAL)
        self.assertEqual(classify_regime(1e6), FlowRegime.TURBULENT)


class TestFrictionFactor(unittest.TestCase):

    def test_laminar(self):
        f, regime = friction_factor(1000.0, 0.000045, 0.05)
        self.assertEqual(regime, FlowRegime.LAMINAR)
        self.assertEqual(f, 64 / 1000.0)
        self.assertEqual(laminar_friction_factor(1000.0), 0.064)

    def test_boundary_uses_swamee_jain(self):
        for re in (2300.0, 4000.0):
            f, regime = friction_factor(re, 0.000045, 0.05)
            self.assertEqual(regime, FlowRegime.TRANSITIONAL)
            self.assertEqual(f, swamee_jain_friction_factor(re, 0.000045, 0.05))

    def test_transitional_matches_turbulent_formula(self):
        re = 3500.0
        f_transitional, regime = friction_factor(re, 0.00015, 0.1)
        self.assertEqual(regime, FlowRegime.TRANSITIONAL)
        self.assertEqual(f_transitional, swamee_jain_friction_factor(re, 0.00015, 0.1))

    def test_turbulent(self):
        f, regime = friction_factor(1e5, 0.000045, 0.05)
        self.assertEqual(regime, FlowRegime.TURBULENT)
        expected = 0.25 / math.log10(0.000045 / (3.7 * 0.05) + 5.74 / 1e5 ** 0.9) ** 2
        self.assertAlmostEqual(f, expected, places=12)

    def test_smooth_pipe(self):
        f = swamee_jain_friction_factor(1e5, 0.0, 0.05)
        # Smooth-pipe value at Re = 1e5 is about 0.018
        self.assertAlmostEqual(f, 0.018, delta=0.001)

    def test_rougher_pipe_has_higher_friction(self):
        smooth = swamee_jain_friction_factor(1e5, 0.0000015, 0.05)
        rough = swamee_jain_friction_factor(1e5, 0.0009, 0.05)
        self.assertGreater(rough, smooth)


if __name__ == '__main__':
    unittest.main()
