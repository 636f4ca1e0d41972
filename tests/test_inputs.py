"""
Unit tests for translating user inputs into SI value objects.
"""

import unittest

from headloss.calculator import compute
from headloss.inputs import fluid_spec_from_inputs, pipe_spec_from_inputs, resolve_fluid, units_for
from headloss.units import QuantityFamily, UnitSystem


class TestUnitsFor(unittest.TestCase):

    def test_defaults(self):
        units = units_for(UnitSystem.IMPERIAL)
        self.assertEqual(units[QuantityFamily.FLOW_RATE], 'GPM')
        self.assertEqual(len(units), len(QuantityFamily))

    def test_override(self):
        units = units_for(UnitSystem.SI, {QuantityFamily.LENGTH: 'cm'})
        self.assertEqual(units[QuantityFamily.LENGTH], 'cm')
        self.assertEqual(units[QuantityFamily.DIAMETER], 'mm')

    def test_override_not_in_system(self):
        with self.assertRaises(ValueError):
            units_for(UnitSystem.SI, {QuantityFamily.DIAMETER: 'in'})
        with self.assertRaises(ValueError):
            units_for(UnitSystem.IMPERIAL, {QuantityFamily.VISCOSITY: 'm²/s'})


class TestSpecsFromInputs(unittest.TestCase):

    def test_si_defaults(self):
        units = units_for(UnitSystem.SI)
        pipe = pipe_spec_from_inputs(100, 50, 0.045, units)
        self.assertAlmostEqual(pipe.length, 100.0)
        self.assertAlmostEqual(pipe.diameter, 0.05, places=12)
        self.assertAlmostEqual(pipe.roughness, 0.000045, places=12)

        fluid = fluid_spec_from_inputs(10, 1.0, 998, units)
        self.assertAlmostEqual(fluid.flow_rate, 0.01, places=12)
        self.assertAlmostEqual(fluid.kinematic_viscosity, 1e-6, places=15)
        self.assertEqual(fluid.density, 998)

    def test_imperial_defaults(self):
        units = units_for(UnitSystem.IMPERIAL)
        pipe = pipe_spec_from_inputs(328.084, 2, 0.0018, units)
        self.assertAlmostEqual(pipe.length, 100.0, places=4)
        self.assertAlmostEqual(pipe.diameter, 0.0508, places=12)
        self.assertAlmostEqual(pipe.roughness, 0.00004572, places=12)

        fluid = fluid_spec_from_inputs(100, 1.0, 62.4, units)
        self.assertAlmostEqual(fluid.flow_rate, 0.00630902, places=10)
        self.assertAlmostEqual(fluid.density, 999.5544, places=4)

    def test_same_physics_in_either_system(self):
        si_units = units_for(UnitSystem.SI)
        si = compute(
            pipe_spec_from_inputs(100, 50.8, 0.0254, si_units),
            fluid_spec_from_inputs(5, 1.0, 998, si_units),
        )
        imp_units = units_for(UnitSystem.IMPERIAL)
        imp = compute(
            pipe_spec_from_inputs(328.0839895, 2, 0.001, imp_units),
            fluid_spec_from_inputs(5 / 0.0630902, 1.0, 998 / 16.0185, imp_units),
        )
        self.assertAlmostEqual(si.head_loss, imp.head_loss, places=4)


class TestResolveFluid(unittest.TestCase):

    def setUp(self):
        self.units = units_for(UnitSystem.SI)

    def test_named_fluid(self):
        fluid = resolve_fluid('water_20c', 10, self.units)
        self.assertAlmostEqual(fluid.flow_rate, 0.01, places=12)
        self.assertAlmostEqual(fluid.density, 998.2)
        self.assertAlmostEqual(fluid.kinematic_viscosity, 1.004e-6, places=15)

    def test_named_fluid_ignores_given_properties(self):
        fluid = resolve_fluid('water_20c', 10, self.units, kinematic_viscosity=50.0, density=1.0)
        self.assertAlmostEqual(fluid.density, 998.2)

    def test_named_fluid_with_imperial_flow(self):
        fluid = resolve_fluid('water_20c', 100, units_for(UnitSystem.IMPERIAL))
        self.assertAlmostEqual(fluid.flow_rate, 0.00630902, places=10)
        self.assertAlmostEqual(fluid.density, 998.2)

    def test_custom_fluid(self):
        units = units_for(UnitSystem.SI, {QuantityFamily.VISCOSITY: 'm²/s'})
        fluid = resolve_fluid('custom', 10, units, kinematic_viscosity=2e-5, density=850)
        self.assertAlmostEqual(fluid.kinematic_viscosity, 2e-5, places=15)
        self.assertEqual(fluid.density, 850)

    def test_custom_fluid_matches_spec_from_inputs(self):
        units = units_for(UnitSystem.IMPERIAL)
        self.assertEqual(
            resolve_fluid('custom', 150, units, kinematic_viscosity=3.0, density=53.0),
            fluid_spec_from_inputs(150, 3.0, 53.0, units),
        )

    def test_custom_fluid_requires_properties(self):
        with self.assertRaises(ValueError):
            resolve_fluid('custom', 10, self.units, density=850)
        with self.assertRaises(ValueError):
            resolve_fluid('custom', 10, self.units, kinematic_viscosity=1.0)

    def test_unknown_fluid(self):
        with self.assertRaises(ValueError):
            resolve_fluid('mercury', 10, self.units)


if __name__ == '__main__':
    unittest.main()
