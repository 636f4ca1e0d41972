"""
Tests for the Gradio app calculation callback.
"""

import unittest

import pandas as pd
import plotly.graph_objects as go

from gradio_app import FAMILIES, change_unit, compute_results
from headloss.fluid_properties import CUSTOM_FLUID
from headloss.units import QuantityFamily, UnitSystem, default_units


class TestComputeResults(unittest.TestCase):

    def test_si_calculation(self):
        summary, results, fig, profile = compute_results(
            'SI',
            100.0, 'm',
            50.0, 'mm',
            0.045, 'mm',
            10.0, 'L/s',
            'water_20c',
            1.004, 'cSt',
            998.2, 'kg/m³',
        )
        self.assertIn('Turbulent', summary)
        self.assertIsInstance(results, pd.DataFrame)
        self.assertIsInstance(fig, go.Figure)
        self.assertEqual(len(profile), 101)

    def test_imperial_calculation(self):
        _, results, _, profile = compute_results(
            'Imperial',
            328.0, 'ft',
            2.0, 'in',
            0.0018, 'in',
            160.0, 'GPM',
            'water_20c',
            1.004, 'cSt',
            62.3, 'lb/ft³',
        )
        self.assertIn('Head Loss (ft)', list(results['Quantity']))
        self.assertIn('Distance (ft)', profile.columns)

    def test_missing_inputs(self):
        summary, results, fig, _ = compute_results(
            'SI',
            None, 'm',
            50.0, 'mm',
            0.045, 'mm',
            10.0, 'L/s',
            'water_20c',
            1.004, 'cSt',
            998.2, 'kg/m³',
        )
        self.assertIn('greater than zero', summary)
        self.assertTrue(results.empty)
        self.assertIsNone(fig)

    def test_custom_fluid_without_properties(self):
        summary, results, fig, profile = compute_results(
            'SI',
            100.0, 'm',
            50.0, 'mm',
            0.045, 'mm',
            10.0, 'L/s',
            CUSTOM_FLUID,
            None, 'cSt',
            None, 'kg/m³',
        )
        self.assertIn('⚠️', summary)
        self.assertIn('density and kinematic viscosity', summary)
        self.assertTrue(results.empty)
        self.assertIsNone(fig)
        self.assertTrue(profile.empty)


class TestChangeUnit(unittest.TestCase):
    """Switching a field's unit keeps the physical quantity."""

    def test_length_metres_to_feet(self):
        self.assertEqual(change_unit(100.0, 'm', 'ft'), (328.084, 'ft'))

    def test_same_unit_is_untouched(self):
        self.assertEqual(change_unit(12.3456789, 'mm', 'mm'), (12.3456789, 'mm'))

    def test_empty_field_stays_empty(self):
        self.assertEqual(change_unit(None, 'm', 'ft'), (None, 'ft'))

    def test_system_switch_preserves_calculation(self):
        si_values = {
            QuantityFamily.LENGTH: 100.0,
            QuantityFamily.DIAMETER: 50.0,
            QuantityFamily.ROUGHNESS: 0.045,
            QuantityFamily.FLOW_RATE: 10.0,
            QuantityFamily.VISCOSITY: 1.0,
            QuantityFamily.DENSITY: 998.0,
        }
        si_units = default_units(UnitSystem.SI)
        imperial_units = default_units(UnitSystem.IMPERIAL)
        imperial_values = {
            family: change_unit(value, si_units[family], imperial_units[family])[0]
            for family, value in si_values.items()
        }
        self.assertEqual(imperial_values[QuantityFamily.LENGTH], 328.084)

        def run(system, values, units):
            args = [system.value]
            for family in FAMILIES:
                if family is QuantityFamily.VISCOSITY:
                    args.append(CUSTOM_FLUID)
                args.extend([values[family], units[family]])
            return compute_results(*args)[1]

        si_table = run(UnitSystem.SI, si_values, si_units)
        imperial_table = run(UnitSystem.IMPERIAL, imperial_values, imperial_units)
        si_re = si_table.set_index('Quantity').loc['Reynolds Number', 'Value']
        imperial_re = imperial_table.set_index('Quantity').loc['Reynolds Number', 'Value']
        self.assertAlmostEqual(
            float(imperial_re.replace(',', '')), float(si_re.replace(',', '')), delta=5.0,
        )


if __name__ == '__main__':
    unittest.main()
