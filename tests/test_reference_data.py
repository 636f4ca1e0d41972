"""
Unit tests for the fluid and pipe material lookup tables.
"""

import unittest

from headloss.fluid_properties import (
    CUSTOM_FLUID,
    FLUID_PROPERTIES,
    get_fluid_name,
    get_fluid_options,
    get_fluid_properties,
)
from headloss.pipe_materials import (
    DEFAULT_MATERIAL,
    get_material_name,
    get_material_options,
    get_material_roughness,
)


class TestFluidProperties(unittest.TestCase):

    def test_options(self):
        options = get_fluid_options()
        self.assertEqual(options[0], 'water_20c')
        self.assertNotIn(CUSTOM_FLUID, options)

    def test_properties_are_positive(self):
        for key in get_fluid_options():
            density, viscosity = get_fluid_properties(key)
            self.assertGreater(density, 0)
            self.assertGreater(viscosity, 0)

    def test_water(self):
        self.assertEqual(get_fluid_properties('water_20c'), (998.2, 1.004))

    def test_unknown_fluid(self):
        with self.assertRaises(ValueError):
            get_fluid_properties('unobtainium')

    def test_names(self):
        self.assertEqual(get_fluid_name('glycol_30'), FLUID_PROPERTIES['glycol_30']['name'])
        self.assertEqual(get_fluid_name(CUSTOM_FLUID), 'Custom Fluid')
        self.assertEqual(get_fluid_name('unknown'), 'unknown')


class TestPipeMaterials(unittest.TestCase):

    def test_default_material(self):
        self.assertIn(DEFAULT_MATERIAL, get_material_options())
        self.assertEqual(get_material_roughness(DEFAULT_MATERIAL), 0.045)

    def test_roughness_values(self):
        self.assertEqual(get_material_roughness('concrete'), 0.9)
        self.assertEqual(get_material_roughness('pvc'), 0.0015)
        for material in get_material_options():
            self.assertGreaterEqual(get_material_roughness(material), 0)

    def test_unknown_material(self):
        with self.assertRaises(ValueError):
            get_material_roughness('bamboo')

    def test_names(self):
        self.assertEqual(get_material_name('cast_iron'), 'Cast Iron (new)')
        self.assertEqual(get_material_name('bamboo'), 'bamboo')


if __name__ == '__main__':
    unittest.main()
