"""
Lookup module for pipe wall materials.
Absolute roughness values are typical new-pipe figures in millimetres.
"""

PIPE_MATERIALS = {
    'commercial_steel': {'name': 'Commercial or Welded Steel', 'roughness': 0.045},
    'stainless_steel': {'name': 'Stainless Steel', 'roughness': 0.002},
    'cast_iron': {'name': 'Cast Iron (new)', 'roughness': 0.26},
    'galvanized_iron': {'name': 'Galvanized Iron', 'roughness': 0.15},
    'pvc': {'name': 'PVC, Plastic, Glass', 'roughness': 0.0015},
    'copper': {'name': 'Copper or Brass', 'roughness': 0.0015},
    'concrete': {'name': 'Concrete', 'roughness': 0.9},
}

DEFAULT_MATERIAL = 'commercial_steel'


def get_material_options():
    """Return list of available pipe materials."""
    return list(PIPE_MATERIALS.keys())


def get_material_roughness(material):
    """
    Return the absolute roughness in mm for a material key.
    """
    if material not in PIPE_MATERIALS:
        raise ValueError(f"Unknown pipe material: {material}")
    return PIPE_MATERIALS[material]['roughness']


def get_material_name(material):
    """Return the display name for a material key."""
    return PIPE_MATERIALS.get(material, {}).get('name', material)
