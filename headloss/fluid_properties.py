"""
Reference fluid properties at typical operating conditions.
"""

CUSTOM_FLUID = 'custom'

# density in kg/m³, kinematic viscosity in cSt
FLUID_PROPERTIES = {
    'water_20c': {
        'name': 'Water (20°C)',
        'density': 998.2,
        'viscosity': 1.004,
    },
    'water_60c': {
        'name': 'Water (60°C)',
        'density': 983.2,
        'viscosity': 0.474,
    },
    'seawater': {
        'name': 'Seawater (20°C)',
        'density': 1025.0,
        'viscosity': 1.05,
    },
    'glycol_30': {
        'name': '30% Ethylene Glycol',
        'density': 1040.0,
        'viscosity': 2.2,
    },
    'glycol_50': {
        'name': '50% Ethylene Glycol',
        'density': 1070.0,
        'viscosity': 3.8,
    },
    'diesel': {
        'name': 'Diesel Fuel',
        'density': 832.0,
        'viscosity': 3.0,
    },
    'gasoline': {
        'name': 'Gasoline',
        'density': 745.0,
        'viscosity': 0.6,
    },
    'oil_sae30': {
        'name': 'SAE 30 Oil (40°C)',
        'density': 875.0,
        'viscosity': 100.0,
    },
}

def get_fluid_options():
    """Return list of available fluid types."""
    return list(FLUID_PROPERTIES.keys())

def get_fluid_properties(fluid_type):
    """Return density (kg/m³) and kinematic viscosity (cSt) for the specified fluid type."""
    if fluid_type not in FLUID_PROPERTIES:
        raise ValueError(f"Unknown fluid type: {fluid_type}")
    
    props = FLUID_PROPERTIES[fluid_type]
    return props['density'], props['viscosity']

def get_fluid_name(fluid_type):
    """Return the display name for a fluid type."""
    if fluid_type == CUSTOM_FLUID:
        return 'Custom Fluid'
    return FLUID_PROPERTIES.get(fluid_type, {}).get('name', fluid_type)
