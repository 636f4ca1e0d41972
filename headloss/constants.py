"""
Physical constants and calculation settings for the head loss engine.
"""

# Standard gravity used throughout (m/s²)
GRAVITY = 9.81

# Reynolds number limits of the transitional band (both inclusive)
LAMINAR_LIMIT = 2300.0
TURBULENT_LIMIT = 4000.0

# Pressure profile sampling: 100 segments -> 101 points
PROFILE_STEPS = 100
PROFILE_DECIMALS = 2

PASCALS_PER_BAR = 100000.0
