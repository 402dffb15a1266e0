# siquant/units/constants.py
"""Named physical and mathematical constants as quantities."""
from __future__ import annotations

import math

from siquant.core.quantity import Quantity
from siquant.units.presets import kg, m, m_s2, s

# Standard acceleration of gravity (exact by definition)
standard_gravity = Quantity(9.80665, m_s2)

# Newtonian constant of gravitation, CODATA 2018
gravitational_constant = Quantity(6.67430e-11, m ** 3 / (kg * s ** 2))

pi = Quantity(math.pi)
e = Quantity(math.e)

__all__ = ["standard_gravity", "gravitational_constant", "pi", "e"]
