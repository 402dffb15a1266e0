"""
siquant.units.presets
=====================

The preset unit catalog.

Every derived preset is composed from the base ones with the unit algebra
(``*``, ``/``, ``**``, scaling and prefixes), so building this module is
itself an exercise of that algebra. The catalog is built once at import and
never changes afterwards.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping

from siquant.core.dimensions import LENGTH, MASS, TIME
from siquant.core.unit import Unit
from siquant.units.prefixes import centi, kilo, mega, milli

logger = logging.getLogger(__name__)

# Scalar
scalar     = Unit("", 1.0, {})
percentage = (0.01 * scalar).with_name("%")
permille   = (0.001 * scalar).with_name("‰")

# Length
m  = Unit("m", 1.0, {LENGTH: 1})
mm = milli(m)
cm = centi(m)
km = kilo(m)

# Area / volume
m2  = (m ** 2).with_name("m^2")
mm2 = (mm ** 2).with_name("mm^2")
m3  = (m ** 3).with_name("m^3")

# Mass
kg = Unit("kg", 1.0, {MASS: 1})
g  = (1e-3 * kg).with_name("g")
t  = (1e3 * kg).with_name("t")

# Time
s   = Unit("s", 1.0, {TIME: 1})
ms  = milli(s)
min = (60 * s).with_name("min")  # noqa: A001 - unit symbol
h   = (60 * min).with_name("h")

# Frequency
Hz = (scalar / s).with_name("Hz")

# Velocity / acceleration
m_s  = (m / s).with_name("m/s")
km_h = (km / h).with_name("km/h")
m_s2 = (m / s ** 2).with_name("m/s^2")

# Force
N  = (kg * m / s ** 2).with_name("N")
kN = kilo(N)

# Pressure
Pa  = (N / m2).with_name("Pa")
kPa = kilo(Pa)
MPa = mega(Pa)

# Spring constant
N_m  = (N / m).with_name("N/m")
N_mm = (N / mm).with_name("N/mm")


PRESETS: Mapping[str, Unit] = MappingProxyType({
    name: unit for name, unit in dict(globals()).items()
    if isinstance(unit, Unit)
})

logger.debug("Preset catalog initialised with %d units", len(PRESETS))

__all__ = ["PRESETS", *PRESETS]
