# siquant/units/prefixes.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from siquant.core.unit import Unit


@dataclass(frozen=True, slots=True)
class Prefix:
    """A decimal unit prefix. Calling it scales a unit: ``kilo(N)`` -> kN."""

    name: str
    symbol: str
    factor: float

    def __call__(self, unit: Unit, rename: bool = True) -> Unit:
        scaled = self.factor * unit
        if rename and unit.name:
            return scaled.with_name(f"{self.symbol}{unit.name}")
        return scaled


PREFIXES: Tuple[Prefix, ...] = (
    Prefix("tera",  "T", 1e12),
    Prefix("giga",  "G", 1e9),
    Prefix("mega",  "M", 1e6),
    Prefix("kilo",  "k", 1e3),
    Prefix("hecto", "h", 1e2),
    Prefix("deci",  "d", 1e-1),
    Prefix("centi", "c", 1e-2),
    Prefix("milli", "m", 1e-3),
    Prefix("micro", "µ", 1e-6),
    Prefix("nano",  "n", 1e-9),
    Prefix("pico",  "p", 1e-12),
)

PREFIXES_BY_NAME: Dict[str, Prefix] = {p.name: p for p in PREFIXES}

tera  = PREFIXES_BY_NAME["tera"]
giga  = PREFIXES_BY_NAME["giga"]
mega  = PREFIXES_BY_NAME["mega"]
kilo  = PREFIXES_BY_NAME["kilo"]
hecto = PREFIXES_BY_NAME["hecto"]
deci  = PREFIXES_BY_NAME["deci"]
centi = PREFIXES_BY_NAME["centi"]
milli = PREFIXES_BY_NAME["milli"]
micro = PREFIXES_BY_NAME["micro"]
nano  = PREFIXES_BY_NAME["nano"]
pico  = PREFIXES_BY_NAME["pico"]

__all__ = [
    "Prefix",
    "PREFIXES",
    "PREFIXES_BY_NAME",
    "tera", "giga", "mega", "kilo", "hecto",
    "deci", "centi", "milli", "micro", "nano", "pico",
]
