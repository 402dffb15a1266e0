"""
siquant: dimension-checked arithmetic on physical quantities.

A `Quantity` pairs a number with a `Unit` (multiplier plus exponents over
base dimensions). Arithmetic converts through the coherent representation
and rejects dimensionally invalid operations. The preset catalog lives in
`siquant.units.presets`; `siquant.units.u` offers attribute access to it.
"""

from importlib import metadata as _metadata

from siquant.core.dimensions import BaseDimension, Dimension
from siquant.core.precondition import PreconditionError
from siquant.core.quantity import Quantity, sqrt
from siquant.core.unit import Unit


__author__ = "siquant developers"
__license__ = "MIT"

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("siquant")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = [
    "BaseDimension",
    "Dimension",
    "PreconditionError",
    "Quantity",
    "Unit",
    "sqrt",
    "__version__",
    "__author__",
    "__license__",
]
