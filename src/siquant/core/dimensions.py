# siquant.core.dimensions

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, Mapping, Tuple, Union

# --- Base dimensions ---------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BaseDimension:
    """
    A primitive physical dimension (length, mass, time, ...).

    Identity is by ``name`` only; ``name`` doubles as the symbol of the
    coherent unit for that dimension and is what unit display strings use.
    """

    name: str
    quantity: str = field(default="", compare=False)

    def __repr__(self) -> str:
        return f"BaseDimension({self.name!r})"


LENGTH      = BaseDimension("m", "length")
MASS        = BaseDimension("kg", "mass")
TIME        = BaseDimension("s", "time")
CURRENT     = BaseDimension("A", "current")
TEMPERATURE = BaseDimension("K", "temperature")
AMOUNT      = BaseDimension("mol", "substance amount")
LUMINOSITY  = BaseDimension("cd", "luminosity")

# --- Public typing -----------------------------------------------------------
DimLike = Union["Dimension", Mapping[BaseDimension, int], Iterable[Tuple[BaseDimension, int]]]

# --- Core object -------------------------------------------------------------

class Dimension(Mapping[BaseDimension, int]):
    """
    Immutable sparse mapping from base dimension to integer exponent.

    Entries with a zero exponent are dropped on construction, so two
    dimensions are equal exactly when their stored mappings are equal.
    """

    __slots__ = ("_exps", "_hash")

    def __init__(self, data: DimLike = ()) -> None:
        items = data.items() if isinstance(data, Mapping) else data
        exps: dict[BaseDimension, int] = {}
        for base, exp in items:
            if not isinstance(base, BaseDimension):
                raise TypeError(f"Dimension keys must be BaseDimension, got {type(base).__name__}")
            if int(exp) != exp:
                raise ValueError(f"Exponent for {base.name!r} must be an integer, got {exp!r}")
            exps[base] = exps.get(base, 0) + int(exp)
        self._exps = {b: e for b, e in exps.items() if e != 0}
        self._hash = hash(frozenset(self._exps.items()))

    # --- Mapping protocol ---
    def __getitem__(self, base: BaseDimension) -> int:
        return self._exps[base]

    def exponent(self, base: BaseDimension) -> int:
        """Exponent of ``base``, 0 when it does not occur."""
        return self._exps.get(base, 0)

    def __iter__(self) -> Iterator[BaseDimension]:
        return iter(self._exps)

    def __len__(self) -> int:
        return len(self._exps)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Dimension):
            return self._exps == other._exps
        if isinstance(other, Mapping):
            try:
                return self._exps == Dimension(other)._exps
            except (TypeError, ValueError):
                return False
        return NotImplemented

    def __hash__(self) -> int:
        return self._hash

    # --- Algebra (operator overloads) ---
    def __mul__(self, other: DimLike) -> "Dimension":
        return dim_add(self, other)

    def __truediv__(self, other: DimLike) -> "Dimension":
        return dim_sub(self, other)

    def __rtruediv__(self, other: DimLike) -> "Dimension":
        """Handles (mapping / Dimension) by calculating (other / self)."""
        return dim_sub(other, self)

    def __pow__(self, n: int, modulo: Any | None = None) -> "Dimension":
        # Python may call __pow__ with a third arg (modulo) - reject it explicitly
        if modulo is not None:
            raise TypeError("Modulo exponentiation is not supported for Dimension.")
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        return dim_pow(self, n)

    def inverse(self) -> "Dimension":
        return dim_neg(self)

    # --- Helpers ---
    @property
    def is_dimensionless(self) -> bool:
        return not self._exps

    @property
    def is_square(self) -> bool:
        """True when every exponent is even, i.e. a square root exists."""
        return all(e % 2 == 0 for e in self._exps.values())

    def sqrt(self) -> "Dimension":
        # Halving an odd exponent truncates towards zero; callers check is_square first.
        return Dimension((b, int(e / 2)) for b, e in self._exps.items())

    def __repr__(self) -> str:
        parts = "".join(f"[{b.name}^{e}]" for b, e in self._exps.items())
        return f"Dimension({parts})"


# --- Algebra functions -------------------------------------------------------

def dim_add(a: DimLike, b: DimLike) -> Dimension:
    """Element-wise sum of exponents (the dimension of a product)."""
    da, db = Dimension(a), Dimension(b)
    merged = dict(da.items())
    for base, exp in db.items():
        merged[base] = merged.get(base, 0) + exp
    return Dimension(merged)

def dim_neg(a: DimLike) -> Dimension:
    return Dimension((b, -e) for b, e in Dimension(a).items())

def dim_sub(a: DimLike, b: DimLike) -> Dimension:
    """Dimension of a quotient."""
    return dim_add(a, dim_neg(b))

def dim_pow(a: DimLike, n: int) -> Dimension:
    """
    Raise a dimension to an integer power by repeated addition.

    ``n == 0`` yields the dimensionless dimension, negative powers are the
    negation of the positive one.
    """
    if n == 0:
        return DIM_0
    base = Dimension(a)
    result = base
    for _ in range(abs(n) - 1):
        result = dim_add(result, base)
    return dim_neg(result) if n < 0 else result


# --- Public constants --------------------------------------------------------

DIM_0 = Dimension()

__all__ = [
    "BaseDimension",
    "Dimension",
    "DimLike",
    "DIM_0",
    "LENGTH",
    "MASS",
    "TIME",
    "CURRENT",
    "TEMPERATURE",
    "AMOUNT",
    "LUMINOSITY",
    "dim_add",
    "dim_neg",
    "dim_sub",
    "dim_pow",
]
