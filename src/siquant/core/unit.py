from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from siquant.core.dimensions import DIM_0, Dimension, dim_add, dim_neg, dim_pow, dim_sub
from siquant.core.precondition import precondition

if TYPE_CHECKING:  # pragma: no cover - imported only for type checking
    from siquant.core.quantity import Quantity

Number = Union[int, float]


def _is_number(x: object) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


@dataclass(frozen=True, slots=True, eq=False)
class Unit:
    """
    A physical unit.

    Attributes
    ----------
    name : str or None
        Display name (e.g. "m", "kN", "m/s"). Not part of equality; units
        produced by arithmetic carry no name.
    multiplier : float
        Factor converting 1 of this unit into the coherent unit of its
        dimension. Examples: m=1.0, mm=1e-3, kN=1e3.
    dimension : Dimension
        Sparse exponent mapping over base dimensions, e.g. N -> {kg:1, m:1, s:-2}.
    """

    name: Optional[str]
    multiplier: float
    dimension: Dimension = DIM_0

    def __post_init__(self) -> None:
        if not isinstance(self.dimension, Dimension):
            object.__setattr__(self, "dimension", Dimension(self.dimension))
        precondition(self.multiplier != 0, "Cannot create unit: Multiplier is zero.")

    @classmethod
    def coherent(cls, dimension: Dimension) -> "Unit":
        """Unnamed unit with multiplier 1 for ``dimension``."""
        return cls(None, 1.0, dimension)

    def with_name(self, name: Optional[str]) -> "Unit":
        """Same scale and dimension under a different display name."""
        return Unit(name, self.multiplier, self.dimension)

    @property
    def is_coherent(self) -> bool:
        return self.multiplier == 1

    @property
    def is_dimensionless(self) -> bool:
        return self.dimension.is_dimensionless

    # --- Equality: scale and dimension, never the name ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiplier == other.multiplier and self.dimension == other.dimension

    def __hash__(self) -> int:
        return hash((self.multiplier, self.dimension))

    # --- Algebra ---
    def __mul__(self, other: "Unit | Number") -> "Unit":
        if _is_number(other):
            return Unit(None, float(other) * self.multiplier, self.dimension)
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit(
            None,
            self.multiplier * other.multiplier,
            dim_add(self.dimension, other.dimension),
        )

    def __rmul__(self, k: Number) -> "Unit":
        # k * unit scales the unit, e.g. kN = 1e3 * N
        if not _is_number(k):
            return NotImplemented
        return Unit(None, float(k) * self.multiplier, self.dimension)

    def __truediv__(self, other: "Unit | Number") -> "Unit":
        if _is_number(other):
            return Unit(None, self.multiplier / float(other), self.dimension)
        if not isinstance(other, Unit):
            return NotImplemented
        return Unit(
            None,
            self.multiplier / other.multiplier,
            dim_sub(self.dimension, other.dimension),
        )

    def __rtruediv__(self, k: Number) -> "Unit":
        if not _is_number(k):
            return NotImplemented
        return Unit(None, float(k) / self.multiplier, dim_neg(self.dimension))

    def __pow__(self, n: int) -> "Unit":
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        if n == 0:
            return Unit.coherent(DIM_0)
        if n < 0:
            return 1 / (self ** -n)
        return Unit(None, self.multiplier ** n, dim_pow(self.dimension, n))

    def __rmatmul__(self, value: Number) -> "Quantity":
        """``1.5 @ m`` builds a quantity of 1.5 metres."""
        from siquant.core.quantity import Quantity

        if not _is_number(value):
            return NotImplemented
        return Quantity(value, self)

    # --- Display ---
    @property
    def symbol(self) -> str:
        """
        Display string: the name when set, otherwise the multiplier (when not
        1) followed by ``<base>^<exponent>`` terms.
        """
        if self.name is not None:
            return self.name
        parts = [] if self.multiplier == 1 else [f"x {self.multiplier:.15g}"]
        parts.extend(f"{base.name}^{exp}" for base, exp in self.dimension.items())
        return " ".join(parts)

    def __str__(self) -> str:
        return self.symbol


__all__ = ["Unit", "Number"]
