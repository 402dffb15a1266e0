"""
siquant.core.quantity
=====================

Defines the `Quantity` class: a numeric value tagged with a `Unit`.

Arithmetic between quantities is dimension-checked and performed on the
coherent representation (``value * unit.multiplier`` with multiplier 1), so
no per-unit-pair conversion tables are needed:

- ``+``/``-``/``==``/``<`` require equal dimensions and fail through
  :func:`siquant.core.precondition.precondition` otherwise.
- ``*``/``/`` between quantities combine dimensions and return coherent units.
- Scaling by a plain number keeps the unit (``2 * 5 mm`` stays in mm).
"""

from __future__ import annotations

import math
from typing import Optional, Union

from siquant.core.dimensions import DIM_0, Dimension, dim_add, dim_neg, dim_sub
from siquant.core.precondition import precondition
from siquant.core.unit import Number, Unit, _is_number

# Absolute tolerance used by ``==`` and the default for ``is_approx``.
DEFAULT_PRECISION = 1e-9

_DIMENSIONLESS = Unit("", 1.0, DIM_0)


class Quantity:
    """
    Represents a physical quantity ``value * unit``.

    Attributes
    ----------
    value : float
        The magnitude expressed in ``unit``.
    unit : Unit
        The unit the quantity is expressed in. Defaults to dimensionless.
    """
    __slots__ = ("_value", "_unit")

    def __init__(self, value: Number, unit: Optional[Unit] = None):
        self._value = float(value)
        self._unit = unit if unit is not None else _DIMENSIONLESS

    @property
    def value(self) -> float:
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimension(self) -> Dimension:
        return self._unit.dimension

    @property
    def coherent_value(self) -> float:
        """The magnitude in the coherent unit of this dimension."""
        return self._value * self._unit.multiplier

    @staticmethod
    def _coerce(other: object) -> Optional["Quantity"]:
        if isinstance(other, Quantity):
            return other
        if _is_number(other):
            return Quantity(other)  # type: ignore[arg-type]
        return None

    # --- conversion ---
    def to_coherent(self) -> "Quantity":
        return Quantity(self.coherent_value, Unit.coherent(self.dimension))

    def convert(self, unit: Unit) -> "Quantity":
        """Express this quantity in ``unit``, which must share its dimension."""
        precondition(
            unit.dimension == self.dimension,
            "Cannot convert SI value: Units don't match.",
        )
        # Same scale: keep the value as is, only adopt the target's name.
        if unit == self._unit:
            return Quantity(self._value, unit)
        return Quantity(self.coherent_value / unit.multiplier, unit)

    to = convert

    # --- comparison ---
    def _values_for_comparison(self, other: "Quantity") -> tuple[float, float]:
        # Identical units compare raw values and skip the conversion.
        if self._unit == other._unit:
            return self._value, other._value
        return self.coherent_value, other.coherent_value

    def is_approx(self, other: "Quantity", precision: float = DEFAULT_PRECISION) -> bool:
        """True when both quantities agree within ``precision`` (absolute)."""
        if not precondition(
            self.dimension == other.dimension,
            "Cannot evaluate approximate equality: Units don't match.",
        ):
            return False
        a, b = self._values_for_comparison(other)
        return abs(a - b) <= precision

    def __eq__(self, other: object) -> bool:
        # plain numbers are not coerced here, unlike + and -
        if not isinstance(other, Quantity):
            return NotImplemented
        if not precondition(
            self.dimension == other.dimension,
            "Cannot evaluate equality: Units don't match.",
        ):
            return False
        a, b = self._values_for_comparison(other)
        return abs(a - b) <= DEFAULT_PRECISION

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    # Tolerant equality cannot honour the hash contract; use as_key().
    __hash__ = None  # type: ignore[assignment]

    def _check_comparable(self, other: "Quantity") -> bool:
        return precondition(
            self.dimension == other.dimension,
            "Cannot compare SI values: Units don't match.",
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._check_comparable(other) and self.coherent_value < other.coherent_value

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._check_comparable(other) and self.coherent_value > other.coherent_value

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._check_comparable(other) and self.coherent_value <= other.coherent_value

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        return self._check_comparable(other) and self.coherent_value >= other.coherent_value

    def as_key(self, precision: int = 9) -> tuple:
        """
        Returns a hashable, discretized key for this quantity.

        ``__hash__`` is disabled because ``==`` is tolerant. Rounding the
        coherent magnitude to ``precision`` decimal places gives a key that
        is stable for dict and set use.

        Usage:
        >>> from siquant.units.presets import m
        >>> q1 = (1.0 + 1e-13) @ m
        >>> q2 = (1.0 - 1e-13) @ m
        >>> cache = {q1.as_key(): "value"}
        >>> cache[q2.as_key()]
        'value'
        """
        rounded = round(self.coherent_value, precision)
        # -0.0 and 0.0 round identically but must give a single key
        if rounded == 0.0:
            rounded = 0.0
        return (self.dimension, rounded)

    # --- arithmetic ---
    def __add__(self, other: "Quantity | Number") -> "Quantity":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        precondition(
            self.dimension == rhs.dimension,
            "Cannot add SI values: Units don't match.",
        )
        return Quantity(
            self.coherent_value + rhs.coherent_value, Unit.coherent(self.dimension)
        )

    def __radd__(self, other: Number) -> "Quantity":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: "Quantity | Number") -> "Quantity":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        precondition(
            self.dimension == rhs.dimension,
            "Cannot subtract SI values: Units don't match.",
        )
        return Quantity(
            self.coherent_value - rhs.coherent_value, Unit.coherent(self.dimension)
        )

    def __rsub__(self, other: Number) -> "Quantity":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: "Quantity | Number") -> "Quantity":
        # quantity × scalar keeps the unit as written
        if _is_number(other):
            return Quantity(self._value * float(other), self._unit)  # type: ignore[arg-type]
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(
            self.coherent_value * other.coherent_value,
            Unit.coherent(dim_add(self.dimension, other.dimension)),
        )

    def __rmul__(self, other: Number) -> "Quantity":
        # allows 3 * (2 m) -> 6 m
        if not _is_number(other):
            return NotImplemented
        return self.__mul__(other)

    def __truediv__(self, other: "Quantity | Number") -> "Quantity":
        if _is_number(other):
            if not precondition(other != 0, "Cannot divide SI value: Divisor is zero."):
                return Quantity(math.copysign(math.inf, self._value), self._unit)
            return Quantity(self._value / float(other), self._unit)  # type: ignore[arg-type]
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(
            self.coherent_value / other.coherent_value,
            Unit.coherent(dim_sub(self.dimension, other.dimension)),
        )

    def __rtruediv__(self, other: Number) -> "Quantity":
        # scalar / quantity -> reciprocal unit, e.g. 1 / (10 s) = 0.1 Hz
        if not _is_number(other):
            return NotImplemented
        unit = Unit(None, 1.0 / self._unit.multiplier, dim_neg(self.dimension))
        return Quantity(float(other) / self._value, unit)

    def __neg__(self) -> "Quantity":
        return Quantity(-self.coherent_value, Unit.coherent(self.dimension))

    def __pos__(self) -> "Quantity":
        return self

    def __abs__(self) -> "Quantity":
        return Quantity(abs(self._value), self._unit)

    def __pow__(self, n: int) -> "Quantity":
        if not isinstance(n, int) or isinstance(n, bool):
            return NotImplemented
        if n == 0:
            return Quantity(1.0)
        result = self
        for _ in range(abs(n) - 1):
            result = result * self
        return 1 / result if n < 0 else result

    # --- display ---
    def __repr__(self) -> str:
        symbol = self._unit.symbol
        return f"{self._value:.15g} {symbol}" if symbol else f"{self._value:.15g}"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for Quantity objects.

        Supported specifiers
        --------------------
        "" (empty), or "native"
            Display the quantity in its current unit (default).
        "si"
            Display the quantity in the coherent unit of its dimension.

        Raises
        ------
        ValueError
            If the format specifier is not one of "", "native", or "si".
        """
        spec = (spec or "").strip().lower()
        if spec in ("", "native"):
            return repr(self)
        if spec == "si":
            return repr(self.to_coherent())
        raise ValueError("Unknown format spec; use '', 'native', or 'si'")


def sqrt(quantity: Quantity) -> Union[Quantity, None]:
    """
    Square root of ``quantity``.

    Every dimension exponent must be even (fatal precondition otherwise),
    and that check runs before the sign check. A negative value has no real
    root and yields ``None``. The unit keeps its multiplier when coherent;
    a scaled unit takes the root of its multiplier too (mm² -> mm).
    """
    dim = quantity.dimension
    precondition(dim.is_square, "Cannot compute sqrt: Unit is no square.")
    if quantity.value < 0:
        return None
    multiplier = quantity.unit.multiplier
    if multiplier != 1:
        multiplier = math.sqrt(multiplier)
    unit = Unit(None, multiplier, dim.sqrt())
    return Quantity(math.sqrt(quantity.value), unit)


__all__ = ["Quantity", "sqrt", "DEFAULT_PRECISION"]
