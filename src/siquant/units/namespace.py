from __future__ import annotations

from typing import Mapping

from siquant.core.unit import Unit


class UnitNamespace:
    """
    Read-only attribute access over a unit catalog.

    ``u.kN`` and ``u("kN")`` both return the preset registered under that
    identifier. Identifiers are matched exactly; expressions are not parsed.
    """

    def __init__(self, units: Mapping[str, Unit]) -> None:
        self._units = units

    def __contains__(self, name: str) -> bool:
        return name in self._units

    def __call__(self, name: str) -> Unit:
        try:
            return self._units[name]
        except KeyError:
            raise KeyError(f"Unknown unit: {name!r}") from None

    def __getattr__(self, name: str) -> Unit:
        # only reached for names that are not real attributes
        if name.startswith("__"):
            raise AttributeError(name)
        try:
            return self._units[name]
        except KeyError as e:
            # Unknown symbol should look like a missing attribute
            raise AttributeError(name) from e

    def __dir__(self) -> list[str]:
        """List all available unit identifiers for autocomplete."""
        return sorted(set(super().__dir__()) | set(self._units))

    def __repr__(self) -> str:
        return f"UnitNamespace({len(self._units)} units)"
