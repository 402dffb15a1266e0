from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from siquant.units.namespace import UnitNamespace
# Lazy access helpers -------------------------------------------------------

def _build_namespace() -> "UnitNamespace":
    # Import here to avoid import-time side-effects / circular imports.
    from siquant.units.namespace import UnitNamespace
    from siquant.units.presets import PRESETS
    return UnitNamespace(PRESETS)

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'u' will construct a namespace over the
    preset catalog on first use.
    """
    if name == "u":
        namespace = _build_namespace()
        globals()["u"] = namespace
        return namespace
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["u"])
