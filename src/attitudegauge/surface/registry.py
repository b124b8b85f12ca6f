from __future__ import annotations

from attitudegauge.surface.base import Surface

_REGISTRY: dict[str, type[Surface]] = {}


def register_surface(cls: type[Surface]) -> type[Surface]:
    """Class decorator to register a surface backend by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key or key == Surface.KEY:
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_surface(key: str, width: int, height: int) -> Surface:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No surface registered for key '{key}'")
    return cls(width, height)


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
