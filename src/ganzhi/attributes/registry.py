from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

from ..core.types import PillarSet
from ..core.time import to_jdn

AttrFunc = Callable[[PillarSet], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> list:
    return sorted(_REGISTRY)

def compute_attributes(pillars: PillarSet, names: Sequence[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {available_attributes()}")
        out.update(_REGISTRY[name](pillars))
    return out

# helper for attribute implementations
def jdn(pillars: PillarSet) -> int:
    return to_jdn(pillars.civil.date())
