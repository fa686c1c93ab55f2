"""
ganzhi.engines.factory
----------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations

from ..core.types import EngineSpec, GanZhiSpec
from .calendar import GanZhiEngine


def build_ganzhi_engine(spec: GanZhiSpec) -> GanZhiEngine:
    return GanZhiEngine(spec)


def make_engine(spec: EngineSpec) -> GanZhiEngine:
    """The universal entry point."""
    if spec.kind == "jie":
        return build_ganzhi_engine(spec.payload)
    raise TypeError(f"Unknown engine kind: {spec.kind!r}")
