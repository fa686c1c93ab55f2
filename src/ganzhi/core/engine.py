from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol, Union

from .types import CivilDateTime, HourSlot, PillarSet

Moment = Union[date, CivilDateTime]

class GanZhiEngineProtocol(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def compute(self, moment: Moment, *, include_hour: bool = True, debug: bool = False) -> PillarSet: ...
    def daily_hours(self, d: date) -> List[HourSlot]: ...
    def explain(self, moment: Moment) -> Dict[str, Any]: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, GanZhiEngineProtocol]

    def get(self, name: str) -> GanZhiEngineProtocol:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: GanZhiEngineProtocol, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
