from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Dict, Literal, Optional

if TYPE_CHECKING:
    from ..engines.cycle import GanZhi

ZiHourPolicy = Literal["split", "roll"]

@dataclass(frozen=True)
class EngineId:
    family: Literal["standard", "custom"]
    name: str
    version: str

@dataclass(frozen=True)
class CivilDateTime:
    """A civil (UTC+8) date with an optional clock time."""
    year: int
    month: int
    day: int
    hour: Optional[int] = None
    minute: Optional[int] = None

    def __post_init__(self) -> None:
        if self.hour is not None and not (0 <= self.hour <= 23):
            raise ValueError("hour must be in 0..23")
        if self.minute is not None and not (0 <= self.minute <= 59):
            raise ValueError("minute must be in 0..59")
        if self.minute is not None and self.hour is None:
            raise ValueError("minute given without hour")

    @classmethod
    def from_date(cls, d: date) -> "CivilDateTime":
        if isinstance(d, datetime):
            return cls(d.year, d.month, d.day, d.hour, d.minute)
        return cls(d.year, d.month, d.day)

    @property
    def has_time(self) -> bool:
        return self.hour is not None

    def date(self) -> date:
        return date(self.year, self.month, self.day)

    def display(self) -> str:
        """`1991年9月7日 14:30` style label."""
        out = f"{self.year}年{self.month}月{self.day}日"
        if self.hour is not None:
            out += f" {self.hour:02d}"
            if self.minute is not None:
                out += f":{self.minute:02d}"
        return out

@dataclass(frozen=True)
class LunarDate:
    year: int
    month: int
    day: int
    is_leap_month: bool = False

@dataclass(frozen=True)
class SolarTerm:
    year: int
    index: int  # 0 = 小寒 .. 23 = 冬至
    name: str
    date: date

    @property
    def is_jie(self) -> bool:
        """The even-indexed terms (小寒, 立春, ...) open the GanZhi months."""
        return self.index % 2 == 0

@dataclass(frozen=True)
class MonthBoundary:
    """The Jie interval [start.date, end.date) containing a date."""
    branch_index: int  # 0 = 子
    position: int      # 0 = 寅 month, counting forward
    start: SolarTerm
    end: SolarTerm

@dataclass(frozen=True)
class GanZhiSpec:
    """Pure data payload for constructing a GanZhi engine."""
    id: EngineId
    zi_hour: ZiHourPolicy = "split"
    meta: Optional[Dict[str, Any]] = None

    def __post_init__(self) -> None:
        if self.zi_hour not in ("split", "roll"):
            raise ValueError("zi_hour must be 'split' or 'roll'")

@dataclass(frozen=True)
class EngineSpec:
    """Top-level wrapper for all engine specifications."""
    kind: Literal["jie"]
    id: EngineId
    payload: GanZhiSpec

    @staticmethod
    def like(name: str) -> "EngineSpec":
        from ..engines.specs import ALL_SPECS
        if name not in ALL_SPECS:
            raise KeyError(f"Unknown base spec '{name}'. Available: {sorted(ALL_SPECS)}")
        return ALL_SPECS[name]

    def tweak(self, **kwargs) -> "EngineSpec":
        return replace(self, payload=replace(self.payload, **kwargs))

@dataclass(frozen=True)
class HourSlot:
    """One row of the thirteen-slot (early/late Zi) hour list of a day."""
    ganzhi: "GanZhi"
    time_range: str
    late_zi: bool = False

@dataclass(frozen=True)
class PillarSet:
    civil: CivilDateTime
    engine: EngineId
    year: "GanZhi"
    month: "GanZhi"
    day: "GanZhi"
    hour: Optional["GanZhi"]
    lunar: LunarDate
    lunar_display: str
    animal: str
    solar_term: SolarTerm
    month_boundary: MonthBoundary
    hour_range: Optional[str] = None
    attributes: Optional[Dict[str, Any]] = None
    debug: Optional[Dict[str, Any]] = None

    @property
    def ganzhi_text(self) -> str:
        """`辛未年 丙申月 庚辰日 癸未时`; the hour field is dropped when absent."""
        out = f"{self.year}年 {self.month}月 {self.day}日"
        if self.hour is not None:
            out += f" {self.hour}时"
        return out

    def as_dict(self) -> Dict[str, Any]:
        return {
            "solar": self.civil.display(),
            "year": str(self.year),
            "month": str(self.month),
            "day": str(self.day),
            "hour": None if self.hour is None else str(self.hour),
            "hour_range": self.hour_range,
            "lunar": self.lunar_display,
            "animal": self.animal,
            "solar_term": self.solar_term.name,
        }
