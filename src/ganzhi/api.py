from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence

from .core.engine import EngineRegistry, GanZhiEngineProtocol, Moment
from .core.types import EngineSpec, HourSlot, LunarDate, MonthBoundary, PillarSet, SolarTerm
from .attributes import standard as _standard_attributes  # noqa: F401
from .attributes.registry import compute_attributes
from .engines import lunisolar
from .engines import solar_terms as _terms
from .engines.calendar import coerce_moment
from .engines.factory import make_engine as _make_engine
from .engines.specs import DEFAULT_ENGINE

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(name: str, *, zi_hour: Optional[str] = None) -> GanZhiEngineProtocol:
    """Fresh engine built from a named spec, optionally with another Zi-hour policy."""
    spec = EngineSpec.like(name)
    if zi_hour is not None:
        spec = spec.tweak(zi_hour=zi_hour)
    return _make_engine(spec)

def make_engine(spec: EngineSpec) -> GanZhiEngineProtocol:
    return _make_engine(spec)

def register_engine(name: str, engine: GanZhiEngineProtocol, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Pillars
# ============================================================

def compute_ganzhi(
    moment: Moment,
    *,
    engine: str = DEFAULT_ENGINE,
    include_hour: bool = True,
    attributes: Sequence[str] = (),
    debug: bool = False,
) -> PillarSet:
    res = _reg().get(engine).compute(moment, include_hour=include_hour, debug=debug)
    if attributes:
        attrs = compute_attributes(res, attributes)
        res = replace(res, attributes=attrs)
    return res

def daily_hours(d: date, *, engine: str = DEFAULT_ENGINE) -> List[HourSlot]:
    return _reg().get(engine).daily_hours(d)

def explain(moment: Moment, *, engine: str = DEFAULT_ENGINE) -> Dict[str, Any]:
    return _reg().get(engine).explain(moment)

def validate(moment: Moment, expected: str, *, engine: str = DEFAULT_ENGINE):
    """Recompute all four pillars and compare them with a reference string."""
    from .diagnostics.validate_reference import compare
    return compare(compute_ganzhi(moment, engine=engine), expected)

# ============================================================
# Lunar calendar
# ============================================================

def lunar_date(d: date) -> LunarDate:
    return lunisolar.solar_to_lunar(coerce_moment(d).date())

def lunar_to_solar(lunar: LunarDate) -> date:
    return lunisolar.lunar_to_solar(lunar)

def lunar_display(lunar: LunarDate) -> str:
    return lunisolar.lunar_display(lunar)

def new_year_day(year: int) -> date:
    return lunisolar.new_year_day(year)

# ============================================================
# Solar terms
# ============================================================

def solar_terms(year: int) -> List[SolarTerm]:
    return _terms.solar_terms(year)

def current_solar_term(d: date) -> SolarTerm:
    return _terms.current_solar_term(coerce_moment(d).date())

def month_boundaries(d: date) -> MonthBoundary:
    return _terms.month_boundaries(coerce_moment(d).date())
