"""
ganzhi.engines.calendar
-----------------------
The Orchestrator. Resolves a civil moment into its lunar date and Jie bracket,
then binds the pure pillar rules together under the engine's Zi-hour policy.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Any, Dict, List

from ..core.engine import Moment
from ..core.time import days_since_epoch, to_civil
from ..core.types import CivilDateTime, GanZhiSpec, HourSlot, PillarSet
from . import pillars
from .lunisolar import lunar_display, solar_to_lunar
from .solar_terms import current_solar_term, month_boundaries

log = logging.getLogger(__name__)

LATE_ZI_HOUR = 23


def coerce_moment(moment: Any) -> CivilDateTime:
    """Accept CivilDateTime, datetime (naive = civil time) or date."""
    if isinstance(moment, CivilDateTime):
        return moment
    if isinstance(moment, datetime):
        return CivilDateTime.from_date(to_civil(moment))
    if isinstance(moment, date):
        return CivilDateTime.from_date(moment)
    raise TypeError(f"Unsupported moment type: {type(moment).__name__}")


class GanZhiEngine:
    """
    Computes the four pillars for civil UTC+8 moments.

    zi_hour="split" keeps 23:00-23:59 on its calendar day and only borrows the
    next day's stem for the hour pillar; zi_hour="roll" moves the whole query
    to the next day.
    """
    def __init__(self, spec: GanZhiSpec):
        self.spec = spec
        self.id = spec.id
        self.zi_hour = spec.zi_hour

    def info(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"id": self.id.__dict__, "zi_hour": self.zi_hour}
        if self.spec.meta:
            out["meta"] = dict(self.spec.meta)
        return out

    # ---------------------------------------------------------
    # Pillars
    # ---------------------------------------------------------

    def compute(self, moment: Moment, *, include_hour: bool = True, debug: bool = False) -> PillarSet:
        civil = coerce_moment(moment)
        d = civil.date()
        hour = civil.hour if include_hour and civil.has_time else None
        late_zi = hour == LATE_ZI_HOUR

        basis = d
        if late_zi and self.zi_hour == "roll":
            basis = d + timedelta(days=1)
            log.debug("late Zi at %s: rolling query to %s", civil.display(), basis)

        lunar = solar_to_lunar(basis)
        boundary = month_boundaries(basis)
        year_gz = pillars.year_pillar(lunar.year)
        month_gz = pillars.month_pillar(year_gz, boundary.position)
        day_gz = pillars.day_pillar(basis)

        hour_gz = None
        rng = None
        if hour is not None:
            stem_day = pillars.day_pillar(d + timedelta(days=1)) if late_zi else day_gz
            hour_gz = pillars.hour_pillar(stem_day, hour)
            rng = pillars.hour_range(hour)

        dbg = None
        if debug:
            dbg = {
                "basis_date": basis,
                "days_since_epoch": days_since_epoch(basis),
                "zi_hour": self.zi_hour,
                "late_zi": late_zi,
                "jie_start": (boundary.start.name, boundary.start.date),
                "jie_end": (boundary.end.name, boundary.end.date),
                "month_position": boundary.position,
            }

        return PillarSet(
            civil=civil,
            engine=self.id,
            year=year_gz,
            month=month_gz,
            day=day_gz,
            hour=hour_gz,
            lunar=lunar,
            lunar_display=lunar_display(lunar),
            animal=pillars.zodiac_animal(lunar.year),
            solar_term=current_solar_term(basis),
            month_boundary=boundary,
            hour_range=rng,
            debug=dbg,
        )

    def daily_hours(self, d: date) -> List[HourSlot]:
        """Thirteen slots: early 子, 丑..亥, late 子 (next day's stem)."""
        if isinstance(d, datetime):
            d = to_civil(d).date()
        today = pillars.day_pillar(d)
        tomorrow = pillars.day_pillar(d + timedelta(days=1))

        out = [HourSlot(pillars.hour_pillar(today, 0), pillars.EARLY_ZI_RANGE)]
        for branch in range(1, 12):
            hour = 2 * branch - 1
            out.append(HourSlot(pillars.hour_pillar(today, hour), pillars.HOUR_RANGES[branch]))
        out.append(HourSlot(pillars.hour_pillar(tomorrow, LATE_ZI_HOUR), pillars.LATE_ZI_RANGE, late_zi=True))
        return out

    def explain(self, moment: Moment) -> Dict[str, Any]:
        res = self.compute(moment, debug=True)
        out = res.as_dict()
        out["engine"] = self.info()
        out["lunar_date"] = res.lunar.__dict__
        out.update(res.debug or {})
        return out
