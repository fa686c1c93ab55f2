"""
ganzhi.engines.solar_terms
--------------------------
Approximate civil dates of the 24 solar terms and the Jie-term month bracket.

Each term instant is a linear function of the year:

    minutes(y, k) = Y_MIN * (y - 1900) + TERM_MINUTES[k] + EPOCH_MINUTES

counted from 1900-01-01 00:00 civil time (UTC+8), where EPOCH_MINUTES places
小寒 1900 at 1900-01-06 02:05 UT and TERM_MINUTES[k] is the mean offset of term
k from it. The civil date is floor(minutes / 1440) days after 1900-01-01.
Accurate to within a day over 1900..2100; see diagnostics.term_drift.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import List, Tuple

from ..core.errors import AmbiguousTermBoundaryError, OutOfRangeError
from ..core.types import MonthBoundary, SolarTerm

log = logging.getLogger(__name__)

SOLAR_TERM_NAMES: Tuple[str, ...] = (
    "小寒", "大寒", "立春", "雨水", "惊蛰", "春分",
    "清明", "谷雨", "立夏", "小满", "芒种", "夏至",
    "小暑", "大暑", "立秋", "处暑", "白露", "秋分",
    "寒露", "霜降", "立冬", "小雪", "大雪", "冬至",
)

# The twelve Jie in month order, starting with 立春 (寅 month).
JIE_TERMS: Tuple[int, ...] = (2, 4, 6, 8, 10, 12, 14, 16, 18, 20, 22, 0)

TERM_MINUTES: Tuple[int, ...] = (
    0, 21208, 42467, 63836, 85337, 107014,
    128867, 150921, 173149, 195551, 218072, 240693,
    263343, 285989, 308563, 331033, 353350, 375494,
    397447, 419210, 440795, 462224, 483532, 504758,
)

TROPICAL_YEAR_MS = 31556925974.7
Y_MIN = TROPICAL_YEAR_MS / 60000.0  # tropical year, minutes
EPOCH_MINUTES = 5 * 1440 + 2 * 60 + 5
CIVIL_OFFSET_MINUTES = 8 * 60
MINUTES_PER_DAY = 1440

_BASE = date(1900, 1, 1)

# One year of margin on each side of the lunar table for the Jie scan.
MIN_TERM_YEAR = 1899
MAX_TERM_YEAR = 2101


def _check(year: int, index: int) -> None:
    if not (MIN_TERM_YEAR <= year <= MAX_TERM_YEAR):
        raise OutOfRangeError(f"Solar-term year {year} outside {MIN_TERM_YEAR}..{MAX_TERM_YEAR}")
    if not (0 <= index < 24):
        raise ValueError("term index must be in 0..23")


def term_minutes(year: int, index: int) -> float:
    """Minutes from 1900-01-01 00:00 civil time to term `index` of `year`."""
    _check(year, index)
    return Y_MIN * (year - 1900) + TERM_MINUTES[index] + EPOCH_MINUTES + CIVIL_OFFSET_MINUTES


def term_instant(year: int, index: int) -> datetime:
    """Approximate civil (UTC+8) instant of the term, naive datetime."""
    return datetime(1900, 1, 1) + timedelta(minutes=term_minutes(year, index))


def term_date(year: int, index: int) -> date:
    day = int(term_minutes(year, index) // MINUTES_PER_DAY)
    return _BASE + timedelta(days=day)


def solar_term(year: int, index: int) -> SolarTerm:
    return SolarTerm(year=year, index=index, name=SOLAR_TERM_NAMES[index], date=term_date(year, index))


def solar_terms(year: int) -> List[SolarTerm]:
    """All 24 terms of a Gregorian year, 小寒 first."""
    return [solar_term(year, k) for k in range(24)]


def current_solar_term(d: date) -> SolarTerm:
    """The latest term whose civil date is on or before d."""
    for term in reversed(solar_terms(d.year)):
        if term.date <= d:
            return term
    # Before 小寒: still inside last year's 冬至 interval.
    return solar_term(d.year - 1, 23)


def month_boundaries(d: date) -> MonthBoundary:
    """
    Find the consecutive pair of Jie terms bracketing d.

    Pairs are scanned for d.year-1 and d.year; when the next Jie falls before
    the current one the pair wraps the year end and the next Jie is taken from
    the following year.
    """
    for year in (d.year - 1, d.year):
        for pos, index in enumerate(JIE_TERMS):
            start = solar_term(year, index)
            next_index = JIE_TERMS[(pos + 1) % 12]
            end = solar_term(year, next_index)
            if end.date < start.date:
                end = solar_term(year + 1, next_index)
            if start.date <= d < end.date:
                log.debug("month_boundaries %s -> %s %s .. %s %s", d, start.name, start.date, end.name, end.date)
                return MonthBoundary(
                    branch_index=(pos + 2) % 12,
                    position=pos,
                    start=start,
                    end=end,
                )
    raise AmbiguousTermBoundaryError(f"No Jie pair brackets {d.isoformat()}")
