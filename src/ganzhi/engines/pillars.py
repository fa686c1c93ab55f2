"""
ganzhi.engines.pillars
----------------------
The four pillar rules as pure functions of already-resolved inputs
(lunar year, Jie bracket, civil date, civil hour).
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from ..core.time import days_since_epoch
from .cycle import ANIMALS, GanZhi, from_parts, sexagenary

# 1900 (lunar) is 庚子, position 36.
YEAR_OFFSET = 36
# 1900-01-31 is 甲辰, position 40.
DAY_OFFSET = 40

# Stem of the 寅 month, keyed by year stem mod 5 (甲己 -> 丙, 乙庚 -> 戊, ...).
MONTH_STEM_START: Tuple[int, ...] = (2, 4, 6, 8, 0)
# Stem of the 子 hour, keyed by day stem mod 5 (甲己 -> 甲, 乙庚 -> 丙, ...).
HOUR_STEM_START: Tuple[int, ...] = (0, 2, 4, 6, 8)

HOUR_RANGES: Tuple[str, ...] = (
    "23:00-00:59", "01:00-02:59", "03:00-04:59", "05:00-06:59",
    "07:00-08:59", "09:00-10:59", "11:00-12:59", "13:00-14:59",
    "15:00-16:59", "17:00-18:59", "19:00-20:59", "21:00-22:59",
)
EARLY_ZI_RANGE = "00:00-00:59"
LATE_ZI_RANGE = "23:00-23:59"


def year_pillar(lunar_year: int) -> GanZhi:
    return sexagenary(lunar_year - 1900 + YEAR_OFFSET)


def month_pillar(year_gz: GanZhi, position: int) -> GanZhi:
    """Month `position` (0 = 寅) of a year whose pillar is `year_gz`."""
    stem = (MONTH_STEM_START[year_gz.stem_index % 5] + position) % 10
    return from_parts(stem, (position + 2) % 12)


def day_pillar(d: date) -> GanZhi:
    """Pure day count; valid on both sides of the epoch."""
    return sexagenary(days_since_epoch(d) + DAY_OFFSET)


def hour_branch(hour: int) -> int:
    if not (0 <= hour <= 23):
        raise ValueError("hour must be in 0..23")
    return ((hour + 1) // 2) % 12


def hour_pillar(stem_day: GanZhi, hour: int) -> GanZhi:
    """
    Hour pillar keyed on `stem_day`.

    For 23:xx callers pass the following day's pillar: the late 子 hour
    already belongs to the next day's stem sequence.
    """
    branch = hour_branch(hour)
    stem = (HOUR_STEM_START[stem_day.stem_index % 5] + branch) % 10
    return from_parts(stem, branch)


def hour_range(hour: int) -> str:
    return HOUR_RANGES[hour_branch(hour)]


def zodiac_animal(lunar_year: int) -> str:
    return ANIMALS[(lunar_year - 1900) % 12]
