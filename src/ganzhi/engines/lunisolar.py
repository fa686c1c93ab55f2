"""
ganzhi.engines.lunisolar
------------------------
Gregorian <-> lunisolar date conversion by walking the lunar table forward
from the 1900-01-31 epoch (lunar 1900-01-01).

The walk is linear: at most 200 year steps and 13 month steps.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta

from ..core.errors import OutOfRangeError
from ..core.time import EPOCH, require_after_epoch
from ..core.types import LunarDate
from . import lunar_table as lt

log = logging.getLogger(__name__)

_DIGITS = "〇一二三四五六七八九"
MONTH_NAMES = ("正", "二", "三", "四", "五", "六", "七", "八", "九", "十", "冬", "腊")
DAY_NAMES = (
    "初一", "初二", "初三", "初四", "初五", "初六", "初七", "初八", "初九", "初十",
    "十一", "十二", "十三", "十四", "十五", "十六", "十七", "十八", "十九", "二十",
    "廿一", "廿二", "廿三", "廿四", "廿五", "廿六", "廿七", "廿八", "廿九", "三十",
)


def solar_to_lunar(d: date) -> LunarDate:
    """Convert a Gregorian date to its lunisolar representation."""
    offset = require_after_epoch(d)

    year = lt.MIN_YEAR
    while True:
        # _year_info raises OutOfRangeError once the walk runs past 2100.
        days = lt.year_length(year)
        if offset < days:
            break
        offset -= days
        year += 1

    for month, is_leap, days in lt.months(year):
        if offset < days:
            out = LunarDate(year, month, offset + 1, is_leap)
            log.debug("solar_to_lunar %s -> %s", d, out)
            return out
        offset -= days

    raise RuntimeError(f"lunar walk overran year {year}; table entry is inconsistent")


def lunar_to_solar(lunar: LunarDate) -> date:
    """Convert a lunisolar date back to the Gregorian calendar."""
    year, month, day = lunar.year, lunar.month, lunar.day
    if not (lt.MIN_YEAR <= year <= lt.MAX_YEAR):
        raise OutOfRangeError(f"Lunar year {year} outside supported range {lt.MIN_YEAR}..{lt.MAX_YEAR}")

    length = lt.month_length(year, month, lunar.is_leap_month)
    if not (1 <= day <= length):
        leap_tag = "leap " if lunar.is_leap_month else ""
        raise ValueError(f"Day {day} outside {leap_tag}month {month} of {year} ({length} days)")

    offset = sum(lt.year_length(y) for y in range(lt.MIN_YEAR, year))
    for m, is_leap, days in lt.months(year):
        if m == month and is_leap == lunar.is_leap_month:
            break
        offset += days
    return EPOCH + timedelta(days=offset + day - 1)


def new_year_day(year: int) -> date:
    """Gregorian date of lunar New Year (正月初一) of the given lunar year."""
    return lunar_to_solar(LunarDate(year, 1, 1))


def year_in_chinese(year: int) -> str:
    return "".join(_DIGITS[int(c)] for c in str(year))


def month_in_chinese(month: int, is_leap: bool = False) -> str:
    return ("闰" if is_leap else "") + MONTH_NAMES[month - 1]


def day_in_chinese(day: int) -> str:
    return DAY_NAMES[day - 1]


def lunar_display(lunar: LunarDate) -> str:
    """`一九九一年七月廿九` / `二〇二〇年闰四月初一`."""
    return (
        f"{year_in_chinese(lunar.year)}年"
        f"{month_in_chinese(lunar.month, lunar.is_leap_month)}月"
        f"{day_in_chinese(lunar.day)}"
    )
