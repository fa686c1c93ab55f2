"""
ganzhi.engines.lunar_table
--------------------------
Read-only month-length and leap-month data for lunar years 1900..2100.

Each year is packed into 17 bits:
  bits 15..4   months 1..12, 1 = long (30 days), 0 = short (29 days)
  bit 16       length of the leap month, if any
  bits 3..0    leap month number, 0 = no leap month
"""

from __future__ import annotations

from typing import Iterator, Tuple

from ..core.errors import OutOfRangeError

MIN_YEAR = 1900
MAX_YEAR = 2100

LUNAR_INFO: Tuple[int, ...] = (
    0x04BD8, 0x04AE0, 0x0A570, 0x054D5, 0x0D260, 0x0D950, 0x16554, 0x056A0, 0x09AD0, 0x055D2,  # 1900
    0x04AE0, 0x0A5B6, 0x0A4D0, 0x0D250, 0x1D255, 0x0B540, 0x0D6A0, 0x0ADA2, 0x095B0, 0x14977,  # 1910
    0x04970, 0x0A4B0, 0x0B4B5, 0x06A50, 0x06D40, 0x1AB54, 0x02B60, 0x09570, 0x052F2, 0x04970,  # 1920
    0x06566, 0x0D4A0, 0x0EA50, 0x06E95, 0x05AD0, 0x02B60, 0x186E3, 0x092E0, 0x1C8D7, 0x0C950,  # 1930
    0x0D4A0, 0x1D8A6, 0x0B550, 0x056A0, 0x1A5B4, 0x025D0, 0x092D0, 0x0D2B2, 0x0A950, 0x0B557,  # 1940
    0x06CA0, 0x0B550, 0x15355, 0x04DA0, 0x0A5D0, 0x14573, 0x052D0, 0x0A9A8, 0x0E950, 0x06AA0,  # 1950
    0x0AEA6, 0x0AB50, 0x04B60, 0x0AAE4, 0x0A570, 0x05260, 0x0F263, 0x0D950, 0x05B57, 0x056A0,  # 1960
    0x096D0, 0x04DD5, 0x04AD0, 0x0A4D0, 0x0D4D4, 0x0D250, 0x0D558, 0x0B540, 0x0B6A0, 0x195A6,  # 1970
    0x095B0, 0x049B0, 0x0A974, 0x0A4B0, 0x0B27A, 0x06A50, 0x06D40, 0x0AF46, 0x0AB60, 0x09570,  # 1980
    0x04AF5, 0x04970, 0x064B0, 0x074A3, 0x0EA50, 0x06B58, 0x05AC0, 0x0AB60, 0x096D5, 0x092E0,  # 1990
    0x0C960, 0x0D954, 0x0D4A0, 0x0DA50, 0x07552, 0x056A0, 0x0ABB7, 0x025D0, 0x092D0, 0x0CAB5,  # 2000
    0x0A950, 0x0B4A0, 0x0BAA4, 0x0AD50, 0x055D9, 0x04BA0, 0x0A5B0, 0x15176, 0x052B0, 0x0A930,  # 2010
    0x07954, 0x06AA0, 0x0AD50, 0x05B52, 0x04B60, 0x0A6E6, 0x0A4E0, 0x0D260, 0x0EA65, 0x0D530,  # 2020
    0x05AA0, 0x076A3, 0x096D0, 0x04AFB, 0x04AD0, 0x0A4D0, 0x1D0B6, 0x0D250, 0x0D520, 0x0DD45,  # 2030
    0x0B5A0, 0x056D0, 0x055B2, 0x049B0, 0x0A577, 0x0A4B0, 0x0AA50, 0x1B255, 0x06D20, 0x0ADA0,  # 2040
    0x14B63, 0x09370, 0x049F8, 0x04970, 0x064B0, 0x168A6, 0x0EA50, 0x06B20, 0x1A6C4, 0x0AAE0,  # 2050
    0x0A2E0, 0x0D2E3, 0x0C960, 0x0D557, 0x0D4A0, 0x0DA50, 0x05D55, 0x056A0, 0x0A6D0, 0x055D4,  # 2060
    0x052D0, 0x0A9B8, 0x0A950, 0x0B4A0, 0x0B6A6, 0x0AD50, 0x055A0, 0x0ABA4, 0x0A5B0, 0x052B0,  # 2070
    0x0B273, 0x06930, 0x07337, 0x06AA0, 0x0AD50, 0x14B55, 0x04B60, 0x0A570, 0x054E4, 0x0D160,  # 2080
    0x0E968, 0x0D520, 0x0DAA0, 0x16AA6, 0x056D0, 0x04AE0, 0x0A9D4, 0x0A2D0, 0x0D150, 0x0F252,  # 2090
    0x0D520,  # 2100
)


def _year_info(year: int) -> int:
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise OutOfRangeError(f"Lunar year {year} outside supported range {MIN_YEAR}..{MAX_YEAR}")
    return LUNAR_INFO[year - MIN_YEAR]


def leap_month(year: int) -> int:
    """Leap month number for the year, 0 when there is none."""
    return _year_info(year) & 0xF


def month_length(year: int, month: int, is_leap: bool = False) -> int:
    """Days (29 or 30) in the given month, or in its leap repeat when is_leap."""
    if not (1 <= month <= 12):
        raise ValueError("Lunar month must be between 1 and 12")
    info = _year_info(year)
    if is_leap:
        if (info & 0xF) != month:
            raise ValueError(f"Month {month} in year {year} is not a leap month.")
        return 30 if info & 0x10000 else 29
    return 30 if info & (0x10000 >> month) else 29


def year_length(year: int) -> int:
    info = _year_info(year)
    days = 348
    mask = 0x8000
    for _ in range(12):
        if info & mask:
            days += 1
        mask >>= 1
    if info & 0xF:
        days += 30 if info & 0x10000 else 29
    return days


def months(year: int) -> Iterator[Tuple[int, bool, int]]:
    """
    Yield (month, is_leap, days) in calendar order; the leap month follows
    the ordinary month it repeats.
    """
    leap = leap_month(year)
    for month in range(1, 13):
        yield month, False, month_length(year, month)
        if month == leap:
            yield month, True, month_length(year, month, True)
