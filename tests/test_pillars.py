# tests/test_pillars.py

from datetime import date, timedelta

import pytest
import ganzhi
from ganzhi.core.types import CivilDateTime
from ganzhi.engines import pillars
from ganzhi.engines.cycle import CYCLE, parse


@pytest.mark.parametrize(
    "civil, engine, expected",
    [
        (CivilDateTime(1991, 9, 7, 14, 30), "standard", ("辛未", "丙申", "庚辰", "癸未")),
        (CivilDateTime(2001, 12, 10, 9, 28), "standard", ("辛巳", "庚子", "丁未", "乙巳")),
        (CivilDateTime(2025, 2, 25, 23, 30), "zi-rollover", ("乙巳", "戊寅", "丙寅", "戊子")),
    ],
)
def test_reference_fixtures(civil, engine, expected):
    res = ganzhi.compute_ganzhi(civil, engine=engine)
    assert (str(res.year), str(res.month), str(res.day), str(res.hour)) == expected


def test_late_zi_split_keeps_calendar_day():
    res = ganzhi.compute_ganzhi(CivilDateTime(2025, 2, 25, 23, 30), engine="standard")
    assert str(res.day) == "乙丑"
    # the hour stem already follows the next day (丙寅 -> 戊子)
    assert str(res.hour) == "戊子"
    assert res.lunar.day == 28


def test_late_zi_roll_moves_lunar_date():
    res = ganzhi.compute_ganzhi(CivilDateTime(2025, 2, 25, 23, 30), engine="zi-rollover")
    assert res.lunar.day == 29
    assert res.civil.day == 25


def test_policies_agree_before_23():
    for hour in (0, 1, 11, 22):
        c = CivilDateTime(2025, 2, 25, hour, 0)
        a = ganzhi.compute_ganzhi(c, engine="standard")
        b = ganzhi.compute_ganzhi(c, engine="zi-rollover")
        assert (a.year, a.month, a.day, a.hour) == (b.year, b.month, b.day, b.hour)


def test_epoch_day_pillar():
    assert str(pillars.day_pillar(date(1900, 1, 31))) == "甲辰"
    assert pillars.day_pillar(date(1900, 1, 31)).index == 40


def test_day_pillar_known_dates():
    assert str(pillars.day_pillar(date(2000, 1, 1))) == "戊午"
    # pure day count, valid before the epoch too
    assert str(pillars.day_pillar(date(1900, 1, 30))) == "癸卯"


def test_day_pillar_period_60():
    d = date(1900, 1, 31)
    while d < date(2100, 10, 1):
        assert pillars.day_pillar(d + timedelta(days=60)) == pillars.day_pillar(d)
        assert pillars.day_pillar(d + timedelta(days=1)).index == (pillars.day_pillar(d).index + 1) % 60
        d += timedelta(days=173)


def test_year_pillar():
    assert str(pillars.year_pillar(1900)) == "庚子"
    assert str(pillars.year_pillar(1984)) == "甲子"
    assert str(pillars.year_pillar(2024)) == "甲辰"
    assert str(pillars.year_pillar(2025)) == "乙巳"
    assert pillars.zodiac_animal(1900) == "鼠"
    assert pillars.zodiac_animal(2024) == "龙"
    assert pillars.zodiac_animal(2025) == "蛇"


def test_month_stem_rule():
    # 甲/己 years start at 丙寅, 乙/庚 at 戊寅, 丙/辛 at 庚寅, 丁/壬 at 壬寅, 戊/癸 at 甲寅
    starts = {"甲": "丙寅", "乙": "戊寅", "丙": "庚寅", "丁": "壬寅", "戊": "甲寅",
              "己": "丙寅", "庚": "戊寅", "辛": "庚寅", "壬": "壬寅", "癸": "甲寅"}
    for stem, first in starts.items():
        year = next(parse(n) for n in CYCLE if n[0] == stem)
        assert str(pillars.month_pillar(year, 0)) == first
        assert pillars.month_pillar(year, 11).branch == "丑"


def test_hour_branch_blocks():
    assert pillars.hour_branch(23) == 0
    assert pillars.hour_branch(0) == 0
    assert pillars.hour_branch(1) == 1
    assert pillars.hour_branch(2) == 1
    assert pillars.hour_branch(14) == 7
    assert pillars.hour_branch(22) == 11
    with pytest.raises(ValueError):
        pillars.hour_branch(24)


def test_hour_stem_rule():
    # five rats: 甲/己 days begin with 甲子, 乙/庚 with 丙子, ...
    for day_name, first in (("甲子", "甲子"), ("乙丑", "丙子"), ("丙寅", "戊子"), ("丁卯", "庚子"), ("戊辰", "壬子")):
        assert str(pillars.hour_pillar(parse(day_name), 0)) == first
    assert pillars.hour_range(14) == "13:00-14:59"
    assert pillars.hour_range(23) == "23:00-00:59"


def test_daily_hours():
    slots = ganzhi.daily_hours(date(2025, 2, 25))
    assert len(slots) == 13
    assert str(slots[0].ganzhi) == "丙子" and slots[0].time_range == "00:00-00:59"
    assert str(slots[1].ganzhi) == "丁丑" and slots[1].time_range == "01:00-02:59"
    assert slots[11].time_range == "21:00-22:59" and slots[11].ganzhi.branch == "亥"
    late = slots[12]
    assert late.late_zi and str(late.ganzhi) == "戊子" and late.time_range == "23:00-23:59"
    assert not any(s.late_zi for s in slots[:12])


def test_daily_hours_match_compute():
    d = date(2001, 12, 10)
    slots = ganzhi.daily_hours(d)
    for hour in range(1, 23):
        res = ganzhi.compute_ganzhi(CivilDateTime(d.year, d.month, d.day, hour, 0))
        assert res.hour == slots[pillars.hour_branch(hour)].ganzhi


def test_compute_is_deterministic():
    c = CivilDateTime(1991, 9, 7, 14, 30)
    assert ganzhi.compute_ganzhi(c) == ganzhi.compute_ganzhi(c)


def test_month_changes_with_jie_inside_lunar_month():
    # 2025-03-05 is 惊蛰: 寅 -> 卯 while the lunar month stays 二月
    before = ganzhi.compute_ganzhi(date(2025, 3, 4), include_hour=False)
    after = ganzhi.compute_ganzhi(date(2025, 3, 5), include_hour=False)
    assert (before.lunar.year, before.lunar.month) == (after.lunar.year, after.lunar.month)
    assert str(before.month) == "戊寅"
    assert str(after.month) == "己卯"
