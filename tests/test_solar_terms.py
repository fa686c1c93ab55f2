# tests/test_solar_terms.py

from datetime import date, timedelta

import pytest
from ganzhi.core.errors import OutOfRangeError
from ganzhi.engines import solar_terms as st


def test_names_and_jie_order():
    assert len(st.SOLAR_TERM_NAMES) == 24
    assert st.SOLAR_TERM_NAMES[0] == "小寒"
    assert st.SOLAR_TERM_NAMES[2] == "立春"
    assert st.SOLAR_TERM_NAMES[23] == "冬至"
    assert [st.SOLAR_TERM_NAMES[k] for k in st.JIE_TERMS[:3]] == ["立春", "惊蛰", "清明"]
    assert st.JIE_TERMS[-1] == 0


@pytest.mark.parametrize(
    "year, index, expected",
    [
        (1900, 0, date(1900, 1, 6)),
        (1991, 16, date(1991, 9, 8)),   # 白露
        (2001, 22, date(2001, 12, 7)),  # 大雪
        (2024, 23, date(2024, 12, 21)), # 冬至
        (2025, 0, date(2025, 1, 5)),
        (2025, 2, date(2025, 2, 4)),
        (2025, 4, date(2025, 3, 5)),
    ],
)
def test_term_dates(year, index, expected):
    assert st.term_date(year, index) == expected


def test_terms_of_a_year_are_increasing():
    for y in (1900, 1950, 2000, 2050, 2100):
        terms = st.solar_terms(y)
        assert [t.index for t in terms] == list(range(24))
        assert all(t.date.year == y for t in terms)
        gaps = [(b.date - a.date).days for a, b in zip(terms, terms[1:])]
        assert all(14 <= g <= 17 for g in gaps)


def test_term_instant_falls_on_term_date():
    for k in range(24):
        assert st.term_instant(2025, k).date() == st.term_date(2025, k)


def test_jie_flag():
    terms = st.solar_terms(2025)
    assert [t.name for t in terms if t.is_jie][:2] == ["小寒", "立春"]
    assert sum(t.is_jie for t in terms) == 12


def test_term_year_range():
    st.solar_terms(1899)
    st.solar_terms(2101)
    with pytest.raises(OutOfRangeError):
        st.solar_terms(1898)
    with pytest.raises(OutOfRangeError):
        st.term_date(2102, 0)
    with pytest.raises(ValueError):
        st.term_date(2000, 24)


def test_month_boundaries_fixtures():
    b = st.month_boundaries(date(1991, 9, 7))
    assert b.start.name == "立秋" and b.end.name == "白露"
    assert b.branch_index == 8  # 申
    b = st.month_boundaries(date(2001, 12, 10))
    assert b.start.name == "大雪"
    assert b.branch_index == 0  # 子
    assert b.end.date.year == 2002


def test_month_boundaries_at_li_chun():
    assert st.month_boundaries(date(2025, 2, 4)).position == 0
    before = st.month_boundaries(date(2025, 2, 3))
    assert before.position == 11
    assert before.start.name == "小寒"


def test_month_boundaries_wrap_the_year_end():
    # early January still sits in last year's 大雪 -> 小寒 interval
    b = st.month_boundaries(date(2025, 1, 2))
    assert b.start.name == "大雪" and b.start.year == 2024
    assert b.end.name == "小寒" and b.end.year == 2025
    assert b.branch_index == 0


def test_month_boundaries_bracket_every_day():
    d = date(1900, 1, 31)
    while d <= date(2100, 12, 31):
        b = st.month_boundaries(d)
        assert b.start.date <= d < b.end.date
        assert b.start.is_jie and b.end.is_jie
        assert 28 <= (b.end.date - b.start.date).days <= 33
        d += timedelta(days=11)


def test_branch_changes_only_at_jie_dates():
    jie_dates = {t.date for y in (2023, 2024, 2025) for t in st.solar_terms(y) if t.is_jie}
    d = date(2024, 1, 1)
    prev = st.month_boundaries(d).branch_index
    while d < date(2025, 1, 1):
        d += timedelta(days=1)
        cur = st.month_boundaries(d).branch_index
        if cur != prev:
            assert d in jie_dates
            assert cur == (prev + 1) % 12
        else:
            assert d not in jie_dates
        prev = cur


def test_current_solar_term():
    t = st.current_solar_term(date(2025, 2, 25))
    assert t.name == "雨水"
    t = st.current_solar_term(date(2025, 1, 1))
    assert t.name == "冬至" and t.year == 2024
    assert st.current_solar_term(date(2025, 2, 4)).name == "立春"


def test_month_boundaries_at_the_end_of_the_table():
    b = st.month_boundaries(date(2101, 1, 1))
    assert b.start.name == "大雪" and b.start.year == 2100
    assert b.end.name == "小寒" and b.end.year == 2101
    b = st.month_boundaries(date(2101, 1, 28))
    assert b.start.name == "小寒" and b.start.year == 2101


def test_tropical_year_constant():
    assert st.Y_MIN == pytest.approx(525948.76624, abs=1e-4)
