# tests/test_lunar_table.py

import pytest
from ganzhi.core.errors import OutOfRangeError
from ganzhi.engines import lunar_table as lt


def test_table_covers_1900_to_2100():
    assert len(lt.LUNAR_INFO) == lt.MAX_YEAR - lt.MIN_YEAR + 1 == 201


def test_year_length_matches_month_sum():
    """The decoded year length agrees with the months it is made of."""
    for y in range(lt.MIN_YEAR, lt.MAX_YEAR + 1):
        assert lt.year_length(y) == sum(days for _, _, days in lt.months(y))


def test_year_lengths_are_plausible():
    for y in range(lt.MIN_YEAR, lt.MAX_YEAR + 1):
        n = lt.year_length(y)
        if lt.leap_month(y):
            assert 383 <= n <= 385
        else:
            assert 353 <= n <= 355


def test_known_leap_months():
    assert lt.leap_month(1900) == 8
    assert lt.leap_month(2017) == 6
    assert lt.leap_month(2020) == 4
    assert lt.leap_month(2023) == 2
    assert lt.leap_month(2033) == 11
    assert lt.leap_month(2024) == 0
    assert lt.leap_month(2025) == 6


def test_leap_month_length_and_order():
    assert lt.month_length(2017, 6, True) == 30
    labels = [(m, leap) for m, leap, _ in lt.months(2020)]
    assert len(labels) == 13
    assert labels[4] == (4, True)
    assert labels[5] == (5, False)


def test_month_length_validation():
    with pytest.raises(ValueError):
        lt.month_length(2020, 13)
    with pytest.raises(ValueError):
        lt.month_length(2020, 5, True)


def test_out_of_range_years():
    with pytest.raises(OutOfRangeError):
        lt.year_length(1899)
    with pytest.raises(OutOfRangeError):
        lt.leap_month(2101)
    # OutOfRangeError is also a ValueError
    with pytest.raises(ValueError):
        lt.month_length(2101, 1)
