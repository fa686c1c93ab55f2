"""
ganzhi.reference.deltat

ΔT (= TT − UT1) over the calendar's range, from the Espenak–Meeus (NASA)
piecewise polynomials used in eclipse work. Only the solar-term audit uses it;
the pillar engine works in civil time throughout.
"""
from __future__ import annotations

import datetime as _dt


def decimal_year(year: int, month: int = 1, day: float = 1.0) -> float:
    """Decimal year; day may be fractional. Uses the simple 365/366 day count."""
    d0 = _dt.date(year, 1, 1)
    di = _dt.date(year, month, int(day))
    doy = (di - d0).days + 1 + (day - int(day))
    days_in_year = (_dt.date(year + 1, 1, 1) - d0).days
    return year + (doy - 0.5) / days_in_year


def delta_t_em2006(y: float) -> float:
    """
    Espenak–Meeus piecewise polynomial ΔT(y) in seconds, 1860..2150 branches.

    y is the decimal year; outside 1860..2150 the long-term parabola is used.
    """
    if y < 1860.0:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u
    elif y < 1900.0:
        t = y - 1860.0
        dt = 7.62 + 0.5737 * t - 0.251754 * (t ** 2) + 0.01680668 * (t ** 3) - 0.0004473624 * (t ** 4) + (t ** 5) / 233174.0
    elif y < 1920.0:
        t = y - 1900.0
        dt = -2.79 + 1.494119 * t - 0.0598939 * (t ** 2) + 0.0061966 * (t ** 3) - 0.000197 * (t ** 4)
    elif y < 1941.0:
        t = y - 1920.0
        dt = 21.20 + 0.84493 * t - 0.076100 * (t ** 2) + 0.0020936 * (t ** 3)
    elif y < 1961.0:
        t = y - 1950.0
        dt = 29.07 + 0.407 * t - (t ** 2) / 233.0 + (t ** 3) / 2547.0
    elif y < 1986.0:
        t = y - 1975.0
        dt = 45.45 + 1.067 * t - (t ** 2) / 260.0 - (t ** 3) / 718.0
    elif y < 2005.0:
        t = y - 2000.0
        dt = 63.86 + 0.3345 * t - 0.060374 * (t ** 2) + 0.0017275 * (t ** 3) + 0.000651814 * (t ** 4) + 0.00002373599 * (t ** 5)
    elif y < 2050.0:
        t = y - 2000.0
        dt = 62.92 + 0.32217 * t + 0.005589 * (t ** 2)
    elif y < 2150.0:
        # discontinuity-fix term
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u - 0.5628 * (2150.0 - y)
    else:
        u = (y - 1820.0) / 100.0
        dt = -20.0 + 32.0 * u * u
    return float(dt)


def delta_t_for_date(d: _dt.date) -> float:
    """Convenience wrapper: ΔT in seconds for a Gregorian date."""
    return delta_t_em2006(decimal_year(d.year, d.month, float(d.day)))
