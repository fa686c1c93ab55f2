# reference/solar.py

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from . import astro_args as aa
from .deltat import delta_t_for_date
from ..core.time import from_jdn, to_jdn

CIVIL_OFFSET_DAYS = 8.0 / 24.0


@dataclass(frozen=True)
class SolarCoordinates:
    """True and apparent solar coordinates (degrees)."""
    L_true_deg: float
    L_app_deg: float


def solar_longitude(jd_tt: float) -> SolarCoordinates:
    """
    Computes true and apparent solar longitude for a given JD(TT)
    using truncated series expansions (accurate to ~0.01 deg).
    """
    T = aa.T_centuries(jd_tt)
    sm = aa.solar_mean_elements(T)
    M_rad = math.radians(sm.M_deg)

    # Equation of center
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )
    L_true = aa.wrap_deg(sm.L0_deg + C_sun)

    # Aberration and leading nutation term
    Omega_rad = math.radians(sm.Omega_deg)
    L_app = aa.wrap_deg(L_true - 0.00569 - 0.00478 * math.sin(Omega_rad))

    return SolarCoordinates(L_true_deg=L_true, L_app_deg=L_app)


def term_longitude_deg(index: int) -> float:
    """Apparent solar longitude of term `index` (0 = 小寒 at 285°)."""
    return (285.0 + 15.0 * index) % 360.0


def term_crossing_jd_tt(year: int, index: int, *, iters: int = 6) -> float:
    """
    JD(TT) at which the apparent Sun reaches the term's longitude.

    Fixed-point iteration on the mean solar rate; the residual shrinks by
    about the orbital eccentricity at each step.
    """
    target = term_longitude_deg(index)
    # Mean guess: 小寒 near Jan 6, then about 15.2 days per term.
    jd = to_jdn(date(year, 1, 6)) - 0.5 + 15.2184 * index
    for _ in range(iters):
        err = aa.wrap180(solar_longitude(jd).L_app_deg - target)
        jd -= err / aa.SUN_DEG_PER_DAY
    return jd


def term_instant_civil(year: int, index: int) -> datetime:
    """Civil (UTC+8) instant of the term as a naive datetime."""
    jd_tt = term_crossing_jd_tt(year, index)
    dt_s = delta_t_for_date(from_jdn(int(math.floor(jd_tt + 0.5))))
    jd_civil = jd_tt - dt_s / 86400.0 + CIVIL_OFFSET_DAYS
    jdn = int(math.floor(jd_civil + 0.5))
    frac = jd_civil + 0.5 - jdn
    return datetime.combine(from_jdn(jdn), datetime.min.time()) + timedelta(days=frac)


def term_date_civil(year: int, index: int) -> date:
    return term_instant_civil(year, index).date()
