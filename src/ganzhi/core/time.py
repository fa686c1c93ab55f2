from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from .errors import OutOfRangeError

# Single civil-time convention for every calculation: China Standard Time.
CIVIL_TZ = timezone(timedelta(hours=8))

# Gregorian 1900-01-31 is lunar 1900-01-01 and the 甲辰 day (cycle index 40).
EPOCH = date(1900, 1, 31)


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)


def days_since_epoch(d: date) -> int:
    """Whole civil days from 1900-01-31 to d (negative before the epoch)."""
    return to_jdn(d) - to_jdn(EPOCH)


def require_after_epoch(d: date) -> int:
    offset = days_since_epoch(d)
    if offset < 0:
        raise OutOfRangeError(f"{d.isoformat()} is before the {EPOCH.isoformat()} epoch")
    return offset


def to_civil(dt: datetime) -> datetime:
    """
    Express a datetime in civil (UTC+8) time as a naive datetime.
    Naive inputs are taken to be civil time already.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(CIVIL_TZ).replace(tzinfo=None)
