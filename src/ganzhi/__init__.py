"""ganzhi public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

import logging

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    compute_ganzhi,
    daily_hours,
    explain,
    validate,
    list_engines,
    engine_info,
    get_engine,
    make_engine,
    register_engine,
    lunar_date,
    lunar_to_solar,
    lunar_display,
    new_year_day,
    solar_terms,
    current_solar_term,
    month_boundaries,
)
from .core.errors import (
    GanZhiError,
    OutOfRangeError,
    MalformedReferenceError,
    AmbiguousTermBoundaryError,
)
from .core.types import CivilDateTime, LunarDate, PillarSet, SolarTerm
from .engines.cycle import GanZhi, sexagenary

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compute_ganzhi",
    "daily_hours",
    "explain",
    "validate",
    "list_engines",
    "engine_info",
    "get_engine",
    "make_engine",
    "register_engine",
    "lunar_date",
    "lunar_to_solar",
    "lunar_display",
    "new_year_day",
    "solar_terms",
    "current_solar_term",
    "month_boundaries",
    "GanZhiError",
    "OutOfRangeError",
    "MalformedReferenceError",
    "AmbiguousTermBoundaryError",
    "CivilDateTime",
    "LunarDate",
    "PillarSet",
    "SolarTerm",
    "GanZhi",
    "sexagenary",
]
