from __future__ import annotations
from typing import Any, Dict

from .registry import register_attribute, jdn

def weekday(pillars) -> Dict[str, Any]:
    # 0=Mon..6=Sun, same as date.weekday()
    return {"weekday": int(jdn(pillars) % 7)}

def elements(pillars) -> Dict[str, Any]:
    out = {}
    for name in ("year", "month", "day", "hour"):
        gz = getattr(pillars, name)
        out[f"{name}_elements"] = None if gz is None else "".join(gz.elements)
    return out

def hour_range(pillars) -> Dict[str, Any]:
    return {"hour_range": pillars.hour_range}

register_attribute("weekday", weekday)
register_attribute("elements", elements)
register_attribute("hour_range", hour_range)
