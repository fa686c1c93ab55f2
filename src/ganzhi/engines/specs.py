from __future__ import annotations

from typing import Dict

from ..core.types import EngineId, EngineSpec, GanZhiSpec

# ============================================================
# STANDARD: late 子 hour keeps its calendar day
# ============================================================

STANDARD_SPEC = GanZhiSpec(
    id=EngineId("standard", "standard", "1.0"),
    zi_hour="split",
    meta={"description": "Jie-term months, 23:00-23:59 stays on the civil day"},
)

STANDARD = EngineSpec(kind="jie", id=STANDARD_SPEC.id, payload=STANDARD_SPEC)


# ============================================================
# ZI-ROLLOVER: 23:00 starts the next day
# ============================================================

ZI_ROLLOVER_SPEC = GanZhiSpec(
    id=EngineId("standard", "zi-rollover", "1.0"),
    zi_hour="roll",
    meta={"description": "Jie-term months, day changes at 23:00"},
)

ZI_ROLLOVER = EngineSpec(kind="jie", id=ZI_ROLLOVER_SPEC.id, payload=ZI_ROLLOVER_SPEC)


ALL_SPECS: Dict[str, EngineSpec] = {
    "standard": STANDARD,
    "zi-rollover": ZI_ROLLOVER,
}

DEFAULT_ENGINE = "standard"
