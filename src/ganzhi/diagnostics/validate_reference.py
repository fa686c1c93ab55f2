#!/usr/bin/env python3
"""
Reference self-test: recompute the four pillars for a moment and compare them
with an expected "辛未年 丙申月 庚辰日 癸未时" string.
"""
from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

import ganzhi
from ganzhi.core.errors import MalformedReferenceError
from ganzhi.core.types import CivilDateTime, PillarSet
from ganzhi.engines.cycle import GanZhi, parse

PILLARS: Tuple[str, ...] = ("year", "month", "day", "hour")
SUFFIXES: Tuple[str, ...] = ("年", "月", "日", "时")

_REFERENCE_RE = re.compile(r"^\s*(\S\S)年\s*(\S\S)月\s*(\S\S)日\s*(\S\S)时\s*$")


@dataclass(frozen=True)
class PillarCheck:
    pillar: str
    expected: str
    actual: Optional[str]

    @property
    def matches(self) -> bool:
        return self.expected == self.actual


@dataclass(frozen=True)
class ValidationResult:
    civil: CivilDateTime
    checks: Tuple[PillarCheck, ...]

    @property
    def is_valid(self) -> bool:
        return all(c.matches for c in self.checks)

    @property
    def mismatches(self) -> List[PillarCheck]:
        return [c for c in self.checks if not c.matches]

    def summary(self) -> str:
        if self.is_valid:
            return f"{self.civil.display()}: OK"
        parts = [f"{c.pillar} expected {c.expected} got {c.actual}" for c in self.mismatches]
        return f"{self.civil.display()}: MISMATCH ({'; '.join(parts)})"


def parse_reference(text: str) -> Tuple[GanZhi, GanZhi, GanZhi, GanZhi]:
    """Split a four-pillar reference string into its GanZhi values."""
    m = _REFERENCE_RE.match(text)
    if m is None:
        raise MalformedReferenceError(f"Expected '干支年 干支月 干支日 干支时', got {text!r}")
    out = []
    for name, suffix in zip(m.groups(), SUFFIXES):
        try:
            out.append(parse(name))
        except ValueError as e:
            raise MalformedReferenceError(f"{name}{suffix}: {e}") from e
    return out[0], out[1], out[2], out[3]


def compare(pillars: PillarSet, expected: str) -> ValidationResult:
    wanted = parse_reference(expected)
    actual = (pillars.year, pillars.month, pillars.day, pillars.hour)
    checks = tuple(
        PillarCheck(name, str(w), None if a is None else str(a))
        for name, w, a in zip(PILLARS, wanted, actual)
    )
    return ValidationResult(civil=pillars.civil, checks=checks)


# Known almanac readings. The last one is a late 子 hour moment and is only
# reproduced when the day rolls over at 23:00.
REFERENCE_CASES: Tuple[Tuple[CivilDateTime, str, str], ...] = (
    (CivilDateTime(1991, 9, 7, 14, 30), "辛未年 丙申月 庚辰日 癸未时", "standard"),
    (CivilDateTime(2001, 12, 10, 9, 28), "辛巳年 庚子月 丁未日 乙巳时", "standard"),
    (CivilDateTime(2025, 2, 25, 23, 30), "乙巳年 戊寅月 丙寅日 戊子时", "zi-rollover"),
)


def run_references(engine: Optional[str] = None) -> List[ValidationResult]:
    """Validate every reference case, on its own engine unless one is forced."""
    return [
        ganzhi.validate(civil, expected, engine=engine or eng)
        for civil, expected, eng in REFERENCE_CASES
    ]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Check the pillar engine against known almanac readings.")
    p.add_argument("--engine", default=None, help="Force one engine for every case.")
    args = p.parse_args(argv)

    results = run_references(args.engine)
    for res in results:
        print(res.summary())
    failed = sum(1 for r in results if not r.is_valid)
    print(f"\n{len(results) - failed}/{len(results)} passed")
    return 0 if failed == 0 else 1


if __name__ == "__main__":
    raise SystemExit(main())
