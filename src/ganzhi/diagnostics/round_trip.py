from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List, Optional

import ganzhi


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def roundtrip_test(N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    """gregorian -> lunar -> gregorian, plus the 60-day period of the day pillar."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        t = ganzhi.lunar_date(d0)
        back = ganzhi.lunar_to_solar(t)
        if back != d0:
            failures += 1
            print("\nFAIL (lunar)")
            print("d0:", d0)
            print("lunar:", t)
            print("back:", back)
            print("explain:", ganzhi.explain(d0))
            if failures >= max_failures:
                return failures

        d60 = d0 + timedelta(days=60)
        if d60 <= end:
            a = ganzhi.compute_ganzhi(d0, include_hour=False).day
            b = ganzhi.compute_ganzhi(d60, include_hour=False).day
            if a != b:
                failures += 1
                print("\nFAIL (day cycle)", d0, a, d60, b)
                if failures >= max_failures:
                    return failures

    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian -> lunar -> gregorian.")
    p.add_argument("--N", type=int, default=2000, help="Trials.")
    p.add_argument("--start", type=str, default="1900-01-31", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2100-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)
    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(args.N, start, end, args.seed, max_failures=args.max_failures)
    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
