from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import holical


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(calendar: str, N: int, start: date, end: date, seed: int, *, max_failures: int) -> int:
    from holical.api import engine

    conv = engine().lunisolar
    random.seed(seed)
    failures = 0

    for _ in range(N):
        d0 = random_date(start, end)
        t = conv.from_gregorian(d0, calendar)
        back = conv.to_gregorian(calendar, t.year, t.month, t.day, t.is_leap_month)
        if back != d0:
            failures += 1
            print("\nFAIL")
            print("calendar:", calendar)
            print("d0:", d0)
            print("label:", t)
            print("back:", back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random Gregorian -> lunisolar -> Gregorian round trips.")
    p.add_argument("--calendars", default="", help="Comma list (default: all registered)")
    p.add_argument("-N", type=int, default=2000)
    p.add_argument("--start", default="1600-01-01")
    p.add_argument("--end", default="2400-12-31")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max-failures", type=int, default=10)
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars) if args.calendars else holical.list_calendars()
    start, end = parse_date(args.start), parse_date(args.end)

    total = 0
    for cal in calendars:
        n = roundtrip_test(cal, args.N, start, end, args.seed, max_failures=args.max_failures)
        print(f"{cal}: {args.N} samples, {n} failures")
        total += n
    return 1 if total else 0


if __name__ == "__main__":
    raise SystemExit(main())
