from __future__ import annotations

import argparse
from datetime import date
from typing import List, Tuple

import holical


DEFAULT_COLUMNS: List[Tuple[str, str]] = [
    ("IL", "roshHashanah"),
    ("IL", "passover"),
    ("CH-OW", "ascensionDay"),
    ("CA-PE", "islanderDay"),
    ("US", "thanksgivingDay"),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def parse_columns(arg: str) -> List[Tuple[str, str]]:
    """
    Parse columns from CLI.
    Example:
      --columns "IL:passover,CH-OW:easterMonday"
    """
    out: List[Tuple[str, str]] = []
    for it in (x.strip() for x in arg.split(",")):
        if not it:
            continue
        if ":" not in it:
            raise SystemExit(f"column '{it}' must look like REGION:key")
        region, key = it.split(":", 1)
        out.append((region.strip(), key.strip()))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Print a year-by-year table of selected holidays.")
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument("--columns", type=str, default="", help='Comma list like "IL:passover,CA:goodFriday".')
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd")
    args = p.parse_args(argv)

    columns = parse_columns(args.columns) if args.columns else DEFAULT_COLUMNS

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [f"{r}:{k}" for r, k in columns]
    colw = [5] + [max(10, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for Y in range(Y0, Y1 + 1):
        row = [str(Y).ljust(colw[0])]
        for (region, key), w in zip(columns, colw[1:]):
            h = holical.compute(region, Y).get(key)
            cell = "-" if h is None else fmt(h.date)
            if h is not None and h.date.year != Y:
                cell += "*"
            row.append(cell.ljust(w))
        print("  ".join(row))

    print("\n'-' = not in effect that year, '*' = date falls outside the year")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
