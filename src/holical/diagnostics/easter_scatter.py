#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple
from datetime import date

import holical
from holical.core.time import day_of_year
from holical.engines import hebrew as heb


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "holical[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "holical[diagnostics]"') from e


def days_since_equinox(d: date) -> int:
    """Days since the ecclesiastical equinox, with Mar 21 = 0."""
    return (d - date(d.year, 3, 21)).days


def rolling_median(np, y, win: int = 19):
    """Centered rolling median with edge padding."""
    if win < 3:
        return y.astype(float)
    if win % 2 == 0:
        win += 1
    k = win // 2
    ypad = np.pad(y, (k, k), mode="edge")
    out = np.empty_like(y, dtype=float)
    for i in range(len(y)):
        out[i] = float(np.median(ypad[i : i + win]))
    return out


@dataclass(frozen=True)
class Series:
    label: str
    fn: Callable[[int], date]
    color: str
    marker: str
    size: float = 14.0
    hollow: bool = False


SERIES: Dict[str, Series] = {
    "easter": Series("Easter Sunday", holical.easter_sunday, "tab:blue", "o"),
    "passover": Series(
        "Passover (15 Nisan)",
        lambda Y: holical.to_gregorian("hebrew", Y, heb.NISAN, 15),
        "tab:red", "o", size=22, hollow=True,
    ),
}


def build_series(np, fn: Callable[[int], date], start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        d = fn(int(Y))
        if metric == "doy":
            y[i] = float(day_of_year(d))
        elif metric == "since-equinox":
            y[i] = float(days_since_equinox(d))
        else:
            raise ValueError("metric must be 'doy' or 'since-equinox'")
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter and Passover dates across years.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--series", default="easter,passover", help="Comma list from: " + ",".join(SERIES))
    p.add_argument("--show-trend", action="store_true")
    p.add_argument("--trend-win", type=int, default=19, help="Rolling median window (odd recommended).")
    p.add_argument("--metric", choices=("since-equinox", "doy"), default="since-equinox")
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    names = [s.strip() for s in args.series.split(",") if s.strip()]
    unknown = [s for s in names if s not in SERIES]
    if unknown:
        raise SystemExit(f"Unknown series {unknown}. Available: {sorted(SERIES)}")

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day-of-year (Jan 1 = 1)" if args.metric == "doy" else "Days after March 21")
    ax.set_title("Easter and Passover dates")

    for name in names:
        st = SERIES[name]
        x, y = build_series(np, st.fn, args.start_year, args.end_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, linewidths=1.0, alpha=0.6, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color,
                       linewidths=0.0, alpha=0.4, label=st.label)
        if args.show_trend:
            ax.plot(x, rolling_median(np, y, win=int(args.trend_win)), color=st.color, linewidth=1.8)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)

    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
