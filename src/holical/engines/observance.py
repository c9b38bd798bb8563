from __future__ import annotations

from datetime import date, timedelta

from ..core.types import SATURDAY, SUNDAY, ObservanceShift


def is_weekend(d: date) -> bool:
    return d.weekday() in (SATURDAY, SUNDAY)


def apply_shift(d: date, shift: ObservanceShift) -> date:
    """Move a weekend holiday according to `shift`; weekdays are unchanged."""
    if shift == ObservanceShift.NONE or not is_weekend(d):
        return d
    if shift == ObservanceShift.NEXT_MONDAY:
        return d + timedelta(days=7 - d.weekday())
    if shift == ObservanceShift.NEAREST_WEEKDAY:
        return d - timedelta(days=1) if d.weekday() == SATURDAY else d + timedelta(days=1)
    raise ValueError(f"Unknown observance shift {shift!r}")
