from __future__ import annotations

from typing import Any, Optional


class HolicalError(Exception):
    """Base error.

    `key` and `rule` are filled in by the holiday engine when the error was
    raised while evaluating a catalog descriptor.
    """

    def __init__(self, message: str = "", *, key: Optional[str] = None, rule: Any = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.rule = rule

    def annotate(self, *, key: Optional[str] = None, rule: Any = None) -> "HolicalError":
        if self.key is None:
            self.key = key
        if self.rule is None:
            self.rule = rule
        return self

    def __str__(self) -> str:
        parts = [self.message]
        if self.key is not None:
            parts.append(f"[holiday={self.key}]")
        if self.rule is not None:
            parts.append(f"[rule={self.rule!r}]")
        return " ".join(p for p in parts if p)


class InvalidRuleError(HolicalError, ValueError):
    """Raised when a rule is constructed with out-of-range parameters."""

class InvalidDateError(HolicalError, ValueError):
    """A rule produced a calendrically impossible date (e.g. Feb 29 in a common year)."""

class RuleUnsatisfiableError(HolicalError, ValueError):
    """An nth-weekday rule has no matching occurrence in the month."""

class UnsupportedYearError(HolicalError, ValueError):
    """Year outside the valid domain of an algorithm."""

class UnsupportedCalendarError(HolicalError, LookupError):
    """Unknown lunisolar calendar name."""

class InvalidCalendarDateError(HolicalError, ValueError):
    """Month/day out of range for a lunisolar year, or a leap month in a common year."""

class DuplicateHolidayKeyError(HolicalError, ValueError):
    """Two descriptors of one region share a key (catalog defect)."""

class UnknownLocaleError(HolicalError, LookupError):
    """No name registered for the requested locale."""

class UnknownRegionError(HolicalError, LookupError):
    """Region id not present in the registry."""

class UnknownTimezoneError(HolicalError, LookupError):
    """Timezone identifier not found in the IANA database."""
