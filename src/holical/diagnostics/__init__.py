"""Diagnostics package.

- holiday_table, round_trip: always available, light-weight checks
- easter_scatter: optional plotting (requires the diagnostics extras)
"""

__all__ = ["holiday_table", "round_trip", "easter_scatter"]
