# tests/test_diagnostics.py

from datetime import date

import numpy as np
import pytest

from holical.diagnostics import easter_scatter, holiday_table


def test_parse_columns():
    assert holiday_table.parse_columns("IL:passover, CA:goodFriday,") == [("IL", "passover"), ("CA", "goodFriday")]
    with pytest.raises(SystemExit):
        holiday_table.parse_columns("passover")


def test_days_since_equinox():
    assert easter_scatter.days_since_equinox(date(2024, 3, 31)) == 10
    assert easter_scatter.days_since_equinox(date(2025, 3, 21)) == 0


def test_build_series():
    years, y = easter_scatter.build_series(
        np, easter_scatter.SERIES["easter"].fn, 2024, 2025, metric="since-equinox"
    )
    assert list(years) == [2024, 2025]
    assert list(y) == [10.0, 30.0]

    _, doy = easter_scatter.build_series(np, easter_scatter.SERIES["passover"].fn, 2024, 2024, metric="doy")
    assert doy[0] == 114.0


def test_rolling_median():
    y = np.array([1, 9, 2, 3, 4], dtype=float)
    assert list(easter_scatter.rolling_median(np, y, win=3)) == [1.0, 2.0, 3.0, 3.0, 4.0]
