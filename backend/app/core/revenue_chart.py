"""Revenue Chart — calendar ordering and y-axis labels for the revenue series.

Invariants:
    - Month labels sort Jan..Dec (full names or 3-letter abbreviations, any case)
    - Unrecognized labels sort after all months, keeping their original order
    - y-axis top is the highest revenue rounded up to the next thousand
"""

import math

_MONTHS = (
    "jan", "feb", "mar", "apr", "may", "jun",
    "jul", "aug", "sep", "oct", "nov", "dec",
)
_AXIS_STEP = 1000


def month_index(label: str) -> int | None:
    """0-based calendar index of a month label, or None if unrecognized."""
    key = label.strip().lower()[:3]
    if key in _MONTHS:
        return _MONTHS.index(key)
    return None


def sort_by_calendar_month(rows: list[dict]) -> list[dict]:
    """Stable sort of revenue rows by the calendar position of row["month"]."""
    def key(row: dict) -> int:
        idx = month_index(str(row["month"]))
        return idx if idx is not None else len(_MONTHS)
    return sorted(rows, key=key)


def generate_y_axis(revenue: list[dict]) -> tuple[list[str], int]:
    """Return (labels, top_label) for the revenue chart's y-axis.

    Labels run from the top down to $0K in steps of 1000.
    """
    highest = max((float(r["revenue"]) for r in revenue), default=0.0)
    top_label = int(math.ceil(highest / _AXIS_STEP) * _AXIS_STEP)
    labels = [
        f"${value // _AXIS_STEP}K"
        for value in range(top_label, -1, -_AXIS_STEP)
    ]
    return labels, top_label
