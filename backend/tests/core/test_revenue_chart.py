"""Tests for revenue chart helpers — calendar ordering and y-axis labels."""

from app.core.revenue_chart import generate_y_axis, month_index, sort_by_calendar_month


def test_month_index_accepts_names_and_abbreviations():
    assert month_index("Jan") == 0
    assert month_index("december") == 11
    assert month_index(" SEP ") == 8
    assert month_index("Q1") is None


def test_sort_by_calendar_month_keeps_unknown_labels_last():
    rows = [{"month": "Dec"}, {"month": "Total"}, {"month": "Feb"}, {"month": "Jan"}]
    assert [r["month"] for r in sort_by_calendar_month(rows)] == [
        "Jan", "Feb", "Dec", "Total",
    ]


def test_y_axis_rounds_top_up_to_next_thousand():
    labels, top = generate_y_axis([{"revenue": 4700}, {"revenue": 1200}])
    assert top == 5000
    assert labels == ["$5K", "$4K", "$3K", "$2K", "$1K", "$0K"]


def test_y_axis_for_empty_series():
    assert generate_y_axis([]) == (["$0K"], 0)
