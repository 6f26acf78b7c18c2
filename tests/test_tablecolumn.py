import pytest

from grinminer.tablecolumn import ABSOLUTE, PERCENT, HAlign, Order, TableColumn


def _col(width, alignment=HAlign.LEFT):
    col = TableColumn("gps", "GPS").align(alignment)
    col.display_width = width
    return col


def test_defaults():
    col = TableColumn("name", "Name")
    assert col.order is Order.EQUAL
    assert col.default_order is Order.LESS
    assert col.alignment is HAlign.LEFT
    assert col.requested_width is None
    assert col.selected is False


def test_builders_chain_and_record():
    col = TableColumn("name", "Name")
    assert col.ordering(Order.GREATER) is col
    assert col.width(20) is col
    assert col.requested_width == (ABSOLUTE, 20)
    col.width_percent(10)
    assert col.requested_width == (PERCENT, 10)
    assert col.default_order is Order.GREATER


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        TableColumn("a", "A").width(-1)
    with pytest.raises(ValueError):
        TableColumn("a", "A").width_percent(-5)


@pytest.mark.parametrize("order,mark", [(Order.LESS, "^"), (Order.GREATER, "v"), (Order.EQUAL, " ")])
def test_header_marker(order, mark):
    col = _col(10)
    col.order = order
    header = col.format_header()
    assert header.endswith(f" [{mark}]")
    assert header.startswith("GPS")
    assert len(header) == 10


def test_header_right_aligned():
    header = _col(12, HAlign.RIGHT).format_header()
    assert header[: -4].endswith("GPS")
    assert header[: -4].strip() == "GPS"


def test_header_does_not_truncate_long_title():
    col = _col(2)
    assert col.format_header() == "GPS [ ]"


def test_row_left():
    row = _col(5).format_row("ab")
    assert len(row) == 6
    assert row.startswith("ab")
    assert row.strip() == "ab"


def test_row_right():
    row = _col(5, HAlign.RIGHT).format_row("ab")
    assert row.endswith("ab ")
    assert len(row) == 6


def test_row_center_puts_extra_space_on_right():
    row = _col(5, HAlign.CENTER).format_row("ab")
    assert row[1:3] == "ab"
    assert len(row) == 6


def test_row_wider_than_column_kept_whole():
    row = _col(1).format_row("abcdef")
    assert row == "abcdef "