from enum import Enum

import pytest

from grinminer.table import Key, TableView
from grinminer.tablecolumn import Order


class Col(Enum):
    NAME = 1
    COUNT = 2


class Row:
    def __init__(self, name, count):
        self.name = name
        self.count = count

    def to_column(self, column):
        return self.name if column is Col.NAME else str(self.count)

    def compare(self, other, column):
        a, b = (self.name, other.name) if column is Col.NAME else (self.count, other.count)
        return (a > b) - (a < b)

    def __repr__(self):
        return f"Row({self.name!r}, {self.count})"


def make_table():
    table = (
        TableView()
        .column(Col.NAME, "Name", lambda c: c.width(10))
        .column(Col.COUNT, "Count", lambda c: c.width(10))
    )
    table.set_items([Row("cherry", 1), Row("apple", 3), Row("banana", 2)])
    return table


def names(rows):
    return [r.name for r in rows]


def test_first_column_is_default_sort():
    table = make_table()
    assert table.order() == (Col.NAME, Order.LESS)


def test_set_items_sorts_by_active_column():
    table = make_table()
    assert names(table.rows) == ["apple", "banana", "cherry"]
    assert names(table.items) == ["cherry", "apple", "banana"]
    assert table.row() == 0
    assert table.item() == 1


def test_sort_by_greater_reverses_and_keeps_selection():
    table = make_table()
    table.sort_by(Col.NAME, Order.GREATER)
    assert names(table.rows) == ["cherry", "banana", "apple"]
    assert table.item() == 1
    assert table.order() == (Col.NAME, Order.GREATER)


def test_sort_by_other_column():
    table = make_table()
    table.sort_by(Col.COUNT, Order.LESS)
    assert names(table.rows) == ["cherry", "banana", "apple"]
    assert table.order() == (Col.COUNT, Order.LESS)


def test_insert_item_keeps_order():
    table = make_table()
    table.insert_item(Row("aardvark", 9))
    assert names(table.rows) == ["aardvark", "apple", "banana", "cherry"]
    assert len(table) == 4


def test_remove_item():
    table = make_table()
    removed = table.remove_item(0)
    assert removed.name == "cherry"
    assert names(table.rows) == ["apple", "banana"]
    assert table.remove_item(5) is None
    assert len(table) == 2


def test_take_items_empties_table():
    table = make_table()
    taken = table.take_items()
    assert names(taken) == ["cherry", "apple", "banana"]
    assert table.is_empty()
    assert table.row() is None
    assert table.item() is None


def test_clear():
    table = make_table()
    table.clear()
    assert len(table) == 0
    assert table.rows == []


def test_set_selected_item():
    table = make_table()
    table.set_selected_item(0)
    assert table.item() == 0
    assert table.row() == 2


def test_disabled_table_ignores_keys():
    table = make_table()
    table.disable()
    assert table.is_enabled() is False
    assert table.on_event(Key.DOWN) is False
    table.set_enabled(True)
    assert table.is_enabled() is True


def test_down_moves_focus_and_calls_on_select():
    table = make_table()
    selected = []
    table.set_on_select(lambda row, index: selected.append((row, index)))
    assert table.on_event(Key.DOWN) is True
    assert selected == [(1, 2)]
    assert table.row() == 1


def test_up_at_top_is_ignored():
    table = make_table()
    assert table.on_event(Key.UP) is False
    assert table.row() == 0


def test_unknown_key_ignored():
    table = make_table()
    assert table.on_event(Key.TAB) is False
    assert table.on_event("x") is False


def test_page_down_and_end_clamp_to_last_row():
    table = make_table()
    table.on_event(Key.PAGE_DOWN)
    assert table.row() == 2
    table.on_event(Key.HOME)
    assert table.row() == 0
    table.on_event(Key.END)
    assert table.row() == 2


def test_column_select_and_sort_with_enter():
    table = make_table()
    sorts = []
    table.set_on_sort(lambda column, order: sorts.append((column, order)))
    assert table.on_event(Key.RIGHT) is True
    assert table.on_event(Key.RIGHT) is True
    assert table.on_event(Key.RIGHT) is False
    assert table.on_event(Key.ENTER) is True
    assert sorts == [(Col.COUNT, Order.LESS)]
    assert names(table.rows) == ["cherry", "banana", "apple"]
    assert table.on_event(Key.ENTER) is True
    assert sorts[-1] == (Col.COUNT, Order.GREATER)
    assert names(table.rows) == ["apple", "banana", "cherry"]


def test_enter_submits_selected_item():
    table = make_table()
    submitted = []
    table.set_on_submit(lambda row, index: submitted.append((row, index)))
    assert table.on_event(Key.ENTER) is True
    assert submitted == [(0, table.item())]


def test_layout_fills_width_with_unsized_column():
    table = TableView().column(Col.NAME, "Name", lambda c: c.width(10)).column(
        Col.COUNT, "Count"
    )
    table.layout(40, 10)
    widths = [c.display_width for c in table.columns]
    assert widths[0] == 10
    assert sum(widths) + 3 * (len(widths) - 1) == 40


def test_layout_percent_never_exceeds_available():
    table = TableView().column(Col.NAME, "Name", lambda c: c.width_percent(100)).column(
        Col.COUNT, "Count", lambda c: c.width_percent(100)
    )
    table.layout(30, 10)
    total = sum(c.display_width for c in table.columns)
    assert total <= 30 - 3


def test_render_header_and_rows():
    table = make_table()
    table.layout(40, 10)
    lines = table.render()
    assert len(lines) == 2 + 3
    assert "Name" in lines[0] and "Count" in lines[0]
    assert "[^]" in lines[0]
    assert [line.split("┆")[0].strip() for line in lines[2:]] == ["apple", "banana", "cherry"]


def test_render_scrolls_to_focus():
    table = make_table()
    table.layout(40, 4)
    table.on_event(Key.END)
    lines = table.render()
    assert len(lines) == 4
    assert lines[-1].split("┆")[0].strip() == "cherry"
    table.on_event(Key.HOME)
    assert table.render()[2].split("┆")[0].strip() == "apple"


@pytest.mark.parametrize("order", [Order.LESS, Order.GREATER])
def test_sort_reapplies_active_order(order):
    table = make_table()
    table.sort_by(Col.COUNT, order)
    before = names(table.rows)
    table.sort()
    assert names(table.rows) == before
    assert table.order() == (Col.COUNT, order)