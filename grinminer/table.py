"""A sortable, scrollable multi-column table view rendered as text.

Items shown in the table must provide ``to_column(column)``, returning the
text of a cell, and ``compare(other, column)``, returning a negative number,
zero or a positive number (or an :class:`Order`) for less, equal or greater.
"""

import functools
import math
from enum import Enum, auto
from typing import Callable, Optional

from .tablecolumn import ABSOLUTE, PERCENT, Order, TableColumn

_HEADER_SEP = "╷ "
_RULE_SEP = "┴─"
_ROW_SEP = "┆ "
_RULE = "─"


class Key(Enum):
    """Keys the table view reacts to; any other input is ignored."""

    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    HOME = auto()
    END = auto()
    ENTER = auto()
    TAB = auto()
    ESC = auto()


def _compare_value(result) -> int:
    if isinstance(result, Order):
        return result.value
    return result


class _Scroll:
    """Tracks which slice of the rows fits into the visible area."""

    def __init__(self):
        self.start_line = 0
        self.view_height = 0
        self.content_height = 0

    def set_heights(self, view_height: int, content_height: int) -> None:
        self.view_height = view_height
        self.content_height = content_height
        self.start_line = min(self.start_line, max(content_height - view_height, 0))

    def scroll_to(self, line: int) -> None:
        self.start_line = min(self.start_line, line)
        self.start_line = max(self.start_line, line + 1 - self.view_height)
        self.start_line = max(self.start_line, 0)


class TableView:
    """A table of items with selectable rows and sortable columns."""

    def __init__(self):
        self._enabled = True
        self._scroll = _Scroll()
        self._last_size = (0, 0)
        self._laid_out = False
        self._column_select = False
        self._columns: list = []
        self._column_indices: dict = {}
        self._focus = 0
        self._items: list = []
        self._rows_to_items: list = []
        self._on_sort: Optional[Callable] = None
        self._on_submit: Optional[Callable] = None
        self._on_select: Optional[Callable] = None

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> list:
        """The items in storage order."""
        return list(self._items)

    @property
    def rows(self) -> list:
        """The items in display order."""
        return [self._items[i] for i in self._rows_to_items]

    @property
    def columns(self) -> list:
        """The table's columns, left to right."""
        return list(self._columns)

    # configuration ----------------------------------------------------

    def column(self, column, title, callback=None) -> "TableView":
        """Add a column; ``callback`` may configure the new TableColumn.

        The first column added becomes the default sort column.
        """
        self._column_indices[column] = len(self._columns)
        new_column = TableColumn(column, str(title))
        if callback is not None:
            new_column = callback(new_column)
        self._columns.append(new_column)
        if len(self._columns) == 1:
            return self.default_column(column)
        return self

    def default_column(self, column) -> "TableView":
        """Make ``column`` the active column, sorted in its default order."""
        if column in self._column_indices:
            for c in self._columns:
                c.selected = c.column == column
                c.order = c.default_order if c.selected else Order.EQUAL
        return self

    def sort_by(self, column, order: Order) -> None:
        """Sort the table by ``column`` in ``order``."""
        order = Order(order)
        if column in self._column_indices:
            for c in self._columns:
                c.selected = c.column == column
                c.order = order if c.selected else Order.EQUAL
        self._sort_items(column, order)

    def sort(self) -> None:
        """Sort again by the active column and its order."""
        current = self.order()
        if current is not None:
            self._sort_items(*current)

    def order(self) -> Optional[tuple]:
        """The active sort column and its order, or None when unsorted."""
        for c in self._columns:
            if c.order is not Order.EQUAL:
                return c.column, c.order
        return None

    def disable(self) -> None:
        self._enabled = False

    def enable(self) -> None:
        self._enabled = True

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = bool(enabled)

    def is_enabled(self) -> bool:
        return self._enabled

    def set_on_sort(self, cb: Callable) -> None:
        """Call ``cb(column, order)`` when a column is sorted with Enter."""
        self._on_sort = cb

    def set_on_submit(self, cb: Callable) -> None:
        """Call ``cb(row, index)`` when Enter is pressed on a selected item."""
        self._on_submit = cb

    def set_on_select(self, cb: Callable) -> None:
        """Call ``cb(row, index)`` when the selection moves to another row."""
        self._on_select = cb

    # items ------------------------------------------------------------

    def clear(self) -> None:
        """Remove all items."""
        self._items.clear()
        self._rows_to_items.clear()
        self._focus = 0

    def is_empty(self) -> bool:
        return not self._items

    def row(self) -> Optional[int]:
        """The selected row, or None when the table is empty."""
        return None if not self._items else self._focus

    def set_selected_row(self, row_index: int) -> None:
        self._focus = row_index
        self._scroll.scroll_to(row_index)

    def set_items(self, items) -> None:
        """Replace the items, keeping the active sort order."""
        self._items = list(items)
        self._rows_to_items = list(range(len(self._items)))
        current = self.order()
        if current is not None:
            self.sort_by(*current)
        self._scroll.set_heights(self._view_height(), len(self._rows_to_items))
        self.set_selected_row(0)

    def item(self) -> Optional[int]:
        """Storage index of the selected item, or None when the table is empty."""
        if not self._items:
            return None
        return self._rows_to_items[self._focus]

    def set_selected_item(self, item_index: int) -> None:
        """Select the row showing the item at ``item_index`` in storage."""
        if 0 <= item_index < len(self._items):
            for row, index in enumerate(self._rows_to_items):
                if index == item_index:
                    self._focus = row
                    self._scroll.scroll_to(row)
                    break

    def insert_item(self, item) -> None:
        """Add an item, keeping the active sort order."""
        self._items.append(item)
        self._rows_to_items.append(len(self._items) - 1)
        self._scroll.set_heights(self._view_height(), len(self._rows_to_items))
        current = self.order()
        if current is not None:
            self.sort_by(*current)

    def remove_item(self, item_index: int):
        """Remove and return the item at ``item_index``, or None if there is none."""
        if not 0 <= item_index < len(self._items):
            return None
        if self.item() == item_index:
            self._focus_up(1)
        self._rows_to_items = [
            i - 1 if i > item_index else i for i in self._rows_to_items if i != item_index
        ]
        self._scroll.set_heights(self._view_height(), len(self._rows_to_items))
        removed = self._items.pop(item_index)
        self._focus = min(self._focus, max(len(self._items) - 1, 0))
        return removed

    def take_items(self) -> list:
        """Remove all items and return them in storage order."""
        self._scroll.set_heights(self._view_height(), 0)
        self.set_selected_row(0)
        self._rows_to_items.clear()
        items, self._items = self._items, []
        return items

    # layout and input -------------------------------------------------

    def _view_height(self) -> int:
        return max(self._last_size[1] - 2, 0)

    def layout(self, width: int, height: int) -> None:
        """Work out column widths and the visible rows for a given size."""
        if (width, height) == self._last_size and self._laid_out:
            return
        item_count = len(self._items)
        column_count = len(self._columns)
        sized = [c for c in self._columns if c.requested_width is not None]
        unsized = [c for c in self._columns if c.requested_width is None]

        available = max(width - max(column_count - 1, 0) * 3, 0)
        if max(height - 1, 0) < item_count:
            available = max(available - 2, 0)

        remaining = available
        for c in sized:
            kind, requested = c.requested_width
            if kind == PERCENT:
                c.display_width = min(math.ceil(width / 100.0 * requested), remaining)
            elif kind == ABSOLUTE:
                c.display_width = requested
            remaining = max(remaining - c.display_width, 0)

        for c in unsized:
            c.display_width = remaining // len(unsized)

        self._scroll.set_heights(max(height - 2, 0), item_count)
        self._last_size = (width, height)
        self._laid_out = True

    def on_event(self, key) -> bool:
        """Handle a key press; returns True when the table consumed it."""
        if not self._enabled or not isinstance(key, Key):
            return False
        last_focus = self._focus

        if key in (Key.RIGHT, Key.LEFT):
            if self._column_select:
                moved = self._column_next() if key is Key.RIGHT else self._column_prev()
                if not moved:
                    return False
            else:
                self._column_select = True
        elif key is Key.UP:
            if not (self._focus > 0 or self._column_select):
                return False
            if self._column_select:
                self._column_cancel()
            else:
                self._focus_up(1)
        elif key is Key.DOWN:
            if not (self._focus + 1 < len(self._items) or self._column_select):
                return False
            if self._column_select:
                self._column_cancel()
            else:
                self._focus_down(1)
        elif key is Key.PAGE_UP:
            self._column_cancel()
            self._focus_up(10)
        elif key is Key.PAGE_DOWN:
            self._column_cancel()
            self._focus_down(10)
        elif key is Key.HOME:
            self._column_cancel()
            self._focus = 0
        elif key is Key.END:
            self._column_cancel()
            self._focus = max(len(self._items) - 1, 0)
        elif key is Key.ENTER:
            if self._column_select:
                self._select_column()
                if self._on_sort is not None:
                    active = self._columns[self._active_column()]
                    self._on_sort(active.column, active.order)
                    return True
            elif self._items and self._on_submit is not None:
                self._on_submit(self.row(), self.item())
                return True
        else:
            return False

        self._scroll.scroll_to(self._focus)
        if self._column_select:
            return True
        if self._items and last_focus != self._focus:
            if self._on_select is not None:
                self._on_select(self.row(), self.item())
            return True
        return False

    # drawing ----------------------------------------------------------

    def _line(self, cells, sep: str) -> str:
        parts = []
        last = len(self._columns) - 1
        for index, (column, text) in enumerate(zip(self._columns, cells)):
            size = column.display_width + 1
            text = text[:size].ljust(size)
            if index < last:
                text += sep
            parts.append(text)
        return "".join(parts)

    def render(self) -> list:
        """Text lines of the table: header, rule and the visible rows."""
        lines = [
            self._line((c.format_header() for c in self._columns), _HEADER_SEP),
            self._line((_RULE * (c.display_width + 1) for c in self._columns), _RULE_SEP),
        ]
        rows = self._rows_to_items
        if self._laid_out:
            start = self._scroll.start_line
            rows = rows[start : start + self._scroll.view_height]
        for index in rows:
            item = self._items[index]
            cells = (c.format_row(item.to_column(c.column)) for c in self._columns)
            lines.append(self._line(cells, _ROW_SEP))
        return lines

    # internals --------------------------------------------------------

    def _sort_items(self, column, order: Order) -> None:
        if not self._items:
            return
        old_item = self.item()
        items = self._items

        def compare(a, b):
            if order is Order.LESS:
                return _compare_value(items[a].compare(items[b], column))
            return _compare_value(items[b].compare(items[a], column))

        self._rows_to_items = sorted(self._rows_to_items, key=functools.cmp_to_key(compare))
        self.set_selected_item(old_item)

    def _focus_up(self, n: int) -> None:
        self._focus -= min(self._focus, n)

    def _focus_down(self, n: int) -> None:
        self._focus = min(self._focus + n, max(len(self._items) - 1, 0))

    def _active_column(self) -> int:
        return next((i for i, c in enumerate(self._columns) if c.selected), 0)

    def _column_cancel(self) -> None:
        self._column_select = False
        for c in self._columns:
            c.selected = c.order is not Order.EQUAL

    def _column_next(self) -> bool:
        index = self._active_column()
        if index < len(self._columns) - 1:
            self._columns[index].selected = False
            self._columns[index + 1].selected = True
            return True
        return False

    def _column_prev(self) -> bool:
        index = self._active_column()
        if index > 0:
            self._columns[index].selected = False
            self._columns[index - 1].selected = True
            return True
        return False

    def _select_column(self) -> None:
        nxt = self._active_column()
        column = self._columns[nxt].column
        current = next(
            (i for i, c in enumerate(self._columns) if c.order is not Order.EQUAL), 0
        )
        if current != nxt:
            order = self._columns[nxt].default_order
        elif self._columns[current].order is Order.LESS:
            order = Order.GREATER
        else:
            order = Order.LESS
        self.sort_by(column, order)