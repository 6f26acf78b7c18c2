"""Columns of a text table: title, alignment, sort order and width."""

from enum import Enum

PERCENT = "percent"
ABSOLUTE = "absolute"


class Order(Enum):
    """Sort direction of a column; EQUAL means the column is not sorted on."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class HAlign(Enum):
    """Horizontal alignment of a column's text."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


def _pad(text: str, width: int, alignment: HAlign) -> str:
    pad = max(width - len(text), 0)
    if alignment is HAlign.LEFT:
        return text + " " * pad
    if alignment is HAlign.RIGHT:
        return " " * pad + text
    left = pad // 2
    return " " * left + text + " " * (pad - left)


_ORDER_MARKS = {Order.LESS: "^", Order.GREATER: "v", Order.EQUAL: " "}


class TableColumn:
    """One column of a table view.

    The configuration methods return the column itself so they can be chained.
    ``requested_width`` is None or a pair of ``PERCENT``/``ABSOLUTE`` and a
    number; ``display_width`` is the width worked out at layout time.
    """

    def __init__(self, column, title: str):
        self.column = column
        self.title = str(title)
        self.selected = False
        self.alignment = HAlign.LEFT
        self.order = Order.EQUAL
        self.display_width = 0
        self.default_order = Order.LESS
        self.requested_width = None

    def __repr__(self):
        return (
            f"TableColumn(column={self.column!r}, title={self.title!r}, "
            f"order={self.order.name}, width={self.display_width})"
        )

    def ordering(self, order: Order) -> "TableColumn":
        """Set the order used when the column is first sorted on."""
        self.default_order = Order(order)
        return self

    def align(self, alignment: HAlign) -> "TableColumn":
        """Set the horizontal alignment of the column's text."""
        self.alignment = HAlign(alignment)
        return self

    def width(self, width: int) -> "TableColumn":
        """Request a fixed width in characters."""
        if width < 0:
            raise ValueError("column width may not be negative")
        self.requested_width = (ABSOLUTE, width)
        return self

    def width_percent(self, width: int) -> "TableColumn":
        """Request a percentage of the whole table's width."""
        if width < 0:
            raise ValueError("column width may not be negative")
        self.requested_width = (PERCENT, width)
        return self

    def format_header(self) -> str:
        """The header text: the aligned title followed by the sort marker."""
        title = _pad(self.title, max(self.display_width - 4, 0), self.alignment)
        return f"{title} [{_ORDER_MARKS[self.order]}]"

    def format_row(self, value: str) -> str:
        """One cell's text, aligned to the column width, with a trailing space."""
        return _pad(str(value), self.display_width, self.alignment) + " "