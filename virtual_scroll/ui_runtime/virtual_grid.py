"""Two-axis virtual grid built from independent row and column lists."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeVar

from virtual_scroll.ui_runtime.virtual_list import (
    ItemSizeSpec,
    VirtualListLayout,
    compute_virtual_list,
)


@dataclass(frozen=True, slots=True)
class CellCoord:
    """Grid cell coordinate in row/column space."""

    row: int
    col: int


@dataclass(frozen=True, slots=True)
class VirtualGridLayout:
    """Render window of a grid whose rows and columns scroll independently."""

    horizontal: VirtualListLayout
    vertical: VirtualListLayout

    @property
    def rendered_row_indexes(self) -> tuple[int, ...]:
        return self.vertical.rendered_indexes

    @property
    def rendered_column_indexes(self) -> tuple[int, ...]:
        return self.horizontal.rendered_indexes

    @property
    def total_width(self) -> float:
        return self.horizontal.total_size

    @property
    def total_height(self) -> float:
        return self.vertical.total_size

    @property
    def offset_left(self) -> float:
        return self.horizontal.offset

    @property
    def offset_top(self) -> float:
        return self.vertical.offset

    def rendered_cells(self) -> Iterator[CellCoord]:
        """Yield rendered cells in row-major order."""
        columns = self.rendered_column_indexes
        for row in self.rendered_row_indexes:
            for col in columns:
                yield CellCoord(row=row, col=col)

    def get_cell_position(self, row: int, col: int) -> tuple[float, float]:
        """Return the ``(x, y)`` position of a cell's top-left corner."""
        return self.horizontal.get_item_position(col), self.vertical.get_item_position(row)

    def column_track(self, col: int) -> tuple[int, int]:
        """Return 1-based start/end track lines of a column inside the render window."""
        line = col - self.horizontal.rendered_start_index + 1
        return line, line + 1

    def row_track(self, row: int) -> tuple[int, int]:
        """Return 1-based start/end track lines of a row inside the render window."""
        line = row - self.vertical.rendered_start_index + 1
        return line, line + 1


T = TypeVar("T")


def grid_shape_of(data: Sequence[Sequence[T]]) -> tuple[int, int]:
    """Return ``(rows, columns)`` of row-major data, columns taken from the first row."""
    if not data:
        return 0, 0
    return len(data), len(data[0])


def compute_virtual_grid(
    num_of_rows: int,
    num_of_columns: int,
    row_height: ItemSizeSpec,
    column_width: ItemSizeSpec,
    scroll_left: float,
    scroll_top: float,
    container_width: float,
    container_height: float,
    *,
    overscan_rows: int | None = None,
    overscan_columns: int | None = None,
    header_width: float = 0.0,
    header_height: float = 0.0,
) -> VirtualGridLayout:
    """Compute both axes of a virtual grid.

    ``header_width``/``header_height`` are the sizes of sticky leading blocks
    scrolled along with the grid; they are subtracted from the raw scroll
    position so the scan is measured from the first cell.
    """
    horizontal = compute_virtual_list(
        num_of_columns,
        column_width,
        scroll_left - header_width,
        container_width,
        overscan=overscan_columns,
        tag="horizontal",
    )
    vertical = compute_virtual_list(
        num_of_rows,
        row_height,
        scroll_top - header_height,
        container_height,
        overscan=overscan_rows,
        tag="vertical",
    )
    return VirtualGridLayout(horizontal=horizontal, vertical=vertical)
