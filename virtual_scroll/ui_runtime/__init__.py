"""Virtual scroll layout computations."""

from virtual_scroll.ui_runtime.range_scanner import scan_visible_range
from virtual_scroll.ui_runtime.size_resolver import resolve_sizes, resolve_uniform_sizes
from virtual_scroll.ui_runtime.virtual_grid import (
    CellCoord,
    VirtualGridLayout,
    compute_virtual_grid,
    grid_shape_of,
)
from virtual_scroll.ui_runtime.virtual_list import VirtualListLayout, compute_virtual_list

__all__ = [
    "CellCoord",
    "VirtualGridLayout",
    "VirtualListLayout",
    "compute_virtual_grid",
    "compute_virtual_list",
    "grid_shape_of",
    "resolve_sizes",
    "resolve_uniform_sizes",
    "scan_visible_range",
]
