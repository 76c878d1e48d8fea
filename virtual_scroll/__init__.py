"""Visible-range and item-size computations for virtualized scrolling."""

from virtual_scroll.api import (
    Fraction,
    ItemSize,
    Percent,
    Pixels,
    SizeSpecError,
    VisibleRange,
    parse_item_size,
)
from virtual_scroll.runtime.logging import configure_logging, install_null_handler
from virtual_scroll.ui_runtime import (
    VirtualGridLayout,
    VirtualListLayout,
    compute_virtual_grid,
    compute_virtual_list,
    resolve_sizes,
    scan_visible_range,
)

install_null_handler()

__all__ = [
    "Fraction",
    "ItemSize",
    "Percent",
    "Pixels",
    "SizeSpecError",
    "VirtualGridLayout",
    "VirtualListLayout",
    "VisibleRange",
    "compute_virtual_grid",
    "compute_virtual_list",
    "configure_logging",
    "parse_item_size",
    "resolve_sizes",
    "scan_visible_range",
]
