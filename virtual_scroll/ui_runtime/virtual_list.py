"""One-axis virtual list composition of size resolution and range scanning."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from virtual_scroll.api.sizing import SizeInput, parse_item_size
from virtual_scroll.api.visible_range import VisibleRange
from virtual_scroll.runtime.config import load_scroll_config
from virtual_scroll.ui_runtime.range_scanner import scan_visible_range
from virtual_scroll.ui_runtime.size_resolver import resolve_sizes

_LOG = logging.getLogger("virtual_scroll.list")

ItemSizeSpec = SizeInput | Callable[[int], SizeInput]


@dataclass(frozen=True, slots=True)
class VirtualListLayout:
    """Resolved sizes and render window for one scroll axis."""

    tag: str
    size_list: tuple[float, ...]
    visible_range: VisibleRange | None
    positions: tuple[float, ...]

    @property
    def num_of_items(self) -> int:
        return len(self.size_list)

    @property
    def total_size(self) -> float:
        """Return the summed size of every item."""
        return self.positions[-1]

    @property
    def rendered_start_index(self) -> int:
        return 0 if self.visible_range is None else self.visible_range.rendered_start_index

    @property
    def rendered_end_index(self) -> int:
        return 0 if self.visible_range is None else self.visible_range.rendered_end_index

    @property
    def offset(self) -> float:
        return 0.0 if self.visible_range is None else self.visible_range.offset

    @property
    def rendered_indexes(self) -> tuple[int, ...]:
        """Return the inclusive render window; empty when nothing is visible."""
        if self.visible_range is None:
            return ()
        return tuple(self.visible_range.indexes)

    def get_item_size(self, index: int) -> float:
        return self.size_list[index]

    def get_item_position(self, index: int) -> float:
        """Return the summed size of every item before ``index``.

        Indexes are clamped to ``[0, num_of_items]``, so any index at or past the
        end answers the total size.
        """
        return self.positions[max(0, min(index, self.num_of_items))]


def _size_source(item_size: ItemSizeSpec) -> Callable[[int], SizeInput]:
    if callable(item_size):
        return item_size
    shared = parse_item_size(item_size)
    return lambda _index: shared


def _prefix_positions(size_list: list[float]) -> tuple[float, ...]:
    sums = np.cumsum(np.asarray(size_list, dtype=np.float64))
    return (0.0, *(float(value) for value in sums))


def compute_virtual_list(
    num_of_items: int,
    item_size: ItemSizeSpec,
    scroll_position: float,
    container_size: float,
    *,
    overscan: int | None = None,
    tag: str = "list",
) -> VirtualListLayout:
    """Resolve item sizes and the render window for one axis.

    ``item_size`` is either one descriptor shared by every item or a callable
    returning the descriptor for an index. ``overscan`` defaults to the
    configured value.
    """
    config = load_scroll_config()
    overscan_count = config.default_overscan if overscan is None else overscan
    size_list = resolve_sizes(container_size, num_of_items, _size_source(item_size))
    visible_range = scan_visible_range(
        len(size_list),
        size_list.__getitem__,
        scroll_position,
        container_size,
        overscan_count,
    )
    layout = VirtualListLayout(
        tag=tag,
        size_list=tuple(size_list),
        visible_range=visible_range,
        positions=_prefix_positions(size_list),
    )
    if config.trace_enabled and _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug(
            "virtual_list tag=%s items=%d scroll=%.2f container=%.2f window=%s offset=%.2f",
            tag,
            layout.num_of_items,
            scroll_position,
            container_size,
            (layout.rendered_start_index, layout.rendered_end_index),
            layout.offset,
            extra={
                "tag": tag,
                "num_of_items": layout.num_of_items,
                "scroll_position": scroll_position,
                "container_size": container_size,
                "window": (layout.rendered_start_index, layout.rendered_end_index),
                "offset": layout.offset,
            },
        )
    return layout
