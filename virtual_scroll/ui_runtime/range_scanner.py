"""Visible index-range scanning for variably sized list items."""

from __future__ import annotations

import logging

from virtual_scroll.api.visible_range import ItemSizeGetter, ScanPhase, VisibleRange

_LOG = logging.getLogger("virtual_scroll.scan")


def _contains(point: float, start: float, end: float) -> bool:
    # Closed interval: a point on a shared boundary belongs to both neighbours.
    return start <= point <= end


def scan_visible_range(
    num_of_items: int,
    get_item_size: ItemSizeGetter,
    scroll_position: float,
    container_size: float,
    overscan: int,
) -> VisibleRange | None:
    """Return the index window covering the viewport, padded by ``overscan``.

    Returns ``None`` when the container has no positive size. A scroll position
    past the end of all items matches no item and falls back to index 0. An
    empty list yields ``rendered_end_index == -1``.
    """
    if container_size <= 0:
        return None

    container_start = max(0.0, scroll_position)
    container_end = max(0.0, container_start + container_size)

    phase = ScanPhase.START
    current = 0.0
    start_index = 0
    end_index = 0

    for index in range(num_of_items):
        size = get_item_size(index)
        item_start = current
        item_end = item_start + size

        match phase:
            case ScanPhase.START if _contains(container_start, item_start, item_end):
                start_index = index
                end_index = index
                if _contains(container_end, item_start, item_end):
                    phase = ScanPhase.DONE
                else:
                    phase = ScanPhase.END
            case ScanPhase.END if _contains(container_end, item_start, item_end):
                end_index = index
                phase = ScanPhase.DONE
            case _:
                pass

        if phase is ScanPhase.DONE:
            break
        current = item_end

    if phase is ScanPhase.START and num_of_items > 0 and _LOG.isEnabledFor(logging.DEBUG):
        _LOG.debug(
            "scan_out_of_range scroll_position=%.2f content_size=%.2f num_of_items=%d",
            container_start,
            current,
            num_of_items,
            extra={
                "scroll_position": container_start,
                "content_size": current,
                "num_of_items": num_of_items,
            },
        )

    start_index = max(0, start_index - overscan)
    end_index = min(num_of_items - 1, end_index + overscan)
    offset = sum((get_item_size(index) for index in range(start_index)), 0.0)
    return VisibleRange(
        offset=offset,
        rendered_start_index=start_index,
        rendered_end_index=end_index,
    )
