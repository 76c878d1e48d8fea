"""Resolve declarative item size descriptors into concrete sizes."""

from __future__ import annotations

import logging
from collections.abc import Callable

from virtual_scroll.api.sizing import (
    BoundValue,
    Fraction,
    ItemSize,
    Percent,
    Pixels,
    SizeInput,
    parse_item_size,
    to_layout_units,
)

_LOG = logging.getLogger("virtual_scroll.sizing")

ItemSizeSource = Callable[[int], SizeInput]


def _bound_units(bound: BoundValue | None, container_size: float) -> float | None:
    if bound is None:
        return None
    return to_layout_units(bound, container_size)


def _clamp(value: float, min_size: float | None, max_size: float | None) -> float:
    # Both bounds compare against the unclamped value; min wins when both apply.
    if min_size is not None and value < min_size:
        return min_size
    if max_size is not None and value > max_size:
        return max_size
    return value


def resolve_sizes(
    container_size: float,
    num_of_items: int,
    get_item_size: ItemSizeSource,
) -> list[float]:
    """Return one concrete size per item index.

    Pixel and percent items are resolved directly. Fraction items split the
    container space left over by the others in proportion to their shares; the
    leftover may be negative, which yields negative sizes unless a ``min`` bound
    catches them. Bounds clamp each item independently.
    """
    container_size = float(container_size)
    parsed: list[ItemSize] = []
    values: list[float] = []
    fr_indexes: list[int] = []
    non_fr_total = 0.0
    fr_total = 0.0

    for index in range(max(0, num_of_items)):
        size = parse_item_size(get_item_size(index))
        parsed.append(size)
        match size.value:
            case Pixels(value=value):
                non_fr_total += value
                values.append(float(value))
            case Percent(value=value):
                resolved = value / 100 * container_size
                non_fr_total += resolved
                values.append(resolved)
            case Fraction(value=value):
                fr_indexes.append(index)
                fr_total += value
                values.append(value)
            case None:
                values.append(0.0)

    if fr_indexes:
        fr_unit_size = (container_size - non_fr_total) / fr_total if fr_total else 0.0
        for index in fr_indexes:
            values[index] = values[index] * fr_unit_size
        if _LOG.isEnabledFor(logging.DEBUG) and fr_unit_size < 0:
            _LOG.debug(
                "fraction_overflow container_size=%.2f non_fr_total=%.2f fr_total=%.2f",
                container_size,
                non_fr_total,
                fr_total,
            )

    return [
        _clamp(
            value,
            _bound_units(size.min_size, container_size),
            _bound_units(size.max_size, container_size),
        )
        for value, size in zip(values, parsed, strict=True)
    ]


def resolve_uniform_sizes(
    container_size: float,
    num_of_items: int,
    item_size: SizeInput,
) -> list[float]:
    """Resolve sizes for a list where every item shares one descriptor."""
    size = parse_item_size(item_size)
    return resolve_sizes(container_size, num_of_items, lambda _index: size)
