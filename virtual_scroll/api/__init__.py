"""Public virtual scroll API contracts."""

from virtual_scroll.api.errors import SizeSpecError
from virtual_scroll.api.sizing import (
    BoundValue,
    Fraction,
    ItemSize,
    Percent,
    Pixels,
    SizeInput,
    SizeUnit,
    UnitValue,
    format_item_size,
    format_unit_value,
    parse_bound,
    parse_item_size,
    parse_unit_value,
    to_layout_units,
)
from virtual_scroll.api.visible_range import ItemSizeGetter, ScanPhase, VisibleRange

__all__ = [
    "BoundValue",
    "Fraction",
    "ItemSize",
    "ItemSizeGetter",
    "Percent",
    "Pixels",
    "ScanPhase",
    "SizeInput",
    "SizeSpecError",
    "SizeUnit",
    "UnitValue",
    "VisibleRange",
    "format_item_size",
    "format_unit_value",
    "parse_bound",
    "parse_item_size",
    "parse_unit_value",
    "to_layout_units",
]
