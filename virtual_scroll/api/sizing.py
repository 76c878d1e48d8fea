"""Public item size descriptors and their string encoding.

A descriptor is one of three unit values:

* ``Pixels(v)``   -- absolute layout units, encoded ``"<v>px"``.
* ``Percent(v)``  -- ``v`` percent of the container size, encoded ``"<v>%"``.
* ``Fraction(v)`` -- ``v`` shares of the space left after every pixel and
  percent item, encoded ``"<v>fr"``.

``ItemSize`` pairs a unit value with optional ``min``/``max`` bounds. Bounds are
pixels or percent only; a fraction bound is dropped while parsing.

Parsing is lenient: a string with an unknown suffix or no leading number parses
to ``None`` (no contribution, or no bound) instead of failing.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, TypeAlias

from virtual_scroll.api.errors import SizeSpecError


class SizeUnit(StrEnum):
    """Unit suffixes understood by the size codec."""

    PIXELS = "px"
    PERCENT = "%"
    FRACTION = "fr"


@dataclass(frozen=True, slots=True)
class Pixels:
    """Absolute size in layout units."""

    value: float
    unit: ClassVar[SizeUnit] = SizeUnit.PIXELS


@dataclass(frozen=True, slots=True)
class Percent:
    """Size relative to the container."""

    value: float
    unit: ClassVar[SizeUnit] = SizeUnit.PERCENT


@dataclass(frozen=True, slots=True)
class Fraction:
    """Share of the container space left by non-fraction items."""

    value: float
    unit: ClassVar[SizeUnit] = SizeUnit.FRACTION


UnitValue: TypeAlias = Pixels | Percent | Fraction
BoundValue: TypeAlias = Pixels | Percent


@dataclass(frozen=True, slots=True)
class ItemSize:
    """Primary size value with optional clamping bounds."""

    value: UnitValue | None
    min_size: BoundValue | None = None
    max_size: BoundValue | None = None


SizeInput: TypeAlias = str | UnitValue | ItemSize | Mapping[str, object]

_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_UNIT_TYPES: dict[SizeUnit, type[Pixels] | type[Percent] | type[Fraction]] = {
    SizeUnit.PIXELS: Pixels,
    SizeUnit.PERCENT: Percent,
    SizeUnit.FRACTION: Fraction,
}


def _leading_number(text: str) -> float | None:
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def _suffix_unit(text: str) -> SizeUnit | None:
    for unit in SizeUnit:
        if text.endswith(unit.value):
            return unit
    return None


def parse_unit_value(raw: str) -> UnitValue | None:
    """Decode ``"10px"``, ``"25%"`` or ``"1fr"``; ``None`` when unrecognized."""
    unit = _suffix_unit(raw)
    magnitude = _leading_number(raw)
    if unit is None or magnitude is None:
        return None
    return _UNIT_TYPES[unit](magnitude)


def parse_bound(raw: object) -> BoundValue | None:
    """Decode a ``min``/``max`` bound, dropping anything that is not px or %."""
    if raw is None:
        return None
    if isinstance(raw, (Pixels, Percent)):
        return raw
    if isinstance(raw, Fraction):
        return None
    if isinstance(raw, str):
        value = parse_unit_value(raw)
        if isinstance(value, (Pixels, Percent)):
            return value
        return None
    raise SizeSpecError(raw)


def _parse_primary(raw: object) -> UnitValue | None:
    if raw is None:
        return None
    if isinstance(raw, (Pixels, Percent, Fraction)):
        return raw
    if isinstance(raw, str):
        return parse_unit_value(raw)
    raise SizeSpecError(raw)


def _checked_item_size(size: ItemSize) -> ItemSize:
    value = _parse_primary(size.value)
    min_size = parse_bound(size.min_size)
    max_size = parse_bound(size.max_size)
    if (value, min_size, max_size) == (size.value, size.min_size, size.max_size):
        return size
    return ItemSize(value=value, min_size=min_size, max_size=max_size)


def parse_item_size(raw: SizeInput) -> ItemSize:
    """Normalize any accepted descriptor form into an ``ItemSize``."""
    if isinstance(raw, ItemSize):
        return _checked_item_size(raw)
    if isinstance(raw, Mapping):
        return ItemSize(
            value=_parse_primary(raw.get("value")),
            min_size=parse_bound(raw.get("min")),
            max_size=parse_bound(raw.get("max")),
        )
    if isinstance(raw, (str, Pixels, Percent, Fraction)):
        return ItemSize(value=_parse_primary(raw))
    raise SizeSpecError(raw)


def to_layout_units(bound: BoundValue, container_size: float) -> float | None:
    """Convert a pixel or percent value into layout units; ``None`` for anything else."""
    match bound:
        case Pixels(value=value):
            return value
        case Percent(value=value):
            return value / 100 * container_size
        case _:
            return None


def _format_number(value: float) -> str:
    text = repr(float(value))
    if text.endswith(".0"):
        return text[:-2]
    return text


def format_unit_value(value: UnitValue) -> str:
    """Encode a unit value back to its suffix string."""
    return f"{_format_number(value.value)}{value.unit.value}"


def format_item_size(size: ItemSize) -> str | dict[str, str]:
    """Encode an ``ItemSize``; plain string when it carries no bounds."""
    primary = "" if size.value is None else format_unit_value(size.value)
    if size.min_size is None and size.max_size is None:
        return primary
    encoded = {"value": primary}
    if size.min_size is not None:
        encoded["min"] = format_unit_value(size.min_size)
    if size.max_size is not None:
        encoded["max"] = format_unit_value(size.max_size)
    return encoded
