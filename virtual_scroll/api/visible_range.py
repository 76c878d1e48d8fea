"""Public visible-range result contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import TypeAlias

ItemSizeGetter: TypeAlias = Callable[[int], float]


class ScanPhase(Enum):
    """Visible-range scan state."""

    START = auto()
    END = auto()
    DONE = auto()


@dataclass(frozen=True, slots=True)
class VisibleRange:
    """Index window to render and the position of its first item.

    ``rendered_end_index`` is ``-1`` for an empty list, so the inclusive window
    ``[rendered_start_index, rendered_end_index]`` is empty in that case.
    """

    offset: float
    rendered_start_index: int
    rendered_end_index: int

    @property
    def indexes(self) -> range:
        """Return the inclusive rendered index window."""
        return range(self.rendered_start_index, self.rendered_end_index + 1)

    @property
    def is_empty(self) -> bool:
        return self.rendered_end_index < self.rendered_start_index
