"""Public error types raised at the descriptor parsing boundary."""

from __future__ import annotations


class SizeSpecError(ValueError):
    """Raised when an item size descriptor has an unsupported Python type."""

    def __init__(self, raw: object) -> None:
        super().__init__(f"unsupported item size descriptor: {raw!r} ({type(raw).__name__})")
        self.raw = raw
