from __future__ import annotations

from collections.abc import Callable, Sequence

import pytest

_ENV_NAMES = (
    "VSCROLL_DEFAULT_OVERSCAN",
    "VSCROLL_TRACE",
    "VSCROLL_LOG_LEVEL",
    "VSCROLL_LOG_FORMAT",
    "VSCROLL_LOG_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_scroll_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


class CountingSizes:
    """Size accessor that records every lookup."""

    def __init__(self, sizes: Sequence[float]) -> None:
        self.sizes = list(sizes)
        self.calls: list[int] = []

    def __call__(self, index: int) -> float:
        self.calls.append(index)
        return self.sizes[index]


@pytest.fixture
def counting_sizes() -> Callable[[Sequence[float]], CountingSizes]:
    return CountingSizes
