from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Extent:
    """Pixel-space size with no position.

    Layout arithmetic may produce negative components when decorations claim
    more space than is available; `is_degenerate` reports that state.
    """

    width: float
    height: float

    @property
    def is_degenerate(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def clamped(self) -> "Extent":
        return Extent(width=max(0.0, self.width), height=max(0.0, self.height))


@dataclass(frozen=True)
class Point:
    x: float
    y: float
