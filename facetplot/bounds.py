from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from facetplot.errors import InvalidArgumentError
from facetplot.settings import DEFAULT_BOUNDS_BUFFER


@dataclass(frozen=True)
class Bounds:
    """Closed numeric range `[min, max]`.

    A zero-width range (`min == max`) is valid and means the data has no
    spread yet.
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        if np.isnan(self.min) or np.isnan(self.max):
            raise InvalidArgumentError("bounds must not be NaN")
        if self.min > self.max:
            raise InvalidArgumentError(f"bounds min must be <= max: {self.min} > {self.max}")

    @property
    def range(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def expand(self, buffer: float = DEFAULT_BOUNDS_BUFFER) -> "Bounds":
        return expand_bounds(self, buffer)


def expand_bounds(bounds: Bounds, buffer: float = DEFAULT_BOUNDS_BUFFER) -> Bounds:
    """Pad both ends by `buffer * range / 2`, or by `buffer / 2` for an empty range."""
    if buffer < 0:
        raise InvalidArgumentError(f"bounds buffer must be >= 0, got {buffer}")
    amount = buffer * bounds.range / 2.0 if bounds.range > 0 else buffer / 2.0
    return Bounds(bounds.min - amount, bounds.max + amount)


def combine_bounds(bounds: Sequence[Bounds]) -> Bounds:
    """Return the widest range covering every input range."""
    if len(bounds) == 0:
        raise InvalidArgumentError("cannot combine an empty sequence of bounds")
    if len(bounds) == 1:
        return bounds[0]
    mins = np.asarray([b.min for b in bounds], dtype=np.float64)
    maxs = np.asarray([b.max for b in bounds], dtype=np.float64)
    return Bounds(float(np.min(mins)), float(np.max(maxs)))
