from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Protocol, Union

import numpy as np

from facetplot.bounds import Bounds
from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent

if TYPE_CHECKING:
    from facetplot.plot import Plot


Coordinate = Union[float, np.ndarray]
Mapping = Callable[[Coordinate], Coordinate]


class Transformer(Protocol):
    """Builds the data-to-pixel mapping for one axis of a plot.

    The returned function closes over the plot's current bounds and the pixel
    extent, so it must be rebuilt whenever either changes.
    """

    def __call__(self, plot: "Plot", plot_extent: Extent) -> Mapping:
        ...


def _vectorized(fn: Callable[[np.ndarray], np.ndarray]) -> Mapping:
    def mapping(value: Coordinate) -> Coordinate:
        arr = np.asarray(value, dtype=np.float64)
        out = fn(arr)
        if arr.ndim == 0:
            return float(out)
        return out

    return mapping


def linear_mapping(bounds: Bounds, out_start: float, out_end: float) -> Mapping:
    """Map `[bounds.min, bounds.max]` onto `[out_start, out_end]`.

    A zero-width range maps every value to the midpoint of the output span.
    """
    if bounds.range == 0:
        mid = (out_start + out_end) / 2.0
        return _vectorized(lambda arr: np.full_like(arr, mid))
    scale = (out_end - out_start) / bounds.range
    lo = bounds.min
    return _vectorized(lambda arr: out_start + (arr - lo) * scale)


def _log_bounds(bounds: Bounds) -> Bounds:
    if bounds.min <= 0:
        raise InvalidArgumentError(f"logarithmic axis requires positive bounds, got {bounds}")
    return Bounds(float(np.log10(bounds.min)), float(np.log10(bounds.max)))


def _log_mapping(bounds: Bounds, out_start: float, out_end: float) -> Mapping:
    inner = linear_mapping(_log_bounds(bounds), out_start, out_end)

    def mapping(value: Coordinate) -> Coordinate:
        with np.errstate(divide="ignore", invalid="ignore"):
            logged = np.log10(np.asarray(value, dtype=np.float64))
        return inner(logged)

    return mapping


@dataclass(frozen=True)
class DefaultXTransformer:
    def __call__(self, plot: "Plot", plot_extent: Extent) -> Mapping:
        return linear_mapping(plot.xbounds, 0.0, plot_extent.width)


@dataclass(frozen=True)
class DefaultYTransformer:
    # Pixel rows grow downward, so the data minimum sits at the bottom edge.
    def __call__(self, plot: "Plot", plot_extent: Extent) -> Mapping:
        return linear_mapping(plot.ybounds, plot_extent.height, 0.0)


@dataclass(frozen=True)
class LogXTransformer:
    def __call__(self, plot: "Plot", plot_extent: Extent) -> Mapping:
        return _log_mapping(plot.xbounds, 0.0, plot_extent.width)


@dataclass(frozen=True)
class LogYTransformer:
    def __call__(self, plot: "Plot", plot_extent: Extent) -> Mapping:
        return _log_mapping(plot.ybounds, plot_extent.height, 0.0)
