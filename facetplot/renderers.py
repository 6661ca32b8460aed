from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, Sequence

import numpy as np

from facetplot.components import PlotComponent
from facetplot.drawable import RGBA, Disc, Drawable, EmptyDrawable, Group
from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent, Point
from facetplot.layout import reserved_space
from facetplot.settings import DEFAULT_THEME

if TYPE_CHECKING:
    from facetplot.plot import Plot


class PlotRenderer(Protocol):
    """Draws the data area of a plot at the given extent."""

    def render(self, plot: "Plot", plot_extent: Extent) -> Drawable:
        ...


class ComponentRenderer(Protocol):
    """Composites a plot's decorations into a front and a back layer."""

    def render_front(self, plot: "Plot", extent: Extent) -> Drawable:
        ...

    def render_back(self, plot: "Plot", extent: Extent) -> Drawable:
        ...


@dataclass(frozen=True)
class EmptyPlotRenderer:
    def render(self, plot: "Plot", plot_extent: Extent) -> Drawable:
        return EmptyDrawable(plot_extent)


@dataclass(frozen=True)
class PointRenderer:
    """Draws one disc per data point; points outside the plot bounds are dropped."""

    points: tuple[Point, ...]
    radius: float = 2.0
    color: RGBA = DEFAULT_THEME.point_color

    @classmethod
    def from_xy(cls, xs: Sequence[float], ys: Sequence[float], **kwargs) -> "PointRenderer":
        x_arr = np.asarray(xs, dtype=np.float64)
        y_arr = np.asarray(ys, dtype=np.float64)
        if x_arr.shape != y_arr.shape:
            raise InvalidArgumentError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        points = tuple(Point(float(x), float(y)) for x, y in zip(x_arr, y_arr))
        return cls(points=points, **kwargs)

    def render(self, plot: "Plot", plot_extent: Extent) -> Drawable:
        visible = [p for p in self.points if plot.in_bounds(p)]
        if not visible:
            return EmptyDrawable(plot_extent)
        xt = plot.xtransform(plot, plot_extent)
        yt = plot.ytransform(plot, plot_extent)
        px = xt(np.asarray([p.x for p in visible], dtype=np.float64))
        py = yt(np.asarray([p.y for p in visible], dtype=np.float64))
        disc = Disc(radius=self.radius, color=self.color)
        marks = [disc.translate(float(x) - self.radius, float(y) - self.radius) for x, y in zip(px, py)]
        return Group(layers=tuple(marks))


def _render_full(plot: "Plot", components: Sequence[PlotComponent], extent: Extent) -> list[Drawable]:
    return [c.render(plot, extent) for c in components]


@dataclass(frozen=True)
class DefaultComponentRenderer:
    """Places side decorations in their reserved bands, nearest-first.

    The first decoration added on a side sits against the data area; later
    ones stack outward. Background and overlay decorations each receive the
    full extent.
    """

    def render_front(self, plot: "Plot", extent: Extent) -> Drawable:
        space = reserved_space(plot)
        area = space.data_extent(extent).clamped()
        layers: list[Drawable] = []

        x = space.left
        for component in plot.left_components:
            size = component.size(plot)
            x -= size.width
            band = Extent(size.width, area.height)
            layers.append(component.render(plot, band).translate(x, space.top))

        x = space.left + area.width
        for component in plot.right_components:
            size = component.size(plot)
            band = Extent(size.width, area.height)
            layers.append(component.render(plot, band).translate(x, space.top))
            x += size.width

        y = space.top
        for component in plot.top_components:
            size = component.size(plot)
            y -= size.height
            band = Extent(area.width, size.height)
            layers.append(component.render(plot, band).translate(space.left, y))

        y = space.top + area.height
        for component in plot.bottom_components:
            size = component.size(plot)
            band = Extent(area.width, size.height)
            layers.append(component.render(plot, band).translate(space.left, y))
            y += size.height

        layers.extend(_render_full(plot, plot.overlay_components, extent))
        return Group(layers=tuple(layers))

    def render_back(self, plot: "Plot", extent: Extent) -> Drawable:
        return Group(layers=tuple(_render_full(plot, plot.background_components, extent)))
