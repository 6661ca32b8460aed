from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import overload

from facetplot.bounds import Bounds
from facetplot.components import Padding, PlotComponent, Position
from facetplot.drawable import Group
from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent, Point
from facetplot.layout import plot_extent, plot_offset
from facetplot.render import render as render_plot
from facetplot.renderers import ComponentRenderer, DefaultComponentRenderer, EmptyPlotRenderer, PlotRenderer
from facetplot.settings import DEFAULT_EXTENT
from facetplot.transform import DefaultXTransformer, DefaultYTransformer, Transformer


@dataclass(frozen=True)
class Plot:
    """Immutable description of one chart.

    Every modifier returns a new plot. `xfixed`/`yfixed` are set once an axis
    range is pinned by a caller or a decoration, after which automatic bounds
    detection (`update_bounds`) leaves that axis alone.
    """

    xbounds: Bounds = Bounds(0.0, 1.0)
    ybounds: Bounds = Bounds(0.0, 1.0)
    renderer: PlotRenderer = field(default_factory=EmptyPlotRenderer)
    component_renderer: ComponentRenderer = field(default_factory=DefaultComponentRenderer)
    xtransform: Transformer = field(default_factory=DefaultXTransformer)
    ytransform: Transformer = field(default_factory=DefaultYTransformer)
    xfixed: bool = False
    yfixed: bool = False
    components: tuple[PlotComponent, ...] = ()

    def in_bounds(self, point: Point) -> bool:
        return self.xbounds.contains(point.x) and self.ybounds.contains(point.y)

    def add_component(self, component: PlotComponent) -> "Plot":
        _check_component(component)
        return replace(self, components=self.components + (component,))

    def prepend_component(self, component: PlotComponent) -> "Plot":
        _check_component(component)
        return replace(self, components=(component,) + self.components)

    @overload
    def set_xbounds(self, lower: Bounds) -> "Plot": ...

    @overload
    def set_xbounds(self, lower: float, upper: float) -> "Plot": ...

    def set_xbounds(self, lower, upper=None) -> "Plot":
        return replace(self, xbounds=_as_bounds(lower, upper), xfixed=True)

    @overload
    def set_ybounds(self, lower: Bounds) -> "Plot": ...

    @overload
    def set_ybounds(self, lower: float, upper: float) -> "Plot": ...

    def set_ybounds(self, lower, upper=None) -> "Plot":
        return replace(self, ybounds=_as_bounds(lower, upper), yfixed=True)

    def update_bounds(self, xbounds: Bounds, ybounds: Bounds) -> "Plot":
        """Apply automatically detected bounds to the axes that are not fixed."""
        return replace(
            self,
            xbounds=self.xbounds if self.xfixed else xbounds,
            ybounds=self.ybounds if self.yfixed else ybounds,
        )

    def set_xtransform(self, transform: Transformer, fixed: bool = True) -> "Plot":
        return replace(self, xtransform=transform, xfixed=fixed)

    def set_ytransform(self, transform: Transformer, fixed: bool = True) -> "Plot":
        return replace(self, ytransform=transform, yfixed=fixed)

    def with_renderer(self, renderer: PlotRenderer) -> "Plot":
        return replace(self, renderer=renderer)

    def with_component_renderer(self, component_renderer: ComponentRenderer) -> "Plot":
        return replace(self, component_renderer=component_renderer)

    def pad_left(self, amount: float) -> "Plot":
        return self._pad(Position.LEFT, amount)

    def pad_right(self, amount: float) -> "Plot":
        return self._pad(Position.RIGHT, amount)

    def pad_top(self, amount: float) -> "Plot":
        return self._pad(Position.TOP, amount)

    def pad_bottom(self, amount: float) -> "Plot":
        return self._pad(Position.BOTTOM, amount)

    def _pad(self, position: Position, amount: float) -> "Plot":
        if amount < 0:
            raise InvalidArgumentError(f"padding amount must be >= 0, got {amount}")
        if amount == 0:
            return self
        return self.add_component(Padding(position=position, amount=amount))

    def components_at(self, position: Position) -> tuple[PlotComponent, ...]:
        return tuple(c for c in self.components if c.position is position)

    @property
    def top_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.TOP)

    @property
    def bottom_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.BOTTOM)

    @property
    def left_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.LEFT)

    @property
    def right_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.RIGHT)

    @property
    def background_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.BACKGROUND)

    @property
    def overlay_components(self) -> tuple[PlotComponent, ...]:
        return self.components_at(Position.OVERLAY)

    @property
    def plot_offset(self) -> Point:
        return plot_offset(self)

    def plot_extent(self, extent: Extent) -> Extent:
        return plot_extent(self, extent)

    def render(self, extent: Extent = DEFAULT_EXTENT) -> Group:
        return render_plot(self, extent)


def _as_bounds(lower: Bounds | float, upper: float | None) -> Bounds:
    if isinstance(lower, Bounds):
        if upper is not None:
            raise InvalidArgumentError("pass either a Bounds or lower/upper values, not both")
        return lower
    if upper is None:
        raise InvalidArgumentError("upper bound is required when lower is a number")
    return Bounds(float(lower), float(upper))


def _check_component(component: PlotComponent) -> None:
    if not isinstance(getattr(component, "position", None), Position):
        raise InvalidArgumentError(f"component has no valid position: {component!r}")
