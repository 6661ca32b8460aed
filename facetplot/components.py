from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from facetplot.drawable import RGBA, Drawable, EmptyDrawable, FilledRect, StrokedRect, Text
from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent
from facetplot.settings import DEFAULT_THEME
from facetplot.text import text_size

if TYPE_CHECKING:
    from facetplot.plot import Plot


class Position(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    BACKGROUND = "background"
    OVERLAY = "overlay"

    @property
    def is_side(self) -> bool:
        return self in _SIDES


_SIDES = frozenset({Position.TOP, Position.BOTTOM, Position.LEFT, Position.RIGHT})


class PlotComponent:
    """A decoration attached to one side of a plot, or layered over/under it.

    `size` is asked again on every layout pass, so it may depend on the
    plot's current bounds and transformers.
    """

    position: Position

    def size(self, plot: "Plot") -> Extent:
        raise NotImplementedError

    def render(self, plot: "Plot", extent: Extent) -> Drawable:
        raise NotImplementedError


@dataclass(frozen=True)
class Padding(PlotComponent):
    """Blank space of `amount` pixels on one side of the plot."""

    position: Position
    amount: float

    def __post_init__(self) -> None:
        if not self.position.is_side:
            raise InvalidArgumentError(f"padding requires a side position, got {self.position}")
        if self.amount < 0:
            raise InvalidArgumentError(f"padding amount must be >= 0, got {self.amount}")

    def size(self, plot: "Plot") -> Extent:
        if self.position in (Position.LEFT, Position.RIGHT):
            return Extent(self.amount, 0.0)
        return Extent(0.0, self.amount)

    def render(self, plot: "Plot", extent: Extent) -> Drawable:
        return EmptyDrawable(extent)


@dataclass(frozen=True)
class BackgroundFill(PlotComponent):
    color: RGBA = DEFAULT_THEME.plot_bg_color
    position: Position = Position.BACKGROUND

    def size(self, plot: "Plot") -> Extent:
        return Extent(0.0, 0.0)

    def render(self, plot: "Plot", extent: Extent) -> Drawable:
        return FilledRect(width=extent.width, height=extent.height, color=self.color)


@dataclass(frozen=True)
class Border(PlotComponent):
    """Frame drawn around the data area, above the plotted content."""

    color: RGBA = DEFAULT_THEME.frame_color
    line_width: float = 1.0
    position: Position = Position.OVERLAY

    def size(self, plot: "Plot") -> Extent:
        return Extent(0.0, 0.0)

    def render(self, plot: "Plot", extent: Extent) -> Drawable:
        area = plot.plot_extent(extent).clamped()
        offset = plot.plot_offset
        frame = StrokedRect(width=area.width, height=area.height, color=self.color, line_width=self.line_width)
        return frame.translate(offset.x, offset.y)


_LABEL_ROTATION = {
    Position.TOP: 0,
    Position.BOTTOM: 0,
    Position.LEFT: 90,
    Position.RIGHT: 270,
}


@dataclass(frozen=True)
class PlotLabel(PlotComponent):
    """Text label (title or axis label) centered in its band."""

    text: str
    position: Position = Position.TOP
    color: RGBA = DEFAULT_THEME.text_color
    font_family: str = DEFAULT_THEME.font_family
    font_size_px: float = DEFAULT_THEME.font_size_px
    pad_px: float = DEFAULT_THEME.label_pad_px

    def __post_init__(self) -> None:
        if not self.position.is_side:
            raise InvalidArgumentError(f"labels require a side position, got {self.position}")

    @property
    def rotate_deg(self) -> int:
        return _LABEL_ROTATION[self.position]

    def _text_extent(self) -> Extent:
        w, h = text_size(
            self.text,
            font_family=self.font_family,
            font_size_px=self.font_size_px,
            rotate_deg=self.rotate_deg,
        )
        return Extent(float(w), float(h))

    def size(self, plot: "Plot") -> Extent:
        inner = self._text_extent()
        if self.position in (Position.LEFT, Position.RIGHT):
            return Extent(inner.width + 2 * self.pad_px, inner.height)
        return Extent(inner.width, inner.height + 2 * self.pad_px)

    def render(self, plot: "Plot", extent: Extent) -> Drawable:
        inner = self._text_extent()
        label = Text(
            text=self.text,
            size=inner,
            color=self.color,
            font_family=self.font_family,
            font_size_px=self.font_size_px,
            rotate_deg=self.rotate_deg,
        )
        return label.translate((extent.width - inner.width) / 2.0, (extent.height - inner.height) / 2.0)
