from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from facetplot.components import Position
from facetplot.geometry import Extent, Point

if TYPE_CHECKING:
    from facetplot.plot import Plot


@dataclass(frozen=True)
class ReservedSpace:
    """Pixels claimed by side decorations, per side."""

    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    @property
    def offset(self) -> Point:
        return Point(self.left, self.top)

    def data_extent(self, extent: Extent) -> Extent:
        return Extent(
            width=extent.width - self.left - self.right,
            height=extent.height - self.top - self.bottom,
        )


def reserved_space(plot: "Plot") -> ReservedSpace:
    """Sum the sizes of the side decorations. Backgrounds and overlays take no space."""
    left = right = top = bottom = 0.0
    for component in plot.components:
        position = component.position
        if not position.is_side:
            continue
        size = component.size(plot)
        if position is Position.LEFT:
            left += size.width
        elif position is Position.RIGHT:
            right += size.width
        elif position is Position.TOP:
            top += size.height
        else:
            bottom += size.height
    return ReservedSpace(left=left, right=right, top=top, bottom=bottom)


def plot_offset(plot: "Plot") -> Point:
    return reserved_space(plot).offset


def plot_extent(plot: "Plot", extent: Extent) -> Extent:
    """Size of the data area; may be degenerate when decorations overflow `extent`."""
    return reserved_space(plot).data_extent(extent)
