from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from facetplot.drawable import Group
from facetplot.geometry import Extent
from facetplot.layout import reserved_space
from facetplot.settings import DEFAULT_EXTENT

if TYPE_CHECKING:
    from facetplot.plot import Plot


LOGGER = logging.getLogger(__name__)


def render(plot: "Plot", extent: Extent = DEFAULT_EXTENT) -> Group:
    """Compose a plot into one drawable covering `extent`.

    Layers, back to front: background decorations, the data area placed at
    its offset, then side and overlay decorations.
    """
    space = reserved_space(plot)
    area = space.data_extent(extent)
    if area.is_degenerate:
        LOGGER.warning(
            "plot data area is degenerate (%.1f x %.1f) within %.1f x %.1f; rendering it empty",
            area.width,
            area.height,
            extent.width,
            extent.height,
        )
        area = area.clamped()

    overlays = plot.component_renderer.render_front(plot, extent)
    backgrounds = plot.component_renderer.render_back(plot, extent)
    offset = space.offset
    data_area = plot.renderer.render(plot, area).resize(area).translate(offset.x, offset.y)
    return backgrounds.behind(data_area).behind(overlays)
