from __future__ import annotations

from dataclasses import dataclass

from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent


DEFAULT_EXTENT = Extent(800.0, 600.0)
DEFAULT_ASPECT_RATIO = 4.0 / 3.0
DEFAULT_BOUNDS_BUFFER = 0.1
DEFAULT_FONT_FAMILY = "DejaVuSans.ttf"
DEFAULT_FONT_SIZE_PX = 14.0
DEFAULT_LABEL_PAD_PX = 4.0
GRID_TOLERANCE_PX = 1e-9


@dataclass(frozen=True)
class PlotTheme:
    plot_bg_color: tuple[int, int, int, int] = (234, 234, 242, 255)
    frame_color: tuple[int, int, int, int] = (60, 67, 78, 255)
    point_color: tuple[int, int, int, int] = (62, 149, 255, 255)
    text_color: tuple[int, int, int, int] = (20, 26, 36, 255)
    font_family: str = DEFAULT_FONT_FAMILY
    font_size_px: float = DEFAULT_FONT_SIZE_PX
    label_pad_px: float = DEFAULT_LABEL_PAD_PX


DEFAULT_THEME = PlotTheme()


def resolve_extent(
    width: float | None = None,
    height: float | None = None,
    *,
    aspect_ratio: float = DEFAULT_ASPECT_RATIO,
) -> Extent:
    if aspect_ratio <= 0:
        raise InvalidArgumentError("aspect_ratio must be > 0")
    if width is None and height is None:
        return DEFAULT_EXTENT
    if width is None:
        if height <= 0:
            raise InvalidArgumentError("height must be > 0")
        return Extent(float(round(height * aspect_ratio)), float(height))
    if height is None:
        if width <= 0:
            raise InvalidArgumentError("width must be > 0")
        return Extent(float(width), float(round(width / aspect_ratio)))
    else:
        if width <= 0 or height <= 0:
            raise InvalidArgumentError("width and height must be > 0")
        return Extent(float(width), float(height))
