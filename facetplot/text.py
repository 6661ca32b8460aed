from __future__ import annotations

from functools import lru_cache
import logging

from PIL import ImageFont

from facetplot.errors import InvalidArgumentError
from facetplot.settings import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX


LOGGER = logging.getLogger(__name__)


def text_size(
    text: str,
    *,
    font_family: str = DEFAULT_FONT_FAMILY,
    font_size_px: float = DEFAULT_FONT_SIZE_PX,
    rotate_deg: int = 0,
) -> tuple[int, int]:
    """Pixel (width, height) of `text`, swapped for quarter-turn rotations.

    Empty text keeps the line height so an empty label still reserves a band.
    """
    font = load_font(font_family, font_size_px)
    left, top, right, bottom = font.getbbox(text or "Ag")
    w = max(0, int(right - left)) if text else 0
    h = max(1, int(bottom - top))
    if quarter_turns(rotate_deg) % 2 == 1:
        return (h, w)
    return (w, h)


def quarter_turns(rotate_deg: int) -> int:
    if rotate_deg % 90 != 0:
        raise InvalidArgumentError("rotate_deg must be a multiple of 90")
    return (rotate_deg // 90) % 4


@lru_cache(maxsize=64)
def load_font(font_family: str, font_size_px: float) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    """Load a font by file name or path; Pillow searches the system font dirs."""
    size = max(1, int(round(font_size_px)))
    try:
        return ImageFont.truetype(font_family, size=size)
    except OSError:
        LOGGER.debug("font %r not found; measuring with the Pillow default font", font_family)
        return ImageFont.load_default(size=size)
