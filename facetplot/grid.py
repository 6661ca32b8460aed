from __future__ import annotations

import logging
from typing import Sequence

from facetplot.errors import InvalidArgumentError
from facetplot.geometry import Extent
from facetplot.plot import Plot
from facetplot.settings import GRID_TOLERANCE_PX


LOGGER = logging.getLogger(__name__)

PlotGrid = Sequence[Sequence[Plot]]


def align_grid(plots: PlotGrid, extent: Extent, pad_right: float = 0.0, pad_bottom: float = 0.0) -> list[list[Plot]]:
    """Pad every cell of a (possibly jagged) plot grid to a common data area.

    Cells in a column share a left offset and cells in a row share a top
    offset; every data area then shrinks to the smallest one in the grid.
    `pad_right`/`pad_bottom` are added between adjacent cells only, so the
    last column and last row get no gutter.
    """
    if pad_right < 0 or pad_bottom < 0:
        raise InvalidArgumentError("grid gutters must be >= 0")
    rows = [list(row) for row in plots]
    if not any(rows):
        return rows

    offsets = [[cell.plot_offset for cell in row] for row in rows]

    xoffsets: list[float] = []
    for row in offsets:
        for col, offset in enumerate(row):
            if col < len(xoffsets):
                xoffsets[col] = max(xoffsets[col], offset.x)
            else:
                xoffsets.append(offset.x)
    yoffsets = [max((offset.y for offset in row), default=0.0) for row in offsets]
    LOGGER.debug("grid column offsets %s, row offsets %s", xoffsets, yoffsets)

    aligned = [
        [
            cell.pad_left(_snap(xoffsets[col] - offset.x)).pad_top(_snap(yoffsets[r] - offset.y))
            for col, (cell, offset) in enumerate(zip(row, offsets[r]))
        ]
        for r, row in enumerate(rows)
    ]

    areas = [[cell.plot_extent(extent) for cell in row] for row in aligned]
    min_width = min(area.width for row in areas for area in row)
    min_height = min(area.height for row in areas for area in row)
    LOGGER.debug("grid data area %.1f x %.1f", min_width, min_height)

    row_count = len(aligned)
    out: list[list[Plot]] = []
    for r, row in enumerate(aligned):
        column_count = len(row)
        padded: list[Plot] = []
        for col, cell in enumerate(row):
            extra_right = pad_right if col + 1 < column_count else 0.0
            extra_bottom = pad_bottom if r + 1 < row_count else 0.0
            area = areas[r][col]
            padded.append(
                cell.pad_right(_snap(area.width - min_width) + extra_right).pad_bottom(
                    _snap(area.height - min_height) + extra_bottom
                )
            )
        out.append(padded)
    return out


def _snap(delta: float) -> float:
    # Re-summed component sizes differ from their targets by rounding residue.
    return 0.0 if abs(delta) <= GRID_TOLERANCE_PX else delta


pad_plots = align_grid
