from __future__ import annotations

import argparse
import logging

import numpy as np

from facetplot import (
    BackgroundFill,
    Border,
    Bounds,
    Extent,
    Plot,
    PlotLabel,
    PointRenderer,
    Position,
    align_grid,
    expand_bounds,
)
from facetplot.settings import DEFAULT_BOUNDS_BUFFER


def _panel(title: str, xs: np.ndarray, ys: np.ndarray, *, with_axis_label: bool) -> Plot:
    xb = expand_bounds(Bounds(float(np.min(xs)), float(np.max(xs))), DEFAULT_BOUNDS_BUFFER)
    yb = expand_bounds(Bounds(float(np.min(ys)), float(np.max(ys))), DEFAULT_BOUNDS_BUFFER)
    plot = (
        Plot(renderer=PointRenderer.from_xy(xs, ys, radius=1.5))
        .update_bounds(xb, yb)
        .add_component(BackgroundFill())
        .add_component(PlotLabel(title, position=Position.TOP))
        .add_component(Border())
    )
    if with_axis_label:
        plot = plot.add_component(PlotLabel("value", position=Position.LEFT))
    return plot


def main() -> None:
    parser = argparse.ArgumentParser(description="Align a 2x2 facet grid and print cell geometry.")
    parser.add_argument("--width", type=float, default=400.0)
    parser.add_argument("--height", type=float, default=300.0)
    parser.add_argument("--gutter", type=float, default=8.0)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    x = np.linspace(0.0, 4.0 * np.pi, 64)
    grid = [
        [_panel("sin", x, np.sin(x), with_axis_label=True), _panel("cos", x, np.cos(x), with_axis_label=False)],
        [_panel("x^2", x, x**2, with_axis_label=True), _panel("sqrt", x, np.sqrt(x), with_axis_label=False)],
    ]
    extent = Extent(args.width, args.height)
    aligned = align_grid(grid, extent, pad_right=args.gutter, pad_bottom=args.gutter)
    for r, row in enumerate(aligned):
        for c, cell in enumerate(row):
            offset = cell.plot_offset
            area = cell.plot_extent(extent)
            layers = len(cell.render(extent).layers)
            print(f"cell ({r},{c}) offset=({offset.x:.1f},{offset.y:.1f}) area={area.width:.1f}x{area.height:.1f} layers={layers}")


if __name__ == "__main__":
    main()
