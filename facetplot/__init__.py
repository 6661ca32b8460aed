from facetplot.bounds import Bounds, combine_bounds, expand_bounds
from facetplot.components import BackgroundFill, Border, Padding, PlotComponent, PlotLabel, Position
from facetplot.drawable import Drawable, Group
from facetplot.errors import InvalidArgumentError, PlotError
from facetplot.geometry import Extent, Point
from facetplot.grid import align_grid, pad_plots
from facetplot.layout import ReservedSpace, plot_extent, plot_offset, reserved_space
from facetplot.plot import Plot
from facetplot.render import render
from facetplot.renderers import DefaultComponentRenderer, EmptyPlotRenderer, PointRenderer
from facetplot.settings import DEFAULT_EXTENT, PlotTheme, resolve_extent
from facetplot.transform import (
    DefaultXTransformer,
    DefaultYTransformer,
    LogXTransformer,
    LogYTransformer,
    Transformer,
)

__all__ = [
    "BackgroundFill",
    "Border",
    "Bounds",
    "DEFAULT_EXTENT",
    "DefaultComponentRenderer",
    "DefaultXTransformer",
    "DefaultYTransformer",
    "Drawable",
    "EmptyPlotRenderer",
    "Extent",
    "Group",
    "InvalidArgumentError",
    "LogXTransformer",
    "LogYTransformer",
    "Padding",
    "Plot",
    "PlotComponent",
    "PlotError",
    "PlotLabel",
    "PlotTheme",
    "Point",
    "PointRenderer",
    "Position",
    "ReservedSpace",
    "Transformer",
    "align_grid",
    "combine_bounds",
    "expand_bounds",
    "pad_plots",
    "plot_extent",
    "plot_offset",
    "render",
    "reserved_space",
    "resolve_extent",
]
