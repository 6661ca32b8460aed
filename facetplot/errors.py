from __future__ import annotations


class PlotError(Exception):
    """Base class for facetplot errors."""


class InvalidArgumentError(PlotError, ValueError):
    """Raised when a caller violates an input contract."""
