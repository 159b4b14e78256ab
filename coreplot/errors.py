"""Exceptions raised by coreplot.

All of them derive from ``ValueError`` so callers that only care about
"bad input" can catch the builtin.
"""


class CorePlotError(ValueError):
    """Base class for every coreplot input error."""


class InvalidGeometry(CorePlotError):
    """Bad radius, subdivision count, or z-level list."""


class InvalidArgument(CorePlotError):
    """Unrecognized option value (ZDataType, ViewAngle, palette, ...)."""


class InvalidColor(CorePlotError):
    """Malformed hex code or RGB component outside [0, 255]."""


class TooManyColors(CorePlotError):
    """More colors were given than there are layers."""

    def __init__(self, n_colors: int, n_layers: int):
        self.n_colors = n_colors
        self.n_layers = n_layers
        super().__init__(
            f"Too many colors specified ({n_colors} colors for {n_layers} "
            f"layers). The number of colors must be less than or equal to "
            f"the number of layers.")
