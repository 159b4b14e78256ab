"""coreplot — stacked-cylinder visualizations of geological, sediment and ice cores."""

from coreplot.builder import CorePlot, core_plot
from coreplot.colors import (hex_to_rgb, legend_visibility, parse_color_spec,
                             resolve_colors, rgb_to_hex)
from coreplot.errors import (CorePlotError, InvalidArgument, InvalidColor,
                             InvalidGeometry, TooManyColors)
from coreplot.geometry import build_disc_mesh, extrude
from coreplot.layers import boundaries, normalize, render_layers
from coreplot.palettes import core_colors
