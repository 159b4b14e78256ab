"""core_plot — thin orchestrator tying Z data, meshes and colors together."""

import logging
from dataclasses import dataclass, field

from .colors import (legend_visibility, parse_color_spec, resolve_colors,
                     rgb_to_hex)
from .constants import (ANGULAR_COUNT, DEFAULT_EDGE_ALPHA,
                        DEFAULT_EDGE_LINES, DEFAULT_EDGE_WIDTH,
                        DEFAULT_FACE_ALPHA, DEFAULT_LIGHT, DEFAULT_RADIUS,
                        DEFAULT_VIEW_ANGLE, DEFAULT_Z_DATA_TYPE, RING_COUNT)
from .layers import boundaries, normalize, render_layers
from .models import ColorSpec, CoreStyle, ResolvedLayer, ViewAngle, ZDataType

logger = logging.getLogger(__name__)


@dataclass
class CorePlot:
    """Everything a renderer needs to draw one core."""
    layers: list[ResolvedLayer]
    radius: float
    z_offset: float
    view_angle: ViewAngle
    style: CoreStyle
    color_spec: ColorSpec = field(repr=False)

    @property
    def n_layers(self) -> int:
        return len(self.layers)

    @property
    def total_thickness(self) -> float:
        return sum(layer.thickness for layer in self.layers)

    @property
    def legend_layers(self) -> list[ResolvedLayer]:
        """One layer per distinct color, top-most first."""
        return [layer for layer in self.layers if layer.legend_visible]

    @property
    def xlim(self) -> tuple[float, float]:
        return (-self.radius, self.radius)

    @property
    def ylim(self) -> tuple[float, float]:
        return (-self.radius, self.radius)

    @property
    def zlim(self) -> tuple[float, float]:
        """Depth axis limits; depth increases downward when drawn."""
        return (self.layers[0].z_top, self.layers[-1].z_bottom)


def core_plot(z, colors=None, radius: float = DEFAULT_RADIUS,
              edge_lines: bool = DEFAULT_EDGE_LINES,
              light: bool = DEFAULT_LIGHT,
              face_alpha: float = DEFAULT_FACE_ALPHA,
              edge_alpha: float = DEFAULT_EDGE_ALPHA,
              edge_width: float = DEFAULT_EDGE_WIDTH,
              view_angle: str = DEFAULT_VIEW_ANGLE,
              z_data_type: str = DEFAULT_Z_DATA_TYPE,
              ring_count: int = RING_COUNT,
              angular_count: int = ANGULAR_COUNT) -> CorePlot:
    """Build a stacked-cylinder visualization of a core.

    Parameters
    ----------
    z : sequence of float
        Layer thicknesses from top to bottom, or with
        ``z_data_type='depth'`` the N+1 depths bounding N layers.
    colors : optional
        ``None`` for alternating grays, a hex code or list of hex codes,
        or an RGB triplet / (M, 3) list of triplets (0-1 or 0-255). Fewer
        colors than layers repeat; more raise ``TooManyColors``.
    radius : float
        Radial width of the cylinder.
    edge_lines, light, face_alpha, edge_alpha, edge_width
        Passed through to the renderer in :attr:`CorePlot.style`.
    view_angle : str
        ``'oblique'`` or ``'right'``.
    z_data_type : str
        ``'thickness'`` or ``'depth'``.
    ring_count, angular_count : int
        Disc subdivisions.

    Colors are resolved before any geometry is built, so a bad color
    specification aborts the call without leaving partial results.
    """
    view = ViewAngle.parse(view_angle)
    z_data_type = ZDataType.parse(z_data_type)
    thicknesses, z_offset = normalize(z, z_data_type)
    edges = boundaries(z, z_data_type)
    n_layers = len(thicknesses)

    spec = parse_color_spec(colors)
    layer_colors = resolve_colors(n_layers, spec)
    legend_flags = legend_visibility(layer_colors)

    meshes = render_layers(thicknesses, radius, z_offset,
                           ring_count=ring_count, angular_count=angular_count,
                           edges=edges)

    layers = [
        ResolvedLayer(index=lm.index, z_top=lm.z_top, z_bottom=lm.z_bottom,
                      color=rgb, color_hex=rgb_to_hex(rgb),
                      legend_visible=visible, mesh=lm.mesh)
        for lm, rgb, visible in zip(meshes, layer_colors, legend_flags)
    ]
    style = CoreStyle(edge_lines=edge_lines, light=light,
                      face_alpha=face_alpha, edge_alpha=edge_alpha,
                      edge_width=edge_width)

    plot = CorePlot(layers=layers, radius=float(radius), z_offset=z_offset,
                    view_angle=view, style=style, color_spec=spec)
    logger.info(f"Core plot: {plot.n_layers} layers, "
                f"{len(plot.legend_layers)} legend entries, "
                f"depth {plot.zlim[0]:g}–{plot.zlim[1]:g}")
    return plot
