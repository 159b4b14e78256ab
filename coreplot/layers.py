"""Z-data normalization and placement of layer meshes along the core."""

import logging

import numpy as np

from .constants import ANGULAR_COUNT, RING_COUNT
from .errors import InvalidArgument
from .geometry import build_disc_mesh, extrude_disc
from .models import LayerMesh, ZDataType

logger = logging.getLogger(__name__)


def normalize(z, mode='thickness'):
    """Convert Z data into ``(thicknesses, z_offset)``.

    ``mode='thickness'`` returns Z unchanged with a zero offset.
    ``mode='depth'`` treats Z as the N+1 depth boundaries of N layers: the
    offset is the top boundary and the thicknesses are consecutive
    differences. Monotonicity is not checked.
    """
    mode = ZDataType.parse(mode)
    values = np.asarray(z, dtype=np.float64)
    if values.ndim != 1:
        raise InvalidArgument(f"Z must be a 1-D sequence, got shape "
                              f"{values.shape}")

    if mode is ZDataType.THICKNESS:
        if len(values) < 1:
            raise InvalidArgument("Z must contain at least one layer "
                                  "thickness")
        return values.copy(), 0.0

    if len(values) < 2:
        raise InvalidArgument(
            f"ZDataType='depth' needs at least 2 depth boundaries, "
            f"got {len(values)}")
    return np.diff(values), float(values[0])


def boundaries(z, mode='thickness') -> np.ndarray:
    """The N+1 layer boundaries described by Z, top first.

    Depth Z is returned as given, so layers sit on the recorded depths
    rather than on a cumulative sum of their differences. Thickness Z
    starts at zero.
    """
    mode = ZDataType.parse(mode)
    thicknesses, _ = normalize(z, mode)
    if mode is ZDataType.DEPTH:
        return np.asarray(z, dtype=np.float64).copy()
    return np.concatenate([[0.0], np.cumsum(thicknesses)])


def layer_bounds(thicknesses, z_offset: float = 0.0, edges=None):
    """Return ``(tops, bottoms)`` arrays for stacked layers.

    With ``edges`` (N+1 boundaries) the bounds are taken from it directly.
    """
    thicknesses = np.asarray(thicknesses, dtype=np.float64)
    if edges is not None:
        edges = np.asarray(edges, dtype=np.float64)
        if edges.shape != (len(thicknesses) + 1,):
            raise InvalidArgument(f"Expected {len(thicknesses) + 1} layer "
                                  f"boundaries, got shape {edges.shape}")
        return edges[:-1], edges[1:]
    bottoms = np.cumsum(thicknesses) + z_offset
    tops = np.concatenate([[z_offset], bottoms[:-1]])
    return tops, bottoms


def render_layers(thicknesses, radius: float, z_offset: float = 0.0,
                  ring_count: int = RING_COUNT,
                  angular_count: int = ANGULAR_COUNT,
                  edges=None) -> list[LayerMesh]:
    """Build one single-slab cylinder mesh per layer, stacked along Z.

    Layer k spans ``[z_offset + sum(t[:k]), z_offset + sum(t[:k+1])]``,
    or ``[edges[k], edges[k+1]]`` when the boundaries are passed in.
    The disc cross-section is meshed once and reused for every layer.
    """
    thicknesses = np.asarray(thicknesses, dtype=np.float64).ravel()
    disc = build_disc_mesh(radius, ring_count, angular_count)
    tops, bottoms = layer_bounds(thicknesses, z_offset, edges)

    n_flat = int(np.count_nonzero(thicknesses <= 0))
    if n_flat:
        logger.warning(f"{n_flat} layer(s) have zero or negative thickness; "
                       f"their meshes will be flat or inverted")

    layers = []
    for k, (top, bottom) in enumerate(zip(tops, bottoms)):
        mesh = extrude_disc(disc, [top, bottom])
        layers.append(LayerMesh(index=k, z_top=float(top),
                                z_bottom=float(bottom), mesh=mesh))
        logger.debug(f"  layer {k}: z=[{top:g}, {bottom:g}], "
                     f"{mesh.n_cells} cells")

    logger.info(f"Built {len(layers)} layer meshes "
                f"(radius={radius}, rings={ring_count}, "
                f"segments={angular_count})")
    return layers
