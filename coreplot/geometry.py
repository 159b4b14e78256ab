"""Disc cross-section meshing, extrusion into prism/brick cells, and
surface extraction for rendering."""

import math
import logging

import numpy as np
import trimesh

from .errors import InvalidGeometry
from .models import DiscMesh, ExtrudedMesh

logger = logging.getLogger(__name__)

# ── Cell face tables ─────────────────────────────────────────────────────
# Local vertex positions inside a cell row. Every face is wound so its
# normal points out of the cell, given a counter-clockwise 2D base and
# increasing z. Side faces follow base edge (u, v) as [u, v, v', u'].
_PRISM_TRIS = np.array([
    [0, 2, 1],          # bottom
    [3, 4, 5],          # top
])
_PRISM_QUADS = np.array([
    [0, 1, 4, 3],
    [1, 2, 5, 4],
    [2, 0, 3, 5],
])
_BRICK_QUADS = np.array([
    [0, 3, 2, 1],       # bottom
    [4, 5, 6, 7],       # top
    [0, 1, 5, 4],
    [1, 2, 6, 5],
    [2, 3, 7, 6],
    [3, 0, 4, 7],
])


# ── 2D disc ──────────────────────────────────────────────────────────────

def build_disc_mesh(radius: float, ring_count: int = 1,
                    angular_count: int = 64) -> DiscMesh:
    """Mesh a filled circle into a center fan of triangles and rings of quads.

    Parameters
    ----------
    radius : float
        Outer radius, must be > 0.
    ring_count : int
        Number of concentric radial subdivisions (>= 1). Ring j sits at
        radius ``radius * j / ring_count``.
    angular_count : int
        Samples per ring (>= 3), at angles ``2*pi*i / angular_count``.

    Vertex ``angular_count * j + i`` is ring j+1 (innermost first) at angle
    index i; the center point is the last vertex. Triangles fan from the
    innermost ring to the center; quads tile the space between consecutive
    rings, wrapping at the last angle. All cells are counter-clockwise.
    """
    if not _is_positive_number(radius):
        raise InvalidGeometry(f"radius must be > 0, got {radius!r}")
    if not _is_int_at_least(ring_count, 1):
        raise InvalidGeometry(f"ring_count must be an integer >= 1, "
                              f"got {ring_count!r}")
    if not _is_int_at_least(angular_count, 3):
        raise InvalidGeometry(f"angular_count must be an integer >= 3, "
                              f"got {angular_count!r}")
    nr, nt = int(ring_count), int(angular_count)

    radii = float(radius) * np.arange(1, nr + 1) / nr
    angles = 2.0 * math.pi * np.arange(nt) / nt
    ring_xy = np.column_stack([
        np.outer(radii, np.cos(angles)).ravel(),
        np.outer(radii, np.sin(angles)).ravel(),
    ])
    vertices = np.vstack([ring_xy, [[0.0, 0.0]]])
    center = nr * nt

    i = np.arange(nt)
    i_next = (i + 1) % nt
    triangles = np.column_stack([i, i_next, np.full(nt, center)])

    quads = [np.column_stack([j * nt + i, j * nt + i_next,
                              (j - 1) * nt + i_next, (j - 1) * nt + i])
             for j in range(1, nr)]
    quads = np.vstack(quads) if quads else np.empty((0, 4), dtype=np.int64)

    return DiscMesh(vertices=vertices,
                    triangles=triangles.astype(np.int64),
                    quads=quads.astype(np.int64))


# ── Extrusion ────────────────────────────────────────────────────────────

def extrude(vertices2d, triangles, quads, z_levels) -> ExtrudedMesh:
    """Sweep a 2D mesh through *z_levels* into prisms and bricks.

    One copy of the 2D vertices is stacked per z-level, in level order.
    Each consecutive pair of levels is a slab: every triangle becomes a
    prism ``[b0, b1, b2, t0, t1, t2]`` and every quad a brick
    ``[b0..b3, t0..t3]``, where ``t = b + vertices_per_level``.
    """
    z = np.asarray(z_levels, dtype=np.float64).ravel()
    if len(z) < 2:
        raise InvalidGeometry(f"extrusion needs at least 2 z-levels, "
                              f"got {len(z)}")

    v2 = np.asarray(vertices2d, dtype=np.float64).reshape(-1, 2)
    tris = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    quads = np.asarray(quads, dtype=np.int64).reshape(-1, 4)
    n = len(v2)

    vertices = np.vstack([np.column_stack([v2, np.full(n, zk)]) for zk in z])

    prisms = []
    bricks = []
    for k in range(len(z) - 1):
        bottom, top = k * n, (k + 1) * n
        prisms.append(np.hstack([tris + bottom, tris + top]))
        bricks.append(np.hstack([quads + bottom, quads + top]))

    return ExtrudedMesh(vertices=vertices,
                        prisms=np.vstack(prisms),
                        bricks=np.vstack(bricks),
                        vertices_per_level=n)


def extrude_disc(disc: DiscMesh, z_levels) -> ExtrudedMesh:
    """Convenience wrapper around :func:`extrude` for a :class:`DiscMesh`."""
    return extrude(disc.vertices, disc.triangles, disc.quads, z_levels)


# ── Surfaces ─────────────────────────────────────────────────────────────

def cell_faces(mesh: ExtrudedMesh):
    """Every face of every cell as ``(triangles, quads)`` index arrays.

    Prisms contribute their two caps as triangles and three sides as quads;
    bricks contribute six quads. Faces between neighbouring cells appear
    twice, once per cell, with opposite winding.
    """
    prisms, bricks = mesh.prisms, mesh.bricks
    tris = prisms[:, _PRISM_TRIS].reshape(-1, 3)
    quads = np.vstack([
        prisms[:, _PRISM_QUADS].reshape(-1, 4),
        bricks[:, _BRICK_QUADS].reshape(-1, 4),
    ])
    return tris, quads


def boundary_faces(mesh: ExtrudedMesh):
    """Faces on the outside of the solid: cell faces that are not shared."""
    tris, quads = cell_faces(mesh)
    return _unshared(tris), _unshared(quads)


def _unshared(faces: np.ndarray) -> np.ndarray:
    if len(faces) == 0:
        return faces
    keys = np.sort(faces, axis=1)
    _, inverse, counts = np.unique(keys, axis=0, return_inverse=True,
                                   return_counts=True)
    return faces[counts[inverse.ravel()] == 1]


def triangulate_quads(quads: np.ndarray) -> np.ndarray:
    """Split ``[a, b, c, d]`` quads into ``[a, b, c]`` and ``[a, c, d]``."""
    if len(quads) == 0:
        return np.empty((0, 3), dtype=np.int64)
    return np.vstack([quads[:, [0, 1, 2]], quads[:, [0, 2, 3]]])


def to_trimesh(mesh: ExtrudedMesh, boundary_only: bool = True) -> trimesh.Trimesh:
    """Build a triangle mesh of the extruded solid.

    With *boundary_only* the internal faces are dropped, which leaves a
    closed, outward-wound surface. The vertex buffer is kept as-is so cell
    indices stay valid against the returned mesh.
    """
    tris, quads = boundary_faces(mesh) if boundary_only else cell_faces(mesh)
    faces = np.vstack([tris, triangulate_quads(quads)])
    logger.debug(f"to_trimesh: {mesh.n_cells} cells → {len(faces)} faces")
    return trimesh.Trimesh(vertices=mesh.vertices.copy(), faces=faces,
                           process=False)


def _is_positive_number(value) -> bool:
    try:
        value = float(value)
    except (TypeError, ValueError):
        return False
    return math.isfinite(value) and value > 0


def _is_int_at_least(value, minimum: int) -> bool:
    if isinstance(value, bool):
        return False
    try:
        as_int = int(value)
    except (TypeError, ValueError):
        return False
    return as_int == value and as_int >= minimum
