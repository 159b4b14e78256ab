"""Data classes shared by the mesh builder, color resolver and exporters."""

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .constants import (DEFAULT_COLORS, DEFAULT_EDGE_ALPHA,
                        DEFAULT_EDGE_LINES, DEFAULT_EDGE_WIDTH,
                        DEFAULT_FACE_ALPHA, DEFAULT_LIGHT, VIEW_ANGLES)
from .errors import InvalidArgument

# Normalized color, every component in [0, 1].
RGB = tuple[float, float, float]


# ── Meshes ───────────────────────────────────────────────────────────────

class CellKind(Enum):
    PRISM = 'prism'   # extruded triangle, 6 vertex indices
    BRICK = 'brick'   # extruded quad, 8 vertex indices


@dataclass
class DiscMesh:
    """2D disc cross-section: ring vertices followed by the center point."""
    vertices: np.ndarray    # (n, 2) float
    triangles: np.ndarray   # (angular_count, 3) int
    quads: np.ndarray       # ((ring_count - 1) * angular_count, 4) int

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)


@dataclass
class ExtrudedMesh:
    """A disc mesh swept through a list of z-levels.

    ``vertices`` holds one copy of the disc per z-level, so the copy for
    level k starts at ``k * vertices_per_level``. Prisms list their three
    bottom indices then their three top indices; bricks likewise with four.
    """
    vertices: np.ndarray    # (n * n_levels, 3) float
    prisms: np.ndarray      # (n_prisms, 6) int
    bricks: np.ndarray      # (n_bricks, 8) int
    vertices_per_level: int

    def cells(self):
        """Yield ``(CellKind, indices)`` for every volume cell."""
        for row in self.prisms:
            yield CellKind.PRISM, row
        for row in self.bricks:
            yield CellKind.BRICK, row

    @property
    def n_cells(self) -> int:
        return len(self.prisms) + len(self.bricks)


@dataclass
class LayerMesh:
    """One stratigraphic layer placed in the stack."""
    index: int
    z_top: float
    z_bottom: float
    mesh: ExtrudedMesh

    @property
    def thickness(self) -> float:
        return self.z_bottom - self.z_top


# ── Options ──────────────────────────────────────────────────────────────

class ZDataType(str, Enum):
    THICKNESS = 'thickness'
    DEPTH = 'depth'

    @classmethod
    def parse(cls, value) -> 'ZDataType':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgument(
                f"Unrecognized ZDataType {value!r}. Must be either "
                f"'thickness' or 'depth'.") from None


class ViewAngle(str, Enum):
    OBLIQUE = 'oblique'
    RIGHT = 'right'

    @classmethod
    def parse(cls, value) -> 'ViewAngle':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidArgument(
                f"Invalid ViewAngle {value!r}. Must be either "
                f"'oblique' or 'right'.") from None

    @property
    def azimuth(self) -> float:
        return VIEW_ANGLES[self.value][0]

    @property
    def elevation(self) -> float:
        return VIEW_ANGLES[self.value][1]


@dataclass(frozen=True)
class CoreStyle:
    """Rendering flags passed through untouched to the renderer."""
    edge_lines: bool = DEFAULT_EDGE_LINES
    light: bool = DEFAULT_LIGHT
    face_alpha: float = DEFAULT_FACE_ALPHA
    edge_alpha: float = DEFAULT_EDGE_ALPHA
    edge_width: float = DEFAULT_EDGE_WIDTH


# ── Color specifications ─────────────────────────────────────────────────
# Parsed once at the API boundary by ``colors.parse_color_spec``.

@dataclass(frozen=True)
class DefaultColors:
    """Two colors used alternately from the top layer down."""
    codes: tuple[str, str] = DEFAULT_COLORS


@dataclass(frozen=True)
class HexColors:
    codes: tuple[str, ...]


@dataclass(frozen=True)
class RgbColors:
    triples: tuple[RGB, ...]    # already normalized to [0, 1]


ColorSpec = DefaultColors | HexColors | RgbColors


@dataclass
class ResolvedLayer:
    """A placed layer with its final color and legend flag."""
    index: int
    z_top: float
    z_bottom: float
    color: RGB
    color_hex: str
    legend_visible: bool
    mesh: ExtrudedMesh = field(repr=False)

    @property
    def thickness(self) -> float:
        return self.z_bottom - self.z_top

    @property
    def name(self) -> str:
        return f"layer_{self.index:02d}"
