"""Assemble a trimesh Scene from a CorePlot.

Core coordinates are (x, y, depth) with depth increasing downward. The
scene uses glTF's Y-up convention, so every vertex maps to
``(x, -depth, y)``; that is a proper rotation and keeps face winding.
"""

import math
import logging

import numpy as np
import trimesh

from .builder import CorePlot
from .constants import CAMERA_DISTANCE_FACTOR, LIGHT_DIRECTION
from .geometry import to_trimesh
from .models import CoreStyle, ResolvedLayer

logger = logging.getLogger(__name__)


def _to_y_up(vertices: np.ndarray) -> np.ndarray:
    return np.column_stack([vertices[:, 0], -vertices[:, 2], vertices[:, 1]])


def layer_mesh(layer: ResolvedLayer, style: CoreStyle) -> trimesh.Trimesh:
    """Closed, colored triangle mesh for one layer in Y-up coordinates."""
    solid = to_trimesh(layer.mesh)
    mesh = trimesh.Trimesh(vertices=_to_y_up(solid.vertices),
                           faces=solid.faces, process=False)

    r, g, b = layer.color
    alpha = float(style.face_alpha)
    material = trimesh.visual.material.PBRMaterial(
        name=layer.name,
        baseColorFactor=[r, g, b, alpha],
        alphaMode='BLEND' if alpha < 1.0 else 'OPAQUE',
        doubleSided=True,
    )
    mesh.visual = trimesh.visual.TextureVisuals(material=material)
    mesh.metadata.update({
        'name': layer.name,
        'color': layer.color_hex,
        'legend_visible': layer.legend_visible,
        'z_top': layer.z_top,
        'z_bottom': layer.z_bottom,
    })
    return mesh


def build_scene(plot: CorePlot) -> trimesh.Scene:
    """One geometry per layer, named ``layer_NN`` from the top down."""
    scene = trimesh.Scene()
    for layer in plot.layers:
        scene.add_geometry(layer_mesh(layer, plot.style),
                           geom_name=layer.name, node_name=layer.name)

    _set_camera(scene, plot)
    scene.metadata['coreplot'] = {
        'legend': [{'geometry': layer.name, 'color': layer.color_hex}
                   for layer in plot.legend_layers],
        'view_angle': plot.view_angle.value,
        'radius': plot.radius,
        'zlim': list(plot.zlim),
        'z_reversed': True,
        'edge_lines': plot.style.edge_lines,
        'edge_alpha': plot.style.edge_alpha,
        'edge_width': plot.style.edge_width,
        'light': plot.style.light,
        'light_direction': list(LIGHT_DIRECTION),
    }
    logger.info(f"Scene assembled: {len(scene.geometry)} layer meshes, "
                f"view={plot.view_angle.value}")
    return scene


def _set_camera(scene: trimesh.Scene, plot: CorePlot) -> None:
    """Aim the camera at the middle of the core from the view angle."""
    z_top, z_bottom = plot.zlim
    center = [0.0, -(z_top + z_bottom) / 2.0, 0.0]
    extent = max(2.0 * plot.radius, abs(z_bottom - z_top))
    distance = CAMERA_DISTANCE_FACTOR * extent
    # Tilt down by the elevation, then swing around the vertical axis.
    angles = (-math.radians(plot.view_angle.elevation),
              math.radians(plot.view_angle.azimuth),
              0.0)
    scene.set_camera(angles=angles, distance=distance, center=center)
