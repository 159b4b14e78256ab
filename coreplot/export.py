"""GLB and per-layer PLY export.

PLY output structure:
  <output_dir>/
    <name>_layer_00.ply   — top layer, solid vertex color
    <name>_layer_01.ply
    ...
    manifest.json         — layer order, depth bounds, colors, legend flags
"""

import json
import logging
import pathlib
import time

import numpy as np
import trimesh

from .builder import CorePlot
from .colors import to_uint8
from .scene import build_scene, layer_mesh

logger = logging.getLogger(__name__)


def generate_glb(plot: CorePlot, output_path) -> dict:
    """Write the whole core as a single GLB scene."""
    t0 = time.perf_counter()
    out = pathlib.Path(output_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    scene = build_scene(plot)
    scene.export(str(out), file_type='glb')

    total_faces = sum(len(g.faces) for g in scene.geometry.values())
    elapsed = time.perf_counter() - t0
    logger.info(f"GLB: {plot.n_layers} layers, {total_faces:,} faces, "
                f"{elapsed:.2f}s → {out}")
    return {
        'output_path': str(out),
        'layers': plot.n_layers,
        'total_faces': total_faces,
        'elapsed_seconds': round(elapsed, 3),
    }


def _assign_solid_color(mesh: trimesh.Trimesh, color_rgb: list) -> trimesh.Trimesh:
    """Assign a single solid color to all vertices of a mesh."""
    rgba = np.array([color_rgb[0], color_rgb[1], color_rgb[2], 255], dtype=np.uint8)
    colors = np.tile(rgba, (len(mesh.vertices), 1))
    mesh.visual = trimesh.visual.ColorVisuals(mesh=mesh, vertex_colors=colors)
    return mesh


def generate_ply(plot: CorePlot, output_dir, name: str = "core") -> dict:
    """Write one vertex-colored PLY per layer plus a ``manifest.json``."""
    out_dir = pathlib.Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    entries = []
    for layer in plot.layers:
        mesh = layer_mesh(layer, plot.style)
        rgb8 = to_uint8(layer.color)
        _assign_solid_color(mesh, rgb8)

        filename = f"{name}_{layer.name}.ply"
        mesh.export(str(out_dir / filename), file_type='ply')
        logger.debug(f"  {filename}: {len(mesh.faces)} faces, "
                     f"color={layer.color_hex}")

        entries.append({
            'file': filename,
            'index': layer.index,
            'z_top': layer.z_top,
            'z_bottom': layer.z_bottom,
            'thickness': layer.thickness,
            'color': layer.color_hex,
            'color_rgb': rgb8,
            'legend_visible': layer.legend_visible,
            'faces': len(mesh.faces),
            'watertight': bool(mesh.is_watertight),
        })

    manifest = {
        'name': name,
        'radius': plot.radius,
        'z_offset': plot.z_offset,
        'view_angle': plot.view_angle.value,
        'layers': entries,
    }
    manifest_path = out_dir / 'manifest.json'
    manifest_path.write_text(json.dumps(manifest, indent=2))

    logger.info(f"PLY: wrote {len(entries)} layer files to {out_dir}")
    return {
        'output_dir': str(out_dir),
        'manifest_path': str(manifest_path),
        'layers': entries,
    }
