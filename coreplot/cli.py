"""Click CLI commands for coreplot."""

import logging

import click

from .builder import core_plot
from .constants import (ANGULAR_COUNT, DEFAULT_FACE_ALPHA, DEFAULT_RADIUS,
                        DEFAULT_VIEW_ANGLE, DEFAULT_Z_DATA_TYPE, OUTPUT_DIR,
                        RING_COUNT)
from .errors import CorePlotError
from .export import generate_glb, generate_ply
from .palettes import core_colors

logger = logging.getLogger(__name__)


def _parse_rgb(ctx, param, values):
    triples = []
    for raw in values:
        parts = raw.split(',')
        try:
            triple = [float(p) for p in parts]
        except ValueError:
            raise click.BadParameter(f"{raw!r} is not R,G,B") from None
        if len(triple) != 3:
            raise click.BadParameter(f"{raw!r} is not R,G,B")
        triples.append(triple)
    return triples


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Log progress messages')
def cli(verbose: bool):
    """Render stacked-cylinder core stratigraphy models."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument('z', nargs=-1, type=float, required=True)
@click.option('--color', '-c', 'hex_colors', multiple=True,
              help='Hex layer color, e.g. #fea12c (repeatable)')
@click.option('--rgb', 'rgb_colors', multiple=True, callback=_parse_rgb,
              help='RGB layer color as R,G,B in 0-1 or 0-255 (repeatable)')
@click.option('--palette', '-p', default=None,
              help='Named palette: ice, sediment or rock')
@click.option('--palette-size', type=float, default=None,
              help='Number of palette colors to use (1-7)')
@click.option('--radius', '-r', default=DEFAULT_RADIUS, show_default=True)
@click.option('--rings', default=RING_COUNT, show_default=True,
              help='Concentric radial subdivisions')
@click.option('--segments', default=ANGULAR_COUNT, show_default=True,
              help='Angular subdivisions')
@click.option('--z-data-type', default=DEFAULT_Z_DATA_TYPE, show_default=True,
              help="'thickness' or 'depth'")
@click.option('--view-angle', default=DEFAULT_VIEW_ANGLE, show_default=True,
              help="'oblique' or 'right'")
@click.option('--face-alpha', default=DEFAULT_FACE_ALPHA, show_default=True)
@click.option('--edge-lines/--no-edge-lines', default=False)
@click.option('--light/--no-light', default=True)
@click.option('--format', 'fmt', type=click.Choice(['glb', 'ply']),
              default='glb', show_default=True)
@click.option('--output', '-o', default=None,
              help='Output GLB file (glb) or directory (ply)')
@click.option('--name', '-n', default='core', help='Name prefix for PLY files')
def plot(z, hex_colors, rgb_colors, palette, palette_size, radius, rings,
         segments, z_data_type, view_angle, face_alpha, edge_lines, light,
         fmt, output, name):
    """Build a core model from layer thicknesses (or depths) Z."""
    given = [bool(hex_colors), bool(rgb_colors), palette is not None]
    if sum(given) > 1:
        raise click.UsageError("--color, --rgb and --palette are mutually "
                               "exclusive")
    if palette_size is not None and palette is None:
        raise click.UsageError("--palette-size requires --palette")

    try:
        if palette is not None:
            colors = core_colors(palette, palette_size)
        elif hex_colors:
            colors = list(hex_colors)
        elif rgb_colors:
            colors = rgb_colors
        else:
            colors = None

        result_plot = core_plot(
            list(z), colors=colors, radius=radius, edge_lines=edge_lines,
            light=light, face_alpha=face_alpha, view_angle=view_angle,
            z_data_type=z_data_type, ring_count=rings,
            angular_count=segments)

        if fmt == 'glb':
            result = generate_glb(result_plot,
                                  output or OUTPUT_DIR / f"{name}.glb")
            click.echo(f"Wrote {result['output_path']} "
                       f"({result['layers']} layers, "
                       f"{result['total_faces']} faces)")
        else:
            result = generate_ply(result_plot, output or OUTPUT_DIR, name=name)
            for layer in result['layers']:
                mark = '*' if layer['legend_visible'] else ' '
                click.echo(f"  [{mark}] {layer['file']}: "
                           f"z={layer['z_top']:g}–{layer['z_bottom']:g}, "
                           f"color={layer['color']}")
            click.echo(f"Manifest: {result['manifest_path']}")
    except CorePlotError as e:
        logger.error(f"Error building core plot: {e}")
        raise click.ClickException(str(e))


@cli.command()
@click.argument('name')
@click.option('-n', 'count', type=float, default=None,
              help='Number of colors (1-7)')
def palette(name: str, count):
    """Print the hex colors of a named palette."""
    try:
        colors = core_colors(name, count)
    except CorePlotError as e:
        raise click.ClickException(str(e))
    for code in colors:
        click.echo(code)


if __name__ == '__main__':
    cli()
