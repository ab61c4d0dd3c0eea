"""
Command-line interface for dragon fractal painting.

Parameters are generated from a seed (or loaded from a JSON file), can be
edited through options, and are painted onto an in-memory image that can be
opened in the system image viewer.
"""

import click
import sys
import json
from pathlib import Path

import logging
import time

from .. import __version__
from ..api import DragonRenderer, RenderConfig
from ..core.errors import DragonPainterError
from ..core.generator import DEFAULT_ITERATIONS
from ..core.parameters import AffineFractalParameters
from ..rendering.colors import NAMED_COLORS
from ..rendering.surface import PillowSurface

logger = logging.getLogger(__name__)


def _fail(ctx, error: Exception):
    click.echo(f"Error: {error}", err=True)
    if ctx.obj.get('verbose'):
        import traceback
        traceback.print_exc()
    sys.exit(1)


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version information')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress most output')
@click.pass_context
def main(ctx, version, verbose, quiet):
    """
    Dragon Painter - chaos-game rendering of the Heighway dragon family.
    """
    # Setup logging
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG,
                            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    else:
        logging.basicConfig(level=logging.INFO,
                            format='%(levelname)s: %(message)s')

    if version:
        click.echo(f"Dragon Painter v{__version__}")
        click.echo(f"Python: {sys.version}")
        if ctx.invoked_subcommand is None:
            sys.exit(0)

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose


@main.command()
@click.option('--seed', type=int, help='Random seed for parameter generation')
@click.option('--iterations', type=int, default=DEFAULT_ITERATIONS, show_default=True,
              help='Number of points to plot')
@click.pass_context
def generate(ctx, seed, iterations):
    """
    Generate a random parameter set and print it as JSON.
    """
    try:
        renderer = DragonRenderer(RenderConfig(seed=seed, iteration_count=iterations))
        parameters = renderer.generate_parameters()
        click.echo(json.dumps(parameters.to_dict(), indent=2))
    except (DragonPainterError, ValueError) as e:
        _fail(ctx, e)


def _load_parameters(path: str) -> AffineFractalParameters:
    with open(Path(path), 'r') as f:
        data = json.load(f)
    return AffineFractalParameters.from_dict(data)


@main.command()
@click.option('--seed', type=int, help='Random seed for parameter generation')
@click.option('--params', 'params_file', type=click.Path(exists=True),
              help='JSON parameter file (as printed by "generate")')
@click.option('--angle-a', type=float, help='Rotation angle of map A (radians)')
@click.option('--angle-b', type=float, help='Rotation angle of map B (radians)')
@click.option('--scale', type=float, help='Contraction factor in (0, 1)')
@click.option('--shift-x', type=float, help='Horizontal shift factor of map B')
@click.option('--shift-y', type=float, help='Vertical shift factor of map B')
@click.option('--iterations', type=int, help='Number of points to plot')
@click.option('--width', '-w', type=int, default=800, show_default=True, help='Image width')
@click.option('--height', '-h', type=int, default=600, show_default=True, help='Image height')
@click.option('--background', type=click.Choice(list(NAMED_COLORS)), default='black',
              show_default=True, help='Background color')
@click.option('--foreground', type=click.Choice(list(NAMED_COLORS)), default='yellow',
              show_default=True, help='Point color')
@click.option('--show', is_flag=True, help='Open the result in the system image viewer')
@click.pass_context
def render(ctx, seed, params_file, angle_a, angle_b, scale, shift_x, shift_y,
           iterations, width, height, background, foreground, show):
    """
    Paint a dragon, optionally editing the generated parameters.
    """
    try:
        config = RenderConfig(width=width, height=height, iteration_count=iterations,
                              seed=seed, background=background, foreground=foreground)
        renderer = DragonRenderer(config)

        if params_file is not None:
            parameters = _load_parameters(params_file)
        else:
            parameters = renderer.generate_parameters()

        # Command-line values act as user edits on the draft parameters
        edits = {
            'angle_a': angle_a,
            'angle_b': angle_b,
            'scale': scale,
            'shift_x': shift_x,
            'shift_y': shift_y,
            'iteration_count': iterations,
        }
        edits = {k: v for k, v in edits.items() if v is not None}
        if edits:
            parameters = parameters.replace(**edits)

        if ctx.obj.get('verbose'):
            click.echo(json.dumps(parameters.to_dict(), indent=2))

        surface = PillowSurface(width, height)
        click.echo(f"Painting {parameters.iteration_count} points on {width}x{height}...")
        start_time = time.time()

        renderer.render(parameters, surface)

        render_time = time.time() - start_time
        lit = surface.lit_pixel_count(renderer.palette.foreground)
        click.echo(f"Render complete: {render_time:.2f}s, {lit} pixels lit")

        if show:
            surface.image.show(title='Dragon')

    except (DragonPainterError, ValueError, OSError) as e:
        _fail(ctx, e)


@main.command('list-colors')
def list_colors():
    """List available color names."""
    click.echo("Available colors:")
    for name, color in NAMED_COLORS.items():
        click.echo(f"  {name:10} {color.to_uint8_tuple()}")


if __name__ == '__main__':
    main()
