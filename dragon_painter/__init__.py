"""
Dragon fractal painting library.

This library renders the two-map "dragon" iterated function system with the
chaos game: a point starts at the origin and is repeatedly moved by one of
two contractive affine maps chosen by a fair coin, every visited point being
plotted on a drawing surface with periodic refresh requests.

Key Features:
- Immutable, validated affine parameter sets
- Reproducible random parameter generation from an explicit numpy Generator
- Progressive painting onto any object implementing the surface protocol
- numpy and Pillow backed surfaces, cooperative cancellation

Example usage:
    >>> import numpy as np
    >>> from dragon_painter import ArraySurface, DragonPainter, DragonParametersGenerator
    >>> parameters = DragonParametersGenerator(np.random.default_rng(42)).generate()
    >>> surface = ArraySurface(640, 480)
    >>> DragonPainter(surface, parameters).paint()
"""

__version__ = "1.0.0"
__author__ = "Dragon Painter Team"

from dragon_painter.core.errors import (
    DragonPainterError,
    InvalidParameters,
    InvalidRandomSource,
    PainterBusy,
    SurfaceUnavailable,
)
from dragon_painter.core.affine import AffineMap
from dragon_painter.core.parameters import AffineFractalParameters, DEFAULT_PARAMETERS
from dragon_painter.core.generator import DragonParametersGenerator, generate_parameters
from dragon_painter.rendering.colors import ColorRGB, Palette, BLACK, YELLOW
from dragon_painter.rendering.surface import ArraySurface, DrawingSession, DrawingSurface, PillowSurface
from dragon_painter.rendering.painter import DragonPainter, PaintState

# Main API classes
from dragon_painter.api import DragonPainterFactory, DragonRenderer, RenderConfig

__all__ = [
    "AffineFractalParameters",
    "AffineMap",
    "ArraySurface",
    "BLACK",
    "ColorRGB",
    "DEFAULT_PARAMETERS",
    "DragonPainter",
    "DragonPainterError",
    "DragonPainterFactory",
    "DragonParametersGenerator",
    "DragonRenderer",
    "DrawingSession",
    "DrawingSurface",
    "InvalidParameters",
    "InvalidRandomSource",
    "PaintState",
    "PainterBusy",
    "Palette",
    "PillowSurface",
    "RenderConfig",
    "SurfaceUnavailable",
    "YELLOW",
    "generate_parameters",
]
