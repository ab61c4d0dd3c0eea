"""
Main API classes for dragon fractal painting.

This module wires the parameter generator, the painter and the drawing
surfaces together behind a small configuration object, without any
process-wide state: every dependency is passed in by the caller.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np

from .core.generator import DEFAULT_ITERATIONS, DragonParametersGenerator
from .core.parameters import AffineFractalParameters
from .rendering.colors import Palette, get_named_color
from .rendering.painter import DragonPainter, IntegerSource
from .rendering.surface import ArraySurface, DrawingSurface

logger = logging.getLogger(__name__)


@dataclass
class RenderConfig:
    """Configuration for dragon rendering."""

    # Surface parameters
    width: int = 800
    height: int = 600

    # Generation parameters
    iteration_count: Optional[int] = None  # None keeps the generator default
    seed: Optional[int] = None

    # Colors
    background: str = 'black'
    foreground: str = 'yellow'

    def validate(self):
        """Validate configuration parameters."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be positive")

        if self.iteration_count is not None and self.iteration_count < 0:
            raise ValueError("iteration_count must be >= 0")

        get_named_color(self.background)
        get_named_color(self.foreground)

    @property
    def palette(self) -> Palette:
        return Palette.from_names(self.background, self.foreground)


class DragonPainterFactory:
    """Creates a fresh painter for every paint request on a given surface."""

    def __init__(self, surface: DrawingSurface, coin_rng: Optional[IntegerSource] = None,
                 palette: Optional[Palette] = None):
        self.surface = surface
        self.coin_rng = coin_rng
        self.palette = palette

    def create_painter(self, parameters: AffineFractalParameters,
                       should_cancel: Optional[Callable[[], bool]] = None) -> DragonPainter:
        return DragonPainter(self.surface, parameters, rng=self.coin_rng,
                             palette=self.palette, should_cancel=should_cancel)


class DragonRenderer:
    """High-level entry point: generate parameters and paint them."""

    def __init__(self, config: Optional[RenderConfig] = None):
        """
        Initialize dragon renderer.

        Args:
            config: Rendering configuration (uses defaults if None)
        """
        self.config = config or RenderConfig()
        self.config.validate()
        self.palette = self.config.palette

        logger.info(f"DragonRenderer initialized: {self.config.width}x{self.config.height}, "
                    f"seed={self.config.seed}")

    def generate_parameters(self) -> AffineFractalParameters:
        """Generate a random parameter set from the configured seed."""
        iteration_count = self.config.iteration_count
        if iteration_count is None:
            iteration_count = DEFAULT_ITERATIONS
        generator = DragonParametersGenerator(np.random.default_rng(self.config.seed),
                                              iteration_count)
        return generator.generate()

    def render(self, parameters: Optional[AffineFractalParameters] = None,
               surface: Optional[DrawingSurface] = None,
               coin_rng: Optional[IntegerSource] = None,
               should_cancel: Optional[Callable[[], bool]] = None) -> DrawingSurface:
        """
        Paint a dragon onto a surface.

        Args:
            parameters: Parameters to paint; generated from the config if None
            surface: Target surface; a new ArraySurface of the configured size if None
            coin_rng: Optional seeded source for the per-iteration coin flips
            should_cancel: Optional cancellation check polled every iteration

        Returns:
            The surface that was painted on
        """
        start_time = time.time()

        if parameters is None:
            parameters = self.generate_parameters()
        if surface is None:
            surface = ArraySurface(self.config.width, self.config.height)

        logger.info(f"Starting render: {parameters.iteration_count} iterations")

        factory = DragonPainterFactory(surface, coin_rng, self.palette)
        factory.create_painter(parameters, should_cancel).paint()

        total_time = time.time() - start_time
        logger.info(f"Render complete: {total_time:.2f}s")

        return surface
