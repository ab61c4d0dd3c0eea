"""
Random parameter generation for the dragon attractor.

The generator never touches global random state: it draws from the source
it was given, so a seeded numpy Generator reproduces the same parameter set.
"""

import logging
import math
from numbers import Integral
from typing import Optional, Protocol, Tuple

import numpy as np

from .errors import InvalidParameters, InvalidRandomSource
from .parameters import AffineFractalParameters

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 80000

ANGLE_RANGE: Tuple[float, float] = (0.0, 2 * math.pi)
SCALE_RANGE: Tuple[float, float] = (0.60, 0.80)
SHIFT_X_RANGE: Tuple[float, float] = (0.80, 1.20)
SHIFT_Y_RANGE: Tuple[float, float] = (-0.20, 0.20)


class UniformSource(Protocol):
    """Subset of ``numpy.random.Generator`` used for parameter draws."""

    def uniform(self, low: float, high: float) -> float:
        ...


class DragonParametersGenerator:
    """Produces randomized, contractive dragon parameter sets."""

    def __init__(self, rng: UniformSource, iteration_count: int = DEFAULT_ITERATIONS):
        """
        Initialize generator.

        Args:
            rng: Randomness source, e.g. ``numpy.random.default_rng(seed)``
            iteration_count: Iteration budget stored in generated parameters
        """
        if rng is None:
            raise InvalidRandomSource("A randomness source is required")
        if isinstance(iteration_count, bool) or not isinstance(iteration_count, Integral):
            raise InvalidParameters(
                f"iteration_count must be an integer, got {iteration_count!r}"
            )
        if iteration_count < 0:
            raise InvalidParameters(f"iteration_count must be >= 0, got {iteration_count}")
        self.rng = rng
        self.iteration_count = iteration_count

    def generate(self) -> AffineFractalParameters:
        """Draw a new parameter set from the randomness source."""
        parameters = AffineFractalParameters(
            angle_a=self._draw('angle_a', ANGLE_RANGE),
            angle_b=self._draw('angle_b', ANGLE_RANGE),
            shift_x=self._draw('shift_x', SHIFT_X_RANGE),
            shift_y=self._draw('shift_y', SHIFT_Y_RANGE),
            scale=self._draw('scale', SCALE_RANGE),
            iteration_count=self.iteration_count,
        )
        logger.debug(f"Generated parameters: {parameters}")
        return parameters

    def _draw(self, name: str, bounds: Tuple[float, float]) -> float:
        low, high = bounds
        try:
            value = float(self.rng.uniform(low, high))
        except (AttributeError, TypeError, ValueError, OverflowError) as e:
            raise InvalidRandomSource(
                f"Randomness source failed to draw {name} in [{low}, {high}): {e}"
            ) from e

        # The half-open interval is the contract, but float rounding in
        # low + (high - low) * u can land exactly on ``high``.
        if not math.isfinite(value) or not low <= value <= high:
            raise InvalidRandomSource(
                f"Randomness source returned {value!r} for {name}, "
                f"outside [{low}, {high})"
            )
        if value == high:
            value = float(np.nextafter(high, low))
        return value


def generate_parameters(seed: Optional[int] = None,
                        iteration_count: int = DEFAULT_ITERATIONS) -> AffineFractalParameters:
    """Shortcut: generate one parameter set from a seeded numpy Generator."""
    return DragonParametersGenerator(np.random.default_rng(seed), iteration_count).generate()
