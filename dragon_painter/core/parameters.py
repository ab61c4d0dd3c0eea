"""
Affine parameter model for the two-map dragon attractor.

A parameter set describes two contractive affine maps sharing one scale
factor: map A rotates by ``angle_a`` around the origin, map B rotates by
``angle_b`` and translates by the shift factors. The shift factors are
dimensionless and only become pixel offsets once a surface size is known.
"""

import dataclasses
import logging
import math
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Dict, Mapping, Tuple

from .affine import AffineMap
from .errors import InvalidParameters

logger = logging.getLogger(__name__)

# Share of the size scale used to turn shift factors into pixel offsets
SHIFT_RATIO = 0.8

# Largest accepted shift factor magnitude; keeps pixel-space points finite
MAX_SHIFT = 1e6


@dataclass(frozen=True)
class AffineFractalParameters:
    """Immutable parameters of the dragon iterated function system."""

    angle_a: float
    angle_b: float
    shift_x: float
    shift_y: float
    scale: float
    iteration_count: int

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate parameter values."""
        for name in ('angle_a', 'angle_b', 'shift_x', 'shift_y', 'scale'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidParameters(f"{name} must be a real number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidParameters(f"{name} must be finite, got {value!r}")

        for name in ('shift_x', 'shift_y'):
            value = getattr(self, name)
            if abs(value) > MAX_SHIFT:
                raise InvalidParameters(
                    f"{name} magnitude must not exceed {MAX_SHIFT:g}, got {value!r}"
                )

        if not 0.0 < self.scale < 1.0:
            raise InvalidParameters(
                f"scale must lie in the open interval (0, 1), got {self.scale}"
            )

        count = self.iteration_count
        if isinstance(count, bool) or not isinstance(count, Integral):
            raise InvalidParameters(f"iteration_count must be an integer, got {count!r}")
        if count < 0:
            raise InvalidParameters(f"iteration_count must be >= 0, got {count}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert parameters to dictionary."""
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AffineFractalParameters':
        """Create parameters from dictionary."""
        if not isinstance(data, Mapping):
            raise InvalidParameters(
                f"Parameters must be a mapping, got {type(data).__name__}"
            )
        names = {f.name for f in dataclasses.fields(cls)}
        unknown = set(data) - names
        if unknown:
            raise InvalidParameters(f"Unknown parameter(s): {', '.join(sorted(map(str, unknown)))}")
        missing = names - set(data)
        if missing:
            raise InvalidParameters(f"Missing parameter(s): {', '.join(sorted(missing))}")
        return cls(**data)

    def replace(self, **changes) -> 'AffineFractalParameters':
        """Return an edited copy; the copy is validated like a new instance."""
        try:
            return dataclasses.replace(self, **changes)
        except TypeError as e:
            raise InvalidParameters(str(e)) from e

    def shift_in_pixels(self, size: float) -> Tuple[float, float]:
        """Translation of map B for a surface whose size scale is ``size``."""
        return (self.shift_x * size * SHIFT_RATIO, self.shift_y * size * SHIFT_RATIO)

    def affine_maps(self, size: float) -> Tuple[AffineMap, AffineMap]:
        """
        Build the two maps of the system in pixel space.

        Args:
            size: Linear size scale of the target surface

        Returns:
            (map A, map B); map A has no translation
        """
        shift_px_x, shift_px_y = self.shift_in_pixels(size)
        return (
            AffineMap(self.angle_a, self.scale),
            AffineMap(self.angle_b, self.scale, shift_px_x, shift_px_y),
        )


# Classic Heighway dragon
DEFAULT_PARAMETERS = AffineFractalParameters(
    angle_a=math.pi / 4,
    angle_b=3 * math.pi / 4,
    shift_x=1.0,
    shift_y=0.0,
    scale=1 / math.sqrt(2),
    iteration_count=80000,
)
