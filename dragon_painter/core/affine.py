"""
Affine map primitive used by the iterated function system.
"""

import math
from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class AffineMap:
    """Rotation by ``angle``, uniform contraction by ``scale``, then translation."""

    angle: float
    scale: float
    shift_x: float = 0.0
    shift_y: float = 0.0
    _cos: float = field(init=False, repr=False, compare=False)
    _sin: float = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, '_cos', math.cos(self.angle))
        object.__setattr__(self, '_sin', math.sin(self.angle))

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """
        Map a point through the transform.

        Args:
            x, y: Point in fractal space

        Returns:
            Transformed point
        """
        return (
            self.scale * (x * self._cos - y * self._sin) + self.shift_x,
            self.scale * (x * self._sin + y * self._cos) + self.shift_y,
        )
