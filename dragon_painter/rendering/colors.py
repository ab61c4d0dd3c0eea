"""
Color handling for dragon rendering.

Colors are stored as float RGB triples in the 0-1 range and converted to
8-bit tuples when written to a raster.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class ColorRGB:
    """RGB color representation."""
    r: float
    g: float
    b: float

    def __post_init__(self):
        """Validate RGB values."""
        for component in (self.r, self.g, self.b):
            if not 0 <= component <= 1:
                raise ValueError("RGB components must be between 0 and 1")

    def to_uint8_tuple(self) -> Tuple[int, int, int]:
        """Convert to 8-bit RGB tuple."""
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255))


BLACK = ColorRGB(0.0, 0.0, 0.0)
YELLOW = ColorRGB(1.0, 1.0, 0.0)

NAMED_COLORS: Dict[str, ColorRGB] = {
    'black': BLACK,
    'yellow': YELLOW,
    'white': ColorRGB(1.0, 1.0, 1.0),
    'red': ColorRGB(1.0, 0.0, 0.0),
    'green': ColorRGB(0.0, 1.0, 0.0),
    'blue': ColorRGB(0.0, 0.0, 1.0),
    'cyan': ColorRGB(0.0, 1.0, 1.0),
    'magenta': ColorRGB(1.0, 0.0, 1.0),
    'orange': ColorRGB(1.0, 0.5, 0.0),
}


def get_named_color(name: str) -> ColorRGB:
    """Look up a color by name (case-insensitive)."""
    color = NAMED_COLORS.get(name.lower())
    if color is None:
        available = ', '.join(NAMED_COLORS.keys())
        raise ValueError(f"Unknown color '{name}'. Available: {available}")
    return color


@dataclass(frozen=True)
class Palette:
    """Background and foreground colors used by the painter."""

    background: ColorRGB = field(default=BLACK)
    foreground: ColorRGB = field(default=YELLOW)

    @classmethod
    def from_names(cls, background: str = 'black', foreground: str = 'yellow') -> 'Palette':
        """Create a palette from color names."""
        return cls(get_named_color(background), get_named_color(foreground))
