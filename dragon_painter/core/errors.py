"""
Exception hierarchy for dragon fractal generation and painting.

Every error raised by the package derives from DragonPainterError so callers
can handle all of them with a single except clause.
"""


class DragonPainterError(Exception):
    """Base class for all dragon painter errors."""


class InvalidParameters(DragonPainterError, ValueError):
    """Affine parameters violate an invariant (scale, iteration count, ...)."""


class InvalidRandomSource(DragonPainterError):
    """A randomness source could not produce a value in the requested range."""


class SurfaceUnavailable(DragonPainterError):
    """The drawing surface cannot be acquired or became invalid during use."""


class PainterBusy(DragonPainterError, RuntimeError):
    """A paint is already in progress on this painter instance."""
