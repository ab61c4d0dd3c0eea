"""
Chaos-game painter for the dragon attractor.

The painter starts at the origin of fractal space and repeatedly applies one
of the affine maps of the parameter set, picked by a fair coin, plotting
every visited point. The surface is asked to refresh every
REFRESH_INTERVAL iterations so a viewer sees the attractor accumulate.
"""

import enum
import logging
import math
import threading
import time
from contextlib import ExitStack, contextmanager
from numbers import Integral
from typing import Callable, Iterator, Optional, Protocol, Tuple

import numpy as np

from ..core.errors import InvalidParameters, PainterBusy, SurfaceUnavailable
from ..core.parameters import AffineFractalParameters
from .colors import Palette
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

REFRESH_INTERVAL = 100

# Divisor turning min(width, height) into the size scale
SIZE_DIVISOR = 2.1


class IntegerSource(Protocol):
    """Subset of ``numpy.random.Generator`` used for the per-iteration coin."""

    def integers(self, low: int, high: int) -> int:
        ...


class PaintState(enum.Enum):
    IDLE = 'idle'
    CLEARING = 'clearing'
    ITERATING = 'iterating'
    FINALIZING = 'finalizing'
    DONE = 'done'
    CANCELLED = 'cancelled'
    FAILED = 'failed'


class DragonPainter:
    """Renders one parameter set onto one drawing surface."""

    def __init__(self, surface: DrawingSurface, parameters: AffineFractalParameters,
                 rng: Optional[IntegerSource] = None, palette: Optional[Palette] = None,
                 should_cancel: Optional[Callable[[], bool]] = None):
        """
        Initialize painter.

        Args:
            surface: Drawing surface to paint on
            parameters: Dragon parameters, read only
            rng: Source of the per-iteration coin flips; a fresh unseeded
                numpy Generator is used for every paint() when omitted
            palette: Background/foreground colors (black/yellow by default)
            should_cancel: Optional callable polled before every iteration
        """
        if not isinstance(parameters, AffineFractalParameters):
            raise InvalidParameters(
                f"Expected AffineFractalParameters, got {type(parameters).__name__}"
            )
        parameters.validate()
        if surface is None:
            raise SurfaceUnavailable("No drawing surface given")

        self.surface = surface
        self.parameters = parameters
        self.rng = rng
        self.palette = palette or Palette()
        self.should_cancel = should_cancel

        self.points_plotted = 0
        self.refresh_count = 0
        self._state = PaintState.IDLE
        self._lock = threading.Lock()

    @property
    def state(self) -> PaintState:
        return self._state

    def paint(self) -> None:
        """Clear the surface and draw ``iteration_count`` points of the attractor."""
        if not self._lock.acquire(blocking=False):
            raise PainterBusy("paint() is already running on this painter")
        try:
            self._paint()
        finally:
            self._lock.release()

    def _paint(self) -> None:
        self._state = PaintState.IDLE
        self.points_plotted = 0
        self.refresh_count = 0
        start_time = time.time()

        try:
            width, height = self._query_size()
            rng = self.rng if self.rng is not None else np.random.default_rng()
            cancelled = self._draw(width, height, rng)

            self._state = PaintState.FINALIZING
            self._refresh()
        except SurfaceUnavailable as e:
            self._state = PaintState.FAILED
            logger.error(f"Paint aborted after {self.points_plotted} points: {e}")
            raise
        except Exception:
            self._state = PaintState.FAILED
            raise

        if cancelled:
            self._state = PaintState.CANCELLED
            logger.warning(
                f"Paint cancelled after {self.points_plotted}/"
                f"{self.parameters.iteration_count} points"
            )
        else:
            self._state = PaintState.DONE
            logger.info(
                f"Painted {self.points_plotted} points on {width}x{height} surface "
                f"in {time.time() - start_time:.2f}s"
            )

    def _query_size(self) -> Tuple[int, int]:
        with _surface_errors("querying size"):
            width, height = self.surface.get_size()
        for value in (width, height):
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise SurfaceUnavailable(
                    f"Surface reported a non-integer size {width!r}x{height!r}"
                )
        if width <= 0 or height <= 0:
            raise SurfaceUnavailable(f"Degenerate surface size {width}x{height}")
        return width, height

    def _draw(self, width: int, height: int, rng: IntegerSource) -> bool:
        """Run the chaos game inside one drawing session; returns True if cancelled."""
        params = self.parameters
        size = min(width, height) / SIZE_DIVISOR
        maps = params.affine_maps(size)
        logger.debug(f"Size scale {size:.3f}, shift {params.shift_in_pixels(size)}")

        foreground = self.palette.foreground
        origin_x = width / 3
        origin_y = height / 2

        with ExitStack() as stack:
            with _surface_errors("starting a drawing session"):
                session = stack.enter_context(self.surface.begin_session())

            self._state = PaintState.CLEARING
            with _surface_errors("clearing"):
                session.clear(self.palette.background)

            self._state = PaintState.ITERATING
            x, y = 0.0, 0.0
            for i in range(params.iteration_count):
                if self.should_cancel is not None and self.should_cancel():
                    return True
                px, py = math.floor(origin_x + x), math.floor(origin_y + y)
                with _surface_errors("plotting"):
                    session.plot_pixel(px, py, foreground)
                self.points_plotted += 1
                x, y = maps[int(rng.integers(0, len(maps)))].apply(x, y)
                if i % REFRESH_INTERVAL == 0:
                    self._refresh()
        return False

    def _refresh(self) -> None:
        with _surface_errors("requesting a refresh"):
            self.surface.request_ui_refresh()
        self.refresh_count += 1


@contextmanager
def _surface_errors(action: str) -> Iterator[None]:
    """Report any failure of a surface call as SurfaceUnavailable."""
    try:
        yield
    except SurfaceUnavailable:
        raise
    except Exception as e:
        raise SurfaceUnavailable(f"Surface failed while {action}: {e}") from e
