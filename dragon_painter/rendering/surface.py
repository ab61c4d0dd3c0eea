"""
Drawing surfaces for the dragon painter.

A drawing surface is anything that satisfies the DrawingSurface protocol:
it reports its pixel size, hands out a scoped drawing session and accepts
fire-and-forget UI refresh requests. Two implementations are provided, a
numpy-backed raster (handy for tests and headless rendering) and a
Pillow-backed image that a viewer can display progressively.
"""

import logging
from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator, Optional, Protocol, Tuple, runtime_checkable

import numpy as np
from PIL import Image, ImageDraw

from ..core.errors import SurfaceUnavailable
from .colors import BLACK, ColorRGB

logger = logging.getLogger(__name__)


@runtime_checkable
class DrawingSession(Protocol):
    """Pixel-writing handle valid only inside ``begin_session()``."""

    def clear(self, color: ColorRGB) -> None:
        ...

    def plot_pixel(self, x: int, y: int, color: ColorRGB) -> None:
        ...


@runtime_checkable
class DrawingSurface(Protocol):
    """Capability set consumed by the painter."""

    def get_size(self) -> Tuple[int, int]:
        ...

    def begin_session(self) -> ContextManager[DrawingSession]:
        ...

    def request_ui_refresh(self) -> None:
        ...


def _validate_size(width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"Surface size must be positive, got {width}x{height}")


class ArraySurface:
    """In-memory RGB raster stored as a (height, width, 3) uint8 array."""

    def __init__(self, width: int, height: int,
                 on_refresh: Optional[Callable[['ArraySurface'], None]] = None):
        """
        Initialize raster surface.

        Args:
            width, height: Raster size in pixels
            on_refresh: Optional callback invoked on every refresh request
        """
        _validate_size(width, height)
        self.width = width
        self.height = height
        self.on_refresh = on_refresh
        self.refresh_count = 0
        self._buffer = np.zeros((height, width, 3), dtype=np.uint8)
        self._session_open = False
        self._closed = False

    @property
    def pixels(self) -> np.ndarray:
        """Copy of the raster contents."""
        return self._buffer.copy()

    @property
    def session_open(self) -> bool:
        return self._session_open

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Invalidate the surface; later operations raise SurfaceUnavailable."""
        self._closed = True

    def get_size(self) -> Tuple[int, int]:
        self._ensure_open()
        return (self.width, self.height)

    @contextmanager
    def begin_session(self) -> Iterator['_ArraySession']:
        self._ensure_open()
        if self._session_open:
            raise SurfaceUnavailable("A drawing session is already open on this surface")
        self._session_open = True
        try:
            yield _ArraySession(self)
        finally:
            self._session_open = False

    def request_ui_refresh(self) -> None:
        self._ensure_open()
        self.refresh_count += 1
        if self.on_refresh is not None:
            self.on_refresh(self)

    def lit_pixel_count(self, color: ColorRGB) -> int:
        """Number of pixels currently holding ``color``."""
        target = np.array(color.to_uint8_tuple(), dtype=np.uint8)
        return int(np.all(self._buffer == target, axis=-1).sum())

    def _ensure_open(self) -> None:
        if self._closed:
            raise SurfaceUnavailable("Surface has been closed")


class _ArraySession:

    def __init__(self, surface: ArraySurface):
        self._surface = surface

    def clear(self, color: ColorRGB) -> None:
        self._surface._ensure_open()
        self._surface._buffer[:, :] = color.to_uint8_tuple()

    def plot_pixel(self, x: int, y: int, color: ColorRGB) -> None:
        surface = self._surface
        surface._ensure_open()
        # Points outside the raster are clipped
        if 0 <= x < surface.width and 0 <= y < surface.height:
            surface._buffer[y, x] = color.to_uint8_tuple()


class PillowSurface:
    """Surface drawing into a Pillow RGB image."""

    def __init__(self, width: int, height: int,
                 on_refresh: Optional[Callable[['PillowSurface'], None]] = None):
        _validate_size(width, height)
        self.width = width
        self.height = height
        self.on_refresh = on_refresh
        self.refresh_count = 0
        self._image = Image.new('RGB', (width, height), BLACK.to_uint8_tuple())
        self._session_open = False
        self._closed = False

    @property
    def image(self) -> Image.Image:
        """Copy of the current image."""
        return self._image.copy()

    @property
    def session_open(self) -> bool:
        return self._session_open

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        self._closed = True

    def get_size(self) -> Tuple[int, int]:
        self._ensure_open()
        return self._image.size

    @contextmanager
    def begin_session(self) -> Iterator['_PillowSession']:
        self._ensure_open()
        if self._session_open:
            raise SurfaceUnavailable("A drawing session is already open on this surface")
        self._session_open = True
        try:
            yield _PillowSession(self, ImageDraw.Draw(self._image))
        finally:
            self._session_open = False

    def request_ui_refresh(self) -> None:
        self._ensure_open()
        self.refresh_count += 1
        if self.on_refresh is not None:
            self.on_refresh(self)

    def lit_pixel_count(self, color: ColorRGB) -> int:
        """Number of pixels currently holding ``color``."""
        target = np.array(color.to_uint8_tuple(), dtype=np.uint8)
        return int(np.all(np.asarray(self._image) == target, axis=-1).sum())

    def _ensure_open(self) -> None:
        if self._closed:
            raise SurfaceUnavailable("Surface has been closed")


class _PillowSession:

    def __init__(self, surface: PillowSurface, draw: ImageDraw.ImageDraw):
        self._surface = surface
        self._draw = draw

    def clear(self, color: ColorRGB) -> None:
        self._surface._ensure_open()
        width, height = self._surface._image.size
        self._draw.rectangle((0, 0, width - 1, height - 1), fill=color.to_uint8_tuple())

    def plot_pixel(self, x: int, y: int, color: ColorRGB) -> None:
        self._surface._ensure_open()
        # ImageDraw clips points outside the image
        self._draw.point((x, y), fill=color.to_uint8_tuple())
