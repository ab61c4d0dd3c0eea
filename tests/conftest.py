import math
from contextlib import contextmanager

import pytest

from dragon_painter import AffineFractalParameters


class RecordingSurface:
    """Surface double recording every call made by the painter."""

    def __init__(self, width=210, height=210, fail_after=None, error=None,
                 fail_on_begin=None):
        self.size = (width, height)
        self.fail_after = fail_after
        self.error = error
        self.fail_on_begin = fail_on_begin
        self.calls = []
        self.plots = []
        self.clears = []
        self.refreshes = 0
        self.sessions_begun = 0
        self.sessions_released = 0

    def get_size(self):
        self.calls.append('get_size')
        return self.size

    @contextmanager
    def begin_session(self):
        self.calls.append('begin_session')
        if self.fail_on_begin is not None:
            raise self.fail_on_begin
        self.sessions_begun += 1
        try:
            yield self
        finally:
            self.sessions_released += 1

    def clear(self, color):
        self.calls.append('clear')
        self.clears.append(color)

    def plot_pixel(self, x, y, color):
        if self.fail_after is not None and len(self.plots) == self.fail_after:
            raise self.error
        self.plots.append((x, y, color))

    def request_ui_refresh(self):
        self.refreshes += 1


class ForcedCoin:
    """Coin source returning a fixed sequence of outcomes, then repeating the last."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes) or [0]
        self.draws = 0

    def integers(self, low, high):
        index = min(self.draws, len(self.outcomes) - 1)
        self.draws += 1
        return self.outcomes[index]


@pytest.fixture
def recording_surface():
    return RecordingSurface()


@pytest.fixture
def simple_parameters():
    return AffineFractalParameters(
        angle_a=0.0, angle_b=math.pi, shift_x=0.0, shift_y=0.0,
        scale=0.5, iteration_count=1,
    )
