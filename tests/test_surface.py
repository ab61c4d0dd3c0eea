import pytest

from dragon_painter import (
    ArraySurface,
    BLACK,
    ColorRGB,
    DrawingSurface,
    Palette,
    PillowSurface,
    SurfaceUnavailable,
    YELLOW,
)
from dragon_painter.rendering.colors import get_named_color


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_surfaces_satisfy_protocol(surface_class):
    assert isinstance(surface_class(10, 10), DrawingSurface)


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_session_clear_and_plot(surface_class):
    surface = surface_class(20, 10)
    assert surface.get_size() == (20, 10)
    with surface.begin_session() as session:
        assert surface.session_open
        session.clear(get_named_color('blue'))
        session.plot_pixel(3, 4, YELLOW)
    assert not surface.session_open
    assert surface.lit_pixel_count(YELLOW) == 1
    assert surface.lit_pixel_count(get_named_color('blue')) == 199


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_out_of_range_plots_are_clipped(surface_class):
    surface = surface_class(5, 5)
    with surface.begin_session() as session:
        for x, y in [(-1, 0), (0, -1), (5, 0), (0, 5), (1000, -1000)]:
            session.plot_pixel(x, y, YELLOW)
    assert surface.lit_pixel_count(YELLOW) == 0


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_nested_session_is_refused(surface_class):
    surface = surface_class(5, 5)
    with surface.begin_session():
        with pytest.raises(SurfaceUnavailable):
            with surface.begin_session():
                pass
    with surface.begin_session():
        pass


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_closed_surface_is_unavailable(surface_class):
    surface = surface_class(5, 5)
    assert not surface.closed
    surface.close()
    assert surface.closed
    with pytest.raises(SurfaceUnavailable):
        surface.get_size()
    with pytest.raises(SurfaceUnavailable):
        with surface.begin_session():
            pass
    with pytest.raises(SurfaceUnavailable):
        surface.request_ui_refresh()


def test_closing_mid_session_invalidates_writes():
    surface = ArraySurface(5, 5)
    with pytest.raises(SurfaceUnavailable):
        with surface.begin_session() as session:
            session.plot_pixel(1, 1, YELLOW)
            surface.close()
            session.plot_pixel(2, 2, YELLOW)
    assert not surface.session_open
    assert surface.lit_pixel_count(YELLOW) == 1


@pytest.mark.parametrize('surface_class', [ArraySurface, PillowSurface])
def test_refresh_callback(surface_class):
    seen = []
    surface = surface_class(5, 5, on_refresh=seen.append)
    surface.request_ui_refresh()
    surface.request_ui_refresh()
    assert surface.refresh_count == 2
    assert seen == [surface, surface]


@pytest.mark.parametrize('size', [(0, 5), (5, 0)])
def test_surface_size_must_be_positive(size):
    with pytest.raises(ValueError):
        ArraySurface(*size)
    with pytest.raises(ValueError):
        PillowSurface(*size)


def test_pixels_and_image_are_copies():
    array_surface = ArraySurface(3, 3)
    array_surface.pixels[0, 0] = (255, 255, 255)
    assert array_surface.lit_pixel_count(BLACK) == 9

    pillow_surface = PillowSurface(3, 3)
    pillow_surface.image.putpixel((0, 0), (255, 255, 255))
    assert pillow_surface.lit_pixel_count(BLACK) == 9


def test_color_validation_and_conversion():
    with pytest.raises(ValueError):
        ColorRGB(1.2, 0.0, 0.0)
    assert YELLOW.to_uint8_tuple() == (255, 255, 0)
    assert ColorRGB(0.5, 0.0, 1.0).to_uint8_tuple() == (128, 0, 255)


def test_palette_defaults_and_names():
    assert Palette() == Palette(BLACK, YELLOW)
    assert Palette.from_names('White', 'red').foreground == get_named_color('red')
    with pytest.raises(ValueError):
        Palette.from_names('black', 'chartreuse')
