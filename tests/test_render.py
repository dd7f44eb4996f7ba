import pytest

from fractol.complex_math import Viewport, pixel_to_complex
from fractol.render import (
    MAX_ITER,
    FractalType,
    ImageBuffer,
    escape_count,
    parse_fractal_type,
    pixel_color,
    render,
)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("mandelbrot", FractalType.MANDELBROT),
        ("julia", FractalType.JULIA),
        ("burning_ship", FractalType.BURNING_SHIP),
        ("mandelbrot_extra", FractalType.MANDELBROT),
        ("julia2", FractalType.JULIA),
    ],
)
def test_parse_fractal_type(query, expected):
    assert parse_fractal_type(query) is expected


@pytest.mark.parametrize("query", ["", "mandel", "jul", "burning", "sierpinski"])
def test_parse_unknown_raises(query):
    with pytest.raises(ValueError, match="AVAILABLE FRACTOL"):
        parse_fractal_type(query)


def test_origin_never_escapes_mandelbrot():
    assert escape_count(FractalType.MANDELBROT, 0j) == MAX_ITER


def test_origin_never_escapes_burning_ship():
    assert escape_count(FractalType.BURNING_SHIP, 0j) == MAX_ITER


def test_far_point_escapes_after_one_step_mandelbrot():
    assert escape_count(FractalType.MANDELBROT, 10 + 0j) == 1


def test_julia_start_outside_disc_has_zero_count():
    assert escape_count(FractalType.JULIA, 3 + 0j, -0.7 + 0.27015j) == 0


def test_escape_count_respects_max_iter():
    assert escape_count(FractalType.MANDELBROT, 0j, max_iter=7) == 7


def test_pixel_color_inside_set_is_black():
    assert pixel_color(MAX_ITER, 0x001188) == 0


def test_pixel_color_single_iteration_is_base():
    assert pixel_color(1, 0x001188) == 0x001188


def test_pixel_color_zero_iterations_is_black():
    assert pixel_color(0, 0x001188) == 0


def test_put_get_round_trip():
    image = ImageBuffer(3, 2)
    image.put_pixel(2, 1, 0x123456)
    assert image.get_pixel(2, 1) == 0x123456
    assert image.get_pixel(0, 0) == 0


def test_put_pixel_byte_layout():
    image = ImageBuffer(1, 1)
    image.put_pixel(0, 0, 0x112233)
    assert bytes(image.data) == b"\x33\x22\x11\x00"


def test_put_pixel_outside_is_ignored():
    image = ImageBuffer(2, 2)
    image.put_pixel(-1, 0, 0xFFFFFF)
    image.put_pixel(2, 0, 0xFFFFFF)
    image.put_pixel(0, 5, 0xFFFFFF)
    assert bytes(image.data) == bytes(16)


def test_get_pixel_outside_raises():
    with pytest.raises(IndexError):
        ImageBuffer(2, 2).get_pixel(2, 2)


def test_image_buffer_rejects_empty_size():
    with pytest.raises(ValueError):
        ImageBuffer(0, 3)


def test_to_ppm_header_and_rgb_order():
    image = ImageBuffer(2, 1)
    image.put_pixel(0, 0, 0x112233)
    ppm = image.to_ppm()
    header = b"P6\n2 1\n255\n"
    assert ppm.startswith(header)
    assert ppm[len(header):] == b"\x11\x22\x33\x00\x00\x00"


@pytest.mark.parametrize(
    "ftype", [FractalType.MANDELBROT, FractalType.JULIA, FractalType.BURNING_SHIP]
)
def test_render_matches_per_pixel_escape(ftype):
    viewport = Viewport(width=5, height=4)
    julia_c = -0.7 + 0.27015j
    image = render(ImageBuffer(5, 4), viewport, ftype, julia_c, 0x001188)
    for y in range(4):
        for x in range(5):
            count = escape_count(ftype, pixel_to_complex(x, y, viewport), julia_c)
            assert image.get_pixel(x, y) == pixel_color(count, 0x001188) & 0xFFFFFF


def test_render_centre_of_mandelbrot_is_black():
    viewport = Viewport(width=2, height=2, min_re=-1.0, max_re=1.0, min_im=-1.0, max_im=1.0)
    image = render(ImageBuffer(2, 2), viewport, FractalType.MANDELBROT)
    assert image.get_pixel(1, 1) == 0