import pytest

from fractol.complex_math import (
    Viewport,
    burning_ship_step,
    modulus_squared,
    pixel_to_complex,
    square_step,
)


def test_modulus_squared_matches_abs():
    for z in (3 + 4j, -1.5 + 0.25j, 0j, 2j):
        assert modulus_squared(z) == pytest.approx(abs(z) ** 2)


def test_square_step_from_zero_gives_c():
    c = -0.7 + 0.27015j
    assert square_step(0j, c) == c


def test_square_step_imaginary_unit():
    assert square_step(1j, 0j) == -1 + 0j


def test_burning_ship_sign_invariance():
    c = 0.1 - 0.3j
    z = 0.5 + 0.75j
    expected = burning_ship_step(z, c)
    for variant in (z, -z, z.conjugate(), -z.conjugate()):
        assert burning_ship_step(variant, c) == expected


def test_burning_ship_equals_square_for_positive_parts():
    z = 0.5 + 0.75j
    c = -1.0 + 0.5j
    assert burning_ship_step(z, c) == square_step(z, c)


def test_pixel_origin_is_top_left_corner():
    view = Viewport()
    assert pixel_to_complex(0, 0, view) == complex(view.min_re, view.max_im)


def test_pixel_far_corner_is_bottom_right():
    view = Viewport()
    point = pixel_to_complex(view.width, view.height, view)
    assert point.real == pytest.approx(view.max_re)
    assert point.imag == pytest.approx(view.min_im)


def test_pixel_mapping_is_monotonic():
    view = Viewport(width=10, height=10)
    reals = [pixel_to_complex(x, 0, view).real for x in range(10)]
    imags = [pixel_to_complex(0, y, view).imag for y in range(10)]
    assert reals == sorted(reals)
    assert imags == sorted(imags, reverse=True)


@pytest.mark.parametrize("width, height", [(0, 10), (10, 0), (-5, 10)])
def test_viewport_rejects_bad_size(width, height):
    with pytest.raises(ValueError):
        Viewport(width=width, height=height)