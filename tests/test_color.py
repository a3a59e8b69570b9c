import pytest

from fbgl.color import f32_rgb, f32_rgba, rgb, rgba


def test_rgb_pure_channels():
    assert rgb(255, 0, 0) == 0xFF0000
    assert rgb(0, 255, 0) == 0x00FF00
    assert rgb(0, 0, 255) == 0x0000FF


def test_rgb_black_and_white():
    assert rgb(0, 0, 0) == 0x000000
    assert rgb(255, 255, 255) == 0xFFFFFF


def test_rgba_alpha_only():
    assert rgba(0, 0, 0, 255) == 0xFF000000


@pytest.mark.parametrize("r,g,b,a", [(1, 2, 3, 4), (200, 100, 50, 25), (255, 0, 128, 7)])
def test_rgba_components_recoverable(r, g, b, a):
    value = rgba(r, g, b, a)
    assert (value >> 24) & 0xFF == a
    assert (value >> 16) & 0xFF == r
    assert (value >> 8) & 0xFF == g
    assert value & 0xFF == b


def test_rgba_with_zero_alpha_matches_rgb():
    assert rgba(12, 34, 56, 0) == rgb(12, 34, 56)


def test_rgba_stays_within_32_bits():
    assert rgba(255, 255, 255, 255) <= 0xFFFFFFFF
    assert rgba(255, 255, 255, 255) & 0xFFFFFF == rgb(255, 255, 255)


def test_f32_rgb_full_and_zero():
    assert f32_rgb(1.0, 1.0, 1.0) == 0xFFFFFF
    assert f32_rgb(0.0, 0.0, 0.0) == 0


def test_f32_rgb_matches_integer_at_extremes():
    assert f32_rgb(1.0, 0.0, 1.0) == rgb(255, 0, 255)


def test_f32_rgb_truncates():
    assert (f32_rgb(0.5, 0.0, 0.0) >> 16) & 0xFF == 127


def test_f32_rgba_alpha():
    assert f32_rgba(0.0, 0.0, 0.0, 1.0) == 0xFF000000
    assert f32_rgba(1.0, 1.0, 1.0, 0.0) == 0xFFFFFF