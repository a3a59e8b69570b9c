from array import array

import pytest

from fbgl.framebuffer import (
    Framebuffer,
    FramebufferError,
    Surface,
    name_info,
    version_info,
)


def test_name_and_version():
    assert name_info() == "FBGL"
    assert version_info() == "0.1.0"


def test_new_surface_is_black():
    surface = Surface(4, 3)
    assert len(surface.pixels) == 12
    assert all(p == 0 for p in surface.pixels)


def test_fill_sets_every_pixel():
    surface = Surface(5, 2)
    surface.fill(0x00FF0000)
    assert all(surface.get_pixel(x, y) == 0x00FF0000 for x in range(5) for y in range(2))


def test_fill_leaves_extra_buffer_alone():
    pixels = [7] * 10
    surface = Surface(2, 3, pixels)
    surface.fill(0xFFFFFF)
    assert pixels[:6] == [0xFFFFFF] * 6
    assert pixels[6:] == [7] * 4


def test_fill_works_on_array_buffer():
    pixels = array("I", [0]) * 6
    Surface(3, 2, pixels).fill(0xFF00FF)
    assert list(pixels) == [0xFF00FF] * 6


def test_put_and_get_pixel_round_trip():
    surface = Surface(8, 8)
    surface.put_pixel(3, 5, 0x00FF00)
    assert surface.get_pixel(3, 5) == 0x00FF00
    assert surface.pixels[5 * 8 + 3] == 0x00FF00


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (4, 0), (0, 4), (100, 100)])
def test_put_pixel_off_surface_is_ignored(x, y):
    surface = Surface(4, 4)
    surface.put_pixel(x, y, 0xFFFFFF)
    assert all(p == 0 for p in surface.pixels)


@pytest.mark.parametrize("x,y", [(-1, 0), (4, 0), (0, 4)])
def test_get_pixel_off_surface_raises(x, y):
    with pytest.raises(IndexError):
        Surface(4, 4).get_pixel(x, y)


def test_contains():
    surface = Surface(3, 2)
    assert surface.contains(0, 0)
    assert surface.contains(2, 1)
    assert not surface.contains(3, 1)
    assert not surface.contains(2, 2)
    assert not surface.contains(-1, 0)


def test_short_buffer_rejected():
    with pytest.raises(ValueError):
        Surface(4, 4, [0] * 15)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Surface(-1, 4)


def test_missing_device_raises(tmp_path):
    with pytest.raises(FramebufferError):
        Framebuffer(tmp_path / "no-such-fb")


def test_regular_file_is_not_a_framebuffer(tmp_path):
    path = tmp_path / "fake-fb"
    path.write_bytes(bytes(64))
    with pytest.raises(FramebufferError):
        Framebuffer(path)