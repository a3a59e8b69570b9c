"""Packing of colour components into 32-bit pixel values."""

__all__ = ["rgb", "rgba", "f32_rgb", "f32_rgba"]

_MASK32 = 0xFFFFFFFF


def _channel(value: float) -> int:
    """Scale a 0.0-1.0 component to a byte, truncating like an 8-bit cast."""
    return int(value * 255) & 0xFF


def rgb(r: int, g: int, b: int) -> int:
    """Pack integer red, green and blue into a 0xRRGGBB pixel value."""
    return ((r << 16) | (g << 8) | b) & _MASK32


def rgba(r: int, g: int, b: int, a: int) -> int:
    """Pack integer components into a 0xAARRGGBB pixel value."""
    return ((a << 24) | (r << 16) | (g << 8) | b) & _MASK32


def f32_rgb(r: float, g: float, b: float) -> int:
    """Pack components given as fractions of full intensity into 0xRRGGBB."""
    return rgb(_channel(r), _channel(g), _channel(b))


def f32_rgba(r: float, g: float, b: float, a: float) -> int:
    """Pack fractional components into a 0xAARRGGBB pixel value."""
    return rgba(_channel(r), _channel(g), _channel(b), _channel(a))