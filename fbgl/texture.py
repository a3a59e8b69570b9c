"""Uncompressed true-colour TGA textures: decoding and drawing."""

from __future__ import annotations

import os
from array import array
from dataclasses import dataclass

from fbgl.framebuffer import Surface

__all__ = ["TextureError", "TgaTexture", "parse_tga", "load_tga_texture", "draw_texture"]

_HEADER_SIZE = 18
_TOP_DOWN = 0x20
_ALPHA_MASK = 0xFF000000
_SUPPORTED_DEPTHS = (24, 32)


class TextureError(ValueError):
    """A TGA image could not be decoded."""


@dataclass
class TgaTexture:
    """A decoded texture: width x height pixels in 0xAARRGGBB, top row first."""

    width: int
    height: int
    data: array


def _decode_row(data: bytes, offset: int, width: int, step: int) -> array:
    row = array("I")
    for start in range(offset, offset + width * step, step):
        blue, green, red = data[start : start + 3]
        alpha = data[start + 3] if step == 4 else 0xFF
        row.append((alpha << 24) | (red << 16) | (green << 8) | blue)
    return row


def parse_tga(data: bytes) -> TgaTexture:
    """Decode a 24- or 32-bit uncompressed TGA image held in memory."""
    data = bytes(data)
    if len(data) < _HEADER_SIZE:
        raise TextureError("Error reading TGA header: file is truncated")

    id_length = data[0]
    width = data[12] | (data[13] << 8)
    height = data[14] | (data[15] << 8)
    bits_per_pixel = data[16]
    descriptor = data[17]

    if bits_per_pixel not in _SUPPORTED_DEPTHS:
        raise TextureError(
            f"Unsupported TGA bit depth: {bits_per_pixel} "
            "(only 24 and 32-bit supported)"
        )

    step = bits_per_pixel // 8
    row_size = width * step
    start = _HEADER_SIZE + id_length
    if len(data) < start + row_size * height:
        raise TextureError("Error reading pixel data: file is truncated")

    rows = [_decode_row(data, start + r * row_size, width, step) for r in range(height)]
    if not descriptor & _TOP_DOWN:
        rows.reverse()

    pixels = array("I")
    for row in rows:
        pixels.extend(row)
    return TgaTexture(width, height, pixels)


def load_tga_texture(path: str | os.PathLike[str]) -> TgaTexture:
    """Read and decode a TGA file."""
    with open(path, "rb") as handle:
        return parse_tga(handle.read())


def draw_texture(surface: Surface, texture: TgaTexture, x: int, y: int) -> None:
    """Draw texture with its top-left corner at (x, y).

    Pixels off the surface and fully transparent pixels are skipped.
    """
    for ty in range(texture.height):
        screen_y = y + ty
        if not 0 <= screen_y < surface.height:
            continue
        base = ty * texture.width
        row = texture.data[base : base + texture.width]
        for tx, pixel in enumerate(row):
            screen_x = x + tx
            if 0 <= screen_x < surface.width and pixel & _ALPHA_MASK:
                surface.put_pixel(screen_x, screen_y, pixel)