"""PSF1 bitmap fonts: loading and text rendering."""

from __future__ import annotations

import os
from dataclasses import dataclass

from fbgl.framebuffer import Surface

__all__ = ["FontError", "Psf1Font", "parse_psf1", "load_psf1_font", "render_psf1_text"]

PSF1_MAGIC = b"\x36\x04"
_HEADER_SIZE = 4
_MODE_512 = 0x01
_CHAR_WIDTH = 8


class FontError(ValueError):
    """A PSF1 font could not be decoded."""


@dataclass(frozen=True)
class Psf1Font:
    """A PSF1 font: 8-pixel-wide glyphs, one byte per glyph row."""

    mode: int
    char_height: int
    glyphs: bytes

    @property
    def magic(self) -> bytes:
        """The PSF1 magic number."""
        return PSF1_MAGIC

    @property
    def glyph_count(self) -> int:
        """Number of glyphs: 512 when mode bit 0 is set, otherwise 256."""
        return 512 if self.mode & _MODE_512 else 256

    @property
    def char_width(self) -> int:
        """Glyph width in pixels; always 8 for PSF1."""
        return _CHAR_WIDTH


def parse_psf1(data: bytes) -> Psf1Font:
    """Decode a PSF1 font held in memory."""
    data = bytes(data)
    if len(data) < _HEADER_SIZE:
        raise FontError("Failed to read font header: file is truncated")
    if data[:2] != PSF1_MAGIC:
        raise FontError("Invalid PSF1 magic number")

    mode, char_height = data[2], data[3]
    glyph_count = 512 if mode & _MODE_512 else 256
    size = glyph_count * char_height
    glyphs = data[_HEADER_SIZE : _HEADER_SIZE + size]
    if len(glyphs) != size:
        raise FontError("Failed to read glyph data: file is truncated")
    return Psf1Font(mode, char_height, glyphs)


def load_psf1_font(path: str | os.PathLike[str]) -> Psf1Font:
    """Read and decode a PSF1 font file."""
    with open(path, "rb") as handle:
        return parse_psf1(handle.read())


def render_psf1_text(
    surface: Surface,
    font: Psf1Font,
    text: str | bytes,
    x: int,
    y: int,
    color: int,
) -> None:
    """Draw text left to right starting with its top-left corner at (x, y).

    Text is drawn byte by byte (str is UTF-8 encoded) and stops at a NUL.
    Codes beyond the font's glyph count use glyph 0.
    """
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    height = font.char_height
    cursor_x = x
    for code in data:
        index = code if code < font.glyph_count else 0
        glyph = font.glyphs[index * height : (index + 1) * height]
        for row, bits in enumerate(glyph):
            for col in range(font.char_width):
                if bits & (0x80 >> col):
                    surface.put_pixel(cursor_x + col, y + row, color)
        cursor_x += font.char_width