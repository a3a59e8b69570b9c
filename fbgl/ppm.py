"""Saving surfaces as binary PPM (P6) images."""

from __future__ import annotations

import os
import sys
from array import array
from pathlib import Path

from fbgl.framebuffer import Surface

__all__ = ["encode_ppm", "save_ppm"]


def encode_ppm(surface: Surface) -> bytes:
    """Return the surface as a P6 image; the alpha byte of each pixel is dropped."""
    header = f"P6\n{surface.width} {surface.height}\n255\n".encode("ascii")
    count = surface.width * surface.height
    words = array("I", surface.pixels[:count])
    if sys.byteorder != "little":
        words.byteswap()
    raw = words.tobytes()  # B, G, R, A per pixel
    body = bytearray(3 * count)
    body[0::3] = raw[2::4]
    body[1::3] = raw[1::4]
    body[2::3] = raw[0::4]
    return header + bytes(body)


def save_ppm(surface: Surface, path: str | os.PathLike[str]) -> None:
    """Write the surface to path as a P6 image."""
    Path(path).write_bytes(encode_ppm(surface))