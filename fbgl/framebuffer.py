"""Pixel surfaces and the Linux framebuffer device."""

from __future__ import annotations

import fcntl
import mmap
import os
import struct
from array import array
from typing import MutableSequence

__all__ = [
    "DEFAULT_DEVICE",
    "FramebufferError",
    "Surface",
    "Framebuffer",
    "name_info",
    "version_info",
]

NAME = "FBGL"
VERSION = "0.1.0"
DEFAULT_DEVICE = "/dev/fb0"

_FBIOGET_VSCREENINFO = 0x4600
_FBIOGET_FSCREENINFO = 0x4602
_VSCREENINFO_SIZE = 160
_FSCREENINFO_SIZE = 128
# id, smem_start, smem_len, type, type_aux, visual, xpanstep, ypanstep,
# ywrapstep, line_length, mmio_start, mmio_len, accel, capabilities, reserved
_FSCREENINFO_FORMAT = "@16sL4I3HIL2IH2H"
_VSCREENINFO_FORMAT = "@7I"
_MASK32 = 0xFFFFFFFF


def name_info() -> str:
    """Return the library name."""
    return NAME


def version_info() -> str:
    """Return the library version."""
    return VERSION


class FramebufferError(OSError):
    """The framebuffer device could not be opened, queried or mapped."""


class Surface:
    """A width x height grid of 32-bit pixels stored row by row."""

    def __init__(
        self,
        width: int,
        height: int,
        pixels: MutableSequence[int] | None = None,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError("surface dimensions must not be negative")
        if pixels is None:
            pixels = array("I", [0]) * (width * height)
        elif len(pixels) < width * height:
            raise ValueError(
                f"pixel buffer holds {len(pixels)} values, "
                f"{width * height} needed"
            )
        self.width = width
        self.height = height
        self.pixels = pixels

    def contains(self, x: int, y: int) -> bool:
        """Tell whether (x, y) lies on the surface."""
        return 0 <= x < self.width and 0 <= y < self.height

    def fill(self, color: int) -> None:
        """Set every pixel to color."""
        count = self.width * self.height
        self.pixels[:count] = array("I", [color & _MASK32]) * count

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates off the surface are ignored."""
        if self.contains(x, y):
            self.pixels[y * self.width + x] = color & _MASK32

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y)."""
        if not self.contains(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the surface")
        return self.pixels[y * self.width + x]


class Framebuffer(Surface):
    """A framebuffer device mapped into memory as a surface."""

    def __init__(self, device: str | os.PathLike[str] | None = None) -> None:
        path = DEFAULT_DEVICE if device is None else os.fspath(device)
        try:
            fd = os.open(path, os.O_RDWR)
        except OSError as exc:
            raise FramebufferError(
                exc.errno, f"Error opening framebuffer device: {exc.strerror}", path
            ) from exc

        try:
            finfo = bytearray(_FSCREENINFO_SIZE)
            try:
                fcntl.ioctl(fd, _FBIOGET_FSCREENINFO, finfo, True)
            except OSError as exc:
                raise FramebufferError(
                    exc.errno, f"Error reading fixed information: {exc.strerror}", path
                ) from exc
            vinfo = bytearray(_VSCREENINFO_SIZE)
            try:
                fcntl.ioctl(fd, _FBIOGET_VSCREENINFO, vinfo, True)
            except OSError as exc:
                raise FramebufferError(
                    exc.errno,
                    f"Error reading variable information: {exc.strerror}",
                    path,
                ) from exc

            fixed = struct.unpack_from(_FSCREENINFO_FORMAT, finfo)
            variable = struct.unpack_from(_VSCREENINFO_FORMAT, vinfo)
            screen_size = fixed[2]
            line_length = fixed[9]
            xres, yres = variable[0], variable[1]
            bits_per_pixel = variable[6]

            try:
                mapped = mmap.mmap(
                    fd,
                    screen_size,
                    mmap.MAP_SHARED,
                    mmap.PROT_READ | mmap.PROT_WRITE,
                )
            except (OSError, ValueError) as exc:
                raise FramebufferError(
                    f"Error mapping framebuffer device to memory: {exc}"
                ) from exc
        except BaseException:
            os.close(fd)
            raise

        view = memoryview(mapped)
        pixels = view[: len(view) - len(view) % 4].cast("I")
        view.release()
        try:
            super().__init__(xres, yres, pixels)
        except ValueError as exc:
            pixels.release()
            mapped.close()
            os.close(fd)
            raise FramebufferError(str(exc)) from exc

        self.device = path
        self.screen_size = screen_size
        self.line_length = line_length
        self.bits_per_pixel = bits_per_pixel
        self._fd: int | None = fd
        self._mapped = mapped

    @property
    def closed(self) -> bool:
        """True once the device has been released."""
        return self._fd is None

    def close(self) -> None:
        """Unmap the framebuffer and close the device."""
        if self._fd is None:
            raise FramebufferError(
                "framebuffer not initialized or already destroyed"
            )
        if isinstance(self.pixels, memoryview):
            self.pixels.release()
        self.pixels = array("I")
        self._mapped.close()
        os.close(self._fd)
        self._fd = None
        self.width = 0
        self.height = 0

    def __enter__(self) -> Framebuffer:
        return self

    def __exit__(self, *args: object) -> None:
        if not self.closed:
            self.close()