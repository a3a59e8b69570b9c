"""Lines, rectangles and circles drawn onto a surface."""

from __future__ import annotations

import math
from typing import NamedTuple

from fbgl.framebuffer import Surface

__all__ = [
    "Point",
    "draw_line",
    "draw_rectangle_outline",
    "draw_rectangle_filled",
    "draw_circle_outline",
    "draw_circle_filled",
]


class Point(NamedTuple):
    """A pixel position."""

    x: int
    y: int


def draw_line(surface: Surface, start: Point, end: Point, color: int) -> None:
    """Draw a Bresenham line from start towards end.

    Drawing stops as soon as the current position is at or past end on both
    axes, so a start that already lies there yields a single pixel.
    """
    x, y = start
    dx = abs(end.x - x)
    dy = abs(end.y - y)
    sx = 1 if x < end.x else -1
    sy = 1 if y < end.y else -1
    err = dx - dy

    while True:
        surface.put_pixel(x, y, color)
        if x >= end.x and y >= end.y:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_rectangle_outline(
    surface: Surface, top_left: Point, bottom_right: Point, color: int
) -> None:
    """Draw the border of the half-open box [top_left, bottom_right)."""
    for x in range(top_left.x, bottom_right.x):
        surface.put_pixel(x, top_left.y, color)
    for x in range(top_left.x, bottom_right.x):
        surface.put_pixel(x, bottom_right.y - 1, color)
    for y in range(top_left.y, bottom_right.y):
        surface.put_pixel(top_left.x, y, color)
    for y in range(top_left.y, bottom_right.y):
        surface.put_pixel(bottom_right.x - 1, y, color)


def draw_rectangle_filled(
    surface: Surface, top_left: Point, bottom_right: Point, color: int
) -> None:
    """Fill the half-open box [top_left, bottom_right)."""
    for y in range(top_left.y, bottom_right.y):
        for x in range(top_left.x, bottom_right.x):
            surface.put_pixel(x, y, color)


def draw_circle_outline(
    surface: Surface, x: int, y: int, radius: int, color: int
) -> None:
    """Draw a circle outline with the midpoint algorithm."""
    f = 1 - radius
    ddf_x = 1
    ddf_y = -2 * radius
    xx = 0
    yy = radius

    surface.put_pixel(x, y + radius, color)
    surface.put_pixel(x, y - radius, color)
    surface.put_pixel(x + radius, y, color)
    surface.put_pixel(x - radius, y, color)

    while xx < yy:
        if f >= 0:
            yy -= 1
            ddf_y += 2
            f += ddf_y
        xx += 1
        ddf_x += 2
        f += ddf_x

        for px, py in (
            (x + xx, y + yy),
            (x - xx, y + yy),
            (x + xx, y - yy),
            (x - xx, y - yy),
            (x + yy, y + xx),
            (x - yy, y + xx),
            (x + yy, y - xx),
            (x - yy, y - xx),
        ):
            surface.put_pixel(px, py, color)


def draw_circle_filled(
    surface: Surface, x: int, y: int, radius: int, color: int
) -> None:
    """Fill a disc row by row, clipped to the surface."""
    for yy in range(-radius, radius + 1):
        row = y + yy
        if row < 0 or row >= surface.height:
            continue
        half_width = int(math.sqrt(radius * radius - yy * yy))
        row_start = max(x - half_width, 0)
        row_end = min(x + half_width, surface.width - 1)
        for px in range(row_start, row_end + 1):
            surface.put_pixel(px, row, color)