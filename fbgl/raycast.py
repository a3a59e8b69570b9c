"""A small ray-casting renderer over a fixed tile map."""

from __future__ import annotations

import math
from dataclasses import dataclass

from fbgl.color import rgb
from fbgl.draw import Point, draw_rectangle_filled
from fbgl.framebuffer import Surface
from fbgl.keyboard import Key

__all__ = [
    "MAP_WIDTH",
    "MAP_HEIGHT",
    "TILE_SIZE",
    "PLAYER_SPEED",
    "TURN_SPEED",
    "MAX_DISTANCE",
    "WORLD_MAP",
    "Player",
    "is_wall",
    "shaded_color",
    "cast_ray",
    "draw_wall_slice",
    "render_view",
]

MAP_WIDTH = 8
MAP_HEIGHT = 8
TILE_SIZE = 64
PLAYER_SPEED = 2
TURN_SPEED = 0.1
MAX_DISTANCE = 16.0
_RAY_STEP = 0.1

# Indexed as WORLD_MAP[x][y].
WORLD_MAP = (
    "########",
    "#      #",
    "# ## # #",
    "# #  # #",
    "# # ## #",
    "#      #",
    "# #### #",
    "########",
)

VERTICAL_WALL_COLOR = rgb(150, 150, 255)
HORIZONTAL_WALL_COLOR = rgb(255, 150, 150)


def is_wall(x: int, y: int) -> bool:
    """Tell whether tile (x, y) is a wall; tiles off the map count as walls."""
    if not (0 <= x < MAP_WIDTH and 0 <= y < MAP_HEIGHT):
        return True
    return WORLD_MAP[x][y] == "#"


def _tile(coordinate: float) -> int:
    return int(coordinate / TILE_SIZE)


@dataclass
class Player:
    """Position in world units, viewing angle and field of view in radians."""

    x: float = 128.0
    y: float = 128.0
    angle: float = 0.0
    fov: float = math.pi / 4.0

    def move(self, key: Key) -> None:
        """Walk or turn according to key, refusing to step into a wall."""
        if key in (Key.UP, Key.DOWN):
            sign = 1 if key == Key.UP else -1
            next_x = self.x + sign * math.cos(self.angle) * PLAYER_SPEED
            next_y = self.y + sign * math.sin(self.angle) * PLAYER_SPEED
            if not is_wall(_tile(next_x), _tile(self.y)):
                self.x = next_x
            if not is_wall(_tile(self.x), _tile(next_y)):
                self.y = next_y
        elif key == Key.LEFT:
            self.angle -= TURN_SPEED
        elif key == Key.RIGHT:
            self.angle += TURN_SPEED


def shaded_color(base_color: int, distance: float) -> int:
    """Darken base_color by 1 / (distance + 1)."""
    factor = 1.0 / (distance + 1.0)
    return rgb(
        int(((base_color >> 16) & 0xFF) * factor),
        int(((base_color >> 8) & 0xFF) * factor),
        int((base_color & 0xFF) * factor),
    )


def cast_ray(player: Player, ray_angle: float) -> tuple[float, bool]:
    """March a ray from the player and return (distance in tiles, vertical hit).

    A ray that leaves the map reports MAX_DISTANCE and no vertical hit.
    """
    eye_x = math.cos(ray_angle)
    eye_y = math.sin(ray_angle)
    origin_x = player.x / TILE_SIZE
    origin_y = player.y / TILE_SIZE
    distance = 0.0

    while distance < MAX_DISTANCE:
        distance += _RAY_STEP
        test_x = int(origin_x + eye_x * distance)
        test_y = int(origin_y + eye_y * distance)
        if not (0 <= test_x < MAP_WIDTH and 0 <= test_y < MAP_HEIGHT):
            return MAX_DISTANCE, False
        if WORLD_MAP[test_x][test_y] == "#":
            return distance, abs(eye_x) > abs(eye_y)
    return distance, False


def draw_wall_slice(surface: Surface, x: int, wall_height: int, color: int) -> None:
    """Draw a one-pixel-wide wall column centred vertically on the surface."""
    middle = surface.height // 2
    half = wall_height // 2
    top = max(middle - half, 0)
    bottom = min(middle + half, surface.height - 1)
    draw_rectangle_filled(surface, Point(x, top), Point(x + 1, bottom), color)


def render_view(surface: Surface, player: Player) -> None:
    """Cast one ray per surface column and draw the walls it meets."""
    width = surface.width
    for ray in range(width):
        ray_angle = player.angle - player.fov / 2 + player.fov * ray / width
        distance, vertical = cast_ray(player, ray_angle)
        wall_height = int(surface.height / distance)
        base = VERTICAL_WALL_COLOR if vertical else HORIZONTAL_WALL_COLOR
        draw_wall_slice(surface, ray, wall_height, shaded_color(base, distance))