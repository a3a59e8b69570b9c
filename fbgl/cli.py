"""Demonstration programs drawing on the framebuffer."""

from __future__ import annotations

import argparse
import math
import sys
import time
from contextlib import ExitStack

from fbgl.color import rgb
from fbgl.draw import (
    Point,
    draw_circle_filled,
    draw_circle_outline,
    draw_line,
    draw_rectangle_filled,
    draw_rectangle_outline,
)
from fbgl.font import FontError, Psf1Font, load_psf1_font, render_psf1_text
from fbgl.fps import FpsCounter
from fbgl.framebuffer import Framebuffer, FramebufferError
from fbgl.keyboard import Key, Keyboard
from fbgl.ppm import save_ppm
from fbgl.raycast import Player, render_view
from fbgl.texture import TextureError, TgaTexture, draw_texture, load_tga_texture

__all__ = ["main"]

_OPEN_FAILED = "Error: could not open framebuffer device"
_FRAME_DELAY = 0.016666
_MARQUEE_DELAY = 0.05
_MARQUEE_FRAMES = 30 * 30


def _open_framebuffer(device: str | None) -> Framebuffer | None:
    try:
        return Framebuffer(device)
    except FramebufferError as exc:
        print(exc, file=sys.stderr)
        return None


def _wait_forever() -> None:
    while True:
        time.sleep(1)


def _circle(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print(_OPEN_FAILED)
        return -1
    with fb:
        fb.fill(0x00FF0000)
        angle = 0
        while True:
            center_x = int(960 + 200 * math.cos(angle * math.pi / 180))
            center_y = int(540 + 200 * math.sin(angle * math.pi / 180))
            draw_circle_outline(fb, center_x - 240, center_y - 240, 40, 0xFFFFFF)
            angle = (angle + 1) % 360
            draw_circle_filled(fb, 480, 540, 40, 0xFFFFFF)
            time.sleep(0.01)


def _info(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print(_OPEN_FAILED)
        return -1
    with fb:
        print(f"Framebuffer width: {fb.width}")
        print(f"Framebuffer height: {fb.height}")
        print(f"Framebuffer screen size: {fb.screen_size}")
    return 0


def _line(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print(_OPEN_FAILED)
        return -1
    with fb:
        fb.fill(0x00FF0000)
        start = Point(0, 0)
        end = Point(1020, 1020)
        for x in range(1890):
            start = Point(x, start.y)
            draw_line(fb, start, end, 0xFFFFFF)
            time.sleep(0.01)
        draw_line(fb, start, end, 0x000000)
        _wait_forever()
    return 0


def _player(args: argparse.Namespace) -> int:
    try:
        font = load_psf1_font(args.font)
    except (OSError, FontError) as exc:
        print(exc, file=sys.stderr)
        print(f"Failed to load PSF1 font from {args.font}", file=sys.stderr)
        return 1

    fb = _open_framebuffer(args.device)
    if fb is None:
        print("Failed to initialize framebuffer", file=sys.stderr)
        return 1

    with ExitStack() as stack:
        stack.enter_context(fb)
        try:
            keyboard = stack.enter_context(Keyboard())
        except OSError as exc:
            print(exc, file=sys.stderr)
            print("Failed to initialize keyboard", file=sys.stderr)
            return 1

        x, y = fb.width // 2, fb.height // 2
        counter = FpsCounter()
        white = rgb(255, 255, 255)
        while True:
            fb.fill(0x000000)
            key = keyboard.get_key()
            if key == Key.ESCAPE:
                break
            if key == Key.UP:
                y = max(y - 1, 0)
            elif key == Key.DOWN:
                y = min(y + 1, fb.height - 1)
            elif key == Key.LEFT:
                x = max(x - 1, 0)
            elif key == Key.RIGHT:
                x = min(x + 1, fb.width - 1)

            draw_rectangle_filled(fb, Point(x - 5, y - 5), Point(x + 5, y + 5), white)

            fps_text = f"FPS: {counter.tick():.2f}"[:31]
            pos_text = f"POS: {x}, {y}"[:31]
            render_psf1_text(fb, font, fps_text, 10, 10, rgb(0, 255, 0))
            render_psf1_text(fb, font, pos_text, 10, 30, rgb(255, 0, 0))
            time.sleep(_FRAME_DELAY)
    return 0


def _raycast(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print("Failed to initialize framebuffer.", file=sys.stderr)
        return 1

    with ExitStack() as stack:
        stack.enter_context(fb)
        try:
            keyboard = stack.enter_context(Keyboard())
        except OSError as exc:
            print(exc, file=sys.stderr)
            print("Failed to initialize keyboard.", file=sys.stderr)
            return 1

        player = Player()
        frame = 0
        while True:
            fb.fill(rgb(0, 0, 0))
            render_view(fb, player)
            try:
                save_ppm(fb, f"frame_{frame:04d}.ppm")
            except OSError:
                print("Failed to save frame as PPM.", file=sys.stderr)
            frame += 1

            key = keyboard.get_key()
            if key == Key.ESCAPE:
                break
            player.move(key)
            time.sleep(_FRAME_DELAY)
    return 0


def _rectangle(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print(_OPEN_FAILED)
        return -1
    with fb:
        fb.fill(0xFFFFFF)
        draw_rectangle_outline(fb, Point(100, 100), Point(200, 200), 0xFF0000)

        left, top, right, bottom = 600, 400, 800, 800
        colors = (0xFFC00, 0x00FF00, 0x0000FF, 0xFF00FF)
        color_index = 0
        dx, dy = 15, 8
        while True:
            fb.fill(0xFFFFFF)
            draw_rectangle_filled(
                fb, Point(left, top), Point(right, bottom), colors[color_index]
            )
            left += dx
            right += dx
            top += dy
            bottom += dy
            if left <= 0 or right >= fb.width:
                dx = -dx
                color_index += 1
            if top <= 0 or bottom >= fb.height:
                dy = -dy
                color_index += 1
            if color_index >= len(colors):
                color_index = 0
            time.sleep(_MARQUEE_DELAY)


def _red(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        return 1
    with fb:
        fb.fill(0x00FF0000)
        _wait_forever()
    return 0


def _text(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        return 1
    with fb:
        fb.fill(0xFFFFFF)
        try:
            font = load_psf1_font(args.font)
        except (OSError, FontError) as exc:
            print(exc, file=sys.stderr)
            print("Failed to load font", file=sys.stderr)
            return 1

        x = int((fb.width - 8) / 2)
        y = int((fb.height - 16) / 2)
        render_psf1_text(fb, font, "Hello, fbgl!", x, y, 0xFF0000)

        try:
            save_ppm(fb, args.output)
        except OSError as exc:
            print(f"Error opening file: {exc}", file=sys.stderr)

        for _ in range(_MARQUEE_FRAMES):
            time.sleep(_MARQUEE_DELAY)
    return 0


def _marquee(
    fb: Framebuffer, texture: TgaTexture, font: Psf1Font | None = None
) -> None:
    fb.fill(0x000000)
    x, y = 0, 100
    dx, dy = 5, 3
    counter = FpsCounter()
    for _ in range(_MARQUEE_FRAMES):
        fb.fill(0x000000)
        draw_texture(fb, texture, x, y)
        x += dx
        y += dy
        if x <= 0 or x + texture.width >= fb.width:
            dx = -dx
        if y <= 0 or y + texture.height >= fb.height:
            dy = -dy
        if font is not None:
            render_psf1_text(fb, font, "FPS: ", 5, 0, 0xFF0000)
            render_psf1_text(fb, font, f"{counter.tick():.6f}", 100, 0, 0xFF0000)
        time.sleep(_MARQUEE_DELAY)


def _load_texture(path: str) -> TgaTexture | None:
    try:
        return load_tga_texture(path)
    except (OSError, TextureError) as exc:
        print(exc, file=sys.stderr)
        print("Failed to load texture.", file=sys.stderr)
        return None


def _texture(args: argparse.Namespace) -> int:
    texture = _load_texture(args.texture)
    if texture is None:
        return 1
    fb = _open_framebuffer(args.device)
    if fb is None:
        print("Failed to initialize framebuffer.", file=sys.stderr)
        return 1
    with fb:
        _marquee(fb, texture)
    return 0


def _texture_fps(args: argparse.Namespace) -> int:
    fb = _open_framebuffer(args.device)
    if fb is None:
        print("Failed to initialize framebuffer.", file=sys.stderr)
        return 1
    with fb:
        texture = _load_texture(args.texture)
        if texture is None:
            return 1
        try:
            font: Psf1Font | None = load_psf1_font(args.font)
        except (OSError, FontError) as exc:
            print(exc, file=sys.stderr)
            font = None
        _marquee(fb, texture, font)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fbgl", description="Framebuffer graphics demonstrations."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def command(name: str, handler, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "--device", default=None, help="framebuffer device (default /dev/fb0)"
        )
        sub.set_defaults(handler=handler)
        return sub

    command("circle", _circle, "draw a moving circle and a filled disc")
    command("info", _info, "print the framebuffer dimensions")
    command("line", _line, "sweep lines across the screen")
    sub = command("player", _player, "move a square with the keyboard")
    sub.add_argument("font", help="PSF1 font file")
    command("raycast", _raycast, "explore a maze with a ray-casting view")
    command("rectangle", _rectangle, "bounce a filled rectangle around the screen")
    command("red", _red, "fill the screen with red")
    sub = command("text", _text, "render centred text and save a screenshot")
    sub.add_argument("font", help="PSF1 font file")
    sub.add_argument(
        "output", nargs="?", default="fbgl_screenshot.ppm", help="PPM screenshot path"
    )
    sub = command("texture", _texture, "bounce a TGA texture around the screen")
    sub.add_argument("texture", help="TGA texture file")
    sub = command(
        "texture-fps", _texture_fps, "bounce a TGA texture and show the frame rate"
    )
    sub.add_argument("texture", help="TGA texture file")
    sub.add_argument("font", help="PSF1 font file")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one demonstration and return its exit status."""
    args = _build_parser().parse_args(argv)
    try:
        return args.handler(args)
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())