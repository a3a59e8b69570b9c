# fbgl

A small graphics library that draws straight onto the Linux framebuffer
(`/dev/fb0` by default), with no dependencies beyond the standard library.
It provides:

- `fbgl.framebuffer`: a 32-bit pixel `Surface` (fill, put and get pixels) and
  `Framebuffer`, a surface backed by the memory-mapped framebuffer device
- `fbgl.draw`: Bresenham lines, rectangle outlines and fills, circle outlines
  and filled discs, positioned with `Point`
- `fbgl.color`: `rgb`, `rgba`, `f32_rgb` and `f32_rgba` to pack pixel values
- `fbgl.texture`: uncompressed 24- and 32-bit TGA decoding (`parse_tga`,
  `load_tga_texture`) and `draw_texture`, which skips fully transparent pixels
- `fbgl.font`: PSF1 bitmap fonts (`parse_psf1`, `load_psf1_font`) and
  `render_psf1_text`
- `fbgl.keyboard`: raw-mode terminal input through `Keyboard`, reporting
  arrow keys, WASD, Enter, Space and Escape as `Key` values
- `fbgl.fps`: `FpsCounter`, a frames-per-second counter
- `fbgl.ppm`: `encode_ppm` and `save_ppm` for binary PPM (P6) screenshots
- `fbgl.raycast`: a small ray-casting renderer over a fixed 8x8 tile map

## Installation

```
pip install .
```

## Using the library

Any `Surface` can be drawn on, so the drawing code also works off-screen.
Pixels that fall outside the surface are ignored.

```python
from fbgl.framebuffer import Surface
from fbgl.draw import Point, draw_line, draw_circle_filled
from fbgl.color import rgb
from fbgl.ppm import save_ppm

surface = Surface(320, 240)
surface.fill(rgb(0, 0, 0))
draw_line(surface, Point(0, 0), Point(100, 100), rgb(255, 255, 255))
draw_circle_filled(surface, 160, 120, 40, rgb(255, 0, 0))
save_ppm(surface, "out.ppm")
```

To draw on the real screen, open the framebuffer device. `Framebuffer` is a
context manager that unmaps and closes the device on exit; its `width`,
`height`, `screen_size`, `line_length` and `bits_per_pixel` come from the
device.

```python
from fbgl.framebuffer import Framebuffer
from fbgl.font import load_psf1_font, render_psf1_text

with Framebuffer("/dev/fb0") as fb:
    fb.fill(0xFFFFFF)
    font = load_psf1_font("font.psf")
    render_psf1_text(fb, font, "Hello, fbgl!", 10, 10, 0xFF0000)
```

`Keyboard` puts the terminal in raw mode for the duration of the `with`
block and restores it afterwards. `get_key` returns `Key.NONE` when no key
is waiting.

```python
from fbgl.keyboard import Keyboard, Key

with Keyboard() as keyboard:
    if keyboard.get_key() is Key.ESCAPE:
        ...
```

Loading errors are raised as `TextureError`, `FontError` and
`FramebufferError`; a missing file raises the usual `OSError`.

## Command line

The `fbgl` command runs the demonstration programs. Run

```
fbgl --help
```

to list them. Every demo takes `--device` to choose a framebuffer device
other than `/dev/fb0`:

- `fbgl info` prints the framebuffer width, height and screen size
- `fbgl red` fills the screen with red
- `fbgl line`, `fbgl circle`, `fbgl rectangle` animate lines, circles and a
  bouncing rectangle
- `fbgl text FONT [OUTPUT]` renders centred text and saves a PPM screenshot
  (`fbgl_screenshot.ppm` by default)
- `fbgl texture TEXTURE` and `fbgl texture-fps TEXTURE FONT` bounce a TGA
  texture around the screen, the latter with a frame-rate readout
- `fbgl player FONT` moves a square with the arrow keys or WASD; Escape quits
- `fbgl raycast` explores a maze in a ray-cast view; it saves every frame as
  `frame_NNNN.ppm` in the current directory; Escape quits

The demos need write access to the framebuffer device, so run them from a
Linux virtual console. Ctrl+C ends the ones that run until interrupted.

## Limits

Only Linux framebuffers with 32-bit pixels are handled. TGA support covers
uncompressed true-colour images only (no run-length encoding, colour maps or
greyscale), and fonts must be PSF1; PSF2 fonts are rejected.