"""Framebuffer graphics: pixel surfaces, shapes, TGA textures, PSF1 fonts, keyboard input and PPM output."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "framebuffer",
    "draw",
    "fps",
    "texture",
    "font",
    "keyboard",
    "ppm",
    "raycast",
    "cli",
]