[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fbgl"
version = "0.1.0"
description = "A small Linux framebuffer graphics library: pixels, shapes, TGA textures, PSF1 text and keyboard input"
requires-python = ">=3.10"
dependencies = []
keywords = ["framebuffer", "graphics", "tga", "psf1", "ppm", "raycasting", "linux"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Framebuffer",
    "Intended Audience :: Developers",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fbgl = "fbgl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fbgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
