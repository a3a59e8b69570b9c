import pytest

from fbgl.font import FontError, Psf1Font, load_psf1_font, parse_psf1, render_psf1_text
from fbgl.framebuffer import Surface

HEIGHT = 2


def build_font(mode=0, height=HEIGHT, glyphs=None):
    count = 512 if mode & 1 else 256
    table = bytearray(count * height)
    for index, rows in (glyphs or {}).items():
        table[index * height : index * height + height] = bytes(rows)
    return bytes([0x36, 0x04, mode, height]) + bytes(table)


def lit(surface):
    return [
        (x, y)
        for y in range(surface.height)
        for x in range(surface.width)
        if surface.get_pixel(x, y)
    ]


def test_parse_256_glyph_font():
    font = parse_psf1(build_font(mode=0))
    assert font.glyph_count == 256
    assert font.char_width == 8
    assert font.char_height == HEIGHT
    assert len(font.glyphs) == font.glyph_count * font.char_height
    assert font.magic == bytes([0x36, 0x04])


def test_parse_512_glyph_font():
    font = parse_psf1(build_font(mode=1))
    assert font.glyph_count == 512
    assert len(font.glyphs) == 512 * HEIGHT


def test_trailing_data_ignored():
    font = parse_psf1(build_font() + b"unicode table")
    assert len(font.glyphs) == 256 * HEIGHT


def test_bad_magic():
    data = bytearray(build_font())
    data[0] = 0x72
    with pytest.raises(FontError, match="magic"):
        parse_psf1(bytes(data))


def test_short_header():
    with pytest.raises(FontError):
        parse_psf1(b"\x36\x04\x00")


def test_short_glyph_table():
    with pytest.raises(FontError):
        parse_psf1(build_font()[:-1])


def test_load_from_file(tmp_path):
    path = tmp_path / "font.psf"
    data = build_font(glyphs={65: [0x80, 0x01]})
    path.write_bytes(data)
    assert load_psf1_font(path) == parse_psf1(data)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_psf1_font(tmp_path / "none.psf")


def test_render_single_glyph():
    font = parse_psf1(build_font(glyphs={ord("A"): [0x80, 0x01]}))
    surface = Surface(12, 4)
    render_psf1_text(surface, font, "A", 1, 1, 0xABCDEF)
    assert lit(surface) == [(1, 1), (8, 2)]
    assert surface.get_pixel(1, 1) == 0xABCDEF


def test_render_advances_by_char_width():
    font = parse_psf1(build_font(glyphs={ord("A"): [0x80, 0x00]}))
    surface = Surface(20, 2)
    render_psf1_text(surface, font, "AA", 0, 0, 1)
    assert lit(surface) == [(0, 0), (font.char_width, 0)]


def test_full_row_lights_char_width_pixels():
    font = parse_psf1(build_font(glyphs={ord("#"): [0xFF, 0x00]}))
    surface = Surface(10, 2)
    render_psf1_text(surface, font, b"#", 0, 0, 7)
    assert len(lit(surface)) == font.char_width


def test_render_stops_at_nul():
    font = parse_psf1(build_font(glyphs={ord("A"): [0x80, 0x00]}))
    surface = Surface(20, 2)
    render_psf1_text(surface, font, "A\0A", 0, 0, 1)
    assert lit(surface) == [(0, 0)]


def test_render_clips_at_edges():
    font = parse_psf1(build_font(glyphs={ord("A"): [0xFF, 0xFF]}))
    surface = Surface(4, 1)
    render_psf1_text(surface, font, "A", -2, 0, 3)
    assert lit(surface) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_blank_glyph_draws_nothing():
    font = Psf1Font(0, HEIGHT, bytes(256 * HEIGHT))
    surface = Surface(16, 2)
    render_psf1_text(surface, font, "hi", 0, 0, 5)
    assert lit(surface) == []