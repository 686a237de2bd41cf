import pytest

from fractview.gfx.colors import color_by_name
from fractview.gfx.xpm import (
    XpmError,
    find,
    find_unquoted,
    parse_color_spec,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
    xpm_file_to_image,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    ". c red",
    "# c #0000FF",
    "  c None",
    ".# ",
    "#. ",
]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  12\t 7  3 1 ") == ["12", "7", "3", "1"]
    assert split_words(" \t ") == []


def test_find_returns_first_match():
    text = "abcabc"
    pos = find(text, "bc")
    assert text[pos:pos + 2] == "bc"
    assert "bc" not in text[:pos + 1]
    assert find(text, "zz") == -1


def test_find_unquoted_skips_quoted_text():
    text = '"/*" /* x */'
    pos = find_unquoted(text, "/*")
    assert text.startswith("/*", pos)
    assert text[:pos].count('"') % 2 == 0
    assert pos > text.index('"', 1)
    assert find_unquoted('"/*"', "/*") == -1


def test_strip_comments_keeps_length_and_quoted_text():
    text = '/* XPM */\nstatic char *x[] = {\n"a /* b */", // tail\n"c"};\n'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "XPM" not in stripped
    assert "tail" not in stripped
    assert '"a /* b */"' in stripped


def test_quoted_lines():
    assert list(quoted_lines('x "a" y "b c", "d"')) == ["a", "b c", "d"]
    assert list(quoted_lines('"unterminated')) == []


def test_parse_color_spec_hex_and_names():
    assert parse_color_spec("#FF0000") == 0xFF0000
    assert parse_color_spec("red") == color_by_name("red")
    assert parse_color_spec("RED") == color_by_name("red")
    assert parse_color_spec("ghost", "white") == color_by_name("ghost white")
    assert parse_color_spec("None") == -1
    assert parse_color_spec("nosuchcolour") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    red = color_by_name("red")
    assert image.get_pixel(0, 0) == red
    assert image.get_pixel(1, 0) == 0x0000FF
    assert image.get_pixel(0, 1) == 0x0000FF
    assert image.get_pixel(1, 1) == red
    assert image.get_pixel(2, 0) == 0xFF000000
    assert image.get_pixel(2, 1) == image.get_pixel(2, 0)


def test_parse_xpm_big_endian():
    image = parse_xpm(SAMPLE, 32, 1)
    assert image.row(0)[:4] == color_by_name("red").to_bytes(4, "big")


def test_parse_xpm_three_chars_per_pixel():
    lines = ["2 1 2 3", "aaa c blue", "bbb c #00FF00", "bbbaaa"]
    image = xpm_to_image(lines)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == color_by_name("blue")


def test_unknown_pixel_key_is_black():
    image = xpm_to_image(["1 1 1 1", "a c white", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c red", "a", "a"],
        ["1 1 1"],
        ["1 1 1 1", "a red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["2 2 1 1", "a c red", "aa"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        xpm_to_image(lines)


def test_xpm_file_to_image(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *open_xpm[] = {\n"
        "/* width height ncolors cpp */\n"
        '"2 2 2 1",\n'
        '". c #123456", // first colour\n'
        '"o c black",\n'
        '".o",\n'
        '"o."};\n'
    )
    image = xpm_file_to_image(path)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0x123456
    assert image.get_pixel(1, 0) == color_by_name("black")
    assert image.get_pixel(1, 1) == image.get_pixel(0, 0)


def test_xpm_file_missing(tmp_path):
    with pytest.raises(OSError):
        xpm_file_to_image(tmp_path / "absent.xpm")