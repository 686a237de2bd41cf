"""Reading XPM pixmaps into images."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from fractview.gfx.colors import color_by_name
from fractview.gfx.pixels import Image

__all__ = [
    "XpmError",
    "split_words",
    "find",
    "find_unquoted",
    "strip_comments",
    "quoted_lines",
    "parse_color_spec",
    "parse_xpm",
    "xpm_to_image",
    "xpm_file_to_image",
]

# Pixel value used for the transparent colour "none".
TRANSPARENT_PIXEL = 0xFF000000

_WORD_SEPARATORS = re.compile(r"[ \t]+")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def split_words(text: str) -> list[str]:
    """Split text on spaces and tabs, dropping empty words."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def find(text: str, pattern: str) -> int:
    """Return the position of the first occurrence of pattern, or -1."""
    return text.find(pattern)


def find_unquoted(text: str, pattern: str) -> int:
    """Return the position of the first occurrence of pattern outside double quotes, or -1."""
    inside = False
    for pos, char in enumerate(text):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(pattern, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C comments outside string literals, keeping the text length."""
    chars = list(text)
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while True:
            current = "".join(chars)
            begin = find_unquoted(current, opener)
            if begin == -1:
                break
            end = current.find(closer, begin + len(opener))
            stop = len(chars) if end == -1 else end + len(closer)
            chars[begin:stop] = " " * (stop - begin)
    return "".join(chars)


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_color_spec(name: str, suffix: str | None = None) -> int:
    """Return the colour for an XPM colour value: "#hex" or a colour name.

    A suffix is joined to the name with a space before lookup. Unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if suffix:
        name = f"{name} {suffix}"
    try:
        return color_by_name(name)
    except KeyError:
        return 0


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad XPM header: {line!r}")
    return values  # type: ignore[return-value]


def _read_colors(lines: Iterator[str], count: int, cpp: int) -> dict[str, int]:
    colors: dict[str, int] = {}
    for _ in range(count):
        line = _next_line(lines, "the colour table")
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
            value = words[index]
        except (ValueError, IndexError):
            raise XpmError(f"colour line without a 'c' value: {line!r}") from None
        suffix = words[index + 1] if index + 1 < len(words) else None
        rgb = parse_color_spec(value, suffix)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)
    return colors


def parse_xpm(lines: Iterable[str], bits_per_pixel: int = 32, byte_order: int = 0) -> Image:
    """Build an image from XPM lines: header, colour table, then pixel rows."""
    rows = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(rows, "the header"))
    colors = _read_colors(rows, ncolors, cpp)
    image = Image(width, height, bits_per_pixel, byte_order)
    for y in range(height):
        line = _next_line(rows, "the last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT_PIXEL
            image.put_pixel(x, y, color)
    return image


def xpm_to_image(lines: Iterable[str]) -> Image:
    """Build an image from XPM data given as a sequence of strings."""
    return parse_xpm(lines)


def xpm_file_to_image(path: str | Path) -> Image:
    """Read an XPM file and build an image from it."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(quoted_lines(strip_comments(text)))