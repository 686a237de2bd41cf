# fractview

Pure-Python building blocks for a fractal explorer (Mandelbrot, Julia and
Burning Ship sets). The package has no third-party dependencies. It provides:

- `fractview.parsing`: parsing and validation of command-line values, and the usage text.
- `fractview.gfx.colors`: the X11 named-colour table.
- `fractview.gfx.pixels`: pixel buffers with padded rows and conversion of colours to pixel values.
- `fractview.gfx.xpm`: reading XPM pixmaps into images.

## Installation

```
pip install .
```

## Argument parsing

```python
from fractview.parsing import ArgumentError, canonical_name, parse_constant, parse_iterations, usage

canonical_name("mANDELBROT")   # "Mandelbrot"
parse_iterations("500")        # 500
parse_constant("-0.8")         # -0.8
print(usage())
```

- `parse_iterations` accepts optional leading whitespace and an optional `+`,
  followed by digits only. The value must be greater than 10 and at most 30000.
  Otherwise it raises `ArgumentError`.
- `parse_constant` accepts a plain decimal number with an optional sign, such as
  `0.156` or `-2`. It does not accept exponents, a leading `.`, or trailing text.
  Otherwise it raises `ArgumentError`.
- `ArgumentError` is a subclass of `ValueError`.

## Named colours

```python
from fractview.gfx.colors import color_by_name, color_names

color_by_name("Steel Blue")   # 0x4682B4, matched case-insensitively
color_by_name("gray50")       # 0x7F7F7F
color_by_name("none")         # -1
len(color_names())
```

Unknown names raise `KeyError`.

## Images and pixel formats

```python
from fractview.gfx.pixels import Image, VisualFormat, mask_shift

image = Image(42, 42)              # 32 bits per pixel, little-endian by default
image.put_pixel(0, 0, 0xFF0000)
image.get_pixel(0, 0)              # 0xFF0000
image.row(0)                       # raw bytes of the row, padding included

VisualFormat(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F).to_pixel(0xFFFFFF)
mask_shift(0x07E0)                 # (5, 6)
```

Rows are padded to a multiple of 32 bits. Coordinates outside the image raise
`IndexError`. A visual with a depth of 24 or more returns colours unchanged.

## XPM images

```python
from fractview.gfx.xpm import xpm_file_to_image, xpm_to_image

image = xpm_to_image([
    "2 1 2 1",
    "a c red",
    "b c #00FF00",
    "ab",
])
image.get_pixel(1, 0)   # 0x00FF00
```

`xpm_file_to_image(path)` reads an XPM file. It blanks out C comments, takes the
contents of the quoted strings, and parses them the same way. Colours are given
as `#hex` values or as colour names. Unknown colour names give black, and `none`
is stored as `0xFF000000`. Malformed data raises `XpmError`.

The helpers `split_words`, `find`, `find_unquoted`, `strip_comments`,
`quoted_lines`, `parse_color_spec` and `parse_xpm` are also available. With
`parse_xpm` you can choose the bits per pixel and the byte order of the image.

## What this package does not do

fractview does not compute or draw fractals. It does not open windows, handle
keyboard or mouse events, or install a command-line program. It provides the
value parsing, colour, image and XPM pieces described above.

## Tests

```
pip install .[test]
pytest
```