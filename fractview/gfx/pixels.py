"""Off-screen images and conversion of 0xRRGGBB colours to visual pixels."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["VisualFormat", "Image", "mask_shift"]

LITTLE_ENDIAN = 0
BIG_ENDIAN = 1

# Rows are padded to a multiple of this many bits.
_BITMAP_PAD = 32


def mask_shift(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in a channel mask."""
    if mask <= 0:
        raise ValueError(f"channel mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return shift, width


@dataclass(frozen=True)
class VisualFormat:
    """Pixel layout of a TrueColor visual."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF

    def to_pixel(self, color: int) -> int:
        """Convert a 0xRRGGBB colour to the pixel value of this visual."""
        if self.depth >= 24:
            return color
        red = (color >> 8) & 0xFF00
        green = color & 0xFF00
        blue = (color << 8) & 0xFF00
        pixel = 0
        for value, mask in ((red, self.red_mask), (green, self.green_mask), (blue, self.blue_mask)):
            shift, width = mask_shift(mask)
            pixel += (value >> (16 - width)) << shift
        return pixel


class Image:
    """A width x height pixel buffer with padded rows, like an XImage in ZPixmap form."""

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32, byte_order: int = LITTLE_ENDIAN):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}")
        if byte_order not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"byte order must be 0 or 1, got {byte_order}")
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.byte_order = byte_order
        self.size_line = (width * bits_per_pixel + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order == BIG_ENDIAN else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of a pixel value at (x, y)."""
        start = self._offset(x, y)
        opp = self.bytes_per_pixel
        value = color & ((1 << (8 * opp)) - 1)
        self.data[start:start + opp] = value.to_bytes(opp, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(self.data[start:start + self.bytes_per_pixel], self._endian)

    def row(self, y: int) -> bytes:
        """Return the raw bytes of row y, padding included."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} outside image of height {self.height}")
        start = y * self.size_line
        return bytes(self.data[start:start + self.size_line])