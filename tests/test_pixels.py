import pytest

from fractview.gfx.pixels import Image, VisualFormat, mask_shift


def test_mask_shift_standard_masks():
    assert mask_shift(0xFF0000) == (16, 8)
    assert mask_shift(0x00FF00) == (8, 8)
    assert mask_shift(0x0000FF) == (0, 8)


def test_mask_shift_565_masks():
    assert mask_shift(0xF800) == (11, 5)
    assert mask_shift(0x07E0) == (5, 6)
    assert mask_shift(0x001F) == (0, 5)


def test_mask_shift_rejects_zero():
    with pytest.raises(ValueError):
        mask_shift(0)


def test_truecolor_24_passes_colour_through():
    visual = VisualFormat()
    for color in (0x000000, 0xFF99FF, 0x00FFFF, 0x123456):
        assert visual.to_pixel(color) == color


def test_16_bit_visual_packs_channels():
    visual = VisualFormat(depth=16, red_mask=0xF800, green_mask=0x07E0, blue_mask=0x001F)
    assert visual.to_pixel(0xFFFFFF) == 0xFFFF
    assert visual.to_pixel(0xFF0000) == 0xF800
    assert visual.to_pixel(0x00FF00) == 0x07E0
    assert visual.to_pixel(0x0000FF) == 0x001F
    assert visual.to_pixel(0x000000) == 0


def test_size_line_for_test_image():
    image = Image(42, 42, 32, 0)
    assert image.size_line == 42 * 4
    assert len(image.data) == image.size_line * 42


def test_size_line_is_padded_to_32_bits():
    image = Image(3, 2, 24, 0)
    assert image.size_line % 4 == 0
    assert image.size_line >= 3 * 3


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size, kind", [(42, 1), (242, 1), (242, 2)])
def test_fill_and_read_back_color_map(size, kind):
    visual = VisualFormat()
    image = Image(size, size, 32, 0)
    for y in range(size):
        for x in range(size):
            image.put_pixel(x, y, visual.to_pixel(_color_map(x, y, size, size, kind)))
    for y in range(0, size, 7):
        for x in range(0, size, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, size, size, kind)


def test_byte_order_little_endian():
    image = Image(2, 1, 32, 0)
    image.put_pixel(1, 0, 0x11223344)
    assert image.row(0)[4:8] == bytes([0x44, 0x33, 0x22, 0x11])


def test_byte_order_big_endian():
    image = Image(2, 1, 32, 1)
    image.put_pixel(1, 0, 0x11223344)
    assert image.row(0)[4:8] == bytes([0x11, 0x22, 0x33, 0x44])
    assert image.get_pixel(1, 0) == 0x11223344


def test_pixel_value_truncated_to_pixel_size():
    image = Image(1, 1, 16, 0)
    image.put_pixel(0, 0, 0xABCDEF)
    assert image.get_pixel(0, 0) == 0xCDEF


def test_negative_colour_wraps():
    image = Image(1, 1, 32, 0)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_new_image_is_black():
    image = Image(4, 4)
    assert all(image.get_pixel(x, y) == 0 for x in range(4) for y in range(4))


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (4, 0), (0, 3)])
def test_out_of_bounds_pixel(x, y):
    image = Image(4, 3)
    with pytest.raises(IndexError):
        image.put_pixel(x, y, 0)
    with pytest.raises(IndexError):
        image.get_pixel(x, y)


def test_row_out_of_bounds():
    with pytest.raises(IndexError):
        Image(2, 2).row(2)


@pytest.mark.parametrize(
    "args", [(0, 1, 32, 0), (1, 0, 32, 0), (1, 1, 12, 0), (1, 1, 32, 2)]
)
def test_invalid_image_parameters(args):
    with pytest.raises(ValueError):
        Image(*args)