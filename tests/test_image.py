import pytest

from cube3d.image import Image


def _color_map(x, y, w, h, kind):
    # Gradients used by the graphics library's own demo program.
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def test_new_image_is_black():
    image = Image(42, 42)
    assert image.to_bytes() == bytes(42 * 42 * 4)
    assert image.get_pixel(41, 41) == 0


def test_bpp_and_size_line():
    image = Image(42, 42)
    assert image.bpp == 32
    assert image.size_line == 42 * 4


@pytest.mark.parametrize(
    "width, height, kind", [(42, 42, 1), (242, 242, 1), (242, 242, 2)]
)
def test_color_map_round_trip(width, height, kind):
    image = Image(width, height)
    for y in range(height):
        for x in range(width):
            image.put_pixel(x, y, _color_map(x, y, width, height, kind))
    for y in range(0, height, 7):
        for x in range(0, width, 5):
            assert image.get_pixel(x, y) == _color_map(x, y, width, height, kind)
    assert len(image.to_bytes()) == image.size_line * height


def test_to_bytes_layout_is_little_endian():
    image = Image(3, 2)
    image.put_pixel(1, 0, 0xFF99FF)
    image.put_pixel(0, 1, 0x00FFFF)
    data = image.to_bytes()
    assert data[4:8] == b"\xff\x99\xff\x00"
    row = image.size_line
    assert data[row:row + 4] == b"\xff\xff\x00\x00"
    assert data[:4] == bytes(4)


def test_out_of_bounds_access_is_ignored():
    image = Image(42, 42)
    for x, y in [(-1, 0), (42, 0), (0, 42), (0, -1)]:
        image.put_pixel(x, y, 0xFF99FF)
        assert image.get_pixel(x, y) == 0
    assert image.to_bytes() == bytes(42 * 42 * 4)


def test_negative_color_is_stored_as_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_fill_sets_every_pixel():
    image = Image(5, 4)
    image.fill(0x00FFFF)
    assert {image.get_pixel(x, y) for x in range(5) for y in range(4)} == {0x00FFFF}


def test_paste_copies_at_offset():
    frame = Image(20, 20)
    small = Image(3, 2)
    small.fill(0xFF99FF)
    small.put_pixel(2, 1, 0x123456)
    frame.paste(small, 5, 4)
    assert frame.get_pixel(5, 4) == 0xFF99FF
    assert frame.get_pixel(7, 5) == 0x123456
    assert frame.get_pixel(4, 4) == 0
    assert frame.get_pixel(8, 4) == 0
    assert frame.get_pixel(5, 6) == 0


def test_paste_is_clipped_to_the_target():
    frame = Image(20, 20)
    small = Image(4, 4)
    small.fill(0xFF99FF)
    frame.paste(small, 18, 19)
    written = [
        (x, y) for y in range(20) for x in range(20) if frame.get_pixel(x, y)
    ]
    assert written == [(18, 19), (19, 19)]


def test_paste_entirely_outside_changes_nothing():
    frame = Image(10, 10)
    small = Image(2, 2)
    small.fill(0xFF99FF)
    frame.paste(small, -5, 0)
    frame.paste(small, 0, 30)
    assert frame.to_bytes() == bytes(10 * 10 * 4)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size_raises(width, height):
    with pytest.raises(ValueError):
        Image(width, height)