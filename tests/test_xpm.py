import pytest

from cube3d.colors import lookup_color
from cube3d.xpm import (
    XpmError,
    parse_xpm,
    quoted_lines,
    read_xpm,
    split_words,
    strip_comments,
    text_to_rgb,
)


def test_split_words_on_spaces_and_tabs():
    assert split_words("  16 16\t2  1 ") == ["16", "16", "2", "1"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* note */ "b"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "note" not in result
    assert quoted_lines(result) == ["b"]


def test_strip_comments_line_comment_includes_newline():
    text = '// header\n"x"'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "\n" not in result
    assert quoted_lines(result) == ["x"]


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"a/*b*/c" "d//e"'
    assert strip_comments(text) == text


def test_quoted_lines_extracts_strings():
    text = 'static char *img[] = {"1 1 1 1", ". c red", "."};'
    assert quoted_lines(text) == ["1 1 1 1", ". c red", "."]


def test_text_to_rgb_hex():
    assert text_to_rgb("#FF0000") == 0xFF0000


def test_text_to_rgb_names():
    assert text_to_rgb("Red") == lookup_color("red")
    assert text_to_rgb("dark", "red") == lookup_color("dark red")
    assert text_to_rgb("None") == -1


def test_text_to_rgb_unknown_is_black():
    assert text_to_rgb("no-such-colour") == 0


def test_parse_small_image():
    image = parse_xpm(["2 2 2 1", ". c #FF0000", "# c #0000FF", ".#", "#."])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0x0000FF
    assert image.get_pixel(0, 1) == 0x0000FF
    assert image.get_pixel(1, 1) == 0xFF0000


def test_parse_transparent_colour():
    image = parse_xpm(["1 1 1 1", "x c None", "x"])
    assert image.get_pixel(0, 0) == 0xFF000000


def test_parse_short_keys_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c #FF0000", "a c #0000FF", "a"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_parse_long_keys_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c #FF0000", "abc c #0000FF", "abc"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_parse_unknown_key_is_black():
    image = parse_xpm(["2 1 1 1", "a c #FF0000", "ab"])
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 2 1 1", "a c red", "a", "a"],
        ["2 2 1"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["3 1 1 1", "a c red", "aa"],
        [],
    ],
)
def test_parse_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_read_xpm_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *wall[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"3 2 2 1",\n'
        '"o c #00FF00", // green\n'
        '"- c black",\n'
        '"o-o",\n'
        '"-o-"\n'
        "};\n"
    )
    image = read_xpm(path)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == lookup_color("black")
    assert image.get_pixel(1, 1) == 0x00FF00


def test_read_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        read_xpm(tmp_path / "missing.xpm")