import pytest

from cube3d.game import HEIGHT, WIDTH, Player
from cube3d.image import Image
from cube3d.minimap import (
    FLOOR_COLOR,
    MARGIN,
    PLAYER_COLOR,
    WALL_COLOR,
    blit_minimap,
    create_minimap,
    draw_minimap,
)

GRID = ["1111", "1001", "1111"]


def test_create_minimap_is_whole_cells_within_a_fifth_of_screen():
    minimap = create_minimap(GRID)
    assert minimap.width % len(GRID[0]) == 0
    assert minimap.height % len(GRID) == 0
    assert minimap.width <= WIDTH * 0.2
    assert minimap.height <= HEIGHT * 0.2
    assert minimap.width > WIDTH * 0.2 - len(GRID[0])
    assert minimap.height > HEIGHT * 0.2 - len(GRID)


def test_create_minimap_rejects_empty_grid():
    with pytest.raises(ValueError):
        create_minimap([])


def test_create_minimap_rejects_too_wide_grid():
    with pytest.raises(ValueError):
        create_minimap(["1" * 1000])


def test_draw_minimap_colours_cells():
    minimap = create_minimap(GRID)
    player = Player(pos_x=1.5, pos_y=1.5)
    draw_minimap(minimap, GRID, player)
    cell_w = minimap.width // len(GRID[0])
    cell_h = minimap.height // len(GRID)

    def centre(row, col):
        return minimap.get_pixel(col * cell_w + cell_w // 2, row * cell_h + cell_h // 2)

    assert centre(1, 1) == PLAYER_COLOR
    assert centre(1, 2) == FLOOR_COLOR
    assert centre(0, 0) == WALL_COLOR
    assert centre(2, 3) == WALL_COLOR


def test_draw_minimap_covers_whole_image():
    minimap = create_minimap(GRID)
    draw_minimap(minimap, GRID, Player(pos_x=1.5, pos_y=2.5))
    colours = {
        minimap.get_pixel(x, y)
        for y in range(minimap.height)
        for x in range(minimap.width)
    }
    assert colours == {PLAYER_COLOR, FLOOR_COLOR, WALL_COLOR}


def test_player_cell_follows_position():
    minimap = create_minimap(GRID)
    draw_minimap(minimap, GRID, Player(pos_x=1.2, pos_y=2.9))
    cell_w = minimap.width // len(GRID[0])
    cell_h = minimap.height // len(GRID)
    assert minimap.get_pixel(2 * cell_w, cell_h) == PLAYER_COLOR
    assert minimap.get_pixel(cell_w, cell_h) == FLOOR_COLOR


def test_blit_minimap_places_at_margin():
    frame = Image(300, 200)
    minimap = create_minimap(GRID)
    draw_minimap(minimap, GRID, Player(pos_x=1.5, pos_y=1.5))
    blit_minimap(frame, minimap)
    assert frame.get_pixel(MARGIN, MARGIN) == minimap.get_pixel(0, 0)
    assert frame.get_pixel(MARGIN - 1, MARGIN - 1) == 0
    last_x = MARGIN + minimap.width - 1
    last_y = MARGIN + minimap.height - 1
    assert frame.get_pixel(last_x, last_y) == minimap.get_pixel(
        minimap.width - 1, minimap.height - 1
    )
    assert frame.get_pixel(last_x + 1, last_y + 1) == 0