"""
Tests for the board image renderer.
"""

from PIL import Image

from display import BoardRenderer, DisplayConfig
from logic import Board


def test_render_size_and_background():
    renderer = BoardRenderer()
    image = renderer.render(Board().snapshot())

    assert image.size == (300, 300)
    assert image.mode == "RGB"
    assert image.getpixel((50, 50)) == DisplayConfig.BOARD_COLOR


def test_render_draws_marks():
    renderer = BoardRenderer()
    image = renderer.render(Board.from_rows(["X  ", " O ", "   "]).snapshot())

    # The X crosses the middle of its cell; an O leaves its middle empty
    assert image.getpixel((50, 50)) == DisplayConfig.PLAYER_COLOR
    assert image.getpixel((150, 150)) == DisplayConfig.BOARD_COLOR
    assert image.getpixel((250, 250)) == DisplayConfig.BOARD_COLOR


def test_render_highlights_winning_line():
    renderer = BoardRenderer()
    board = Board.from_rows(["XXX", "OO ", "   "])
    image = renderer.render(board.snapshot(), [(0, 0), (0, 1), (0, 2)])

    assert image.getpixel((8, 8)) == DisplayConfig.WIN_HIGHLIGHT_COLOR
    assert image.getpixel((208, 8)) == DisplayConfig.WIN_HIGHLIGHT_COLOR
    assert image.getpixel((8, 108)) == DisplayConfig.BOARD_COLOR


def test_cell_at_maps_clicks_to_cells():
    renderer = BoardRenderer()

    assert renderer.cell_at(0, 0) == (0, 0)
    assert renderer.cell_at(150, 150) == (1, 1)
    assert renderer.cell_at(299, 0) == (0, 2)
    assert renderer.cell_at(10, 250) == (2, 0)
    assert renderer.cell_at(300, 10) is None
    assert renderer.cell_at(-1, 10) is None


def test_cell_box_covers_one_third():
    renderer = BoardRenderer()

    assert renderer.cell_box(0, 0) == (0, 0, 99, 99)
    assert renderer.cell_box(2, 1) == (100, 200, 199, 299)


def test_custom_board_size():
    class SmallDisplay(DisplayConfig):
        BOARD_PIXELS = 90

    renderer = BoardRenderer(SmallDisplay())

    assert renderer.render(Board().snapshot()).size == (90, 90)
    assert renderer.cell_at(45, 89) == (2, 1)


def test_save_writes_png(tmp_path):
    renderer = BoardRenderer()
    path = renderer.save(Board.from_rows(["X  ", "   ", "   "]).snapshot(), tmp_path / "board.png")

    assert path.exists()
    with Image.open(path) as saved:
        assert saved.format == "PNG"
        assert saved.size == (300, 300)
