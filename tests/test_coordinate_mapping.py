import pytest

from thaw.config import TileSizing
from thaw.ui.layout import cell_to_screen, compute_board_geometry, screen_to_cell


def test_center_of_3x3_board_maps_to_center_cell():
    assert screen_to_cell(450, 450, 900, 900, 3, 3) == 4


def test_3x3_board_geometry_keeps_one_tile_margin():
    geometry = compute_board_geometry(900, 900, 3, 3)
    assert geometry.side == pytest.approx(180.0)
    assert (geometry.tiles_x, geometry.tiles_y) == (5, 5)
    assert (geometry.offset_cols, geometry.offset_rows) == (1, 1)
    assert (geometry.origin_x, geometry.origin_y) == (pytest.approx(180.0), pytest.approx(180.0))


@pytest.mark.parametrize(
    "point,expected",
    [
        ((181, 181), 0),
        ((719, 181), 2),
        ((181, 719), 6),
        ((719, 719), 8),
        ((300, 450), 3),
    ],
)
def test_corner_cells(point, expected):
    assert screen_to_cell(point[0], point[1], 900, 900, 3, 3) == expected


@pytest.mark.parametrize("point", [(90, 450), (810, 450), (450, 90), (450, 810), (-5, -5)])
def test_margin_clicks_miss_the_board(point):
    assert screen_to_cell(point[0], point[1], 900, 900, 3, 3) is None


def test_wide_viewport_centres_on_whole_tiles():
    geometry = compute_board_geometry(1600, 900, 3, 3)
    assert geometry.tiles_x == 8
    # (8 - 3) / 2 = 2.5 rounds half up to 3
    assert geometry.offset_cols == 3
    assert screen_to_cell(810, 450, 1600, 900, 3, 3) == 4


def test_longer_axis_sizing_on_rectangular_board():
    assert screen_to_cell(150, 250, 600, 600, 4, 2) == 0
    assert screen_to_cell(450, 350, 600, 600, 4, 2) == 7
    assert screen_to_cell(550, 250, 600, 600, 4, 2) is None


def test_shorter_axis_sizing_uses_smaller_board_dimension():
    geometry = compute_board_geometry(600, 600, 4, 2, TileSizing.SHORTER_AXIS)
    assert geometry.side == pytest.approx(150.0)
    assert screen_to_cell(10, 160, 600, 600, 4, 2, TileSizing.SHORTER_AXIS) == 0
    assert screen_to_cell(599, 299, 600, 600, 4, 2, TileSizing.SHORTER_AXIS) == 3


def test_negative_offsets_round_half_up():
    # 8x1 board under shorter-axis sizing overflows a 300px viewport.
    geometry = compute_board_geometry(300, 300, 8, 1, TileSizing.SHORTER_AXIS)
    assert geometry.offset_cols == -2
    assert screen_to_cell(0, 150, 300, 300, 8, 1, TileSizing.SHORTER_AXIS) == 2


def test_zero_viewport_maps_nothing():
    assert screen_to_cell(10, 10, 0, 600, 3, 3) is None


def test_compute_board_geometry_rejects_empty_viewport():
    with pytest.raises(ValueError):
        compute_board_geometry(0, 0, 3, 3)


def test_cell_to_screen_round_trips_through_screen_to_cell():
    geometry = compute_board_geometry(1024, 768, 5, 4)
    for index in range(20):
        left, top = cell_to_screen(index, geometry)
        x = left + geometry.side / 2
        y = top + geometry.side / 2
        assert screen_to_cell(x, y, 1024, 768, 5, 4) == index
