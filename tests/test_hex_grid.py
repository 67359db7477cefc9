import pytest

from engine.hex_grid import NONE, HexGrid, neighbor


def test_even_row_neighbors():
    # (2, 2) on a 5x5 grid, even row
    i = 2 * 5 + 2
    got = [neighbor(i, d, 5, 5) for d in range(6)]
    assert got == [1 * 5 + 2, 2 * 5 + 3, 3 * 5 + 2, 3 * 5 + 1, 2 * 5 + 1, 1 * 5 + 1]


def test_odd_row_neighbors_shift_right():
    # (2, 1) on a 5x5 grid, odd row
    i = 1 * 5 + 2
    got = [neighbor(i, d, 5, 5) for d in range(6)]
    assert got == [0 * 5 + 3, 1 * 5 + 3, 2 * 5 + 3, 2 * 5 + 2, 1 * 5 + 1, 0 * 5 + 2]


def test_neighbors_off_grid_are_none():
    assert neighbor(0, 0, 4, 4) == NONE
    assert neighbor(0, 4, 4, 4) == NONE
    assert neighbor(0, 5, 4, 4) == NONE
    assert neighbor(0, 1, 4, 4) == 1
    assert neighbor(3, 1, 4, 4) == NONE
    assert neighbor(0, 7, 4, 4) == NONE


def test_neighbor_relation_is_symmetric():
    grid = HexGrid(7, 6)
    for c in grid.cells:
        for n in grid.neighbors(c.index):
            assert c.index in grid.neighbors(n)


def test_opposite_directions():
    grid = HexGrid(6, 6)
    for c in grid.cells:
        for d in range(6):
            n = grid.neighbor(c.index, d)
            if n != NONE:
                assert grid.neighbor(n, (d + 3) % 6) == c.index


def test_index_and_xy():
    grid = HexGrid(4, 3)
    assert grid.index(3, 2) == 11
    assert grid.index(4, 0) == NONE
    assert grid.xy(11) == (3, 2)
    assert grid.get(1, 1).pos == (1, 1)
    assert grid.get(-1, 0) is None


def test_new_grid_is_all_sea():
    grid = HexGrid(3, 3)
    assert grid.size == 9
    assert all(c.is_sea for c in grid.cells)


def test_bad_dimensions():
    with pytest.raises(ValueError):
        HexGrid(0, 5)


def test_flood_fill():
    grid = HexGrid(4, 4)
    for i in (0, 1, 5, 15):
        grid.cells[i].territory = 3
    assert sorted(grid.flood_fill(0, 3)) == [0, 1, 5]
    assert grid.flood_fill(2, 3) == []
    assert grid.territory_cells(3) == [0, 1, 5, 15]
