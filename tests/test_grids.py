import copy

import pytest

from algosuite.grids import (
    flood_fill,
    island_perimeter,
    num_islands,
    oranges_rotting,
    rotate,
    set_zeroes,
    shortest_path_binary_matrix,
    update_matrix,
)


def test_rotate_moves_each_cell_clockwise():
    original = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    matrix = copy.deepcopy(original)
    rotate(matrix)
    n = len(original)
    for i in range(n):
        for j in range(n):
            assert matrix[j][n - 1 - i] == original[i][j]


def test_rotate_four_times_is_identity():
    original = [[5, 1, 9, 11], [2, 4, 8, 10], [13, 3, 6, 7], [15, 14, 12, 16]]
    matrix = copy.deepcopy(original)
    for _ in range(4):
        rotate(matrix)
    assert matrix == original


def test_rotate_rejects_non_square():
    with pytest.raises(ValueError):
        rotate([[1, 2, 3], [4, 5, 6]])


def test_set_zeroes_clears_rows_and_columns():
    original = [[0, 1, 2, 0], [3, 4, 5, 2], [1, 3, 1, 5], [7, 0, 8, 9]]
    matrix = copy.deepcopy(original)
    set_zeroes(matrix)
    zero_rows = {i for i, row in enumerate(original) if 0 in row}
    zero_cols = {j for row in original for j, v in enumerate(row) if v == 0}
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if i in zero_rows or j in zero_cols:
                assert value == 0
            else:
                assert value == original[i][j]


def test_num_islands_diagonals_do_not_connect():
    grid = [list("101"), list("010"), list("101")]
    assert num_islands(grid) == sum(row.count("1") for row in grid)


def test_num_islands_connected_block_and_grid_untouched():
    grid = [list("11000"), list("11000"), list("00000")]
    before = copy.deepcopy(grid)
    assert num_islands(grid) == 1
    assert grid == before


def test_island_perimeter_single_cell():
    assert island_perimeter([[0, 0], [0, 1]]) == 4


def test_island_perimeter_invariant_under_transpose_and_mirror():
    grid = [[0, 1, 0, 0], [1, 1, 1, 0], [0, 1, 0, 0], [1, 1, 0, 0]]
    transposed = [list(col) for col in zip(*grid)]
    mirrored = [row[::-1] for row in grid]
    value = island_perimeter(grid)
    assert island_perimeter(transposed) == value
    assert island_perimeter(mirrored) == value


def test_update_matrix_distances_are_consistent():
    mat = [[0, 0, 0], [0, 1, 0], [1, 1, 1], [1, 1, 1]]
    before = copy.deepcopy(mat)
    dist = update_matrix(mat)
    assert mat == before
    rows, cols = len(mat), len(mat[0])
    for r in range(rows):
        for c in range(cols):
            if mat[r][c] == 0:
                assert dist[r][c] == 0
            else:
                around = [
                    dist[nr][nc]
                    for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1))
                    if 0 <= nr < rows and 0 <= nc < cols
                ]
                assert dist[r][c] == 1 + min(around)


def test_update_matrix_without_zero_leaves_minus_one():
    assert update_matrix([[1, 1]]) == [[-1, -1]]


def test_flood_fill_worked_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    result = flood_fill(image, 1, 1, 2)
    assert result == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]
    assert result is image


def test_flood_fill_same_colour_is_unchanged():
    image = [[0, 0, 0], [0, 0, 0]]
    assert flood_fill(copy.deepcopy(image), 0, 0, 0) == image


def test_oranges_rotting_worked_example():
    assert oranges_rotting([[2, 1, 1], [1, 1, 0], [0, 1, 1]]) == 4


def test_oranges_rotting_unreachable_and_no_fresh():
    grid = [[2, 1, 1], [0, 1, 1], [1, 0, 1]]
    before = copy.deepcopy(grid)
    assert oranges_rotting(grid) == -1
    assert grid == before
    assert oranges_rotting([[0, 2]]) == 0


def test_shortest_path_single_cell():
    assert shortest_path_binary_matrix([[0]]) == 1


def test_shortest_path_open_grid_follows_diagonal():
    n = 5
    grid = [[0] * n for _ in range(n)]
    assert shortest_path_binary_matrix(grid) == n
    assert grid == [[0] * n for _ in range(n)]


def test_shortest_path_blocked():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1
    assert shortest_path_binary_matrix([[0, 0], [0, 1]]) == -1
    assert shortest_path_binary_matrix([[0, 1, 0], [1, 1, 0], [0, 0, 0]]) == -1


def test_shortest_path_empty_grid_raises():
    with pytest.raises(ValueError):
        shortest_path_binary_matrix([])