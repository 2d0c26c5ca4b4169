"""Grid algorithms: matrix transforms, flood fills and breadth-first distances."""

from __future__ import annotations

from collections import deque
from typing import Iterator, MutableSequence, Sequence

_STEPS4 = ((0, 1), (0, -1), (-1, 0), (1, 0))
_STEPS8 = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _neighbours(
    r: int, c: int, rows: int, cols: int, steps: Sequence[tuple[int, int]] = _STEPS4
) -> Iterator[tuple[int, int]]:
    for dr, dc in steps:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def _shape(grid: Sequence[Sequence[object]]) -> tuple[int, int]:
    return len(grid), (len(grid[0]) if grid else 0)


def rotate(matrix: list[list[int]]) -> None:
    """Rotate a square matrix a quarter turn clockwise, in place."""
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("matrix must be square")
    for i in range(n):
        for j in range(i + 1, n):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def set_zeroes(matrix: Sequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count the groups of ``"1"`` cells joined horizontally or vertically."""
    rows, cols = _shape(grid)
    seen: set[tuple[int, int]] = set()
    count = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for nr, nc in _neighbours(cr, cc, rows, cols):
                    if grid[nr][nc] == "1" and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return count


def island_perimeter(grid: Sequence[Sequence[int]]) -> int:
    """Return the length of the boundary around all land cells (value 1)."""
    perimeter = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != 1:
                continue
            perimeter += 4
            if r > 0 and grid[r - 1][c] == 1:
                perimeter -= 2
            if c > 0 and row[c - 1] == 1:
                perimeter -= 2
    return perimeter


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return each cell's step distance to the nearest zero.

    Cells that cannot reach a zero are given -1.
    """
    rows, cols = _shape(mat)
    dist = [[0 if value == 0 else -1 for value in row] for row in mat]
    queue = deque((r, c) for r in range(rows) for c in range(cols) if dist[r][c] == 0)
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if dist[nr][nc] == -1:
                dist[nr][nc] = dist[r][c] + 1
                queue.append((nr, nc))
    return dist


def flood_fill(
    image: Sequence[MutableSequence[int]], sr: int, sc: int, color: int
) -> Sequence[MutableSequence[int]]:
    """Repaint, in place, the region of equal colour around ``(sr, sc)``; return the image."""
    rows, cols = _shape(image)
    old = image[sr][sc]
    if old == color:
        return image
    image[sr][sc] = color
    stack = [(sr, sc)]
    while stack:
        r, c = stack.pop()
        for nr, nc in _neighbours(r, c, rows, cols):
            if image[nr][nc] == old:
                image[nr][nc] = color
                stack.append((nr, nc))
    return image


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Return the minutes until no fresh orange (1) is left beside a rotten one (2).

    Returns -1 when some fresh orange can never rot. The grid is not changed.
    """
    state = [list(row) for row in grid]
    rows, cols = _shape(state)
    fresh = sum(row.count(1) for row in state)
    if fresh == 0:
        return 0
    queue = deque((r, c) for r in range(rows) for c in range(cols) if state[r][c] == 2)
    minutes = 0
    while queue:
        rotted = False
        for _ in range(len(queue)):
            r, c = queue.popleft()
            for nr, nc in _neighbours(r, c, rows, cols):
                if state[nr][nc] == 1:
                    state[nr][nc] = 2
                    fresh -= 1
                    rotted = True
                    queue.append((nr, nc))
        if rotted:
            minutes += 1
    return -1 if fresh else minutes


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the cell count of the shortest 8-way path of zeros from corner to corner, or -1."""
    rows, cols = _shape(grid)
    if rows == 0 or cols == 0:
        raise ValueError("grid must not be empty")
    if grid[0][0] == 1 or grid[-1][-1] == 1:
        return -1
    target = (rows - 1, cols - 1)
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    length = 1
    while queue:
        for _ in range(len(queue)):
            cell = queue.popleft()
            if cell == target:
                return length
            for nr, nc in _neighbours(*cell, rows, cols, _STEPS8):
                if grid[nr][nc] == 0 and (nr, nc) not in seen:
                    seen.add((nr, nc))
                    queue.append((nr, nc))
        length += 1
    return -1