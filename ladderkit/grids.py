"""Puzzles played on small square grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_TARGET_SIZE = 10
_MATRIX_SIZE = 5
_LIGHTS_SIZE = 3


def _check_square(rows: Sequence[Sequence[object]], size: int) -> None:
    if len(rows) != size or any(len(row) != size for row in rows):
        raise ValueError(f"expected a {size}x{size} grid")


def target_points(rows: Sequence[str]) -> int:
    """Score a 10x10 target where any cell other than "." is an arrow.

    The outer ring is worth 1 point, the next 2, up to 5 in the centre.
    """
    _check_square(rows, _TARGET_SIZE)
    last = _TARGET_SIZE - 1
    return sum(
        min(i, last - i, j, last - j) + 1
        for i, row in enumerate(rows)
        for j, cell in enumerate(row)
        if cell != "."
    )


def beautiful_matrix_moves(rows: Sequence[Sequence[int]]) -> int:
    """Row and column swaps to move the single one to the centre of a 5x5 matrix."""
    _check_square(rows, _MATRIX_SIZE)
    cells = [(i, j) for i, row in enumerate(rows) for j, value in enumerate(row) if value]
    if not cells:
        raise ValueError("the matrix holds no one")
    i, j = cells[-1]
    centre = _MATRIX_SIZE // 2
    return abs(i - centre) + abs(j - centre)


def lights_after(presses: Iterable[Sequence[int]]) -> tuple[str, ...]:
    """State of a 3x3 grid of lights, all on at first, after the given presses.

    A press toggles its light and the orthogonal neighbours. The result has one
    string per row, "1" for a light that is on.
    """
    counts = [list(row) for row in presses]
    _check_square(counts, _LIGHTS_SIZE)
    toggled = {
        (i, j) for i, row in enumerate(counts) for j, count in enumerate(row) if count % 2
    }
    offsets = ((0, 0), (0, 1), (0, -1), (1, 0), (-1, 0))

    def is_on(i: int, j: int) -> bool:
        flips = sum((i + di, j + dj) in toggled for di, dj in offsets)
        return flips % 2 == 0

    return tuple(
        "".join("1" if is_on(i, j) else "0" for j in range(_LIGHTS_SIZE))
        for i in range(_LIGHTS_SIZE)
    )