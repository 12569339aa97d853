"""
Winning-line enumeration for flat, layered boards.

Every line is produced by one routine: pick a direction vector in
(layer, row, col) space, then walk every start offset whose line of
``win_condition`` cells stays on the board. 2D boards use the planar
directions only, so a 2D board scans exactly the lines of layer 0 of a 3D
board with the same size and win condition.

Cells are addressed by flat index ``layer * size * size + row * size + col``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Iterator, List, Tuple

import numpy as np

Direction = Tuple[int, int, int]
Line = Tuple[int, ...]

# (d_layer, d_row, d_col)
PLANAR_DIRECTIONS: Tuple[Direction, ...] = (
    (0, 0, 1),   # horizontal
    (0, 1, 0),   # vertical
    (0, 1, 1),   # diagonal
    (0, 1, -1),  # anti-diagonal
)

CROSS_LAYER_DIRECTIONS: Tuple[Direction, ...] = (
    (1, 0, 0),    # straight through the layers
    (1, 1, 1),
    (1, 1, -1),
    (1, -1, 1),
    (1, -1, -1),
)


def flat_index(size: int, row: int, col: int, layer: int = 0) -> int:
    return layer * size * size + row * size + col


def directions_for(win_condition: int, layer_count: int) -> Tuple[Direction, ...]:
    if layer_count > 1 and layer_count >= win_condition:
        return PLANAR_DIRECTIONS + CROSS_LAYER_DIRECTIONS
    return PLANAR_DIRECTIONS


def start_offsets(extent: int, step: int, win_condition: int) -> range:
    """Start coordinates along one axis for lines moving by ``step``."""
    if step == 0:
        return range(extent)
    if step > 0:
        return range(0, extent - win_condition + 1)
    return range(win_condition - 1, extent)


def scan_direction(
    size: int, win_condition: int, layer_count: int, direction: Direction
) -> Iterator[Line]:
    dl, dr, dc = direction
    for l0 in start_offsets(layer_count, dl, win_condition):
        for r0 in start_offsets(size, dr, win_condition):
            for c0 in start_offsets(size, dc, win_condition):
                yield tuple(
                    flat_index(size, r0 + i * dr, c0 + i * dc, l0 + i * dl)
                    for i in range(win_condition)
                )


@lru_cache(maxsize=None)
def winning_lines(size: int, win_condition: int, layer_count: int = 1) -> Tuple[Line, ...]:
    lines: List[Line] = []
    for direction in directions_for(win_condition, layer_count):
        lines.extend(scan_direction(size, win_condition, layer_count, direction))
    return tuple(lines)


@lru_cache(maxsize=None)
def line_matrix(size: int, win_condition: int, layer_count: int = 1) -> np.ndarray:
    """Lines as an (n_lines, win_condition) index array for fancy indexing."""
    m = np.array(winning_lines(size, win_condition, layer_count), dtype=np.intp)
    m = m.reshape(-1, win_condition)
    m.setflags(write=False)
    return m
