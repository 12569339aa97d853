"""
Static evaluation of non-terminal positions for depth-limited search.

Score is from ``mark``'s side: its own features add, the opponent's identical
features subtract.
- center: the cell (size // 2, size // 2) on layer 0, weight 3
- corners: the four corners of layer 0, weight 2 each
- open lines: every winning line holding at least one of the side's marks
  and none of the other side's, weight 1
"""
from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from .board import Board
from .game_basics import EMPTY, Mark

CENTER_WEIGHT = 3
CORNER_WEIGHT = 2
OPEN_LINE_WEIGHT = 1


def corner_cells(size: int) -> List[Tuple[int, int]]:
    last = size - 1
    return [(0, 0), (0, last), (last, 0), (last, last)]


def _signed(board: Board, row: int, col: int, mark: Mark) -> int:
    v = board.mark(row, col)
    if v == EMPTY:
        return 0
    return 1 if v == mark else -1


def center_score(board: Board, mark: Mark) -> int:
    c = board.size // 2
    return CENTER_WEIGHT * _signed(board, c, c, mark)


def corner_score(board: Board, mark: Mark) -> int:
    return CORNER_WEIGHT * sum(_signed(board, r, c, mark) for r, c in corner_cells(board.size))


def count_open_lines(board: Board, mark: Mark) -> int:
    """Lines containing ``mark`` at least once and no opponent mark."""
    cells = np.asarray(board.cells(), dtype=np.int8)
    vals = cells[board.line_matrix]
    own = (vals == int(mark)).any(axis=1)
    blocked = (vals == int(Mark(mark).opponent)).any(axis=1)
    return int(np.count_nonzero(own & ~blocked))


def evaluation_breakdown(board: Board, mark: Mark) -> Dict[str, int]:
    mark = Mark(mark)
    own_lines = count_open_lines(board, mark)
    opp_lines = count_open_lines(board, mark.opponent)
    terms = {
        'center': center_score(board, mark),
        'corners': corner_score(board, mark),
        'open_lines': own_lines,
        'opponent_open_lines': opp_lines,
    }
    terms['total'] = (
        terms['center']
        + terms['corners']
        + OPEN_LINE_WEIGHT * (own_lines - opp_lines)
    )
    return terms


def evaluate(board: Board, mark: Mark) -> int:
    return evaluation_breakdown(board, mark)['total']
