"""
Tactics: immediate wins and blocks.
Teaching notes:
- A cell is an immediate win if placing the mark there completes a line.
- A block is the opponent's immediate win, taken away by playing there first.
- Every trial placement is cleared before the next cell is tried.
"""
from typing import List, Optional

from .board import Board
from .game_basics import Mark, Move


def _wins_at(board: Board, move: Move, mark: Mark) -> bool:
    board.place(move.row, move.col, mark, move.layer)
    try:
        return board.check_win(mark)
    finally:
        board.clear(move.row, move.col, move.layer)


def immediate_winning_moves(board: Board, mark: Mark) -> List[Move]:
    return [move for move in board.empty_cells() if _wins_at(board, move, mark)]


def first_winning_move(board: Board, mark: Mark) -> Optional[Move]:
    for move in board.empty_cells():
        if _wins_at(board, move, mark):
            return move
    return None


def blocking_move(board: Board, mark: Mark) -> Optional[Move]:
    """First cell where the opponent of ``mark`` would win next turn."""
    return first_winning_move(board, Mark(mark).opponent)
