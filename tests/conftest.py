from typing import Optional

import pytest

from ninarow.board import Board
from ninarow.game_basics import Mark
from ninarow.strategies import Strategy


def _play_out(board: Board, first: Strategy, second: Strategy, max_plies: Optional[int] = None) -> Optional[Mark]:
    """Alternate two strategies until someone wins or the board fills."""
    players = (first, second)
    ply = 0
    while board.winner() is None and not board.is_full():
        if max_plies is not None and ply >= max_plies:
            break
        player = players[ply % 2]
        move = player.get_move(board)
        assert board.place(move.row, move.col, player.mark, move.layer)
        ply += 1
    return board.winner()


@pytest.fixture
def play_out():
    return _play_out


@pytest.fixture
def board3() -> Board:
    return Board(3, 3)
