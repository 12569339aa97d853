"""Move-selection strategies behind one ``get_move(board)`` contract.

The family is closed: random, greedy win/block, and minimax search. Callers
pick one through ``make_strategy`` with a ``StrategyConfig`` (or a difficulty
preset) instead of subclassing.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

import numpy as np

from .board import Board
from .config import (
    Difficulty,
    SearchConfig,
    StrategyConfig,
    StrategyKind,
    default_difficulty,
    default_seed,
    search_config_for,
    validate_seed,
)
from .errors import NoMoveAvailable
from .game_basics import Mark, Move
from .search import MinimaxEngine, SearchResult
from .tactics import blocking_move, first_winning_move

LOGGER = logging.getLogger(__name__)


class Strategy(ABC):
    """Choose an empty cell for ``mark``; the board is left as it was found."""

    kind: StrategyKind

    def __init__(self, mark: Union[Mark, int, str]) -> None:
        self.mark = Mark.parse(mark)

    @property
    def opponent(self) -> Mark:
        return self.mark.opponent

    @abstractmethod
    def get_move(self, board: Board) -> Move:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mark={self.mark.symbol})"


def _require_moves(board: Board) -> list:
    moves = board.empty_cells()
    if not moves:
        raise NoMoveAvailable("Board is full; no move available.")
    return moves


class RandomStrategy(Strategy):
    """Uniform choice among empty cells."""

    kind = StrategyKind.RANDOM

    def __init__(self, mark: Union[Mark, int, str], seed: Optional[int] = None) -> None:
        super().__init__(mark)
        self.seed = validate_seed(seed) if seed is not None else default_seed()
        self._rng = np.random.default_rng(self.seed)

    def get_move(self, board: Board) -> Move:
        moves = _require_moves(board)
        return moves[int(self._rng.integers(len(moves)))]


class GreedyBlockingStrategy(Strategy):
    """Win if possible, else block the opponent's win, else play randomly."""

    kind = StrategyKind.GREEDY

    def __init__(self, mark: Union[Mark, int, str], seed: Optional[int] = None) -> None:
        super().__init__(mark)
        self._fallback = RandomStrategy(self.mark, seed)

    @property
    def seed(self) -> Optional[int]:
        return self._fallback.seed

    def get_move(self, board: Board) -> Move:
        _require_moves(board)
        move = first_winning_move(board, self.mark)
        if move is not None:
            LOGGER.debug("%s wins at %s", self.mark.symbol, move)
            return move
        move = blocking_move(board, self.mark)
        if move is not None:
            LOGGER.debug("%s blocks at %s", self.mark.symbol, move)
            return move
        move = self._fallback.get_move(board)
        LOGGER.debug("%s plays random %s", self.mark.symbol, move)
        return move


class SearchStrategy(Strategy):
    """Minimax (optionally alpha-beta) search to a fixed depth."""

    kind = StrategyKind.SEARCH

    def __init__(self, mark: Union[Mark, int, str], config: Optional[SearchConfig] = None) -> None:
        super().__init__(mark)
        self.config = config if config is not None else SearchConfig()
        self.engine = MinimaxEngine(self.mark, self.config)
        self.last_result: Optional[SearchResult] = None

    @classmethod
    def from_difficulty(
        cls, mark: Union[Mark, int, str], difficulty: Union[Difficulty, str]
    ) -> "SearchStrategy":
        return cls(mark, search_config_for(difficulty))

    def get_move(self, board: Board) -> Move:
        self.last_result = self.engine.search(board)
        return self.last_result.move

    def __repr__(self) -> str:
        return (
            f"SearchStrategy(mark={self.mark.symbol}, max_depth={self.config.max_depth}, "
            f"use_pruning={self.config.use_pruning})"
        )


def make_strategy(mark: Union[Mark, int, str], config: Optional[StrategyConfig] = None) -> Strategy:
    if config is None:
        config = StrategyConfig()
    if config.kind is StrategyKind.RANDOM:
        return RandomStrategy(mark, config.seed)
    if config.kind is StrategyKind.GREEDY:
        return GreedyBlockingStrategy(mark, config.seed)
    return SearchStrategy(mark, config.search)


def strategy_for_difficulty(
    mark: Union[Mark, int, str], difficulty: Union[Difficulty, str, None] = None
) -> Strategy:
    if difficulty is None:
        difficulty = default_difficulty()
    return make_strategy(mark, StrategyConfig.from_difficulty(difficulty))
