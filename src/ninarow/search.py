"""
Minimax search with optional alpha-beta pruning, from the searching mark's side.

Scoring:
- searching mark has a line: 10 - depth (prefer faster wins)
- opponent has a line: depth - 10 (prefer slower losses)
- full board: 0
- depth limit reached: heuristic evaluation

Tie-break: root moves are tried in board order (row, column, layer) and the
first move reaching the best score is kept, so a search is reproducible.
Pruning never changes the chosen move or its score, only the work done.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .board import Board
from .config import SearchConfig
from .errors import NoMoveAvailable
from .evaluation import evaluate
from .game_basics import Mark, Move

LOGGER = logging.getLogger(__name__)

WIN_SCORE = 10
INFINITY = 1 << 30


@dataclass(frozen=True)
class SearchResult:
    score: int
    move: Move
    nodes: int = 0
    cutoffs: int = 0


class MinimaxEngine:
    """Depth-limited minimax over a shared, mutable board."""

    def __init__(self, mark: Mark, config: Optional[SearchConfig] = None, debug_top_k: int = 3) -> None:
        self.mark = Mark(mark)
        self.opponent = self.mark.opponent
        self.config = config if config is not None else SearchConfig()
        self.debug_top_k = max(1, debug_top_k)
        self._nodes = 0
        self._cutoffs = 0

    @property
    def max_depth(self) -> Optional[int]:
        return self.config.max_depth

    @property
    def use_pruning(self) -> bool:
        return self.config.use_pruning

    def search(self, board: Board) -> SearchResult:
        moves = board.empty_cells()
        if not moves:
            raise NoMoveAvailable("No empty cell left to search.")

        self._nodes = 0
        self._cutoffs = 0
        alpha = -INFINITY
        best_score: Optional[int] = None
        best_move = moves[0]
        diagnostics: List[Tuple[Move, int, bool]] = []

        for move in moves:
            self._make(board, move, self.mark)
            if self.use_pruning:
                score = self._alphabeta(board, 0, alpha, INFINITY, False)
                # a child that fails low only proves score <= alpha
                exact = score > alpha
            else:
                score = self._minimax(board, 0, False)
                exact = True
            self._unmake(board, move, self.mark)
            diagnostics.append((move, score, exact))
            if best_score is None or score > best_score:
                best_score = score
                best_move = move
            if self.use_pruning:
                alpha = max(alpha, score)

        assert best_score is not None
        result = SearchResult(best_score, best_move, self._nodes, self._cutoffs)
        self._log_diagnostics(diagnostics, best_move)
        LOGGER.debug(
            "Search for %s selected %s score=%d nodes=%d cutoffs=%d depth=%s pruning=%s",
            self.mark.symbol,
            best_move,
            best_score,
            result.nodes,
            result.cutoffs,
            "unbounded" if self.max_depth is None else self.max_depth,
            self.use_pruning,
        )
        return result

    def best_move(self, board: Board) -> Move:
        return self.search(board).move

    def _log_diagnostics(self, diagnostics: List[Tuple[Move, int, bool]], chosen: Move) -> None:
        """Emit the top-k root candidates when DEBUG is enabled.

        Pruned candidates that failed low are reported as ``bound<=``, an upper
        bound on their true score.
        """
        if not LOGGER.isEnabledFor(logging.DEBUG):
            return
        # stable sort keeps board order among equal scores
        ranked = sorted(diagnostics, key=lambda item: item[1], reverse=True)
        for idx, (move, score, exact) in enumerate(ranked[: self.debug_top_k], start=1):
            LOGGER.debug(
                "Candidate #%d move=%s %s%d chosen=%s",
                idx,
                move,
                "score=" if exact else "bound<=",
                score,
                move == chosen,
            )

    @staticmethod
    def _make(board: Board, move: Move, mark: Mark) -> None:
        placed = board.place(move.row, move.col, mark, move.layer)
        assert placed, f"trial move {move} landed on an occupied cell"

    @staticmethod
    def _unmake(board: Board, move: Move, mark: Mark) -> None:
        assert board.mark(move.row, move.col, move.layer) == mark, (
            f"cell {move} no longer holds {mark.symbol} before undo"
        )
        board.clear(move.row, move.col, move.layer)

    def _terminal_score(self, board: Board, depth: int) -> Optional[int]:
        if board.check_win(self.mark):
            return WIN_SCORE - depth
        if board.check_win(self.opponent):
            return depth - WIN_SCORE
        if board.is_full():
            return 0
        if self.max_depth is not None and depth >= self.max_depth:
            return evaluate(board, self.mark)
        return None

    def _minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        self._nodes += 1
        terminal = self._terminal_score(board, depth)
        if terminal is not None:
            return terminal

        mover = self.mark if maximizing else self.opponent
        best = -INFINITY if maximizing else INFINITY
        for move in board.empty_cells():
            self._make(board, move, mover)
            score = self._minimax(board, depth + 1, not maximizing)
            self._unmake(board, move, mover)
            if maximizing:
                best = max(best, score)
            else:
                best = min(best, score)
        return best

    def _alphabeta(self, board: Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        self._nodes += 1
        terminal = self._terminal_score(board, depth)
        if terminal is not None:
            return terminal

        if maximizing:
            best = -INFINITY
            for move in board.empty_cells():
                self._make(board, move, self.mark)
                score = self._alphabeta(board, depth + 1, alpha, beta, False)
                self._unmake(board, move, self.mark)
                best = max(best, score)
                alpha = max(alpha, score)
                if beta <= alpha:
                    self._cutoffs += 1
                    break
            return best

        best = INFINITY
        for move in board.empty_cells():
            self._make(board, move, self.opponent)
            score = self._alphabeta(board, depth + 1, alpha, beta, True)
            self._unmake(board, move, self.opponent)
            best = min(best, score)
            beta = min(beta, score)
            if beta <= alpha:
                self._cutoffs += 1
                break
        return best
