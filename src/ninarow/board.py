"""
Board state for N-in-a-row on square 2D boards and layered 3D cubes.

The board is mutated in place: strategies place a trial mark, look at the
result and clear it again, so no copy is made per search node.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import numpy as np

from .errors import ConfigurationError
from .game_basics import EMPTY, Mark, Move, cell_to_digit, digit_to_cell
from .lines import flat_index, line_matrix, winning_lines

LOGGER = logging.getLogger(__name__)

MIN_SIZE = 3
MAX_SIZE = 10
MIN_WIN_CONDITION = 3
MAX_WIN_CONDITION = 7


def validate_geometry(size: int, win_condition: int) -> None:
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ConfigurationError(
            f"Board size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}."
        )
    if not MIN_WIN_CONDITION <= win_condition <= MAX_WIN_CONDITION or win_condition > size:
        raise ConfigurationError(
            f"Win condition must be between {MIN_WIN_CONDITION} and {MAX_WIN_CONDITION} "
            f"and not exceed board size, got {win_condition} for size {size}."
        )


class Board:
    """Grid of cells indexed by (row, col, layer).

    Out-of-range coordinates are never an error: ``place`` returns False,
    ``is_empty`` returns False and ``mark`` returns ``EMPTY``.
    """

    def __init__(self, size: int = 3, win_condition: int = 3, is_3d: bool = False) -> None:
        validate_geometry(size, win_condition)
        self.size = size
        self.win_condition = win_condition
        self.is_3d = bool(is_3d)
        self.layer_count = size if self.is_3d else 1
        self._cells: List[int] = [EMPTY] * (self.layer_count * size * size)
        self._lines = winning_lines(size, win_condition, self.layer_count)
        # (flat index, move) in search order: row, then column, then layer
        self._order: Tuple[Tuple[int, Move], ...] = tuple(
            (flat_index(size, r, c, l), Move(r, c, l))
            for r in range(size)
            for c in range(size)
            for l in range(self.layer_count)
        )
        LOGGER.debug(
            "Board size=%d win=%d layers=%d lines=%d",
            size, win_condition, self.layer_count, len(self._lines),
        )

    @classmethod
    def from_string(cls, text: str, win_condition: int = 3, is_3d: bool = False) -> "Board":
        """Build a board from a 0/1/2 digit string in flat (layer, row, col) order."""
        raw = "".join(text.split())
        power = 3 if is_3d else 2
        size = round(len(raw) ** (1.0 / power)) if raw else 0
        if size ** power != len(raw):
            raise ConfigurationError(
                f"Board string of length {len(raw)} is not a {'cube' if is_3d else 'square'}."
            )
        board = cls(size, win_condition, is_3d)
        try:
            board._cells = [digit_to_cell(ch) for ch in raw]
        except ValueError as exc:
            raise ConfigurationError(f"Invalid board string {text!r}: {exc}") from exc
        return board

    @property
    def lines(self) -> Tuple[Tuple[int, ...], ...]:
        return self._lines

    @property
    def line_matrix(self) -> np.ndarray:
        return line_matrix(self.size, self.win_condition, self.layer_count)

    def is_valid_position(self, row: int, col: int, layer: int = 0) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size and 0 <= layer < self.layer_count

    def is_empty(self, row: int, col: int, layer: int = 0) -> bool:
        if not self.is_valid_position(row, col, layer):
            return False
        return self._cells[flat_index(self.size, row, col, layer)] == EMPTY

    def mark(self, row: int, col: int, layer: int = 0) -> int:
        """Mark at the position, or ``EMPTY`` when empty or off the board."""
        if not self.is_valid_position(row, col, layer):
            return EMPTY
        v = self._cells[flat_index(self.size, row, col, layer)]
        return EMPTY if v == EMPTY else Mark(v)

    def place(self, row: int, col: int, mark: Mark, layer: int = 0) -> bool:
        if not self.is_empty(row, col, layer):
            return False
        self._cells[flat_index(self.size, row, col, layer)] = Mark(mark)
        return True

    def clear(self, row: int, col: int, layer: int = 0) -> None:
        """Reset a cell to empty. Used to undo trial placements."""
        if self.is_valid_position(row, col, layer):
            self._cells[flat_index(self.size, row, col, layer)] = EMPTY

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def check_win(self, mark: Mark) -> bool:
        # only player marks form lines; a row of empty cells is not a win
        if mark == EMPTY:
            return False
        cells = self._cells
        for line in self._lines:
            for i in line:
                if cells[i] != mark:
                    break
            else:
                return True
        return False

    def winner(self) -> Optional[Mark]:
        for m in Mark:
            if self.check_win(m):
                return m
        return None

    def empty_cells(self) -> List[Move]:
        cells = self._cells
        return [move for i, move in self._order if cells[i] == EMPTY]

    def count(self, mark: int) -> int:
        return self._cells.count(mark)

    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def to_array(self) -> np.ndarray:
        return np.array(self._cells, dtype=np.int8).reshape(
            self.layer_count, self.size, self.size
        )

    def serialize(self) -> str:
        return "".join(cell_to_digit(v) for v in self._cells)

    def copy(self) -> "Board":
        other = Board(self.size, self.win_condition, self.is_3d)
        other._cells = self._cells[:]
        return other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return (
            self.size == other.size
            and self.win_condition == other.win_condition
            and self.is_3d == other.is_3d
            and self._cells == other._cells
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Board(size={self.size}, win_condition={self.win_condition}, "
            f"is_3d={self.is_3d}, cells={self.serialize()!r})"
        )
