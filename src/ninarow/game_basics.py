"""
Game basics: marks, moves and the cell encoding shared by every module.
Teaching notes:
- Cells hold 0=empty, 1=X, 2=O, the same digits used in board strings.
- A Move is (row, col, layer); layer is always 0 on a 2D board.
- The engine never cares which mark is X; it only asks for the opponent.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Union

EMPTY = 0


class Mark(IntEnum):
    X = 1
    O = 2

    @property
    def opponent(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.name

    @classmethod
    def parse(cls, value: Union["Mark", int, str]) -> "Mark":
        """Accept a Mark, its digit (1/2) or its symbol ("X"/"O")."""
        if isinstance(value, Mark):
            return value
        if isinstance(value, str):
            text = value.strip().upper()
            if text in cls.__members__:
                return cls[text]
            if text.isdigit():
                value = int(text)
        return cls(value)


@dataclass(frozen=True)
class Move:
    """A cell on the board."""

    row: int
    col: int
    layer: int = 0

    def __str__(self) -> str:
        return f"({self.row}, {self.col}, layer {self.layer})"


def cell_to_digit(cell: int) -> str:
    return str(int(cell))


def digit_to_cell(ch: str) -> int:
    v = int(ch)
    if v not in (EMPTY, Mark.X, Mark.O):
        raise ValueError(f"cell digit must be 0, 1 or 2, got {ch!r}")
    return v
