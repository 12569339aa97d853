"""Strategy configuration, difficulty presets and environment overrides.

Environment-first: explicit arguments win, then ``NINAROW_*`` variables,
then the built-in defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Union

from .errors import ConfigurationError

ENV_SEED = "NINAROW_SEED"
ENV_DIFFICULTY = "NINAROW_DIFFICULTY"


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown difficulty {value!r}; expected one of "
                f"{', '.join(d.value for d in cls)}."
            ) from None


class StrategyKind(str, Enum):
    RANDOM = "random"
    GREEDY = "greedy"
    SEARCH = "search"

    @classmethod
    def parse(cls, value: Union["StrategyKind", str]) -> "StrategyKind":
        if isinstance(value, StrategyKind):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(f"Unknown strategy kind {value!r}.") from None


@dataclass(frozen=True)
class SearchConfig:
    """Search settings fixed at strategy construction.

    ``max_depth=None`` searches to the end of the game.
    """

    max_depth: Optional[int] = None
    use_pruning: bool = False

    def __post_init__(self) -> None:
        if self.max_depth is None:
            return
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ConfigurationError(
                f"max_depth must be a positive integer or None, got {self.max_depth!r}."
            )

    @property
    def unbounded(self) -> bool:
        return self.max_depth is None


DIFFICULTY_PRESETS: Dict[Difficulty, SearchConfig] = {
    Difficulty.EASY: SearchConfig(max_depth=1, use_pruning=False),
    Difficulty.MEDIUM: SearchConfig(max_depth=4, use_pruning=False),
    Difficulty.HARD: SearchConfig(max_depth=None, use_pruning=True),
}


def search_config_for(difficulty: Union[Difficulty, str]) -> SearchConfig:
    return DIFFICULTY_PRESETS[Difficulty.parse(difficulty)]


def validate_seed(seed: object, source: str = "seed") -> Optional[int]:
    """Return ``seed`` when it is None or a non-negative int usable by numpy."""
    if seed is None:
        return None
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ConfigurationError(f"{source} must be a non-negative integer, got {seed!r}.")
    return seed


def default_seed() -> Optional[int]:
    raw = os.getenv(ENV_SEED)
    if raw is None or not raw.strip():
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(f"{ENV_SEED} must be an integer, got {raw!r}.") from None
    return validate_seed(value, ENV_SEED)


def default_difficulty() -> Difficulty:
    raw = os.getenv(ENV_DIFFICULTY)
    if raw is None or not raw.strip():
        return Difficulty.HARD
    return Difficulty.parse(raw)


@dataclass(frozen=True)
class StrategyConfig:
    kind: StrategyKind = StrategyKind.SEARCH
    search: SearchConfig = field(default_factory=SearchConfig)
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", StrategyKind.parse(self.kind))
        validate_seed(self.seed)

    @classmethod
    def from_difficulty(cls, difficulty: Union[Difficulty, str]) -> "StrategyConfig":
        return cls(kind=StrategyKind.SEARCH, search=search_config_for(difficulty))
