"""ninarow package.

N-in-a-row on 2D and layered 3D boards: board model, win detection,
heuristic evaluation, minimax/alpha-beta search and move strategies.

Convenience imports are exposed for common workflows.
"""

from .board import Board
from .config import Difficulty, SearchConfig, StrategyConfig, StrategyKind
from .errors import ConfigurationError, NinARowError, NoMoveAvailable
from .evaluation import evaluate
from .game_basics import EMPTY, Mark, Move
from .search import MinimaxEngine, SearchResult
from .strategies import (
    GreedyBlockingStrategy,
    RandomStrategy,
    SearchStrategy,
    Strategy,
    make_strategy,
    strategy_for_difficulty,
)

__all__ = [
    "Board",
    "ConfigurationError",
    "Difficulty",
    "EMPTY",
    "GreedyBlockingStrategy",
    "Mark",
    "MinimaxEngine",
    "Move",
    "NinARowError",
    "NoMoveAvailable",
    "RandomStrategy",
    "SearchConfig",
    "SearchResult",
    "SearchStrategy",
    "Strategy",
    "StrategyConfig",
    "StrategyKind",
    "evaluate",
    "make_strategy",
    "strategy_for_difficulty",
]
