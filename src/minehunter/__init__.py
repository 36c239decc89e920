"""
minehunter game engine.

Provides minefield generation, board visibility state, flood-fill
revealing and win/loss determination, plus a session wrapper that
defers mine placement until the first click.
"""
from .errors import InvalidConfigError
from .geometry import Position, Shape
from .cell import Cell, CellKind, CellState, Visibility, MINE, CLEAR, HIDDEN, FLAGGED
from .config import BoardConfig, BEGINNER, INTERMEDIATE, EXPERT
from .minefield import Minefield
from .board import Board, Outcome
from .game import Game, GameStatus

__all__ = [
    "InvalidConfigError",
    "Position",
    "Shape",
    "Cell",
    "CellKind",
    "CellState",
    "Visibility",
    "MINE",
    "CLEAR",
    "HIDDEN",
    "FLAGGED",
    "BoardConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Minefield",
    "Board",
    "Outcome",
    "Game",
    "GameStatus",
]
