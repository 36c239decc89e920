"""
Game session for minehunter.

Wraps a Board with the application-level lifecycle: waiting for the
first click, playing, won or lost. The minefield is only generated on
the first reveal so the clicked cell and its surroundings can be kept
free of mines.
"""
import logging
import random
from enum import Enum, auto
from typing import List, Optional

from .board import Board, Outcome
from .cell import Cell
from .config import BEGINNER, BoardConfig
from .geometry import Position, Shape
from .minefield import Minefield

logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a game session."""

    WAITING = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


_STATUS_BY_OUTCOME = {
    Outcome.ONGOING: GameStatus.PLAYING,
    Outcome.WON: GameStatus.WON,
    Outcome.LOST: GameStatus.LOST,
}


# ============================================================================
# Game Class
# ============================================================================

class Game:
    """
    One game of minehunter, from first click to win or loss.

    The session polls Board.outcome() after every action that can change
    the board and moves its own status accordingly. Actions arriving
    after the game has ended are ignored.
    """

    def __init__(
        self,
        config: BoardConfig = BEGINNER,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize a game waiting for its first click.

        Args:
            config: Board dimensions and mine count.
            rng: Source of randomness for mine placement.
        """
        self.config = config
        self.rng = rng
        self._board: Optional[Board] = None
        self._status = GameStatus.WAITING

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def board(self) -> Optional[Board]:
        """The board, or None before the first reveal."""
        return self._board

    @property
    def shape(self) -> Shape:
        return self.config.shape

    @property
    def is_over(self) -> bool:
        return self._status in (GameStatus.WON, GameStatus.LOST)

    @property
    def mines_remaining(self) -> int:
        """Mine count less placed flags, for the display counter."""
        if self._board is None:
            return self.config.num_mines
        return self._board.mine_count - self._board.flagged_count

    # ========================================================================
    # Player Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Optional[Cell]:
        """
        Reveal a cell, generating the minefield on the first call.

        Returns:
            The revealed cell, or None if the game is already over.
        """
        if self.is_over:
            return None
        if self._board is None:
            field = Minefield.build_random_avoiding(
                self.config.shape, self.config.num_mines, row, col, self.rng
            )
            self._board = Board(field)
        cell = self._board.reveal(row, col)
        self._update_status()
        return cell

    def reveal_around(self, row: int, col: int) -> List[Position]:
        """Chord on a revealed numbered cell while playing."""
        if self._status is not GameStatus.PLAYING:
            return []
        revealed = self._board.reveal_around(row, col)
        self._update_status()
        return revealed

    def toggle_flag(self, row: int, col: int) -> None:
        """Toggle a flag while playing; ignored before the first reveal."""
        if self._status is not GameStatus.PLAYING:
            return
        self._board.toggle_flag(row, col)

    def restart(self) -> None:
        """Discard the board and wait for a new first click."""
        self._board = None
        self._set_status(GameStatus.WAITING)

    # ========================================================================
    # Status Helpers
    # ========================================================================

    def _update_status(self) -> None:
        status = _STATUS_BY_OUTCOME[self._board.outcome()]
        if status is GameStatus.WON:
            self._board.flag_all_hidden()
        self._set_status(status)

    def _set_status(self, status: GameStatus) -> None:
        if status is self._status:
            return
        logger.debug("Game status %s -> %s", self._status.name, status.name)
        self._status = status
        if self.is_over:
            logger.info("Game %s", status.name.lower())
