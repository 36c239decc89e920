"""
Board module for minehunter.

Tracks what the player can see on top of a Minefield: which cells are
hidden, flagged or revealed. Implements revealing with flood fill,
chording, flag toggling and win/loss determination.
"""
from collections import deque
from enum import Enum, auto
from typing import List

import numpy as np

from .cell import Cell, CellKind, CellState, FLAGGED, HIDDEN
from .geometry import Position, Shape
from .minefield import Minefield


# ============================================================================
# Constants
# ============================================================================

class Outcome(Enum):
    """Classification of a board position."""

    ONGOING = auto()
    WON = auto()
    LOST = auto()


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Player-visible state over a Minefield.

    Every cell starts hidden. Cells move between hidden and flagged
    through toggle_flag and become visible, permanently, through reveal.
    The underlying Minefield is never modified.
    """

    def __init__(self, field: Minefield) -> None:
        """
        Create a board with every cell hidden.

        Args:
            field: Mine layout to play on.
        """
        self._field = field
        self._states: List[CellState] = [HIDDEN] * field.shape.ncells
        self._flagged = 0

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def field(self) -> Minefield:
        return self._field

    @property
    def shape(self) -> Shape:
        return self._field.shape

    @property
    def mine_count(self) -> int:
        return self._field.mine_count

    @property
    def flagged_count(self) -> int:
        return self._flagged

    def get(self, row: int, col: int) -> CellState:
        """State of the cell at a position."""
        return self._states[self.shape.index(row, col)]

    def hidden_positions(self) -> List[Position]:
        """Positions still hidden (not flagged), in row-major order."""
        return [pos for pos in self.shape.cells() if self.get(*pos).is_hidden]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array of shape (rows, cols) where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with neighbouring mine count
                9 = revealed mine
        """
        obs = np.array(
            [state.to_observation() for state in self._states], dtype=np.int8
        )
        return obs.reshape(self.shape.rows, self.shape.cols)

    # ========================================================================
    # Game Actions
    # ========================================================================

    def reveal(self, row: int, col: int) -> Cell:
        """
        Reveal a cell at the given position.

        Revealing a clear cell also reveals every cell connected to it
        through clear cells, plus the ring of numbered cells around that
        region. A flagged cell is revealed like a hidden one.

        Args:
            row: Row index to reveal.
            col: Column index to reveal.

        Returns:
            The cell at the position. Revealing an already visible cell
            changes nothing and returns the same cell.
        """
        state = self.get(row, col)
        if state.is_visible:
            return state.cell
        self._reveal(row, col)
        return self._field.get(row, col)

    def reveal_around(self, row: int, col: int) -> List[Position]:
        """
        Chord: reveal the hidden neighbours of a revealed numbered cell.

        Only acts when the number of flagged neighbours equals the
        cell's count. Flags are trusted, so a misplaced flag can reveal
        a mine.

        Args:
            row: Row index of a visible numbered cell.
            col: Column index of a visible numbered cell.

        Returns:
            Positions revealed by this call, in reveal order.
        """
        state = self.get(row, col)
        if not state.is_visible or state.cell.kind is not CellKind.NEIGHBOURING:
            return []

        neighbours = self.shape.neighbours(row, col)
        flags = sum(1 for nb in neighbours if self.get(*nb).is_flagged)
        if flags != state.cell.count:
            return []

        revealed = []
        for nb_row, nb_col in neighbours:
            if self.get(nb_row, nb_col).is_hidden:
                revealed.extend(self._reveal(nb_row, nb_col))
        return revealed

    def toggle_flag(self, row: int, col: int) -> None:
        """Flag a hidden cell or unflag a flagged one; visible cells are left alone."""
        index = self.shape.index(row, col)
        state = self._states[index]
        if state.is_hidden:
            self._states[index] = FLAGGED
            self._flagged += 1
        elif state.is_flagged:
            self._states[index] = HIDDEN
            self._flagged -= 1

    def flag_all_hidden(self) -> None:
        """Flag every remaining hidden cell."""
        for row, col in self.hidden_positions():
            self.toggle_flag(row, col)

    def outcome(self) -> Outcome:
        """
        Classify the board without changing it.

        Returns:
            LOST if any mine is visible, WON if the cells not yet
            revealed are exactly the mines, ONGOING otherwise.
        """
        not_revealed = 0
        for state in self._states:
            if not state.is_visible:
                not_revealed += 1
            elif state.cell.is_mine:
                return Outcome.LOST
        if not_revealed == self.mine_count:
            return Outcome.WON
        return Outcome.ONGOING

    # ========================================================================
    # Reveal Helpers
    # ========================================================================

    def _reveal(self, row: int, col: int) -> List[Position]:
        """Reveal a non-visible cell and flood outward from clear cells."""
        revealed = [(row, col)]
        pending = deque()
        if self._set_visible(row, col).is_clear:
            pending.append((row, col))

        while pending:
            clear_row, clear_col = pending.popleft()
            for nb_row, nb_col in self.shape.neighbours(clear_row, clear_col):
                if self.get(nb_row, nb_col).is_visible:
                    continue
                revealed.append((nb_row, nb_col))
                if self._set_visible(nb_row, nb_col).is_clear:
                    pending.append((nb_row, nb_col))
        return revealed

    def _set_visible(self, row: int, col: int) -> Cell:
        index = self.shape.index(row, col)
        if self._states[index].is_flagged:
            self._flagged -= 1
        cell = self._field.get(row, col)
        self._states[index] = CellState.visible(cell)
        return cell

    def __repr__(self) -> str:
        return f"Board({self._field!r}, outcome={self.outcome().name})"
