"""
Cell module for minehunter.

A Cell is what occupies a grid position (mine, clear, or a count of
neighbouring mines). A CellState is what the player currently sees
there (hidden, flagged, or the revealed Cell).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellKind(Enum):
    """What lies under a grid position."""

    MINE = auto()
    CLEAR = auto()
    NEIGHBOURING = auto()


class Visibility(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    FLAGGED = auto()
    VISIBLE = auto()


# ============================================================================
# Cell
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Content of one grid position.

    Attributes:
        kind: Mine, clear, or neighbouring.
        count: Mines in the neighbourhood (1-8) for neighbouring cells,
            0 otherwise.
    """

    kind: CellKind
    count: int = 0

    def __post_init__(self) -> None:
        """Keep count consistent with kind."""
        if self.kind is CellKind.NEIGHBOURING:
            if not 1 <= self.count <= 8:
                raise ValueError(f"Neighbouring count must be 1-8, got {self.count}")
        elif self.count != 0:
            raise ValueError(f"{self.kind.name} cell cannot carry a count")

    @classmethod
    def mine(cls) -> "Cell":
        return cls(CellKind.MINE)

    @classmethod
    def clear(cls) -> "Cell":
        return cls(CellKind.CLEAR)

    @classmethod
    def neighbouring(cls, count: int) -> "Cell":
        return cls(CellKind.NEIGHBOURING, count)

    @classmethod
    def from_count(cls, count: int) -> "Cell":
        """Clear for zero nearby mines, neighbouring otherwise."""
        if count == 0:
            return cls.clear()
        return cls.neighbouring(count)

    @property
    def is_mine(self) -> bool:
        return self.kind is CellKind.MINE

    @property
    def is_clear(self) -> bool:
        return self.kind is CellKind.CLEAR

    def __repr__(self) -> str:
        if self.kind is CellKind.NEIGHBOURING:
            return f"Neighbouring({self.count})"
        return self.kind.name.capitalize()


MINE = Cell.mine()
CLEAR = Cell.clear()


# ============================================================================
# Cell State
# ============================================================================

@dataclass(frozen=True)
class CellState:
    """
    Player-visible status of one grid position.

    Attributes:
        visibility: Hidden, flagged, or visible.
        cell: The revealed cell, set only when visible.
    """

    visibility: Visibility
    cell: Optional[Cell] = None

    def __post_init__(self) -> None:
        """Only visible states carry a cell."""
        if (self.cell is not None) != (self.visibility is Visibility.VISIBLE):
            raise ValueError(
                f"{self.visibility.name} state requires cell to be "
                f"{'set' if self.visibility is Visibility.VISIBLE else 'None'}"
            )

    @classmethod
    def visible(cls, cell: Cell) -> "CellState":
        return cls(Visibility.VISIBLE, cell)

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.visibility is Visibility.HIDDEN

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility is Visibility.FLAGGED

    @property
    def is_visible(self) -> bool:
        """Check if cell is revealed."""
        return self.visibility is Visibility.VISIBLE

    def to_observation(self) -> int:
        """
        Encode the state as a single integer.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with neighbouring mine count
            9: Revealed mine
        """
        if self.visibility is Visibility.HIDDEN:
            return -1
        if self.visibility is Visibility.FLAGGED:
            return -2
        if self.cell.is_mine:
            return 9
        return self.cell.count

    def __repr__(self) -> str:
        if self.cell is not None:
            return f"Visible({self.cell!r})"
        return self.visibility.name.capitalize()


HIDDEN = CellState(Visibility.HIDDEN)
FLAGGED = CellState(Visibility.FLAGGED)
