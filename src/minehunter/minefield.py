"""
Minefield module for minehunter.

Builds the static mine layout of a board and classifies every other
cell by how many mines lie in its neighbourhood. A Minefield never
changes once built.
"""
import logging
import random
from typing import Iterable, List, Optional, Tuple

from .cell import Cell, MINE
from .errors import InvalidConfigError
from .geometry import Position, Shape

logger = logging.getLogger(__name__)


# ============================================================================
# Minefield Class
# ============================================================================

class Minefield:
    """
    Immutable mine placement and per-cell classification.

    Use one of the ``build`` constructors rather than calling the class
    directly.
    """

    __slots__ = ("_shape", "_cells", "_mines")

    def __init__(
        self, shape: Shape, cells: Tuple[Cell, ...], mines: frozenset
    ) -> None:
        if len(cells) != shape.ncells:
            raise ValueError(
                f"Expected {shape.ncells} cells for {shape.rows}x{shape.cols} "
                f"board, got {len(cells)}"
            )
        mine_cells = frozenset(
            pos for pos, cell in zip(shape.cells(), cells) if cell.is_mine
        )
        if mine_cells != mines:
            raise ValueError("Mine positions do not match mine cells")
        self._shape = shape
        self._cells = cells
        self._mines = mines

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def build(cls, shape: Shape, mine_positions: Iterable[Position]) -> "Minefield":
        """
        Build a minefield from explicit mine coordinates.

        Args:
            shape: Board extent.
            mine_positions: (row, col) of each mine. Duplicates collapse.

        Returns:
            The classified minefield.

        Raises:
            IndexError: If a mine position is outside the board.
        """
        mines = frozenset(mine_positions)
        for row, col in mines:
            shape.index(row, col)

        cells = []
        for row, col in shape.cells():
            if (row, col) in mines:
                cells.append(MINE)
                continue
            count = sum(1 for nb in shape.neighbours(row, col) if nb in mines)
            cells.append(Cell.from_count(count))
        return cls(shape, tuple(cells), mines)

    @classmethod
    def build_random(
        cls,
        shape: Shape,
        mine_count: int,
        rng: Optional[random.Random] = None,
    ) -> "Minefield":
        """
        Place mines uniformly at random over the whole board.

        Args:
            shape: Board extent.
            mine_count: Number of distinct mines to place.
            rng: Source of randomness; a fresh generator if omitted.

        Raises:
            InvalidConfigError: If mine_count is negative or exceeds the
                number of cells.
        """
        logger.debug("Placing %d mines on %dx%d board", mine_count, shape.rows, shape.cols)
        return cls.build(shape, _sample(list(shape.cells()), mine_count, rng))

    @classmethod
    def build_random_avoiding(
        cls,
        shape: Shape,
        mine_count: int,
        safe_row: int,
        safe_col: int,
        rng: Optional[random.Random] = None,
    ) -> "Minefield":
        """
        Place mines at random, keeping a cell and its neighbourhood free.

        Used for the first click of a game so the clicked cell is always
        clear and opens a cascade.

        Args:
            shape: Board extent.
            mine_count: Number of distinct mines to place.
            safe_row: Row of the cell to keep clear.
            safe_col: Column of the cell to keep clear.
            rng: Source of randomness; a fresh generator if omitted.

        Raises:
            InvalidConfigError: If mine_count exceeds the positions left
                once the safe neighbourhood is excluded.
        """
        safe = set(shape.neighbours(safe_row, safe_col))
        eligible = [pos for pos in shape.cells() if pos not in safe]
        logger.debug(
            "Placing %d mines on %dx%d board avoiding (%d, %d)",
            mine_count, shape.rows, shape.cols, safe_row, safe_col,
        )
        return cls.build(shape, _sample(eligible, mine_count, rng))

    # ========================================================================
    # Accessors
    # ========================================================================

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def rows(self) -> int:
        return self._shape.rows

    @property
    def cols(self) -> int:
        return self._shape.cols

    @property
    def mine_count(self) -> int:
        """Total number of mines."""
        return len(self._mines)

    @property
    def mines(self) -> frozenset:
        """Positions of every mine."""
        return self._mines

    def get(self, row: int, col: int) -> Cell:
        """Cell classification at a position."""
        return self._cells[self._shape.index(row, col)]

    def is_mine(self, row: int, col: int) -> bool:
        return self.get(row, col).is_mine

    def __repr__(self) -> str:
        return (
            f"Minefield(rows={self.rows}, cols={self.cols}, "
            f"mines={self.mine_count})"
        )


def _sample(
    positions: List[Position],
    mine_count: int,
    rng: Optional[random.Random],
) -> List[Position]:
    """Pick mine_count distinct positions without replacement."""
    if mine_count < 0:
        raise InvalidConfigError("Number of mines cannot be negative")
    if mine_count > len(positions):
        raise InvalidConfigError(f"Too many mines (max {len(positions)})")
    rng = rng if rng is not None else random.Random()
    return rng.sample(positions, mine_count)
