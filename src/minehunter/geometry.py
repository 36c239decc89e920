"""
Grid geometry for a fixed rectangular board.

Pure coordinate enumeration: every cell of a shape, and the clipped
3x3 neighbourhood around a cell.
"""
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .errors import InvalidConfigError

Position = Tuple[int, int]


# ============================================================================
# Shape
# ============================================================================

@dataclass(frozen=True)
class Shape:
    """
    Rectangular extent of a board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """

    rows: int
    cols: int

    def __post_init__(self) -> None:
        """Reject empty boards."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigError("Board dimensions must be positive")

    @property
    def ncells(self) -> int:
        """Total number of cells."""
        return self.rows * self.cols

    def contains(self, row: int, col: int) -> bool:
        """Check if position is within bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        """
        Row-major index of a position.

        Raises:
            IndexError: If the position is out of bounds.
        """
        self._check(row, col)
        return row * self.cols + col

    def cells(self) -> Iterator[Position]:
        """Yield every position, row 0 first, columns ascending."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield (row, col)

    def neighbours(self, row: int, col: int) -> List[Position]:
        """
        Positions in the 3x3 block centred on (row, col), clipped to bounds.

        The centre position itself is included, so an interior cell has
        nine neighbours, an edge cell six and a corner cell four.

        Raises:
            IndexError: If the position is out of bounds.
        """
        self._check(row, col)
        row_range = range(max(row - 1, 0), min(row + 1, self.rows - 1) + 1)
        col_range = range(max(col - 1, 0), min(col + 1, self.cols - 1) + 1)
        return [(r, c) for r in row_range for c in col_range]

    def _check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise IndexError(
                f"Position ({row}, {col}) outside {self.rows}x{self.cols} board"
            )
