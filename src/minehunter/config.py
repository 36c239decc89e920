"""
Board configuration and difficulty presets.
"""
from dataclasses import dataclass

from .errors import InvalidConfigError
from .geometry import Shape


# ============================================================================
# Board Configuration
# ============================================================================

@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a minehunter board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigError("Number of mines cannot be negative")
        if self.num_mines > self.max_safe_mines:
            raise InvalidConfigError(f"Too many mines (max {self.max_safe_mines})")

    @property
    def shape(self) -> Shape:
        return Shape(self.rows, self.cols)

    @property
    def max_safe_mines(self) -> int:
        """
        Largest mine count that leaves any first click's neighbourhood free.

        The widest neighbourhood on the board is a full 3x3 block, or
        smaller when the board itself is narrower than three cells.
        """
        widest = min(self.rows, 3) * min(self.cols, 3)
        return self.rows * self.cols - widest


# Preset difficulty levels
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)
