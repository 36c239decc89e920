"""
Unit tests for Cell and CellState.

Tests cell classification values, state predicates and observation
encoding.
"""
import pytest
from minehunter import (
    CLEAR,
    FLAGGED,
    HIDDEN,
    MINE,
    Cell,
    CellKind,
    CellState,
    Visibility,
)


# ============================================================================
# Cell Tests
# ============================================================================

class TestCell:
    """Test the three cell variants."""

    def test_mine(self) -> None:
        """Mine constant is a mine."""
        assert MINE.is_mine is True
        assert MINE.kind is CellKind.MINE

    def test_clear(self) -> None:
        """Clear constant has no count."""
        assert CLEAR.is_clear is True
        assert CLEAR.count == 0

    def test_from_zero_count_is_clear(self) -> None:
        """Zero nearby mines classifies as clear."""
        assert Cell.from_count(0) == CLEAR

    @pytest.mark.parametrize("count", range(1, 9))
    def test_from_count_is_neighbouring(self, count: int) -> None:
        """Non-zero counts classify as neighbouring."""
        cell = Cell.from_count(count)
        assert cell.kind is CellKind.NEIGHBOURING
        assert cell.count == count

    @pytest.mark.parametrize("count", [0, 9, -1])
    def test_neighbouring_count_out_of_range(self, count: int) -> None:
        """Neighbouring cells carry between 1 and 8 mines."""
        with pytest.raises(ValueError, match="count must be 1-8"):
            Cell.neighbouring(count)

    def test_mine_cannot_carry_count(self) -> None:
        """Only neighbouring cells carry a count."""
        with pytest.raises(ValueError, match="cannot carry a count"):
            Cell(CellKind.MINE, 2)

    def test_equal_values(self) -> None:
        """Cells compare by value."""
        assert Cell.neighbouring(3) == Cell.neighbouring(3)
        assert Cell.neighbouring(3) != Cell.neighbouring(2)

    def test_repr(self) -> None:
        """Repr names the variant."""
        assert repr(Cell.neighbouring(2)) == "Neighbouring(2)"
        assert repr(MINE) == "Mine"


# ============================================================================
# Cell State Tests
# ============================================================================

class TestCellState:
    """Test visibility predicates."""

    def test_hidden(self) -> None:
        """Hidden state carries no cell."""
        assert HIDDEN.is_hidden is True
        assert HIDDEN.cell is None

    def test_flagged(self) -> None:
        """Flagged state is neither hidden nor visible."""
        assert FLAGGED.is_flagged is True
        assert FLAGGED.is_hidden is False
        assert FLAGGED.is_visible is False

    def test_visible_carries_cell(self) -> None:
        """Visible state exposes the revealed cell."""
        state = CellState.visible(Cell.neighbouring(4))
        assert state.is_visible is True
        assert state.cell == Cell.neighbouring(4)
        assert repr(state) == "Visible(Neighbouring(4))"

    @pytest.mark.parametrize("visibility", [Visibility.HIDDEN, Visibility.FLAGGED])
    def test_hidden_states_cannot_carry_cell(self, visibility: Visibility) -> None:
        """Unrevealed states never expose a cell."""
        with pytest.raises(ValueError, match="requires cell to be None"):
            CellState(visibility, MINE)

    def test_visible_requires_cell(self) -> None:
        """Visible state must carry the revealed cell."""
        with pytest.raises(ValueError, match="requires cell to be set"):
            CellState(Visibility.VISIBLE)


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test integer encoding of cell states."""

    def test_hidden_is_negative_one(self) -> None:
        """Hidden cell should return -1."""
        assert HIDDEN.to_observation() == -1

    def test_flagged_is_negative_two(self) -> None:
        """Flagged cell should return -2."""
        assert FLAGGED.to_observation() == -2

    def test_clear_is_zero(self) -> None:
        """Revealed clear cell returns 0."""
        assert CellState.visible(CLEAR).to_observation() == 0

    @pytest.mark.parametrize("count", range(1, 9))
    def test_neighbouring_is_count(self, count: int) -> None:
        """Revealed numbered cell returns its count."""
        state = CellState.visible(Cell.neighbouring(count))
        assert state.to_observation() == count

    def test_mine_is_nine(self) -> None:
        """Revealed mine should return 9."""
        assert CellState.visible(MINE).to_observation() == 9
