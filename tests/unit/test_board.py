"""
Unit tests for Board class.

Tests configuration validation, mine placement, adjacency counts,
neighbor lookup and observation generation.
"""
import pytest
import numpy as np
from mynesweeper import (
    Board,
    BoardConfig,
    CellState,
    InvalidConfiguration,
    DIFFICULTY_PRESETS,
    get_preset,
)


def brute_force_count(board: Board, row: int, col: int) -> int:
    """Count neighboring mines without using neighbors_of."""
    count = 0
    for other_row in range(board.rows):
        for other_col in range(board.cols):
            if (other_row, other_col) == (row, col):
                continue
            if abs(other_row - row) <= 1 and abs(other_col - col) <= 1:
                if board.get_cell(other_row, other_col).is_mine:
                    count += 1
    return count


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.rows == 9
        assert valid_config.cols == 9
        assert valid_config.num_mines == 10

    def test_zero_rows_raises_error(self) -> None:
        """Zero rows should raise InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_zero_cols_raises_error(self) -> None:
        """Zero columns should raise InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration, match="dimensions must be positive"):
            BoardConfig(9, 0, 10)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise InvalidConfiguration."""
        with pytest.raises(InvalidConfiguration, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_mines_filling_board_raises_error(self) -> None:
        """At least one cell must be mine-free."""
        with pytest.raises(InvalidConfiguration, match="Too many mines"):
            BoardConfig(3, 3, 9)

    def test_invalid_configuration_is_value_error(self) -> None:
        """Callers catching ValueError also catch bad configurations."""
        with pytest.raises(ValueError):
            BoardConfig(-1, 5, 0)

    def test_max_mines_is_valid(self) -> None:
        """Maximum valid mines should be accepted."""
        config = BoardConfig(3, 3, 8)
        assert config.num_mines == 8


class TestPresets:
    """Test difficulty presets."""

    @pytest.mark.parametrize(
        "name, rows, cols, mines",
        [("easy", 9, 9, 10), ("medium", 16, 16, 40), ("hard", 16, 30, 99)],
    )
    def test_preset_values(self, name: str, rows: int, cols: int, mines: int) -> None:
        """Each named tier maps to its board size."""
        config = get_preset(name)
        assert (config.rows, config.cols, config.num_mines) == (rows, cols, mines)

    def test_preset_lookup_ignores_case(self) -> None:
        """Preset names are case-insensitive."""
        assert get_preset("HARD") is DIFFICULTY_PRESETS["hard"]

    def test_unknown_preset_raises_error(self) -> None:
        """Unknown tier names are configuration errors."""
        with pytest.raises(InvalidConfiguration, match="Unknown difficulty"):
            get_preset("nightmare")


# ============================================================================
# Mine Placement Tests
# ============================================================================

class TestMinePlacement:
    """Test random and explicit mine placement."""

    @pytest.mark.parametrize(
        "rows, cols, mines",
        [(1, 1, 0), (1, 2, 1), (3, 3, 8), (9, 9, 10), (16, 30, 99), (5, 7, 0)],
    )
    def test_exact_mine_count(self, rows: int, cols: int, mines: int) -> None:
        """Construction places exactly the configured number of mines."""
        board = Board(BoardConfig(rows, cols, mines), rng=np.random.default_rng(7))
        assert len(board.mine_positions()) == mines

    def test_placing_again_keeps_mine_count(self) -> None:
        """Re-running placement replaces the layout instead of adding to it."""
        board = Board(BoardConfig(9, 9, 10), rng=np.random.default_rng(3))
        board.place_mines()
        board.compute_adjacency_counts()
        assert len(board.mine_positions()) == 10
        for row, col in board.positions():
            cell = board.get_cell(row, col)
            if not cell.is_mine:
                assert cell.adjacent_mines == brute_force_count(board, row, col)

    def test_all_cells_closed_after_construction(self, default_board: Board) -> None:
        """Mines are placed without opening anything."""
        for row, col in default_board.positions():
            assert default_board.get_cell(row, col).state == CellState.CLOSED

    def test_mines_placed_before_any_input(self, default_board: Board) -> None:
        """No first-click protection: mines exist as soon as the board does."""
        assert len(default_board.mine_positions()) == 10

    def test_same_seed_same_layout(self) -> None:
        """Seeded generators make placement reproducible."""
        first = Board(rng=np.random.default_rng(42))
        second = Board(rng=np.random.default_rng(42))
        assert first.mine_positions() == second.mine_positions()

    def test_explicit_layout_is_used(self, corner_board: Board) -> None:
        """An explicit layout replaces random placement."""
        assert corner_board.mine_positions() == [(0, 0)]

    def test_layout_with_wrong_count_raises_error(self) -> None:
        """Layout size must match the configured mine count."""
        with pytest.raises(InvalidConfiguration, match="expected 2"):
            Board(BoardConfig(3, 3, 2), mine_layout=[(0, 0)])

    def test_layout_with_duplicates_raises_error(self) -> None:
        """Layout positions must be distinct."""
        with pytest.raises(InvalidConfiguration, match="duplicates"):
            Board(BoardConfig(3, 3, 2), mine_layout=[(1, 1), (1, 1)])

    def test_layout_off_board_raises_error(self) -> None:
        """Layout positions must be on the board."""
        with pytest.raises(InvalidConfiguration, match="off the board"):
            Board(BoardConfig(3, 3, 1), mine_layout=[(3, 0)])


# ============================================================================
# Adjacency Tests
# ============================================================================

class TestAdjacencyCounts:
    """Test precomputed adjacent mine counts."""

    @pytest.mark.parametrize("seed", range(5))
    def test_counts_match_brute_force(self, seed: int) -> None:
        """Every non-mine count equals an exhaustive recount."""
        board = Board(BoardConfig(8, 11, 20), rng=np.random.default_rng(seed))
        for row, col in board.positions():
            cell = board.get_cell(row, col)
            if not cell.is_mine:
                assert cell.adjacent_mines == brute_force_count(board, row, col)

    def test_corner_mine_counts(self, corner_board: Board) -> None:
        """Only cells touching (0, 0) have a count of 1."""
        expected = [
            [None, 1, 0],
            [1, 1, 0],
            [0, 0, 0],
        ]
        for row, col in corner_board.positions():
            if (row, col) != (0, 0):
                assert corner_board.get_cell(row, col).adjacent_mines == expected[row][col]


# ============================================================================
# Neighbor Tests
# ============================================================================

class TestNeighbors:
    """Test Moore neighborhood lookup."""

    def test_interior_cell_has_eight_neighbors(self, default_board: Board) -> None:
        """Interior cells have all 8 neighbors."""
        assert len(default_board.neighbors_of(4, 4)) == 8

    def test_edge_cell_has_five_neighbors(self, default_board: Board) -> None:
        """Edge cells lose the off-board row."""
        assert len(default_board.neighbors_of(0, 4)) == 5

    def test_corner_cell_has_three_neighbors(self, default_board: Board) -> None:
        """Corner cells keep only 3 neighbors."""
        assert sorted(default_board.neighbors_of(0, 0)) == [(0, 1), (1, 0), (1, 1)]

    def test_single_cell_board_has_no_neighbors(self) -> None:
        """A 1x1 board has no neighbors at all."""
        board = Board(BoardConfig(1, 1, 0))
        assert board.neighbors_of(0, 0) == []

    def test_cell_is_not_its_own_neighbor(self, default_board: Board) -> None:
        """The center is excluded."""
        assert (4, 4) not in default_board.neighbors_of(4, 4)

    def test_get_cell_off_board_returns_none(self, default_board: Board) -> None:
        """Invalid positions return None instead of raising."""
        assert default_board.get_cell(-1, 0) is None
        assert default_board.get_cell(0, 9) is None


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array."""

    def test_observation_shape_matches_board(self) -> None:
        """Observation should be rows x cols."""
        board = Board(BoardConfig(4, 7, 3))
        assert board.get_observation().shape == (4, 7)

    def test_new_board_observation_all_closed(self, default_board: Board) -> None:
        """New board observation should be all -1."""
        assert np.all(default_board.get_observation() == -1)

    def test_observation_dtype_is_int8(self, default_board: Board) -> None:
        """Observation should be int8 for memory efficiency."""
        assert default_board.get_observation().dtype == np.int8

    def test_count_closed_on_new_board(self, default_board: Board) -> None:
        """Every cell starts closed."""
        assert default_board.count_closed() == 81
