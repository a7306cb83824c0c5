"""Unit tests for the Tents-and-Trees partial configuration."""

from src.tents.model import Cell, PuzzleSpec, TentConfig
from src.tents.parser import parse_puzzle

SCENARIO_A = """3
2 0 1
2 0 1
. % .
% . .
. . .
"""


def _config(rows, row_targets, col_targets, cursor=None):
    board = [[Cell(token) for token in row.split()] for row in rows]
    spec = PuzzleSpec(dim=len(rows), row_targets=tuple(row_targets), col_targets=tuple(col_targets))
    return TentConfig(spec, board, cursor)


def test_initial_cursor_sits_before_first_cell():
    config = parse_puzzle(SCENARIO_A)
    assert config.cursor == (0, -1)
    assert config.is_valid()
    assert not config.is_goal()


def test_initial_cursor_does_not_skip_leading_trees():
    config = _config(["% % .", ". . .", ". . ."], [0, 0, 0], [0, 0, 0])
    assert config.cursor == (0, -1)


def test_all_tree_board_starts_at_last_cell():
    config = _config(["% %", "% %"], [0, 0], [0, 0])
    assert config.cursor == (1, 1)
    assert config.get_successors() == []


def test_successors_place_tent_before_grass():
    config = parse_puzzle(SCENARIO_A)
    tent_child, grass_child = config.get_successors()
    assert tent_child.cursor == (0, 0)
    assert grass_child.cursor == (0, 0)
    assert tent_child.cell(0, 0) == Cell.TENT
    assert grass_child.cell(0, 0) == Cell.GRASS


def test_successor_differs_from_parent_only_at_cursor():
    config = parse_puzzle(SCENARIO_A)
    for child in config.get_successors():
        parent_board = config.board
        child_board = child.board
        diffs = [
            (r, c)
            for r in range(3)
            for c in range(3)
            if parent_board[r][c] != child_board[r][c]
        ]
        assert diffs == [child.cursor]
    # the parent is left untouched
    assert config.cell(0, 0) == Cell.EMPTY


def test_successor_wraps_to_next_row():
    config = _config([". % -", "% . .", ". . ."], [2, 0, 1], [2, 0, 1], cursor=(0, 2))
    successors = config.get_successors()
    assert len(successors) == 1
    assert successors[0].cursor == (1, 0)
    assert successors[0].cell(1, 0) == Cell.TREE


def test_tree_cell_yields_single_untouched_successor():
    config = parse_puzzle(SCENARIO_A).get_successors()[0]
    assert config.cursor == (0, 0)
    (child,) = config.get_successors()
    assert child.cursor == (0, 1)
    assert child.cell(0, 1) == Cell.TREE
    assert child.is_valid()


def test_children_share_puzzle_spec():
    config = parse_puzzle(SCENARIO_A)
    for child in config.get_successors():
        assert child.spec is config.spec


def test_last_cell_has_no_successors():
    config = _config(["^ %", "- -"], [1, 0], [1, 0], cursor=(1, 1))
    assert config.get_successors() == []


def test_adjacent_tent_to_the_left_is_invalid():
    config = _config(["^ ^ %", ". . .", ". . %"], [2, 0, 0], [1, 1, 0], cursor=(0, 1))
    assert not config.is_valid()


def test_diagonal_tent_up_right_is_invalid():
    config = _config(["% - ^", "% ^ .", ". . ."], [1, 1, 0], [0, 1, 1], cursor=(1, 1))
    assert not config.is_valid()


def test_tent_without_tree_is_invalid():
    config = _config(["- - -", "- ^ .", ". . %"], [0, 1, 0], [0, 1, 0], cursor=(1, 1))
    assert not config.is_valid()


def test_tent_next_to_tree_is_valid():
    config = _config(["- % -", "- ^ .", ". . ."], [0, 1, 0], [0, 1, 0], cursor=(1, 1))
    assert config.is_valid()


def test_row_count_above_target_is_invalid():
    config = _config(["^ % ^", ". . .", ". . ."], [1, 0, 0], [1, 0, 1], cursor=(0, 2))
    assert not config.is_valid()


def test_column_count_above_target_is_invalid():
    config = _config(["^ % -", "% - -", "^ . ."], [1, 0, 1], [1, 0, 0], cursor=(2, 0))
    assert not config.is_valid()


def test_grass_cell_is_valid_even_next_to_tent():
    config = _config(["^ - .", ". . .", "% . ."], [1, 0, 0], [1, 0, 0], cursor=(0, 1))
    assert config.is_valid()


def test_goal_requires_last_cell():
    config = _config(["^ % -", "- - -", "- - -"], [1, 0, 0], [1, 0, 0], cursor=(2, 1))
    assert not config.is_goal()


def test_goal_checks_exact_counts_and_tree_adjacency():
    solved = _config(["^ % ^", "% - -", "^ - -"], [2, 0, 1], [2, 0, 1], cursor=(2, 2))
    assert solved.is_goal()

    short = _config(["^ % -", "% - -", "^ - -"], [2, 0, 1], [2, 0, 1], cursor=(2, 2))
    assert not short.is_goal()

    lonely_tree = _config(["^ - -", "- - -", "- - %"], [1, 0, 0], [1, 0, 0], cursor=(2, 2))
    assert not lonely_tree.is_goal()


def test_counts_and_tents():
    config = _config(["^ % ^", "% - -", "^ - -"], [2, 0, 1], [2, 0, 1], cursor=(2, 2))
    assert config.row_counts() == [2, 0, 1]
    assert config.col_counts() == [2, 0, 1]
    assert config.tents() == [(0, 0), (0, 2), (2, 0)]


def test_render_format():
    config = parse_puzzle(SCENARIO_A)
    assert config.render() == (
        " -----\n"
        "|. % .|2\n"
        "|% . .|0\n"
        "|. . .|1\n"
        " -----\n"
        " 2 0 1\n"
    )
    assert str(config) == config.render()


def test_render_single_cell():
    config = _config(["%"], [0], [0])
    assert config.render() == " -\n|%|0\n -\n 0\n"


def test_goal_rejects_tree_boxed_in_by_trees():
    config = _config(["% % ^", "% - -", "^ - -"], [1, 0, 1], [1, 0, 1], cursor=(2, 2))
    assert not config.is_goal()


def test_goal_rejects_all_tree_board_larger_than_one_cell():
    config = _config(["% %", "% %"], [0, 0], [0, 0])
    assert not config.is_goal()
