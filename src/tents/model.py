"""Tents-and-Trees board state and its partial configurations."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from src.backtracker.configuration import Configuration

Cursor = Tuple[int, int]
Board = List[List["Cell"]]

# Neighbours already decided when cells are filled in row-major order.
_DECIDED_NEIGHBOURS = ((-1, -1), (-1, 0), (-1, 1), (0, -1))
_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))

HORI_DIVIDE = "-"
VERT_DIVIDE = "|"


class Cell(str, Enum):
    """State of one board cell, valued by its input/output symbol."""
    EMPTY = "."
    GRASS = "-"
    TENT = "^"
    TREE = "%"


@dataclass(frozen=True)
class PuzzleSpec:
    """Dimension and tent targets; shared by every configuration of a puzzle."""
    dim: int
    row_targets: Tuple[int, ...]
    col_targets: Tuple[int, ...]

    @property
    def last_cell(self) -> Cursor:
        return (self.dim - 1, self.dim - 1)


class TentConfig(Configuration):
    """
    A partial assignment of tents to the board.

    Cells are decided one at a time in row-major order. ``cursor`` is the last
    decided cell; everything after it is still Empty (or a Tree). Children are
    built by ``get_successors`` on a fresh copy of the board, so a configuration
    never changes once created.
    """

    def __init__(self, spec: PuzzleSpec, board: Board, cursor: Optional[Cursor] = None):
        self._spec = spec
        self._board = board
        if cursor is None:
            cursor = self._initial_cursor()
        self._cursor = cursor

    @classmethod
    def from_text(cls, text: str) -> "TentConfig":
        """Build the initial configuration from puzzle text (see parser)."""
        from .parser import parse_puzzle

        return parse_puzzle(text)

    def _initial_cursor(self) -> Cursor:
        # A board of nothing but trees has no decision to make.
        if all(cell == Cell.TREE for row in self._board for cell in row):
            return self._spec.last_cell
        return (0, -1)

    def _step(self, row: int, col: int) -> Cursor:
        col += 1
        if col == self._spec.dim:
            return (row + 1, 0)
        return (row, col)

    # -- accessors ---------------------------------------------------------

    @property
    def spec(self) -> PuzzleSpec:
        return self._spec

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    @property
    def board(self) -> Tuple[Tuple[Cell, ...], ...]:
        return tuple(tuple(row) for row in self._board)

    def cell(self, row: int, col: int) -> Cell:
        return self._board[row][col]

    def tents(self) -> List[Cursor]:
        dim = self._spec.dim
        return [
            (r, c) for r in range(dim) for c in range(dim)
            if self._board[r][c] == Cell.TENT
        ]

    def row_counts(self) -> List[int]:
        return [row.count(Cell.TENT) for row in self._board]

    def col_counts(self) -> List[int]:
        dim = self._spec.dim
        return [
            sum(1 for r in range(dim) if self._board[r][c] == Cell.TENT)
            for c in range(dim)
        ]

    # -- Configuration -----------------------------------------------------

    def get_successors(self) -> Sequence["TentConfig"]:
        if self._cursor == self._spec.last_cell:
            return []
        row, col = self._step(*self._cursor)
        successors = []
        if self._board[row][col] != Cell.TREE:
            successors.append(self._child(row, col, Cell.TENT))
        successors.append(self._child(row, col, Cell.GRASS))
        return successors

    def _child(self, row: int, col: int, mark: Cell) -> "TentConfig":
        board = [list(r) for r in self._board]
        if board[row][col] == Cell.EMPTY:
            board[row][col] = mark
        return TentConfig(self._spec, board, (row, col))

    def is_valid(self) -> bool:
        row, col = self._cursor
        if col < 0:
            return True
        return (
            not self._tent_near_tent(row, col)
            and self._tent_has_tree(row, col)
            and self._counts_within_targets(row, col)
        )

    def is_goal(self) -> bool:
        if self._cursor != self._spec.last_cell:
            return False
        spec = self._spec
        if self.row_counts() != list(spec.row_targets):
            return False
        if self.col_counts() != list(spec.col_targets):
            return False
        dim = spec.dim
        for r in range(dim):
            for c in range(dim):
                if self._board[r][c] == Cell.TREE and not self._tree_satisfied(r, c):
                    return False
        return True

    # -- checks ------------------------------------------------------------

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._spec.dim and 0 <= col < self._spec.dim

    def _adjacent(self, row: int, col: int, kind: Cell) -> bool:
        """True if an orthogonal neighbour of (row, col) holds ``kind``."""
        for dr, dc in _ORTHOGONAL:
            r, c = row + dr, col + dc
            if self._in_bounds(r, c) and self._board[r][c] == kind:
                return True
        return False

    def _tree_satisfied(self, row: int, col: int) -> bool:
        """A tree needs an adjacent tent unless it has no neighbours at all (1x1 board)."""
        if self._spec.dim == 1:
            return True
        return self._adjacent(row, col, Cell.TENT)

    def _tent_near_tent(self, row: int, col: int) -> bool:
        if self._board[row][col] != Cell.TENT:
            return False
        for dr, dc in _DECIDED_NEIGHBOURS:
            r, c = row + dr, col + dc
            if self._in_bounds(r, c) and self._board[r][c] == Cell.TENT:
                return True
        return False

    def _tent_has_tree(self, row: int, col: int) -> bool:
        if self._board[row][col] != Cell.TENT:
            return True
        return self._adjacent(row, col, Cell.TREE)

    def _counts_within_targets(self, row: int, col: int) -> bool:
        spec = self._spec
        if self._board[row].count(Cell.TENT) > spec.row_targets[row]:
            return False
        in_col = sum(1 for r in range(spec.dim) if self._board[r][col] == Cell.TENT)
        return in_col <= spec.col_targets[col]

    # -- rendering ---------------------------------------------------------

    def render(self) -> str:
        spec = self._spec
        divider = " " + HORI_DIVIDE * (2 * spec.dim - 1) + "\n"
        lines = [divider]
        for r, row in enumerate(self._board):
            cells = " ".join(cell.value for cell in row)
            lines.append(f"{VERT_DIVIDE}{cells}{VERT_DIVIDE}{spec.row_targets[r]}\n")
        lines.append(divider)
        lines.append(" " + " ".join(str(t) for t in spec.col_targets) + "\n")
        return "".join(lines)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"TentConfig(dim={self._spec.dim}, cursor={self._cursor})"
