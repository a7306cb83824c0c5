"""Puzzle parser: convert puzzle text into the initial TentConfig.

Format::

    3        dimension n
    2 0 1    row targets, top to bottom
    2 0 1    column targets, left to right
    . % .    n grid rows of n tokens: . empty, - grass, ^ tent, % tree
    % . .
    . . .
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .model import Cell, PuzzleSpec, TentConfig

_SYMBOLS = {cell.value: cell for cell in Cell}


class MalformedSpec(ValueError):
    """Raised when puzzle text does not describe a well-formed puzzle."""


def parse_puzzle(text: str) -> TentConfig:
    lines = _content_lines(text)

    lineno, raw_dim = _next_line(lines, "dimension")
    try:
        dim = int(raw_dim.split()[0])
    except (ValueError, IndexError):
        raise MalformedSpec(f"line {lineno}: dimension must be an integer, got {raw_dim!r}")
    if dim <= 0:
        raise MalformedSpec(f"line {lineno}: dimension must be positive, got {dim}")

    row_targets = _parse_targets(lines, dim, "row targets")
    col_targets = _parse_targets(lines, dim, "column targets")

    board = []
    for row in range(dim):
        lineno, raw = _next_line(lines, f"grid row {row + 1}")
        tokens = raw.split()
        if len(tokens) < dim:
            raise MalformedSpec(
                f"line {lineno}: grid row {row + 1} has {len(tokens)} cells, expected {dim}"
            )
        board.append([_parse_cell(token, lineno) for token in tokens[:dim]])

    spec = PuzzleSpec(dim=dim, row_targets=row_targets, col_targets=col_targets)
    return TentConfig(spec, board)


def _content_lines(text: str) -> Iterator[Tuple[int, str]]:
    for lineno, line in enumerate(text.splitlines(), start=1):
        if line.strip():
            yield lineno, line


def _next_line(lines: Iterator[Tuple[int, str]], what: str) -> Tuple[int, str]:
    try:
        return next(lines)
    except StopIteration:
        raise MalformedSpec(f"unexpected end of input: missing {what}")


def _parse_targets(lines: Iterator[Tuple[int, str]], dim: int, what: str) -> Tuple[int, ...]:
    lineno, raw = _next_line(lines, what)
    fields = raw.split()
    if len(fields) < dim:
        raise MalformedSpec(f"line {lineno}: {what} has {len(fields)} entries, expected {dim}")
    targets: List[int] = []
    for field in fields[:dim]:
        try:
            value = int(field)
        except ValueError:
            raise MalformedSpec(f"line {lineno}: {what} entry {field!r} is not an integer")
        if value < 0:
            raise MalformedSpec(f"line {lineno}: {what} entry {value} is negative")
        targets.append(value)
    return tuple(targets)


def _parse_cell(token: str, lineno: int) -> Cell:
    cell = _SYMBOLS.get(token)
    if cell is None:
        raise MalformedSpec(
            f"line {lineno}: unknown cell {token!r}, expected one of {' '.join(_SYMBOLS)}"
        )
    return cell
