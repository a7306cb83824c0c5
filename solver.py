"""Top-level solve interface.

Expose `solve_puzzle(puzzle)` that accepts either a pre-built TentConfig, puzzle
text, or a raw puzzle record compatible with `src.tents.loader.load_puzzles`.
"""

import sys
import time
from dataclasses import dataclass
from typing import Any, Optional

from src.backtracker.solver_core import Backtracker, SolveResult
from src.tents.model import TentConfig
from src.tents.parser import parse_puzzle
from src.utils.trace import Tracer

# Stack frames reserved for callers above the search.
RECURSION_HEADROOM = 200


@dataclass
class SolveReport:
    initial: TentConfig
    result: SolveResult
    num_configs: int
    elapsed_seconds: float

    @property
    def solution(self) -> Optional[TentConfig]:
        return self.result.config if self.result.found else None


def _ensure_recursion_depth(config: TentConfig) -> None:
    needed = config.spec.dim * config.spec.dim + RECURSION_HEADROOM
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


def solve_puzzle(puzzle: Any, *, debug: bool = False, tracer: Optional[Tracer] = None) -> SolveReport:
    """
    Solve a puzzle and report the result, the number of configurations
    generated, and the elapsed search time.
    Accepts:
      - TentConfig instances (used directly)
      - Puzzle text (parsed via `parse_puzzle`)
      - Puzzle records with a "puzzle" text field
    """
    if isinstance(puzzle, TentConfig):
        initial = puzzle
    elif isinstance(puzzle, str):
        initial = parse_puzzle(puzzle)
    elif isinstance(puzzle, dict):
        initial = parse_puzzle(str(puzzle.get("puzzle", "") or ""))
    else:
        raise TypeError("solve_puzzle expects a TentConfig, puzzle text, or puzzle dictionary")

    _ensure_recursion_depth(initial)
    backtracker = Backtracker(debug=debug, tracer=tracer)

    start = time.perf_counter()
    result = backtracker.solve(initial)
    elapsed = time.perf_counter() - start

    return SolveReport(
        initial=initial,
        result=result,
        num_configs=backtracker.num_configs,
        elapsed_seconds=elapsed,
    )


__all__ = ["SolveReport", "solve_puzzle"]
