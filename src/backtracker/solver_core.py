"""Recursive backtracking search over any Configuration."""

from dataclasses import dataclass
from typing import Optional, Union

from .configuration import Configuration
from src.utils.trace import Tracer, get_tracer


@dataclass(frozen=True)
class Found:
    """A goal configuration reached by the search."""

    config: Configuration
    found = True

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    """The search space was exhausted without reaching a goal."""

    found = False

    def __bool__(self) -> bool:
        return False


NOT_FOUND = NotFound()

SolveResult = Union[Found, NotFound]


class Backtracker:
    """
    Classic recursive backtracking.

    Explores successors depth-first in the order the configuration produces
    them, pruning every successor whose ``is_valid()`` is False. Parents are
    never mutated, so backtracking is just returning from the recursive call.
    """

    def __init__(self, debug: bool = False, tracer: Optional[Tracer] = None):
        self.debug = debug
        if tracer is None and debug:
            tracer = Tracer(enabled=True, echo=True)
        self.tracer = tracer or get_tracer()
        self._num_configs = 0
        if self.debug:
            self.tracer.enabled = True
            self.tracer.echo = True
            print("Backtracker debugging enabled...")

    @property
    def num_configs(self) -> int:
        """Number of successors generated by solve(), root excluded."""
        return self._num_configs

    def reset(self) -> None:
        self._num_configs = 0

    def solve(self, config: Configuration) -> SolveResult:
        """Return Found(goal) for the first goal reachable from config, else NOT_FOUND."""
        return self._backtrack(config, 0)

    def _backtrack(self, config: Configuration, depth: int) -> SolveResult:
        tracer = self.tracer
        tracer.log_examine(config, depth)
        if config.is_goal():
            tracer.log_goal(config, depth)
            return Found(config)

        for child in config.get_successors():
            self._num_configs += 1
            valid = child.is_valid()
            tracer.log_successor(child, valid, depth + 1)
            if not valid:
                continue
            result = self._backtrack(child, depth + 1)
            if result.found:
                return result

        # implicit backtracking: config is untouched by the failed children
        tracer.log_backtrack(config, depth)
        return NOT_FOUND
