"""Configuration contract consumed by the backtracking search engine."""

from abc import ABC, abstractmethod
from typing import Sequence


class Configuration(ABC):
    """
    A node in a search space.

    The search engine knows nothing about the problem being solved: it only asks
    a configuration whether it is a goal, whether it is (locally) valid, and for
    its children in the order they should be explored.
    """

    @abstractmethod
    def is_goal(self) -> bool:
        """Return True when this configuration is a complete solution."""

    @abstractmethod
    def is_valid(self) -> bool:
        """Return True when this configuration may still lead to a solution."""

    @abstractmethod
    def get_successors(self) -> Sequence["Configuration"]:
        """Return the child configurations, in exploration order."""
