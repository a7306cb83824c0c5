"""Generic recursive backtracking over Configuration values."""

from .configuration import Configuration
from .solver_core import NOT_FOUND, Backtracker, Found, NotFound, SolveResult

__all__ = [
    "Configuration",
    "Backtracker",
    "Found",
    "NotFound",
    "NOT_FOUND",
    "SolveResult",
]
