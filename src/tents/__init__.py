"""Tents-and-Trees puzzle model, parsing, and loading."""

from .model import Cell, PuzzleSpec, TentConfig
from .parser import MalformedSpec, parse_puzzle
from .loader import load_puzzle, load_puzzles

__all__ = [
    "Cell",
    "PuzzleSpec",
    "TentConfig",
    "MalformedSpec",
    "parse_puzzle",
    "load_puzzle",
    "load_puzzles",
]
