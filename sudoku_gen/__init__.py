"""Randomized Sudoku puzzle generation toolkit."""

__all__ = [
    "AbstractPuzzleGenerator",
    "BacktrackingSolver",
    "Grid",
    "Sudoku",
    "SudokuGenerator",
    "SudokuPuzzleRecord",
    "complete",
    "render_board",
    "EMPTY",
]

from .base import AbstractPuzzleGenerator
from .grid import EMPTY, Grid
from .solver import BacktrackingSolver, complete
from .generator import Sudoku, SudokuGenerator, SudokuPuzzleRecord
from .render import render_board
