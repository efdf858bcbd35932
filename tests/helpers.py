"""Shared fixtures for the Sudoku test suites."""

from typing import List, Sequence

from sudoku_gen.grid import Grid

DIGITS = set(range(1, 10))


class FixedRandom:
    """Random source that keeps returning the same draws in order."""

    def __init__(self, *values: float) -> None:
        self.values = values or (0.0,)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


def pattern_solution() -> Grid:
    """A fixed valid solved board."""

    return Grid((r * 3 + r // 3 + c) % 9 + 1 for r in range(9) for c in range(9))


def is_valid_solution(matrix: Sequence[Sequence[int]]) -> bool:
    if len(matrix) != 9 or any(len(row) != 9 for row in matrix):
        return False
    for row in matrix:
        if set(row) != DIGITS:
            return False
    for col in range(9):
        if {matrix[row][col] for row in range(9)} != DIGITS:
            return False
    for start_row in range(0, 9, 3):
        for start_col in range(0, 9, 3):
            values = {
                matrix[r][c]
                for r in range(start_row, start_row + 3)
                for c in range(start_col, start_col + 3)
            }
            if values != DIGITS:
                return False
    return True


def respects_clues(puzzle: Sequence[Sequence[int]], solution: Sequence[Sequence[int]]) -> bool:
    return all(
        clue == 0 or clue == value
        for puzzle_row, solution_row in zip(puzzle, solution)
        for clue, value in zip(puzzle_row, solution_row)
    )


def empty_cells(matrix: Sequence[Sequence[int]]) -> List[int]:
    return [r * 9 + c for r, row in enumerate(matrix) for c, value in enumerate(row) if value == 0]
