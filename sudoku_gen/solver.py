"""Randomized backtracking over a :class:`Grid`."""

from __future__ import annotations

import random
from typing import List, Optional

from .grid import EMPTY, GRID_SIZE, TOTAL_CELLS, Grid

DIGITS = tuple(range(1, GRID_SIZE + 1))

GLOBAL_SCOPE = "global"
CELL_SCOPE = "cell"
EXCLUSION_SCOPES = (GLOBAL_SCOPE, CELL_SCOPE)


class BacktrackingSolver:
    """Fill empty cells of ``grid`` in index order, trying digits in random order.

    ``exclusion_scope`` controls how a forbidden value passed to :meth:`solve`
    is applied:

    - ``"global"``: the value is withheld from every empty cell the search
      visits. This is the historical behaviour of the alternate-solution
      probe and is stricter than a uniqueness check. On a board carved from
      a valid solution such a probe never finds a completion, because the
      row of the forbidden cell can no longer receive its missing digit.
    - ``"cell"``: the value is withheld only at ``forbidden_index``, so a
      successful probe means a second solution exists.
    """

    def __init__(self, grid: Grid, rng=None, *, exclusion_scope: str = GLOBAL_SCOPE) -> None:
        if exclusion_scope not in EXCLUSION_SCOPES:
            raise ValueError(
                f"exclusion_scope must be one of {EXCLUSION_SCOPES}, got {exclusion_scope!r}"
            )
        self.grid = grid
        self.exclusion_scope = exclusion_scope
        self._rng = rng if rng is not None else random.Random()

    def candidates(self, cell: int) -> List[int]:
        """Digits not already used in the row, column or box of ``cell``."""

        used = set(self.grid.row(cell))
        used.update(self.grid.column(cell))
        used.update(self.grid.box(cell))
        return [digit for digit in DIGITS if digit not in used]

    def shuffle(self, values: List[int]) -> List[int]:
        # Fisher-Yates, driven only by uniform [0, 1) draws.
        for position in range(len(values) - 1, 0, -1):
            swap = int(self._rng.random() * (position + 1))
            values[position], values[swap] = values[swap], values[position]
        return values

    def _excludes(self, cell: int, forbidden_index: Optional[int]) -> bool:
        if forbidden_index is None:
            return False
        return self.exclusion_scope == GLOBAL_SCOPE or cell == forbidden_index

    def solve(
        self,
        index: int = 0,
        forbidden_index: Optional[int] = None,
        forbidden_value: Optional[int] = None,
    ) -> bool:
        """Complete the grid from ``index`` onwards; return whether it worked.

        Cells already holding a digit are treated as clues and skipped. On
        failure every cell written by this call is blanked again.
        """

        if index >= TOTAL_CELLS:
            return True

        original = self.grid.get(index)
        if original != EMPTY:
            return self.solve(index + 1, forbidden_index, forbidden_value)

        values = self.candidates(index)
        if self._excludes(index, forbidden_index):
            values = [value for value in values if value != forbidden_value]

        for value in self.shuffle(values):
            self.grid.set(index, value)
            if self.solve(index + 1, forbidden_index, forbidden_value):
                return True

        self.grid.set(index, original)
        return False

    def probe(self, cell: int, value: int) -> bool:
        """Whether the grid can be completed from index 0 while ``value`` is withheld.

        Under the global scope a row, column or box around ``cell`` that lacks
        ``value`` can never receive it, so the answer is known without search.
        """

        if self.exclusion_scope == GLOBAL_SCOPE:
            units = (self.grid.row(cell), self.grid.column(cell), self.grid.box(cell))
            if any(value not in unit for unit in units):
                return False
        return self.solve(0, cell, value)


def complete(grid: Grid, rng=None) -> Optional[Grid]:
    """Return a solved copy of ``grid``, or ``None`` when it has no completion."""

    snapshot = grid.copy()
    if BacktrackingSolver(snapshot, rng).solve(0):
        return snapshot
    return None


__all__ = [
    "BacktrackingSolver",
    "complete",
    "DIGITS",
    "EXCLUSION_SCOPES",
    "GLOBAL_SCOPE",
    "CELL_SCOPE",
]
