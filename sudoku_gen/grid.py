"""Flat 9x9 Sudoku board with row/column/box views derived from the linear index."""

from __future__ import annotations

from typing import Container, Iterable, List, Sequence

GRID_SIZE = 9
SUBGRID_SIZE = 3
TOTAL_CELLS = GRID_SIZE * GRID_SIZE
EMPTY = 0


class Grid:
    """81 cells stored row-major; ``EMPTY`` marks a blank cell."""

    def __init__(self, cells: Iterable[int] = ()) -> None:
        values = list(cells)
        if not values:
            values = [EMPTY] * TOTAL_CELLS
        if len(values) != TOTAL_CELLS:
            raise ValueError(f"Grid needs {TOTAL_CELLS} cells, got {len(values)}")
        self._cells: List[int] = values

    @classmethod
    def from_matrix(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        return cls(value for row in rows for value in row)

    @staticmethod
    def _check(cell: int) -> int:
        if not 0 <= cell < TOTAL_CELLS:
            raise IndexError(f"cell index out of range: {cell}")
        return cell

    def get(self, cell: int) -> int:
        return self._cells[self._check(cell)]

    def set(self, cell: int, value: int) -> None:
        # No admissibility check; the solver only writes candidates.
        self._cells[self._check(cell)] = value

    def clear(self, cell: int) -> int:
        """Blank ``cell`` and return the value it held."""

        previous = self.get(cell)
        self._cells[cell] = EMPTY
        return previous

    def row(self, cell: int) -> List[int]:
        start = self._check(cell) - cell % GRID_SIZE
        return self._cells[start : start + GRID_SIZE]

    def column(self, cell: int) -> List[int]:
        return self._cells[self._check(cell) % GRID_SIZE :: GRID_SIZE]

    def box(self, cell: int) -> List[int]:
        start = self.box_start(cell)
        values: List[int] = []
        for offset in range(0, GRID_SIZE * SUBGRID_SIZE, GRID_SIZE):
            values.extend(self._cells[start + offset : start + offset + SUBGRID_SIZE])
        return values

    @staticmethod
    def box_start(cell: int) -> int:
        """Index of the top-left cell of the 3x3 box containing ``cell``."""

        row, column = divmod(Grid._check(cell), GRID_SIZE)
        return (row - row % SUBGRID_SIZE) * GRID_SIZE + (column - column % SUBGRID_SIZE)

    def filled_cells(self) -> List[int]:
        return [index for index, value in enumerate(self._cells) if value != EMPTY]

    def empty_count(self) -> int:
        return self._cells.count(EMPTY)

    def random_filled_cell(self, rng, exclude: Container[int] = ()) -> int:
        """Uniformly pick the index of a non-empty cell not in ``exclude``.

        At least one such cell must exist; otherwise the lookup raises
        ``IndexError``.
        """

        filled = [cell for cell in self.filled_cells() if cell not in exclude]
        return filled[int(rng.random() * len(filled))]

    def as_flat_list(self) -> List[int]:
        return list(self._cells)

    def as_matrix(self) -> List[List[int]]:
        return [self._cells[start : start + GRID_SIZE] for start in range(0, TOTAL_CELLS, GRID_SIZE)]

    def copy(self) -> "Grid":
        return Grid(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({''.join(str(value) for value in self._cells)})"


__all__ = ["Grid", "GRID_SIZE", "SUBGRID_SIZE", "TOTAL_CELLS", "EMPTY"]
