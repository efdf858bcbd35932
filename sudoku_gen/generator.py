"""Sudoku puzzle generator implementation (9x9 grid)."""

from __future__ import annotations

import argparse
import json
import logging
import random
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Set

from PIL import Image

from .base import AbstractPuzzleGenerator
from .grid import TOTAL_CELLS, Grid
from .render import render_board
from .solver import EXCLUSION_SCOPES, GLOBAL_SCOPE, BacktrackingSolver

logger = logging.getLogger(__name__)

DEFAULT_CELLS_TO_REMOVE = 40


class Sudoku:
    """A generated puzzle: solved at random, then blanked cell by cell.

    Generation runs in the constructor. Each blanked cell is kept only if the
    alternate-solution probe (see :class:`BacktrackingSolver`) fails, so the
    puzzle always remains completable to :attr:`solution`.
    """

    def __init__(
        self,
        cells_to_remove: int = DEFAULT_CELLS_TO_REMOVE,
        *,
        rng=None,
        seed: Optional[int] = None,
        exclusion_scope: str = GLOBAL_SCOPE,
    ) -> None:
        if not 0 <= cells_to_remove <= TOTAL_CELLS:
            raise ValueError(f"cells_to_remove must be between 0 and {TOTAL_CELLS}")
        self.grid = Grid()
        if rng is None:
            rng = random.Random(seed)
        self._rng = rng
        self._solver = BacktrackingSolver(self.grid, rng, exclusion_scope=exclusion_scope)
        self.exclusion_scope = exclusion_scope
        self.requested_removals = cells_to_remove
        self.removed_count = 0
        self._rejected: Set[int] = set()
        self.solution = Grid()
        self.generate(cells_to_remove)

    def generate(self, amount_cells_to_remove: int) -> None:
        if not self._solver.solve(0):
            raise RuntimeError("failed to fill an empty grid")
        self.solution = self.grid.copy()
        # A clue that admits an alternate solution keeps admitting one as more
        # clues are removed, so rejections carry over between removals.
        self._rejected = set()

        for _ in range(amount_cells_to_remove):
            if self.remove_random_cell() is None:
                logger.info(
                    "Stopped after %d of %d removals: no remaining clue can be blanked",
                    self.removed_count,
                    amount_cells_to_remove,
                )
                break
        logger.debug("Generated puzzle with %d clues", self.clue_count)

    def remove_random_cell(self) -> Optional[int]:
        """Blank one random clue that passes the probe.

        Returns the blanked index, or ``None`` once every remaining clue has
        been tried and rejected.
        """

        while True:
            if len(self._rejected) == TOTAL_CELLS - self.grid.empty_count():
                return None
            cell = self.grid.random_filled_cell(self._rng, exclude=self._rejected)
            value = self.grid.clear(cell)

            probe = BacktrackingSolver(self.grid.copy(), self._rng, exclusion_scope=self.exclusion_scope)
            if not probe.probe(cell, value):
                self.removed_count += 1
                logger.debug("Removed clue %d at cell %d", value, cell)
                return cell

            self.grid.set(cell, value)
            self._rejected.add(cell)
            logger.debug("Kept clue %d at cell %d: alternate solution found", value, cell)

    @property
    def clue_count(self) -> int:
        return TOTAL_CELLS - self.grid.empty_count()

    def as_matrix(self) -> List[List[int]]:
        return self.grid.as_matrix()

    def as_flat_list(self) -> List[int]:
        return self.grid.as_flat_list()

    def get(self, cell: int) -> int:
        return self.grid.get(cell)

    def row(self, cell: int) -> List[int]:
        return self.grid.row(cell)

    def column(self, cell: int) -> List[int]:
        return self.grid.column(cell)

    def box(self, cell: int) -> List[int]:
        return self.grid.box(cell)

    def box_start(self, cell: int) -> int:
        return self.grid.box_start(cell)


@dataclass
class SudokuPuzzleRecord:
    """Serializable Sudoku puzzle metadata."""

    id: str
    puzzle_grid: List[List[int]]
    solution_grid: List[List[int]]
    clue_count: int
    requested_removals: int
    removed_count: int
    exclusion_scope: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "puzzle_grid": self.puzzle_grid,
            "solution_grid": self.solution_grid,
            "clue_count": self.clue_count,
            "requested_removals": self.requested_removals,
            "removed_count": self.removed_count,
            "exclusion_scope": self.exclusion_scope,
        }


class SudokuGenerator(AbstractPuzzleGenerator[SudokuPuzzleRecord]):
    """Generate 9x9 Sudoku puzzles with a target number of blanked cells."""

    def __init__(
        self,
        *,
        cells_to_remove: int = DEFAULT_CELLS_TO_REMOVE,
        exclusion_scope: str = GLOBAL_SCOPE,
        canvas_size: int = 360,
        seed: Optional[int] = None,
        rng=None,
    ) -> None:
        super().__init__(seed=seed, rng=rng)
        if not 0 <= cells_to_remove <= TOTAL_CELLS:
            raise ValueError(f"cells_to_remove must be between 0 and {TOTAL_CELLS}")
        if exclusion_scope not in EXCLUSION_SCOPES:
            raise ValueError(f"exclusion_scope must be one of {EXCLUSION_SCOPES}")
        if canvas_size < 9:
            raise ValueError("canvas_size must be at least 9 pixels")
        self.cells_to_remove = cells_to_remove
        self.exclusion_scope = exclusion_scope
        self.canvas_size = canvas_size

    def create_puzzle(self, *, puzzle_id: Optional[str] = None) -> SudokuPuzzleRecord:
        puzzle_uuid = puzzle_id or str(uuid.uuid4())
        sudoku = Sudoku(
            self.cells_to_remove,
            rng=self._rng,
            exclusion_scope=self.exclusion_scope,
        )
        logger.info(
            "Generated puzzle %s with %d clues (%d removals requested)",
            puzzle_uuid,
            sudoku.clue_count,
            self.cells_to_remove,
        )
        return SudokuPuzzleRecord(
            id=puzzle_uuid,
            puzzle_grid=sudoku.as_matrix(),
            solution_grid=sudoku.solution.as_matrix(),
            clue_count=sudoku.clue_count,
            requested_removals=self.cells_to_remove,
            removed_count=sudoku.removed_count,
            exclusion_scope=self.exclusion_scope,
        )

    def render(self, record: SudokuPuzzleRecord, *, highlight_solution: bool = False) -> Image.Image:
        """Draw the puzzle, or with ``highlight_solution`` the solved board."""

        if highlight_solution:
            return render_board(
                record.solution_grid,
                canvas_size=self.canvas_size,
                puzzle_grid=record.puzzle_grid,
                highlight_solution=True,
            )
        return render_board(record.puzzle_grid, canvas_size=self.canvas_size)


__all__ = ["Sudoku", "SudokuGenerator", "SudokuPuzzleRecord", "DEFAULT_CELLS_TO_REMOVE"]


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate randomized 9x9 Sudoku puzzles")
    parser.add_argument("count", type=int, help="Number of puzzles to generate")
    parser.add_argument(
        "--cells-to-remove",
        type=int,
        default=DEFAULT_CELLS_TO_REMOVE,
        help="How many clues to try to blank from each solved board",
    )
    parser.add_argument(
        "--exclusion-scope",
        choices=EXCLUSION_SCOPES,
        default=GLOBAL_SCOPE,
        help="Where the removed digit is withheld while probing for another solution",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument("--canvas-size", type=int, default=360, help="Render size in pixels for the board")
    parser.add_argument(
        "--image-dir",
        type=Path,
        default=None,
        help="Optional directory for rendered puzzle and solution PNGs",
    )
    parser.add_argument("--verbose", action="store_true", help="Log every probed cell")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    generator = SudokuGenerator(
        cells_to_remove=args.cells_to_remove,
        exclusion_scope=args.exclusion_scope,
        canvas_size=args.canvas_size,
        seed=args.seed,
    )
    records = generator.generate_dataset(args.count)

    if args.image_dir is not None:
        args.image_dir.mkdir(parents=True, exist_ok=True)
        for record in records:
            generator.render(record).save(args.image_dir / f"{record.id}_puzzle.png")
            generator.render(record, highlight_solution=True).save(args.image_dir / f"{record.id}_solution.png")
        logging.info(f"Saved {len(records)} puzzle renders to {args.image_dir}")

    print(json.dumps([generator.record_to_dict(record) for record in records], indent=2))


if __name__ == "__main__":
    main()
