"""Abstract interface for puzzle generation."""

from __future__ import annotations

import dataclasses
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

RecordT = TypeVar("RecordT")


class AbstractPuzzleGenerator(ABC, Generic[RecordT]):
    """Base class for dataset builders that emit puzzle records.

    Subclasses draw all randomness from ``self._rng``. Pass ``rng`` to inject
    any object exposing ``random() -> float`` in ``[0, 1)``; otherwise a
    ``random.Random`` seeded with ``seed`` is used.
    """

    def __init__(self, *, seed: Optional[int] = None, rng=None) -> None:
        self._rng = rng if rng is not None else random.Random(seed)

    @abstractmethod
    def create_puzzle(self, *args, **kwargs) -> RecordT:
        """Create a puzzle from the provided resources."""

    def create_random_puzzle(self) -> RecordT:
        """Create a single randomized puzzle instance."""
        return self.create_puzzle()

    def generate_dataset(self, count: int) -> List[RecordT]:
        """Generate a batch of puzzles."""
        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.create_random_puzzle() for _ in range(count)]

    def record_to_dict(self, record: RecordT) -> Dict[str, Any]:
        """Dictionary serialization hook for puzzle records."""

        if hasattr(record, "to_dict"):
            return getattr(record, "to_dict")()
        return dataclasses.asdict(record)


__all__ = ["AbstractPuzzleGenerator"]
