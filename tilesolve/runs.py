"""Consecutive-run analysis for same-color groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .pieces import Piece, Ranked

__all__ = ["ConsecutiveSet"]


@dataclass(frozen=True, slots=True)
class ConsecutiveSet:
    """Summary of how a group's ranks line up as a single run.

    ``holes`` counts the missing ranks between the lowest and highest present
    rank, ``wildcards`` the pieces available to fill them, ``first`` the lowest
    present rank (0 when the group has no ranked piece) and ``size`` the number
    of pieces in the group.
    """

    holes: int
    wildcards: int
    first: int
    size: int

    @classmethod
    def from_pieces(cls, pieces: Sequence[Piece]) -> "ConsecutiveSet | None":
        """Analyse ``pieces``; return ``None`` when a rank repeats."""

        ranks: set[int] = set()
        wildcards = 0
        for piece in pieces:
            if isinstance(piece, Ranked):
                if piece.rank in ranks:
                    return None
                ranks.add(piece.rank)
            else:
                wildcards += 1

        ordered = sorted(ranks)
        holes = sum(high - low - 1 for low, high in zip(ordered, ordered[1:]))
        first = ordered[0] if ordered else 0
        return cls(holes=holes, wildcards=wildcards, first=first, size=len(pieces))

    def is_valid(self) -> bool:
        return self.holes <= self.wildcards

    def actual_first(self) -> int:
        """Return the rank the run starts at once spare wildcards are placed.

        Spare wildcards extend the run downwards; any that would go below
        rank 1 extend it upwards instead.
        """

        free = self.wildcards - self.holes
        if self.first <= free:
            return 1
        return self.first - free

    def actual_last(self) -> int:
        return self.actual_first() + self.wildcards + self.size - 1

    def available_ranks(self) -> range:
        """Return every rank the run may occupy once wildcards are assigned."""

        return range(self.actual_first(), self.actual_last() + 1)
