"""Canonical ordering of solved groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .pieces import Color, Piece, Ranked
from .runs import ConsecutiveSet
from .validate import WildcardOnlyGroupError, first_ranked, repeating_colors, same_rank

__all__ = ["SetOrder", "sort_sets"]


@dataclass(frozen=True, slots=True)
class SetOrder:
    """A group re-sequenced for display, with the key used to order groups."""

    effective_rank: int
    effective_color: Color
    pieces: tuple[Piece, ...]

    @property
    def key(self) -> tuple[int, int]:
        return (self.effective_rank, self.effective_color.order)

    @classmethod
    def from_group(cls, group: Sequence[Piece]) -> "SetOrder":
        first = first_ranked(group)
        if first is None:
            raise WildcardOnlyGroupError("cannot order a group without a ranked piece")
        if same_rank(first, group) and not repeating_colors(group):
            return cls._same_rank(first, group)
        return cls._same_color(first, group)

    @classmethod
    def _same_rank(cls, first: Ranked, group: Sequence[Piece]) -> "SetOrder":
        present = {piece.color for piece in group if isinstance(piece, Ranked)}
        spare = [color for color in Color.ordered() if color not in present]

        assigned: list[tuple[Color, Piece]] = []
        for piece in group:
            if isinstance(piece, Ranked):
                assigned.append((piece.color, piece))
            else:
                assigned.append((spare.pop(0), piece))
        assigned.sort(key=lambda item: item[0].order)

        return cls(
            effective_rank=first.rank,
            effective_color=assigned[0][0],
            pieces=tuple(piece for _, piece in assigned),
        )

    @classmethod
    def _same_color(cls, first: Ranked, group: Sequence[Piece]) -> "SetOrder":
        analysis = ConsecutiveSet.from_pieces(group)
        if analysis is None:
            raise ValueError("group repeats a rank and is not a run")
        present = {piece.rank for piece in group if isinstance(piece, Ranked)}
        spare = [rank for rank in analysis.available_ranks() if rank not in present]

        assigned: list[tuple[int, Piece]] = []
        for piece in group:
            if isinstance(piece, Ranked):
                assigned.append((piece.rank, piece))
            else:
                assigned.append((spare.pop(0), piece))
        assigned.sort(key=lambda item: item[0])

        return cls(
            effective_rank=analysis.actual_first(),
            effective_color=first.color,
            pieces=tuple(piece for _, piece in assigned),
        )


def sort_sets(groups: Sequence[Sequence[Piece]]) -> list[list[Piece]]:
    """Return ``groups`` with wildcards placed and groups in canonical order."""

    orders = sorted((SetOrder.from_group(group) for group in groups), key=lambda order: order.key)
    return [list(order.pieces) for order in orders]
