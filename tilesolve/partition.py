"""Backtracking search that splits a board into melds."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from itertools import combinations
from typing import Sequence

from .ordering import sort_sets
from .pieces import Piece, Wildcard
from .validate import valid_set

logger = logging.getLogger(__name__)

__all__ = [
    "GroupSizes",
    "group_size_targets",
    "find_partition",
    "solve_board",
    "verify_partition",
]

Group = tuple[int, ...]


@dataclass(frozen=True, slots=True)
class GroupSizes:
    """Number of groups still to carve out, per group size."""

    threes: int
    fours: int
    fives: int

    @property
    def total(self) -> int:
        return self.threes + self.fours + self.fives

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.threes, self.fours, self.fives)

    def peel(self) -> tuple[int, "GroupSizes"]:
        """Return the next group size to carve and the sizes left after it."""

        if self.threes > 0:
            return 3, GroupSizes(self.threes - 1, self.fours, self.fives)
        if self.fours > 0:
            return 4, GroupSizes(self.threes, self.fours - 1, self.fives)
        return 5, GroupSizes(self.threes, self.fours, self.fives - 1)


def group_size_targets(total: int) -> list[GroupSizes]:
    """Return every mix of 3-, 4- and 5-piece groups that adds up to ``total``.

    Mixes are listed by ascending count of five-piece groups, then ascending
    count of four-piece groups. The search tries them in this order, which
    fixes the partition returned when several exist.
    """

    results: list[GroupSizes] = []
    for fives in range(total // 5 + 1):
        left = total - fives * 5
        for fours in range(left // 4 + 1):
            rest = left - fours * 4
            if rest % 3 == 0:
                results.append(GroupSizes(rest // 3, fours, fives))
    return results


def _find_valid(
    pieces: Sequence[Piece],
    wildcards: frozenset[int],
    sizes: GroupSizes,
    left: tuple[int, ...],
    current: tuple[Group, ...],
) -> tuple[Group, ...] | None:
    final_round = sizes.total == 1
    group_size, next_sizes = sizes.peel()

    for combination in combinations(left, group_size):
        # All-wildcard candidates carry no rank or color and are never melds.
        if wildcards.issuperset(combination):
            continue
        if not valid_set([pieces[idx] for idx in combination]):
            continue

        committed = current + (combination,)
        if final_round:
            return committed

        taken = set(combination)
        remaining = tuple(idx for idx in left if idx not in taken)
        found = _find_valid(pieces, wildcards, next_sizes, remaining, committed)
        if found is not None:
            return found
    return None


def find_partition(pieces: Sequence[Piece]) -> list[Group] | None:
    """Return board indices grouped into melds, or ``None`` if impossible.

    Groups are returned in the order the search committed them.
    """

    if not pieces:
        return None

    wildcards = frozenset(idx for idx, piece in enumerate(pieces) if isinstance(piece, Wildcard))
    left = tuple(range(len(pieces)))

    for sizes in group_size_targets(len(pieces)):
        logger.debug("trying %d/%d/%d groups of 3/4/5", *sizes.as_tuple())
        found = _find_valid(pieces, wildcards, sizes, left, ())
        if found is not None:
            return list(found)
    return None


def solve_board(pieces: Sequence[Piece]) -> list[list[Piece]] | None:
    """Partition ``pieces`` into melds in canonical order.

    Returns ``None`` when no partition covers every piece.
    """

    board = list(pieces)
    partition = find_partition(board)
    if partition is None:
        logger.info("no partition found for %d pieces", len(board))
        return None

    logger.info("partitioned %d pieces into %d groups", len(board), len(partition))
    return sort_sets([[board[idx] for idx in group] for group in partition])


def verify_partition(pieces: Sequence[Piece], groups: Sequence[Sequence[Piece]]) -> bool:
    """Return ``True`` when ``groups`` are melds covering exactly ``pieces``."""

    for group in groups:
        if not 3 <= len(group) <= 5:
            return False
        if not any(not isinstance(piece, Wildcard) for piece in group):
            return False
        if not valid_set(group):
            return False
    used: Counter[Piece] = Counter(piece for group in groups for piece in group)
    return used == Counter(pieces)
