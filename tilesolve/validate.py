"""Meld validity rules."""

from __future__ import annotations

from typing import Final, Sequence

from .pieces import Piece, Ranked
from .runs import ConsecutiveSet

MIN_GROUP_SIZE: Final[int] = 3
MAX_SAME_RANK_SIZE: Final[int] = 4
MAX_RUN_SIZE: Final[int] = 13

__all__ = [
    "WildcardOnlyGroupError",
    "first_ranked",
    "same_rank",
    "same_color",
    "repeating_colors",
    "consecutive",
    "valid_set",
]


class WildcardOnlyGroupError(RuntimeError):
    """Raised when a group made solely of wildcards reaches the validator."""


def first_ranked(pieces: Sequence[Piece]) -> Ranked | None:
    """Return the first non-wildcard piece of ``pieces``, if any."""

    for piece in pieces:
        if isinstance(piece, Ranked):
            return piece
    return None


def same_rank(first: Ranked, pieces: Sequence[Piece]) -> bool:
    return all(not isinstance(piece, Ranked) or piece.rank == first.rank for piece in pieces)


def same_color(first: Ranked, pieces: Sequence[Piece]) -> bool:
    return all(not isinstance(piece, Ranked) or piece.color is first.color for piece in pieces)


def repeating_colors(pieces: Sequence[Piece]) -> bool:
    """Return ``True`` when a color repeats or the group cannot fit four colors."""

    if len(pieces) > MAX_SAME_RANK_SIZE:
        return True
    seen = set()
    for piece in pieces:
        if isinstance(piece, Ranked):
            if piece.color in seen:
                return True
            seen.add(piece.color)
    return False


def consecutive(pieces: Sequence[Piece]) -> bool:
    # Ranks only go up to 13, so a longer run needs duplicate ranks.
    if len(pieces) > MAX_RUN_SIZE:
        return False
    analysis = ConsecutiveSet.from_pieces(pieces)
    return analysis is not None and analysis.is_valid()


def valid_set(pieces: Sequence[Piece]) -> bool:
    """Return whether ``pieces`` form a meld.

    A meld is either same-rank pieces of distinct colors or same-color pieces
    forming a consecutive run, with wildcards filling any gaps.
    """

    if len(pieces) < MIN_GROUP_SIZE:
        return False

    first = first_ranked(pieces)
    if first is None:
        raise WildcardOnlyGroupError(f"group of {len(pieces)} wildcards has no ranked piece")

    return (same_rank(first, pieces) and not repeating_colors(pieces)) or (
        same_color(first, pieces) and consecutive(pieces)
    )
