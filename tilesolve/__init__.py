"""Top-level package for the tile board solver."""

from . import benchmark, ordering, partition, pieces, runs, validate
from .partition import solve_board
from .pieces import Color, InvalidPieceError, Piece, Ranked, Wildcard
from .validate import WildcardOnlyGroupError, valid_set

solve = solve_board

__all__ = [
    "benchmark",
    "ordering",
    "partition",
    "pieces",
    "runs",
    "validate",
    "Color",
    "InvalidPieceError",
    "Piece",
    "Ranked",
    "Wildcard",
    "WildcardOnlyGroupError",
    "solve",
    "solve_board",
    "valid_set",
]
