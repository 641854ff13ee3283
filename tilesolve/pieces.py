"""Piece abstractions and codecs for tile boards."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final, Iterable, Iterator, Union

MIN_RANK: Final[int] = 1
MAX_RANK: Final[int] = 13
WILDCARD_CODE: Final[str] = "JK"


class InvalidPieceError(ValueError):
    """Raised when a piece cannot be constructed or decoded."""


class Color(str, Enum):
    """Enumeration of the four piece colors."""

    BLACK = "Black"
    BLUE = "Blue"
    RED = "Red"
    ORANGE = "Orange"

    @classmethod
    def ordered(cls) -> tuple["Color", ...]:
        """Return colors in the total order used for canonical output."""

        return (cls.BLACK, cls.BLUE, cls.RED, cls.ORANGE)

    @property
    def order(self) -> int:
        return _COLOR_ORDER[self]

    @property
    def letter(self) -> str:
        return _COLOR_TO_LETTER[self]


_COLOR_ORDER: Final[dict[Color, int]] = {color: idx for idx, color in enumerate(Color.ordered())}
_COLOR_TO_LETTER: Final[dict[Color, str]] = {
    Color.BLACK: "K",
    Color.BLUE: "B",
    Color.RED: "R",
    Color.ORANGE: "O",
}
_LETTER_TO_COLOR: Final[dict[str, Color]] = {letter: color for color, letter in _COLOR_TO_LETTER.items()}


@dataclass(frozen=True, slots=True)
class Wildcard:
    """A wildcard piece standing in for any rank and color."""

    def label(self) -> str:
        return WILDCARD_CODE


@dataclass(frozen=True, slots=True)
class Ranked:
    """A regular piece carrying a rank and a color."""

    rank: int
    color: Color

    def __post_init__(self) -> None:
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidPieceError(f"rank must be an integer, got {self.rank!r}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidPieceError(f"rank {self.rank} out of range {MIN_RANK}..{MAX_RANK}")
        if not isinstance(self.color, Color):
            raise InvalidPieceError(f"unknown color {self.color!r}")

    def label(self) -> str:
        return f"{self.rank}{self.color.letter}"


Piece = Union[Wildcard, Ranked]

WILDCARD: Final[Wildcard] = Wildcard()


def _coerce_color(value: Color | str) -> Color:
    if isinstance(value, Color):
        return value
    try:
        return Color(value)
    except ValueError as exc:
        raise InvalidPieceError(f"unknown color {value!r}") from exc


def full_deck() -> list[Piece]:
    """Return a deterministic ordering of every piece in a full set."""

    pieces: list[Piece] = []
    for _copy in range(2):
        for color in Color.ordered():
            for rank in range(MIN_RANK, MAX_RANK + 1):
                pieces.append(Ranked(rank, color))
    pieces.extend([WILDCARD, WILDCARD])
    return pieces


def piece_to_dict(piece: Piece) -> dict[str, Any]:
    """Return the JSON-ready mapping for ``piece``."""

    if isinstance(piece, Wildcard):
        return {"type": "Joker"}
    return {"type": "Normal", "domination": piece.rank, "color": piece.color.value}


def piece_from_dict(data: Any) -> Piece:
    """Decode a mapping produced by :func:`piece_to_dict`."""

    if not isinstance(data, dict):
        raise InvalidPieceError(f"expected an object, got {type(data).__name__}")
    kind = data.get("type")
    if kind == "Joker":
        return WILDCARD
    if kind == "Normal":
        if "domination" not in data or "color" not in data:
            raise InvalidPieceError("normal piece requires 'domination' and 'color'")
        return Ranked(data["domination"], _coerce_color(data["color"]))
    raise InvalidPieceError(f"unknown piece type {kind!r}")


def pieces_from_json(text: str) -> list[Piece]:
    """Parse a JSON array of pieces."""

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidPieceError(f"invalid JSON: {exc.msg}") from exc
    if not isinstance(payload, list):
        raise InvalidPieceError("expected a JSON array of pieces")
    return [piece_from_dict(item) for item in payload]


def pieces_to_json(pieces: Iterable[Piece]) -> str:
    return json.dumps([piece_to_dict(piece) for piece in pieces])


def piece_code(piece: Piece) -> str:
    """Return the short textual code for ``piece`` (``"7R"``, ``"JK"``)."""

    return piece.label()


def piece_from_code(code: str) -> Piece:
    """Parse a short code such as ``"12O"`` or ``"JK"``."""

    text = code.strip().upper()
    if text == WILDCARD_CODE:
        return WILDCARD
    if len(text) < 2:
        raise InvalidPieceError(f"invalid piece code '{code}'")
    rank_text, letter = text[:-1], text[-1]
    color = _LETTER_TO_COLOR.get(letter)
    if color is None or not rank_text.isdigit():
        raise InvalidPieceError(f"invalid piece code '{code}'")
    return Ranked(int(rank_text), color)


def iter_codes(text: str) -> Iterator[Piece]:
    for token in text.replace(",", " ").split():
        yield piece_from_code(token)


def parse_codes(text: str) -> list[Piece]:
    """Parse a whitespace or comma separated list of short codes."""

    return list(iter_codes(text))


def format_pieces(pieces: Iterable[Piece]) -> str:
    return " ".join(piece_code(piece) for piece in pieces)
