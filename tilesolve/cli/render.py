"""Rendering helpers dedicated to the CLI experience."""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table

from ..pieces import Color, Piece, Ranked
from ..validate import first_ranked, same_rank

_COLOR_STYLES = {
    Color.BLACK: "bold white",
    Color.BLUE: "blue",
    Color.RED: "red",
    Color.ORANGE: "yellow",
}


def format_piece(piece: Piece) -> str:
    """Return a Rich-rendered label for ``piece``."""

    if not isinstance(piece, Ranked):
        return "[magenta]JK[/magenta]"
    style = _COLOR_STYLES[piece.color]
    return f"[{style}]{piece.label()}[/{style}]"


def _kind_label(group: Sequence[Piece]) -> str:
    first = first_ranked(group)
    if first is not None and same_rank(first, group):
        return "Set"
    return "Run"


def render_solution(groups: Sequence[Sequence[Piece]], *, title: str = "Solution") -> RenderableType:
    """Return a Rich panel listing each group of a solved board."""

    table = Table(box=box.ROUNDED, expand=True)
    table.add_column("Group", justify="left", style="bold")
    table.add_column("Kind", justify="left")
    table.add_column("Size", justify="right")
    table.add_column("Pieces", justify="left")

    for idx, group in enumerate(groups):
        pieces_display = " ".join(format_piece(piece) for piece in group)
        table.add_row(f"G{idx}", _kind_label(group), str(len(group)), pieces_display)

    total = sum(len(group) for group in groups)
    subtitle = f"{len(groups)} group(s), {total} piece(s)"
    return Panel(table, title=title, subtitle=subtitle, padding=(0, 1), border_style="cyan")
