"""Typer entry-point wiring for the tilesolve CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .. import benchmark, pieces
from ..partition import solve_board
from .render import render_solution

app = typer.Typer(add_completion=False, rich_markup_mode="rich")
console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _load_board(path: Path | None, codes: str | None) -> list[pieces.Piece]:
    if path is not None and codes is not None:
        raise typer.BadParameter("Pass either a JSON file or --codes, not both.")
    try:
        if codes is not None:
            return pieces.parse_codes(codes)
        if path is None:
            raise typer.BadParameter("A JSON file or --codes is required.")
        return pieces.pieces_from_json(path.read_text(encoding="utf-8"))
    except pieces.InvalidPieceError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def solve(
    path: Path | None = typer.Argument(
        None, exists=True, dir_okay=False, readable=True, help="JSON file holding the board."
    ),
    codes: str | None = typer.Option(None, "--codes", "-c", help="Board as short codes, e.g. '1K 1R 1B'."),
    as_json: bool = typer.Option(False, "--json", help="Print the solution as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log search progress."),
) -> None:
    """Split a board into melds covering every piece."""

    _configure_logging(verbose)
    board = _load_board(path, codes)
    result = solve_board(board)

    if result is None:
        if as_json:
            typer.echo("null")
        else:
            console.print(f"[red]No solution for {len(board)} piece(s).[/red]")
        raise typer.Exit(code=1)

    if as_json:
        payload = [[pieces.piece_to_dict(piece) for piece in group] for group in result]
        typer.echo(json.dumps(payload))
        return

    console.print(render_solution(result))


@app.command("deck")
def deck_cli() -> None:
    """Print the full 106-piece set as short codes."""

    typer.echo(pieces.format_pieces(pieces.full_deck()))


@app.command("benchmark")
def benchmark_cli(
    rounds: int = typer.Option(10, min=1, help="Number of random boards to solve."),
    groups: int = typer.Option(4, min=1, help="Melds per generated board."),
    max_wildcards: int = typer.Option(2, min=0, help="Upper bound on wildcards per board."),
    seed: int = typer.Option(123, help="Random seed for board generation."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-round timings."),
) -> None:
    """Time the solver on random solvable boards."""

    _configure_logging(verbose)
    config = benchmark.BenchmarkConfig(rounds=rounds, groups=groups, max_wildcards=max_wildcards, seed=seed)
    report = benchmark.run_benchmark(config)

    table = Table(title="Solver Benchmark", box=box.SIMPLE_HEAVY)
    table.add_column("Rounds", justify="right")
    table.add_column("Solved", justify="right")
    table.add_column("Mean (s)", justify="right")
    table.add_column("Max (s)", justify="right")
    table.add_row(
        str(report.rounds),
        str(report.solved),
        f"{report.mean_seconds:.4f}",
        f"{report.max_seconds:.4f}",
    )
    console.print(table)


def main() -> None:
    """Entry-point for the ``tilesolve`` console script."""

    app()


if __name__ == "__main__":  # pragma: no cover - CLI invocation
    main()
