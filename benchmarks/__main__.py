"""Entry point for benchmarks CLI."""

from typing import Annotated

import typer
from rich.table import Table

from . import benchs  # pyright: ignore[reportUnusedImport] # noqa: F401
from ._registery import BENCHMARKS, CONSOLE, collect_timings

app = typer.Typer(help="Benchmarks for funkchain developments.")


@app.command(name="list")
def list_benchmarks() -> None:
    """Show every registered benchmark."""
    for benchmark in BENCHMARKS:
        CONSOLE.print(f"{benchmark.category}: {benchmark.name}")


@app.command()
def run(
    *,
    category: Annotated[
        str | None, typer.Option("--category", "-c", help="Only run this category.")
    ] = None,
) -> None:
    """Run benchmarks and print the median timings."""
    selected = [b for b in BENCHMARKS if category is None or b.category == category]
    if not selected:
        CONSOLE.print(f"No benchmark in category {category!r}", style="bold red")
        raise typer.Exit(code=1)
    CONSOLE.print("Running benchmarks...", style="bold blue")
    rows = collect_timings(selected)

    table = Table(title="funkchain benchmarks")
    for column in ("category", "name", "size", "runs", "median (ms)"):
        table.add_column(column)
    for row in rows.values():
        table.add_row(
            row.category,
            row.name,
            str(row.size),
            str(row.runs),
            f"{row.median * 1000:.4f}",
        )
    CONSOLE.print(table)
    CONSOLE.print("✓ Benchmarks complete", style="bold green")


if __name__ == "__main__":
    app()
