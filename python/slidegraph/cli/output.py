"""Result serialization and the human-readable run summary."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

import rich.box
from rich.table import Table

from slidegraph.engine.interner import Interner


def write_edges(edges: Iterable[tuple[int, int]], stream: TextIO) -> int:
    """Write one ``a,b`` line per edge in sorted order; return the count."""
    count = 0
    for a, b in sorted(edges):
        stream.write(f"{a},{b}\n")
        count += 1
    stream.flush()
    return count


def write_count(count: int, stream: TextIO) -> None:
    stream.write(f"{count}\n")
    stream.flush()


def write_nodes(nodes: Interner, filepath: Path) -> None:
    """Dump the node table as a JSON list of ``{"id", "positions"}``."""
    filepath.parent.mkdir(parents=True, exist_ok=True)
    data = [
        {"id": idx, "positions": configuration.to_json()}
        for idx, configuration in nodes
    ]
    filepath.write_text(json.dumps(data) + "\n")


def render_summary(
    mode: str,
    nodes: int,
    edges: int | None,
    steps: int,
    elapsed: float,
) -> Table:
    """Return a Rich table summarising one run."""
    table = Table(
        title="[bold cyan]slidegraph[/bold cyan]",
        show_header=False,
        box=rich.box.ROUNDED,
        border_style="bright_blue",
        padding=(0, 1),
    )
    table.add_column(style="dim")
    table.add_column(justify="right", style="bold white")

    table.add_row("Mode", mode)
    table.add_row("Configurations", f"{nodes:,}")
    if edges is not None:
        table.add_row("Transitions", f"{edges:,}")
    table.add_row("Steps", f"{steps:,}")
    table.add_row("Elapsed", f"{elapsed:.2f}s")
    return table
