"""Command-line entry point.

Usage::

    slidegraph puzzle.json                 # print the edge list
    slidegraph puzzle.json -m reachable    # print the reachable count
    slidegraph puzzle.json -n nodes.json   # also dump the node table
"""

from __future__ import annotations

import sys
import time
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.text import Text

from slidegraph.cli.output import render_summary, write_count, write_edges, write_nodes
from slidegraph.engine.traversal import (
    DEFAULT_PROGRESS_EVERY,
    GraphGenerator,
    ReachabilityCounter,
)
from slidegraph.errors import SlideGraphError
from slidegraph.io import load_specification
from slidegraph.logging_utils import DEFAULT_LEVEL, setup_logging, stderr_console


class Mode(StrEnum):
    graph = "graph"
    reachable = "reachable"


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


app = typer.Typer(add_completion=False)


@app.command()
def main(
    filename: Path = typer.Argument(..., help="Puzzle document (JSON)."),
    mode: Mode = typer.Option(
        Mode.graph, "-m", "--mode",
        help="graph: print every edge.  reachable: print the configuration count.",
    ),
    progress_every: int = typer.Option(
        DEFAULT_PROGRESS_EVERY, "-p", "--progress-every",
        min=0,
        envvar="SLIDEGRAPH_PROGRESS_EVERY",
        help="Log a progress line every N steps (0 disables).",
    ),
    nodes: Optional[Path] = typer.Option(
        None, "-n", "--nodes",
        help="Write the node table to this JSON file (graph mode).",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel(DEFAULT_LEVEL), "-l", "--log-level",
        envvar="SLIDEGRAPH_LOG_LEVEL",
        help="Diagnostic verbosity on stderr.",
    ),
    summary: bool = typer.Option(
        True, "--summary/--no-summary",
        help="Print a summary table on stderr.",
    ),
) -> None:
    """Enumerate every reachable configuration of a sliding-block puzzle."""
    setup_logging(log_level.value)
    started = time.perf_counter()

    try:
        spec = load_specification(filename)

        if mode is Mode.reachable:
            counter = ReachabilityCounter(spec, progress_every)
            count = counter.count()
            write_count(count, sys.stdout)
            node_count, edge_count, steps = count, None, counter.steps
        else:
            result = GraphGenerator(spec, progress_every).generate()
            write_edges(result.edges, sys.stdout)
            if nodes is not None:
                write_nodes(result.nodes, nodes)
            node_count, edge_count, steps = (
                result.node_count,
                result.edge_count,
                result.steps,
            )
    except SlideGraphError as exc:
        stderr_console.print(Text.assemble(("error: ", "bold red"), str(exc)))
        raise typer.Exit(code=1) from exc

    if summary:
        stderr_console.print(
            render_summary(
                mode.value,
                node_count,
                edge_count,
                steps,
                time.perf_counter() - started,
            )
        )


if __name__ == "__main__":
    app()
