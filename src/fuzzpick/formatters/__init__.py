"""Output formatting: results and JSON to stdout, Rich tables to stderr."""

from __future__ import annotations

import json
import sys
from typing import Any, Sequence

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)
error_console = Console(stderr=True)


def output_values(values: Sequence[str], *, as_json: bool = False) -> None:
    """Write matched candidates to stdout, one per line or as a JSON list."""
    if as_json:
        json.dump(list(values), sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    for value in values:
        sys.stdout.write(f"{value}\n")


def output_scores(
    data: Sequence[dict[str, Any]],
    *,
    title: str | None = None,
    as_json: bool = False,
) -> None:
    """Output scored matches as a table or JSON.

    Args:
        data: List of dicts with ``candidate`` and ``score`` keys.
        title: Optional table title.
        as_json: If True, output JSON to stdout instead of a table.
    """
    if as_json:
        json.dump(list(data), sys.stdout, indent=2, default=str, ensure_ascii=False)
        sys.stdout.write("\n")
        return

    table = Table(title=title, show_lines=True, padding=(0, 1))
    table.add_column("Candidate")
    table.add_column("Score", justify="right", style="bold cyan")

    for item in data:
        table.add_row(str(item.get("candidate", "")), str(item.get("score", "")))

    console.print(table)
