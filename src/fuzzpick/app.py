"""Root cyclopts App, command registration, and entry point."""

from __future__ import annotations

import sys

import cyclopts

from fuzzpick import __version__
from fuzzpick.exceptions import FuzzpickError
from fuzzpick.formatters import error_console

app = cyclopts.App(
    name="fuzzpick",
    help="Pick the best fuzzy match for a string from a list of candidates.",
    version=__version__,
)

from fuzzpick.commands.search import all_, best  # noqa: E402

app.command(best, name="best")
app.command(all_, name="all")


@app.command
def configure() -> None:
    """Configure the default case mode interactively."""
    from fuzzpick.config import CONFIG_FILE, save_config
    from fuzzpick.formatters import console
    from fuzzpick.utils.scoring import CASE_MODES, CASE_SMART

    console.print("[bold]fuzzpick Configuration[/]")
    console.print()

    case = input(f"Case mode ({'/'.join(CASE_MODES)}) [{CASE_SMART}]: ").strip() or CASE_SMART

    save_config(case)
    console.print(f"\n[green]Configuration saved to {CONFIG_FILE}[/]")


def main() -> None:
    """Entry point for the CLI."""
    from fuzzpick.config import resolve_verbose
    from fuzzpick.logging import setup_logging

    # Handle --verbose via sys.argv (before cyclopts parses)
    verbose = None
    if "--verbose" in sys.argv:
        sys.argv.remove("--verbose")
        verbose = True

    try:
        setup_logging(verbose=resolve_verbose(verbose))
        app()
    except FuzzpickError as exc:
        error_console.print(f"[bold red]Error:[/] {exc.message}")
        if exc.hint:
            error_console.print(f"[cyan]Hint:[/] {exc.hint}")
        sys.exit(exc.exit_code)
    except KeyboardInterrupt:
        sys.exit(130)
