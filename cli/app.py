"""Command-line entry point for grid-menu.

Shows the menu on stderr and prints the chosen option on stdout, so shell
scripts can capture it:

    TIMEZONE=$(grid-menu "Select timezone:" --file timezones.txt) || exit 1

Exit status:
    0    an option was selected
    1    cancelled, no options, closed input or stdin is not a terminal
    130  interrupted with Ctrl+C
"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from rich.console import Console
from rich.markup import escape

from grid_menu import GridMenu, MenuOutcome, MenuResult, select_numbered

from .config import (
    DEFAULT_CONFIG_PATH,
    config_escape_timeout,
    config_max_rows,
    load_cli_config,
    save_cli_config,
)

EXIT_SELECTED = 0
EXIT_NOT_SELECTED = 1
EXIT_INTERRUPTED = 130


def exit_code_for(result: MenuResult) -> int:
    if result.ok:
        return EXIT_SELECTED
    if result.outcome is MenuOutcome.INTERRUPTED:
        return EXIT_INTERRUPTED
    return EXIT_NOT_SELECTED


def read_options_file(path: str) -> list[str]:
    """Read one option per line, skipping blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.rstrip("\r\n") for line in f if line.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-menu",
        description="Pick one option from a keyboard-driven terminal menu.",
    )
    parser.add_argument("prompt", help="Text shown above the menu")
    parser.add_argument("options", nargs="*", help="Options, in display order")
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Read additional options from PATH, one per line",
    )
    parser.add_argument(
        "--max-rows",
        type=int,
        default=None,
        help="Rows per column (default: from config, else 4)",
    )
    parser.add_argument(
        "--numbered",
        action="store_true",
        help="Use a numbered list and typed choice instead of the grid",
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help=f"Store the effective --max-rows in {DEFAULT_CONFIG_PATH}",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        default=DEFAULT_CONFIG_PATH,
        help=argparse.SUPPRESS,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Show the layout and outcome on stderr",
    )
    return parser


def run(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """Parse arguments, show the menu and return the exit status."""
    console = console or Console(stderr=True, highlight=False)
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_cli_config(args.config)
    max_rows = args.max_rows if args.max_rows is not None else config_max_rows(config)
    if max_rows < 1:
        parser.error("--max-rows must be at least 1")

    options = list(args.options)
    if args.file:
        try:
            options.extend(read_options_file(args.file))
        except OSError as e:
            console.print(
                f"[red]Error:[/red] cannot read {escape(args.file)}: {escape(str(e))}"
            )
            return EXIT_NOT_SELECTED

    if args.save_defaults:
        config["max_rows"] = max_rows
        try:
            save_cli_config(config, args.config)
        except OSError as e:
            console.print(
                f"[yellow]Warning:[/yellow] could not save config: {escape(str(e))}"
            )

    if not options:
        console.print("[red]Error:[/red] no options given")
        return EXIT_NOT_SELECTED

    if args.numbered:
        selected, ok = select_numbered(args.prompt, options, stdout=sys.stderr)
        if not ok:
            return EXIT_NOT_SELECTED
        print(selected)
        return EXIT_SELECTED

    menu = GridMenu(
        args.prompt,
        options,
        max_rows,
        output=sys.stderr,
        escape_timeout=config_escape_timeout(config),
    )
    result = menu.run()

    if args.debug:
        layout = menu.layout
        if layout is not None:
            console.print(
                f"[dim]layout: rows={layout.rows} cols={layout.cols} "
                f"cell_width={layout.cell_width}[/dim]"
            )
        console.print(f"[dim]outcome: {result.outcome.value}[/dim]")

    if result.outcome is MenuOutcome.NOT_A_TTY:
        console.print(
            "[red]Error:[/red] stdin is not a terminal; use --numbered for piped input"
        )
    if result.ok:
        print(result.selected)
    return exit_code_for(result)


def main() -> None:
    """Entry point for the grid-menu command."""
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)


if __name__ == "__main__":
    main()
