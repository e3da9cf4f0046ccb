"""CLI interface for ls2."""

from __future__ import annotations

import logging
import sys

import click

from ls2.core.engine import TreeEngine
from ls2.settings import Settings

USAGE_ARGS = "<path> [exact-match-pattern]"


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


@click.command(name="ls2")
@click.argument("args", nargs=-1, metavar=USAGE_ARGS)
@click.option("-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)")
@click.option("--human", is_flag=True, help="Show file sizes as 1.5 KB instead of 1536 bytes (list mode)")
@click.pass_context
def main(ctx: click.Context, args: tuple[str, ...], verbose: int, human: bool) -> None:
    """List a directory tree, or search it for files with an exact name.

    With only PATH every file and directory below it is printed. With a
    pattern, only files named exactly PATTERN and the directories that
    contain them are printed.
    """
    _setup_logging(verbose)

    if not 1 <= len(args) <= 2:
        click.echo(f"Usage: {ctx.info_name} {USAGE_ARGS}")
        sys.exit(1)

    settings = Settings()
    engine = TreeEngine(
        indent_width=settings.indent_width,
        human_sizes=human or settings.human_sizes,
    )
    root = args[0]
    pattern = args[1] if len(args) == 2 else None
    engine.run(root, pattern)
