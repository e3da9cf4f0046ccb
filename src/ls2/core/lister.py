"""Full tree listing, printed as it is walked."""

from __future__ import annotations

import logging
import os
from typing import Callable

import click

from ls2.core.walker import DirectoryOpenError, read_directory
from ls2.models.entry import DirectoryEntry
from ls2.models.output import INDENT_WIDTH
from ls2.utils import bytes_to_human, indent

log = logging.getLogger(__name__)

Emit = Callable[[str], None]


def echo_line(line: str) -> None:
    """Write one line to stdout as the raw bytes the filesystem gave us.

    Names that are not valid UTF-8 reach Python as lone surrogates;
    encoding them back keeps them printable on any stdout encoding.
    """
    click.echo(os.fsencode(line))


def format_entry(entry: DirectoryEntry, depth: int, indent_width: int = INDENT_WIDTH, human_sizes: bool = False) -> str:
    """Render one list-mode line for a file or directory."""
    pad = indent(depth, indent_width)
    if entry.is_dir:
        return f"{pad}{entry.name}/ (directory)"
    size = bytes_to_human(entry.size_bytes) if human_sizes else f"{entry.size_bytes} bytes"
    return f"{pad}{entry.name} ({size})"


def list_tree(
    root: str,
    depth: int = 0,
    *,
    indent_width: int = INDENT_WIDTH,
    human_sizes: bool = False,
    emit: Emit = echo_line,
) -> int:
    """Print every file and directory below ``root``, pre-order.

    Directories are printed before their contents, which are indented
    one level deeper. Symlinks and special files produce no line.
    Unreadable directories are logged and skipped.

    Returns:
        Number of lines emitted.
    """
    try:
        entries = read_directory(root)
    except DirectoryOpenError as exc:
        log.error("%s", exc)
        return 0

    log.debug("Listing %s (%d entries)", root, len(entries))
    emitted = 0
    for entry in entries:
        if not (entry.is_file or entry.is_dir):
            continue
        emit(format_entry(entry, depth, indent_width, human_sizes))
        emitted += 1
        if entry.is_dir:
            emitted += list_tree(
                entry.path,
                depth + 1,
                indent_width=indent_width,
                human_sizes=human_sizes,
                emit=emit,
            )
    return emitted
