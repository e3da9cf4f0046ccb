"""Exact-name search that keeps only directories leading to a match."""

from __future__ import annotations

import logging

from ls2.core.walker import DirectoryOpenError, read_directory
from ls2.models.output import INDENT_WIDTH, OutputRecord, OutputStack

log = logging.getLogger(__name__)


def search_tree(
    dir_path: str,
    depth: int,
    keyword: str,
    out: OutputStack,
    *,
    indent_width: int = INDENT_WIDTH,
) -> bool:
    """Push records for files named ``keyword`` and the directories holding them.

    Subdirectories are searched before the next sibling is looked at,
    and ``dir_path`` itself is pushed only after all of its children,
    so a directory record always sits above its contents on ``out``.
    Only regular files whose name equals ``keyword`` (case-sensitive)
    match.

    Returns:
        True if ``dir_path`` contains a match at any depth.
    """
    try:
        entries = read_directory(dir_path)
    except DirectoryOpenError as exc:
        log.error("%s", exc)
        return False

    log.debug("Searching %s", dir_path)
    found = False
    for entry in entries:
        if entry.is_dir:
            if search_tree(entry.path, depth + 1, keyword, out, indent_width=indent_width):
                found = True
        elif entry.is_file and entry.name == keyword:
            found = True
            out.push(OutputRecord(entry.path, depth, indent_width=indent_width))

    if found:
        out.push(OutputRecord(dir_path, depth, is_dir=True, indent_width=indent_width))
    return found
