"""Dispatch between listing and searching."""

from __future__ import annotations

import logging
import time

from ls2.core.lister import Emit, echo_line, list_tree
from ls2.core.matcher import search_tree
from ls2.models.output import INDENT_WIDTH, OutputStack
from ls2.utils import format_elapsed

log = logging.getLogger(__name__)


class TreeEngine:
    """Runs list or search mode over a directory tree."""

    def __init__(
        self,
        indent_width: int = INDENT_WIDTH,
        human_sizes: bool = False,
        emit: Emit = echo_line,
    ) -> None:
        self.indent_width = indent_width
        self.human_sizes = human_sizes
        self._emit = emit

    def run(self, root: str, pattern: str | None = None) -> None:
        """List ``root`` when no pattern is given, otherwise search it."""
        if pattern is None:
            self.list(root)
        else:
            self.search(root, pattern)

    def list(self, root: str) -> int:
        """Print the whole tree below ``root``; returns the line count."""
        started = time.monotonic()
        count = list_tree(
            root,
            0,
            indent_width=self.indent_width,
            human_sizes=self.human_sizes,
            emit=self._emit,
        )
        log.info("Listed %d entries under %s in %s", count, root, format_elapsed(time.monotonic() - started))
        return count

    def search(self, root: str, keyword: str) -> int:
        """Print matching files and their directories; returns the match count.

        Records are collected on a fresh stack during the walk and only
        printed once it has finished.
        """
        self._emit(f"Looking for: {keyword}")
        started = time.monotonic()

        out = OutputStack()
        search_tree(root, 0, keyword, out, indent_width=self.indent_width)

        matches = 0
        for record in out.drain():
            self._emit(str(record))
            if not record.is_dir:
                matches += 1

        log.info(
            "Found %d file(s) named %r under %s in %s",
            matches,
            keyword,
            root,
            format_elapsed(time.monotonic() - started),
        )
        return matches
