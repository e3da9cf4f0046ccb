"""Search output records and the stack that collects them."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from collections.abc import Iterator

from ls2.utils import indent

INDENT_WIDTH = 4


@dataclass(frozen=True, slots=True)
class OutputRecord:
    """One line of search output: an indented file or directory path."""

    path: str
    depth: int
    is_dir: bool = False
    indent_width: int = INDENT_WIDTH

    def __str__(self) -> str:
        suffix = os.sep if self.is_dir else ""
        return f"{indent(self.depth, self.indent_width)}{self.path}{suffix}"


@dataclass(slots=True)
class OutputStack:
    """Last-in-first-out collection of search records.

    Records are pushed while the tree is walked (children before the
    directory that holds them) and drained once afterwards, most recent
    first, so every directory line comes out above its contents.
    """

    _records: list[OutputRecord] = field(default_factory=list)

    def push(self, record: OutputRecord) -> None:
        self._records.append(record)

    def drain(self) -> Iterator[OutputRecord]:
        """Yield records newest first, emptying the stack as it goes."""
        while self._records:
            yield self._records.pop()

    def __len__(self) -> int:
        return len(self._records)

    def __bool__(self) -> bool:
        return bool(self._records)
