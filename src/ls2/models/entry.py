"""Directory entry dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    """Type of a filesystem entry as seen by a link-aware stat."""

    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True, slots=True)
class DirectoryEntry:
    """Single child of a directory, read while walking its parent.

    ``size_bytes`` is only meaningful for regular files.
    """

    name: str
    path: str
    kind: EntryKind
    size_bytes: int = 0

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
