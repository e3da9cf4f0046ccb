"""Reading one directory level with a link-aware stat."""

from __future__ import annotations

import logging
import os
import stat

from ls2.models.entry import DirectoryEntry, EntryKind

log = logging.getLogger(__name__)


class WalkError(Exception):
    """Filesystem failure met while walking a tree."""

    prefix = "Cannot access"

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{self.prefix} {path}: {cause.strerror or cause}")


class DirectoryOpenError(WalkError):
    """Raised when a directory cannot be opened or read."""

    prefix = "Cannot open directory"


class EntryStatusError(WalkError):
    """Raised when a directory child cannot be stat'ed."""

    prefix = "Cannot stat"


def entry_kind(mode: int) -> EntryKind:
    """Classify an ``st_mode`` value; symlinks count as OTHER."""
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    return EntryKind.OTHER


def read_directory(path: str) -> list[DirectoryEntry]:
    """Return the children of ``path`` in filesystem enumeration order.

    ``.`` and ``..`` are never returned. Child paths are ``path``, a
    separator and the name, so a root given as ``dir/`` yields
    ``dir//name``. Each child is stat'ed without following symlinks;
    children whose stat fails are logged and left out. The directory
    handle is closed before this returns, so callers can recurse without
    holding descriptors open.

    Raises:
        DirectoryOpenError: ``path`` cannot be opened or read.
    """
    entries: list[DirectoryEntry] = []
    try:
        with os.scandir(path) as it:
            for item in it:
                child = f"{path}{os.sep}{item.name}"
                try:
                    st = item.stat(follow_symlinks=False)
                except OSError as exc:
                    log.error("%s", EntryStatusError(child, exc))
                    continue
                kind = entry_kind(st.st_mode)
                entries.append(
                    DirectoryEntry(
                        name=item.name,
                        path=child,
                        kind=kind,
                        size_bytes=st.st_size if kind is EntryKind.FILE else 0,
                    )
                )
    except OSError as exc:
        raise DirectoryOpenError(path, exc) from exc
    return entries
