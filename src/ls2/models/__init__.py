"""ls2 data models."""

from ls2.models.entry import DirectoryEntry, EntryKind
from ls2.models.output import OutputRecord, OutputStack

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "OutputRecord",
    "OutputStack",
]
