"""ls2 — recursive directory listing and exact-name file search."""

__version__ = "1.0.0"
