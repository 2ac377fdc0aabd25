"""Filesystem helpers for utf8sweep."""

from utf8sweep.fs.traversal import iter_files

__all__ = ["iter_files"]
