"""Filesystem access for the inliner."""

from .filesystem import normalize_line_endings, read_bytes, read_text

__all__ = ["normalize_line_endings", "read_bytes", "read_text"]
