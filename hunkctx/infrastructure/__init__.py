"""Infrastructure components for hunkctx.

This layer handles external system interactions:
- Reading hunks from stdin or files
- Reading pre-change file content from disk
- Output formatting
"""

from .hunk_io import (
    format_hunk,
    format_hunk_as_json,
    format_hunk_as_text,
    read_file_lines,
    read_hunk,
    read_hunk_from_file,
    read_hunk_from_stdin,
)

__all__ = [
    "format_hunk",
    "format_hunk_as_json",
    "format_hunk_as_text",
    "read_file_lines",
    "read_hunk",
    "read_hunk_from_file",
    "read_hunk_from_stdin",
]
