"""Infrastructure for reading hunks and file content, and formatting output.

Handles reading hunk text from stdin or files, reading pre-change file lines
from disk, and converting expanded hunks to diff, JSON or text output.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

from hunkctx.domain.diff import DiffLineType, Hunk, split_lines


# ============================================================
# Input Functions
# ============================================================


def read_hunk_from_stdin() -> str:
    """Read hunk content from stdin.

    Returns:
        Raw hunk content as a string
    """
    return sys.stdin.read()


def read_hunk_from_file(path: str | Path) -> str:
    """Read hunk content from a file.

    Args:
        path: Path to the hunk file

    Returns:
        Raw hunk content as a string

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def read_hunk(input_file: str | None = None) -> str:
    """Read hunk content from stdin or a file.

    Args:
        input_file: Optional path to read from. If None, reads from stdin.

    Returns:
        Raw hunk content as a string
    """
    if input_file is None:
        return read_hunk_from_stdin()
    return read_hunk_from_file(input_file)


def read_file_lines(path: str | Path) -> list[str]:
    """Read a file from disk and split it into lines.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, encoding="utf-8", newline="") as f:
        return split_lines(f.read())


# ============================================================
# Output Functions
# ============================================================


def format_hunk_as_json(hunk: Hunk, annotate_lines: bool = False) -> str:
    """Format a Hunk as JSON.

    Args:
        hunk: Expanded Hunk instance
        annotate_lines: If True, diff text will have line numbers prepended

    Returns:
        JSON string representation of the hunk
    """
    return json.dumps(hunk.to_dict(annotate_lines=annotate_lines), indent=2)


def format_hunk_as_text(hunk: Hunk) -> str:
    """Format a Hunk as human-readable text for debugging.

    Args:
        hunk: Expanded Hunk instance

    Returns:
        Text summary showing old and new line ranges
    """
    lines = [
        f"Header: {hunk.header.render()}",
        f"  Old: lines {_describe_range(hunk.old_start, hunk.old_lines)}",
        f"  New: lines {_describe_range(hunk.new_start, hunk.new_lines)}",
        f"  Removed: {hunk.count_lines(DiffLineType.REMOVED)}",
        f"  Added: {hunk.count_lines(DiffLineType.ADDED)}",
        f"  Context: {hunk.count_lines(DiffLineType.CONTEXT)}",
    ]
    if hunk.binary:
        lines.append("  Binary: yes")
    return "\n".join(lines)


def format_hunk(hunk: Hunk, output_format: str = "diff", annotate_lines: bool = False) -> str:
    """Format a Hunk in the requested output format.

    Diff output is the hunk text itself, which already ends with a newline.
    """
    if output_format == "json":
        return format_hunk_as_json(hunk, annotate_lines=annotate_lines) + "\n"
    if output_format == "text":
        return format_hunk_as_text(hunk) + "\n"
    if annotate_lines:
        return hunk.get_annotated_content()
    return hunk.diff


def _describe_range(start: int, count: int) -> str:
    if count == 0:
        return f"none after {start} (0 lines)"
    return f"{start}-{start + count - 1} ({count} lines)"
