"""Hunk context expansion.

Turns a minimal hunk (changed lines only) into one carrying up to N unchanged
lines on each side, read from the pre-change file, and rewrites the @@ header
to match. Requests reaching past either end of the file are clamped to the
lines that exist.
"""

from __future__ import annotations

from collections.abc import Sequence

from hunkctx.domain.diff import DiffLine, DiffLineType, HunkHeader, Hunk, split_lines


def hunk_with_context(
    hunk_diff: str,
    hunk_start_line: int,
    is_binary: bool,
    context_lines: int,
    file_lines_before: Sequence[str],
) -> Hunk:
    """Add surrounding context lines to a hunk.

    Args:
        hunk_diff: Hunk text, header first, with no context lines
        hunk_start_line: 1-based line in the old file where the change starts
        is_binary: Passed through to the result unchanged
        context_lines: Maximum unchanged lines to add on each side
        file_lines_before: Lines of the file before the change

    Returns:
        New Hunk with context and a recomputed header

    Raises:
        HeaderParseError: If the header start values are not integers
        ValueError: If context_lines is negative
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be non-negative, got {context_lines}")

    diff_lines = split_lines(hunk_diff)
    header_line = diff_lines[0] if diff_lines else ""
    body = diff_lines[1:]
    header = HunkHeader.parse(header_line)

    tagged = [DiffLine.from_raw(line) for line in body]
    removed_count = sum(1 for line in tagged if line.line_type == DiffLineType.REMOVED)
    added_count = sum(1 for line in tagged if line.line_type == DiffLineType.ADDED)

    context_before = _context_before(hunk_start_line, context_lines, file_lines_before)
    context_after = _context_after(
        hunk_start_line + removed_count, context_lines, file_lines_before
    )

    context_count = len(context_before) + len(context_after)
    new_header = HunkHeader(
        old_start=max(header.old_start - len(context_before), 0),
        old_lines=removed_count + context_count,
        new_start=max(header.new_start - len(context_before), 0),
        new_lines=added_count + context_count,
    )

    lines = [new_header.render(), *context_before, *body, *context_after]
    return Hunk(
        diff="\n".join(lines) + "\n",
        old_start=new_header.old_start,
        old_lines=new_header.old_lines,
        new_start=new_header.new_start,
        new_lines=new_header.new_lines,
        binary=is_binary,
    )


def _context_before(
    hunk_start_line: int,
    context_lines: int,
    file_lines_before: Sequence[str],
) -> list[str]:
    """Collect up to context_lines lines preceding the hunk, in file order."""
    context: list[str] = []
    for i in range(1, context_lines + 1):
        if hunk_start_line <= i:
            break
        idx = hunk_start_line - i - 1
        if idx < len(file_lines_before):
            context.append(f" {file_lines_before[idx]}")
    context.reverse()
    return context


def _context_after(
    first_line_after: int,
    context_lines: int,
    file_lines_before: Sequence[str],
) -> list[str]:
    """Collect up to context_lines lines from first_line_after (1-based) on."""
    context: list[str] = []
    for i in range(context_lines):
        idx = first_line_after + i - 1
        if 0 <= idx < len(file_lines_before):
            context.append(f" {file_lines_before[idx]}")
    return context
