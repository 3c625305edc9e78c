"""Domain models for unified diff hunks.

Parse-once pattern: raw hunk text is split and classified into type-safe models
at the boundary. Provides DiffLine, HunkHeader and Hunk with factory methods
for deterministic parsing.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"[0-9]+")

# Start values are signed 64-bit integers.
_MIN_START = -(2**63)
_MAX_START = 2**63 - 1


# ============================================================
# Errors
# ============================================================


class HeaderParseError(ValueError):
    """Raised when a hunk header's numeric fields cannot be parsed."""

    def __init__(self, field: str, header: str):
        self.field = field
        self.header = header
        super().__init__(f"failed to parse unidiff header value for {field}: {header!r}")


# ============================================================
# Line Splitting
# ============================================================


def split_lines(text: str) -> list[str]:
    """Split text into lines on newlines.

    A trailing newline does not produce an empty final line and a trailing
    carriage return is stripped from each line. Other separators recognised by
    str.splitlines() (form feeds, unicode line breaks) are kept as content.

    Args:
        text: Raw text

    Returns:
        List of lines without terminators
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


# ============================================================
# Domain Models
# ============================================================


class DiffLineType(Enum):
    """Type of line in a hunk body."""

    ADDED = "added"
    REMOVED = "removed"
    CONTEXT = "context"

    @classmethod
    def classify(cls, raw_line: str) -> DiffLineType:
        """Classify a body line by its leading marker character."""
        if raw_line.startswith("-"):
            return cls.REMOVED
        if raw_line.startswith("+"):
            return cls.ADDED
        return cls.CONTEXT


@dataclass(frozen=True)
class DiffLine:
    """A single line from a hunk body with metadata.

    Attributes:
        content: The line content (without the +/-/space prefix)
        raw_line: The original line including its prefix
        line_type: Whether this is an added, removed, or context line
        new_line_number: Line number in the new file (None for removed lines)
        old_line_number: Line number in the old file (None for added lines)
    """

    content: str
    raw_line: str
    line_type: DiffLineType
    new_line_number: int | None = None
    old_line_number: int | None = None

    @classmethod
    def from_raw(cls, raw_line: str) -> DiffLine:
        """Tag a raw body line. Line numbers are left unset."""
        line_type = DiffLineType.classify(raw_line)
        if line_type != DiffLineType.CONTEXT or raw_line.startswith(" "):
            content = raw_line[1:]
        else:
            content = raw_line
        return cls(content=content, raw_line=raw_line, line_type=line_type)


@dataclass(frozen=True)
class HunkHeader:
    """The `@@ -a,b +c,d @@` line that precedes a hunk body.

    Counts are optional in the source text and default to 1, as in git.
    """

    old_start: int
    old_lines: int
    new_start: int
    new_lines: int

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def parse(cls, header: str) -> HunkHeader:
        """Parse a header line.

        Only the two leading fields matter; a trailing annotation after the
        closing `@@` (usually a function name) is ignored. Start values are
        read as signed integers and their sign dropped, so `-8` and `+8` both
        yield 8.

        Args:
            header: The raw header line

        Returns:
            Parsed HunkHeader

        Raises:
            HeaderParseError: If either start value is missing or not an integer
        """
        fields = [f for f in re.split(r"[ @]", header) if f]
        old_field = fields[0] if fields else ""
        new_field = fields[1] if len(fields) > 1 else ""

        old_start, old_lines = _parse_range(old_field, "start line before", header)
        new_start, new_lines = _parse_range(new_field, "start line after", header)
        return cls(
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
        )

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def render(self) -> str:
        """Render the header in comma form, without annotation."""
        return f"@@ -{self.old_start},{self.old_lines} +{self.new_start},{self.new_lines} @@"


@dataclass(frozen=True)
class Hunk:
    """A single unified-diff hunk with its header values.

    `diff` holds the full text (header and body, newline terminated). The
    numeric fields mirror the header; `binary` is carried through from the
    producer and has no effect on line counting.
    """

    diff: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    binary: bool = False

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_diff(cls, diff: str, binary: bool = False) -> Hunk:
        """Build a Hunk from existing hunk text, reading values from its header.

        Raises:
            HeaderParseError: If the header is malformed
        """
        lines = split_lines(diff)
        header = HunkHeader.parse(lines[0] if lines else "")
        return cls(
            diff=diff,
            old_start=header.old_start,
            old_lines=header.old_lines,
            new_start=header.new_start,
            new_lines=header.new_lines,
            binary=binary,
        )

    def to_dict(self, annotate_lines: bool = False) -> dict:
        """Convert hunk to dictionary for JSON serialization.

        Args:
            annotate_lines: If True, diff will have line numbers prepended

        Returns:
            Dictionary with hunk data suitable for JSON output
        """
        diff = self.get_annotated_content() if annotate_lines else self.diff
        return {
            "old_start": self.old_start,
            "old_lines": self.old_lines,
            "new_start": self.new_start,
            "new_lines": self.new_lines,
            "binary": self.binary,
            "diff": diff,
        }

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def header(self) -> HunkHeader:
        return HunkHeader(
            old_start=self.old_start,
            old_lines=self.old_lines,
            new_start=self.new_start,
            new_lines=self.new_lines,
        )

    @property
    def body_lines(self) -> list[str]:
        """Raw body lines, header excluded."""
        return split_lines(self.diff)[1:]

    def get_diff_lines(self) -> list[DiffLine]:
        """Parse the hunk body into structured DiffLine objects.

        Returns:
            List of DiffLine objects with line numbers and types
        """
        diff_lines: list[DiffLine] = []
        old_line = self.old_start
        new_line = self.new_start

        for raw_line in self.body_lines:
            line = DiffLine.from_raw(raw_line)
            if line.line_type == DiffLineType.REMOVED:
                diff_lines.append(_with_numbers(line, old=old_line))
                old_line += 1
            elif line.line_type == DiffLineType.ADDED:
                diff_lines.append(_with_numbers(line, new=new_line))
                new_line += 1
            else:
                diff_lines.append(_with_numbers(line, old=old_line, new=new_line))
                old_line += 1
                new_line += 1

        return diff_lines

    def get_annotated_content(self) -> str:
        """Return hunk text with new file line numbers prepended.

        Format:
        - Added lines (+) and context lines get: "  5: +code here"
        - Removed lines (-) get: "   -: -removed code" (no line number)
        - The header line is preserved as-is

        Returns:
            Annotated hunk text, newline terminated
        """
        lines = split_lines(self.diff)
        annotated = lines[:1]
        for line in self.get_diff_lines():
            if line.new_line_number is None:
                annotated.append(f"   -: {line.raw_line}")
            else:
                annotated.append(f"{line.new_line_number:4d}: {line.raw_line}")
        return "\n".join(annotated) + "\n"

    def count_lines(self, line_type: DiffLineType) -> int:
        """Count body lines of the given type."""
        return sum(1 for line in self.get_diff_lines() if line.line_type == line_type)


# ============================================================
# Private Helpers
# ============================================================


def _parse_range(field: str, name: str, header: str) -> tuple[int, int]:
    """Parse a `start[,count]` header field into (abs(start), count)."""
    start_text, _, count_text = field.partition(",")
    start_text = start_text.strip()
    if not _SIGNED_INT.fullmatch(start_text):
        raise HeaderParseError(name, header)
    value = int(start_text)
    if not _MIN_START <= value <= _MAX_START:
        raise HeaderParseError(name, header)
    start = abs(value)

    count_text = count_text.strip()
    count = int(count_text) if _UNSIGNED_INT.fullmatch(count_text) else 1
    return start, count


def _with_numbers(line: DiffLine, old: int | None = None, new: int | None = None) -> DiffLine:
    return DiffLine(
        content=line.content,
        raw_line=line.raw_line,
        line_type=line.line_type,
        new_line_number=new,
        old_line_number=old,
    )
