"""Domain models for hunkctx."""

from hunkctx.domain.diff import (
    DiffLine,
    DiffLineType,
    HeaderParseError,
    Hunk,
    HunkHeader,
    split_lines,
)
from hunkctx.domain.settings import ExpanderSettings, SettingsError

__all__ = [
    "DiffLine",
    "DiffLineType",
    "ExpanderSettings",
    "HeaderParseError",
    "Hunk",
    "HunkHeader",
    "SettingsError",
    "split_lines",
]
