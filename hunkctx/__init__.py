"""hunkctx - context expansion for unified diff hunks.

Takes a minimal hunk (changed lines only) plus the file it was produced
from and returns the hunk with unchanged lines added around the change and
a recomputed @@ header.

Usage:
    python -m hunkctx expand [options]
    hunkctx expand [options]

Structure:
    hunkctx/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── diff.py          # Hunk, HunkHeader, DiffLine
    │   └── settings.py      # ExpanderSettings
    ├── services/            # Core logic
    │   ├── context_expander.py
    │   └── git_operations.py
    ├── infrastructure/      # Input and output
    │   └── hunk_io.py
    └── commands/            # Thin command orchestrators
        └── expand.py
"""

from hunkctx.domain.diff import HeaderParseError, Hunk
from hunkctx.services.context_expander import hunk_with_context

__all__ = ["HeaderParseError", "Hunk", "hunk_with_context"]
