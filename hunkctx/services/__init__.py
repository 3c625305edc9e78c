"""Services for hunkctx.

- context_expander: adds unchanged context lines around a hunk
- git_operations: reads pre-change file content from git
"""

from hunkctx.services.context_expander import hunk_with_context
from hunkctx.services.git_operations import (
    GitFileNotFoundError,
    GitOperationsService,
    GitRepositoryError,
)

__all__ = [
    "GitFileNotFoundError",
    "GitOperationsService",
    "GitRepositoryError",
    "hunk_with_context",
]
