"""Git operations service.

Reads pre-change file content out of a git repository so it can be used as
context for hunk expansion. Encapsulates all subprocess calls to git.
"""

import subprocess
from pathlib import Path

from hunkctx.domain.diff import split_lines


class GitFileNotFoundError(Exception):
    """Raised when file doesn't exist at specified commit."""

    pass


class GitRepositoryError(Exception):
    """Raised when directory is not a git repository."""

    pass


class GitOperationsService:
    """Core service for git command operations.

    Encapsulates all subprocess calls to git commands.
    """

    def __init__(self, repo_path: str = "."):
        """Initialize with repository path.

        Args:
            repo_path: Path to git repository (default: current directory)
        """
        self.repo_path = Path(repo_path)

    def is_git_repository(self) -> bool:
        """Check if repo_path is inside a git repository.

        Returns:
            True if valid git repo, False otherwise
        """
        try:
            subprocess.run(
                ["git", "rev-parse", "--git-dir"],
                cwd=self.repo_path,
                capture_output=True,
                check=True,
            )
            return True
        except (subprocess.CalledProcessError, FileNotFoundError):
            return False

    def get_file_content(self, file_path: str, ref: str) -> str:
        """Get file content at a specific commit.

        Args:
            file_path: Path to file in repository
            ref: Git commit SHA, branch name or other revision

        Returns:
            File content as string

        Raises:
            GitFileNotFoundError: If file doesn't exist at ref, or is not UTF-8 text
            GitRepositoryError: If not in a git repository
        """
        if not self.is_git_repository():
            raise GitRepositoryError(
                f"Not a git repository: {self.repo_path}\n"
                "Make sure you're running from within a git repository."
            )

        try:
            result = subprocess.run(
                ["git", "show", f"{ref}:{file_path}"],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                check=True,
            )
            return result.stdout
        except subprocess.CalledProcessError as e:
            raise GitFileNotFoundError(
                f"File {file_path} not found at {ref}: {e.stderr}"
            )
        except UnicodeDecodeError as e:
            raise GitFileNotFoundError(
                f"File {file_path} at {ref} is not valid UTF-8 text: {e}"
            )

    def get_file_lines(self, file_path: str, ref: str) -> list[str]:
        """Get file content at a specific commit, split into lines.

        Raises:
            GitFileNotFoundError: If file doesn't exist at ref, or is not UTF-8 text
            GitRepositoryError: If not in a git repository
        """
        return split_lines(self.get_file_content(file_path, ref))
