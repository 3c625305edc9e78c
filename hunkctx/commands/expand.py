"""Expand command.

Thin command that orchestrates hunk expansion. Reads a minimal hunk from stdin
or a file, reads the pre-change file from disk or git, and prints the hunk
with surrounding context lines added.
"""

from __future__ import annotations

import sys

from hunkctx.domain.diff import HeaderParseError, Hunk
from hunkctx.domain.settings import ExpanderSettings, SettingsError
from hunkctx.infrastructure.hunk_io import format_hunk, read_file_lines, read_hunk
from hunkctx.services.context_expander import hunk_with_context
from hunkctx.services.git_operations import (
    GitFileNotFoundError,
    GitOperationsService,
    GitRepositoryError,
)


def cmd_expand(
    hunk_file: str | None = None,
    before_file: str | None = None,
    file_path: str | None = None,
    ref: str | None = None,
    repo_path: str = ".",
    start_line: int | None = None,
    context_lines: int | None = None,
    binary: bool = False,
    output_format: str | None = None,
    annotate_lines: bool = False,
    config_file: str | None = None,
) -> int:
    """Expand a hunk with context lines and print it.

    The pre-change file is read from before_file when given, otherwise from
    file_path at ref in the git repository at repo_path.

    Args:
        hunk_file: Optional path to read the hunk from. If None, reads stdin.
        before_file: Path to the pre-change file on disk
        file_path: Repository path of the file, used with ref
        ref: Git revision holding the pre-change file
        repo_path: Path to local git repo (default: current directory)
        start_line: Old file start line. Defaults to the header's old start.
        context_lines: Context width, overriding the settings file
        binary: Mark the resulting hunk as binary
        output_format: 'diff', 'json' or 'text', overriding the settings file
        annotate_lines: If True, prepend new file line numbers to diff lines
        config_file: Optional settings file path

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    # --------------------------------------------------------
    # 1. Resolve settings
    # --------------------------------------------------------
    try:
        settings = ExpanderSettings.load(config_file).with_overrides(
            context_lines=context_lines,
            output_format=output_format,
        )
    except FileNotFoundError:
        print(f"Config file not found: {config_file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read config file {config_file}: {e}", file=sys.stderr)
        return 1
    except SettingsError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 2. Read hunk input
    # --------------------------------------------------------
    try:
        hunk_diff = read_hunk(hunk_file)
    except FileNotFoundError:
        print(f"Input file not found: {hunk_file}", file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        print(f"Failed to read hunk: {e}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 3. Read pre-change file lines
    # --------------------------------------------------------
    if before_file is not None:
        try:
            file_lines_before = read_file_lines(before_file)
        except FileNotFoundError:
            print(f"Before file not found: {before_file}", file=sys.stderr)
            return 1
        except (OSError, UnicodeDecodeError) as e:
            print(f"Failed to read before file: {e}", file=sys.stderr)
            return 1
    elif file_path is not None and ref is not None:
        try:
            file_lines_before = GitOperationsService(repo_path).get_file_lines(file_path, ref)
        except (GitRepositoryError, GitFileNotFoundError) as e:
            print(f"Failed to read {file_path} at {ref}: {e}", file=sys.stderr)
            return 1
    else:
        print("Either --before-file or both --path and --ref are required", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 4. Expand
    # --------------------------------------------------------
    try:
        if start_line is None:
            start_line = Hunk.from_diff(hunk_diff).old_start
        hunk = hunk_with_context(
            hunk_diff,
            start_line,
            binary,
            settings.context_lines,
            file_lines_before,
        )
    except HeaderParseError as e:
        print(f"Malformed hunk header ({e.field}): {e.header!r}", file=sys.stderr)
        return 1

    # --------------------------------------------------------
    # 5. Output in requested format
    # --------------------------------------------------------
    sys.stdout.write(format_hunk(hunk, settings.output_format, annotate_lines=annotate_lines))
    return 0
