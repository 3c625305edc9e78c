#!/usr/bin/env python3
"""CLI entry point for hunkctx.

Usage:
    python -m hunkctx <command> [options]
    hunkctx <command> [options]

Commands:
    expand    Add surrounding context lines to a minimal hunk
"""

import argparse
import sys

from hunkctx.commands.expand import cmd_expand


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be non-negative: {value}")
    return number


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Add surrounding context lines to unified diff hunks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  expand    Add surrounding context lines to a minimal hunk

Examples:
  git diff -U0 Cargo.toml | tail -n +5 | hunkctx expand --path Cargo.toml --ref HEAD
  hunkctx expand --hunk-file change.diff --before-file Cargo.toml --context-lines 5
  hunkctx expand --hunk-file change.diff --before-file Cargo.toml --format json
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # expand command
    parser_expand = subparsers.add_parser(
        "expand",
        help="Add surrounding context lines to a minimal hunk",
    )
    parser_expand.add_argument(
        "--hunk-file",
        help="Path to hunk file. If not provided, reads from stdin",
    )
    parser_expand.add_argument(
        "--before-file",
        help="Path to the file content before the change",
    )
    parser_expand.add_argument(
        "--path",
        dest="file_path",
        help="Repository path of the changed file (used with --ref)",
    )
    parser_expand.add_argument(
        "--ref",
        help="Git revision holding the file before the change",
    )
    parser_expand.add_argument(
        "--repo",
        default=".",
        help="Path to local git repository (default: current directory)",
    )
    parser_expand.add_argument(
        "--start-line",
        type=int,
        help="Old file line where the change starts (default: from hunk header)",
    )
    parser_expand.add_argument(
        "--context-lines",
        type=_non_negative_int,
        help="Unchanged lines to add on each side (default: 3, or config value)",
    )
    parser_expand.add_argument(
        "--binary",
        action="store_true",
        help="Mark the hunk as binary",
    )
    parser_expand.add_argument(
        "--format",
        choices=["diff", "json", "text"],
        help="Output format (default: diff, or config value)",
    )
    parser_expand.add_argument(
        "--annotate-lines",
        action="store_true",
        help="Prepend new file line numbers to each diff line (e.g., '  5: +code')",
    )
    parser_expand.add_argument(
        "--config",
        help="Path to settings file (default: .hunkctx.yml if present)",
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "expand":
        return cmd_expand(
            hunk_file=args.hunk_file,
            before_file=args.before_file,
            file_path=args.file_path,
            ref=args.ref,
            repo_path=args.repo,
            start_line=args.start_line,
            context_lines=args.context_lines,
            binary=args.binary,
            output_format=args.format,
            annotate_lines=args.annotate_lines,
            config_file=args.config,
        )

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
