"""Tests for hunk context expansion.

Tests cover:
- Single-line replacements mid-file, near the top, at the top and near the bottom
- Header renumbering and line counts
- Clamping at file start and file end
- Zero context width
- Header parse failures
- Trailing newline and carriage return handling
"""

from __future__ import annotations

import unittest

from hunkctx.domain.diff import DiffLineType, HeaderParseError, Hunk, HunkHeader, split_lines
from hunkctx.services.context_expander import hunk_with_context

FILE_LINES = [
    "[package]",
    'name = "gitbutler-core"',
    'version = "0.0.0"',
    'edition = "2021"',
    "",
    "[features]",
    'default = ["serde", "rusqlite"]',
    'serde = ["dep:serde", "uuid/serde"]',
    'rusqlite = ["dep:rusqlite"]',
    "",
    "[dependencies]",
    "rusqlite = { workspace = true, optional = true }",
    "serde = { workspace = true, optional = true }",
    'uuid = { workspace = true, features = ["v4", "fast-rng"] }',
]


def _join(*lines: str) -> str:
    return "\n".join(lines) + "\n"


class TestReplaceSingleLine(unittest.TestCase):
    """Tests for single-line replacements at various positions in the file."""

    def test_replace_line_mid_file(self):
        hunk_diff = _join(
            '@@ -8 +8 @@ default = ["serde", "rusqlite"]',
            '-serde = ["dep:serde", "uuid/serde"]',
            '+SERDE = ["dep:serde", "uuid/serde"]',
        )

        hunk = hunk_with_context(hunk_diff, 8, False, 3, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -5,7 +5,7 @@",
                " ",
                " [features]",
                ' default = ["serde", "rusqlite"]',
                '-serde = ["dep:serde", "uuid/serde"]',
                '+SERDE = ["dep:serde", "uuid/serde"]',
                ' rusqlite = ["dep:rusqlite"]',
                " ",
                " [dependencies]",
            ),
        )
        self.assertEqual(hunk.old_start, 5)
        self.assertEqual(hunk.old_lines, 7)
        self.assertEqual(hunk.new_start, 5)
        self.assertEqual(hunk.new_lines, 7)

    def test_replace_line_top_file(self):
        hunk_diff = _join(
            "@@ -2 +2 @@",
            '-name = "gitbutler-core"',
            '+NAME = "gitbutler-core"',
        )

        hunk = hunk_with_context(hunk_diff, 2, False, 3, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -1,5 +1,5 @@",
                " [package]",
                '-name = "gitbutler-core"',
                '+NAME = "gitbutler-core"',
                ' version = "0.0.0"',
                ' edition = "2021"',
                " ",
            ),
        )
        self.assertEqual(hunk.old_start, 1)
        self.assertEqual(hunk.old_lines, 5)
        self.assertEqual(hunk.new_start, 1)
        self.assertEqual(hunk.new_lines, 5)

    def test_replace_line_start_file(self):
        hunk_diff = _join("@@ -1 +1 @@", "-[package]", "+[PACKAGE]")

        hunk = hunk_with_context(hunk_diff, 1, False, 3, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -1,4 +1,4 @@",
                "-[package]",
                "+[PACKAGE]",
                ' name = "gitbutler-core"',
                ' version = "0.0.0"',
                ' edition = "2021"',
            ),
        )
        self.assertEqual(hunk.old_start, 1)
        self.assertEqual(hunk.old_lines, 4)
        self.assertEqual(hunk.new_start, 1)
        self.assertEqual(hunk.new_lines, 4)

    def test_replace_line_bottom_file(self):
        hunk_diff = _join(
            "@@ -13 +13 @@",
            "-serde = { workspace = true, optional = true }",
            "+SERDE = { workspace = true, optional = true }",
        )

        hunk = hunk_with_context(hunk_diff, 13, False, 3, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -10,5 +10,5 @@",
                " ",
                " [dependencies]",
                " rusqlite = { workspace = true, optional = true }",
                "-serde = { workspace = true, optional = true }",
                "+SERDE = { workspace = true, optional = true }",
                ' uuid = { workspace = true, features = ["v4", "fast-rng"] }',
            ),
        )
        self.assertEqual(hunk.old_start, 10)
        self.assertEqual(hunk.old_lines, 5)
        self.assertEqual(hunk.new_start, 10)
        self.assertEqual(hunk.new_lines, 5)

    def test_replace_last_line_has_no_context_after(self):
        hunk_diff = _join("@@ -14 +14 @@", "-uuid = 1", "+uuid = 2")

        hunk = hunk_with_context(hunk_diff, 14, False, 3, FILE_LINES)

        self.assertEqual(hunk.old_start, 11)
        self.assertEqual(hunk.old_lines, 4)
        self.assertEqual(hunk.new_lines, 4)
        self.assertTrue(hunk.diff.endswith("+uuid = 2\n"))


class TestMultiLineChanges(unittest.TestCase):
    """Tests for hunks with uneven removed and added counts."""

    def test_two_removed_one_added(self):
        hunk_diff = _join(
            "@@ -7,2 +7 @@",
            '-default = ["serde", "rusqlite"]',
            '-serde = ["dep:serde", "uuid/serde"]',
            '+default = []',
        )

        hunk = hunk_with_context(hunk_diff, 7, False, 2, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -5,6 +5,5 @@",
                " ",
                " [features]",
                '-default = ["serde", "rusqlite"]',
                '-serde = ["dep:serde", "uuid/serde"]',
                "+default = []",
                ' rusqlite = ["dep:rusqlite"]',
                " ",
            ),
        )
        self.assertEqual(hunk.old_lines, 6)
        self.assertEqual(hunk.new_lines, 5)

    def test_pure_addition_counts_only_context_in_old_file(self):
        hunk_diff = _join("@@ -4,0 +4,2 @@", "+a = 1", "+b = 2")

        hunk = hunk_with_context(hunk_diff, 4, False, 3, FILE_LINES)

        self.assertEqual(hunk.old_start, 1)
        self.assertEqual(hunk.new_start, 1)
        self.assertEqual(hunk.old_lines, 6)
        self.assertEqual(hunk.new_lines, 8)

    def test_header_counts_match_body(self):
        hunk_diff = _join(
            "@@ -11,2 +11,3 @@",
            "-[dependencies]",
            "-rusqlite = { workspace = true, optional = true }",
            "+[dependencies]",
            "+anyhow = \"1\"",
            "+rusqlite = { workspace = true }",
        )

        hunk = hunk_with_context(hunk_diff, 11, False, 3, FILE_LINES)

        self.assertEqual(hunk.old_lines, hunk.count_lines(DiffLineType.REMOVED) + hunk.count_lines(DiffLineType.CONTEXT))
        self.assertEqual(hunk.new_lines, hunk.count_lines(DiffLineType.ADDED) + hunk.count_lines(DiffLineType.CONTEXT))
        self.assertEqual(hunk.header, HunkHeader.parse(split_lines(hunk.diff)[0]))


class TestContextWidth(unittest.TestCase):
    """Tests for context width edge cases."""

    def test_zero_context_lines_renumbers_header_only(self):
        hunk_diff = _join(
            '@@ -8 +8 @@ default = ["serde", "rusqlite"]',
            '-serde = ["dep:serde", "uuid/serde"]',
            '+SERDE = ["dep:serde", "uuid/serde"]',
        )

        hunk = hunk_with_context(hunk_diff, 8, False, 0, FILE_LINES)

        self.assertEqual(
            hunk.diff,
            _join(
                "@@ -8,1 +8,1 @@",
                '-serde = ["dep:serde", "uuid/serde"]',
                '+SERDE = ["dep:serde", "uuid/serde"]',
            ),
        )

    def test_width_larger_than_file_is_clamped(self):
        hunk_diff = _join("@@ -8 +8 @@", "-x", "+y")

        hunk = hunk_with_context(hunk_diff, 8, False, 100, FILE_LINES)

        self.assertEqual(hunk.old_start, 1)
        self.assertEqual(hunk.old_lines, len(FILE_LINES))
        self.assertEqual(hunk.new_lines, len(FILE_LINES))

    def test_negative_context_lines_raises(self):
        with self.assertRaises(ValueError):
            hunk_with_context("@@ -1 +1 @@\n-a\n+b\n", 1, False, -1, FILE_LINES)

    def test_empty_file_adds_no_context(self):
        hunk = hunk_with_context("@@ -1 +1 @@\n-a\n+b\n", 1, False, 3, [])

        self.assertEqual(hunk.diff, "@@ -1,1 +1,1 @@\n-a\n+b\n")

    def test_new_file_start_line_zero(self):
        hunk = hunk_with_context("@@ -0,0 +1 @@\n+first\n", 0, False, 3, FILE_LINES)

        self.assertEqual(hunk.old_start, 0)
        self.assertEqual(hunk.new_start, 1)
        self.assertEqual(
            hunk.diff,
            _join("@@ -0,2 +1,3 @@", "+first", " [package]", ' name = "gitbutler-core"'),
        )


class TestHeaderParsing(unittest.TestCase):
    """Tests for header parse failures and tolerated header forms."""

    def test_non_numeric_start_before_raises(self):
        with self.assertRaises(HeaderParseError) as ctx:
            hunk_with_context("@@ -x +8 @@\n-a\n+b\n", 8, False, 3, FILE_LINES)

        self.assertEqual(ctx.exception.field, "start line before")
        self.assertIn("start line before", str(ctx.exception))

    def test_non_numeric_start_after_raises(self):
        with self.assertRaises(HeaderParseError) as ctx:
            hunk_with_context("@@ -8 +y,2 @@\n-a\n+b\n", 8, False, 3, FILE_LINES)

        self.assertEqual(ctx.exception.field, "start line after")

    def test_empty_hunk_raises(self):
        with self.assertRaises(HeaderParseError):
            hunk_with_context("", 1, False, 3, FILE_LINES)

    def test_header_with_single_field_raises(self):
        with self.assertRaises(HeaderParseError) as ctx:
            hunk_with_context("@@ -8,1 @@\n-a\n", 8, False, 3, FILE_LINES)

        self.assertEqual(ctx.exception.field, "start line after")

    def test_comma_form_uses_leading_number(self):
        hunk = hunk_with_context("@@ -8,1 +8,1 @@\n-a\n+b\n", 8, False, 1, FILE_LINES)

        self.assertEqual(hunk.old_start, 7)
        self.assertEqual(hunk.new_start, 7)

    def test_annotation_is_dropped(self):
        hunk = hunk_with_context("@@ -8 +9 @@ fn main() {\n-a\n+b\n", 8, False, 0, FILE_LINES)

        self.assertEqual(split_lines(hunk.diff)[0], "@@ -8,1 +9,1 @@")


class TestSerialization(unittest.TestCase):
    """Tests for output text and passthrough fields."""

    def test_missing_trailing_newline_is_added(self):
        hunk = hunk_with_context("@@ -1 +1 @@\n-[package]\n+[PACKAGE]", 1, False, 1, FILE_LINES)

        self.assertTrue(hunk.diff.endswith('\n name = "gitbutler-core"\n'))
        self.assertFalse(hunk.diff.endswith("\n\n"))

    def test_carriage_returns_are_stripped(self):
        hunk = hunk_with_context("@@ -1 +1 @@\r\n-[package]\r\n+[PACKAGE]\r\n", 1, False, 0, FILE_LINES)

        self.assertEqual(hunk.diff, "@@ -1,1 +1,1 @@\n-[package]\n+[PACKAGE]\n")

    def test_binary_flag_is_passed_through(self):
        hunk = hunk_with_context("@@ -1 +1 @@\n-a\n+b\n", 1, True, 3, FILE_LINES)

        self.assertTrue(hunk.binary)
        self.assertIsInstance(hunk, Hunk)

    def test_input_is_not_mutated(self):
        lines = list(FILE_LINES)

        hunk_with_context("@@ -8 +8 @@\n-a\n+b\n", 8, False, 3, lines)

        self.assertEqual(lines, FILE_LINES)


if __name__ == "__main__":
    unittest.main()
