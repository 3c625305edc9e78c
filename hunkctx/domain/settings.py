"""Configuration model for hunk expansion.

Settings are read from a YAML mapping (by default `.hunkctx.yml` in the
working directory). Command-line flags override file values.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

DEFAULT_CONFIG_FILENAME = ".hunkctx.yml"
DEFAULT_CONTEXT_LINES = 3
OUTPUT_FORMATS = ("diff", "json", "text")


class SettingsError(ValueError):
    """Raised when a configuration file has invalid contents."""

    pass


@dataclass(frozen=True)
class ExpanderSettings:
    """Settings for the expand command.

    Attributes:
        context_lines: Unchanged lines to add before and after a change
        output_format: One of "diff", "json" or "text"
    """

    context_lines: int = DEFAULT_CONTEXT_LINES
    output_format: str = "diff"

    def __post_init__(self):
        if isinstance(self.context_lines, bool) or not isinstance(self.context_lines, int):
            raise SettingsError(f"context_lines must be an integer, got {self.context_lines!r}")
        if self.context_lines < 0:
            raise SettingsError(f"context_lines must be non-negative, got {self.context_lines}")
        if self.output_format not in OUTPUT_FORMATS:
            raise SettingsError(
                f"Invalid output_format: {self.output_format}. "
                f"Must be one of: {', '.join(OUTPUT_FORMATS)}"
            )

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_yaml_text(cls, text: str) -> ExpanderSettings:
        """Parse settings from YAML text.

        Unknown keys are ignored. An empty document yields the defaults.

        Raises:
            SettingsError: If the YAML is malformed or values are invalid
        """
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in settings: {e}")

        if not isinstance(data, dict):
            raise SettingsError("Settings must be a YAML mapping")

        kwargs = {}
        if "context_lines" in data:
            kwargs["context_lines"] = data["context_lines"]
        if "output_format" in data:
            kwargs["output_format"] = str(data["output_format"]).lower()
        return cls(**kwargs)

    @classmethod
    def from_file(cls, path: str | Path) -> ExpanderSettings:
        """Load settings from a YAML file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            SettingsError: If the contents are invalid
        """
        return cls.from_yaml_text(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def load(cls, path: str | Path | None = None) -> ExpanderSettings:
        """Load settings from an explicit path, the default file, or defaults.

        An explicit path must exist. The default file is only read when present.
        """
        if path is not None:
            return cls.from_file(path)
        default_path = Path(DEFAULT_CONFIG_FILENAME)
        if default_path.is_file():
            return cls.from_file(default_path)
        return cls()

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def with_overrides(
        self,
        context_lines: int | None = None,
        output_format: str | None = None,
    ) -> ExpanderSettings:
        """Return a copy with any non-None values replaced."""
        changes = {}
        if context_lines is not None:
            changes["context_lines"] = context_lines
        if output_format is not None:
            changes["output_format"] = output_format
        return replace(self, **changes)
