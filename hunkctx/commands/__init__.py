"""Command orchestrators for hunkctx."""

from hunkctx.commands.expand import cmd_expand

__all__ = ["cmd_expand"]
