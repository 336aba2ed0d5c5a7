"""CLI commands for context-percent."""

from .commands import cmd_action, cmd_list

__all__ = ["cmd_list", "cmd_action"]
