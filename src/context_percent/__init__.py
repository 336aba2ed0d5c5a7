"""Context window usage widgets for the Claude Code status line."""

__version__ = "0.1.0"
