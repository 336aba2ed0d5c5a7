#!/usr/bin/env python3

import argparse
import json
import sys

from typing import Any, Optional, cast

from .renderer import render_status_line_with_config
from .types import ContextWindow, RenderContext, TokenMetrics
from .utils.debug import debug_log


def parse_input_data() -> dict[str, Any]:
    """Parse JSON input from stdin and return as dict.

    Returns:
        Dictionary with Claude Code JSON payload
    """
    try:
        input_data = sys.stdin.read()
        data = json.loads(input_data)
        return cast(dict[str, Any], data) if isinstance(data, dict) else {}
    except (json.JSONDecodeError, ValueError):
        return {}


def extract_context_window(data: dict[str, Any]) -> Optional[ContextWindow]:
    """Extract context_window data from Claude Code payload.

    Args:
        data: JSON input data from Claude Code

    Returns:
        ContextWindow if data is present and valid, None otherwise
    """
    cw = data.get("context_window")
    if not cw or not isinstance(cw, dict):
        return None

    if "context_window_size" not in cw:
        return None

    current_usage = cw.get("current_usage")
    if not isinstance(current_usage, dict):
        current_usage = {}

    return ContextWindow(
        total_input_tokens=cw.get("total_input_tokens", 0),
        total_output_tokens=cw.get("total_output_tokens", 0),
        context_window_size=cw.get("context_window_size", 0),
        current_input_tokens=current_usage.get("input_tokens"),
        current_output_tokens=current_usage.get("output_tokens"),
        cache_creation_input_tokens=current_usage.get("cache_creation_input_tokens"),
        cache_read_input_tokens=current_usage.get("cache_read_input_tokens"),
    )


def build_render_context(data: dict[str, Any]) -> RenderContext:
    """Build a live render context from the host payload.

    Token metrics are only present when the payload reports current usage.
    """
    context_window = extract_context_window(data)

    token_metrics = None
    if context_window and context_window.has_current_usage:
        token_metrics = TokenMetrics(
            context_length=context_window.current_context_tokens
        )

    return RenderContext(
        data=data,
        token_metrics=token_metrics,
        context_window=context_window,
    )


def create_argument_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured argument parser
    """
    from . import __version__

    parser = argparse.ArgumentParser(
        prog="context-percent",
        description="Context window usage widgets for the Claude Code status line",
        epilog="When no command is given, reads JSON from stdin and outputs the statusline.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Render with illustrative values instead of reading stdin",
    )

    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("list", help="List configured widgets and their keybinds")

    action_parser = subparsers.add_parser(
        "action", help="Apply a keybind or action to a configured widget"
    )
    action_parser.add_argument("item_id", help="Widget item id (or unique prefix)")
    action_parser.add_argument(
        "action", help="Keybind key (e.g. 'l', 'p') or action name"
    )

    return parser


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for rendering and editor commands."""
    from .cli import cmd_action, cmd_list

    parser = create_argument_parser()
    args = parser.parse_args(argv)

    if args.command == "list":
        sys.exit(cmd_list())
    if args.command == "action":
        sys.exit(cmd_action(args.item_id, args.action))

    if args.preview:
        context = RenderContext(data={}, is_preview=True)
    else:
        context = build_render_context(parse_input_data())

    debug_log("=== RENDER ===")
    debug_log(f"Preview: {context.is_preview}")
    debug_log(f"Model ID: {context.model_id}")
    debug_log(f"Token metrics: {context.token_metrics}")

    output = render_status_line_with_config(context)
    print(output, end="")


if __name__ == "__main__":
    main()
