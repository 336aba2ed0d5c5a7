"""CLI commands for editing configured widgets."""

import sys

from typing import Optional

from ..config.loader import (
    CONFIG_ERRORS,
    find_item,
    get_config_path,
    load_config,
    load_config_file,
    replace_item,
    save_config,
)
from ..config.schema import StatusLineConfig
from ..utils.debug import debug_log
from ..widgets import builtin  # noqa: F401
from ..widgets.base import Widget
from ..widgets.registry import get_widget


def resolve_action(widget: Widget, key_or_action: str) -> str:
    """Map a keybind key to its action; other input is taken as an action name."""
    for keybind in widget.get_custom_keybinds():
        if keybind.key == key_or_action:
            return keybind.action
    return key_or_action


def load_editable_config() -> Optional[StatusLineConfig]:
    """Load the config for editing, or None if the file is invalid.

    Fallback defaults carry fresh ids on every load and cannot be edited.
    """
    load_config()  # writes defaults when the file is missing

    try:
        return load_config_file()
    except CONFIG_ERRORS as e:
        print(f"✗ Config file {get_config_path()} has errors: {e}", file=sys.stderr)
        print("  Fix or remove it before editing widgets.", file=sys.stderr)
        return None


def cmd_list() -> int:
    """Print every configured widget with its modifiers and keybinds.

    Returns:
        Exit code (0 for success, 1 if the config file is invalid)
    """
    config = load_editable_config()
    if config is None:
        return 1

    print(f"Widgets in {get_config_path()}:")

    for line_idx, line in enumerate(config.lines, start=1):
        print(f"\nLine {line_idx}:")
        for item in line:
            widget = get_widget(item.type)
            if not widget:
                print(f"  {item.id}  {item.type} (unknown widget)")
                continue

            display = widget.get_editor_display(item)
            summary = display.display_text
            if display.modifier_text:
                summary = f"{summary} {display.modifier_text}"
            print(f"  {item.id}  {summary}")

            for keybind in widget.get_custom_keybinds():
                print(f"      {keybind.key}: {keybind.label}")

    return 0


def cmd_action(item_id: str, key_or_action: str) -> int:
    """Apply an editor action to a configured widget and save the result.

    Args:
        item_id: Widget item id or unique prefix
        key_or_action: Keybind key (e.g. "l") or action name (e.g. "toggle-inverse")

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    config = load_editable_config()
    if config is None:
        return 1

    item = find_item(config, item_id)
    if item is None:
        print(f"✗ No widget with id '{item_id}'", file=sys.stderr)
        return 1

    widget = get_widget(item.type)
    if widget is None:
        print(f"✗ Unknown widget type '{item.type}'", file=sys.stderr)
        return 1

    action = resolve_action(widget, key_or_action)
    updated = widget.handle_editor_action(action, item)

    if updated is None:
        print(f"✗ {widget.display_name} does not handle '{key_or_action}'", file=sys.stderr)
        return 1

    debug_log(f"Action {action} on {item.id}: {item.metadata} -> {updated.metadata}")
    save_config(replace_item(config, updated))

    display = widget.get_editor_display(updated)
    summary = display.display_text
    if display.modifier_text:
        summary = f"{summary} {display.modifier_text}"
    print(f"✓ {summary}")
    return 0
