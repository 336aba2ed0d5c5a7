"""Widget registry for managing available widgets."""

from typing import Optional, TypeVar

from .base import Widget

W = TypeVar("W", bound=Widget)

# Global registry of widget type -> widget instance
_WIDGET_REGISTRY: dict[str, Widget] = {}


def register_widget(
    widget_type: str,
    widget: W,
    display_name: str = "",
    default_color: str = "white",
    description: str = "",
) -> W:
    """Register a widget instance with metadata.

    Usage:
        register_widget("context-percentage", ContextPercentageWidget(MAX_PROFILE),
                        display_name="Context %", default_color="blue",
                        description="Shows percentage of context window used")

    Args:
        widget_type: Widget type identifier (e.g., "context-percentage")
        widget: Widget instance; the same instance serves every item of this type
        display_name: Human-readable name for the editor (defaults to formatted type)
        default_color: Default color when the item has none (defaults to "white")
        description: Description of what the widget displays

    Returns:
        The registered widget
    """
    widget.display_name = display_name or widget_type.replace("-", " ").title()
    widget.default_color = default_color
    widget.description = description

    _WIDGET_REGISTRY[widget_type] = widget
    return widget


def get_widget(widget_type: str) -> Optional[Widget]:
    """Get widget instance by type name.

    Args:
        widget_type: Widget type identifier

    Returns:
        Widget instance or None if not found
    """
    return _WIDGET_REGISTRY.get(widget_type)


def get_all_widgets() -> dict[str, Widget]:
    """Get all registered widgets as instances.

    Returns:
        Dictionary mapping widget type to instance
    """
    return dict(_WIDGET_REGISTRY)
