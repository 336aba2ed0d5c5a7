"""Main rendering pipeline for status line."""

from typing import Optional

from .config.loader import load_config
from .config.schema import WidgetItem
from .types import RenderContext
from .widgets import builtin  # noqa: F401
from .widgets.registry import get_widget

DEFAULT_SEPARATOR = " | "


def render_widget(item: WidgetItem, context: RenderContext) -> Optional[str]:
    """Render a single widget item.

    Args:
        item: Widget item
        context: Render context

    Returns:
        Rendered widget string, or None to skip
    """
    widget = get_widget(item.type)
    if not widget:
        return None

    return widget.render(item, context)


def render_status_line(
    items: list[WidgetItem],
    context: RenderContext,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Render one status line from widget items.

    Widgets that render None are dropped along with their separator.

    Args:
        items: Widget items in display order
        context: Render context with data and metrics
        separator: Text placed between rendered widgets

    Returns:
        Formatted status line string
    """
    rendered = [render_widget(item, context) for item in items]
    return separator.join(content for content in rendered if content is not None)


def render_status_line_with_config(context: RenderContext) -> str:
    """Render every configured line, skipping lines with no output.

    Args:
        context: Render context with data and metrics

    Returns:
        Formatted status lines joined by newlines
    """
    config = load_config()
    lines = [render_status_line(line, context) for line in config.lines]
    return "\n".join(line for line in lines if line)
