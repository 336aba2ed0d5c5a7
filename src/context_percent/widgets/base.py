"""Base widget interface for status line components."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..config.schema import WidgetItem
from ..types import CustomKeybind, EditorDisplay, RenderContext


class Widget(ABC):
    """Base widget interface - all widgets must implement this.

    Widget metadata (display_name, description, default_color) is set by
    register_widget() rather than requiring implementation of methods.
    """

    # Attributes set by register_widget()
    display_name: str = ""
    description: str = ""
    default_color: str = "white"

    @abstractmethod
    def render(
        self, item: WidgetItem, context: RenderContext, settings: Optional[Any] = None
    ) -> Optional[str]:
        """Render widget content.

        Args:
            item: Widget item including raw_value flag and metadata
            context: Rendering context with data and metrics
            settings: Host settings, accepted for interface symmetry

        Returns:
            Rendered string or None to hide widget
        """
        pass

    def get_editor_display(self, item: WidgetItem) -> EditorDisplay:
        """Summarize the item for the editor list."""
        return EditorDisplay(display_text=self.display_name)

    def handle_editor_action(self, action: str, item: WidgetItem) -> Optional[WidgetItem]:
        """Apply an editor action, returning the updated item or None if unhandled."""
        return None

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        """Editor keybindings beyond the host's built-in ones."""
        return []

    def supports_raw_value(self) -> bool:
        """Whether the widget can render without its label."""
        return False

    def supports_colors(self, item: WidgetItem) -> bool:
        """Whether the host may apply a color to this item."""
        return True
