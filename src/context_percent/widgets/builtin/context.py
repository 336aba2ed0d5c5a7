"""Context usage percentage widgets."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ...config.schema import WidgetItem
from ...types import CustomKeybind, EditorDisplay, RenderContext
from ...utils.formatting import format_percentage, render_progress_bar
from ...utils.models import get_context_config
from ...utils.usage import BudgetKind, ConfigLookup, resolve_used_percentage
from ..base import Widget
from ..registry import register_widget

TOGGLE_INVERSE = "toggle-inverse"
TOGGLE_PROGRESS = "toggle-progress"


class DisplayMode(str, Enum):
    """How a percentage widget presents its value."""

    TEXT = "text"
    PROGRESS = "progress"
    PROGRESS_SHORT = "progress-short"


_MODES_BY_VALUE = {mode.value: mode for mode in DisplayMode}

_NEXT_MODE = {
    DisplayMode.TEXT: DisplayMode.PROGRESS,
    DisplayMode.PROGRESS: DisplayMode.PROGRESS_SHORT,
    DisplayMode.PROGRESS_SHORT: DisplayMode.TEXT,
}

_BAR_WIDTHS = {
    DisplayMode.PROGRESS: 32,
    DisplayMode.PROGRESS_SHORT: 16,
}

_MODE_MODIFIERS = {
    DisplayMode.PROGRESS: "progress bar",
    DisplayMode.PROGRESS_SHORT: "short bar",
}


@dataclass(frozen=True)
class PercentageDisplayState:
    """Per-item display preferences stored in item metadata."""

    inverse: bool = False
    display: DisplayMode = DisplayMode.TEXT

    @classmethod
    def from_metadata(cls, metadata: dict[str, str]) -> "PercentageDisplayState":
        """Read state from metadata, falling back to defaults for unknown values."""
        return cls(
            inverse=metadata.get("inverse") == "true",
            display=_MODES_BY_VALUE.get(
                metadata.get("display", DisplayMode.TEXT.value), DisplayMode.TEXT
            ),
        )

    def to_metadata(self) -> dict[str, str]:
        return {
            "inverse": "true" if self.inverse else "false",
            "display": self.display.value,
        }

    def toggled_inverse(self) -> "PercentageDisplayState":
        return PercentageDisplayState(inverse=not self.inverse, display=self.display)

    def next_display(self) -> "PercentageDisplayState":
        return PercentageDisplayState(
            inverse=self.inverse, display=_NEXT_MODE[self.display]
        )


@dataclass(frozen=True)
class PercentageProfile:
    """Budget and labels that distinguish one percentage widget from another."""

    budget_kind: BudgetKind
    label: str
    preview_used: float
    preview_remaining: float


MAX_PROFILE = PercentageProfile(
    budget_kind=BudgetKind.MAX,
    label="Ctx",
    preview_used=9.3,
    preview_remaining=90.7,
)

USABLE_PROFILE = PercentageProfile(
    budget_kind=BudgetKind.USABLE,
    label="Ctx(u)",
    preview_used=11.6,
    preview_remaining=88.4,
)


class ContextPercentageWidget(Widget):
    """Display context usage (or remaining) as text or a progress bar.

    The widget holds no per-item state: inverse and display mode live in each
    item's metadata, and actions return updated copies of the item.
    """

    def __init__(
        self,
        profile: PercentageProfile,
        config_lookup: ConfigLookup = get_context_config,
    ) -> None:
        self.profile = profile
        self.config_lookup = config_lookup

    def get_editor_display(self, item: WidgetItem) -> EditorDisplay:
        state = PercentageDisplayState.from_metadata(item.metadata)
        modifiers = []

        if state.inverse:
            modifiers.append("remaining")
        if state.display in _MODE_MODIFIERS:
            modifiers.append(_MODE_MODIFIERS[state.display])

        return EditorDisplay(
            display_text=self.display_name,
            modifier_text=f"({', '.join(modifiers)})" if modifiers else None,
        )

    def handle_editor_action(self, action: str, item: WidgetItem) -> Optional[WidgetItem]:
        state = PercentageDisplayState.from_metadata(item.metadata)

        # Only the toggled key is rewritten; unrecognised stored values survive.
        if action == TOGGLE_INVERSE:
            key, new_state = "inverse", state.toggled_inverse()
        elif action == TOGGLE_PROGRESS:
            key, new_state = "display", state.next_display()
        else:
            return None

        metadata = {**item.metadata, key: new_state.to_metadata()[key]}
        return item.model_copy(update={"metadata": metadata})

    def get_display_percentage(
        self, state: PercentageDisplayState, context: RenderContext
    ) -> Optional[float]:
        """Resolve the percentage to show, or None when nothing is renderable."""
        if context.is_preview:
            if state.inverse:
                return self.profile.preview_remaining
            return self.profile.preview_used

        if context.token_metrics:
            used = resolve_used_percentage(
                context.model_id,
                self.profile.budget_kind,
                context.token_metrics.context_length,
                self.config_lookup,
            )
            return 100 - used if state.inverse else used

        return None

    def render(
        self, item: WidgetItem, context: RenderContext, settings: Optional[Any] = None
    ) -> Optional[str]:
        """Render the percentage in the item's display mode."""
        state = PercentageDisplayState.from_metadata(item.metadata)
        percentage = self.get_display_percentage(state, context)

        if percentage is None:
            return None

        value = format_percentage(percentage)

        if state.display in _BAR_WIDTHS:
            bar = render_progress_bar(percentage / 100, _BAR_WIDTHS[state.display])
            prefix = "" if item.raw_value else f"{self.profile.label} "
            return f"{prefix}[{bar}] {value}"

        return value if item.raw_value else f"{self.profile.label}: {value}"

    def get_custom_keybinds(self) -> list[CustomKeybind]:
        return [
            CustomKeybind(key="l", label="(l)eft/remaining", action=TOGGLE_INVERSE),
            CustomKeybind(key="p", label="(p)rogress toggle", action=TOGGLE_PROGRESS),
        ]

    def supports_raw_value(self) -> bool:
        return True

    def supports_colors(self, item: WidgetItem) -> bool:
        return True


register_widget(
    "context-percentage",
    ContextPercentageWidget(MAX_PROFILE),
    display_name="Context %",
    default_color="blue",
    description="Shows percentage of context window used or remaining",
)

register_widget(
    "context-percentage-usable",
    ContextPercentageWidget(USABLE_PROFILE),
    display_name="Context % (usable)",
    default_color="green",
    description=(
        "Shows percentage of usable context window used or remaining "
        "(80% of max before auto-compact)"
    ),
)
