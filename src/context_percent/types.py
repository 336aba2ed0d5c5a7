"""Data types for context percentage widgets."""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class TokenMetrics:
    """Token usage supplied by the host's token accounting."""

    context_length: int = 0


@dataclass
class ContextWindow:
    """Context window data from Claude Code status payload."""

    total_input_tokens: int = 0
    total_output_tokens: int = 0
    context_window_size: int = 0
    current_input_tokens: Optional[int] = None
    current_output_tokens: Optional[int] = None
    cache_creation_input_tokens: Optional[int] = None
    cache_read_input_tokens: Optional[int] = None

    @property
    def current_context_tokens(self) -> int:
        """Calculate current context tokens per official formula.

        Formula: input_tokens + cache_creation_input_tokens + cache_read_input_tokens
        """
        if self.current_input_tokens is None:
            return 0
        return (
            (self.current_input_tokens or 0)
            + (self.cache_creation_input_tokens or 0)
            + (self.cache_read_input_tokens or 0)
        )

    @property
    def has_current_usage(self) -> bool:
        """Check if current_usage data is available."""
        return self.current_input_tokens is not None


@dataclass
class RenderContext:
    """Context passed to widgets during rendering."""

    data: dict[str, Any]
    token_metrics: Optional[TokenMetrics] = None
    is_preview: bool = False
    context_window: Optional[ContextWindow] = None

    @property
    def model_id(self) -> Optional[str]:
        """Model id from the payload, None when absent or malformed."""
        model = self.data.get("model")
        if not isinstance(model, dict):
            return None
        model_id = model.get("id")
        return model_id if isinstance(model_id, str) else None


@dataclass(frozen=True)
class ContextConfig:
    """Token budgets for a single model."""

    max_tokens: int
    usable_tokens: int


@dataclass(frozen=True)
class CustomKeybind:
    """Editor keybinding exposed by a widget."""

    key: str
    label: str
    action: str


@dataclass
class EditorDisplay:
    """Summary of a widget item shown in the editor."""

    display_text: str
    modifier_text: Optional[str] = None
