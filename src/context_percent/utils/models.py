"""Model information and context budget lookup."""

from dataclasses import dataclass
from typing import Optional

from ..types import ContextConfig

# Share of the context window usable before auto-compact kicks in
USABLE_CONTEXT_RATIO = 0.8

ONE_MILLION_CONTEXT = 1000000


@dataclass
class ModelInfo:
    """Information about a specific model."""

    display_name: str
    context_limit: int


MODEL_INFO: dict[str, ModelInfo] = {
    "default": ModelInfo("Unknown Model", 200000),
    "claude": ModelInfo("Claude", 200000),
    "claude-sonnet-4": ModelInfo("Sonnet 4", 200000),
    "claude-sonnet-4-20250514": ModelInfo("Sonnet 4", 200000),
    "claude-sonnet-4-5-20250929": ModelInfo("Sonnet 4.5", 200000),
    "claude-opus-4": ModelInfo("Opus 4", 200000),
    "claude-opus-4-1": ModelInfo("Opus 4.1", 200000),
    "claude-opus-4-1-20250805": ModelInfo("Opus 4.1", 200000),
    "claude-opus-4-5": ModelInfo("Opus 4.5", 200000),
    "claude-opus-4-5-20251101": ModelInfo("Opus 4.5", 200000),
    "claude-haiku-4-5": ModelInfo("Haiku 4.5", 200000),
    "gemini": ModelInfo("Gemini", 1000000),
    "gpt-4": ModelInfo("GPT-4", 8192),
    "gpt-4-32k": ModelInfo("GPT-4 32K", 32768),
    "gpt-4-turbo": ModelInfo("GPT-4 Turbo", 128000),
    "gpt-4o": ModelInfo("GPT-4o", 128000),
    "gpt-4o-mini": ModelInfo("GPT-4o mini", 128000),
    "gpt-5": ModelInfo("GPT-5", 400000),
}


def get_context_limit(model_id: Optional[str]) -> int:
    """Get the maximum context size for a model.

    Args:
        model_id: Model identifier (e.g., "claude-sonnet-4-5-20250929")

    Returns:
        Context limit in tokens, the default limit for unknown models
    """
    if not model_id:
        return MODEL_INFO["default"].context_limit

    model_lower = model_id.lower()

    if "[1m]" in model_lower:
        return ONE_MILLION_CONTEXT

    if model_lower in MODEL_INFO:
        return MODEL_INFO[model_lower].context_limit

    for key in sorted(MODEL_INFO.keys(), key=len, reverse=True):
        if key != "default" and (model_lower in key or key in model_lower):
            return MODEL_INFO[key].context_limit

    return MODEL_INFO["default"].context_limit


def get_context_config(model_id: Optional[str]) -> ContextConfig:
    """Resolve max and usable token budgets for a model."""
    max_tokens = get_context_limit(model_id)
    return ContextConfig(
        max_tokens=max_tokens,
        usable_tokens=int(max_tokens * USABLE_CONTEXT_RATIO),
    )
