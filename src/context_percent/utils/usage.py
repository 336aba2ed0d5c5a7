"""Context usage ratio against a model's token budget."""

from enum import Enum
from typing import Callable, Optional

from ..types import ContextConfig
from .models import get_context_config

ConfigLookup = Callable[[Optional[str]], ContextConfig]


class BudgetKind(str, Enum):
    """Which token budget usage is measured against."""

    MAX = "max"
    USABLE = "usable"


def get_budget(config: ContextConfig, budget_kind: BudgetKind) -> int:
    if budget_kind is BudgetKind.USABLE:
        return config.usable_tokens
    return config.max_tokens


def resolve_used_percentage(
    model_id: Optional[str],
    budget_kind: BudgetKind,
    context_length: int,
    config_lookup: ConfigLookup = get_context_config,
) -> float:
    """Percentage of the model's budget consumed, saturating at 100.

    Args:
        model_id: Model identifier, None when the payload lacks one
        budget_kind: Budget to measure against
        context_length: Tokens currently in context
        config_lookup: Resolver from model id to token budgets

    Returns:
        Used percentage in [0, 100]
    """
    budget = get_budget(config_lookup(model_id), budget_kind)
    used = max(0, context_length) / budget
    return min(100.0, used * 100)
