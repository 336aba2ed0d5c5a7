"""Unit tests for usage ratio resolution and bar formatting."""

import pytest

from context_percent.types import ContextConfig
from context_percent.utils.formatting import format_percentage, render_progress_bar
from context_percent.utils.models import get_context_config, get_context_limit
from context_percent.utils.usage import BudgetKind, resolve_used_percentage


def fixed_budget(model_id):
    return ContextConfig(max_tokens=100, usable_tokens=80)


@pytest.mark.unit
class TestResolveUsedPercentage:
    """Tests for the used percentage against each budget."""

    def test_max_budget(self):
        assert resolve_used_percentage("m", BudgetKind.MAX, 50, fixed_budget) == 50.0

    def test_usable_budget(self):
        assert resolve_used_percentage("m", BudgetKind.USABLE, 40, fixed_budget) == 50.0

    @pytest.mark.parametrize("context_length", [0, 1, 79, 80, 100, 101, 10_000_000])
    @pytest.mark.parametrize("budget_kind", list(BudgetKind))
    def test_always_within_bounds(self, context_length, budget_kind):
        result = resolve_used_percentage("m", budget_kind, context_length, fixed_budget)
        assert 0 <= result <= 100

    def test_saturates_at_100(self):
        assert resolve_used_percentage("m", BudgetKind.USABLE, 81, fixed_budget) == 100.0

    def test_negative_length_is_zero(self):
        assert resolve_used_percentage("m", BudgetKind.MAX, -5, fixed_budget) == 0.0

    def test_default_lookup_for_unknown_model(self):
        result = resolve_used_percentage("mystery-model", BudgetKind.USABLE, 80000)
        assert result == 50.0


@pytest.mark.unit
class TestContextConfigLookup:
    """Tests for model id to token budget resolution."""

    def test_known_model(self):
        assert get_context_limit("claude-sonnet-4-5-20250929") == 200000

    def test_one_million_marker(self):
        assert get_context_limit("claude-sonnet-4-5-20250929[1m]") == 1000000

    def test_versioned_id_matches_family(self):
        assert get_context_limit("gpt-4o-2024-08-06") == 128000

    @pytest.mark.parametrize("model_id", [None, "", "mystery-model"])
    def test_unknown_falls_back_to_default(self, model_id):
        assert get_context_limit(model_id) == 200000

    def test_usable_is_eighty_percent(self):
        config = get_context_config("claude-opus-4-5")
        assert config == ContextConfig(max_tokens=200000, usable_tokens=160000)

    def test_defaults_are_positive(self):
        config = get_context_config(None)
        assert config.max_tokens > 0
        assert config.usable_tokens > 0


@pytest.mark.unit
class TestRenderProgressBar:
    """Tests for the fixed-width progress bar."""

    def test_empty(self):
        assert render_progress_bar(0.0, 16) == "░" * 16

    def test_full(self):
        assert render_progress_bar(1.0, 32) == "█" * 32

    def test_truncates_partial_segments(self):
        assert render_progress_bar(0.093, 16) == "█" + "░" * 15
        assert render_progress_bar(0.99, 10) == "█" * 9 + "░"

    @pytest.mark.parametrize("fraction", [0.0, 0.25, 0.5, 0.907, 1.0])
    @pytest.mark.parametrize("width", [1, 16, 32])
    def test_length_matches_width(self, fraction, width):
        assert len(render_progress_bar(fraction, width)) == width

    def test_custom_glyphs(self):
        assert render_progress_bar(0.5, 4, filled_char="#", empty_char=".") == "##.."


@pytest.mark.unit
class TestFormatPercentage:
    def test_one_decimal(self):
        assert format_percentage(9.3) == "9.3%"
        assert format_percentage(50) == "50.0%"
        assert format_percentage(79.99999999999999) == "80.0%"

    def test_custom_decimals(self):
        assert format_percentage(12.345, decimals=0) == "12%"
