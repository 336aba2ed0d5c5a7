"""Built-in widgets for status line.

Importing this module registers all built-in widgets with the registry.
"""

from .context import (
    MAX_PROFILE,
    USABLE_PROFILE,
    ContextPercentageWidget,
    DisplayMode,
    PercentageDisplayState,
    PercentageProfile,
)

__all__ = [
    "ContextPercentageWidget",
    "DisplayMode",
    "PercentageDisplayState",
    "PercentageProfile",
    "MAX_PROFILE",
    "USABLE_PROFILE",
]
