"""Default configuration for context percentage widgets."""

from .schema import StatusLineConfig, WidgetItem


def get_default_config() -> StatusLineConfig:
    """Generate the default status line configuration."""
    return StatusLineConfig(
        version=1,
        lines=[
            [
                WidgetItem(type="context-percentage"),
                WidgetItem(type="context-percentage-usable"),
            ]
        ],
    )
