"""Debug logging utilities."""

import os
import sys
import tempfile
import time

DEBUG_ENV_VAR = "CONTEXT_PERCENT_DEBUG"
LOG_FILE_NAME = "context_percent_debug.log"


def get_log_path() -> str:
    """Get the debug log file path."""
    return os.path.join(tempfile.gettempdir(), LOG_FILE_NAME)


def debug_log(message: str) -> None:
    """Append a timestamped debug message if debug mode is enabled.

    Args:
        message: Debug message to log
    """
    if not os.getenv(DEBUG_ENV_VAR):
        return

    log_file = get_log_path()
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")

    try:
        with open(log_file, "a", encoding="utf-8") as f:
            f.write(f"[{timestamp}] {message}\n")
    except OSError:
        print(f"DEBUG (couldn't write to {log_file}): {message}", file=sys.stderr)
