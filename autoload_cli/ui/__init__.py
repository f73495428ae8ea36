"""UI helpers for CLI environment."""

from .error_display import display_autoload_error
from .error_display import display_settings_error

__all__ = ["display_autoload_error", "display_settings_error"]
