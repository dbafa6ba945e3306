"""Infrastructure layer — platform clipboard and settings adapters."""

from cliptools.infrastructure.clipboard.factory import get_clipboard
from cliptools.infrastructure.config.settings_manager import SettingsManager

__all__ = [
    "SettingsManager",
    "get_clipboard",
]
