"""Port: Settings — where user preferences are kept between runs."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from cliptools.domain.models.settings import UserSettings


class SettingsPort(ABC):
    """Load, change and reset the persisted :class:`UserSettings`."""

    @property
    @abstractmethod
    def settings_path(self) -> Path:
        """Location of the settings file, whether or not it exists yet."""

    @abstractmethod
    def load(self) -> UserSettings:
        """Return the persisted settings, or defaults when there are none."""

    @abstractmethod
    def save(self, settings: UserSettings) -> None:
        """Persist *settings*, replacing what was stored."""

    @abstractmethod
    def update(self, key: str, value: Any) -> UserSettings:
        """Change a single setting and persist the validated result."""

    @abstractmethod
    def reset_to_defaults(self) -> UserSettings:
        """Forget persisted settings and return the defaults."""
