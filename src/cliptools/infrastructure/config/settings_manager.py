"""Settings manager — JSON persistence for ``UserSettings``.

The file lives in the per-user config directory reported by
``platformdirs`` (``~/.config/cliptools/settings.json`` on Linux). A file
that cannot be read or no longer validates is ignored with a warning.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

import platformdirs
from pydantic import ValidationError

from cliptools.domain.errors import ArgumentError
from cliptools.domain.models.settings import UserSettings
from cliptools.domain.ports.settings_port import SettingsPort

logger = logging.getLogger(__name__)

_APP_NAME = "cliptools"
_SETTINGS_FILENAME = "settings.json"


class SettingsManager(SettingsPort):
    """File-backed :class:`SettingsPort`.

    Parameters
    ----------
    config_dir : Path | None
        Directory holding ``settings.json``; defaults to the platform
        config directory. Tests point it at a temp directory.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._config_dir = config_dir or Path(platformdirs.user_config_dir(_APP_NAME))
        self._settings_path = self._config_dir / _SETTINGS_FILENAME

    @property
    def settings_path(self) -> Path:
        return self._settings_path

    def load(self) -> UserSettings:
        raw = self._read_raw()
        if raw is None:
            return UserSettings()
        try:
            return UserSettings.model_validate(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring invalid settings in %s (%d error(s))",
                self._settings_path,
                exc.error_count(),
            )
            return UserSettings()

    def save(self, settings: UserSettings) -> None:
        """Write *settings* to a temp file beside the target, then rename it."""
        self._config_dir.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._config_dir, prefix=".settings-", suffix=".tmp")
        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(settings.model_dump_json(indent=2))
                fh.write("\n")
            tmp_path.replace(self._settings_path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise
        logger.debug("saved settings to %s", self._settings_path)

    def update(self, key: str, value: Any) -> UserSettings:
        """Change one setting, validate the result and persist it.

        Raises:
            ArgumentError: *key* is not a setting.
            ValidationError: *value* is not valid for *key*.
        """
        if key not in UserSettings.model_fields:
            raise ArgumentError(
                f"unknown setting: {key!r}; expected one of "
                f"{', '.join(UserSettings.model_fields)}"
            )
        changed = self.load().model_dump(mode="json")
        changed[key] = value
        settings = UserSettings.model_validate(changed)
        self.save(settings)
        return settings

    def reset_to_defaults(self) -> UserSettings:
        self._settings_path.unlink(missing_ok=True)
        return UserSettings()

    def _read_raw(self) -> Any:
        try:
            text = self._settings_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as exc:
            logger.warning("Cannot read settings file %s: %s", self._settings_path, exc)
            return None
        try:
            return json.loads(text)
        except ValueError as exc:
            logger.warning("Ignoring malformed settings file %s: %s", self._settings_path, exc)
            return None
