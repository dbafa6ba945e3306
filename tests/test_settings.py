"""Tests for the settings module.

Covers:
- UserSettings model defaults and validation
- SettingsManager load / save / reset with a temp directory
- Request DTO validation and friendly error messages
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cliptools.application.dto.requests import CopyRequest, PasteRequest
from cliptools.application.error_messages import (
    as_argument_error,
    format_validation_errors,
    friendly_error,
)
from cliptools.domain.errors import ArgumentError
from cliptools.domain.models.enums import BackendChoice, BinaryPolicy, ColorWhen
from cliptools.domain.models.settings import UserSettings
from cliptools.infrastructure.config.settings_manager import SettingsManager


# ── Fixtures ──────────────────────────────────────────────────────────────


@pytest.fixture()
def tmp_config_dir(tmp_path: Path) -> Path:
    """Return a temporary directory for settings files."""
    return tmp_path / "cliptools_config"


@pytest.fixture()
def manager(tmp_config_dir: Path) -> SettingsManager:
    """SettingsManager pointing at a temp directory."""
    return SettingsManager(config_dir=tmp_config_dir)


# ── Model Tests ───────────────────────────────────────────────────────────


class TestUserSettingsModel:
    """Tests for UserSettings Pydantic model."""

    def test_defaults(self) -> None:
        settings = UserSettings()
        assert settings.color == ColorWhen.AUTO
        assert settings.binary == BinaryPolicy.AUTO
        assert settings.backend == BackendChoice.AUTO
        assert settings.timeout_seconds == 2.0

    def test_enum_values_from_strings(self) -> None:
        settings = UserSettings.model_validate(
            {"color": "never", "binary": "always", "backend": "x11"}
        )
        assert settings.color is ColorWhen.NEVER
        assert settings.binary is BinaryPolicy.ALWAYS
        assert settings.backend is BackendChoice.X11

    def test_timeout_too_small(self) -> None:
        with pytest.raises(ValidationError):
            UserSettings(timeout_seconds=0.01)

    def test_timeout_too_large(self) -> None:
        with pytest.raises(ValidationError):
            UserSettings(timeout_seconds=120)

    def test_unknown_backend(self) -> None:
        with pytest.raises(ValidationError):
            UserSettings.model_validate({"backend": "beos"})

    def test_serialization_roundtrip(self) -> None:
        original = UserSettings(color=ColorWhen.ALWAYS, timeout_seconds=5.5)
        restored = UserSettings.model_validate(original.model_dump(mode="json"))
        assert restored == original


# ── SettingsManager Tests ─────────────────────────────────────────────────


class TestSettingsManager:
    """Tests for SettingsManager persistence."""

    def test_load_returns_defaults_when_no_file(self, manager: SettingsManager) -> None:
        assert manager.load() == UserSettings()

    def test_save_and_load(self, manager: SettingsManager) -> None:
        manager.save(UserSettings(binary=BinaryPolicy.NEVER, backend=BackendChoice.WAYLAND))

        loaded = manager.load()
        assert loaded.binary == BinaryPolicy.NEVER
        assert loaded.backend == BackendChoice.WAYLAND

    def test_reset_to_defaults(self, manager: SettingsManager) -> None:
        manager.save(UserSettings(color=ColorWhen.NEVER))
        assert manager.settings_path.exists()

        reset = manager.reset_to_defaults()
        assert reset == UserSettings()
        assert not manager.settings_path.exists()

    def test_reset_without_file(self, manager: SettingsManager) -> None:
        assert manager.reset_to_defaults() == UserSettings()

    def test_corrupted_file_returns_defaults(
        self, manager: SettingsManager, tmp_config_dir: Path
    ) -> None:
        tmp_config_dir.mkdir(parents=True, exist_ok=True)
        manager.settings_path.write_text("{{invalid json", encoding="utf-8")

        assert manager.load() == UserSettings()

    def test_invalid_values_return_defaults(
        self, manager: SettingsManager, tmp_config_dir: Path
    ) -> None:
        tmp_config_dir.mkdir(parents=True, exist_ok=True)
        manager.settings_path.write_text('{"timeout_seconds": -1}', encoding="utf-8")

        assert manager.load() == UserSettings()

    def test_settings_path_property(self, manager: SettingsManager) -> None:
        assert manager.settings_path.name == "settings.json"

    def test_save_creates_directory(self, tmp_path: Path) -> None:
        nested = tmp_path / "deep" / "nested"
        mgr = SettingsManager(config_dir=nested)
        mgr.save(UserSettings())
        assert mgr.settings_path.exists()

    def test_save_file_content_is_valid_json(self, manager: SettingsManager) -> None:
        manager.save(UserSettings())
        data = json.loads(manager.settings_path.read_text(encoding="utf-8"))
        assert data == {
            "color": "auto",
            "binary": "auto",
            "backend": "auto",
            "timeout_seconds": 2.0,
        }

    def test_save_leaves_no_temp_files(
        self, manager: SettingsManager, tmp_config_dir: Path
    ) -> None:
        manager.save(UserSettings())
        manager.save(UserSettings(color=ColorWhen.ALWAYS))
        assert [p.name for p in tmp_config_dir.iterdir()] == ["settings.json"]


# ── Request DTOs ──────────────────────────────────────────────────────────


class TestRequests:
    """Mutual exclusion of type options."""

    def test_paste_defaults(self) -> None:
        request = PasteRequest()
        assert request.type_name is None
        assert request.system_type_name is None
        assert request.binary is BinaryPolicy.AUTO

    def test_paste_type_and_system_type_conflict(self) -> None:
        with pytest.raises(ValidationError) as info:
            PasteRequest(type_name="text", system_type_name="text/plain")
        assert str(as_argument_error(info.value)) == (
            "--type and --system-type cannot be used together"
        )

    def test_empty_system_type(self) -> None:
        with pytest.raises(ValidationError) as info:
            PasteRequest(system_type_name="")
        assert str(as_argument_error(info.value)) == "System type name must not be empty."

    @pytest.mark.parametrize(
        ("fields", "flags"),
        [
            ({"type_name": "text", "json_input": True}, "--type and --json"),
            ({"system_type_name": "x", "json_input": True}, "--system-type and --json"),
            ({"type_name": "text", "system_type_name": "x"}, "--type and --system-type"),
        ],
    )
    def test_copy_conflicts(self, fields, flags) -> None:
        with pytest.raises(ValidationError) as info:
            CopyRequest(**fields)
        assert str(as_argument_error(info.value)) == f"{flags} cannot be used together"

    def test_copy_single_mode_is_valid(self) -> None:
        assert CopyRequest(json_input=True).json_input is True


# ── Friendly error messages ───────────────────────────────────────────────


class TestErrorMessages:
    """Translation of Pydantic errors."""

    def test_known_mapping(self) -> None:
        assert friendly_error("backend", "enum").startswith("Invalid backend.")

    def test_fallback(self) -> None:
        assert friendly_error("color", "missing", fallback="Field required") == "Field required"

    def test_generic_fallback(self) -> None:
        assert friendly_error("nope", "whatever") == "Validation error on field 'nope'."

    def test_format_validation_errors(self) -> None:
        with pytest.raises(ValidationError) as info:
            UserSettings.model_validate({"color": "purple", "timeout_seconds": 0})
        messages = format_validation_errors(info.value.errors())
        assert "Invalid color setting. Expected one of: auto, always, never." in messages
        assert "Timeout must be at least 0.1 seconds." in messages

    def test_as_argument_error_is_single_line(self) -> None:
        with pytest.raises(ValidationError) as info:
            UserSettings.model_validate({"color": "purple", "binary": "maybe"})
        error = as_argument_error(info.value)
        assert isinstance(error, ArgumentError)
        assert error.exit_code == 2
        assert "\n" not in str(error)


class TestSettingsUpdate:
    """SettingsManager.update (backs ``cliptools config set``)."""

    def test_update_persists_one_key(self, manager: SettingsManager) -> None:
        manager.save(UserSettings(color=ColorWhen.NEVER))

        updated = manager.update("binary", "always")
        assert updated.binary is BinaryPolicy.ALWAYS
        assert manager.load() == UserSettings(color=ColorWhen.NEVER, binary=BinaryPolicy.ALWAYS)

    def test_update_coerces_numbers(self, manager: SettingsManager) -> None:
        assert manager.update("timeout_seconds", "0.5").timeout_seconds == 0.5

    def test_unknown_key(self, manager: SettingsManager) -> None:
        with pytest.raises(ArgumentError, match="unknown setting"):
            manager.update("history", "on")
        assert not manager.settings_path.exists()

    def test_invalid_value_is_not_saved(self, manager: SettingsManager) -> None:
        with pytest.raises(ValidationError):
            manager.update("timeout_seconds", "600")
        assert not manager.settings_path.exists()
