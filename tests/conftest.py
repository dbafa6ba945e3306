"""Shared fixtures: an in-memory clipboard and a container wired to it."""

from __future__ import annotations

from pathlib import Path

import pytest

from cliptools.bootstrap import Container
from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import (
    HTML,
    PNG,
    TEXT,
    URL,
    ClipboardPayload,
    ContentType,
)
from cliptools.domain.ports.clipboard_port import ClipboardPort
from cliptools.infrastructure.config.settings_manager import SettingsManager

# Native names the fake treats as portable types (macOS flavored).
_ALIASES: dict[str, ContentType] = {
    "public.utf8-plain-text": TEXT,
    "NSStringPboardType": TEXT,
    "public.html": HTML,
    "public.png": PNG,
    "public.url": URL,
}


class InMemoryClipboard(ClipboardPort):
    """ClipboardPort keeping native entries in a dict, in insertion order."""

    def __init__(
        self,
        entries: dict[str, bytes] | None = None,
        fail_listing: bool = False,
        reject_writes: bool = False,
    ) -> None:
        self.entries: dict[str, bytes] = dict(entries or {})
        self.fail_listing = fail_listing
        self.reject_writes = reject_writes
        self.writes: list[dict[ContentType, bytes]] = []

    def get_text(self) -> str | None:
        data = self.get_content_for_type(TEXT)
        return None if data is None else data.decode("utf-8")

    def get_content_for_type(self, content_type: ContentType) -> bytes | None:
        for native, data in self.entries.items():
            if self.normalize_content_type(native) == content_type:
                return data
        return None

    def get_content_types(self) -> list[str]:
        if self.fail_listing:
            raise ClipboardError("pasteboard unavailable")
        return list(self.entries)

    def normalize_content_type(self, native: str) -> ContentType:
        return _ALIASES.get(native, ContentType.custom(native))

    def set_content_types(self, payload: ClipboardPayload) -> None:
        if self.reject_writes:
            raise ClipboardError("write rejected")
        self.writes.append(dict(payload))
        self.entries = {self._native_for(ct): data for ct, data in payload.items()}

    @staticmethod
    def _native_for(content_type: ContentType) -> str:
        if content_type.is_custom:
            return content_type.name
        return next(name for name, ct in _ALIASES.items() if ct == content_type)


@pytest.fixture()
def clipboard() -> InMemoryClipboard:
    """An empty in-memory clipboard."""
    return InMemoryClipboard()


@pytest.fixture()
def settings_manager(tmp_path: Path) -> SettingsManager:
    """SettingsManager pointing at a temp directory."""
    return SettingsManager(config_dir=tmp_path / "cliptools_config")


@pytest.fixture()
def container(clipboard: InMemoryClipboard, settings_manager: SettingsManager) -> Container:
    """Container wired to the in-memory clipboard and temp settings."""
    return Container(clipboard=clipboard, settings_manager=settings_manager)
