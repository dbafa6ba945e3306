"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from cliptools.application.use_cases.copy_content import CopyContentUseCase
from cliptools.application.use_cases.list_types import ListTypesUseCase
from cliptools.application.use_cases.paste_content import PasteContentUseCase
from cliptools.domain.models.settings import UserSettings
from cliptools.domain.ports.clipboard_port import ClipboardPort
from cliptools.domain.ports.settings_port import SettingsPort
from cliptools.infrastructure.clipboard.factory import LazyClipboard, get_clipboard
from cliptools.infrastructure.config.settings_manager import SettingsManager


class Container:
    """Simple dependency injection container.

    Wires the platform clipboard adapter and the settings manager to their
    ports and provides pre-configured use cases. The platform backend is
    opened on the first clipboard call, so config commands and argument
    errors behave the same on systems without a clipboard backend.

    Usage::

        container = Container()
        data = container.paste_content().execute(PasteRequest(), stdout_is_tty=True)
    """

    def __init__(
        self,
        clipboard: ClipboardPort | None = None,
        settings_manager: SettingsPort | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._settings_manager = settings_manager or SettingsManager()
        self._settings: UserSettings | None = None

    # -- Port accessors ------------------------------------------------------

    @property
    def settings_manager(self) -> SettingsPort:
        return self._settings_manager

    @property
    def settings(self) -> UserSettings:
        if self._settings is None:
            self._settings = self._settings_manager.load()
        return self._settings

    @property
    def clipboard(self) -> ClipboardPort:
        """Return the clipboard adapter.

        The platform backend is opened on the first clipboard call, so a
        missing backend surfaces as ``ClipboardError`` from that call.
        """
        if self._clipboard is None:
            self._clipboard = LazyClipboard(self._open_backend)
        return self._clipboard

    def _open_backend(self) -> ClipboardPort:
        return get_clipboard(self.settings.backend, timeout=self.settings.timeout_seconds)

    # -- Use Case factories --------------------------------------------------

    def paste_content(self) -> PasteContentUseCase:
        """Create a use case for reading clipboard content."""
        return PasteContentUseCase(clipboard=self.clipboard)

    def list_types(self) -> ListTypesUseCase:
        """Create a use case for listing clipboard types."""
        return ListTypesUseCase(clipboard=self.clipboard)

    def copy_content(self) -> CopyContentUseCase:
        """Create a use case for writing clipboard content."""
        return CopyContentUseCase(clipboard=self.clipboard)
