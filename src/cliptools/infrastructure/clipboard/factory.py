"""Pick the clipboard adapter for the running platform."""

from __future__ import annotations

import logging
import os
import platform
import shutil
from collections.abc import Callable

from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import ClipboardPayload, ContentType
from cliptools.domain.models.enums import BackendChoice
from cliptools.domain.ports.clipboard_port import ClipboardPort

logger = logging.getLogger(__name__)


def detect_backend() -> BackendChoice:
    """Return the backend appropriate for this OS and session.

    Raises:
        ClipboardError: No supported clipboard tool found.
    """
    system = platform.system()
    if system == "Darwin":
        return BackendChoice.MACOS
    if system == "Windows":
        return BackendChoice.WINDOWS

    if os.environ.get("WAYLAND_DISPLAY") and shutil.which("wl-paste"):
        return BackendChoice.WAYLAND
    if shutil.which("xclip"):
        return BackendChoice.X11
    raise ClipboardError("No clipboard tool found. Install wl-clipboard or xclip.")


def get_clipboard(
    backend: BackendChoice = BackendChoice.AUTO,
    timeout: float = 2.0,
) -> ClipboardPort:
    """Create the clipboard adapter for *backend*.

    Args:
        backend: Explicit backend, or ``AUTO`` to detect one.
        timeout: Timeout for subprocess-based backends, in seconds.

    Raises:
        ClipboardError: The backend is unavailable on this system.
    """
    if backend is BackendChoice.AUTO:
        backend = detect_backend()
    logger.debug("using %s clipboard backend", backend.value)

    if backend is BackendChoice.WAYLAND:
        from cliptools.infrastructure.clipboard.system_clipboard import WaylandClipboard

        return WaylandClipboard(timeout=timeout)
    if backend is BackendChoice.X11:
        from cliptools.infrastructure.clipboard.system_clipboard import X11Clipboard

        return X11Clipboard(timeout=timeout)
    if backend is BackendChoice.MACOS:
        from cliptools.infrastructure.clipboard.macos_clipboard import MacOSClipboard

        return MacOSClipboard()
    from cliptools.infrastructure.clipboard.windows_clipboard import WindowsClipboard

    return WindowsClipboard()


class LazyClipboard(ClipboardPort):
    """ClipboardPort that creates the real adapter on its first use.

    Use cases check type names and input before they touch the clipboard,
    so those errors are reported even where no backend is available.
    """

    def __init__(self, create: Callable[[], ClipboardPort]) -> None:
        self._create = create
        self._adapter: ClipboardPort | None = None

    @property
    def adapter(self) -> ClipboardPort:
        if self._adapter is None:
            self._adapter = self._create()
        return self._adapter

    def get_text(self) -> str | None:
        return self.adapter.get_text()

    def get_content_for_type(self, content_type: ContentType) -> bytes | None:
        return self.adapter.get_content_for_type(content_type)

    def get_content_types(self) -> list[str]:
        return self.adapter.get_content_types()

    def normalize_content_type(self, native: str) -> ContentType:
        return self.adapter.normalize_content_type(native)

    def set_content_types(self, payload: ClipboardPayload) -> None:
        self.adapter.set_content_types(payload)
