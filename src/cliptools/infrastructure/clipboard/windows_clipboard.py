"""Windows clipboard — implements ClipboardPort via pywin32."""

from __future__ import annotations

import logging
from typing import ClassVar

from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import HTML, PDF, PNG, RTF, TEXT, URL, ContentType
from cliptools.infrastructure.clipboard.native_clipboard import NativeClipboard

try:
    import pywintypes
    import win32clipboard as wc
    import win32con

    HAS_PYWIN32 = True
except ImportError:
    HAS_PYWIN32 = False

logger = logging.getLogger(__name__)

# Predefined formats have no registered name; list the ones worth naming.
_STANDARD_FORMATS = (
    "CF_TEXT",
    "CF_BITMAP",
    "CF_OEMTEXT",
    "CF_DIB",
    "CF_DIBV5",
    "CF_UNICODETEXT",
    "CF_HDROP",
    "CF_LOCALE",
    "CF_ENHMETAFILE",
)


class WindowsClipboard(NativeClipboard):
    """Clipboard adapter for the Win32 clipboard.

    Every write happens inside one open/empty/set/close session, so other
    processes see either the previous content or all of the new types.
    """

    NATIVE_TYPES: ClassVar[dict[ContentType, tuple[str, ...]]] = {
        URL: ("UniformResourceLocatorW", "UniformResourceLocator"),
        HTML: ("HTML Format", "text/html"),
        PDF: ("Portable Document Format", "application/pdf"),
        PNG: ("PNG", "image/png"),
        RTF: ("Rich Text Format",),
        TEXT: ("CF_UNICODETEXT", "CF_TEXT", "CF_OEMTEXT"),
    }

    def __init__(self) -> None:
        if not HAS_PYWIN32:
            raise ClipboardError("pywin32 is required on Windows. Install pywin32.")
        self._standard = {getattr(win32con, name): name for name in _STANDARD_FORMATS}

    # -- Format names ---------------------------------------------------------

    def _format_name(self, fmt: int) -> str:
        name = self._standard.get(fmt)
        if name is not None:
            return name
        try:
            return wc.GetClipboardFormatName(fmt)
        except pywintypes.error:
            return f"#{fmt}"

    def _format_id(self, native: str) -> int:
        for fmt, name in self._standard.items():
            if name == native:
                return fmt
        return wc.RegisterClipboardFormat(native)

    # -- ClipboardPort --------------------------------------------------------

    def get_text(self) -> str | None:
        with _OpenClipboard():
            if not wc.IsClipboardFormatAvailable(win32con.CF_UNICODETEXT):
                return None
            return wc.GetClipboardData(win32con.CF_UNICODETEXT)

    def get_content_types(self) -> list[str]:
        names: list[str] = []
        with _OpenClipboard():
            fmt = wc.EnumClipboardFormats(0)
            while fmt:
                names.append(self._format_name(fmt))
                fmt = wc.EnumClipboardFormats(fmt)
        return names

    def _read_native(self, native: str) -> bytes | None:
        fmt = self._format_id(native)
        with _OpenClipboard():
            if not wc.IsClipboardFormatAvailable(fmt):
                return None
            data = wc.GetClipboardData(fmt)
        if isinstance(data, str):
            return data.encode("utf-8")
        if fmt in (win32con.CF_TEXT, win32con.CF_OEMTEXT):
            return data.rstrip(b"\0")
        return data

    def _write_native(self, entries: dict[str, bytes]) -> None:
        # Resolve and decode everything before the clipboard is emptied.
        prepared: list[tuple[int, bytes | str]] = []
        for native, data in entries.items():
            fmt = self._format_id(native)
            if fmt == win32con.CF_UNICODETEXT:
                try:
                    prepared.append((fmt, data.decode("utf-8")))
                except UnicodeDecodeError as exc:
                    raise ClipboardError("text content is not valid UTF-8") from exc
            else:
                prepared.append((fmt, data))

        with _OpenClipboard():
            wc.EmptyClipboard()
            for fmt, value in prepared:
                wc.SetClipboardData(fmt, value)
        logger.debug("wrote %d format(s) to the clipboard", len(prepared))


class _OpenClipboard:
    """Hold the Win32 clipboard open for the duration of a ``with`` block."""

    def __enter__(self) -> None:
        try:
            wc.OpenClipboard()
        except pywintypes.error as exc:
            raise ClipboardError(f"unable to open clipboard: {exc}") from exc

    def __exit__(self, exc_type, exc, tb) -> None:
        wc.CloseClipboard()
        if isinstance(exc, pywintypes.error):
            raise ClipboardError(f"clipboard operation failed: {exc}") from exc
