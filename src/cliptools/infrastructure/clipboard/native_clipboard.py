"""Shared base for platform clipboard adapters.

Each platform names its clipboard flavors differently (MIME types on
Wayland/X11, UTIs on macOS, registered format names on Windows). Adapters
declare a table from portable content types to native names; this base
uses it to normalize native names and to find the native flavor to read
or write for a portable type.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import ClassVar

from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import TEXT, ClipboardPayload, ContentType
from cliptools.domain.ports.clipboard_port import ClipboardPort


class NativeClipboard(ClipboardPort):
    """Clipboard adapter driven by a table of native type names.

    ``NATIVE_TYPES`` maps each portable type to its native names, most
    preferred first; the first name is the one written on copy.
    """

    NATIVE_TYPES: ClassVar[dict[ContentType, tuple[str, ...]]] = {}

    def normalize_content_type(self, native: str) -> ContentType:
        folded = native.lower()
        for content_type, names in self.NATIVE_TYPES.items():
            if any(folded == name.lower() for name in names):
                return content_type
        return ContentType.custom(native)

    def native_names(self, content_type: ContentType) -> tuple[str, ...]:
        """Return the native names that may hold *content_type*."""
        if content_type.is_custom:
            return (content_type.name,)
        return self.NATIVE_TYPES.get(content_type, ())

    def get_text(self) -> str | None:
        data = self.get_content_for_type(TEXT)
        if data is None:
            return None
        return data.decode("utf-8", errors="replace")

    def get_content_for_type(self, content_type: ContentType) -> bytes | None:
        available = {name.lower(): name for name in self.get_content_types()}
        for candidate in self.native_names(content_type):
            native = available.get(candidate.lower())
            if native is not None:
                return self._read_native(native)
        return None

    def set_content_types(self, payload: ClipboardPayload) -> None:
        if not payload:
            raise ClipboardError("nothing to write: the payload is empty")
        entries: dict[str, bytes] = {}
        for content_type, data in payload.items():
            names = self.native_names(content_type)
            if not names:
                raise ClipboardError(f"{content_type!r} has no native name on this platform")
            entries[names[0]] = data
        self._write_native(entries)

    # -- Platform hooks -------------------------------------------------------

    @abstractmethod
    def _read_native(self, native: str) -> bytes | None:
        """Return the bytes held under *native*, or ``None``."""

    @abstractmethod
    def _write_native(self, entries: dict[str, bytes]) -> None:
        """Replace the clipboard with *entries* (native name → bytes) at once."""
