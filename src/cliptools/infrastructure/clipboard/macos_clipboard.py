"""macOS clipboard — implements ClipboardPort on NSPasteboard via PyObjC."""

from __future__ import annotations

import logging
from typing import Any, ClassVar

from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import HTML, PDF, PNG, RTF, TEXT, URL, ContentType
from cliptools.infrastructure.clipboard.native_clipboard import NativeClipboard

logger = logging.getLogger(__name__)


class MacOSClipboard(NativeClipboard):
    """Clipboard adapter for the general pasteboard.

    Writes build a single ``NSPasteboardItem`` holding every type and hand
    it to the pasteboard in one ``writeObjects_`` call.
    """

    NATIVE_TYPES: ClassVar[dict[ContentType, tuple[str, ...]]] = {
        URL: ("public.url", "Apple URL pasteboard type"),
        HTML: ("public.html", "Apple HTML pasteboard type"),
        PDF: ("com.adobe.pdf", "Apple PDF pasteboard type"),
        PNG: ("public.png", "Apple PNG pasteboard type"),
        RTF: ("public.rtf", "NeXT Rich Text Format v1.0 pasteboard type"),
        TEXT: ("public.utf8-plain-text", "NSStringPboardType", "public.plain-text"),
    }

    def __init__(self, pasteboard: Any = None) -> None:
        if pasteboard is None:
            try:
                from AppKit import NSPasteboard
            except ImportError as exc:
                raise ClipboardError(
                    "PyObjC is required on macOS. Install pyobjc-framework-Cocoa."
                ) from exc
            pasteboard = NSPasteboard.generalPasteboard()
        self._pasteboard = pasteboard

    def get_text(self) -> str | None:
        text = self._pasteboard.stringForType_(self.NATIVE_TYPES[TEXT][0])
        return None if text is None else str(text)

    def get_content_types(self) -> list[str]:
        types = self._pasteboard.types()
        return [str(t) for t in types or []]

    def _read_native(self, native: str) -> bytes | None:
        data = self._pasteboard.dataForType_(native)
        return None if data is None else bytes(data)

    def _write_native(self, entries: dict[str, bytes]) -> None:
        from AppKit import NSPasteboardItem
        from Foundation import NSData

        item = NSPasteboardItem.alloc().init()
        for native, data in entries.items():
            ns_data = NSData.dataWithBytes_length_(data, len(data))
            if not item.setData_forType_(ns_data, native):
                raise ClipboardError(f"pasteboard rejected type {native}")

        # TODO: clearContents and writeObjects_ are two calls; verify no other
        # process can observe the cleared pasteboard in between.
        self._pasteboard.clearContents()
        if not self._pasteboard.writeObjects_([item]):
            raise ClipboardError("pasteboard rejected the write")
        logger.debug("wrote %d type(s) to the general pasteboard", len(entries))
