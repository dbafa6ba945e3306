"""Clipboard content types and payloads.

A :class:`ContentType` is either one of the portable, well-known kinds
(url, html, pdf, png, rtf, text) or a ``CUSTOM`` kind carrying the
platform-native identifier by name.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from cliptools.domain.models.enums import ContentKind


@dataclass(frozen=True, order=True)
class ContentType:
    """Immutable clipboard content type.

    Equality and ordering follow ``(kind, name)``; well-known kinds carry an
    empty name.
    """

    kind: ContentKind
    name: str = ""

    def __post_init__(self) -> None:
        if self.kind is ContentKind.CUSTOM:
            if not self.name:
                raise ValueError("a custom content type needs a native name")
        elif self.name:
            raise ValueError(f"{self.kind.name.lower()} content type takes no name")

    @classmethod
    def custom(cls, name: str) -> ContentType:
        """Build a content type for a platform-native identifier."""
        return cls(ContentKind.CUSTOM, name)

    @property
    def is_custom(self) -> bool:
        return self.kind is ContentKind.CUSTOM

    def __repr__(self) -> str:
        if self.is_custom:
            return f"ContentType.custom({self.name!r})"
        return f"ContentType.{self.kind.name}"


URL = ContentType(ContentKind.URL)
HTML = ContentType(ContentKind.HTML)
PDF = ContentType(ContentKind.PDF)
PNG = ContentType(ContentKind.PNG)
RTF = ContentType(ContentKind.RTF)
TEXT = ContentType(ContentKind.TEXT)

WELL_KNOWN: tuple[ContentType, ...] = (URL, HTML, PDF, PNG, RTF, TEXT)

# One byte sequence per content type, written to the clipboard in one go.
ClipboardPayload = Mapping[ContentType, bytes]
