"""Port: Clipboard — read, enumerate and write system clipboard content."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cliptools.domain.models.content_type import ClipboardPayload, ContentType


class ClipboardPort(ABC):
    """Contract for clipboard operations."""

    @abstractmethod
    def get_text(self) -> str | None:
        """Return the default text representation, or ``None`` if there is none.

        Raises:
            ClipboardError: If the clipboard cannot be accessed.
        """
        ...

    @abstractmethod
    def get_content_for_type(self, content_type: ContentType) -> bytes | None:
        """Return the raw bytes held for *content_type*, or ``None`` if absent.

        Raises:
            ClipboardError: If the clipboard cannot be accessed.
        """
        ...

    @abstractmethod
    def get_content_types(self) -> list[str]:
        """Return the native type identifiers currently on the clipboard.

        Raises:
            ClipboardError: If the types cannot be enumerated.
        """
        ...

    @abstractmethod
    def normalize_content_type(self, native: str) -> ContentType:
        """Map a native identifier onto the portable vocabulary.

        Identifiers with no portable equivalent come back as custom types.
        """
        ...

    @abstractmethod
    def set_content_types(self, payload: ClipboardPayload) -> None:
        """Replace the clipboard with every entry of *payload*.

        Either every entry is applied or the clipboard is left untouched.

        Raises:
            ClipboardError: If the write is rejected.
        """
        ...
