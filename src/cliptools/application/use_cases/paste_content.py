"""Use Case: Paste clipboard content.

Reads the clipboard through an injected ClipboardPort, either as default
text or as one explicitly requested content type, and guards standard
output against binary data unless the binary policy allows it.
"""

from __future__ import annotations

import logging

from cliptools.application.dto.requests import PasteRequest
from cliptools.domain.errors import DataNotFoundError, Utf8Error
from cliptools.domain.models.content_type import ContentType
from cliptools.domain.ports.clipboard_port import ClipboardPort
from cliptools.domain.type_codec import TypeCodec

logger = logging.getLogger(__name__)


class PasteContentUseCase:
    """Fetch clipboard content as bytes ready for standard output."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self, request: PasteRequest, stdout_is_tty: bool) -> bytes:
        """Read the content selected by *request*.

        Args:
            request: Requested type (if any) and binary policy.
            stdout_is_tty: Whether standard output is an interactive terminal,
                used to resolve ``BinaryPolicy.AUTO``.

        Returns:
            The clipboard bytes, unmodified.

        Raises:
            UnknownTypeError: The requested type name is not recognized.
            DataNotFoundError: The clipboard holds nothing for the request.
            Utf8Error: The content is not UTF-8 and binary output is not allowed.
        """
        content_type = self._resolve(request)
        if content_type is None:
            text = self._clipboard.get_text()
            if text is None:
                raise DataNotFoundError("no text found in clipboard")
            return text.encode("utf-8")

        data = self._clipboard.get_content_for_type(content_type)
        if data is None:
            raise DataNotFoundError(
                f"no data found in clipboard for type {TypeCodec.render(content_type)}"
            )

        binary_allowed = request.binary.allows_binary(stdout_is_tty)
        logger.debug(
            "read %d bytes for %r (binary allowed: %s)",
            len(data),
            content_type,
            binary_allowed,
        )
        if not binary_allowed:
            try:
                data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise Utf8Error(
                    f"clipboard data is not valid UTF-8 ({exc.reason} at byte {exc.start}); "
                    "use --binary always to print it anyway"
                ) from exc
        return data

    @staticmethod
    def _resolve(request: PasteRequest) -> ContentType | None:
        if request.type_name is not None:
            return TypeCodec.parse(request.type_name)
        if request.system_type_name is not None:
            return TypeCodec.system(request.system_type_name)
        return None
