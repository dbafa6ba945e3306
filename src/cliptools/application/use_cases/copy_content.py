"""Use Case: Copy standard input to the clipboard.

Builds a clipboard payload from standard input, either raw bytes under a
single content type or a JSON object mapping type names to strings, and
hands it to the injected ClipboardPort in one atomic write.
"""

from __future__ import annotations

import json
import logging
from typing import BinaryIO

from cliptools.application.dto.requests import CopyRequest
from cliptools.domain.errors import ClipboardError, InternalError, JsonError
from cliptools.domain.models.content_type import TEXT, ClipboardPayload, ContentType
from cliptools.domain.ports.clipboard_port import ClipboardPort
from cliptools.domain.type_codec import TypeCodec

logger = logging.getLogger(__name__)


class CopyContentUseCase:
    """Replace the clipboard content with data read from a stream."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self, request: CopyRequest, source: BinaryIO) -> ClipboardPayload:
        """Read *source* and write it to the clipboard.

        Args:
            request: Input mode and target type.
            source: Binary stream to read to end-of-stream (usually stdin).

        Returns:
            The payload that was written.

        Raises:
            UnknownTypeError: A type name (flag or JSON key) is not recognized.
            JsonError: JSON input is malformed or has the wrong shape.
            InternalError: Reading *source* or writing the clipboard failed.
        """
        payload = self.build_payload(request, _read_all(source))
        try:
            self._clipboard.set_content_types(payload)
        except ClipboardError as exc:
            raise InternalError(f"unable to write clipboard: {exc}") from exc
        logger.debug("wrote %d content type(s) to clipboard", len(payload))
        return payload

    @staticmethod
    def build_payload(request: CopyRequest, raw: bytes) -> dict[ContentType, bytes]:
        """Turn the raw input into a payload according to *request*."""
        if request.json_input:
            return _payload_from_json(raw)

        if request.type_name is not None:
            target = TypeCodec.parse(request.type_name)
        elif request.system_type_name is not None:
            target = TypeCodec.system(request.system_type_name)
        else:
            target = TEXT
        return {target: raw}


def _read_all(source: BinaryIO) -> bytes:
    try:
        return source.read()
    except OSError as exc:
        raise InternalError(f"unable to read standard input: {exc}") from exc


def _payload_from_json(raw: bytes) -> dict[ContentType, bytes]:
    try:
        document = json.loads(raw)
    except ValueError as exc:
        raise JsonError(f"invalid JSON input: {exc}") from exc

    if not isinstance(document, dict):
        raise JsonError(
            "JSON input must be an object of type names to strings, "
            f"not {_json_kind(document)}"
        )
    if not document:
        raise JsonError("JSON input must name at least one type")

    # Duplicate keys were already collapsed by the parser, last one wins.
    payload: dict[ContentType, bytes] = {}
    for name, value in document.items():
        content_type = TypeCodec.parse(name)
        if not isinstance(value, str):
            raise JsonError(f"value for {name!r} must be a string, not {_json_kind(value)}")
        try:
            payload[content_type] = value.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise JsonError(f"value for {name!r} is not encodable as UTF-8") from exc
    return payload


def _json_kind(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, (int, float)):
        return "a number"
    if isinstance(value, list):
        return "an array"
    if isinstance(value, str):
        return "a string"
    return "an object"
