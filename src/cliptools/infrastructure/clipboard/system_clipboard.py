"""System clipboard — implements ClipboardPort using subprocess helpers.

Wayland sessions use ``wl-paste``/``wl-copy`` from wl-clipboard, X11
sessions use ``xclip``. Both helpers offer a single type per clipboard
owner, so payloads naming several types are refused before the clipboard
is touched.
"""

from __future__ import annotations

import logging
import subprocess
from abc import abstractmethod
from typing import ClassVar

from cliptools.domain.errors import ClipboardError
from cliptools.domain.models.content_type import HTML, PDF, PNG, RTF, TEXT, URL, ContentType
from cliptools.infrastructure.clipboard.native_clipboard import NativeClipboard

logger = logging.getLogger(__name__)

_MIME_TYPES: dict[ContentType, tuple[str, ...]] = {
    URL: ("text/uri-list", "text/x-moz-url"),
    HTML: ("text/html",),
    PDF: ("application/pdf",),
    PNG: ("image/png",),
    RTF: ("text/rtf", "application/rtf", "text/richtext"),
}

_TEXT_TARGETS = (
    "text/plain;charset=utf-8",
    "UTF8_STRING",
    "text/plain",
    "STRING",
    "TEXT",
)


class CommandClipboard(NativeClipboard):
    """Clipboard adapter running an external helper per operation."""

    def __init__(self, timeout: float = 2.0) -> None:
        self._timeout = timeout

    def _try_run(self, cmd: list[str]) -> bytes | None:
        """Run a read command and return its standard output.

        A non-zero exit means the helper has nothing to offer (empty
        selection or absent target) and maps to ``None``.

        Raises:
            ClipboardError: The helper is missing or timed out.
        """
        logger.debug("running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                check=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise ClipboardError(f"clipboard tool not found: {cmd[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"{cmd[0]} timed out after {self._timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            detail = exc.stderr.decode("utf-8", errors="replace").strip() if exc.stderr else ""
            logger.debug("%s exited with status %d: %s", cmd[0], exc.returncode, detail)
            return None
        return result.stdout

    def _feed(self, cmd: list[str], data: bytes) -> None:
        """Run a write command with *data* on its standard input.

        The helpers stay alive in the background to serve the selection, so
        their output streams are not captured.
        """
        logger.debug("running %s with %d bytes", cmd, len(data))
        try:
            subprocess.run(
                cmd,
                input=data,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=True,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise ClipboardError(f"clipboard tool not found: {cmd[0]}") from exc
        except subprocess.TimeoutExpired as exc:
            raise ClipboardError(f"{cmd[0]} timed out after {self._timeout}s") from exc
        except subprocess.CalledProcessError as exc:
            raise ClipboardError(f"clipboard write failed: {exc}") from exc

    def _write_native(self, entries: dict[str, bytes]) -> None:
        if len(entries) > 1:
            logger.debug("refusing multi-type write of %s", sorted(entries))
            raise ClipboardError(
                f"{type(self).__name__} cannot hold several types at once "
                f"({', '.join(entries)}); copy one type at a time"
            )
        ((native, data),) = entries.items()
        self._feed(self._copy_command(native), data)

    @abstractmethod
    def _copy_command(self, native: str) -> list[str]:
        """Return the command that takes ownership of the clipboard for *native*."""


class WaylandClipboard(CommandClipboard):
    """Clipboard adapter for Wayland sessions (wl-clipboard)."""

    # wl-copy offers the usual text aliases for a text/plain type by itself.
    NATIVE_TYPES: ClassVar[dict[ContentType, tuple[str, ...]]] = {
        **_MIME_TYPES,
        TEXT: _TEXT_TARGETS,
    }

    def get_text(self) -> str | None:
        data = self._try_run(["wl-paste", "--no-newline", "--type", "text"])
        if data is None:
            return None
        return data.decode("utf-8", errors="replace")

    def get_content_types(self) -> list[str]:
        # wl-paste exits non-zero when nothing is copied.
        output = self._try_run(["wl-paste", "--list-types"])
        return [] if output is None else _parse_type_list(output)

    def _read_native(self, native: str) -> bytes | None:
        return self._try_run(["wl-paste", "--no-newline", "--type", native])

    def _copy_command(self, native: str) -> list[str]:
        return ["wl-copy", "--type", native]


class X11Clipboard(CommandClipboard):
    """Clipboard adapter for X11 sessions (xclip)."""

    NATIVE_TYPES: ClassVar[dict[ContentType, tuple[str, ...]]] = {
        **_MIME_TYPES,
        # Most X11 clients ask for UTF8_STRING, so write text under it.
        TEXT: ("UTF8_STRING", *(t for t in _TEXT_TARGETS if t != "UTF8_STRING")),
    }

    # Selection protocol targets that never hold content.
    _META_TARGETS = frozenset({"TARGETS", "TIMESTAMP", "MULTIPLE", "SAVE_TARGETS", "DELETE"})

    _BASE = ["xclip", "-selection", "clipboard"]

    def get_text(self) -> str | None:
        data = self._try_run([*self._BASE, "-o"])
        if data is None:
            return None
        return data.decode("utf-8", errors="replace")

    def get_content_types(self) -> list[str]:
        output = self._try_run([*self._BASE, "-t", "TARGETS", "-o"])
        if output is None:
            return []
        return [t for t in _parse_type_list(output) if t not in self._META_TARGETS]

    def _read_native(self, native: str) -> bytes | None:
        return self._try_run([*self._BASE, "-t", native, "-o"])

    def _copy_command(self, native: str) -> list[str]:
        return [*self._BASE, "-t", native, "-i"]


def _parse_type_list(data: bytes) -> list[str]:
    text = data.decode("utf-8", errors="replace")
    return [line.strip() for line in text.splitlines() if line.strip()]
