"""Clipboard adapters for Wayland, X11, macOS and Windows."""

from cliptools.infrastructure.clipboard.factory import LazyClipboard, detect_backend, get_clipboard
from cliptools.infrastructure.clipboard.native_clipboard import NativeClipboard

__all__ = [
    "LazyClipboard",
    "NativeClipboard",
    "detect_backend",
    "get_clipboard",
]
