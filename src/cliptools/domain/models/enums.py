"""Enumerations for clipboard content types and output policies."""

from enum import Enum


class ContentKind(int, Enum):
    """Variants of a clipboard content type, in sort order."""

    URL = 1
    HTML = 2
    PDF = 3
    PNG = 4
    RTF = 5
    TEXT = 6
    CUSTOM = 7  # Platform-native identifier carried by name


class BinaryPolicy(str, Enum):
    """Whether ``paste`` may write non-UTF-8 bytes to standard output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    def allows_binary(self, stdout_is_tty: bool) -> bool:
        """Resolve the policy against the current standard output.

        ``AUTO`` allows binary only when output is redirected, so raw bytes
        never land on an interactive terminal by default.
        """
        if self is BinaryPolicy.ALWAYS:
            return True
        if self is BinaryPolicy.NEVER:
            return False
        return not stdout_is_tty


class ColorWhen(str, Enum):
    """When to colorize the error line written to standard error."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


class BackendChoice(str, Enum):
    """Clipboard backend selection."""

    AUTO = "auto"
    WAYLAND = "wayland"
    X11 = "x11"
    MACOS = "macos"
    WINDOWS = "windows"
