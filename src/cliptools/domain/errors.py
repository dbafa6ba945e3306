"""Domain errors — custom exceptions for cliptools.

These exceptions are raised by domain services and use cases and caught by
the presentation layer, which renders a single error line and exits with
the ``exit_code`` carried by the exception. They carry no infrastructure
dependencies.
"""


class ClipToolsError(Exception):
    """Base exception for all cliptools errors."""

    exit_code: int = 1


class DataNotFoundError(ClipToolsError):
    """Raised when the requested type or text is absent from the clipboard."""

    exit_code = 1


class InternalError(ClipToolsError):
    """Raised when reading input or writing the clipboard fails."""

    exit_code = 1


class ClipboardError(InternalError):
    """Raised by clipboard adapters when the system clipboard cannot be used."""


class ArgumentError(ClipToolsError):
    """Raised when user-supplied arguments are invalid or conflicting."""

    exit_code = 2


class UnknownTypeError(ArgumentError):
    """Raised when a type name is not recognized."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"unknown type: {name!r}; expected one of url, html, pdf, png, rtf, text "
            "or @<native-name> (or use --system-type for a platform type)"
        )
        self.name = name


class JsonError(ClipToolsError):
    """Raised when JSON input is malformed or has the wrong shape."""

    exit_code = 2


class Utf8Error(ClipToolsError):
    """Raised when binary data is about to be printed where text is required."""

    exit_code = 2
