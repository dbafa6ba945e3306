"""Domain models — public API.

Provides convenient imports for the most commonly used domain values.
"""

from cliptools.domain.models.content_type import (
    HTML,
    PDF,
    PNG,
    RTF,
    TEXT,
    URL,
    WELL_KNOWN,
    ClipboardPayload,
    ContentType,
)
from cliptools.domain.models.enums import (
    BackendChoice,
    BinaryPolicy,
    ColorWhen,
    ContentKind,
)
from cliptools.domain.models.settings import UserSettings

__all__ = [
    # Content types
    "ClipboardPayload",
    "ContentType",
    "HTML",
    "PDF",
    "PNG",
    "RTF",
    "TEXT",
    "URL",
    "WELL_KNOWN",
    # Enums
    "BackendChoice",
    "BinaryPolicy",
    "ColorWhen",
    "ContentKind",
    # Settings
    "UserSettings",
]
