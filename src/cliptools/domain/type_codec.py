"""Type name codec — map user-facing type names to content types and back.

Well-known names (``url``, ``html``, ``pdf``, ``png``, ``rtf``, ``text``)
match case-insensitively. ``@<native-name>`` names a platform-native type,
kept verbatim.
"""

from __future__ import annotations

from cliptools.domain.errors import ArgumentError, UnknownTypeError
from cliptools.domain.models.content_type import WELL_KNOWN, ContentType

CUSTOM_PREFIX = "@"

_BY_NAME: dict[str, ContentType] = {ct.kind.name.lower(): ct for ct in WELL_KNOWN}


class TypeCodec:
    """Bidirectional mapping between type names and :class:`ContentType`."""

    @staticmethod
    def parse(name: str) -> ContentType:
        """Resolve a type name.

        Args:
            name: A well-known name or ``@`` followed by a native name.

        Returns:
            The matching content type.

        Raises:
            UnknownTypeError: If the name is not recognized.
        """
        known = _BY_NAME.get(name.lower())
        if known is not None:
            return known
        if name.startswith(CUSTOM_PREFIX) and len(name) > len(CUSTOM_PREFIX):
            return ContentType.custom(name[len(CUSTOM_PREFIX) :])
        raise UnknownTypeError(name)

    @staticmethod
    def render(content_type: ContentType) -> str:
        """Return the user-facing name of *content_type*."""
        if content_type.is_custom:
            return CUSTOM_PREFIX + content_type.name
        return content_type.kind.name.lower()

    @staticmethod
    def system(raw: str) -> ContentType:
        """Wrap a raw platform type name, bypassing name resolution.

        Raises:
            ArgumentError: If *raw* is empty.
        """
        if not raw:
            raise ArgumentError("system type name must not be empty")
        return ContentType.custom(raw)
