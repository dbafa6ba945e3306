"""Use Case: List the content types currently held by the clipboard."""

from __future__ import annotations

from cliptools.domain.errors import ClipboardError, DataNotFoundError
from cliptools.domain.ports.clipboard_port import ClipboardPort
from cliptools.domain.type_codec import TypeCodec


class ListTypesUseCase:
    """Enumerate clipboard types as portable or native names."""

    def __init__(self, clipboard: ClipboardPort) -> None:
        self._clipboard = clipboard

    def execute(self, show_native: bool = False) -> list[str]:
        """Return the type names on the clipboard.

        Native names come back verbatim in clipboard order. Portable names
        are sorted and deduplicated, since several native flavors usually
        normalize to the same portable type.

        Raises:
            DataNotFoundError: If the clipboard types cannot be enumerated.
        """
        try:
            natives = self._clipboard.get_content_types()
        except ClipboardError as exc:
            raise DataNotFoundError(f"unable to list clipboard types: {exc}") from exc

        if show_native:
            return list(natives)

        return sorted(
            {
                TypeCodec.render(self._clipboard.normalize_content_type(native))
                for native in natives
            }
        )
