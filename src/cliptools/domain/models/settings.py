"""User preferences model for cliptools.

This module defines the ``UserSettings`` Pydantic model persisted by the
settings manager. Command-line flags always win over these values.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from cliptools.domain.models.enums import BackendChoice, BinaryPolicy, ColorWhen


class UserSettings(BaseModel):
    """Root user preferences — persisted to ``settings.json``."""

    color: ColorWhen = Field(
        default=ColorWhen.AUTO,
        description="Colorize the error line written to standard error.",
    )
    binary: BinaryPolicy = Field(
        default=BinaryPolicy.AUTO,
        description="Default binary policy for 'paste' when --binary is not given.",
    )
    backend: BackendChoice = Field(
        default=BackendChoice.AUTO,
        description="Clipboard backend; 'auto' picks one for the running platform.",
    )
    timeout_seconds: float = Field(
        default=2.0,
        ge=0.1,
        le=60.0,
        description="Timeout for external clipboard helpers (wl-clipboard, xclip).",
    )
