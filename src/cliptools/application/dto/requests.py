"""Application layer — request DTOs.

The CLI parses its flags into these Pydantic models. Validation enforces
that at most one source of a content type is given per request.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

from cliptools.domain.models.enums import BinaryPolicy


class PasteRequest(BaseModel):
    """Flags of the ``paste`` command."""

    model_config = ConfigDict(frozen=True)

    type_name: Optional[str] = None
    system_type_name: Optional[str] = Field(default=None, min_length=1)
    binary: BinaryPolicy = BinaryPolicy.AUTO

    @model_validator(mode="after")
    def _one_type_source(self) -> PasteRequest:
        if self.type_name is not None and self.system_type_name is not None:
            raise PydanticCustomError(
                "option_conflict",
                "--type and --system-type cannot be used together",
            )
        return self


class CopyRequest(BaseModel):
    """Flags of the ``copy`` command."""

    model_config = ConfigDict(frozen=True)

    type_name: Optional[str] = None
    system_type_name: Optional[str] = Field(default=None, min_length=1)
    json_input: bool = False

    @model_validator(mode="after")
    def _one_input_mode(self) -> CopyRequest:
        given = [
            flag
            for flag, present in (
                ("--type", self.type_name is not None),
                ("--system-type", self.system_type_name is not None),
                ("--json", self.json_input),
            )
            if present
        ]
        if len(given) > 1:
            raise PydanticCustomError(
                "option_conflict",
                "{flags} cannot be used together",
                {"flags": " and ".join(given)},
            )
        return self
