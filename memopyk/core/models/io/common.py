"""
Shared bases for API schemas.

The public API speaks camelCase JSON while Python code uses snake_case
attribute names; every schema accepts both on input and emits camelCase.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class MessageResponse(CamelModel):
    """Generic ``{success, message}`` acknowledgement."""

    success: bool = True
    message: str
