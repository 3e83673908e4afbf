"""Shared schema configuration for camelCase JSON payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing snake_case fields as camelCase JSON keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


def coerce_scalar_to_text(value: Any) -> Any:
    """Accept numbers where free text is expected (phone numbers, ids)."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value
