"""Identifier helpers for records stored under two id encodings.

New records get a UUID stored as 32 lowercase hex characters. Older records
were written with arbitrary string ids and were never migrated, so every
lookup by id has to accept either form.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass

from sqlalchemy import ColumnElement
from sqlalchemy.orm import InstrumentedAttribute


def new_record_id() -> str:
    """Return a fresh primary identifier."""
    return uuid.uuid4().hex


@dataclass(frozen=True)
class IdentifierLookup:
    """Strict UUID parse with a fallback to the raw string."""

    raw: str
    parsed: uuid.UUID | None = None

    @classmethod
    def parse(cls, raw: str) -> IdentifierLookup:
        try:
            parsed: uuid.UUID | None = uuid.UUID(raw)
        except (TypeError, ValueError, AttributeError):
            parsed = None
        return cls(raw=raw, parsed=parsed)

    @property
    def candidates(self) -> tuple[str, ...]:
        values: list[str] = []
        if self.parsed is not None:
            values.extend([self.parsed.hex, str(self.parsed)])
        if self.raw not in values:
            values.append(self.raw)
        return tuple(values)

    def matches(self, value: object) -> bool:
        return value is not None and str(value) in self.candidates

    def clause(self, column: InstrumentedAttribute[str]) -> ColumnElement[bool]:
        """SQL predicate matching either encoding on ``column``."""
        return column.in_(self.candidates)
