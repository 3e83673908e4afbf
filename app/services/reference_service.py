"""Lookup helpers shared by reference-data endpoints."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import NotFound
from app.utils.identifiers import IdentifierLookup

ModelT = TypeVar("ModelT")


def find_by_identifier(db: Session, model: type[ModelT], raw_id: str) -> ModelT | None:
    """Fetch a record whose id matches ``raw_id`` in either id encoding."""
    lookup = IdentifierLookup.parse(raw_id)
    return db.scalars(select(model).where(lookup.clause(model.id))).first()


def get_by_identifier(db: Session, model: type[ModelT], raw_id: str, label: str) -> ModelT:
    record = find_by_identifier(db, model, raw_id)
    if record is None:
        raise NotFound(f"{label} not found")
    return record


def parse_positive_price(value: Any) -> Decimal | None:
    """Return the price as a positive Decimal, or ``None`` when invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        price = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not price.is_finite() or price <= 0:
        return None
    return price

