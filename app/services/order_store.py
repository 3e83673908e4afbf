"""Order persistence: insert, scoped queries and status updates."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Depends
from sqlalchemy import ColumnElement, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import NotFound, PersistenceError
from app.db.session import get_db
from app.models.order import Order, OrderRestaurantLink
from app.services.order_policy import OrderScope
from app.utils.identifiers import IdentifierLookup

logger = logging.getLogger(__name__)


def restaurant_links_for(order: Order) -> list[OrderRestaurantLink]:
    """Link rows for every restaurant id or name the order mentions."""
    seen: set[tuple[str | None, str | None]] = set()
    links: list[OrderRestaurantLink] = []
    for item in order.cart_items_array or []:
        restaurant_id = item.get("restaurantId")
        restaurant_name = item.get("restaurantName")
        key = (
            str(restaurant_id) if restaurant_id is not None else None,
            str(restaurant_name).strip() if restaurant_name else None,
        )
        if key == (None, None) or key in seen:
            continue
        seen.add(key)
        links.append(OrderRestaurantLink(restaurant_id=key[0], restaurant_name=key[1]))
    for name in order.restaurant_names or []:
        key = (None, name)
        if key not in seen:
            seen.add(key)
            links.append(OrderRestaurantLink(restaurant_id=None, restaurant_name=name))
    return links


class OrderStore:
    """Order collection bound to one request's session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def insert(self, order: Order) -> str:
        """Insert once; a failed insert is reported, never retried."""
        order.restaurant_links = restaurant_links_for(order)
        try:
            self.db.add(order)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Create order failed for campus %s", order.campus_id)
            raise PersistenceError("Failed to create order") from exc
        return order.id

    def _scope_clauses(self, scope: OrderScope) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if scope.campus_id is not None:
            clauses.append(Order.campus_id == scope.campus_id)
        if scope.is_restaurant_scoped:
            matches: list[ColumnElement[bool]] = []
            if scope.restaurant_ids:
                matches.append(OrderRestaurantLink.restaurant_id.in_(scope.restaurant_ids))
            if scope.restaurant_name:
                matches.append(OrderRestaurantLink.restaurant_name == scope.restaurant_name)
            clauses.append(Order.id.in_(select(OrderRestaurantLink.order_id).where(or_(*matches))))
        return clauses

    def _run(self, stmt: Any, action: str) -> list[Order]:
        try:
            return list(self.db.scalars(stmt).all())
        except SQLAlchemyError as exc:
            logger.exception("Order query failed: %s", action)
            raise PersistenceError("Failed to list orders") from exc

    def find(self, scope: OrderScope, *, status: str | None = None, limit: int = 50) -> list[Order]:
        """Orders within scope, newest first."""
        stmt = select(Order).where(*self._scope_clauses(scope))
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = stmt.order_by(Order.created_at.desc(), Order.id.desc()).limit(limit)
        return self._run(stmt, "find")

    def find_one(self, lookup: IdentifierLookup, scope: OrderScope) -> Order | None:
        """The order matching either id form within scope, if any."""
        stmt = select(Order).where(lookup.clause(Order.id), *self._scope_clauses(scope))
        try:
            return self.db.scalars(stmt).first()
        except SQLAlchemyError as exc:
            logger.exception("Order lookup failed for id %s", lookup.raw)
            raise PersistenceError("Failed to load order") from exc

    def update_status(self, lookup: IdentifierLookup, scope: OrderScope, status: str) -> Order:
        """Set ``status`` on the order matching either id form within scope.

        Single UPDATE statement; concurrent updates are last-writer-wins.
        """
        clauses = [lookup.clause(Order.id), *self._scope_clauses(scope)]
        try:
            result = self.db.execute(
                update(Order).where(*clauses).values(status=status).execution_options(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Update order failed for id %s", lookup.raw)
            raise PersistenceError("Failed to update order") from exc
        if result.rowcount == 0:
            raise NotFound("Order not found")

        order = self.db.scalars(select(Order).where(*clauses)).first()
        if order is None:
            raise NotFound("Order not found after update")
        return order


def get_order_store(db: Session = Depends(get_db)) -> OrderStore:
    return OrderStore(db)
