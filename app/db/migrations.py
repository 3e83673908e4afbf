"""Lightweight schema migrations for SQLite databases."""

from __future__ import annotations

import json
import logging
from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import Connection, Engine

logger = logging.getLogger(__name__)

LEGACY_ORDER_COLUMNS: dict[str, str] = {
    "cart_items_array": "JSON NOT NULL DEFAULT '[]'",
    "restaurant_names": "JSON NULL",
    "status": "VARCHAR(32) NOT NULL DEFAULT 'pending'",
    "timestamp": "VARCHAR(64) NULL",
}


def _sqlite_column_names(connection: Connection, table_name: str) -> set[str]:
    """Return column names for a SQLite table using PRAGMA table_info."""
    rows = connection.execute(text(f"PRAGMA table_info({table_name});")).mappings().all()
    return {str(row["name"]) for row in rows}


def _load_json_list(raw: Any) -> list[Any]:
    if isinstance(raw, list):
        return raw
    if not raw:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError):
        return []
    return value if isinstance(value, list) else []


def _link_keys(cart_items_array: Any, restaurant_names: Any) -> list[tuple[str | None, str | None]]:
    keys: list[tuple[str | None, str | None]] = []
    for item in _load_json_list(cart_items_array):
        if not isinstance(item, dict):
            continue
        restaurant_id = item.get("restaurantId")
        restaurant_name = item.get("restaurantName")
        key = (
            str(restaurant_id) if restaurant_id is not None else None,
            str(restaurant_name).strip() if restaurant_name else None,
        )
        if key != (None, None) and key not in keys:
            keys.append(key)
    for name in _load_json_list(restaurant_names):
        key = (None, str(name).strip())
        if key[1] and key not in keys:
            keys.append(key)
    return keys


def _backfill_restaurant_links(connection: Connection) -> int:
    """Create link rows for orders written before links existed."""
    rows = connection.execute(
        text(
            """
            SELECT o.id, o.cart_items_array, o.restaurant_names
            FROM orders o
            WHERE NOT EXISTS (SELECT 1 FROM order_restaurant_links l WHERE l.order_id = o.id)
            """
        )
    ).all()
    inserted = 0
    for order_id, cart_items_array, restaurant_names in rows:
        for restaurant_id, restaurant_name in _link_keys(cart_items_array, restaurant_names):
            connection.execute(
                text(
                    """
                    INSERT INTO order_restaurant_links (order_id, restaurant_id, restaurant_name)
                    VALUES (:order_id, :restaurant_id, :restaurant_name)
                    """
                ),
                {"order_id": order_id, "restaurant_id": restaurant_id, "restaurant_name": restaurant_name},
            )
            inserted += 1
    return inserted


def ensure_sqlite_schema(engine: Engine) -> None:
    """Apply lightweight schema updates for legacy SQLite databases."""
    if engine.dialect.name != "sqlite":
        return

    with engine.begin() as connection:
        table_rows = connection.execute(text("SELECT name FROM sqlite_master WHERE type='table';")).all()
        table_names: set[str] = {str(row[0]) for row in table_rows}
        if "orders" not in table_names:
            return

        order_columns: set[str] = _sqlite_column_names(connection, "orders")
        for column_name, column_ddl in LEGACY_ORDER_COLUMNS.items():
            if column_name not in order_columns:
                connection.execute(text(f"ALTER TABLE orders ADD COLUMN {column_name} {column_ddl}"))
                logger.info("[MIGRATION] Added orders.%s", column_name)

        connection.execute(text("UPDATE orders SET status = 'pending' WHERE status IS NULL OR status = ''"))
        connection.execute(text("UPDATE orders SET cart_items_array = '[]' WHERE cart_items_array IS NULL"))

        if "order_restaurant_links" in table_names:
            inserted = _backfill_restaurant_links(connection)
            if inserted:
                logger.info("[MIGRATION] Backfilled %s order restaurant links", inserted)
