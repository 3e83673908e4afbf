"""Audit log helpers."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import AuditLog, Order, Profile

logger = logging.getLogger(__name__)


def order_snapshot(order: Order) -> dict[str, Any]:
    return {
        "id": order.id,
        "campusId": order.campus_id,
        "status": order.status,
        "grandTotal": str(order.grand_total),
    }


def log_action(
    db: Session,
    *,
    actor: Profile | None,
    action_type: str,
    order_id: str | None = None,
    before_snapshot: dict[str, Any] | None = None,
    after_snapshot: dict[str, Any] | None = None,
) -> None:
    """Record an audit row; failures are logged and never abort the caller."""
    actor_identifier = "anonymous"
    actor_id = None
    if actor is not None:
        actor_id = actor.subject_id
        actor_identifier = actor.email or actor.subject_id

    try:
        db.add(
            AuditLog(
                actor_subject_id=actor_id,
                actor_identifier=actor_identifier,
                action_type=action_type,
                order_id=order_id,
                before_snapshot=before_snapshot,
                after_snapshot=after_snapshot,
            )
        )
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("[AUDIT] Failed to record %s for order %s", action_type, order_id)
