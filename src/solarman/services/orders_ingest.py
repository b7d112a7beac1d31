from __future__ import annotations

import logging
import time
from typing import Any, Optional

from solarman.api.v1.schemas.order import OrderRecord
from solarman.core.paypal_events import (
    EVENT_STATUS_MAP,
    ORDER_STATUS_UNKNOWN,
    UNKNOWN_ORDER_ID_PREFIX,
)
from solarman.db.store import OrderStore

logger = logging.getLogger(__name__)


class MalformedEventError(ValueError):
    """Webhook payload does not have the shape of a PayPal event."""


def _dig(node: Any, *path: str | int) -> Any:
    """
    Walk nested dicts/lists. A missing key, out-of-range index or a node of
    the wrong type yields None instead of raising.
    """
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or len(node) <= step:
                return None
        elif not isinstance(node, dict):
            return None
        node = node[step] if isinstance(step, int) else node.get(step)
        if node is None:
            return None
    return node


def related_order_id(resource: dict) -> Any:
    return _dig(resource, "supplementary_data", "related_ids", "order_id")


def first_capture_id(resource: dict) -> Any:
    return _dig(resource, "purchase_units", 0, "payments", "captures", 0, "id")


def extract_order_id(resource: dict) -> str:
    # related order id > first capture id > resource id > synthesized
    for candidate in (
        related_order_id(resource),
        first_capture_id(resource),
        resource.get("id"),
    ):
        if candidate:
            return str(candidate)

    # Millisecond granularity: two unmatched events in the same ms collide.
    return f"{UNKNOWN_ORDER_ID_PREFIX}{int(time.time() * 1000)}"


def normalize_status(event_type: Optional[str]) -> str:
    if not isinstance(event_type, str):
        return ORDER_STATUS_UNKNOWN
    return EVENT_STATUS_MAP.get(event_type, ORDER_STATUS_UNKNOWN)


def build_order_record(payload: Any) -> OrderRecord:
    if not isinstance(payload, dict):
        raise MalformedEventError(f"Event body must be an object, got {type(payload).__name__}")

    resource = payload.get("resource")
    if not isinstance(resource, dict):
        raise MalformedEventError("Event has no resource object")

    event_type = payload.get("event_type")

    return OrderRecord(
        id=extract_order_id(resource),
        status=normalize_status(event_type),
        event_type=event_type,
        amount=resource.get("amount"),
        timestamp=payload.get("create_time"),
        payer=resource.get("payer"),
        items=_dig(resource, "purchase_units", 0, "items"),
        capture_id=resource.get("id"),
        order_id=related_order_id(resource),
    )


def ingest_event(store: OrderStore, payload: Any) -> OrderRecord:
    """
    Normalize one PayPal event and upsert it. The record is built in full
    before the store is touched, so a malformed payload never leaves a
    partial record behind.
    """
    record = build_order_record(payload)
    store.upsert(record)

    logger.info("Updated order %s: %s", record.id, record.status)
    logger.info(
        "Amount: %s %s", _dig(record.amount, "value"), _dig(record.amount, "currency_code")
    )
    logger.info("Capture ID: %s", record.capture_id)
    logger.info("Order ID: %s", record.order_id)
    return record
