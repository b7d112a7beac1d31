import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from solarman.api.deps import order_store
from solarman.api.v1.schemas.order import WebhookAck
from solarman.db.store import OrderStore
from solarman.integrations.paypal.webhook import verify_webhook
from solarman.services.orders_ingest import ingest_event

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/webhook", tags=["paypal"])


@router.post("/paypal", response_model=WebhookAck)
async def paypal_webhook(request: Request, store: OrderStore = Depends(order_store)):  # noqa: B008
    # PayPal retries on anything but 2xx, so bad payloads are never 4xx:
    # they are logged and answered with an opaque 500.
    try:
        if not verify_webhook(request.headers):
            logger.warning("PayPal webhook verification skipped")

        payload = await request.json()
        event_type = payload.get("event_type") if isinstance(payload, dict) else None
        logger.info("PayPal webhook received: %s", event_type)

        record = ingest_event(store, payload)
    except Exception:
        logger.exception("PayPal webhook error")
        return JSONResponse(status_code=500, content={"error": "Internal server error"})

    return WebhookAck(
        order_id=record.id,
        event_type=record.event_type,
        processed_status=record.status,
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
