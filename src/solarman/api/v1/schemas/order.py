from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class OrderRecord(BaseModel):
    """Latest known state of one order, keyed by its resolved id."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    status: str
    event_type: Optional[str] = Field(default=None, alias="eventType")
    amount: Optional[Any] = None
    timestamp: Optional[Any] = None
    payer: Optional[Any] = None
    items: Optional[Any] = None
    capture_id: Optional[Any] = Field(default=None, alias="captureId")
    order_id: Optional[Any] = Field(default=None, alias="orderId")


class WebhookAck(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: str = "success"
    order_id: str = Field(alias="orderId")
    event_type: Optional[str] = Field(default=None, alias="eventType")
    processed_status: str = Field(alias="processedStatus")
    timestamp: str
