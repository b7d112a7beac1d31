from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from solarman.api.deps import order_store
from solarman.api.v1.schemas.order import OrderRecord
from solarman.db.store import OrderStore

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/{order_id}", response_model=OrderRecord, response_model_exclude_none=True)
def get_order(order_id: str, store: OrderStore = Depends(order_store)):  # noqa: B008
    order = store.get(order_id)
    if order is None:
        return JSONResponse(status_code=404, content={"error": "Order not found"})
    return order


@router.get("", response_model=list[OrderRecord], response_model_exclude_none=True)
def list_orders(store: OrderStore = Depends(order_store)):  # noqa: B008
    # order is whatever the store yields
    return store.list()
