from typing import Final

ORDER_STATUS_COMPLETED: Final[str] = "COMPLETED"
ORDER_STATUS_PENDING: Final[str] = "PENDING"
ORDER_STATUS_DENIED: Final[str] = "DENIED"
ORDER_STATUS_APPROVED: Final[str] = "APPROVED"
ORDER_STATUS_UNKNOWN: Final[str] = "UNKNOWN"

# PayPal event_type -> normalized order status. Anything else is UNKNOWN.
EVENT_STATUS_MAP: Final[dict[str, str]] = {
    # Captures
    "PAYMENT.CAPTURE.COMPLETED": ORDER_STATUS_COMPLETED,
    "PAYMENT.CAPTURE.PENDING": ORDER_STATUS_PENDING,
    "PAYMENT.CAPTURE.DENIED": ORDER_STATUS_DENIED,

    # Checkout orders
    "CHECKOUT.ORDER.APPROVED": ORDER_STATUS_APPROVED,
    "CHECKOUT.ORDER.COMPLETED": ORDER_STATUS_COMPLETED,
}

# Prefix for ids synthesized when the payload carries none
UNKNOWN_ORDER_ID_PREFIX: Final[str] = "unknown_"
