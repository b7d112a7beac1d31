import logging
from collections.abc import Mapping

logger = logging.getLogger(__name__)

PAYPAL_SIGNATURE_HEADERS: tuple[str, ...] = (
    "paypal-transmission-id",
    "paypal-cert-url",
    "paypal-auth-algo",
    "paypal-transmission-sig",
    "paypal-transmission-time",
)


def verify_webhook(headers: Mapping[str, str]) -> bool:
    """
    PayPal signature check. Currently a permissive stub: logs which
    transmission headers arrived and always reports the event as valid.

    TODO: verify against PayPal's verify-webhook-signature API (or the
    cert at paypal-cert-url) and reject on mismatch.
    """
    presence = {
        name: ("present" if headers.get(name) else "missing")
        for name in PAYPAL_SIGNATURE_HEADERS
    }
    logger.info("PayPal webhook headers: %s", presence)
    return True
