from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from solarman.api.deps import order_store
from solarman.api.v1.schemas.health import (
    CredentialPair,
    CredentialsLoaded,
    CredentialsOut,
    HealthOut,
)
from solarman.core.config import secret_is_set, settings
from solarman.db.store import OrderStore

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health(store: OrderStore = Depends(order_store)):  # noqa: B008
    return HealthOut(
        service=settings.service_name,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.env,
        total_orders=store.count(),
        version=settings.version,
        credentials=CredentialsLoaded(
            sandbox_loaded=secret_is_set(settings.sandbox_paypal_client_id),
            live_loaded=secret_is_set(settings.live_paypal_client_id),
        ),
    )


@router.get("/verify-credentials", response_model=CredentialsOut)
def verify_credentials():
    return CredentialsOut(
        sandbox=CredentialPair(
            client_id=secret_is_set(settings.sandbox_paypal_client_id),
            client_secret=secret_is_set(settings.sandbox_paypal_client_secret),
        ),
        live=CredentialPair(
            client_id=secret_is_set(settings.live_paypal_client_id),
            client_secret=secret_is_set(settings.live_paypal_client_secret),
        ),
    )
