import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from solarman.api.v1.routers.health import router as health_router
from solarman.api.v1.routers.orders import router as orders_router
from solarman.api.v1.routers.paypal_webhook import router as paypal_router
from solarman.core.config import secret_is_set, settings
from solarman.core.logging import configure_logging
from solarman.db.store import InMemoryOrderStore, OrderStore

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/api/webhook/paypal"

ENDPOINTS: dict[str, str] = {
    "webhook": f"POST {WEBHOOK_PATH}",
    "orderStatus": "GET /api/orders/:orderId",
    "allOrders": "GET /api/orders",
    "health": "GET /api/health",
    "verifyCredentials": "GET /api/verify-credentials",
}


def _presence(secret) -> str:
    return "loaded" if secret_is_set(secret) else "missing"


def log_startup_banner() -> None:
    environment = "PRODUCTION" if settings.is_production else "DEVELOPMENT"
    base_url = settings.base_url
    webhook_url = f"{settings.public_url}{WEBHOOK_PATH}"

    logger.info("%s starting", settings.service_name)
    logger.info("Port: %s", settings.port)
    logger.info("Environment: %s", environment)
    logger.info("Local URL: %s", settings.local_url)
    logger.info("Public URL: %s", settings.public_url)
    logger.info(
        "PayPal credentials: sandbox=%s live=%s",
        _presence(settings.sandbox_paypal_client_id),
        _presence(settings.live_paypal_client_id),
    )
    logger.info("PayPal webhook endpoints: sandbox=%s live=%s", webhook_url, webhook_url)
    logger.info("Health: %s/api/health", base_url)
    logger.info("Orders: %s/api/orders/:orderId", base_url)
    logger.info("Verify: %s/api/verify-credentials", base_url)
    logger.info("Allowed frontends: %s", ", ".join(settings.cors_origins))


def create_app(store: OrderStore | None = None) -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.service_name, version=settings.version)
    app.state.order_store = store if store is not None else InMemoryOrderStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(paypal_router, prefix="/api")
    app.include_router(orders_router, prefix="/api")
    app.include_router(health_router, prefix="/api")

    @app.get("/")
    def root():
        return {
            "message": f"{settings.service_name} API",
            "environment": settings.env,
            "version": settings.version,
            "endpoints": ENDPOINTS,
            "allowed_frontends": settings.cors_origins,
            "webhook_urls": {
                "sandbox": f"{settings.public_url}{WEBHOOK_PATH}",
                "live": f"{settings.public_url}{WEBHOOK_PATH}",
            },
        }

    @app.on_event("startup")
    def on_startup() -> None:
        log_startup_banner()

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
