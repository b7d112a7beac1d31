from fastapi import Request

from solarman.db.store import OrderStore


def order_store(request: Request) -> OrderStore:
    """FastAPI dependency: the app's order store"""
    return request.app.state.order_store
