"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from shopcart.application.cart_engine import CartEngine, FailureListener
from shopcart.infrastructure.config import Settings
from shopcart.infrastructure.http.inventory_api_client import InventoryApiClient
from shopcart.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from shopcart.infrastructure.persistence.json_file_key_value_store import (
    JsonFileKeyValueStore,
)


def inventory_gateway(settings: Settings) -> InventoryApiClient:
    return InventoryApiClient(settings.api_url, timeout=settings.http_timeout)


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(JsonFileKeyValueStore(settings.storage_file))


def cart_engine(
    settings: Settings | None = None,
    on_failure: FailureListener | None = None,
) -> CartEngine:
    settings = settings or Settings.from_env()
    return CartEngine(
        gateway=inventory_gateway(settings),
        repository=cart_repository(settings),
        on_failure=on_failure,
    )
