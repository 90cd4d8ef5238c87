"""Shared setup for the cart engine tests."""

from __future__ import annotations

from shopcart.application.cart_engine import CartEngine
from shopcart.domain.model.line_item import LineItem
from shopcart.infrastructure.persistence.json_cart_repository import (
    CART_STORAGE_KEY,
    JsonCartRepository,
)
from tests.fakes import (
    FakeInventoryGateway,
    FakeKeyValueStore,
    RecordingNotifier,
    product,
)


def build_engine(
    stock: dict[int, int] | None = None,
    stored: list[LineItem] | None = None,
) -> tuple[CartEngine, FakeInventoryGateway, FakeKeyValueStore, RecordingNotifier]:
    """Build an engine over fakes, optionally starting from a stored cart."""
    if stock is None:
        stock = {1: 5, 2: 3, 3: 1}
    gateway = FakeInventoryGateway(
        stock=stock,
        products=[
            product(1, "Tênis de Caminhada Leve Confortável", "179.90"),
            product(2, "Tênis VR Caminhada Confortável", "139.90"),
            product(3, "Tênis Adidas Duramo Lite 2.0", "219.90"),
        ],
    )
    store = FakeKeyValueStore()
    if stored is not None:
        store.data[CART_STORAGE_KEY] = JsonCartRepository.encode(stored)
    notifier = RecordingNotifier()
    engine = CartEngine(gateway, JsonCartRepository(store), on_failure=notifier)
    return engine, gateway, store, notifier


def stored_items(store: FakeKeyValueStore) -> list[LineItem] | None:
    blob = store.get(CART_STORAGE_KEY)
    return None if blob is None else JsonCartRepository.decode(blob)
