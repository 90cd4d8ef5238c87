"""In-memory fakes for testing.

These implement the same abstract interfaces as the HTTP client and the
JSON file store but keep everything in dicts. No network, no file I/O.
"""

from __future__ import annotations

from shopcart.domain.exceptions import InventoryUnavailableError, StorageError
from shopcart.domain.model.product import ProductDetails, Stock
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.inventory_gateway import InventoryGateway
from shopcart.domain.repository.key_value_store import KeyValueStore


def product(product_id: int, title: str = "", price: str = "100.00") -> ProductDetails:
    return ProductDetails(
        id=product_id,
        title=title or f"Sneaker {product_id}",
        price=Money.of(price),
        image=f"https://cdn.example.com/{product_id}.jpg",
    )


class FakeInventoryGateway(InventoryGateway):

    def __init__(
        self,
        stock: dict[int, int] | None = None,
        products: list[ProductDetails] | None = None,
    ) -> None:
        self.stock: dict[int, int] = dict(stock or {})
        self._products: dict[int, ProductDetails] = {}
        for p in products or []:
            self._products[p.id] = p
        self.offline = False
        self.stock_calls: list[int] = []
        self.product_calls: list[int] = []

    def get_stock(self, product_id: int) -> Stock:
        self.stock_calls.append(product_id)
        if self.offline:
            raise InventoryUnavailableError("inventory service is offline")
        if product_id not in self.stock:
            raise InventoryUnavailableError(f"404 for /stock/{product_id}")
        return Stock(product_id=product_id, amount=self.stock[product_id])

    def get_product(self, product_id: int) -> ProductDetails:
        self.product_calls.append(product_id)
        if self.offline:
            raise InventoryUnavailableError("inventory service is offline")
        if product_id not in self._products:
            raise InventoryUnavailableError(f"404 for /products/{product_id}")
        return self._products[product_id]


class FakeKeyValueStore(KeyValueStore):

    def __init__(self, data: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(data or {})
        self.writes = 0
        self.fail_writes = False

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, blob: str) -> None:
        if self.fail_writes:
            raise StorageError("disk full")
        self.data[key] = blob
        self.writes += 1


class RecordingNotifier:
    """Stands in for the toast channel; remembers every message."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: str) -> None:
        self.messages.append(message)
