"""CartRepository that stores the cart as one versioned JSON blob.

Blob layout::

    {"version": 1, "items": [{"id": 1, "title": "...", "price": "179.90",
                              "image": "...", "amount": 2}]}

A blob with any other version, or one that fails to parse, is treated
as if nothing were stored.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal, InvalidOperation

from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.key_value_store import KeyValueStore

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "shopcart:cart"
SCHEMA_VERSION = 1


class JsonCartRepository(CartRepository):

    def __init__(self, store: KeyValueStore, key: str = CART_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    # --- CartRepository interface ---------------------------------------------

    def load(self) -> list[LineItem] | None:
        blob = self._store.get(self._key)
        if blob is None:
            return None
        try:
            return self.decode(blob)
        except (ValueError, KeyError, TypeError, InvalidOperation, DomainException) as exc:
            logger.warning("Stored cart under %r is unusable: %s", self._key, exc)
            return None

    def save(self, items: list[LineItem]) -> None:
        self._store.set(self._key, self.encode(items))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def encode(items: list[LineItem]) -> str:
        return json.dumps(
            {
                "version": SCHEMA_VERSION,
                "items": [JsonCartRepository._to_raw(item) for item in items],
            }
        )

    @staticmethod
    def decode(blob: str) -> list[LineItem]:
        raw = json.loads(blob)
        if not isinstance(raw, dict):
            raise ValueError("cart blob is not a JSON object")
        if raw.get("version") != SCHEMA_VERSION:
            raise ValueError(f"unsupported cart schema version {raw.get('version')!r}")
        records = raw["items"]
        if not isinstance(records, list):
            raise ValueError("cart items are not a list")
        return [JsonCartRepository._to_domain(record) for record in records]

    @staticmethod
    def _to_raw(item: LineItem) -> dict:
        return {
            "id": item.id,
            "title": item.title,
            "price": str(item.price.amount),
            "image": item.image,
            "amount": item.amount,
        }

    @staticmethod
    def _to_domain(raw: dict) -> LineItem:
        product_id = raw["id"]
        if not isinstance(product_id, int) or isinstance(product_id, bool):
            raise TypeError(f"product id must be an integer, got {product_id!r}")
        # encode() writes all three as strings
        for field in ("title", "price", "image"):
            if not isinstance(raw[field], str):
                raise TypeError(f"{field} must be a string, got {raw[field]!r}")
        return LineItem(
            id=product_id,
            title=raw["title"],
            price=Money(Decimal(raw["price"])),
            image=raw["image"],
            amount=raw["amount"],
        )
