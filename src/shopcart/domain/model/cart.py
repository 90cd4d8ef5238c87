"""Cart aggregate — the ordered collection of line items.

The Cart is immutable: every change returns a new Cart, so a snapshot
handed to an observer can never be altered by a later mutation.

Invariants:
- at most one LineItem per product id
- every LineItem has ``amount >= 1`` (enforced by LineItem itself)
- insertion order is preserved; amount changes keep the item's position
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from shopcart.domain.exceptions import EntityNotFoundError, ValidationError
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Cart:

    items: tuple[LineItem, ...] = ()

    def __post_init__(self) -> None:
        seen: set[int] = set()
        for item in self.items:
            if item.id in seen:
                raise ValidationError(f"Duplicate line item for product {item.id}")
            seen.add(item.id)

    @staticmethod
    def of(items: Iterable[LineItem]) -> Cart:
        return Cart(tuple(items))

    # --- Queries --------------------------------------------------------------

    def find(self, product_id: int) -> LineItem | None:
        for item in self.items:
            if item.id == product_id:
                return item
        return None

    def amount_of(self, product_id: int) -> int:
        """Held quantity of a product; 0 when it is not in the cart."""
        item = self.find(product_id)
        return item.amount if item is not None else 0

    @property
    def total(self) -> Money:
        total = Money.zero()
        for item in self.items:
            total = total + item.subtotal
        return total

    @property
    def item_count(self) -> int:
        return len(self.items)

    def __len__(self) -> int:
        return len(self.items)

    # --- Transitions ----------------------------------------------------------

    def append(self, item: LineItem) -> Cart:
        if self.find(item.id) is not None:
            raise ValidationError(f"Product {item.id} is already in the cart")
        return Cart(self.items + (item,))

    def with_amount(self, product_id: int, amount: int) -> Cart:
        """Replace the amount of an existing item, keeping its position."""
        self._require(product_id)
        return Cart(
            tuple(
                item.with_amount(amount) if item.id == product_id else item
                for item in self.items
            )
        )

    def without(self, product_id: int) -> Cart:
        self._require(product_id)
        return Cart(tuple(item for item in self.items if item.id != product_id))

    def _require(self, product_id: int) -> None:
        if self.find(product_id) is None:
            raise EntityNotFoundError(f"Product {product_id} is not in the cart")
