"""Read-only records returned by the inventory service.

Neither record is owned by the cart: they are fetched on demand and
discarded once the mutation that needed them is done.
"""

from __future__ import annotations

from dataclasses import dataclass

from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class Stock:
    """Quantity currently available for a product."""

    product_id: int
    amount: int

    def allows(self, requested: int) -> bool:
        return requested <= self.amount


@dataclass(frozen=True)
class ProductDetails:
    """Descriptive metadata for a product, as listed in the catalog."""

    id: int
    title: str
    price: Money
    image: str
