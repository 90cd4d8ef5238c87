"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from shopcart.application.cart_session import CartSession
from shopcart.application.dto import MutationResult
from shopcart.application.messages import OUT_OF_STOCK
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.repository.inventory_gateway import InventoryGateway

logger = logging.getLogger(__name__)


class AddProductHandler:

    def __init__(self, gateway: InventoryGateway, session: CartSession) -> None:
        self._gateway = gateway
        self._session = session

    def handle(self, product_id: int) -> MutationResult:
        """Put one more unit of a product in the cart.

        Steps:
        1. Look up the held amount (0 if the product is new).
        2. Check ``held + 1`` against the current stock.
        3. Bump the existing item, or fetch product details and append
           a new item with amount 1.
        4. Commit.

        Gateway and storage faults propagate to the caller untouched.
        """
        cart = self._session.cart
        existing = cart.find(product_id)

        stock = self._gateway.get_stock(product_id)
        candidate = cart.amount_of(product_id) + 1
        if not stock.allows(candidate):
            logger.info(
                "Add of product %s rejected: %d requested, %d in stock",
                product_id, candidate, stock.amount,
            )
            return MutationResult.rejected(OUT_OF_STOCK, cart.items)

        if existing is not None:
            updated = cart.with_amount(product_id, candidate)
        else:
            product = self._gateway.get_product(product_id)
            updated = cart.append(LineItem.from_product(product))

        self._session.commit(updated)
        return MutationResult.applied_with(updated.items)
