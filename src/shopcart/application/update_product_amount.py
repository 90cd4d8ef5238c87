"""Application service: Update Product Amount use case."""

from __future__ import annotations

import logging

from shopcart.application.cart_session import CartSession
from shopcart.application.dto import MutationResult, SetAmountRequest
from shopcart.application.messages import OUT_OF_STOCK
from shopcart.domain.repository.inventory_gateway import InventoryGateway

logger = logging.getLogger(__name__)


class UpdateProductAmountHandler:

    def __init__(self, gateway: InventoryGateway, session: CartSession) -> None:
        self._gateway = gateway
        self._session = session

    def handle(self, request: SetAmountRequest) -> MutationResult:
        """Set the absolute amount of a product already in the cart.

        An amount below one is ignored rather than removing the item;
        callers wanting removal use RemoveProductHandler. Raises
        EntityNotFoundError if the product is not in the cart.
        """
        cart = self._session.cart
        if request.amount < 1:
            return MutationResult.no_op(cart.items)

        stock = self._gateway.get_stock(request.product_id)
        if not stock.allows(request.amount):
            logger.info(
                "Amount change of product %s rejected: %d requested, %d in stock",
                request.product_id, request.amount, stock.amount,
            )
            return MutationResult.rejected(OUT_OF_STOCK, cart.items)

        updated = cart.with_amount(request.product_id, request.amount)
        self._session.commit(updated)
        return MutationResult.applied_with(updated.items)
