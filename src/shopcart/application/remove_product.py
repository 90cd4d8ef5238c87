"""Application service: Remove Product use case."""

from __future__ import annotations

from shopcart.application.cart_session import CartSession
from shopcart.application.dto import MutationResult


class RemoveProductHandler:

    def __init__(self, session: CartSession) -> None:
        self._session = session

    def handle(self, product_id: int) -> MutationResult:
        """Drop a product from the cart whatever its amount.

        No stock check. Raises EntityNotFoundError if the product is
        not in the cart.
        """
        updated = self._session.cart.without(product_id)
        self._session.commit(updated)
        return MutationResult.applied_with(updated.items)
