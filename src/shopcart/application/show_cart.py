"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from shopcart.application.dto import CartLineDTO, CartSummaryDTO
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem


class ShowCartHandler:

    def handle(self, snapshot: tuple[LineItem, ...]) -> CartSummaryDTO:
        cart = Cart(snapshot)
        return CartSummaryDTO(
            lines=[
                CartLineDTO(
                    id=item.id,
                    title=item.title,
                    image=item.image,
                    amount=item.amount,
                    unit_price=str(item.price),
                    subtotal=str(item.subtotal),
                )
                for item in cart.items
            ],
            total=str(cart.total),
            item_count=cart.item_count,
        )
