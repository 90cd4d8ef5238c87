"""LineItem — one distinct product held in the cart."""

from __future__ import annotations

from dataclasses import dataclass, replace

from shopcart.domain.exceptions import ValidationError
from shopcart.domain.model.product import ProductDetails
from shopcart.domain.model.value_objects import Money


@dataclass(frozen=True)
class LineItem:
    """Captures the product details at the moment it entered the cart.

    ``title``, ``image`` and ``price`` are never re-fetched afterwards;
    ``amount`` is the only field that changes, and it does so by
    producing a new LineItem via ``with_amount()``.
    """

    id: int
    title: str
    price: Money  # locked when the product was first added
    image: str
    amount: int

    def __post_init__(self) -> None:
        if not isinstance(self.amount, int) or isinstance(self.amount, bool):
            raise ValidationError(
                f"Line item amount must be an integer, got {type(self.amount).__name__}"
            )
        if self.amount < 1:
            raise ValidationError(
                f"Line item amount must be positive, got {self.amount}"
            )

    @property
    def subtotal(self) -> Money:
        return self.price * self.amount

    def with_amount(self, amount: int) -> LineItem:
        return replace(self, amount=amount)

    @staticmethod
    def from_product(product: ProductDetails) -> LineItem:
        """First unit of a product entering the cart."""
        return LineItem(
            id=product.id,
            title=product.title,
            price=product.price,
            image=product.image,
            amount=1,
        )
