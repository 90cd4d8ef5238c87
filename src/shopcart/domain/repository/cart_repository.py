"""Abstract repository for the persisted cart.

Defined in the domain layer so the domain never depends on
infrastructure. Only one cart is ever persisted, so there is no key
or identifier in the interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.line_item import LineItem


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> list[LineItem] | None:
        """Return the persisted line items, or None if nothing usable is stored."""

    @abstractmethod
    def save(self, items: list[LineItem]) -> None:
        """Persist the full, ordered list of line items."""
