"""Abstract read-only access to the remote inventory service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from shopcart.domain.model.product import ProductDetails, Stock


class InventoryGateway(ABC):

    @abstractmethod
    def get_stock(self, product_id: int) -> Stock:
        """Return the quantity currently available for a product.

        Raises InventoryUnavailableError if the lookup fails.
        """

    @abstractmethod
    def get_product(self, product_id: int) -> ProductDetails:
        """Return the catalog metadata for a product.

        Raises InventoryUnavailableError if the lookup fails.
        """
