"""HTTP implementation of InventoryGateway.

Talks to the store's REST API:

    GET /stock/{id}     -> {"id": 1, "amount": 3}
    GET /products/{id}  -> {"id": 1, "title": "...", "price": 179.9, "image": "..."}
"""

from __future__ import annotations

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from shopcart.domain.exceptions import InventoryUnavailableError, ValidationError
from shopcart.domain.model.product import ProductDetails, Stock
from shopcart.domain.model.value_objects import Money
from shopcart.domain.repository.inventory_gateway import InventoryGateway

logger = logging.getLogger(__name__)


class InventoryApiClient(InventoryGateway):

    DEFAULT_TIMEOUT = 10.0  # seconds

    def __init__(self, base_url: str, timeout: float | None = None) -> None:
        self._base_url = base_url.rstrip("/")
        if timeout is None:
            timeout = self.DEFAULT_TIMEOUT
        elif timeout <= 0:
            raise ValueError(f"timeout must be greater than zero, got {timeout!r}")
        self._timeout = timeout
        self._session = self._create_session()

    @staticmethod
    def _create_session() -> requests.Session:
        """HTTP session that retries GETs on transient server errors."""
        session = requests.Session()
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=["GET"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    # --- InventoryGateway interface -------------------------------------------

    def get_stock(self, product_id: int) -> Stock:
        raw = self._get_json(f"/stock/{product_id}")
        try:
            amount = raw["amount"]
            if not isinstance(amount, int) or isinstance(amount, bool):
                raise TypeError(f"amount is {type(amount).__name__}")
            return Stock(product_id=product_id, amount=amount)
        except (KeyError, TypeError) as exc:
            raise InventoryUnavailableError(
                f"Malformed stock record for product {product_id}: {exc}"
            ) from exc

    def get_product(self, product_id: int) -> ProductDetails:
        raw = self._get_json(f"/products/{product_id}")
        try:
            if raw["id"] != product_id:
                raise ValueError(f"response is for product {raw['id']!r}")
            return ProductDetails(
                id=product_id,
                title=str(raw["title"]),
                price=Money.of(raw["price"]),
                image=str(raw["image"]),
            )
        except (KeyError, TypeError, ValueError, ValidationError) as exc:
            raise InventoryUnavailableError(
                f"Malformed product record for product {product_id}: {exc}"
            ) from exc

    # --- HTTP helpers ---------------------------------------------------------

    def _get_json(self, path: str) -> dict:
        url = f"{self._base_url}{path}"
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.error(f"Inventory request {url} failed: {e}")
            raise InventoryUnavailableError(f"Inventory request failed: {e}") from e
        except ValueError as e:
            logger.error(f"Inventory response from {url} is not JSON: {e}")
            raise InventoryUnavailableError(f"Invalid inventory response: {e}") from e

        if not isinstance(payload, dict):
            raise InventoryUnavailableError(
                f"Expected a JSON object from {url}, got {type(payload).__name__}"
            )
        return payload
