"""CartEngine — the only entry point for changing the cart.

The engine owns a CartSession and routes each operation to its use-case
handler while holding the session lock, so mutations are applied one
at a time. Every operation returns a MutationResult and never raises:
rejections and faults are reported to the caller's ``on_failure``
channel with a short message and leave the cart exactly as it was.
"""

from __future__ import annotations

import logging
from typing import Callable

from shopcart.application.add_product import AddProductHandler
from shopcart.application.cart_session import CartSession, SnapshotListener
from shopcart.application.dto import MutationResult, SetAmountRequest
from shopcart.application.messages import ADD_FAILED, REMOVE_FAILED, UPDATE_FAILED
from shopcart.application.remove_product import RemoveProductHandler
from shopcart.application.update_product_amount import UpdateProductAmountHandler
from shopcart.domain.exceptions import DomainException, EntityNotFoundError
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.repository.cart_repository import CartRepository
from shopcart.domain.repository.inventory_gateway import InventoryGateway

logger = logging.getLogger(__name__)

FailureListener = Callable[[str], None]


def _ignore_failure(message: str) -> None:
    pass


class CartEngine:

    def __init__(
        self,
        gateway: InventoryGateway,
        repository: CartRepository,
        on_failure: FailureListener | None = None,
    ) -> None:
        self._session = CartSession.bootstrap(repository)
        self._on_failure = on_failure or _ignore_failure
        self._add = AddProductHandler(gateway, self._session)
        self._remove = RemoveProductHandler(self._session)
        self._update = UpdateProductAmountHandler(gateway, self._session)

    # --- Read side ------------------------------------------------------------

    def get_snapshot(self) -> tuple[LineItem, ...]:
        return self._session.snapshot

    @property
    def version(self) -> int:
        return self._session.version

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Call *listener* with the new snapshot after every applied mutation."""
        return self._session.subscribe(listener)

    # --- Operations -----------------------------------------------------------

    def add(self, product_id: int) -> MutationResult:
        return self._run(ADD_FAILED, lambda: self._add.handle(product_id))

    def remove(self, product_id: int) -> MutationResult:
        return self._run(REMOVE_FAILED, lambda: self._remove.handle(product_id))

    def set_amount(self, request: SetAmountRequest) -> MutationResult:
        return self._run(UPDATE_FAILED, lambda: self._update.handle(request))

    # --- Internal helpers -----------------------------------------------------

    def _run(
        self, failure_message: str, operation: Callable[[], MutationResult]
    ) -> MutationResult:
        with self._session.lock:
            try:
                result = operation()
            except EntityNotFoundError as exc:
                logger.warning("%s: %s", failure_message, exc)
                result = MutationResult.failed(failure_message, self._session.snapshot)
            except DomainException as exc:
                logger.error("%s: %s", failure_message, exc)
                result = MutationResult.failed(failure_message, self._session.snapshot)
            except Exception:
                logger.exception(failure_message)
                result = MutationResult.failed(failure_message, self._session.snapshot)

        if result.message is not None:
            self._signal(result.message)
        return result

    def _signal(self, message: str) -> None:
        try:
            self._on_failure(message)
        except Exception:
            logger.exception("Failure listener raised while signalling %r", message)
