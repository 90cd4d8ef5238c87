"""CartSession — the explicitly owned state behind the cart engine.

The session is the single writer of the cart. Handlers receive it by
reference, read ``cart``, compute a new Cart and hand it to
``commit()``. Callers must hold ``lock`` for the whole
read-validate-commit sequence.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable

from shopcart.domain.exceptions import DomainException
from shopcart.domain.model.cart import Cart
from shopcart.domain.model.line_item import LineItem
from shopcart.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[tuple[LineItem, ...]], None]


class CartSession:

    def __init__(self, repository: CartRepository, cart: Cart | None = None) -> None:
        self._repository = repository
        self._cart = cart if cart is not None else Cart()
        self._version = 0
        self._listeners: list[SnapshotListener] = []
        self.lock = threading.RLock()

    @classmethod
    def bootstrap(cls, repository: CartRepository) -> CartSession:
        """Rebuild the session from durable storage.

        Anything that cannot be turned into a valid cart degrades to an
        empty one; a damaged store never prevents the session from starting.
        """
        try:
            items = repository.load()
            cart = Cart.of(items) if items is not None else Cart()
        except DomainException as exc:
            logger.warning("Discarding stored cart: %s", exc)
            cart = Cart()
        logger.debug("Cart bootstrapped with %d line item(s)", len(cart))
        return cls(repository, cart)

    # --- State ----------------------------------------------------------------

    @property
    def cart(self) -> Cart:
        return self._cart

    @property
    def snapshot(self) -> tuple[LineItem, ...]:
        return self._cart.items

    @property
    def version(self) -> int:
        """Number of commits applied since the session started."""
        return self._version

    def commit(self, cart: Cart) -> None:
        """Persist *cart*, then make it current and publish it.

        If the write fails the exception propagates and neither memory
        nor observers see the new cart.
        """
        self._repository.save(list(cart.items))
        self._cart = cart
        self._version += 1
        logger.debug("Committed cart version %d (%d line items)", self._version, len(cart))
        self._publish(cart.items)

    # --- Observers ------------------------------------------------------------

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register *listener*; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: tuple[LineItem, ...]) -> None:
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                logger.exception("Cart observer %r raised", listener)
