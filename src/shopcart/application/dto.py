"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI / view layer and the application layer
without handing out the engine's internal state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from shopcart.domain.model.line_item import LineItem


@dataclass(frozen=True)
class SetAmountRequest:
    """Input: absolute quantity wanted for a product already in the cart."""

    product_id: int
    amount: int


class MutationOutcome(Enum):
    APPLIED = "APPLIED"
    REJECTED = "REJECTED"  # stock would be exceeded
    NO_OP = "NO_OP"  # amount below one, silently ignored
    FAILED = "FAILED"  # missing item, inventory or storage fault


@dataclass(frozen=True)
class MutationResult:
    """Output: what a cart operation did.

    ``snapshot`` is the cart after the operation, which is the
    unchanged prior cart for every outcome other than APPLIED.
    ``message`` is the failure signal that was emitted, if any.
    """

    outcome: MutationOutcome
    snapshot: tuple[LineItem, ...]
    message: str | None = None

    @property
    def applied(self) -> bool:
        return self.outcome is MutationOutcome.APPLIED

    @staticmethod
    def applied_with(snapshot: tuple[LineItem, ...]) -> MutationResult:
        return MutationResult(MutationOutcome.APPLIED, snapshot)

    @staticmethod
    def rejected(message: str, snapshot: tuple[LineItem, ...]) -> MutationResult:
        return MutationResult(MutationOutcome.REJECTED, snapshot, message)

    @staticmethod
    def no_op(snapshot: tuple[LineItem, ...]) -> MutationResult:
        return MutationResult(MutationOutcome.NO_OP, snapshot)

    @staticmethod
    def failed(message: str, snapshot: tuple[LineItem, ...]) -> MutationResult:
        return MutationResult(MutationOutcome.FAILED, snapshot, message)


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart row as displayed to the user."""

    id: int
    title: str
    image: str
    amount: int
    unit_price: str  # formatted, e.g. "R$ 179.90"
    subtotal: str


@dataclass(frozen=True)
class CartSummaryDTO:
    """Output: the whole cart as displayed to the user."""

    lines: list[CartLineDTO]
    total: str
    item_count: int
