"""CLI commands for the cart."""

from __future__ import annotations

import click

from shopcart.application.cart_engine import CartEngine
from shopcart.application.dto import MutationOutcome, MutationResult, SetAmountRequest
from shopcart.application.show_cart import ShowCartHandler
from shopcart.infrastructure import bootstrap
from shopcart.infrastructure.config import ConfigurationError


def _notify(message: str) -> None:
    """Failure signal channel: print to stderr, nothing else."""
    click.secho(message, fg="red", err=True)


def _engine() -> CartEngine:
    try:
        return bootstrap.cart_engine(on_failure=_notify)
    except ConfigurationError as exc:
        raise click.ClickException(str(exc))


def _finish(result: MutationResult, success: str) -> None:
    """Exit non-zero when the engine refused or failed the mutation.

    The message itself has already been shown through ``_notify``.
    """
    if result.outcome in (MutationOutcome.REJECTED, MutationOutcome.FAILED):
        raise click.exceptions.Exit(1)
    if result.outcome is MutationOutcome.NO_OP:
        click.echo("Nothing changed.")
        return
    click.echo(success)


def _current_amount(engine: CartEngine, product_id: int) -> int:
    for item in engine.get_snapshot():
        if item.id == product_id:
            return item.amount
    return 0


@click.command("show")
def cart_show() -> None:
    """Show the cart contents and total."""
    summary = ShowCartHandler().handle(_engine().get_snapshot())

    if not summary.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"{'ID':<6} {'Product':<30} {'Qty':>5} {'Price':>12} {'Subtotal':>12}")
    click.echo("-" * 69)
    for line in summary.lines:
        click.echo(
            f"{line.id:<6} {line.title[:30]:<30} {line.amount:>5} {line.unit_price:>12} {line.subtotal:>12}"
        )
    click.echo("-" * 69)
    click.echo(f"{'Total':<43} {summary.total:>25}")


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_add(product_id: int) -> None:
    """Add one unit of a product to the cart."""
    result = _engine().add(product_id)
    _finish(result, f"Product #{product_id} added to cart")


@click.command("remove")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_remove(product_id: int) -> None:
    """Remove a product from the cart."""
    result = _engine().remove(product_id)
    _finish(result, f"Product #{product_id} removed from cart")


@click.command("set-amount")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--amount", required=True, type=int, help="New quantity.")
def cart_set_amount(product_id: int, amount: int) -> None:
    """Set the quantity of a product already in the cart."""
    result = _engine().set_amount(SetAmountRequest(product_id=product_id, amount=amount))
    _finish(result, f"Product #{product_id} quantity set to {amount}")


@click.command("increment")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_increment(product_id: int) -> None:
    """Raise the quantity of a product by one."""
    engine = _engine()
    amount = _current_amount(engine, product_id) + 1
    result = engine.set_amount(SetAmountRequest(product_id=product_id, amount=amount))
    _finish(result, f"Product #{product_id} quantity set to {amount}")


@click.command("decrement")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def cart_decrement(product_id: int) -> None:
    """Lower the quantity of a product by one (never below one)."""
    engine = _engine()
    amount = _current_amount(engine, product_id) - 1
    result = engine.set_amount(SetAmountRequest(product_id=product_id, amount=amount))
    _finish(result, f"Product #{product_id} quantity set to {amount}")
