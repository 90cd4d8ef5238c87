import logging

import click

from shopcart.infrastructure.cli.cart_commands import (
    cart_add,
    cart_decrement,
    cart_increment,
    cart_remove,
    cart_set_amount,
    cart_show,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """shopcart — shopping cart backed by the store's inventory API"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def cart() -> None:
    """Manage the cart."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_decrement)
cart.add_command(cart_increment)
cart.add_command(cart_remove)
cart.add_command(cart_set_amount)
cart.add_command(cart_show)
