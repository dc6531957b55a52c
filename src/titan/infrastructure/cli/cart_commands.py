"""CLI commands for the buyer's cart."""

from __future__ import annotations

import click

from titan.application.cart_engine import CartEngine
from titan.application.dto import CustomerSpec
from titan.application.place_order import PlaceOrderHandler
from titan.domain.exceptions import CartPersistenceError, DomainException
from titan.domain.model.cart import Cart
from titan.infrastructure.bootstrap import (
    cart_engine,
    checkout_gateway,
    product_repository,
)


def _run(action, *args):
    """Apply a cart mutation; a failed write is a warning, not an abort."""
    try:
        return action(*args)
    except CartPersistenceError as exc:
        click.secho(f"Warning: {exc} (changes kept for this session only)", fg="yellow", err=True)
        return None


def _display_cart(cart: Cart) -> None:
    if cart.is_empty:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<10} {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*63}")
    for line in cart:
        click.echo(
            f"  {line.product_id:<10} {line.product.name:<24} {line.quantity:>5} "
            f"{str(line.product.price):>10} {str(line.line_total):>10}"
        )
    click.echo(f"  {'-'*63}")
    count = cart.count
    items = f"{count} item{'s' if count != 1 else ''}"
    click.echo(f"  {items:<41} {'Total':>10} {str(cart.total):>10}")


@click.command("add")
@click.argument("product_id")
def cart_add(product_id: str) -> None:
    """Add one unit of a product to the cart."""
    try:
        product = product_repository().get_by_id(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    if product is None:
        raise click.ClickException(f"Product not found: {product_id}")

    engine = cart_engine()
    existed = engine.cart.line_for(product_id) is not None
    _run(engine.add, product)

    if existed:
        click.echo(f"Quantity updated: {product.name}")
    else:
        click.echo(f"Added to cart: {product.name}")


@click.command("remove")
@click.argument("product_id")
def cart_remove(product_id: str) -> None:
    """Remove a product's line from the cart."""
    engine = cart_engine()
    _run(engine.remove, product_id)
    _display_cart(engine.cart)


@click.command("qty", context_settings={"ignore_unknown_options": True})
@click.argument("product_id")
@click.argument("delta", type=int)
def cart_qty(product_id: str, delta: int) -> None:
    """Change a line's quantity by DELTA (e.g. 1 or -1)."""
    engine = cart_engine()
    _run(engine.change_quantity, product_id, delta)
    _display_cart(engine.cart)


@click.command("clear")
def cart_clear() -> None:
    """Empty the cart."""
    engine = cart_engine()
    _run(engine.clear)
    click.echo("Cart cleared.")


@click.command("show")
def cart_show() -> None:
    """Show the cart and its total."""
    _display_cart(cart_engine().cart)


@click.command("checkout")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", required=True, help="Customer email.")
@click.option("--address", default="", help="Shipping address.")
def cart_checkout(name: str, email: str, address: str) -> None:
    """Place an order for everything in the cart."""
    engine: CartEngine = cart_engine()
    handler = PlaceOrderHandler(engine, checkout_gateway())

    try:
        receipt = handler.handle(CustomerSpec(name=name, email=email, address=address))
    except DomainException as exc:
        raise click.ClickException(f"{exc} Your cart has been kept.")

    click.echo(receipt.message)
    click.echo(f"Order ID: {receipt.order_id}")
    click.echo(f"Total:    ${receipt.total:.2f}")
    if engine.is_dirty:
        click.secho("Warning: the cart could not be cleared on disk.", fg="yellow", err=True)
