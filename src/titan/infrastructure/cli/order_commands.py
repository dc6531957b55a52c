"""CLI commands for placed orders."""

from __future__ import annotations

import click

from titan.application.dto import OrderDTO
from titan.application.show_order import ShowOrderHandler
from titan.domain.exceptions import DomainException
from titan.infrastructure.bootstrap import order_repository


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name} <{dto.customer_email}>")
    if dto.customer_address:
        click.echo(f"Ship to:  {dto.customer_address}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*52}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<24} {item.quantity:>5} "
            f"{'$' + format(item.unit_price, '.2f'):>10} {'$' + format(item.line_total, '.2f'):>10}"
        )
    click.echo(f"  {'-'*52}")
    click.echo(f"  {'Order Total':<30} {'$' + format(dto.total, '.2f'):>21}")


@click.command("show")
@click.argument("order_id")
def order_show(order_id: str) -> None:
    """Show details of a placed order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)
