import click
import uvicorn

from titan.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_qty,
    cart_remove,
    cart_show,
)
from titan.infrastructure.cli.order_commands import order_show
from titan.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_list,
    product_seed,
    product_show,
    product_update,
)
from titan.infrastructure.config.settings import get_settings
from titan.infrastructure.observability.log_config import configure_logging


@click.group()
def cli() -> None:
    """TITAN storefront cart and checkout"""
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)


@cli.group()
def cart() -> None:
    """Manage the cart."""


@cli.group()
def product() -> None:
    """Browse and manage the catalog."""


@cli.group()
def order() -> None:
    """Look up placed orders."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", default=None, type=int, help="Port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Run the storefront HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "titan.infrastructure.http.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
    )


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_qty)
cart.add_command(cart_remove)
cart.add_command(cart_show)
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_show)
product.add_command(product_update)
order.add_command(order_show)
