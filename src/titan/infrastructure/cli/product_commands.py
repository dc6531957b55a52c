"""CLI commands for the catalog."""

from __future__ import annotations

import json
from pathlib import Path

import click

from titan.application.add_product import AddProductHandler
from titan.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from titan.application.seed_catalog import SeedCatalogHandler
from titan.application.update_product import UpdateProductHandler
from titan.domain.exceptions import DomainException
from titan.infrastructure.bootstrap import product_repository
from titan.infrastructure.persistence.product_mapper import product_from_raw


@click.command("list")
@click.option("--category", default=None, help="Only this category ('all' for every one).")
@click.option("--search", default=None, help="Case-insensitive match on name or description.")
@click.option(
    "--sort",
    type=click.Choice(["price_asc", "price_desc", "rating"]),
    default=None,
    help="Sort order (default: catalog order).",
)
def product_list(category: str | None, search: str | None, sort: str | None) -> None:
    """List products in the catalog."""
    try:
        products = ListProductsHandler(product_repository()).handle(
            category=category, search=search, sort=sort
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<10} {'Name':<28} {'Category':<14} {'Price':>10} {'Rating':>7}")
    click.echo("-" * 73)
    for p in products:
        click.echo(
            f"{p.id:<10} {p.name:<28} {p.category:<14} {'$' + format(p.price, '.2f'):>10} {p.rating:>7.1f}"
        )


@click.command("show")
@click.argument("product_id")
def product_show(product_id: str) -> None:
    """Show one product."""
    try:
        p = ShowProductHandler(product_repository()).handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  [{p.category}]" + (f"  <{p.badge}>" if p.badge else ""))
    click.echo(f"Price:   ${p.price:.2f}")
    click.echo(f"Rating:  {p.rating:.1f} ({p.review_count} reviews)")
    if p.description:
        click.echo()
        click.echo(p.description)


@click.command("categories")
def product_categories() -> None:
    """List categories with product counts."""
    try:
        categories = ListCategoriesHandler(product_repository()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for c in categories:
        click.echo(f"{c.category:<20} {c.count:>4}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Price (e.g. 19.99).")
@click.option("--category", default="", help="Category.")
@click.option("--image", default="", help="Image URL.")
@click.option("--description", default="", help="Description.")
@click.option("--badge", default=None, help="Promotional badge.")
def product_add(
    name: str,
    price: str,
    category: str,
    image: str,
    description: str,
    badge: str | None,
) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(
            name=name,
            price=price,
            category=category,
            image=image,
            description=description,
            badge=badge,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--price", required=True, help="New price (e.g. 29.99).")
def product_update(product_id: str, price: str) -> None:
    """Update a product's price."""
    handler = UpdateProductHandler(product_repo=product_repository())

    try:
        change = handler.handle(product_id=product_id, new_price=price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"{change.name} (#{change.product_id}): ${change.old_price:.2f} -> ${change.new_price:.2f}"
    )
    click.echo("Carts keep their old price until checkout re-prices them.")


@click.command("seed")
@click.argument("source", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def product_seed(source: Path) -> None:
    """Replace the whole catalog with the products in SOURCE (a JSON array)."""
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except ValueError as exc:
        raise click.ClickException(f"{source} is not valid JSON: {exc}")
    if not isinstance(raw, list):
        raise click.ClickException(f"{source} must contain a JSON array of products")

    try:
        products = [product_from_raw(item) for item in raw]
        count = SeedCatalogHandler(product_repository()).handle(products)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Seeded {count} products.")
