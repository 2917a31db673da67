"""CLI commands for the Product inventory."""

from __future__ import annotations

import click

from ims.domain.exceptions import DomainException
from ims.domain.model.product import Product
from ims.infrastructure.bootstrap import inventory_service
from ims.infrastructure.cli.errors import to_click_exception
from ims.infrastructure.config import get_settings


def _print_table(products: list[Product]) -> None:
    click.echo(f"{'ID':<6} {'Name':<24} {'Qty':>6} {'Price':>10}")
    click.echo("-" * 49)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<24} {p.quantity:>6} {str(p.price):>10}")


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", type=int, default=None, help="Units in stock (default 0).")
def product_add(name: str, price: str, quantity: int | None) -> None:
    """Add a new product to the inventory."""
    try:
        product = inventory_service().create_product(
            name=name, price=price, quantity=quantity
        )
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(
        f"Product #{product.id} '{product.name}' added "
        f"({product.quantity} in stock at {product.price})"
    )


@click.command("list")
@click.option("--page", type=click.IntRange(min=0), default=0, show_default=True,
              help="Zero-based page number.")
@click.option("--size", type=click.IntRange(min=1), default=None,
              help="Products per page.")
def product_list(page: int, size: int | None) -> None:
    """List products one page at a time."""
    settings = get_settings()
    size = min(size or settings.default_page_size, settings.max_page_size)
    result = inventory_service().list_products(page, size)

    if not result.items:
        click.echo("No products found.")
        return

    _print_table(result.items)
    click.echo(
        f"Page {result.page + 1} of {result.total_pages} ({result.total} products)"
    )


@click.command("search")
@click.argument("query")
def product_search(query: str) -> None:
    """Find products whose name contains QUERY (case-insensitive)."""
    if not query.strip():
        raise click.BadParameter("Query must not be blank.", param_hint="QUERY")

    products = inventory_service().search_products(query)
    if not products:
        click.echo(f"No products matching '{query}'.")
        return
    _print_table(products)


@click.command("set-quantity")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level.")
def product_set_quantity(product_id: int, quantity: int) -> None:
    """Set the stock level of a product."""
    try:
        product = inventory_service().update_quantity(product_id, quantity)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{product.id} '{product.name}' quantity set to {product.quantity}")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
def product_delete(product_id: int) -> None:
    """Remove a product from the inventory."""
    try:
        inventory_service().delete_product(product_id)
    except DomainException as exc:
        raise to_click_exception(exc)

    click.echo(f"Product #{product_id} deleted.")


@click.command("summary")
def product_summary() -> None:
    """Show inventory totals and out-of-stock products."""
    summary = inventory_service().get_summary()

    click.echo(f"Products:       {summary.total_products}")
    click.echo(f"Total quantity: {summary.total_quantity}")
    click.echo(f"Average price:  ${summary.average_price}")
    click.echo()
    if not summary.out_of_stock:
        click.echo("Nothing is out of stock.")
        return
    click.echo("Out of stock:")
    for item in summary.out_of_stock:
        click.echo(f"  #{item.id:<5} {item.name}")
