import click

from ims.infrastructure.cli.errors import GuardedGroup
from ims.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_search,
    product_set_quantity,
    product_summary,
)
from ims.infrastructure.config import get_settings
from ims.infrastructure.observability import setup_logging


@click.group(cls=GuardedGroup)
@click.option("--log-level", default=None, help="Override IMS_LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """IMS — Inventory Management Service"""
    settings = get_settings()
    setup_logging(log_level or settings.log_level, settings.log_format)


@cli.group()
def product() -> None:
    """Manage products."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", type=int, default=None, help="Bind port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    import uvicorn

    from ims.infrastructure.bootstrap import inventory_service
    from ims.infrastructure.http.app import create_app

    settings = get_settings()
    uvicorn.run(
        create_app(inventory_service()),
        host=host or settings.host,
        port=port or settings.port,
        log_config=None,
    )


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_search)
product.add_command(product_set_quantity)
product.add_command(product_summary)
