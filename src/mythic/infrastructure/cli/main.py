import click

from mythic.infrastructure.cli.catalog_commands import (
    category_add,
    product_add,
    product_list,
    product_remove,
)
from mythic.infrastructure.cli.order_commands import (
    order_delete,
    order_list,
    order_place,
    order_show,
)
from mythic.infrastructure.cli.server_commands import db_init, serve
from mythic.infrastructure.cli.user_commands import user_add, user_list
from mythic.infrastructure.config import get_settings
from mythic.infrastructure.logging_setup import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override LOG_LEVEL.")
def cli(log_level: str | None) -> None:
    """Mythic Games: shop API and admin commands"""
    configure_logging(log_level or get_settings().LOG_LEVEL)


@cli.group()
def db() -> None:
    """Manage the database."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def category() -> None:
    """Manage categories."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def order() -> None:
    """Manage orders."""


# Register subcommands
cli.add_command(serve)
db.add_command(db_init)
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_remove)
category.add_command(category_add)
user.add_command(user_add)
user.add_command(user_list)
order.add_command(order_place)
order.add_command(order_show)
order.add_command(order_list)
order.add_command(order_delete)
