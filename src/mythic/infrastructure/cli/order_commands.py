"""CLI commands for orders."""

from __future__ import annotations

import click

from mythic.application.delete_order import DeleteOrderHandler
from mythic.application.dto import OrderDetailsDTO
from mythic.application.place_order import PlaceOrderHandler
from mythic.application.show_order import ListOrdersHandler, ShowOrderHandler
from mythic.domain.exceptions import DomainException, ValidationError
from mythic.infrastructure.bootstrap import unit_of_work


def _parse_products(raw: str) -> list[str]:
    """Parse 'p1,p2,p3' into a list of product IDs."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def _fail(exc: DomainException) -> click.ClickException:
    message = exc.message
    if isinstance(exc, ValidationError) and exc.errors:
        message += "".join(f"\n  {e.field}: {e.message}" for e in exc.errors)
    return click.ClickException(message)


@click.command("place")
@click.option("--user", "user_id", required=True, help="Owning user ID.")
@click.option("--products", required=True, help="Product IDs as 'p1,p2'.")
@click.option("--paid/--unpaid", default=False, help="Payment flag.")
def order_place(user_id: str, products: str, paid: bool) -> None:
    """Place a new order."""
    handler = PlaceOrderHandler(unit_of_work())

    try:
        dto = handler.handle(user_id=user_id, product_ids=_parse_products(products), payment=paid)
    except DomainException as exc:
        raise _fail(exc)

    click.echo(f"Order {dto.id} placed  (total=${dto.total:.2f}, paid={dto.payment})")


def _display_order(details: OrderDetailsDTO) -> None:
    """Shared formatting for displaying an order."""
    order = details.order
    click.echo(f"Order {order.id}  (paid={order.payment})")
    if details.user is not None:
        click.echo(f"User:    {details.user.name} <{details.user.email}>")
    else:
        click.echo(f"User:    {order.user_id} (unknown)")
    click.echo(f"Created: {order.created_at:%Y-%m-%d %H:%M}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Price':>10}")
    click.echo(f"  {'-'*41}")
    for p in details.products:
        click.echo(f"  {p.name:<30} {'$' + format(p.price, '.2f'):>10}")
    click.echo(f"  {'-'*41}")
    click.echo(f"  {'Order Total (incl. surcharge)':<30} {'$' + format(order.total, '.2f'):>10}")


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    try:
        details = ShowOrderHandler(unit_of_work()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(exc.message)

    _display_order(details)


@click.command("list")
def order_list() -> None:
    """List every order."""
    orders = ListOrdersHandler(unit_of_work()).handle()
    if not orders:
        click.echo("No orders found.")
        return
    for details in orders:
        order = details.order
        click.echo(
            f"{order.id:<34} {order.user_id:<34} {'$' + format(order.total, '.2f'):>10} "
            f"{'paid' if order.payment else 'unpaid'}"
        )


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
def order_delete(order_id: str) -> None:
    """Delete an order and its product lines."""
    try:
        dto = DeleteOrderHandler(unit_of_work()).handle(order_id)
    except DomainException as exc:
        raise click.ClickException(exc.message)

    click.echo(f"Order {dto.id} deleted")
