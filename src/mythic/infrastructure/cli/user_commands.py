"""CLI commands for users."""

from __future__ import annotations

import click

from mythic.application.register_user import RegisterUserHandler
from mythic.application.show_user import ListUsersHandler
from mythic.domain.exceptions import DomainException
from mythic.infrastructure.bootstrap import unit_of_work


@click.command("add")
@click.option("--id", "user_id", default=None, help="Explicit user ID.")
@click.option("--email", required=True, help="E-mail address.")
@click.option("--name", required=True, help="Display name.")
@click.password_option("--password", help="Password (hashed before storage).")
def user_add(user_id: str | None, email: str, name: str, password: str) -> None:
    """Register a user."""
    try:
        dto = RegisterUserHandler(unit_of_work()).handle(
            email=email, name=name, password=password, user_id=user_id
        )
    except DomainException as exc:
        raise click.ClickException(exc.message)

    click.echo(f"User {dto.id} <{dto.email}> registered")


@click.command("list")
def user_list() -> None:
    """List users."""
    users = ListUsersHandler(unit_of_work()).handle()
    if not users:
        click.echo("No users found.")
        return
    for u in users:
        click.echo(f"{u.id:<34} {u.email:<32} {u.name}")
