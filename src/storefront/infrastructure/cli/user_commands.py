"""CLI commands for user accounts."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import (
    password_hasher,
    token_service,
    user_repository,
)
from storefront.infrastructure.cli.identity import subject_for, user_option


@click.command("register")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Login email (unique).")
@click.password_option("--password", help="Account password.")
@click.option(
    "--role",
    type=click.Choice(["user", "admin"]),
    default="user",
    show_default=True,
    help="Account role.",
)
def user_register(name: str, email: str, password: str, role: str) -> None:
    """Register a new account."""
    handler = RegisterUserHandler(user_repo=user_repository(), hasher=password_hasher())

    try:
        user = handler.handle(name=name, email=email, password=password, role=role)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User #{user.id} {user.email} registered (role={user.role})")


@click.command("token")
@user_option
def user_token(email: str) -> None:
    """Print a bearer token for the HTTP API."""
    subject = subject_for(email)
    click.echo(token_service().issue(subject.user_id, subject.role.value))
