"""Resolve the ``--user`` option of CLI commands into a Subject.

The CLI runs on the machine that owns the data files, so it trusts the
operator and identifies users by email without a password.
"""

from __future__ import annotations

import click

from storefront.domain.authorization import Subject
from storefront.domain.model.user import normalize_email
from storefront.infrastructure.bootstrap import user_repository


def subject_for(email: str) -> Subject:
    user = user_repository().get_by_email(normalize_email(email))
    if user is None:
        raise click.ClickException(f"No user registered with email '{email}'")
    return Subject(user_id=user.id, role=user.role)


user_option = click.option(
    "--user", "email", required=True, help="Email of the user to act as."
)
