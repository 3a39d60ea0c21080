"""CLI helpers for resolving the acting user."""

from __future__ import annotations

import click

from worklog.domain.entities import User
from worklog.domain.session import SessionService


def require_user(ctx: click.Context) -> User:
    """Return the user from --user/WORKLOG_USER or the signed-in session.

    Exits with an error when neither is available.
    """
    service = SessionService(ctx.obj["db"])
    user = service.resolve_user(ctx.obj.get("user_id"))
    if user is None:
        click.echo("Error: Not signed in. Run 'worklog login' or pass --user.", err=True)
        ctx.exit(1)
    return user
