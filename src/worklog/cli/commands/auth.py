"""Sign-in commands."""

import click
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.errors import DomainError
from worklog.domain.project import ProjectService
from worklog.domain.session import SessionService


@click.command("login")
@click.argument("user_id", metavar="USER_ID")
@click.option("--name", required=True, help="Display name")
@click.option("--avatar", help="Avatar URL")
@click.pass_context
def login(ctx, user_id: str, name: str, avatar: str | None):
    """Sign in as USER_ID.

    Examples:
        worklog login ana --name "Ana Souza"
    """
    db = ctx.obj["db"]
    service = SessionService(db)

    try:
        user = service.sign_in(user_id, name, avatar)
        ProjectService(db).ensure_initial_projects()
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Signed in as {user.display_name} ({user.user_id})")


@click.command("logout")
@click.pass_context
def logout(ctx):
    """Sign out."""
    service = SessionService(ctx.obj["db"])
    try:
        service.sign_out()
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo("Signed out.")


@click.command("whoami")
@click.pass_context
def whoami(ctx):
    """Show the signed-in user."""
    user = SessionService(ctx.obj["db"]).current_user()
    if user is None:
        click.echo("Not signed in.")
        return
    click.echo(f"{user.display_name} ({user.user_id})")
    if user.avatar_url:
        click.echo(f"Avatar: {user.avatar_url}")


def register_commands(cli):
    """Register sign-in commands with main CLI."""
    cli.add_command(login)
    cli.add_command(logout)
    cli.add_command(whoami)
