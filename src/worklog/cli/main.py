"""Main CLI entry point."""

import click
from worklog.database.factories import create_sqlite_database

# Import and register all commands at module level
from worklog.cli.commands import (
    auth,
    project,
    log,
    view,
    export,
    import_cmd,
    share,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides WORKLOG_DB_PATH environment variable)",
    envvar="WORKLOG_DB_PATH",
)
@click.option(
    "--user",
    "user_id",
    help="Act as this user ID instead of the signed-in user",
    envvar="WORKLOG_USER",
)
@click.pass_context
def cli(ctx, db_path: str | None, user_id: str | None):
    """Worklog - daily activity log.

    Record the projects, description and edited files of each working day,
    review them by month, export reports and share read-only snapshots.
    """
    ctx.ensure_object(dict)
    ctx.obj["user_id"] = user_id

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
auth.register_commands(cli)
project.register_commands(cli)
log.register_commands(cli)
view.register_commands(cli)
export.register_commands(cli)
import_cmd.register_commands(cli)
share.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
