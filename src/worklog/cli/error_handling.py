"""CLI error handling helpers."""

import click

from worklog.domain.errors import DomainError, DuplicateFileError, ShareUnavailableError, ShareUnavailableReason

SHARE_MESSAGES = {
    ShareUnavailableReason.NOT_FOUND: "Share link not found or expired.",
    ShareUnavailableReason.EXPIRED: "This share link has expired.",
    ShareUnavailableReason.DISABLED: "This share link has been disabled.",
}


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    if isinstance(error, ShareUnavailableError):
        click.echo(f"Error: {SHARE_MESSAGES[error.reason]}", err=True)
    elif isinstance(error, DuplicateFileError):
        click.echo(f"Warning: {error}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
