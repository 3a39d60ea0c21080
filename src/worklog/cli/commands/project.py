"""Project management commands."""

import click
from worklog.cli.error_handling import handle_domain_error
from worklog.domain.errors import DomainError
from worklog.domain.project import ProjectService


@click.group("project")
def project_group():
    """Manage projects."""
    pass


@project_group.command("add")
@click.argument("name", metavar="PROJECT_NAME")
@click.pass_context
def add_project(ctx, name: str):
    """Add a project.

    Examples:
        worklog project add "Tekno"
    """
    service = ProjectService(ctx.obj["db"])
    try:
        project_id = service.add_project(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Added project '{name.strip()}' (ID: {project_id})")


@project_group.command("delete")
@click.argument("name", metavar="PROJECT_NAME")
@click.pass_context
def delete_project(ctx, name: str):
    """Delete a project.

    Entries that already mention the project keep it.
    """
    service = ProjectService(ctx.obj["db"])
    try:
        service.delete_project(name)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted project '{name}'")


@project_group.command("list")
@click.pass_context
def list_projects(ctx):
    """List all projects."""
    service = ProjectService(ctx.obj["db"])
    try:
        service.ensure_initial_projects()
    except DomainError as e:
        handle_domain_error(ctx, e)

    projects = service.list_projects()
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 40)
    for project in projects:
        click.echo(f"ID: {project.id:3d} | {project.name}")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group)
