"""Typer commands that create and delete projects."""

from __future__ import annotations

import typer

from ..clients.resources import ResourcesClient
from ..models.project import Project, ProjectModule
from ..resources import PROJECT
from ..scope import Scope, ScopeContext
from .common import (
    get_settings,
    handle_cli_errors,
    identifier_option,
    render_create_result,
    render_delete_result,
    tags_option,
)

app = typer.Typer(help="Projects")


@app.command("new")
@handle_cli_errors
def project_new(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="The name of the project to create."),
    description: str | None = typer.Option(  # noqa: B008
        None, "--description", "-d", help="The description for the project."
    ),
    modules: list[ProjectModule] | None = typer.Option(  # noqa: B008
        None,
        "--module",
        "-m",
        case_sensitive=False,
        help="Module to attach to the project (repeatable, defaults to CI).",
    ),
    tags: list[str] | None = typer.Option(  # noqa: B008
        None, "--tag", "-t", help="Tag in the format key:value (repeatable)."
    ),
) -> None:
    """Create a project in the configured organization and print its identifier.

    Args:
        ctx: Typer context holding the connection settings.
        name: Display name; the identifier is derived from it.
        description: Optional project description.
        modules: Modules enabled on the project.
        tags: ``key:value`` tags attached to the project.
    """

    settings = get_settings(ctx)
    project = Project(
        account_identifier=settings.account_id,
        org_identifier=settings.org_id,
        identifier=identifier_option(name),
        name=name,
        description=description,
        modules=modules or [ProjectModule.CI],
        tags=tags_option(tags),
    )
    with ResourcesClient.from_settings(settings) as client:
        result = client.create(PROJECT, project)
    render_create_result(PROJECT, result)


@app.command("delete")
@handle_cli_errors
def project_delete(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="The name of the project to delete."),
) -> None:
    """Delete the project derived from ``--name`` in the configured organization."""

    settings = get_settings(ctx)
    scope_context = ScopeContext.build(Scope.ORG, settings.org_id, None)
    with ResourcesClient.from_settings(settings) as client:
        result = client.delete(PROJECT, identifier_option(name), scope_context)
    render_delete_result(PROJECT, result)


__all__ = ["app", "project_delete", "project_new"]
