"""Typer commands that look up delegates."""

from __future__ import annotations

import json

import typer

from ..clients.delegates import DelegatesClient
from ..results import RemoteFailure
from ..scope import Scope, ScopeContext
from .common import console, get_settings, handle_cli_errors, report_remote_failure

app = typer.Typer(help="Delegates")


@app.command("list")
@handle_cli_errors
def delegate_list(
    ctx: typer.Context,
    tags: list[str] | None = typer.Option(  # noqa: B008
        None, "--tag", "-t", help="Delegate tag to filter on (repeatable)."
    ),
    project_id: str | None = typer.Option(  # noqa: B008
        None, "--project-id", "-p", help="The project to search at project scope."
    ),
    scope: Scope = typer.Option(  # noqa: B008
        Scope.PROJECT, "--delegate-scope", case_sensitive=False, help="The delegate scope."
    ),
) -> None:
    """Print the delegate groups matching the tags as a JSON array of name/id pairs."""

    settings = get_settings(ctx)
    scope_context = ScopeContext.build(scope, settings.org_id, project_id)
    with DelegatesClient.from_settings(settings) as client:
        result = client.list_by_tags(tags or [], scope_context)
    if isinstance(result, RemoteFailure):
        report_remote_failure("Delegate", result)
        return
    rows = [{"name": group.name, "id": group.identifier} for group in result]
    console.print(json.dumps(rows), markup=False, highlight=False, soft_wrap=True)


__all__ = ["app", "delegate_list"]
