"""Typer commands that create and delete secrets."""

from __future__ import annotations

from pathlib import Path

import typer

from ..clients.resources import ResourcesClient
from ..models.secret import (
    DEFAULT_SECRET_MANAGER,
    Secret,
    SecretSpec,
    SecretType,
    SecretValueType,
)
from ..resources import SECRET
from ..scope import Scope, ScopeContext
from .common import (
    get_settings,
    handle_cli_errors,
    identifier_option,
    render_create_result,
    render_delete_result,
    tags_option,
)

app = typer.Typer(help="Secrets")

PROJECT_ID_OPTION = typer.Option(
    None, "--project-id", "-p", help="The project the secret belongs to at project scope."
)
SCOPE_OPTION = typer.Option(
    Scope.PROJECT, "--secret-scope", case_sensitive=False, help="The secret scope."
)


@app.command("new")
@handle_cli_errors
def secret_new(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="The name of the secret to create."),
    description: str | None = typer.Option(  # noqa: B008
        None, "--description", "-d", help="The description for the secret."
    ),
    project_id: str | None = PROJECT_ID_OPTION,
    file: Path | None = typer.Option(  # noqa: B008
        None,
        "--file",
        "-f",
        help="File holding the secret content; required for every type except SecretText.",
    ),
    text: str | None = typer.Option(  # noqa: B008
        None, "--text", help="The secret value when the secret type is SecretText."
    ),
    tags: list[str] | None = typer.Option(  # noqa: B008
        None, "--tag", "-t", help="Tag in the format key:value (repeatable)."
    ),
    secret_manager_id: str = typer.Option(  # noqa: B008
        DEFAULT_SECRET_MANAGER, "--secret-manager-id", "-s", help="The secret manager to use."
    ),
    secret_type: SecretType = typer.Option(  # noqa: B008
        SecretType.SECRET_FILE, "--secret-type", help="The secret type."
    ),
    scope: Scope = SCOPE_OPTION,
    value_type: SecretValueType = typer.Option(  # noqa: B008
        SecretValueType.INLINE,
        "--secret-value-type",
        help="How the value of a SecretText secret is interpreted.",
    ),
) -> None:
    """Create a secret from text or a file and print its identifier."""

    if secret_type is SecretType.SECRET_TEXT:
        if not text:
            raise typer.BadParameter(
                "--text is required when the secret type is SecretText.", param_hint="--text"
            )
    elif file is None:
        raise typer.BadParameter(
            f"--file is required when the secret type is {secret_type.value}.",
            param_hint="--file",
        )
    elif not file.is_file():
        raise typer.BadParameter(f"Secret file does not exist: {file}", param_hint="--file")

    settings = get_settings(ctx)
    scope_context = ScopeContext.build(scope, settings.org_id, project_id)
    secret = Secret(
        account_identifier=settings.account_id,
        org_identifier=scope_context.org_id or None,
        project_identifier=scope_context.project_id or None,
        identifier=identifier_option(name),
        name=name,
        description=description,
        tags=tags_option(tags),
        scope=scope_context.scope,
        type=secret_type,
        spec=SecretSpec(
            secret_manager_identifier=secret_manager_id,
            type=f"{secret_type.value}Spec",
            value_type=value_type,
            value=text if secret_type is SecretType.SECRET_TEXT else None,
        ),
    )
    with ResourcesClient.from_settings(settings) as client:
        result = client.create_secret(secret, file if secret.is_file_backed else None)
    render_create_result(SECRET, result)


@app.command("delete")
@handle_cli_errors
def secret_delete(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="The name of the secret to delete."),
    project_id: str | None = PROJECT_ID_OPTION,
    scope: Scope = SCOPE_OPTION,
) -> None:
    """Delete the secret derived from ``--name`` at the given scope."""

    settings = get_settings(ctx)
    scope_context = ScopeContext.build(scope, settings.org_id, project_id)
    with ResourcesClient.from_settings(settings) as client:
        result = client.delete(SECRET, identifier_option(name), scope_context)
    render_delete_result(SECRET, result)


__all__ = ["app", "secret_delete", "secret_new"]
