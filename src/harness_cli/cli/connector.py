"""Typer commands that create and delete connectors."""

from __future__ import annotations

from collections.abc import Callable

import typer

from ..clients.resources import ResourcesClient
from ..models.connector import (
    DOCKER_REGISTRY_TYPE,
    GCP_TYPE,
    GITHUB_TYPE,
    Connector,
    ConnectorSpec,
    DockerAuthType,
    DockerProviderType,
    GcpAuthType,
    GithubApiAccessType,
    GithubAuthType,
    GithubUrlType,
    docker_registry_spec,
    gcp_spec,
    github_spec,
)
from ..resources import CONNECTOR
from ..scope import Scope, ScopeContext
from .common import (
    get_settings,
    handle_cli_errors,
    identifier_option,
    render_create_result,
    render_delete_result,
)

app = typer.Typer(help="Connectors (Docker registry, GitHub, GCP)")

NAME_OPTION = typer.Option(..., "--name", "-n", help="The name of the connector.")
PROJECT_ID_OPTION = typer.Option(
    None, "--project-id", "-p", help="The project the connector belongs to at project scope."
)
SCOPE_OPTION = typer.Option(
    Scope.PROJECT, "--connector-scope", case_sensitive=False, help="The connector scope."
)
EXECUTE_ON_DELEGATE_OPTION = typer.Option(
    True,
    "--execute-on-delegate/--no-execute-on-delegate",
    help="Allow the connector to execute on a delegate.",
)
DELEGATE_TAGS_OPTION = typer.Option(
    None, "--delegate-tag", help="Delegate tag used to select delegates (repeatable)."
)


def _create_connector(
    ctx: typer.Context,
    *,
    name: str,
    connector_type: str,
    scope: Scope,
    project_id: str | None,
    build_spec: Callable[[Scope], ConnectorSpec],
) -> None:
    settings = get_settings(ctx)
    scope_context = ScopeContext.build(scope, settings.org_id, project_id)
    connector = Connector(
        account_identifier=settings.account_id,
        org_identifier=scope_context.org_id or None,
        project_identifier=scope_context.project_id or None,
        identifier=identifier_option(name),
        name=name,
        scope=scope_context.scope,
        type=connector_type,
        spec=build_spec(scope_context.scope),
    )
    with ResourcesClient.from_settings(settings) as client:
        result = client.create(CONNECTOR, connector)
    render_create_result(CONNECTOR, result)


@app.command("docker")
@handle_cli_errors
def connector_docker(
    ctx: typer.Context,
    name: str = NAME_OPTION,
    username: str | None = typer.Option(  # noqa: B008
        None, "--username", "-u", help="The docker registry user name."
    ),
    password: str | None = typer.Option(  # noqa: B008
        None,
        "--password",
        help="Identifier of the secret holding the registry password.",
    ),
    auth_type: DockerAuthType = typer.Option(  # noqa: B008
        DockerAuthType.PASSWORD, "--auth-type", case_sensitive=False, help="Authentication type."
    ),
    registry_url: str = typer.Option(  # noqa: B008
        "https://registry.hub.docker.com/v2/", "--registry-url", help="Docker Registry v2 URL."
    ),
    provider_type: DockerProviderType = typer.Option(  # noqa: B008
        DockerProviderType.DOCKER_HUB, "--provider-type", help="Docker registry provider."
    ),
    project_id: str | None = PROJECT_ID_OPTION,
    scope: Scope = SCOPE_OPTION,
    execute_on_delegate: bool = EXECUTE_ON_DELEGATE_OPTION,
) -> None:
    """Create a Docker registry connector and print its identifier."""

    if auth_type is DockerAuthType.PASSWORD and not (username and password):
        raise typer.BadParameter(
            "--username and --password are required for password authentication.",
            param_hint="--auth-type",
        )
    _create_connector(
        ctx,
        name=name,
        connector_type=DOCKER_REGISTRY_TYPE,
        scope=scope,
        project_id=project_id,
        build_spec=lambda effective_scope: docker_registry_spec(
            scope=effective_scope,
            url=registry_url,
            provider_type=provider_type,
            auth_type=auth_type,
            username=username,
            password_secret=password,
            execute_on_delegate=execute_on_delegate,
        ),
    )


@app.command("github")
@handle_cli_errors
def connector_github(
    ctx: typer.Context,
    name: str = NAME_OPTION,
    username: str = typer.Option(..., "--username", "-u", help="The GitHub user name."),
    pat: str = typer.Option(  # noqa: B008
        ..., "--pat", help="Identifier of the secret holding the personal access token."
    ),
    url: str = typer.Option(  # noqa: B008
        ..., "--url", help="GitHub account or repository URL, e.g. https://github.com/org-name"
    ),
    url_type: GithubUrlType = typer.Option(  # noqa: B008
        GithubUrlType.ACCOUNT, "--url-type", help="Whether --url points at an account or a repo."
    ),
    validation_repo: str | None = typer.Option(  # noqa: B008
        None, "--validation-repo", help="Repository used to validate the credentials."
    ),
    auth_type: GithubAuthType = typer.Option(  # noqa: B008
        GithubAuthType.HTTP, "--auth-type", help="GitHub authentication type."
    ),
    enable_api_access: bool = typer.Option(  # noqa: B008
        True, "--enable-api-access/--no-enable-api-access", help="Enable GitHub API access."
    ),
    api_access_type: GithubApiAccessType = typer.Option(  # noqa: B008
        GithubApiAccessType.TOKEN, "--api-access-type", help="GitHub API access type."
    ),
    delegate_tags: list[str] | None = DELEGATE_TAGS_OPTION,
    project_id: str | None = PROJECT_ID_OPTION,
    scope: Scope = SCOPE_OPTION,
    execute_on_delegate: bool = EXECUTE_ON_DELEGATE_OPTION,
) -> None:
    """Create a GitHub connector and print its identifier."""

    _create_connector(
        ctx,
        name=name,
        connector_type=GITHUB_TYPE,
        scope=scope,
        project_id=project_id,
        build_spec=lambda effective_scope: github_spec(
            scope=effective_scope,
            url=url,
            url_type=url_type,
            validation_repo=validation_repo,
            auth_type=auth_type,
            username=username,
            token_secret=pat,
            enable_api_access=enable_api_access,
            api_access_type=api_access_type,
            execute_on_delegate=execute_on_delegate,
            delegate_selectors=delegate_tags,
        ),
    )


@app.command("gcp")
@handle_cli_errors
def connector_gcp(
    ctx: typer.Context,
    name: str = NAME_OPTION,
    auth_type: GcpAuthType = typer.Option(  # noqa: B008
        GcpAuthType.MANUAL, "--auth-type", case_sensitive=False, help="Authentication type."
    ),
    secret_key: str | None = typer.Option(  # noqa: B008
        None,
        "--secret-key",
        help="Identifier of the secret holding the service account key (manual auth).",
    ),
    delegate_tags: list[str] | None = DELEGATE_TAGS_OPTION,
    project_id: str | None = PROJECT_ID_OPTION,
    scope: Scope = SCOPE_OPTION,
    execute_on_delegate: bool = EXECUTE_ON_DELEGATE_OPTION,
) -> None:
    """Create a GCP connector and print its identifier."""

    if auth_type is GcpAuthType.MANUAL and not secret_key:
        raise typer.BadParameter(
            "--secret-key is required for manual authentication.", param_hint="--secret-key"
        )
    if auth_type is GcpAuthType.DELEGATE and not delegate_tags:
        raise typer.BadParameter(
            "At least one --delegate-tag is required for delegate authentication.",
            param_hint="--delegate-tag",
        )
    _create_connector(
        ctx,
        name=name,
        connector_type=GCP_TYPE,
        scope=scope,
        project_id=project_id,
        build_spec=lambda effective_scope: gcp_spec(
            scope=effective_scope,
            auth_type=auth_type,
            secret_key=secret_key,
            delegate_selectors=delegate_tags,
            execute_on_delegate=execute_on_delegate,
        ),
    )


@app.command("delete")
@handle_cli_errors
def connector_delete(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", "-n", help="The name of the connector to delete."),
    project_id: str | None = PROJECT_ID_OPTION,
    scope: Scope = SCOPE_OPTION,
) -> None:
    """Delete the connector derived from ``--name`` at the given scope."""

    settings = get_settings(ctx)
    scope_context = ScopeContext.build(scope, settings.org_id, project_id)
    with ResourcesClient.from_settings(settings) as client:
        result = client.delete(CONNECTOR, identifier_option(name), scope_context)
    render_delete_result(CONNECTOR, result)


__all__ = [
    "app",
    "connector_delete",
    "connector_docker",
    "connector_gcp",
    "connector_github",
]
