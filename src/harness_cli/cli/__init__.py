from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import typer
from rich import print

from .. import __version__
from . import configure, connector, delegate, project, secret
from .common import OVERRIDES_KEY, configure_logging

app = typer.Typer(
    help="A simple tool to interact with the Harness API (https://apidocs.harness.io).",
    no_args_is_help=True,
)


def _register_sub_app(name: str, sub_app: typer.Typer) -> None:
    app.add_typer(sub_app, name=name)


_register_sub_app("project", project.app)
_register_sub_app("secret", secret.app)
_register_sub_app("connector", connector.app)
_register_sub_app("delegate", delegate.app)
_register_sub_app("config", configure.app)


@app.callback()
def main(
    ctx: typer.Context,
    api_key: str | None = typer.Option(  # noqa: B008
        None, "--api-key", "-k", envvar="HARNESS_API_KEY", help="The Harness API key."
    ),
    account_id: str | None = typer.Option(  # noqa: B008
        None, "--account-id", "-a", envvar="HARNESS_ACCOUNT_ID", help="The Harness account id."
    ),
    org_id: str | None = typer.Option(  # noqa: B008
        None,
        "--org-id",
        "-o",
        envvar="HARNESS_ORG_ID",
        help="The organization id to use (defaults to 'default').",
    ),
    base_url: str | None = typer.Option(  # noqa: B008
        None, "--base-url", envvar="HARNESS_BASE_URL", help="The API base URL."
    ),
    timeout: float | None = typer.Option(  # noqa: B008
        None, "--timeout", envvar="HARNESS_TIMEOUT", min=0.1, help="Request timeout in seconds."
    ),
    verbose: str = typer.Option(  # noqa: B008
        "warning", "--verbose", "-v", envvar="HARNESS_LOG_LEVEL", help="The logging level to set."
    ),
) -> None:
    """Initialize logging and the connection overrides shared by every command."""

    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj[OVERRIDES_KEY] = {
        "api_key": api_key,
        "account_id": account_id,
        "org_id": org_id,
        "base_url": base_url,
        "timeout": timeout,
    }


@app.command("version")
def version() -> None:
    """Print the harness-cli version."""

    try:
        value = package_version("harness-cli")
    except PackageNotFoundError:
        value = __version__
    print(value)


__all__ = [
    "app",
    "configure",
    "connector",
    "delegate",
    "project",
    "secret",
    "version",
]
