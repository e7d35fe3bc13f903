from __future__ import annotations

import json
import logging
import os
from collections.abc import Callable, Iterable
from functools import wraps
from typing import Any, ParamSpec, TypeVar, cast

import typer
from rich.console import Console
from rich.logging import RichHandler

from ..config import ConfigStore, Settings, resolve_settings
from ..errors import DecodeError, HarnessError, InvalidArgumentError, TransportError
from ..identifiers import derive_identifier
from ..resources import ResourceKind
from ..results import CreateResult, DeleteResult, Deleted, Duplicate, RemoteFailure, Success
from ..tags import parse_tags

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

DEBUG_ENV = "HARNESS_CLI_DEBUG"
SETTINGS_KEY = "settings"
OVERRIDES_KEY = "overrides"


CommandParams = ParamSpec("CommandParams")
CommandReturn = TypeVar("CommandReturn")


def handle_cli_errors(
    func: Callable[CommandParams, CommandReturn],
) -> Callable[CommandParams, CommandReturn]:
    @wraps(func)
    def wrapper(*args: CommandParams.args, **kwargs: CommandParams.kwargs) -> CommandReturn:
        try:
            return func(*args, **kwargs)
        except typer.BadParameter:
            raise
        except typer.Exit:
            raise
        except InvalidArgumentError as exc:
            raise typer.BadParameter(str(exc)) from None
        except TransportError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            if exc.url:
                err_console.print(f"Request to {exc.url} did not complete.")
            raise typer.Exit(1) from None
        except DecodeError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            if exc.body:
                err_console.print(str(exc.body), markup=False)
            raise typer.Exit(1) from None
        except HarnessError as exc:
            err_console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(1) from None
        except Exception as exc:
            if os.getenv(DEBUG_ENV):
                raise
            err_console.print(f"[red]Error:[/red] Unexpected failure: {exc}")
            err_console.print(f"Set {DEBUG_ENV}=1 for a stack trace.")
            raise typer.Exit(1) from exc

    return wrapper


def configure_logging(level: str) -> None:
    """Route log records through rich on stderr at ``level``."""

    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise typer.BadParameter(f"Unknown log level '{level}'.", param_hint="--verbose")
    logging.basicConfig(
        level=numeric,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def get_settings(ctx: typer.Context) -> Settings:
    """Return the :class:`Settings` for this invocation, cached on ``ctx``."""

    ctx_obj = cast(dict[str, Any], ctx.ensure_object(dict))
    existing = ctx_obj.get(SETTINGS_KEY)
    if isinstance(existing, Settings):
        return existing

    overrides = cast(dict[str, Any], ctx_obj.get(OVERRIDES_KEY) or {})
    try:
        settings = resolve_settings(config=ConfigStore().load(), **overrides)
    except ValueError as exc:
        raise typer.BadParameter(
            f"{exc} Pass --api-key/--account-id, export HARNESS_API_KEY/HARNESS_ACCOUNT_ID, "
            "or run `harness-cli config set`."
        ) from None
    ctx_obj[SETTINGS_KEY] = settings
    return settings


def identifier_option(name: str) -> str:
    """Derive the identifier for ``name``, reporting failures as bad parameters."""

    try:
        return derive_identifier(name)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="--name") from None


def tags_option(values: Iterable[str] | None) -> dict[str, str] | None:
    try:
        tags = parse_tags(values)
    except InvalidArgumentError as exc:
        raise typer.BadParameter(str(exc), param_hint="--tag") from None
    return tags or None


def report_remote_failure(kind_label: str, failure: RemoteFailure) -> None:
    """Log ``failure`` in full without aborting the command."""

    logger.error(
        "%s request failed (%s): %s",
        kind_label,
        failure.code or "no code",
        json.dumps(dict(failure.document), default=str),
    )
    if failure.message:
        err_console.print(failure.message, markup=False, soft_wrap=True)


def render_create_result(kind: ResourceKind, result: CreateResult) -> None:
    if isinstance(result, Success):
        console.print(result.identifier, markup=False, highlight=False, soft_wrap=True)
    elif isinstance(result, Duplicate):
        console.print(
            f"{kind.label} with name '{result.name}' already exists",
            markup=False,
            highlight=False,
            soft_wrap=True,
        )
    else:
        report_remote_failure(kind.label, result)


def render_delete_result(kind: ResourceKind, result: DeleteResult) -> None:
    if isinstance(result, Deleted):
        if result.deleted:
            console.print(
                f"{kind.label} '{result.identifier}' deleted successfully",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
        else:
            logger.warning("%s '%s' was not deleted", kind.label, result.identifier)
    else:
        report_remote_failure(kind.label, result)


__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "get_settings",
    "handle_cli_errors",
    "identifier_option",
    "render_create_result",
    "render_delete_result",
    "report_remote_failure",
    "tags_option",
]
