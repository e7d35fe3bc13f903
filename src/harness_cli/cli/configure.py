"""Commands for inspecting and storing connection defaults."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

import typer
from rich import print

from ..config import ConfigStore
from .common import handle_cli_errors

app = typer.Typer(help="Stored configuration")


MASK_PLACEHOLDER = "<hidden>"
SENSITIVE_KEYS = frozenset({"api_key"})


@app.command("set")
@handle_cli_errors
def config_set(
    api_key: str | None = typer.Option(None, "--api-key", help="The Harness API key."),
    account_id: str | None = typer.Option(None, "--account-id", help="The Harness account id."),
    org_id: str | None = typer.Option(None, "--org-id", help="The default organization id."),
    base_url: str | None = typer.Option(None, "--base-url", help="The API base URL."),
) -> None:
    """Persist connection defaults used when no option or environment variable is given."""

    if not any((api_key, account_id, org_id, base_url)):
        raise typer.BadParameter("Pass at least one of --api-key, --account-id, --org-id, --base-url.")
    store = ConfigStore()
    store.update(api_key=api_key, account_id=account_id, org_id=org_id, base_url=base_url)
    print(f"Configuration saved to {store.path}")


@app.command("show")
@handle_cli_errors
def config_show() -> None:
    """Display the stored configuration with the API key masked."""

    cfg = ConfigStore().load()
    print(_mask_sensitive_fields(asdict(cfg)))


def _mask_sensitive_fields(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of ``data`` with sensitive keys masked."""

    masked = dict(data)
    for key in masked:
        if key in SENSITIVE_KEYS and masked[key] not in (None, ""):
            masked[key] = MASK_PLACEHOLDER
    return masked


__all__ = ["app", "config_set", "config_show"]
