from __future__ import annotations

import json
import logging
import os
import stat
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

from .http_client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

HOME_ENV = "HARNESS_CLI_HOME"
DEFAULT_HOME = "~/.harness-cli"
CONFIG_FILENAME = "config.json"
DEFAULT_ORG_ID = "default"


def config_dir() -> Path:
    return Path(os.path.expanduser(os.getenv(HOME_ENV, DEFAULT_HOME)))


def default_config_path() -> Path:
    return config_dir() / CONFIG_FILENAME


def _secure_path(path: Path) -> None:
    if not path.exists():
        return

    try:
        if os.name == "nt":
            os.chmod(path, stat.S_IREAD | stat.S_IWRITE)
        else:
            mode = stat.S_IMODE(path.stat().st_mode)
            if mode & (stat.S_IRWXG | stat.S_IRWXO):
                logger.warning("Adjusted permissions for %s to 0o600", path)
            path.chmod(0o600)
    except PermissionError as exc:
        logger.warning("Unable to enforce secure permissions for %s: %s", path, exc)


@dataclass
class ConfigData:
    """Defaults persisted between invocations."""

    api_key: str | None = None
    account_id: str | None = None
    org_id: str | None = None
    base_url: str | None = None


@dataclass(frozen=True)
class Settings:
    """Effective connection settings handed to every client."""

    api_key: str
    account_id: str
    org_id: str = DEFAULT_ORG_ID
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT


class ConfigStore:
    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        self.path = Path(path) if path else default_config_path()

    def _ensure(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        _secure_path(self.path)
        with self.path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        return raw if isinstance(raw, dict) else {}

    def _write(self, data: dict[str, Any]) -> None:
        self._ensure()
        tmp = self.path.with_suffix(".tmp")
        with tmp.open("w", encoding="utf-8") as handle:
            json.dump(data, handle, indent=2)
        tmp.replace(self.path)
        _secure_path(self.path)

    def load(self) -> ConfigData:
        raw = self._read()
        known = {f.name for f in fields(ConfigData)}
        return ConfigData(**{k: v for k, v in raw.items() if k in known})

    def save(self, cfg: ConfigData) -> None:
        self._write({k: v for k, v in asdict(cfg).items() if v is not None})

    def update(self, **values: str | None) -> ConfigData:
        """Persist the non-``None`` entries of ``values`` over the stored config."""

        cfg = self.load()
        for key, value in values.items():
            if value is not None:
                setattr(cfg, key, value)
        self.save(cfg)
        return cfg


def resolve_settings(
    *,
    api_key: str | None = None,
    account_id: str | None = None,
    org_id: str | None = None,
    base_url: str | None = None,
    timeout: float | None = None,
    config: ConfigData | None = None,
) -> Settings:
    """Merge explicit values over the stored config and built-in defaults.

    Raises:
        ValueError: If no API key or account id can be resolved.
    """

    cfg = config or ConfigStore().load()
    key = api_key or cfg.api_key
    account = account_id or cfg.account_id
    if not key:
        raise ValueError("API key is not configured.")
    if not account:
        raise ValueError("Account id is not configured.")
    return Settings(
        api_key=key,
        account_id=account,
        org_id=org_id or cfg.org_id or DEFAULT_ORG_ID,
        base_url=base_url or cfg.base_url or DEFAULT_BASE_URL,
        timeout=timeout if timeout is not None else DEFAULT_TIMEOUT,
    )


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_ORG_ID",
    "HOME_ENV",
    "ConfigData",
    "ConfigStore",
    "Settings",
    "config_dir",
    "default_config_path",
    "resolve_settings",
]
