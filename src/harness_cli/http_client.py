from __future__ import annotations

import logging
from types import TracebackType
from typing import Any
from urllib.parse import quote

import httpx

from .errors import DecodeError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://app.harness.io/gateway/ng/api"
DEFAULT_TIMEOUT = 30.0
HEADER_API_KEY = "x-api-key"
QUERY_PARAM_ACCOUNT_ID = "accountIdentifier"
ID_PLACEHOLDER = "{id}"

ResponseDocument = dict[str, Any]

REDACTED = "<redacted>"
SECRET_VALUE_KEY = "value"


def _redact_secret_values(body: Any, *, in_spec: bool = False) -> Any:
    """Return a copy of ``body`` safe for logging.

    Secret payloads carry their plaintext in ``spec.value``; that entry is
    replaced wherever it appears.
    """

    if isinstance(body, dict):
        redacted: dict[Any, Any] = {}
        for key, value in body.items():
            if in_spec and key == SECRET_VALUE_KEY and value is not None:
                redacted[key] = REDACTED
            else:
                redacted[key] = _redact_secret_values(value, in_spec=key == "spec")
        return redacted
    if isinstance(body, list):
        return [_redact_secret_values(item) for item in body]
    return body


class HttpClient:
    """Thin httpx wrapper that injects the API key and account id into every call.

    Every reply, success or error status alike, is decoded into a
    :data:`ResponseDocument`. Interpreting its ``status`` is left to the caller.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        account_id: str,
        *,
        default_headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.account_id = account_id
        self._api_key = api_key
        self._client = httpx.Client(timeout=timeout)
        self._default_headers = default_headers or {}

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any | None = None,
        headers: dict[str, str] | None = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> ResponseDocument:
        if path.startswith(("http://", "https://")):
            url = path
        else:
            url = f"{self.base_url}/{path.lstrip('/')}"
        merged_headers = {**self._default_headers, **(headers or {}), HEADER_API_KEY: self._api_key}
        merged_params = {QUERY_PARAM_ACCOUNT_ID: self.account_id, **(params or {})}
        request_kwargs: dict[str, Any] = {
            "params": merged_params,
            "headers": merged_headers,
        }
        if json is not None:
            request_kwargs["json"] = json
        if data is not None:
            request_kwargs["data"] = data
        if files is not None:
            request_kwargs["files"] = files

        logger.debug("%s %s params=%s", method, url, merged_params)
        if json is not None:
            logger.debug("Request body: %s", _redact_secret_values(json))
        try:
            resp = self._client.request(method, url, **request_kwargs)
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__, url=url) from e

        logger.debug("Response %s: %s", resp.status_code, resp.text)
        return self._decode(resp)

    @staticmethod
    def _decode(resp: httpx.Response) -> ResponseDocument:
        try:
            document = resp.json()
        except ValueError as exc:
            raise DecodeError(
                f"HTTP {resp.status_code} response body is not JSON", body=resp.text
            ) from exc
        if not isinstance(document, dict):
            raise DecodeError(
                f"HTTP {resp.status_code} response body is not a JSON object", body=document
            )
        return document

    def post_json(
        self, path: str, body: Any, *, params: dict[str, Any] | None = None
    ) -> ResponseDocument:
        """POST ``body`` serialized as JSON."""

        return self.request(
            "POST",
            path,
            params=params,
            json=body,
            headers={"Content-Type": "application/json"},
        )

    def post_multipart(
        self,
        path: str,
        *,
        form: dict[str, str],
        files: dict[str, tuple[str, bytes]],
        params: dict[str, Any] | None = None,
    ) -> ResponseDocument:
        """POST ``form`` fields alongside ``files`` as multipart/form-data."""

        logger.debug("Multipart form fields: %s", form)
        return self.request("POST", path, params=params, data=form, files=files)

    def delete_by_id(
        self, path_template: str, identifier: str, *, params: dict[str, Any] | None = None
    ) -> ResponseDocument:
        """DELETE the resource at ``path_template`` with ``{id}`` replaced."""

        if ID_PLACEHOLDER not in path_template:
            raise ValueError(f"Path template {path_template!r} has no {ID_PLACEHOLDER} placeholder")
        path = path_template.replace(ID_PLACEHOLDER, quote(identifier, safe=""))
        return self.request("DELETE", path, params=params)

    def close(self) -> None:
        """Close the underlying :class:`httpx.Client`."""

        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
