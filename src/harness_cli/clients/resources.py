from __future__ import annotations

import json
import logging
from pathlib import Path
from types import TracebackType

from ..config import Settings
from ..errors import InvalidArgumentError
from ..http_client import HttpClient
from ..models.common import ResourceBody
from ..models.secret import Secret
from ..resources import SECRET, ResourceKind
from ..results import CreateResult, DeleteResult, decode_create, decode_delete
from ..scope import ScopeContext

logger = logging.getLogger(__name__)


class ResourcesClient:
    """Create and delete projects, secrets and connectors.

    Every kind goes through the same sequence: attach the scope parameters,
    perform one call, decode the reply into a typed result. What differs per
    kind lives in :class:`~harness_cli.resources.ResourceKind`.
    """

    def __init__(self, http: HttpClient) -> None:
        self.http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> ResourcesClient:
        return cls(
            HttpClient(
                settings.base_url,
                settings.api_key,
                settings.account_id,
                timeout=settings.timeout,
            )
        )

    def close(self) -> None:
        """Close the underlying HTTP client."""

        self.http.close()

    def __enter__(self) -> ResourcesClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def create(self, kind: ResourceKind, body: ResourceBody) -> CreateResult:
        """POST ``body`` as JSON to the collection of ``kind``.

        Args:
            kind: Resource kind describing endpoint and response shape.
            body: Request payload; its scope selects the query parameters.

        Returns:
            :class:`~harness_cli.results.Success`,
            :class:`~harness_cli.results.Duplicate` or
            :class:`~harness_cli.results.RemoteFailure`.
        """

        logger.info("Creating %s '%s'", kind.label.lower(), body.name)
        params = body.scope_context().query_params()
        document = self.http.post_json(kind.collection_path, body.envelope(), params=params)
        return decode_create(document, kind.response_key, body.name)

    def create_secret(self, secret: Secret, file_path: str | Path | None = None) -> CreateResult:
        """Create ``secret``, uploading ``file_path`` when its type is file backed.

        ``SecretText`` secrets are sent as JSON. Every other type is sent as
        multipart form data with the JSON payload in the ``spec`` field and the
        file content, read whole up front, in the ``file`` part.
        """

        params = {
            **secret.scope_context().query_params(),
            "privateSecret": str(secret.private_secret).lower(),
        }
        if not secret.is_file_backed:
            logger.info("Creating %s secret '%s'", secret.type.value, secret.name)
            document = self.http.post_json(SECRET.collection_path, secret.envelope(), params=params)
            return decode_create(document, SECRET.response_key, secret.name)

        if not file_path:
            raise InvalidArgumentError(f"A file is required for {secret.type.value} secrets.")
        path = Path(file_path)
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise InvalidArgumentError(f"Unable to read secret file {path}: {exc}") from exc
        assert SECRET.multipart_path is not None
        logger.info("Creating %s secret '%s' from %s", secret.type.value, secret.name, path)
        document = self.http.post_multipart(
            SECRET.multipart_path,
            form={"spec": json.dumps(secret.envelope())},
            files={"file": (path.name, content)},
            params=params,
        )
        return decode_create(document, SECRET.response_key, secret.name)

    def delete(
        self, kind: ResourceKind, identifier: str, scope_context: ScopeContext
    ) -> DeleteResult:
        """DELETE the ``kind`` resource called ``identifier``."""

        logger.info("Deleting %s '%s'", kind.label.lower(), identifier)
        document = self.http.delete_by_id(
            kind.item_path, identifier, params=scope_context.query_params()
        )
        return decode_delete(document, identifier)


__all__ = ["ResourcesClient"]
