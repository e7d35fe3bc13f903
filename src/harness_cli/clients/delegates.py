from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import TracebackType
from typing import Union

from pydantic import ValidationError

from ..config import Settings
from ..errors import DecodeError
from ..http_client import HttpClient, ResponseDocument
from ..models.delegate import DelegateGroup, DelegateGroupFilter
from ..resources import DELEGATE_GROUPS_BY_TAGS_PATH
from ..results import STATUS_SUCCESS, RemoteFailure, remote_failure
from ..scope import ScopeContext

logger = logging.getLogger(__name__)

DelegateListResult = Union[list[DelegateGroup], RemoteFailure]


class DelegatesClient:
    """Look up delegate groups registered with the platform."""

    def __init__(self, http: HttpClient) -> None:
        self.http = http

    @classmethod
    def from_settings(cls, settings: Settings) -> DelegatesClient:
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

    def __enter__(self) -> DelegatesClient:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def list_by_tags(
        self, tags: Iterable[str], scope_context: ScopeContext
    ) -> DelegateListResult:
        """Return the delegate groups carrying all of ``tags``.

        Args:
            tags: Delegate tags to filter on.
            scope_context: Scope the lookup runs at.

        Returns:
            The matching groups, or a :class:`~harness_cli.results.RemoteFailure`
            when the API answers with a non-success reply.
        """

        body = DelegateGroupFilter(tags=list(tags))
        logger.info("Listing delegate groups for tags %s", body.tags)
        document = self.http.post_json(
            DELEGATE_GROUPS_BY_TAGS_PATH,
            body.model_dump(mode="json"),
            params=scope_context.query_params(),
        )
        return self._decode(document)

    @staticmethod
    def _decode(document: ResponseDocument) -> DelegateListResult:
        # The lookup reply carries no status on success; any explicit
        # non-success status, or an error code without a resource list, fails.
        status = document.get("status")
        if status is not None and status != STATUS_SUCCESS:
            return remote_failure(document)
        if "resource" not in document and document.get("code") is not None:
            return remote_failure(document)
        raw = document.get("resource") or []
        if not isinstance(raw, list):
            raise DecodeError("delegate group response 'resource' is not a list", body=document)
        groups: list[DelegateGroup] = []
        for item in raw:
            if not isinstance(item, Mapping):
                raise DecodeError("delegate group entry is not an object", body=document)
            try:
                groups.append(DelegateGroup.model_validate(dict(item)))
            except ValidationError as exc:
                raise DecodeError(f"invalid delegate group entry: {exc}", body=document) from exc
        return groups


__all__ = ["DelegateListResult", "DelegatesClient"]
