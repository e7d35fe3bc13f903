"""Endpoint table for the resource kinds the CLI manages."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResourceKind:
    """Where a resource kind lives in the API and how its replies are shaped.

    Attributes:
        name: Short name used on the command line.
        label: Human readable name used in messages.
        collection_path: Path that accepts create calls.
        item_path: Path template with an ``{id}`` placeholder for deletes.
        response_key: Key under ``data`` holding the created resource.
        multipart_path: Path accepting multipart creates for file-backed
            resources, when the kind has one.
    """

    name: str
    label: str
    collection_path: str
    item_path: str
    response_key: str
    multipart_path: str | None = None


PROJECT = ResourceKind(
    name="project",
    label="Project",
    collection_path="projects",
    item_path="projects/{id}",
    response_key="project",
)

SECRET = ResourceKind(
    name="secret",
    label="Secret",
    collection_path="v2/secrets",
    item_path="v2/secrets/{id}",
    response_key="secret",
    multipart_path="v2/secrets/files",
)

CONNECTOR = ResourceKind(
    name="connector",
    label="Connector",
    collection_path="connectors",
    item_path="connectors/{id}",
    response_key="connector",
)

DELEGATE_GROUPS_BY_TAGS_PATH = "delegate-group-tags/delegate-groups"


__all__ = [
    "CONNECTOR",
    "DELEGATE_GROUPS_BY_TAGS_PATH",
    "PROJECT",
    "SECRET",
    "ResourceKind",
]
