"""Re-export typed request models for harness-cli."""

from __future__ import annotations

from .common import ResourceBody
from .connector import (
    DOCKER_REGISTRY_TYPE,
    GCP_TYPE,
    GITHUB_TYPE,
    Connector,
    ConnectorSpec,
    Credential,
    DockerAuthType,
    DockerProviderType,
    DockerRegistrySpec,
    GcpAuthType,
    GcpSpec,
    GithubApiAccessType,
    GithubAuthType,
    GithubSpec,
    GithubUrlType,
    docker_registry_spec,
    gcp_spec,
    github_spec,
)
from .delegate import DelegateGroup, DelegateGroupFilter
from .project import Project, ProjectModule
from .secret import DEFAULT_SECRET_MANAGER, Secret, SecretSpec, SecretType, SecretValueType

__all__ = [
    "DEFAULT_SECRET_MANAGER",
    "DOCKER_REGISTRY_TYPE",
    "GCP_TYPE",
    "GITHUB_TYPE",
    "Connector",
    "ConnectorSpec",
    "Credential",
    "DelegateGroup",
    "DelegateGroupFilter",
    "DockerAuthType",
    "DockerProviderType",
    "DockerRegistrySpec",
    "GcpAuthType",
    "GcpSpec",
    "GithubApiAccessType",
    "GithubAuthType",
    "GithubSpec",
    "GithubUrlType",
    "Project",
    "ProjectModule",
    "ResourceBody",
    "Secret",
    "SecretSpec",
    "SecretType",
    "SecretValueType",
    "docker_registry_spec",
    "gcp_spec",
    "github_spec",
]
