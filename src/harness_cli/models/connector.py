"""Typed models for connector create requests.

Each connector type has its own spec shape; :class:`Connector` wraps any of
them in the common resource envelope.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field

from ..identifiers import scoped_reference
from ..scope import Scope
from .common import ResourceBody

DOCKER_REGISTRY_TYPE = "DockerRegistry"
GITHUB_TYPE = "Github"
GCP_TYPE = "Gcp"


class _SpecModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Credential(_SpecModel):
    """Authentication block: a type name plus an optional type specific spec."""

    type: str
    spec: Any | None = None


# ---- Docker registry -------------------------------------------------------


class DockerAuthType(str, Enum):
    PASSWORD = "password"
    ANONYMOUS = "anonymous"


class DockerProviderType(str, Enum):
    DOCKER_HUB = "DockerHub"
    HARBOR = "Harbor"
    QUAY = "Quay"
    OTHER = "Other"


class DockerUsernamePassword(_SpecModel):
    username: str
    password_ref: str = Field(alias="passwordRef")


class DockerRegistrySpec(_SpecModel):
    auth: Credential
    docker_registry_url: str = Field(alias="dockerRegistryUrl")
    provider_type: DockerProviderType = Field(alias="providerType")
    execute_on_delegate: bool = Field(default=True, alias="executeOnDelegate")


def docker_registry_spec(
    *,
    scope: Scope,
    url: str,
    provider_type: DockerProviderType,
    auth_type: DockerAuthType,
    username: str | None,
    password_secret: str | None,
    execute_on_delegate: bool,
) -> DockerRegistrySpec:
    if auth_type is DockerAuthType.PASSWORD:
        auth = Credential(
            type="UsernamePassword",
            spec=DockerUsernamePassword(
                username=username or "",
                password_ref=scoped_reference(scope, password_secret or ""),
            ),
        )
    else:
        auth = Credential(type="Anonymous")
    return DockerRegistrySpec(
        auth=auth,
        docker_registry_url=url,
        provider_type=provider_type,
        execute_on_delegate=execute_on_delegate,
    )


# ---- GitHub ----------------------------------------------------------------


class GithubAuthType(str, Enum):
    HTTP = "Http"
    SSH = "Ssh"


class GithubUrlType(str, Enum):
    ACCOUNT = "Account"
    REPO = "Repo"


class GithubApiAccessType(str, Enum):
    TOKEN = "Token"
    GITHUB_APP = "GithubApp"
    OAUTH = "OAuth"


class GithubUsernameToken(_SpecModel):
    username: str
    token_ref: str = Field(alias="tokenRef")


class GithubTokenRef(_SpecModel):
    token_ref: str = Field(alias="tokenRef")


class GithubSpec(_SpecModel):
    authentication: Credential
    api_access: Credential | None = Field(default=None, alias="apiAccess")
    url: str
    validation_repo: str | None = Field(default=None, alias="validationRepo")
    type: GithubUrlType = GithubUrlType.ACCOUNT
    execute_on_delegate: bool = Field(default=True, alias="executeOnDelegate")
    delegate_selectors: list[str] | None = Field(default=None, alias="delegateSelectors")


def github_spec(
    *,
    scope: Scope,
    url: str,
    url_type: GithubUrlType,
    validation_repo: str | None,
    auth_type: GithubAuthType,
    username: str,
    token_secret: str,
    enable_api_access: bool,
    api_access_type: GithubApiAccessType,
    execute_on_delegate: bool,
    delegate_selectors: list[str] | None = None,
) -> GithubSpec:
    token_ref = scoped_reference(scope, token_secret)
    if auth_type is GithubAuthType.HTTP:
        authentication = Credential(
            type=auth_type.value,
            spec=Credential(
                type="UsernameToken",
                spec=GithubUsernameToken(username=username, token_ref=token_ref),
            ),
        )
    else:
        authentication = Credential(type=auth_type.value, spec={})
    api_access = None
    if enable_api_access:
        api_access = Credential(type=api_access_type.value, spec=GithubTokenRef(token_ref=token_ref))
    # A repo URL is its own validation target.
    if url_type is GithubUrlType.REPO:
        validation_repo = url
    return GithubSpec(
        authentication=authentication,
        api_access=api_access,
        url=url,
        validation_repo=validation_repo,
        type=url_type,
        execute_on_delegate=execute_on_delegate,
        delegate_selectors=delegate_selectors or None,
    )


# ---- GCP -------------------------------------------------------------------


class GcpAuthType(str, Enum):
    MANUAL = "manual"
    DELEGATE = "delegate"


class GcpSecretKeyRef(_SpecModel):
    secret_key_ref: str = Field(alias="secretKeyRef")


class GcpSpec(_SpecModel):
    credential: Credential
    delegate_selectors: list[str] | None = Field(default=None, alias="delegateSelectors")
    execute_on_delegate: bool = Field(default=True, alias="executeOnDelegate")


def gcp_spec(
    *,
    scope: Scope,
    auth_type: GcpAuthType,
    secret_key: str | None,
    delegate_selectors: list[str] | None,
    execute_on_delegate: bool,
) -> GcpSpec:
    if auth_type is GcpAuthType.MANUAL:
        return GcpSpec(
            credential=Credential(
                type="ManualConfig",
                spec=GcpSecretKeyRef(secret_key_ref=scoped_reference(scope, secret_key or "")),
            ),
            execute_on_delegate=execute_on_delegate,
        )
    return GcpSpec(
        credential=Credential(type="InheritFromDelegate"),
        delegate_selectors=delegate_selectors or None,
        execute_on_delegate=execute_on_delegate,
    )


# ---- Envelope --------------------------------------------------------------

ConnectorSpec = Union[DockerRegistrySpec, GithubSpec, GcpSpec]


class Connector(ResourceBody):
    envelope_key: ClassVar[str] = "connector"

    type: str
    spec: ConnectorSpec


__all__ = [
    "DOCKER_REGISTRY_TYPE",
    "GCP_TYPE",
    "GITHUB_TYPE",
    "Connector",
    "ConnectorSpec",
    "Credential",
    "DockerAuthType",
    "DockerProviderType",
    "DockerRegistrySpec",
    "DockerUsernamePassword",
    "GcpAuthType",
    "GcpSecretKeyRef",
    "GcpSpec",
    "GithubApiAccessType",
    "GithubAuthType",
    "GithubSpec",
    "GithubTokenRef",
    "GithubUrlType",
    "GithubUsernameToken",
    "docker_registry_spec",
    "gcp_spec",
    "github_spec",
]
