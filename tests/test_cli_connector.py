from __future__ import annotations

import json

import httpx

from harness_cli.cli import app
from harness_cli.results import Deleted, Success


class StubResourcesClient:
    last_instance: StubResourcesClient | None = None

    def __init__(self, settings):
        self.settings = settings
        self.create_args: tuple[object, object] | None = None
        self.delete_args: tuple[object, str, object] | None = None
        StubResourcesClient.last_instance = self

    @classmethod
    def from_settings(cls, settings):
        return cls(settings)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return None

    def create(self, kind, body):
        self.create_args = (kind, body)
        return Success(body.identifier)

    def delete(self, kind, identifier, scope_context):
        self.delete_args = (kind, identifier, scope_context)
        return Deleted(identifier, False)


def install_stub(monkeypatch):
    StubResourcesClient.last_instance = None
    monkeypatch.setattr("harness_cli.cli.connector.ResourcesClient", StubResourcesClient)


def created_payload() -> dict:
    kind, body = StubResourcesClient.last_instance.create_args
    assert kind.name == "connector"
    return body.envelope()["connector"]


def test_connector_docker_password(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app,
        [
            "connector",
            "docker",
            "--name",
            "Docker Hub",
            "--username",
            "robot",
            "--password",
            "docker_pw",
            "--connector-scope",
            "org",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "docker_hub"
    payload = created_payload()
    assert payload["type"] == "DockerRegistry"
    assert payload["orgIdentifier"] == "default"
    assert "projectIdentifier" not in payload
    assert payload["spec"]["auth"]["spec"] == {"username": "robot", "passwordRef": "org.docker_pw"}


def test_connector_docker_password_requires_credentials(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(app, ["connector", "docker", "--name", "Hub", "-u", "robot"])

    assert result.exit_code == 2
    assert StubResourcesClient.last_instance is None


def test_connector_docker_anonymous(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app,
        ["connector", "docker", "--name", "Public", "--auth-type", "anonymous", "-p", "demo"],
    )

    assert result.exit_code == 0, result.output
    payload = created_payload()
    assert payload["spec"]["auth"] == {"type": "Anonymous"}
    assert payload["projectIdentifier"] == "demo"


def test_connector_github(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app,
        [
            "connector",
            "github",
            "--name",
            "GitHub Acme",
            "--username",
            "octocat",
            "--pat",
            "gh_pat",
            "--url",
            "https://github.com/acme",
            "--connector-scope",
            "account",
            "--delegate-tag",
            "k8s",
        ],
    )

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "github_acme"
    payload = created_payload()
    assert payload["type"] == "Github"
    assert "orgIdentifier" not in payload
    spec = payload["spec"]
    assert spec["authentication"]["spec"]["spec"]["tokenRef"] == "account.gh_pat"
    assert spec["apiAccess"] == {"type": "Token", "spec": {"tokenRef": "account.gh_pat"}}
    assert spec["delegateSelectors"] == ["k8s"]


def test_connector_github_requires_url(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app, ["connector", "github", "--name", "GH", "--username", "me", "--pat", "tok"]
    )

    assert result.exit_code == 2


def test_connector_gcp_manual(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app, ["connector", "gcp", "--name", "GCP Prod", "--secret-key", "sa_key", "-p", "demo"]
    )

    assert result.exit_code == 0, result.output
    payload = created_payload()
    assert payload["spec"]["credential"] == {
        "type": "ManualConfig",
        "spec": {"secretKeyRef": "sa_key"},
    }


def test_connector_gcp_delegate_requires_tags(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app, ["connector", "gcp", "--name", "GCP", "--auth-type", "delegate"]
    )

    assert result.exit_code == 2
    assert "--delegate-tag" in result.output


def test_connector_gcp_delegate(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app,
        ["connector", "gcp", "--name", "GCP", "--auth-type", "delegate", "--delegate-tag", "gke"],
    )

    assert result.exit_code == 0, result.output
    payload = created_payload()
    assert payload["spec"]["credential"] == {"type": "InheritFromDelegate"}
    assert payload["spec"]["delegateSelectors"] == ["gke"]


def test_connector_delete_not_deleted_is_reported(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(app, ["connector", "delete", "--name", "Docker Hub", "-p", "demo"])

    assert result.exit_code == 0
    assert "deleted successfully" not in result.stdout
    _, identifier, scope_context = StubResourcesClient.last_instance.delete_args
    assert identifier == "docker_hub"
    assert scope_context.query_params() == {
        "orgIdentifier": "default",
        "projectIdentifier": "demo",
    }


def test_connector_docker_end_to_end(respx_mock, cli_runner):
    route = respx_mock.post("https://app.harness.io/gateway/ng/api/connectors").mock(
        return_value=httpx.Response(
            400,
            json={"status": "ERROR", "code": "DUPLICATE_FIELD", "message": "already exists"},
        )
    )

    result = cli_runner.invoke(
        app,
        ["connector", "docker", "--name", "Hub", "--auth-type", "anonymous", "-p", "demo"],
    )

    assert result.exit_code == 0, result.output
    assert "Connector with name 'Hub' already exists" in result.stdout
    body = json.loads(route.calls.last.request.content)
    assert body["connector"]["identifier"] == "hub"
    assert route.calls.last.request.url.params["projectIdentifier"] == "demo"


def test_connector_delete_remote_failure_end_to_end(respx_mock, cli_runner):
    respx_mock.delete("https://app.harness.io/gateway/ng/api/connectors/hub").mock(
        return_value=httpx.Response(
            404,
            json={"status": "ERROR", "code": "RESOURCE_NOT_FOUND", "message": "Connector missing"},
        )
    )

    result = cli_runner.invoke(app, ["connector", "delete", "--name", "Hub"])

    assert result.exit_code == 0
    assert "Connector missing" in result.output
