from __future__ import annotations

import json

import httpx

from harness_cli.cli import app
from harness_cli.models import DelegateGroup
from harness_cli.results import RemoteFailure

URL = "https://app.harness.io/gateway/ng/api/delegate-group-tags/delegate-groups"


class StubDelegatesClient:
    last_instance: StubDelegatesClient | None = None
    result: object = [
        DelegateGroup(identifier="k8s_delegate", name="k8s-delegate"),
        DelegateGroup(identifier="vm_delegate", name="vm-delegate"),
    ]

    def __init__(self, settings):
        self.settings = settings
        self.list_args: tuple[list[str], object] | None = None
        StubDelegatesClient.last_instance = self

    @classmethod
    def from_settings(cls, settings):
        return cls(settings)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return None

    def list_by_tags(self, tags, scope_context):
        self.list_args = (list(tags), scope_context)
        return self.result


def install_stub(monkeypatch, **attrs):
    StubDelegatesClient.last_instance = None
    monkeypatch.setattr(
        "harness_cli.cli.delegate.DelegatesClient", type("Stub", (StubDelegatesClient,), attrs)
    )


def test_delegate_list_prints_json(monkeypatch, cli_runner):
    install_stub(monkeypatch)

    result = cli_runner.invoke(
        app, ["delegate", "list", "--tag", "k8s", "-t", "linux", "--project-id", "demo"]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [
        {"name": "k8s-delegate", "id": "k8s_delegate"},
        {"name": "vm-delegate", "id": "vm_delegate"},
    ]
    tags, scope_context = StubDelegatesClient.last_instance.list_args
    assert tags == ["k8s", "linux"]
    assert scope_context.query_params() == {
        "orgIdentifier": "default",
        "projectIdentifier": "demo",
    }


def test_delegate_list_empty(monkeypatch, cli_runner):
    install_stub(monkeypatch, result=[])

    result = cli_runner.invoke(app, ["delegate", "list", "--delegate-scope", "account"])

    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "[]"
    tags, scope_context = StubDelegatesClient.last_instance.list_args
    assert tags == []
    assert scope_context.query_params() == {}


def test_delegate_list_remote_failure(monkeypatch, cli_runner):
    failure = RemoteFailure(
        code="INVALID_REQUEST",
        message="Invalid scope",
        document={"status": "ERROR", "code": "INVALID_REQUEST", "message": "Invalid scope"},
    )
    install_stub(monkeypatch, result=failure)

    result = cli_runner.invoke(app, ["delegate", "list", "-t", "k8s"])

    assert result.exit_code == 0
    assert "Invalid scope" in result.output


def test_delegate_list_end_to_end(respx_mock, cli_runner):
    route = respx_mock.post(
        URL, params={"accountIdentifier": "ACCOUNT", "orgIdentifier": "default"}
    ).mock(
        return_value=httpx.Response(
            200, json={"resource": [{"identifier": "gke", "name": "GKE delegates"}]}
        )
    )

    result = cli_runner.invoke(
        app, ["delegate", "list", "--tag", "gke", "--delegate-scope", "org"]
    )

    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == [{"name": "GKE delegates", "id": "gke"}]
    assert json.loads(route.calls.last.request.content) == {"tags": ["gke"]}
    assert "projectIdentifier" not in route.calls.last.request.url.params


def test_delegate_list_invalid_token_is_reported(respx_mock, cli_runner):
    respx_mock.post(URL).mock(
        return_value=httpx.Response(
            401,
            json={"status": "FAILURE", "code": "INVALID_TOKEN", "message": "Token is not valid."},
        )
    )

    result = cli_runner.invoke(app, ["delegate", "list", "--tag", "k8s", "-p", "demo"])

    assert result.exit_code == 0
    assert "INVALID_TOKEN" in result.output
    assert "Token is not valid." in result.output
    assert "[]" not in result.stdout
