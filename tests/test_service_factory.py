"""Tests for endpoint overrides and lazy service construction."""
from __future__ import annotations

from pathlib import Path

import pytest

from shopping import service_factory
from shopping.config import ConfigurationError, SampleConfig
from shopping.service_factory import (
    ENDPOINT_ENV_VAR,
    ContentServiceFactory,
    endpoint_override,
    split_endpoint,
)


@pytest.fixture
def config(tmp_path) -> SampleConfig:
    return SampleConfig(config_dir=Path(tmp_path), merchant_id=1, application_name="Tests")


@pytest.fixture
def recorded(monkeypatch):
    """Replace authentication, transport and discovery with recorders."""
    calls: dict = {"auth": 0, "build": []}

    def fake_authenticate(content_dir, scopes):
        calls["auth"] += 1
        return "creds"

    def fake_build(name, version, **kwargs):
        calls["build"].append((name, version, kwargs))
        return object()

    monkeypatch.setattr(service_factory, "authenticate", fake_authenticate)
    monkeypatch.setattr(service_factory, "create_http_transport", lambda creds, app: ("http", creds, app))
    monkeypatch.setattr(service_factory, "build", fake_build)
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)
    return calls


def test_split_endpoint():
    assert split_endpoint("https://example.com/content/v2.1/") == (
        "https://example.com/",
        "content/v2.1/",
    )
    assert split_endpoint("http://localhost:8080") == ("http://localhost:8080/", "")


@pytest.mark.parametrize("endpoint", ["/content/v2.1/", "example.com/content", "content"])
def test_relative_endpoint_is_rejected(endpoint):
    with pytest.raises(ConfigurationError, match="absolute"):
        split_endpoint(endpoint)


def test_endpoint_override_unset(monkeypatch):
    monkeypatch.delenv(ENDPOINT_ENV_VAR, raising=False)
    assert endpoint_override() is None


def test_default_endpoint(config, recorded, capsys):
    factory = ContentServiceFactory(config)
    service = factory.content

    assert factory.content is service
    assert recorded["auth"] == 1
    assert len(recorded["build"]) == 1
    name, version, kwargs = recorded["build"][0]
    assert (name, version) == ("content", "v2.1")
    assert kwargs["http"] == ("http", "creds", "Tests")
    assert "client_options" not in kwargs
    assert capsys.readouterr().out == ""


def test_absolute_override(config, recorded, monkeypatch, capsys):
    monkeypatch.setenv(ENDPOINT_ENV_VAR, "https://sandbox.example.com/content/v2.1/")

    ContentServiceFactory(config).content

    _, _, kwargs = recorded["build"][0]
    assert kwargs["client_options"] == {"api_endpoint": "https://sandbox.example.com/content/v2.1/"}
    assert capsys.readouterr().out == (
        "Using non-standard API endpoint: https://sandbox.example.com/content/v2.1/\n"
    )


def test_relative_override_fails_before_auth(config, recorded, monkeypatch):
    monkeypatch.setenv(ENDPOINT_ENV_VAR, "content/v2.1")

    with pytest.raises(ConfigurationError):
        ContentServiceFactory(config).content

    assert recorded["auth"] == 0
    assert recorded["build"] == []


def test_unreadable_ca_bundle_exits(tmp_path, monkeypatch):
    monkeypatch.setattr(service_factory.httplib2, "CA_CERTS", str(tmp_path / "missing-ca.pem"))

    with pytest.raises(SystemExit) as excinfo:
        service_factory.create_http_transport("creds", "Tests")

    assert excinfo.value.code == 1
