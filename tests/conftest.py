"""Shared fakes for the Content API service and sample config directories."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from types import SimpleNamespace
from typing import Any, Iterable

import httplib2
import pytest
from googleapiclient.errors import HttpError


def fake_request(response: Any) -> SimpleNamespace:
    """A googleapiclient HttpRequest stand-in; raises if response is an exception."""

    def execute():
        if isinstance(response, Exception):
            raise response
        return response

    return SimpleNamespace(execute=execute)


class PagedList:
    """Stands in for a collection's list method; records the params of every call."""

    def __init__(self, responses: Iterable[Any]) -> None:
        self.responses = list(responses)
        self.calls: list[dict] = []

    def __call__(self, **params):
        self.calls.append(params)
        return fake_request(self.responses[len(self.calls) - 1])


class FakeFactory:
    """ContentServiceFactory stand-in that counts service accesses."""

    def __init__(self, service: Any = None) -> None:
        self._service = service
        self.accesses = 0

    @property
    def content(self) -> Any:
        self.accesses += 1
        return self._service


def make_service(
    products: Any = None,
    productstatuses: Any = None,
    datafeeds: Any = None,
    accounts: Any = None,
    identifiers: list[dict] | None = None,
    account: dict | None = None,
) -> SimpleNamespace:
    """Build a fake content v2.1 service with the given collection members."""
    if identifiers is None:
        identifiers = [{"merchantId": "123"}]
    accounts_ns = SimpleNamespace(
        authinfo=lambda: fake_request({"accountIdentifiers": identifiers}),
        get=lambda merchantId, accountId: fake_request(
            account or {"id": str(accountId), "websiteUrl": "https://shop.example.com"}
        ),
        list=accounts or PagedList([{}]),
    )
    return SimpleNamespace(
        products=lambda: products or SimpleNamespace(),
        productstatuses=lambda: SimpleNamespace(list=productstatuses or PagedList([{}])),
        datafeeds=lambda: SimpleNamespace(list=datafeeds or PagedList([{}])),
        accounts=lambda: accounts_ns,
    )


def make_http_error(status: int, body: Any) -> HttpError:
    content = body if isinstance(body, bytes) else json.dumps(body).encode("utf-8")
    return HttpError(httplib2.Response({"status": status}), content)


def write_config(root: Path, info: dict) -> Path:
    content_dir = root / "content"
    content_dir.mkdir(parents=True, exist_ok=True)
    (content_dir / "merchant-info.json").write_text(json.dumps(info), encoding="utf-8")
    return content_dir


@pytest.fixture
def config_root(tmp_path: Path) -> Path:
    write_config(tmp_path, {"merchantId": 123, "websiteUrl": "https://shop.example.com"})
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    root = logging.getLogger("shopping")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
