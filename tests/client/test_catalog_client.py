from __future__ import annotations

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.repo.memory import InMemoryBookRepo
from catalog_client import CatalogClient, ClientConfig
from catalog_client.exceptions import (
    BadRequest, DuplicateIsbn, InvalidYear, NotFound, ServerError, TransportError
)


def _cli() -> CatalogClient:
    app = create_app(repo=InMemoryBookRepo())
    return CatalogClient(ClientConfig(base_url="http://testserver"), http=TestClient(app))


def test_client_round_trip_against_app():
    cli = _cli()
    b = cli.create_book(title="Foundation", author_id=11, published_year=1951, isbn="978-0553293357")
    assert b.id == 1
    assert cli.get_book(1) == b

    b2 = cli.update_book(1, title="Foundation", author_id=11, published_year=1952, isbn=b.isbn)
    assert b2.published_year == 1952

    cli.create_book(title="Dune", author_id=10, published_year=1965, isbn="978-0441172719")
    assert [x.title for x in cli.list_books(sort_by="published-year")] == ["Foundation", "Dune"]

    cli.delete_book(1)
    with pytest.raises(NotFound):
        cli.get_book(1)


def test_client_maps_validation_errors():
    cli = _cli()
    cli.create_book(title="1984", author_id=3, published_year=1949, isbn="978-0451524935")

    with pytest.raises(DuplicateIsbn) as ei:
        cli.create_book(title="Nineteen", author_id=3, published_year=1949, isbn="978-0451524935")
    assert ei.value.code == "DuplicateIsbn"
    assert str(ei.value) == "ISBN must be unique."

    with pytest.raises(InvalidYear):
        cli.create_book(title="Later", author_id=3, published_year=9999, isbn="x")

    with pytest.raises(BadRequest):
        cli.list_books(page=0)


def test_client_retries_server_errors(monkeypatch):
    monkeypatch.setattr("catalog_client.client.time.sleep", lambda _: None)
    calls = {"n": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls["n"] += 1
        if calls["n"] < 3:
            return httpx.Response(503, text="busy")
        return httpx.Response(200, json=[])

    http = httpx.Client(base_url="http://catalog", transport=httpx.MockTransport(handler))
    cli = CatalogClient(ClientConfig(base_url="http://catalog", retries=2), http=http)
    assert cli.list_books() == []
    assert calls["n"] == 3


def test_client_gives_up_after_retries(monkeypatch):
    monkeypatch.setattr("catalog_client.client.time.sleep", lambda _: None)

    def always_500(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="boom")

    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    cfg = ClientConfig(base_url="http://catalog", retries=1)
    with pytest.raises(ServerError):
        CatalogClient(cfg, http=httpx.Client(base_url=cfg.base_url, transport=httpx.MockTransport(always_500))).get_book(1)
    with pytest.raises(TransportError):
        CatalogClient(cfg, http=httpx.Client(base_url=cfg.base_url, transport=httpx.MockTransport(refuse))).get_book(1)


def test_read_timeout_replays_only_idempotent_calls(monkeypatch):
    monkeypatch.setattr("catalog_client.client.time.sleep", lambda _: None)
    calls = {"GET": 0, "POST": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        calls[request.method] += 1
        if request.method == "POST" or calls["GET"] == 1:
            raise httpx.ReadTimeout("slow", request=request)
        return httpx.Response(200, json=[])

    cfg = ClientConfig(base_url="http://catalog", retries=2)
    cli = CatalogClient(cfg, http=httpx.Client(base_url=cfg.base_url, transport=httpx.MockTransport(handler)))

    with pytest.raises(TransportError):
        cli.create_book(title="Dune", author_id=10, published_year=1965, isbn="978-0441172719")
    assert calls["POST"] == 1

    assert cli.list_books() == []
    assert calls["GET"] == 2
