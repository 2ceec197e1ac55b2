# catalog_client/client.py
from __future__ import annotations
from typing import Any
import time
import httpx

from .config import ClientConfig
from .exceptions import (
    BadRequest, DuplicateIsbn, InvalidYear, NotFound, ServerError, TransportError
)
from . import models as M

# a read timeout may hit after the server committed the write; only replay these
_IDEMPOTENT = frozenset({"GET", "PUT", "DELETE"})

_BAD_REQUEST_CODES: dict[str, type[BadRequest]] = {
    "DuplicateIsbn": DuplicateIsbn,
    "InvalidYear": InvalidYear,
}


def _bad_request(resp: httpx.Response) -> BadRequest:
    try:
        body = resp.json()
    except ValueError:
        return BadRequest(resp.text)
    if not isinstance(body, dict):
        return BadRequest(resp.text)
    code = body.get("error")
    detail = body.get("detail")
    message = detail if isinstance(detail, str) else resp.text
    return _BAD_REQUEST_CODES.get(code, BadRequest)(message, code=code)


class CatalogClient:
    def __init__(self, config: ClientConfig, http: httpx.Client | None = None):
        self.cfg = config
        self._client = http or httpx.Client(base_url=config.base_url, timeout=config.timeout_s)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ------------ low-level helpers ------------
    def _request(self, method: str, url: str, json: Any | None = None,
                 params: dict[str, Any] | None = None) -> httpx.Response:
        tries = max(1, self.cfg.retries + 1)
        last_exc: Exception | None = None
        for attempt in range(tries):
            try:
                resp = self._client.request(method, url, json=json, params=params)
                # Map common HTTP errors
                if resp.status_code >= 500:
                    raise ServerError(f"HTTP {resp.status_code}: {resp.text}")
                if resp.status_code == 404:
                    raise NotFound(resp.text)
                if resp.status_code in (400, 422):
                    raise _bad_request(resp)
                resp.raise_for_status()
                return resp
            except (httpx.ConnectError, httpx.ReadTimeout, httpx.RemoteProtocolError) as e:
                last_exc = e
                replayable = isinstance(e, httpx.ConnectError) or method.upper() in _IDEMPOTENT
                if replayable and attempt < tries - 1:
                    time.sleep(0.25 * (2 ** attempt))
                    continue
                raise TransportError(str(e)) from e
            except ServerError as e:
                last_exc = e
                if attempt < tries - 1:
                    time.sleep(0.5 * (2 ** attempt))
                    continue
                raise
        assert False, f"unreachable: {last_exc}"

    # ------------ Books ------------
    def list_books(self, *, sort_by: str = "title", page: int = 1,
                   page_size: int | None = None) -> list[M.Book]:
        params: dict[str, Any] = {"sort_by": sort_by, "page": page}
        if page_size is not None:
            params["page_size"] = page_size
        r = self._request("GET", "/v1/books", params=params)
        return [M.Book(**x) for x in r.json()]

    def get_book(self, book_id: int) -> M.Book:
        r = self._request("GET", f"/v1/books/{book_id}")
        return M.Book(**r.json())

    def create_book(self, *, title: str, author_id: int, published_year: int, isbn: str = "") -> M.Book:
        body = M.BookIn(title=title, author_id=author_id, published_year=published_year, isbn=isbn)
        r = self._request("POST", "/v1/books", json=body.model_dump())
        return M.Book(**r.json())

    def update_book(self, book_id: int, *, title: str, author_id: int, published_year: int,
                    isbn: str = "") -> M.Book:
        body = M.BookUpdateIn(title=title, author_id=author_id, published_year=published_year, isbn=isbn)
        r = self._request("PUT", f"/v1/books/{book_id}", json=body.model_dump())
        return M.Book(**r.json())

    def delete_book(self, book_id: int) -> None:
        self._request("DELETE", f"/v1/books/{book_id}")
