from __future__ import annotations

import json

from fastapi.testclient import TestClient

from app.main import create_app
from app.repo.demo import DEMO_BOOKS
from app.repo.memory import InMemoryBookRepo
from catalog_client import CatalogClient, ClientConfig
from scripts.load_demo_books import demo_dataset, load_dataset, push_books


def _cli(repo: InMemoryBookRepo) -> CatalogClient:
    return CatalogClient(ClientConfig(base_url="http://testserver"), http=TestClient(create_app(repo=repo)))


def test_push_demo_books_then_skip_duplicates():
    repo = InMemoryBookRepo()
    cli = _cli(repo)

    assert push_books(cli, demo_dataset()) == (len(DEMO_BOOKS), 0)
    assert push_books(cli, demo_dataset()) == (0, len(DEMO_BOOKS))
    assert len(repo.list_all()) == len(DEMO_BOOKS)


def test_load_dataset_reads_jsonl(tmp_path):
    path = tmp_path / "books.jsonl"
    rows = [
        {"title": "Snow Crash", "author_id": 20, "published_year": 1992, "isbn": "978-0553380958"},
        {"title": "Hyperion", "author_id": 21, "published_year": 1989, "isbn": "978-0553283686"},
    ]
    path.write_text("\n".join(json.dumps(r) for r in rows) + "\n\n", encoding="utf-8")

    books = load_dataset(path)
    assert [b.title for b in books] == ["Snow Crash", "Hyperion"]

    repo = InMemoryBookRepo()
    assert push_books(_cli(repo), books) == (2, 0)
