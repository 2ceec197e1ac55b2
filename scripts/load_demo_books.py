#!/usr/bin/env python
"""Bulk load books into the catalog via the SDK.

Usage:
    python scripts/load_demo_books.py \
        --base-url http://localhost:8000 \
        --data-file data/books.jsonl

Each JSONL row holds title, author_id, published_year and isbn. Without
--data-file the built-in demo catalog is loaded. Books whose ISBN is
already in the catalog are skipped.
"""
from __future__ import annotations

import argparse
import json
from pathlib import Path

from catalog_client import CatalogClient, ClientConfig, models as M
from catalog_client.exceptions import CatalogError, DuplicateIsbn, InvalidYear


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Bulk load books into the library catalog."
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000",
        help="Catalog API base URL (default: %(default)s)",
    )
    parser.add_argument(
        "--data-file",
        default=None,
        help="Path to a JSONL file of books (default: built-in demo catalog)",
    )
    return parser.parse_args(argv)


def load_dataset(path: Path) -> list[M.BookIn]:
    if not path.exists():
        raise FileNotFoundError(f"Data file not found: {path}")

    rows: list[M.BookIn] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            rows.append(M.BookIn(**json.loads(line)))
    return rows


def demo_dataset() -> list[M.BookIn]:
    from app.repo.demo import DEMO_BOOKS

    return [M.BookIn(**b.model_dump()) for b in DEMO_BOOKS]


def push_books(cli: CatalogClient, books: list[M.BookIn]) -> tuple[int, int]:
    """Create each book; return (created, skipped)."""
    created = skipped = 0
    for b in books:
        try:
            cli.create_book(**b.model_dump())
            created += 1
        except DuplicateIsbn:
            print(f"[skip] ISBN already present: {b.isbn} ({b.title})")
            skipped += 1
        except InvalidYear:
            print(f"[skip] published_year in the future: {b.published_year} ({b.title})")
            skipped += 1
    return created, skipped


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    books = load_dataset(Path(args.data_file)) if args.data_file else demo_dataset()
    if not books:
        raise RuntimeError("No books to load")

    cli = CatalogClient(ClientConfig(base_url=args.base_url))
    try:
        created, skipped = push_books(cli, books)
    except CatalogError as exc:
        raise SystemExit(f"Failed to load books: {exc}") from exc
    finally:
        cli.close()

    print(f"[info] Loaded {created} books, skipped {skipped}")


if __name__ == "__main__":
    main()
