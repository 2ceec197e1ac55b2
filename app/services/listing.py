from __future__ import annotations
from typing import Callable, Sequence, TypeVar

from app.domain.dtos import SortKey
from app.domain.models import Book

T = TypeVar("T")

_SORT_KEYS: dict[str, Callable[[Book], object]] = {
    "title": lambda b: b.title.casefold(),
    "publishedyear": lambda b: b.published_year,
}

def normalize_sort_key(raw: str | None) -> SortKey | None:
    """'Published-Year', 'published_year' and 'publishedyear' all map to 'publishedyear'."""
    if not raw:
        return None
    key = raw.strip().lower().replace("-", "").replace("_", "")
    return key if key in _SORT_KEYS else None  # type: ignore[return-value]

def sort_books(books: Sequence[Book], sort_by: str | None) -> list[Book]:
    # unknown keys keep the store order
    key = normalize_sort_key(sort_by)
    if key is None:
        return list(books)
    return sorted(books, key=_SORT_KEYS[key])

def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    start = (page - 1) * page_size
    if start < 0 or page_size < 1:
        return []
    return list(items[start:start + page_size])
