from __future__ import annotations
from typing import ContextManager, Protocol

from app.domain.dtos import BookIn
from app.domain.models import Book


class BookRepo(Protocol):
    """Storage capabilities the book service relies on."""

    lock: ContextManager

    def list_all(self) -> list[Book]: ...
    def get(self, book_id: int) -> Book | None: ...
    def insert(self, draft: BookIn) -> Book: ...
    def replace(self, book: Book) -> None: ...
    def delete(self, book_id: int) -> bool: ...
    def isbn_exists(self, isbn: str) -> bool: ...
