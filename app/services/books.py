# app/services/books.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from app.domain.dtos import BookIn, BookUpdateIn
from app.domain.errors import DuplicateIsbnError, InvalidYearError
from app.domain.models import Book
from app.repo.base import BookRepo

log = logging.getLogger("catalog")


def _local_year() -> int:
    return datetime.now().year


class BookService:
    """
    Book CRUD with catalog rules.
    Rules checked before any write reaches the repo:
      - a non-empty ISBN may belong to one book only
      - published_year may not be later than the current year
    Each check-then-write runs under the repo lock so two writers cannot
    both pass the ISBN check.
    """
    def __init__(self, repo: BookRepo, current_year: Callable[[], int] | None = None):
        self.repo = repo
        self.current_year = current_year or _local_year

    def _ensure_year(self, year: int) -> None:
        now = self.current_year()
        if year > now:
            log.warning("[books] rejected published_year=%d (current year %d)", year, now)
            raise InvalidYearError(year, now)

    def _ensure_isbn_free(self, isbn: str) -> None:
        if isbn and self.repo.isbn_exists(isbn):
            log.warning("[books] rejected duplicate isbn=%s", isbn)
            raise DuplicateIsbnError(isbn)

    # ---- READ ----
    def list_all(self) -> list[Book]:
        return self.repo.list_all()

    def get_by_id(self, book_id: int) -> Book | None:
        return self.repo.get(book_id)

    # ---- CREATE ----
    def create(self, body: BookIn) -> Book:
        with self.repo.lock:
            self._ensure_isbn_free(body.isbn)
            self._ensure_year(body.published_year)
            book = self.repo.insert(body)
        log.info("[books] created id=%d isbn=%s", book.id, book.isbn)
        return book

    # ---- UPDATE ----
    def update(self, book_id: int, body: BookUpdateIn) -> Book | None:
        with self.repo.lock:
            existing = self.repo.get(book_id)
            if existing is None:
                return None

            # re-submitting the book's own isbn is not a collision
            if body.isbn != existing.isbn:
                self._ensure_isbn_free(body.isbn)
            self._ensure_year(body.published_year)

            updated = existing.model_copy(update=body.model_dump())
            self.repo.replace(updated)
        log.info("[books] updated id=%d", book_id)
        return updated

    # ---- DELETE ----
    def delete(self, book_id: int) -> bool:
        with self.repo.lock:
            removed = self.repo.delete(book_id)
        if removed:
            log.info("[books] deleted id=%d", book_id)
        return removed
