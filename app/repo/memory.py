from __future__ import annotations
from threading import RLock
from typing import Iterable

from app.domain.dtos import BookIn
from app.domain.models import Book


class InMemoryBookRepo:
    """
    List-backed book storage.
    Ids come from a counter that only moves forward: it starts at
    max(initial ids) + 1 (or starting_id when empty) and is never
    recomputed, so a deleted id is never handed out again.
    """
    def __init__(self, initial: Iterable[Book] | None = None, starting_id: int = 1):
        self.books: list[Book] = [b.model_copy() for b in (initial or [])]
        self.lock = RLock()
        if self.books:
            self._next_id = max(b.id for b in self.books) + 1
        else:
            self._next_id = starting_id

    @property
    def next_id(self) -> int:
        return self._next_id

    def _index_of(self, book_id: int) -> int | None:
        for i, b in enumerate(self.books):
            if b.id == book_id:
                return i
        return None

    # ---------- reads ----------
    def list_all(self) -> list[Book]:
        return list(self.books)

    def get(self, book_id: int) -> Book | None:
        i = self._index_of(book_id)
        return self.books[i] if i is not None else None

    def isbn_exists(self, isbn: str) -> bool:
        return any(b.isbn == isbn for b in self.books)

    # ---------- writes ----------
    def insert(self, draft: BookIn) -> Book:
        with self.lock:
            book = Book(id=self._next_id, **draft.model_dump())
            self._next_id += 1
            self.books.append(book)
            return book

    def replace(self, book: Book) -> None:
        with self.lock:
            i = self._index_of(book.id)
            if i is not None:
                self.books[i] = book

    def delete(self, book_id: int) -> bool:
        with self.lock:
            i = self._index_of(book_id)
            if i is None:
                return False
            self.books.pop(i)
            return True
