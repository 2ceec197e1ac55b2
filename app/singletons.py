# app/singletons.py
from __future__ import annotations
import logging

from fastapi import Request

from app.config import Settings, settings
from app.repo.base import BookRepo
from app.domain.models import Book
from app.repo.demo import DEMO_BOOKS
from app.repo.memory import InMemoryBookRepo
from app.services.books import BookService

log = logging.getLogger("catalog")


def build_repo(cfg: Settings | None = None) -> InMemoryBookRepo:
    cfg = cfg or settings
    if not cfg.seed_demo_data:
        return InMemoryBookRepo(starting_id=cfg.starting_id)

    # demo books are always numbered from 1; starting_id only applies to an empty store
    demo = [Book(id=i, **draft.model_dump()) for i, draft in enumerate(DEMO_BOOKS, start=1)]
    repo = InMemoryBookRepo(initial=demo)
    log.info("[seed] loaded %d demo books (next id %d)", len(DEMO_BOOKS), repo.next_id)
    return repo


def get_repo(request: Request) -> BookRepo:
    return request.app.state.repo


def get_book_service(request: Request) -> BookService:
    return BookService(get_repo(request))
