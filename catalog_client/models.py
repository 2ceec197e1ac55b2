# catalog_client/models.py
from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

SortBy = Literal["title", "published-year"]

class Book(BaseModel):
    id: int
    title: str = ""
    author_id: int
    published_year: int
    isbn: str = ""

class BookIn(BaseModel):
    title: str = ""
    author_id: int
    published_year: int
    isbn: str = ""

class BookUpdateIn(BookIn):
    pass
