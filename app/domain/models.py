from __future__ import annotations
from pydantic import BaseModel


class Book(BaseModel):
    id: int
    title: str = ""
    author_id: int
    published_year: int
    isbn: str = ""
