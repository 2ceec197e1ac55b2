from pydantic import BaseModel
from typing import Literal

SortKey = Literal["title", "publishedyear"]

class BookIn(BaseModel):
    title: str = ""
    author_id: int
    published_year: int
    isbn: str = ""

class BookUpdateIn(BaseModel):
    # full overwrite of the mutable fields; id always comes from the path
    title: str = ""
    author_id: int
    published_year: int
    isbn: str = ""
