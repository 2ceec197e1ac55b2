from __future__ import annotations

class NotFoundError(Exception):
    def __init__(self, what: str = "Resource"):
        super().__init__(what)
        self.what = what

class BadRequestError(Exception):
    code = "BadRequest"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

class DuplicateIsbnError(BadRequestError):
    code = "DuplicateIsbn"

    def __init__(self, isbn: str):
        super().__init__("ISBN must be unique.")
        self.isbn = isbn

class InvalidYearError(BadRequestError):
    code = "InvalidYear"

    def __init__(self, year: int, current_year: int):
        super().__init__("Published year cannot be in the future.")
        self.year = year
        self.current_year = current_year
