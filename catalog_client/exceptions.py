# catalog_client/exceptions.py
from __future__ import annotations


class CatalogError(Exception):
    """Base for every error raised by the SDK."""


class NotFound(CatalogError):
    pass


class BadRequest(CatalogError):
    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.code = code


class DuplicateIsbn(BadRequest):
    pass


class InvalidYear(BadRequest):
    pass


class TransportError(CatalogError):
    pass


class ServerError(CatalogError):
    pass
