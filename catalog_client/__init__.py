# catalog_client/__init__.py
from .config import ClientConfig
from .client import CatalogClient
from . import models
from . import exceptions

__all__ = ["ClientConfig", "CatalogClient", "models", "exceptions"]
