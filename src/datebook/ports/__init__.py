"""Ports - interfaces/protocols for external dependencies."""

from .console import Console
from .catalog_repo import CatalogRepository

__all__ = [
    "Console",
    "CatalogRepository",
]
