"""Adapters - I/O implementations of ports."""

from .click_console import ClickConsole
from .seed_catalog import SeedCatalog

__all__ = [
    "ClickConsole",
    "SeedCatalog",
]
