"""Storage layer for DocQL."""

from docql.storage.database import Database, get_db, init_db, reset_db, seed_documents
from docql.storage.repositories import DocumentRepository

__all__ = [
    "Database",
    "get_db",
    "init_db",
    "reset_db",
    "seed_documents",
    "DocumentRepository",
]
