"""Database models for DocQL."""

from docql.models.base import Base
from docql.models.document import Document

__all__ = ["Base", "Document"]
