"""Repository pattern implementation for data access layer."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from docql.models.document import Document


class DocumentRepository:
    """Repository for document operations."""

    def __init__(self, session: Session):
        """Initialize repository with a database session."""
        self.session = session

    def create(self, document: Document) -> Document:
        """Create a new document. The id is assigned on flush."""
        self.session.add(document)
        self.session.flush()
        return document

    def get_by_id(self, document_id: int) -> Optional[Document]:
        """Get document by ID."""
        return self.session.get(Document, document_id)

    def list(self) -> list[Document]:
        """List every document in store order."""
        stmt = select(Document).order_by(Document.id)
        return list(self.session.scalars(stmt))

    def count(self) -> int:
        """Count stored documents."""
        return self.session.scalar(select(func.count(Document.id))) or 0

    def update(self, document: Document) -> Document:
        """Flush pending changes on an existing document."""
        self.session.flush()
        return document

    def delete(self, document: Document) -> None:
        """Delete a document."""
        self.session.delete(document)
        self.session.flush()
