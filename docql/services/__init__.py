"""Service layer for business logic and validation."""

from docql.services.document_service import DocumentService

__all__ = ["DocumentService"]
