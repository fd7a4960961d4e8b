"""Document service layer for business logic and validation."""

from sqlalchemy.orm import Session

from docql.exceptions import DatabaseError, NotFoundError, ValidationError
from docql.models.document import Document
from docql.storage.repositories import DocumentRepository


class DocumentService:
    """Service layer for document CRUD operations with validation and error handling."""

    def __init__(self, session: Session):
        """
        Initialize document service with database session.

        Args:
            session: SQLAlchemy database session
        """
        self.session = session
        self.document_repo = DocumentRepository(session)

    def create_document(self, name: str, file: str | None = None) -> Document:
        """
        Create a new document and append it to the store.

        Args:
            name: Document name (required)
            file: Optional file reference, stored as opaque text

        Returns:
            Created document with its assigned ID

        Raises:
            ValidationError: If name or file is not a string
            DatabaseError: If database operation fails
        """
        self._validate_text(name, "name")
        if file is not None:
            self._validate_text(file, "file")

        try:
            document = Document(name=name, file=file or "")
            self.document_repo.create(document)
            self.session.commit()
            return document
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to create document: {str(e)}", e) from e

    def find_document(self, document_id: int) -> Document | None:
        """Get document by ID, or None if there is no such document."""
        self._validate_id(document_id)

        try:
            return self.document_repo.get_by_id(document_id)
        except Exception as e:
            raise DatabaseError(f"Failed to get document: {str(e)}", e) from e

    def get_document(self, document_id: int) -> Document:
        """
        Get document by ID.

        Raises:
            ValidationError: If document_id is not an integer
            NotFoundError: If document is not found
            DatabaseError: If database operation fails
        """
        document = self.find_document(document_id)
        if document is None:
            raise NotFoundError("Document", document_id)
        return document

    def list_documents(self) -> list[Document]:
        """List the whole store in store order."""
        try:
            return self.document_repo.list()
        except Exception as e:
            raise DatabaseError(f"Failed to list documents: {str(e)}", e) from e

    def update_document(
        self,
        document_id: int,
        name: str | None = None,
        file: str | None = None,
    ) -> Document:
        """
        Update document name and/or file. Fields left as None are untouched.

        Args:
            document_id: Document ID
            name: New name (optional)
            file: New file reference (optional)

        Returns:
            Updated document

        Raises:
            ValidationError: If an argument has the wrong type
            NotFoundError: If document is not found
            DatabaseError: If database operation fails
        """
        self._validate_id(document_id)
        if name is not None:
            self._validate_text(name, "name")
        if file is not None:
            self._validate_text(file, "file")

        try:
            document = self.document_repo.get_by_id(document_id)
            if document is None:
                raise NotFoundError("Document", document_id)

            if name is not None:
                document.name = name
            if file is not None:
                document.file = file

            self.document_repo.update(document)
            self.session.commit()
            return document

        except NotFoundError:
            raise
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to update document: {str(e)}", e) from e

    def delete_document(self, document_id: int) -> Document:
        """
        Remove a document from the store.

        Returns:
            The removed document with its prior values

        Raises:
            ValidationError: If document_id is not an integer
            NotFoundError: If document is not found
            DatabaseError: If database operation fails
        """
        self._validate_id(document_id)

        try:
            document = self.document_repo.get_by_id(document_id)
            if document is None:
                raise NotFoundError("Document", document_id)

            self.document_repo.delete(document)
            self.session.commit()
            return document

        except NotFoundError:
            raise
        except Exception as e:
            self.session.rollback()
            raise DatabaseError(f"Failed to delete document: {str(e)}", e) from e

    def _validate_id(self, document_id: int) -> None:
        """Validate document ID."""
        if isinstance(document_id, bool) or not isinstance(document_id, int):
            raise ValidationError("Document ID must be an integer", "id")

    def _validate_text(self, value: str, field: str) -> None:
        if not isinstance(value, str):
            raise ValidationError(f"{field.capitalize()} must be a string", field)
