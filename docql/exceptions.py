"""Custom exceptions for document store operations."""


class DocQLError(Exception):
    """Base exception for DocQL errors."""

    pass


class ValidationError(DocQLError):
    """Raised when input validation fails."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class NotFoundError(DocQLError):
    """Raised when a document is not found."""

    def __init__(self, resource_type: str, resource_id: int):
        message = f"{resource_type} with ID '{resource_id}' not found"
        super().__init__(message)
        self.resource_type = resource_type
        self.resource_id = resource_id


class DatabaseError(DocQLError):
    """Raised when a store operation fails."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.original_error = original_error
