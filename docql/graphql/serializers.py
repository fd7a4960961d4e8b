"""Model serialization for GraphQL responses."""

from typing import Any

from sqlalchemy import inspect

# Returned by mutations that address a missing document; real ids start at 1
ZERO_DOCUMENT: dict[str, Any] = {"id": 0, "name": "", "file": ""}


def serialize_model(obj: Any) -> dict[str, Any]:
    """
    Serialize a SQLAlchemy model to dictionary.

    Only mapped columns are read, so the result is safe to hand to
    resolvers after the session has closed.

    Args:
        obj: SQLAlchemy model instance

    Returns:
        Dictionary representation of the model
    """
    mapper = inspect(obj).mapper
    return {attr.key: getattr(obj, attr.key) for attr in mapper.column_attrs}


def zero_document() -> dict[str, Any]:
    """Fresh copy of the zero-value document."""
    return dict(ZERO_DOCUMENT)
