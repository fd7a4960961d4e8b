"""DocQL: an in-memory document store served over GraphQL."""

__version__ = "0.1.0"
