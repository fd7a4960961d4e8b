"""GraphQL module with schema, resolvers, executor, and serializers."""

from docql.graphql.executor import execute_query, format_result
from docql.graphql.schema import get_schema
from docql.graphql.serializers import ZERO_DOCUMENT, serialize_model

__all__ = [
    "execute_query",
    "format_result",
    "get_schema",
    "ZERO_DOCUMENT",
    "serialize_model",
]
