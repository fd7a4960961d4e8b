"""Execute GraphQL requests against the document schema."""

import logging
from typing import Any

from graphql import ExecutionResult, GraphQLSchema, graphql_sync

from docql.graphql.schema import get_schema
from docql.storage.database import Database, get_db

logger = logging.getLogger(__name__)


def execute_query(
    query: str,
    schema: GraphQLSchema | None = None,
    variables: dict[str, Any] | None = None,
    operation_name: str | None = None,
    db: Database | None = None,
) -> ExecutionResult:
    """
    Run a raw GraphQL request.

    Errors are logged but never raised; the result always carries whatever
    data was resolved alongside the errors.

    Args:
        query: GraphQL request string
        schema: Schema to execute against. If None, uses the document schema.
        variables: Optional variable values
        operation_name: Operation to run when the document holds several
        db: Store the resolvers work on. If None, uses the global instance.

    Returns:
        graphql-core execution result
    """
    if schema is None:
        schema = get_schema()
    if db is None:
        db = get_db()

    result = graphql_sync(
        schema,
        query,
        context_value={"db": db},
        variable_values=variables,
        operation_name=operation_name,
    )
    if result.errors:
        logger.warning("errors: %s", [error.message for error in result.errors])
    return result


def format_result(result: ExecutionResult) -> dict[str, Any]:
    """Convert a result to its ``{"data": ..., "errors": [...]}`` JSON form."""
    return result.formatted
