"""HTTP API for DocQL: a single GraphQL endpoint driven by URL parameters."""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Query
from fastapi.responses import JSONResponse
from graphql import ExecutionResult, GraphQLError

from docql import __version__
from docql.config import get_settings
from docql.graphql.executor import execute_query, format_result
from docql.logging_setup import setup_logging
from docql.storage.database import get_db, init_db

logger = logging.getLogger(__name__)

# The endpoint answers any verb the same way
DOCUMENT_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and load the store before serving."""
    settings = get_settings()
    setup_logging(settings)
    init_db(get_db(), seed=settings.seed_documents)
    logger.info("Server is running on port %d", settings.port)
    yield


# Create FastAPI app
app = FastAPI(
    title="DocQL",
    description="In-memory document store with a GraphQL interface",
    version=__version__,
    lifespan=lifespan,
)


def _parse_variables(raw: str | None) -> dict[str, Any] | None:
    """Decode the ``variables`` URL parameter into a JSON object."""
    if not raw:
        return None
    try:
        variables = json.loads(raw)
    except json.JSONDecodeError as e:
        raise GraphQLError(f"Variables are invalid JSON: {e.msg}.") from e
    if variables is None:
        return None
    if not isinstance(variables, dict):
        raise GraphQLError("Variables must be provided as a JSON object.")
    return variables


@app.api_route("/document", methods=DOCUMENT_METHODS)
def document_endpoint(
    query: str = "",
    variables: str | None = None,
    operation_name: str | None = Query(None, alias="operationName"),
) -> JSONResponse:
    """Execute the GraphQL request carried in the URL.

    Always answers 200; GraphQL failures are reported in the ``errors`` array.
    """
    try:
        variable_values = _parse_variables(variables)
    except GraphQLError as e:
        logger.warning("errors: %s", [e.message])
        return JSONResponse(content=format_result(ExecutionResult(data=None, errors=[e])))

    result = execute_query(query, variables=variable_values, operation_name=operation_name)
    return JSONResponse(content=format_result(result))


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "docql"}


def main() -> None:
    """Run the HTTP server with uvicorn."""
    import uvicorn

    settings = get_settings()
    setup_logging(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
