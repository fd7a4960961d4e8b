"""Resolvers binding GraphQL fields to the document service."""

import logging
from typing import Any

from graphql import GraphQLResolveInfo

from docql.exceptions import NotFoundError
from docql.graphql.serializers import serialize_model, zero_document
from docql.services.document_service import DocumentService
from docql.storage.database import Database

logger = logging.getLogger(__name__)


def _db(info: GraphQLResolveInfo) -> Database:
    return info.context["db"]


# Query resolvers
def resolve_document(_root: Any, info: GraphQLResolveInfo, **args: Any) -> dict[str, Any] | None:
    """Get a single document, or null when the id is missing or unknown."""
    document_id = args.get("id")
    if document_id is None:
        return None
    with _db(info).session() as session:
        document = DocumentService(session).find_document(document_id)
        return serialize_model(document) if document is not None else None


def resolve_list(_root: Any, info: GraphQLResolveInfo) -> list[dict[str, Any]]:
    """Get every document in store order."""
    with _db(info).session() as session:
        return [serialize_model(doc) for doc in DocumentService(session).list_documents()]


# Mutation resolvers
def resolve_create(_root: Any, info: GraphQLResolveInfo, **args: Any) -> dict[str, Any]:
    with _db(info).session() as session:
        document = DocumentService(session).create_document(
            name=args["name"],
            file=args.get("file"),
        )
        logger.info("Created document %d", document.id)
        return serialize_model(document)


def resolve_update(_root: Any, info: GraphQLResolveInfo, **args: Any) -> dict[str, Any]:
    """Partial update; a miss yields the zero-value document."""
    with _db(info).session() as session:
        try:
            document = DocumentService(session).update_document(
                args["id"],
                name=args.get("name"),
                file=args.get("file"),
            )
        except NotFoundError as e:
            logger.debug(str(e))
            return zero_document()
        return serialize_model(document)


def resolve_delete(_root: Any, info: GraphQLResolveInfo, **args: Any) -> dict[str, Any]:
    """Remove a document; a miss yields the zero-value document."""
    with _db(info).session() as session:
        try:
            document = DocumentService(session).delete_document(args["id"])
        except NotFoundError as e:
            logger.debug(str(e))
            return zero_document()
        logger.info("Deleted document %d", document.id)
        return serialize_model(document)
