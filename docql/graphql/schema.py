"""GraphQL schema for the document store.

    type Document { id: Int, name: String, file: String }

    type Query {
      document(id: Int): Document
      list: [Document]
    }

    type Mutation {
      create(name: String!, file: String): Document
      update(id: Int!, name: String, file: String): Document
      delete(id: Int!): Document
    }
"""

from functools import lru_cache

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
)

from docql.graphql.resolvers import (
    resolve_create,
    resolve_delete,
    resolve_document,
    resolve_list,
    resolve_update,
)

document_type = GraphQLObjectType(
    "Document",
    {
        "id": GraphQLField(GraphQLInt),
        "name": GraphQLField(GraphQLString),
        "file": GraphQLField(GraphQLString),
    },
)

query_type = GraphQLObjectType(
    "Query",
    {
        # /document?query={document(id:1){name,file}}
        "document": GraphQLField(
            document_type,
            args={"id": GraphQLArgument(GraphQLInt)},
            resolve=resolve_document,
            description="Get document by id",
        ),
        # /document?query={list{id,name,file}}
        "list": GraphQLField(
            GraphQLList(document_type),
            resolve=resolve_list,
            description="Get document list",
        ),
    },
)

mutation_type = GraphQLObjectType(
    "Mutation",
    {
        # /document?query=mutation+_{create(name:"Test File",file:"test.pdf"){id,name,file}}
        "create": GraphQLField(
            document_type,
            args={
                "name": GraphQLArgument(GraphQLNonNull(GraphQLString)),
                "file": GraphQLArgument(GraphQLString),
            },
            resolve=resolve_create,
            description="Create new document",
        ),
        # /document?query=mutation+_{update(id:1,name:"test name",file:"test2.pdf"){id,name,file}}
        "update": GraphQLField(
            document_type,
            args={
                "id": GraphQLArgument(GraphQLNonNull(GraphQLInt)),
                "name": GraphQLArgument(GraphQLString),
                "file": GraphQLArgument(GraphQLString),
            },
            resolve=resolve_update,
            description="Update document by id",
        ),
        # /document?query=mutation+_{delete(id:1){id,name,file}}
        "delete": GraphQLField(
            document_type,
            args={"id": GraphQLArgument(GraphQLNonNull(GraphQLInt))},
            resolve=resolve_delete,
            description="Delete document by id",
        ),
    },
)


@lru_cache()
def get_schema() -> GraphQLSchema:
    """Get the compiled schema (built once)."""
    return GraphQLSchema(query=query_type, mutation=mutation_type)
