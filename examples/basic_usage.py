"""Basic usage example: run GraphQL requests against a private in-memory store."""

import json

from docql.graphql.executor import execute_query, format_result
from docql.logging_setup import setup_logging
from docql.storage.database import Database, init_db


def main():
    """Demonstrate the document queries and mutations."""
    setup_logging()

    # Fresh store with the three sample documents
    db = init_db(Database("sqlite://"), seed=True)

    requests = [
        "{list{id,name,file}}",
        "{document(id:1){name,file}}",
        'mutation _{create(name:"Test File",file:"test.pdf"){id,name,file}}',
        'mutation _{update(id:2,name:"Renamed"){id,name,file}}',
        "mutation _{delete(id:3){id,name}}",
        "mutation _{delete(id:3){id,name}}",
        "{list{id,name}}",
    ]

    for query in requests:
        result = execute_query(query, db=db)
        print(query)
        print(json.dumps(format_result(result), indent=2))

    db.dispose()


if __name__ == "__main__":
    main()
