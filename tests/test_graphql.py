"""Tests for the GraphQL schema, resolvers, and executor."""

import logging

import pytest

pytestmark = pytest.mark.unit

from docql.graphql.executor import execute_query, format_result
from docql.graphql.schema import get_schema
from docql.graphql.serializers import ZERO_DOCUMENT, serialize_model
from docql.storage.database import SEED_FILE
from docql.storage.repositories import DocumentRepository


def run(db, query: str, **kwargs) -> dict:
    return format_result(execute_query(query, db=db, **kwargs))


class TestQueries:
    """Tests for the Query type."""

    def test_list_returns_store_in_order(self, temp_db):
        result = run(temp_db, "{list{id,name,file}}")
        assert "errors" not in result
        assert result["data"]["list"] == [
            {"id": 1, "name": "Document one", "file": SEED_FILE},
            {"id": 2, "name": "Document 2", "file": SEED_FILE},
            {"id": 3, "name": "Document 3", "file": SEED_FILE},
        ]

    def test_list_empty_store(self, empty_db):
        assert run(empty_db, "{list{id}}") == {"data": {"list": []}}

    def test_document_by_id(self, temp_db):
        result = run(temp_db, "{document(id:1){name,file}}")
        assert result == {"data": {"document": {"name": "Document one", "file": SEED_FILE}}}

    def test_document_not_found(self, temp_db):
        assert run(temp_db, "{document(id:999){name}}") == {"data": {"document": None}}

    def test_document_without_id(self, temp_db):
        assert run(temp_db, "{document{name}}") == {"data": {"document": None}}

    def test_document_wrong_id_type(self, temp_db):
        result = run(temp_db, '{document(id:"one"){name}}')
        assert result["data"] is None
        assert result["errors"]

    def test_document_with_variables(self, temp_db):
        result = run(
            temp_db,
            "query Get($id: Int){document(id:$id){id,name}}",
            variables={"id": 2},
        )
        assert result["data"]["document"] == {"id": 2, "name": "Document 2"}

    def test_operation_name_selects_operation(self, temp_db):
        query = "query A{document(id:1){name}} query B{document(id:3){name}}"
        result = run(temp_db, query, operation_name="B")
        assert result["data"]["document"]["name"] == "Document 3"


class TestCreateMutation:
    """Tests for the create mutation."""

    def test_create_then_read(self, temp_db):
        result = run(temp_db, 'mutation _{create(name:"X",file:"y.pdf"){id,name,file}}')
        created = result["data"]["create"]
        assert created["name"] == "X"
        assert created["file"] == "y.pdf"

        fetched = run(temp_db, "{document(id:%d){id,name,file}}" % created["id"])
        assert fetched["data"]["document"] == created

        listed = run(temp_db, "{list{id}}")["data"]["list"]
        assert len(listed) == 4
        assert listed[-1]["id"] == created["id"]

    def test_create_without_file(self, temp_db):
        result = run(temp_db, 'mutation{create(name:"No file"){id,file}}')
        assert result["data"]["create"] == {"id": 4, "file": ""}

    def test_create_requires_name(self, temp_db):
        result = run(temp_db, 'mutation{create(file:"a.pdf"){id}}')
        assert result["data"] is None
        assert result["errors"]
        assert len(run(temp_db, "{list{id}}")["data"]["list"]) == 3

    def test_create_ids_are_unique(self, temp_db):
        ids = {
            run(temp_db, 'mutation{create(name:"n%d"){id}}' % i)["data"]["create"]["id"]
            for i in range(5)
        }
        assert ids == {4, 5, 6, 7, 8}


class TestUpdateMutation:
    """Tests for the update mutation."""

    def test_update_name_leaves_file(self, temp_db):
        result = run(temp_db, 'mutation{update(id:2,name:"new"){id,name,file}}')
        assert result["data"]["update"] == {"id": 2, "name": "new", "file": SEED_FILE}

    def test_update_both_fields(self, temp_db):
        result = run(temp_db, 'mutation{update(id:1,name:"test name",file:"test2.pdf"){name,file}}')
        assert result["data"]["update"] == {"name": "test name", "file": "test2.pdf"}

    def test_update_explicit_null_is_ignored(self, temp_db):
        result = run(temp_db, "mutation{update(id:2,name:null){name}}")
        assert result["data"]["update"]["name"] == "Document 2"

    def test_update_missing_returns_zero_document(self, temp_db, assertion_helpers):
        before = run(temp_db, "{list{id,name,file}}")
        result = run(temp_db, 'mutation{update(id:999,name:"z"){id,name,file}}')
        assertion_helpers.assert_zero_document(result["data"]["update"])
        assert run(temp_db, "{list{id,name,file}}") == before


class TestDeleteMutation:
    """Tests for the delete mutation."""

    def test_delete_returns_prior_values(self, temp_db):
        result = run(temp_db, "mutation{delete(id:3){id,name,file}}")
        assert result["data"]["delete"] == {"id": 3, "name": "Document 3", "file": SEED_FILE}
        ids = [doc["id"] for doc in run(temp_db, "{list{id}}")["data"]["list"]]
        assert ids == [1, 2]

    def test_delete_twice(self, temp_db, assertion_helpers):
        run(temp_db, "mutation{delete(id:3){id}}")
        result = run(temp_db, "mutation{delete(id:3){id,name,file}}")
        assertion_helpers.assert_zero_document(result["data"]["delete"])
        assert len(run(temp_db, "{list{id}}")["data"]["list"]) == 2

    def test_delete_requires_id(self, temp_db):
        result = run(temp_db, "mutation{delete{id}}")
        assert result["data"] is None
        assert result["errors"]


class TestErrors:
    """Tests for error reporting."""

    def test_store_failure_becomes_field_error(self, temp_db, monkeypatch):
        def fail(self, document):
            raise RuntimeError("flush failed")

        monkeypatch.setattr(DocumentRepository, "create", fail)
        result = run(temp_db, 'mutation{create(name:"X"){id}}')
        assert result["data"] == {"create": None}
        assert result["errors"][0]["path"] == ["create"]
        assert "Failed to create document" in result["errors"][0]["message"]

    def test_syntax_error(self, temp_db):
        result = run(temp_db, "{list{id")
        assert result["data"] is None
        assert len(result["errors"]) >= 1
        assert "Syntax Error" in result["errors"][0]["message"]

    def test_empty_query(self, temp_db):
        result = run(temp_db, "")
        assert result["data"] is None
        assert result["errors"]

    def test_unknown_field(self, temp_db):
        result = run(temp_db, "{documents{id}}")
        assert result["data"] is None
        assert "documents" in result["errors"][0]["message"]

    def test_errors_are_logged(self, temp_db, caplog):
        with caplog.at_level(logging.WARNING, logger="docql.graphql.executor"):
            run(temp_db, "{list{id")
        assert any("errors:" in record.getMessage() for record in caplog.records)

    def test_success_is_not_logged(self, temp_db, caplog):
        with caplog.at_level(logging.WARNING, logger="docql.graphql.executor"):
            run(temp_db, "{list{id}}")
        assert not [r for r in caplog.records if r.name == "docql.graphql.executor"]


class TestSchema:
    """Tests for the schema shape and helpers."""

    def test_schema_fields(self):
        schema = get_schema()
        assert set(schema.query_type.fields) == {"document", "list"}
        assert set(schema.mutation_type.fields) == {"create", "update", "delete"}
        assert set(schema.get_type("Document").fields) == {"id", "name", "file"}

    def test_schema_is_cached(self):
        assert get_schema() is get_schema()

    def test_serialize_model(self, document_service):
        doc = document_service.get_document(2)
        assert serialize_model(doc) == {"id": 2, "name": "Document 2", "file": SEED_FILE}

    def test_zero_document_shape(self):
        assert ZERO_DOCUMENT == {"id": 0, "name": "", "file": ""}
