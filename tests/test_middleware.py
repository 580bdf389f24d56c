"""Tests for request logging helpers."""

import pytest

from graphmongo.logging import (
    RequestContextFilter,
    clear_request_context,
    generate_request_id,
    get_request_id,
    set_request_context,
)
from graphmongo.middleware import graphql_operation_name, sanitize_query_params


class TestSanitizeQueryParams:
    def test_redacts_sensitive_keys(self):
        sanitized = sanitize_query_params(
            {"access_token": "abc", "X-Api-Key": "def", "limit": "10"}
        )
        assert sanitized == {"access_token": "[REDACTED]", "X-Api-Key": "[REDACTED]", "limit": "10"}

    def test_leaves_plain_params(self):
        assert sanitize_query_params({"page": "2"}) == {"page": "2"}


class TestGraphqlOperationName:
    def test_explicit_operation_name(self):
        assert graphql_operation_name({"operationName": "ListUsers", "query": "..."}) == "ListUsers"

    def test_named_query(self):
        assert graphql_operation_name({"query": "query ListUsers { users { id } }"}) == "ListUsers"

    def test_named_mutation(self):
        payload = {"query": "mutation AddUser { createUser(name: \"a\", email: \"b\") { id } }"}
        assert graphql_operation_name(payload) == "mutation:AddUser"

    def test_introspection(self):
        payload = {"query": "{ __schema { types { name } } }"}
        assert graphql_operation_name(payload) == "__introspection"

    @pytest.mark.parametrize("payload", [{}, {"query": ""}, {"query": 42}])
    def test_missing_query(self, payload):
        assert graphql_operation_name(payload) is None

    def test_anonymous_query(self):
        assert graphql_operation_name({"query": "{ users { id } }"}) == "unnamed_operation"


class TestRequestContext:
    def test_generated_request_ids_are_unique(self):
        ids = {generate_request_id() for _ in range(50)}
        assert len(ids) == 50
        assert all(len(request_id) == 14 for request_id in ids)

    def test_context_filter(self):
        set_request_context("req-1")
        try:
            event = RequestContextFilter()(None, "info", {"event": "hello"})
            assert event["request_id"] == "req-1"
            assert get_request_id() == "req-1"
        finally:
            clear_request_context()

        assert get_request_id() is None
        assert "request_id" not in RequestContextFilter()(None, "info", {"event": "hello"})
