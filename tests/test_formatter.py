"""Tests for the formatter entry points."""

import re

import pytest
from graphql import parse, print_ast

from gql_pyfmt.core.formatter import (
    FormatError,
    QueryFormatter,
    format_query,
    format_query_minified,
    parse_query,
)
from gql_pyfmt.core.options import FormatterOptions

QUERIES = [
    "query{products(where:{and:{id:{gte:20} label:{eq:$label}}}){id name price}}",
    "query Q($id: ID!, $tags: [String!] = [\"x\"]) { user(id: $id) @include(if: true) { ...F } }"
    " fragment F on User { id name }",
    "mutation { add(input: {name: \"a\", meta: {k: [1, 2]}}, dry: false) { ok } }",
    "subscription S { events(where: {not: {or: {a: {eq: 1}, b: {in: [1, 2]}}}}) { id } }",
    "{ a: b, c(x: ENUM) { ... on T { d } ... @skip(if: $s) { e } } }",
    'query { search(text: "say \\"hi\\"", f: 1.5e3, n: null) }',
]


def tokens(text: str) -> str:
    """Drop whitespace and commas, both insignificant in GraphQL."""
    return re.sub(r"[\s,]+", "", text)


class TestFormatQuery:
    """Tests for format_query and format_query_minified."""

    def test_readable(self):
        result = format_query("query{user(id:1){name}}")
        assert result == "query {\n  user(id: 1) {\n    name\n  }\n}\n"

    def test_minified(self):
        result = format_query_minified("query {\n  user(id: 1) {\n    name\n  }\n}\n")
        assert result == "query{user(id:1){name}}"

    def test_custom_options(self):
        result = format_query("query{a{b}}", FormatterOptions(indent_unit="\t"))
        assert result == "query {\n\ta {\n\t\tb\n\t}\n}\n"

    def test_block_string_becomes_regular_string(self):
        result = format_query('query { a(t: """one\ntwo""") }')
        assert result == 'query {\n  a(t: "one\\ntwo")\n}\n'

    def test_empty_input(self):
        assert format_query("") == ""
        assert format_query_minified("") == ""

    def test_syntax_error(self):
        with pytest.raises(FormatError, match="Invalid query") as exc_info:
            format_query("query { a ")
        assert exc_info.value.cause is not None

    def test_type_system_definitions_are_rejected(self):
        with pytest.raises(FormatError, match="only operations and fragments"):
            format_query("type User { id: ID! }")

    def test_parse_query_returns_document(self):
        document = parse_query("query { a }")
        assert len(document.definitions) == 1


class TestQueryFormatter:
    """Tests for QueryFormatter."""

    def test_default_options(self):
        assert QueryFormatter().options == FormatterOptions()

    def test_formatter_is_reusable(self):
        formatter = QueryFormatter()
        first = formatter.format(parse("query{a}"))
        second = formatter.format(parse("query{b}"))
        assert first == "query {\n  a\n}\n"
        assert second == "query {\n  b\n}\n"


class TestProperties:
    """Properties that hold for any valid input."""

    @pytest.mark.parametrize("source", QUERIES)
    def test_idempotent_readable(self, source):
        once = format_query(source)
        assert format_query(once) == once

    @pytest.mark.parametrize("source", QUERIES)
    def test_idempotent_minified(self, source):
        once = format_query_minified(source)
        assert format_query_minified(once) == once

    @pytest.mark.parametrize("source", QUERIES)
    def test_round_trip_keeps_structure(self, source):
        expected = print_ast(parse(source, no_location=True))
        for result in (format_query(source), format_query_minified(source)):
            assert print_ast(parse(result, no_location=True)) == expected

    @pytest.mark.parametrize("source", QUERIES)
    def test_minified_and_readable_share_tokens(self, source):
        assert tokens(format_query(source)) == tokens(format_query_minified(source))

    @pytest.mark.parametrize("source", QUERIES)
    def test_minified_has_no_newlines(self, source):
        assert "\n" not in format_query_minified(source)
