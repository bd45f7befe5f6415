"""Tests for value rendering."""

import pytest
from graphql import NameNode, parse

from gql_pyfmt.core.options import FormatterOptions
from gql_pyfmt.core.values import UnsupportedValueKindError, render_value


def argument_value(source: str):
    """Parse `query { f(v: <source>) }` and return the value node."""
    document = parse(f"query {{ f(v: {source}) }}")
    return document.definitions[0].selection_set.selections[0].arguments[0].value


@pytest.fixture
def readable():
    return FormatterOptions()


@pytest.fixture
def minified():
    return FormatterOptions.minify()


class TestScalars:
    """Tests for scalar and variable values."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("$id", "$id"),
            ("42", "42"),
            ("-0.5e10", "-0.5e10"),
            ("ACTIVE", "ACTIVE"),
            ("true", "true"),
            ("false", "false"),
            ("null", "null"),
        ],
    )
    def test_raw_tokens(self, readable, source, expected):
        assert render_value(argument_value(source), readable) == expected

    def test_none_renders_null(self, readable):
        assert render_value(None, readable) == "null"


class TestStrings:
    """Tests for string values."""

    def test_plain_string(self, readable):
        assert render_value(argument_value('"hello"'), readable) == '"hello"'

    def test_quotes_are_escaped(self, readable):
        assert render_value(argument_value(r'"say \"hi\""'), readable) == r'"say \"hi\""'

    def test_block_string_is_requoted(self, readable):
        value = argument_value('"""line one\nline two"""')
        assert value.block
        assert render_value(value, readable) == '"line one\\nline two"'


class TestLists:
    """Tests for list values."""

    def test_readable(self, readable):
        assert render_value(argument_value("[1, 2, 3]"), readable) == "[ 1, 2, 3 ]"

    def test_minified(self, minified):
        assert render_value(argument_value("[1, 2, 3]"), minified) == "[1,2,3]"

    def test_empty(self, readable, minified):
        assert render_value(argument_value("[]"), readable) == "[]"
        assert render_value(argument_value("[]"), minified) == "[]"

    def test_nested(self, readable):
        value = argument_value('[[1], {a: "x"}]')
        assert render_value(value, readable) == '[ [ 1 ], { a: "x" } ]'


class TestObjects:
    """Tests for object values."""

    def test_readable(self, readable):
        value = argument_value("{id: {gte: 20}, label: $label}")
        assert render_value(value, readable) == "{ id: { gte: 20 }, label: $label }"

    def test_minified(self, minified):
        value = argument_value("{id: {gte: 20}, label: $label}")
        assert render_value(value, minified) == "{id:{gte:20} label:$label}"

    def test_empty(self, readable):
        assert render_value(argument_value("{}"), readable) == "{}"

    def test_duplicate_names_pass_through(self, readable):
        value = argument_value("{id: 1, id: 2}")
        assert render_value(value, readable) == "{ id: 1, id: 2 }"

    def test_custom_colon_separator(self):
        options = FormatterOptions(colon_separator=" : ")
        assert render_value(argument_value("{a: 1}"), options) == "{ a : 1 }"


class TestUnsupportedKinds:
    """Tests for nodes that are not values."""

    def test_raises(self, readable):
        with pytest.raises(UnsupportedValueKindError, match="NameNode"):
            render_value(NameNode(value="x"), readable)

    def test_is_a_type_error(self, readable):
        with pytest.raises(TypeError):
            render_value("not a node", readable)
