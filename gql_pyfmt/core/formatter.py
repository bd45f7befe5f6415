"""Query formatter entry points.

QueryFormatter formats an already-parsed graphql-core document. The
format_query helpers wrap it for source text: they parse the input, format
it, then check that the result parses again and encodes as UTF-8.

Example usage:
    from gql_pyfmt.core import format_query, format_query_minified

    print(format_query("query{products(where:{and:{id:{gte:20} label:{eq:$label}}}){id name}}"))
    print(format_query_minified("query { user(id: 1) { name } }"))
"""

import logging

from graphql import DocumentNode, ExecutableDefinitionNode, GraphQLSyntaxError, parse

from .emitter import OutputEmitter
from .options import FormatterOptions
from .printer import DocumentPrinter

logger = logging.getLogger(__name__)


class FormatError(Exception):
    """Exception raised when source text cannot be formatted."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class QueryFormatter:
    """Formats GraphQL documents with a fixed set of options.

    Each call to format() owns a fresh emitter, so one formatter can be
    shared between callers.
    """

    def __init__(self, options: FormatterOptions | None = None):
        self.options = options if options is not None else FormatterOptions()

    def format(self, document: DocumentNode | None) -> str:
        """Format a parsed document.

        Args:
            document: A graphql-core document (None formats as empty text)

        Returns:
            The formatted text
        """
        if document is None:
            return ""

        emitter = OutputEmitter(
            indent_unit=self.options.indent_unit,
            compact=self.options.minified,
        )
        DocumentPrinter(emitter, self.options).format_document(document)
        logger.debug(
            "Formatted %d definition(s) (minified=%s)",
            len(document.definitions or ()),
            self.options.minified,
        )
        return emitter.getvalue()


def format_document(document: DocumentNode | None, options: FormatterOptions | None = None) -> str:
    """Format a parsed document with the given options."""
    return QueryFormatter(options).format(document)


def parse_query(source: str) -> DocumentNode:
    """Parse source text into an executable document.

    Raises:
        FormatError: If the text is not valid GraphQL or holds
            type system definitions
    """
    try:
        document = parse(source)
    except GraphQLSyntaxError as e:
        raise FormatError(f"Invalid query: {e.message}", e) from e

    for definition in document.definitions:
        if not isinstance(definition, ExecutableDefinitionNode):
            raise FormatError(f"Unexpected {definition.kind}: only operations and fragments can be formatted")
    return document


def format_query(source: str, options: FormatterOptions | None = None) -> str:
    """Format GraphQL source text.

    Args:
        source: Query text holding operations and fragments
        options: Formatting options (readable defaults when omitted)

    Returns:
        The formatted text, or "" for empty input

    Raises:
        FormatError: If the input does not parse, or the output would not
            parse again or encode as UTF-8
    """
    if source == "":
        return ""

    document = parse_query(source)
    result = format_document(document, options)

    try:
        parse(result)
    except GraphQLSyntaxError as e:
        logger.warning("Formatted output does not parse: %s", e.message)
        raise FormatError(f"Formatted output is not valid GraphQL: {e.message}", e) from e

    try:
        result.encode("utf-8")
    except UnicodeEncodeError as e:
        raise FormatError("Formatted output is not valid UTF-8", e) from e

    return result


def format_query_minified(source: str) -> str:
    """Format GraphQL source text with the minified preset."""
    return format_query(source, FormatterOptions.minify())
