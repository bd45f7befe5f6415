"""Core modules for GraphQL query formatting."""

from .emitter import OutputEmitter
from .filters import (
    COMBINATORS,
    FILTER_ARGUMENT,
    FilterArgumentPrinter,
    is_split_combinator,
    qualifies_for_filter_layout,
)
from .formatter import (
    FormatError,
    QueryFormatter,
    format_document,
    format_query,
    format_query_minified,
    parse_query,
)
from .options import FormatterOptions
from .printer import DocumentPrinter
from .values import UnsupportedValueKindError, render_value

__all__ = [
    # Options
    "FormatterOptions",
    # Emitter
    "OutputEmitter",
    # Values
    "UnsupportedValueKindError",
    "render_value",
    # Filter layout
    "COMBINATORS",
    "FILTER_ARGUMENT",
    "FilterArgumentPrinter",
    "is_split_combinator",
    "qualifies_for_filter_layout",
    # Printer
    "DocumentPrinter",
    # Formatter
    "FormatError",
    "QueryFormatter",
    "format_document",
    "format_query",
    "format_query_minified",
    "parse_query",
]
