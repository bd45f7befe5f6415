#!/usr/bin/env python3
"""Demonstration of the query formatter.

This script shows how to:
1. Format a compact query into the readable layout
2. Minify it again
3. Format an already-parsed document with custom options
"""

from graphql import parse

from gql_pyfmt.core import (
    FormatterOptions,
    QueryFormatter,
    format_query,
    format_query_minified,
)

QUERY = "query{products(where:{and:{id:{gte:20} label:{eq:$label}}}){id name price}}"


def main():
    print("=== Query Formatter Demo ===\n")

    print("1. Readable layout:")
    readable = format_query(QUERY)
    print(readable)

    print("2. Minified layout:")
    print(format_query_minified(readable))
    print()

    print("3. Parsed document, tab indent, filter layout off:")
    formatter = QueryFormatter(FormatterOptions(indent_unit="\t", use_filter_layout=False))
    print(formatter.format(parse(QUERY)))


if __name__ == "__main__":
    main()
