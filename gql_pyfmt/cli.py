"""Command-line interface for gql-pyfmt."""

import logging
import sys
from pathlib import Path

import click

from .core.formatter import FormatError, format_query
from .core.options import FormatterOptions

logger = logging.getLogger(__name__)


def build_options(minify: bool, indent: str | None, tabs: bool) -> FormatterOptions:
    """Resolve command-line flags into formatter options."""
    settings = {"minified": minify}
    if tabs:
        settings["indent_unit"] = "\t"
    elif indent is not None:
        settings["indent_unit"] = indent
    return FormatterOptions(**settings)


@click.group()
@click.version_option(package_name="gql-pyfmt")
def main():
    """Formatter for GraphQL queries.

    Rewrite queries, mutations, subscriptions and fragments in a canonical
    readable or minified layout.
    """
    pass


@main.command("format")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--minify",
    "-m",
    is_flag=True,
    help="Write minified output (no newlines or indentation).",
)
@click.option(
    "--indent",
    "-i",
    default=None,
    help="Text used for one indent level (default: two spaces).",
)
@click.option(
    "--tabs",
    is_flag=True,
    help="Indent with one tab per level.",
)
@click.option(
    "--write",
    "-w",
    is_flag=True,
    help="Rewrite files in place instead of printing them.",
)
@click.option(
    "--check",
    is_flag=True,
    help="Only report files whose formatting would change.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def format_command(
    files: tuple[Path, ...],
    minify: bool,
    indent: str | None,
    tabs: bool,
    write: bool,
    check: bool,
    verbose: bool,
):
    """Format GraphQL query files, or stdin when no file is given.

    Examples:

        gql-pyfmt format query.graphql

        echo 'query{user(id:1){name}}' | gql-pyfmt format --minify

        gql-pyfmt format --check queries/*.graphql
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if write and not files:
        raise click.UsageError("--write needs at least one file.")

    options = build_options(minify, indent, tabs)
    sources = list(files) or [None]

    failed = False
    for path in sources:
        name = str(path) if path is not None else "<stdin>"
        logger.debug("Formatting %s", name)
        try:
            if path is None:
                source = click.get_text_stream("stdin").read()
            else:
                source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            click.echo(f"{name}: cannot read file: {e}", err=True)
            failed = True
            continue

        try:
            formatted = format_query(source, options)
        except FormatError as e:
            click.echo(f"{name}: {e.message}", err=True)
            failed = True
            continue

        if check:
            if formatted != source:
                click.echo(f"Would reformat {name}")
                failed = True
        elif write:
            if formatted != source:
                path.write_text(formatted, encoding="utf-8")
                click.echo(f"Reformatted {name}")
        else:
            # Minified output has no trailing newline of its own
            click.echo(formatted, nl=not formatted.endswith("\n"))

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
