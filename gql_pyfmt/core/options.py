"""Formatter options.

Options are resolved once before a formatting pass and stay immutable for
the rest of it. The minified preset overrides every option that only makes
sense for readable output.

Example usage:
    options = FormatterOptions(indent_unit="\\t")
    options = FormatterOptions.minify()
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_INDENT_UNIT = "  "

# Values forced onto the dependent options when minified output is requested
MINIFIED_OVERRIDES: dict[str, Any] = {
    "colon_separator": ":",
    "split_multi_argument": False,
    "use_filter_layout": False,
}


class FormatterOptions(BaseModel):
    """Settings for one formatting pass."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    indent_unit: str = Field(
        default=DEFAULT_INDENT_UNIT,
        description="Text repeated once per indent level (ignored when minified)",
    )
    colon_separator: str = Field(
        default=": ",
        description="Text written between a name and its value",
    )
    split_multi_argument: bool = Field(
        default=True,
        description="Put the arguments of multi-argument lists one per line",
    )
    use_filter_layout: bool = Field(
        default=True,
        description="Lay out and/or/not trees of `where` arguments one condition per line",
    )
    minified: bool = Field(
        default=False,
        description="Drop every newline and indent and all optional whitespace",
    )

    @model_validator(mode="after")
    def _apply_minified_overrides(self) -> "FormatterOptions":
        # Runs on the converted value, so "false" or 0 never minify.
        # The model is frozen, hence object.__setattr__.
        if self.minified:
            for name, value in MINIFIED_OVERRIDES.items():
                object.__setattr__(self, name, value)
        return self

    @classmethod
    def readable(cls) -> "FormatterOptions":
        """Options with every setting at its default."""
        return cls()

    @classmethod
    def minify(cls) -> "FormatterOptions":
        """The minified preset."""
        return cls(minified=True)

    def with_indent(self, indent_unit: str) -> "FormatterOptions":
        """Return a copy of these options using another indent unit."""
        return self.model_validate({**self.model_dump(), "indent_unit": indent_unit})
