"""Value rendering.

Converts a single graphql-core value node into its canonical text. Used
inline by the structural printer and per leaf by the filter layout.
"""

from graphql import (
    BooleanValueNode,
    EnumValueNode,
    FloatValueNode,
    IntValueNode,
    ListValueNode,
    NullValueNode,
    ObjectValueNode,
    StringValueNode,
    ValueNode,
    VariableNode,
)
from graphql.language.print_string import print_string

from .options import FormatterOptions


class UnsupportedValueKindError(TypeError):
    """Raised for a value node the renderer does not know.

    This means the AST producer broke the input contract; it is never
    handled by the formatter itself.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unsupported value kind: {type(value).__name__}")


def render_value(value: ValueNode | None, options: FormatterOptions) -> str:
    """Render a value node as text.

    Args:
        value: The value node (None renders as null)
        options: Formatting options (colon separator, minified)

    Returns:
        The value's source text

    Raises:
        UnsupportedValueKindError: If the node is not a known value kind
    """
    if value is None:
        return "null"
    if isinstance(value, VariableNode):
        return f"${value.name.value}"
    if isinstance(value, (IntValueNode, FloatValueNode, EnumValueNode)):
        return value.value
    if isinstance(value, BooleanValueNode):
        return "true" if value.value else "false"
    if isinstance(value, NullValueNode):
        return "null"
    if isinstance(value, StringValueNode):
        # Block strings are re-quoted as regular strings
        return print_string(value.value)
    if isinstance(value, ListValueNode):
        items = [render_value(v, options) for v in value.values]
        if not items:
            return "[]"
        if options.minified:
            return "[" + ",".join(items) + "]"
        return "[ " + ", ".join(items) + " ]"
    if isinstance(value, ObjectValueNode):
        pairs = [
            f"{f.name.value}{options.colon_separator}{render_value(f.value, options)}"
            for f in value.fields
        ]
        if not pairs:
            return "{}"
        if options.minified:
            return "{" + " ".join(pairs) + "}"
        return "{ " + ", ".join(pairs) + " }"
    raise UnsupportedValueKindError(value)
