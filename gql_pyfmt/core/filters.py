"""Filter argument layout.

Arguments named ``where`` whose value is a single ``and`` / ``or`` / ``not``
combinator get a one-condition-per-line layout instead of one dense inline
object:

    products(
      where: {
        and: {
          id: { gte: 20 }
          label: { eq: $label }
        }
      }
    )

Only the argument itself is gated by its name. Below it, every child named
``and``, ``or`` or ``not`` is laid out as a combinator, whatever field it
sits under. Splitting depends on child counts only, never on line length.
"""

from graphql import ArgumentNode, ListValueNode, ObjectValueNode, ValueNode

from .emitter import OutputEmitter
from .options import FormatterOptions
from .values import render_value

FILTER_ARGUMENT = "where"
COMBINATORS = ("and", "or", "not")


def child_values(value: ValueNode | None) -> list[tuple[str, ValueNode]]:
    """Return the (name, value) children of a value node.

    Object fields keep their names, list elements get an empty name and
    every other kind has no children.
    """
    if isinstance(value, ObjectValueNode):
        return [(f.name.value, f.value) for f in value.fields]
    if isinstance(value, ListValueNode):
        return [("", v) for v in value.values]
    return []


def is_split_combinator(name: str, value: ValueNode | None) -> bool:
    """Check if a combinator node is laid out over several lines.

    ``and`` / ``or`` split when they hold more than one condition. ``not``
    splits only when the single condition it wraps splits.
    """
    children = child_values(value)
    if not children:
        return False
    if name in ("and", "or"):
        return len(children) > 1
    if name == "not" and len(children) == 1:
        return is_split_combinator(*children[0])
    return False


def qualifies_for_filter_layout(argument: ArgumentNode) -> bool:
    """Check if an argument gets the filter layout."""
    if argument.name.value != FILTER_ARGUMENT:
        return False
    children = child_values(argument.value)
    return len(children) == 1 and is_split_combinator(*children[0])


class FilterArgumentPrinter:
    """Writes qualifying filter arguments through a shared emitter."""

    def __init__(self, emitter: OutputEmitter, options: FormatterOptions):
        self.emitter = emitter
        self.options = options

    def applies(self, argument: ArgumentNode) -> bool:
        """Check if the filter layout is enabled and fits this argument."""
        return self.options.use_filter_layout and qualifies_for_filter_layout(argument)

    def format_argument(self, argument: ArgumentNode):
        """Write ``where: { <combinator> }`` with the combinator split over lines."""
        out = self.emitter
        out.write_word(argument.name.value).suppress_next_padding()
        out.write_raw(self.options.colon_separator + "{").write_newline()
        out.increase_indent()
        name, value = child_values(argument.value)[0]
        self.format_combinator(name, value)
        out.decrease_indent()
        out.write_raw("}").force_padding()

    def format_combinator(self, name: str, value: ValueNode | None):
        """Write one ``name: value`` node of a filter tree, ending its line."""
        out = self.emitter
        out.write_raw(name).suppress_next_padding().write_raw(self.options.colon_separator)

        if not isinstance(value, ObjectValueNode):
            # Scalars, variables and lists stay inline
            out.write_raw(render_value(value, self.options))
            self._end_line()
            return

        fields = value.fields
        if not fields:
            out.write_raw("{}")
            self._end_line()
        elif len(fields) == 1:
            child = fields[0]
            if child.name.value in COMBINATORS:
                out.write_raw("{").write_newline()
                out.increase_indent()
                self.format_combinator(child.name.value, child.value)
                out.decrease_indent()
                out.write_raw("}")
            elif self.options.minified:
                out.write_raw("{" + self._render_condition(child.name.value, child.value) + "}")
            else:
                out.write_raw("{ " + self._render_condition(child.name.value, child.value) + " }")
            self._end_line()
        else:
            out.write_raw("{").write_newline()
            out.increase_indent()
            for child in fields:
                if child.name.value in COMBINATORS:
                    self.format_combinator(child.name.value, child.value)
                else:
                    out.write_raw(self._render_condition(child.name.value, child.value))
                    self._end_line()
            out.decrease_indent()
            out.write_raw("}")
            self._end_line()

    def _render_condition(self, name: str, value: ValueNode | None) -> str:
        return f"{name}{self.options.colon_separator}{render_value(value, self.options)}"

    def _end_line(self):
        self.emitter.write_newline().force_padding()
