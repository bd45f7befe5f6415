"""Structural printer for GraphQL executable documents.

Walks a graphql-core DocumentNode depth-first and writes every construct
through a single OutputEmitter. Arguments that qualify for the filter
layout are handed to FilterArgumentPrinter.
"""

from graphql import (
    ArgumentNode,
    DirectiveNode,
    DocumentNode,
    FieldNode,
    FragmentDefinitionNode,
    FragmentSpreadNode,
    InlineFragmentNode,
    OperationDefinitionNode,
    SelectionNode,
    SelectionSetNode,
    TypeNode,
    ValueNode,
    VariableDefinitionNode,
    print_ast,
)

from .emitter import OutputEmitter
from .filters import FilterArgumentPrinter, qualifies_for_filter_layout
from .options import FormatterOptions
from .values import render_value


def _selections(selection_set: SelectionSetNode | None) -> tuple[SelectionNode, ...]:
    if selection_set is None:
        return ()
    return tuple(selection_set.selections or ())


class DocumentPrinter:
    """Writes a document through an emitter.

    Operations are written first, then fragment definitions, each group in
    source order. Nothing in the document is modified.
    """

    def __init__(self, emitter: OutputEmitter, options: FormatterOptions):
        self.out = emitter
        self.options = options
        self.filters = FilterArgumentPrinter(emitter, options)

    def format_document(self, document: DocumentNode):
        definitions = document.definitions or ()
        for definition in definitions:
            if isinstance(definition, OperationDefinitionNode):
                self.format_operation(definition)
        for definition in definitions:
            if isinstance(definition, FragmentDefinitionNode):
                self.format_fragment_definition(definition)

    def format_operation(self, operation: OperationDefinitionNode):
        self.out.write_word(operation.operation.value)
        if operation.name:
            self.out.write_word(operation.name.value)
        self.format_variable_definitions(operation.variable_definitions)
        self.format_directives(operation.directives)

        if _selections(operation.selection_set):
            self.format_selection_set(operation.selection_set)
            self.out.write_newline()

    def format_fragment_definition(self, fragment: FragmentDefinitionNode):
        self.out.write_word("fragment").write_word(fragment.name.value)
        self.format_variable_definitions(fragment.variable_definitions)
        self.out.write_word("on").write_word(fragment.type_condition.name.value)
        self.format_directives(fragment.directives)

        if _selections(fragment.selection_set):
            self.format_selection_set(fragment.selection_set)
            self.out.write_newline()

    def format_variable_definitions(self, definitions: tuple[VariableDefinitionNode, ...] | None):
        """Write ``($id: ID! = 1, $first: Int)``; nothing when empty."""
        if not definitions:
            return

        # The list hugs the name like field arguments do, and each definition
        # uses the configured colon: `query Q($id: ID!)`, not `query Q ($id:ID!)`.
        self.out.suppress_next_padding().write_raw("(")
        for idx, definition in enumerate(definitions):
            self.format_variable_definition(definition)
            if idx != len(definitions) - 1:
                if self.options.minified:
                    self.out.suppress_next_padding().write_raw(",")
                else:
                    self.out.suppress_next_padding().write_word(",")
        self.out.suppress_next_padding().write_raw(")").force_padding()

    def format_variable_definition(self, definition: VariableDefinitionNode):
        self.out.write_raw("$").write_word(definition.variable.name.value)
        self.out.suppress_next_padding().write_raw(self.options.colon_separator)
        self.format_type(definition.type)

        if definition.default_value is not None:
            self.out.force_padding().write_raw("=").force_padding()
            self.format_value(definition.default_value)
        if definition.directives:
            self.out.force_padding()
            self.format_directives(definition.directives)

    def format_directives(self, directives: tuple[DirectiveNode, ...] | None):
        for directive in directives or ():
            self.format_directive(directive)

    def format_directive(self, directive: DirectiveNode):
        self.out.write_raw("@").write_word(directive.name.value)
        self.format_arguments(directive.arguments)

    def format_arguments(self, arguments: tuple[ArgumentNode, ...] | None):
        """Write a parenthesized argument list.

        The list goes one argument per line when it holds more than one
        argument or a single argument that qualifies for the filter layout.
        """
        if not arguments:
            return

        split = self.options.split_multi_argument and (
            len(arguments) > 1 or qualifies_for_filter_layout(arguments[0])
        )

        self.out.suppress_next_padding().write_raw("(")
        if split:
            self.out.write_newline()
            self.out.increase_indent()
            for argument in arguments:
                self.format_argument(argument)
                self.out.write_newline()
            self.out.decrease_indent()
        else:
            for idx, argument in enumerate(arguments):
                self.format_argument(argument)
                if idx != len(arguments) - 1:
                    if self.options.minified:
                        self.out.suppress_next_padding().write_raw(" ")
                    else:
                        self.out.suppress_next_padding().write_word(",")
        self.out.write_raw(")").force_padding()

    def format_argument(self, argument: ArgumentNode):
        if self.filters.applies(argument):
            self.filters.format_argument(argument)
            return
        self.out.write_word(argument.name.value).suppress_next_padding()
        self.out.write_raw(self.options.colon_separator)
        self.format_value(argument.value)

    def format_selection_set(self, selection_set: SelectionSetNode | None):
        """Write ``{ ... }``; selections go one per line, or space-separated when minified."""
        selections = _selections(selection_set)
        if not selections:
            return

        self.out.write_raw("{").write_newline()
        self.out.increase_indent()

        for idx, selection in enumerate(selections):
            self.format_selection(selection)
            if not self.options.minified:
                self.out.write_newline()
            elif idx != len(selections) - 1:
                self.out.suppress_next_padding().write_raw(" ")

        self.out.decrease_indent()
        self.out.write_raw("}")

    def format_selection(self, selection: SelectionNode):
        if isinstance(selection, FieldNode):
            self.format_field(selection)
        elif isinstance(selection, FragmentSpreadNode):
            self.format_fragment_spread(selection)
        elif isinstance(selection, InlineFragmentNode):
            self.format_inline_fragment(selection)
        else:
            raise TypeError(f"Unsupported selection kind: {type(selection).__name__}")

    def format_field(self, field: FieldNode):
        name = field.name.value
        if field.alias and field.alias.value != name:
            self.out.write_word(field.alias.value).suppress_next_padding()
            self.out.write_raw(self.options.colon_separator)
        self.out.write_word(name)

        if field.arguments:
            self.out.suppress_next_padding()
            self.format_arguments(field.arguments)
            self.out.force_padding()

        self.format_directives(field.directives)
        self.format_selection_set(field.selection_set)

    def format_fragment_spread(self, spread: FragmentSpreadNode):
        self.out.write_raw("...").write_word(spread.name.value)
        self.format_directives(spread.directives)

    def format_inline_fragment(self, fragment: InlineFragmentNode):
        self.out.write_word("...")
        if fragment.type_condition:
            self.out.write_word("on").write_word(fragment.type_condition.name.value)

        self.format_directives(fragment.directives)
        self.format_selection_set(fragment.selection_set)

    def format_type(self, type_node: TypeNode):
        """Write a type reference in its canonical form (``[Name!]!``)."""
        self.out.write_raw(print_ast(type_node))

    def format_value(self, value: ValueNode | None):
        self.out.write_raw(render_value(value, self.options))
