"""Output emitter for formatted text.

A small state machine that turns word and raw-string writes into correctly
spaced and indented text. It knows nothing about GraphQL.
"""

import io


class OutputEmitter:
    """Writes words and punctuation into an in-memory buffer.

    State:
        indent: current indent depth
        line_head: True at the start of the stream and right after a newline
        pad_next: True if the next write should be preceded by a space

    In compact mode no newline or indentation is ever written.
    """

    def __init__(self, indent_unit: str = "  ", compact: bool = False):
        self.indent_unit = indent_unit
        self.compact = compact
        self.indent = 0
        self.line_head = True
        self.pad_next = False
        self._buffer = io.StringIO()

    def getvalue(self) -> str:
        """Return everything written so far."""
        return self._buffer.getvalue()

    def _write_indent(self):
        if self.line_head and not self.compact:
            self._buffer.write(self.indent_unit * self.indent)
        self.line_head = False
        self.pad_next = False

    def write_word(self, text: str) -> "OutputEmitter":
        """Write a whitespace-trimmed word; the next write gets padded."""
        if self.line_head:
            self._write_indent()
        if self.pad_next:
            self._buffer.write(" ")
        self._buffer.write(text.strip())
        self.pad_next = True
        return self

    def write_raw(self, text: str) -> "OutputEmitter":
        """Write text as is; padding before it only applies in readable mode."""
        if self.line_head:
            self._write_indent()
        if self.pad_next and not self.compact:
            self._buffer.write(" ")
        self._buffer.write(text)
        self.pad_next = False
        return self

    def write_newline(self) -> "OutputEmitter":
        """End the line; compact mode only resets the padding and line-head flags."""
        if not self.compact:
            self._buffer.write("\n")
        self.line_head = True
        self.pad_next = False
        return self

    def increase_indent(self) -> "OutputEmitter":
        """Indent the following lines one more level."""
        self.indent += 1
        return self

    def decrease_indent(self) -> "OutputEmitter":
        """Indent the following lines one level less, never below zero."""
        if self.indent > 0:
            self.indent -= 1
        return self

    def suppress_next_padding(self) -> "OutputEmitter":
        """Write the next word or raw text without a leading space."""
        self.pad_next = False
        return self

    def force_padding(self) -> "OutputEmitter":
        """Write a space before the next word or raw text."""
        self.pad_next = True
        return self
