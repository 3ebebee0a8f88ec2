"""A line printer that keeps track of indentation."""

from __future__ import annotations

from prototool.settings import DEFAULT_INDENT


class Printer:
    """Helps when printing proto files.

    Every call to p writes one line. Nothing is flushed anywhere; the
    accumulated output is read back with bytes().
    """

    def __init__(self, indent_string: str = ""):
        self._buffer = bytearray()
        self._indent_string = indent_string or DEFAULT_INDENT
        self._indent_count = 0

    @property
    def indent_string(self) -> str:
        return self._indent_string

    @property
    def depth(self) -> int:
        return self._indent_count

    def p(self, *args) -> None:
        """Print args concatenated on one line after the current indent, then a newline.

        A line that is only whitespace is written as a bare newline.
        """
        line = "".join(str(arg) for arg in args)
        if line.strip():
            self._buffer += (self._indent_string * self._indent_count + line).encode("utf-8")
        self._buffer += b"\n"

    def in_(self) -> None:
        """Add one indent."""
        self._indent_count += 1

    def out(self) -> None:
        """Remove one indent. Does nothing at depth zero."""
        if self._indent_count > 0:
            self._indent_count -= 1

    def bytes(self) -> bytes:
        """Return the printed bytes."""
        return bytes(self._buffer)
