"""Shared printing routines for the formatter visitors.

Comments are always re-emitted in line style (//), including comments that
were written in C style (/* ... */) in the source.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from prototool.format.printer import Printer
from prototool.parser.proto_ast import Comment, Field, Option, Position
from prototool.settings import FormatConfig
from prototool.text.failure import Failure

logger = logging.getLogger(__name__)


class BaseVisitor(Printer):
    """Printer with helpers for comments, options and fields.

    Problems found while printing are collected in failures and never stop
    the output.
    """

    def __init__(self, indent_string: str = ""):
        super().__init__(indent_string)
        self.failures: List[Failure] = []

    @classmethod
    def from_config(cls, config: FormatConfig) -> BaseVisitor:
        return cls(config.indent)

    def add_failure(self, position: Position, format: str, *args) -> None:
        self.failures.append(
            Failure(
                filename=position.filename,
                line=position.line,
                column=position.column,
                message=format % args,
            )
        )

    def p_with_inline_comment(self, inline_comment: Optional[Comment], *args) -> None:
        """Print args as one line followed by the inline comment, if any."""
        if inline_comment is None or not inline_comment.lines:
            self.p(*args)
            return
        self.p(*args, " //", clean_comment_line(inline_comment.lines[0]))
        for line in inline_comment.lines[1:]:
            self.p("//", clean_comment_line(line))

    def p_comment(self, comment: Optional[Comment]) -> None:
        """Print a leading comment, one // line per comment line."""
        if comment is None or not comment.lines:
            return
        last = len(comment.lines) - 1
        for i, line in enumerate(comment.lines):
            line = clean_comment_line(line)
            if not line and i not in (0, last):
                self.p("//")
            else:
                self.p("//", line)

    def p_options(self, is_field_option: bool, *options: Option) -> None:
        """Print options sorted by name.

        Top-level options are printed as "option name = value;". Field options
        are printed one per line and separated by commas, for use between
        brackets.
        """
        if not options:
            return
        sorted_options = sorted(options, key=lambda o: o.name)
        prefix = "" if is_field_option else "option "
        last = len(sorted_options) - 1
        for i, o in enumerate(sorted_options):
            if not is_field_option:
                suffix = ";"
            elif last > 0 and i != last:
                suffix = ","
            else:
                suffix = ""
            self.p_comment(o.comment)
            constant = o.constant
            if not constant.array and not constant.ordered_map:
                self.p_with_inline_comment(
                    o.inline_comment, prefix, o.name, " = ", constant.source_representation(), suffix
                )
            elif constant.array:
                # TODO: print array constants once the grammar for them is settled with callers
                logger.debug("skipping array constant for option %s", o.name)
                self.add_failure(o.position, "array value for option %s cannot be formatted", o.name)
            else:
                self.p(prefix, o.name, " = {")
                self.in_()
                for named_literal in constant.ordered_map:
                    self.p(named_literal.name, ": ", named_literal.source_representation())
                self.out()
                self.p_with_inline_comment(o.inline_comment, "}", suffix)

    def p_field(self, prefix: str, type_name: str, field: Field) -> None:
        """Print a field declaration with its comments and options."""
        self.p_comment(field.comment)
        if not field.options:
            self.p_with_inline_comment(
                field.inline_comment, prefix, type_name, " ", field.name, " = ", field.sequence, ";"
            )
            return
        self.p(prefix, type_name, " ", field.name, " = ", field.sequence, " [")
        self.in_()
        self.p_options(True, *field.options)
        self.out()
        self.p_with_inline_comment(field.inline_comment, "];")


def new_base_visitor(indent: str = "") -> BaseVisitor:
    return BaseVisitor(indent)


def clean_comment_line(line: str) -> str:
    """Strip the leading run of '/' from a raw comment line."""
    # also strips a leading '/' that belongs to the comment text
    return line.lstrip("/")
