"""Failures: messages tied to a position in a source file."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, TextIO

from prototool.exceptions import FailureFieldError
from prototool.parser.proto_ast import Position


class FailureField(Enum):
    FILENAME = "filename"
    LINE = "line"
    COLUMN = "column"
    ID = "id"
    MESSAGE = "message"

    def __str__(self) -> str:
        return self.value


DEFAULT_FAILURE_FIELDS: List[FailureField] = [
    FailureField.FILENAME,
    FailureField.LINE,
    FailureField.COLUMN,
    FailureField.MESSAGE,
]


def parse_failure_field(s: str) -> FailureField:
    """Parse a FailureField from its name. Input is case-insensitive."""
    try:
        return FailureField(s.lower())
    except ValueError as e:
        raise FailureFieldError(f"could not parse {s} to a FailureField") from e


def parse_colon_separated_failure_fields(s: str) -> List[FailureField]:
    """Parse colon-separated FailureFields, e.g. "filename:line:message".

    An empty string returns DEFAULT_FAILURE_FIELDS.
    """
    if not s:
        return list(DEFAULT_FAILURE_FIELDS)
    return [parse_failure_field(part) for part in s.split(":")]


@dataclass
class Failure:
    filename: str = ""
    line: int = 0
    column: int = 0
    lint_id: str = ""
    message: str = ""

    def fprintln(self, writer: TextIO, *fields: FailureField) -> None:
        """Write the failure to writer using the given ordered fields.

        Empty id and message fields are skipped along with their separator.
        Nothing is written, not even the newline, if every field was skipped.
        """
        if not fields:
            fields = tuple(DEFAULT_FAILURE_FIELDS)
        written = False
        for i, failure_field in enumerate(fields):
            print_colon = True
            if failure_field is FailureField.FILENAME:
                writer.write(self._display_filename())
                written = True
            elif failure_field is FailureField.LINE:
                writer.write(str(self.line or 1))
                written = True
            elif failure_field is FailureField.COLUMN:
                writer.write(str(self.column or 1))
                written = True
            elif failure_field is FailureField.ID:
                if self.lint_id:
                    writer.write(self.lint_id)
                    written = True
                else:
                    print_colon = False
            elif failure_field is FailureField.MESSAGE:
                if self.message:
                    writer.write(self.message)
                    written = True
                else:
                    print_colon = False
            else:
                raise FailureFieldError(f"unknown FailureField: {failure_field}")
            if print_colon and i != len(fields) - 1:
                writer.write(":")
                written = True
        if written:
            writer.write("\n")

    def __str__(self) -> str:
        lint_id = f"{self.lint_id} " if self.lint_id else ""
        return (
            f"{self._display_filename()}:{self.line or 1}:{self.column or 1}:"
            f"{lint_id}{self.message}"
        )

    def _display_filename(self) -> str:
        return self.filename or "<input>"


def new_failuref(position: Position, lint_id: str, format: str, *args) -> Failure:
    """Return a new Failure at position with a %-formatted message."""
    return Failure(
        filename=position.filename,
        line=position.line,
        column=position.column,
        lint_id=lint_id,
        message=format % args,
    )


def sort_failures(failures: List[Optional[Failure]]) -> None:
    """Sort failures in place by filename, line, column, id and message.

    None entries sort first. The sort is stable.
    """
    failures.sort(key=_sort_key)


def _sort_key(failure: Optional[Failure]) -> Sequence:
    if failure is None:
        return (0,)
    return (1, failure.filename, failure.line, failure.column, failure.lint_id, failure.message)
