"""Exceptions raised while rendering a table.

Every error derives from ``TableFormatError`` and from the builtin a
caller would naturally catch for that situation, so both
``except TableFormatError`` and ``except ValueError`` work for an empty
input.
"""


class TableFormatError(Exception):
    """Base class for all table rendering errors."""


class EmptyInputError(TableFormatError, ValueError):
    """No records, no headers, or a column with no values to measure."""


class MissingFieldError(TableFormatError, LookupError):
    """A record lacks a requested header and the policy is ``Fail()``.

    Args:
        header: The header that was looked up.
        index: Zero-based position of the offending record.
    """

    def __init__(self, header: str, index: int):
        self.header = header
        self.index = index
        super().__init__(f"record {index} has no field {header!r}")


class UnprintableValueError(TableFormatError, TypeError):
    """A record value has no canonical text representation."""

    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(f"cannot print value of type {value_type.__name__}")


class ColumnLengthError(TableFormatError, RuntimeError):
    """Columns (or a row and its format) disagree on length.

    This is an internal invariant violation, never a user input problem.
    """
