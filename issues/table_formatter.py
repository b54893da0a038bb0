"""Fixed-width text tables from a list of records.

Takes records (mappings from field name to value) and a list of headers,
and lays the selected fields out in columns sized to their widest value::

    a | b | c
    --+---+--
    1 | 2 | 3
    4 | 5 | 6

The work is done in four passes, each a plain function that can be used
on its own:

1. ``split_into_columns`` -- one list of display strings per header.
2. ``widths_of`` -- the longest string in each column.
3. ``format_for`` / ``separator`` -- the row layout and the rule under
   the headings.
4. ``rows_of`` + ``RowFormat.render`` -- transpose columns back into rows
   and lay each one out.

Header labels are not measured, so a header longer than every value in
its column spills past the column edge.

Usage::

    from issues.table_formatter import render_table

    text = render_table(
        [{"number": 12, "title": "Crash on start"},
         {"number": 7, "title": "Typo"}],
        ["number", "title"],
    )
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence, TextIO

from issues.errors import ColumnLengthError, EmptyInputError, MissingFieldError
from issues.options import DEFAULT_OPTIONS, Fail, TableOptions
from issues.values import MISSING, classify

logger = logging.getLogger(__name__)

COLUMN_SEPARATOR = " | "
RULE_JOINT = "-+-"


# ── Column extraction ────────────────────────────────────────────────────

def split_into_columns(
    records: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    options: TableOptions | None = None,
) -> list[list[str]]:
    """Project records into one list of display strings per header.

    Args:
        records: Records in output order.
        headers: Field names to extract, in column order.
        options: Render options; defaults apply when None.

    Returns:
        A list with one column per header, each holding the printable
        text of ``record[header]`` for every record.

    Raises:
        MissingFieldError: If a record lacks a header under ``Fail()``.
        UnprintableValueError: If a value has no text representation.

    Examples:
        >>> rows = [{"a": "1", "b": "2", "c": "3"}, {"a": "4", "b": "5", "c": "6"}]
        >>> split_into_columns(rows, ["a", "b", "c"])
        [['1', '4'], ['2', '5'], ['3', '6']]
    """
    options = options or DEFAULT_OPTIONS
    fail_on_missing = isinstance(options.on_missing_field, Fail)
    substituted = 0

    columns: list[list[str]] = []
    for header in headers:
        column: list[str] = []
        for index, record in enumerate(records):
            if header in record:
                value = classify(record[header])
            elif fail_on_missing:
                raise MissingFieldError(header, index)
            else:
                value = MISSING
                substituted += 1
            column.append(value.text(options))
        columns.append(column)

    if substituted:
        logger.debug("Substituted placeholder for %d missing field(s)", substituted)
    return columns


# ── Widths ───────────────────────────────────────────────────────────────

def widths_of(columns: Sequence[Sequence[str]]) -> list[int]:
    """Return the length of the longest string in each column.

    Raises:
        EmptyInputError: If any column has no values.

    Examples:
        >>> widths_of([["cat", "wombat", "elk"], ["mongoose", "ant", "gnu"]])
        [6, 8]
    """
    widths: list[int] = []
    for position, column in enumerate(columns):
        if not column:
            raise EmptyInputError(f"column {position} has no values to measure")
        widths.append(max(len(value) for value in column))
    return widths


# ── Layout ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RowFormat:
    """Layout for one line: left-justified fields of fixed width.

    Fields are joined by ``" | "`` and the line ends with ``"\\n"``.
    A field longer than its width is printed in full, pushing the rest of
    the line to the right.
    """

    widths: tuple[int, ...]

    def render(self, fields: Sequence[str]) -> str:
        if len(fields) != len(self.widths):
            raise ColumnLengthError(
                f"row has {len(fields)} field(s) for {len(self.widths)} column(s)"
            )
        cells = [field.ljust(width) for field, width in zip(fields, self.widths)]
        return COLUMN_SEPARATOR.join(cells) + "\n"

    def __str__(self) -> str:
        return COLUMN_SEPARATOR.join(f"{{:<{w}}}" for w in self.widths) + "\n"


def format_for(widths: Sequence[int]) -> RowFormat:
    """Return the row layout for a set of column widths.

    Examples:
        >>> str(format_for([5, 6, 99]))
        '{:<5} | {:<6} | {:<99}\\n'
    """
    return RowFormat(tuple(widths))


def separator(widths: Sequence[int]) -> str:
    """Return the rule printed under the headings.

    Each column gets as many hyphens as its width; columns are joined by
    ``"-+-"`` so the ``+`` lines up with the ``|`` of the rows below.

    Examples:
        >>> separator([5, 6, 9])
        '------+--------+----------'
    """
    return RULE_JOINT.join("-" * width for width in widths)


# ── Rows ─────────────────────────────────────────────────────────────────

def rows_of(columns: Sequence[Sequence[str]]) -> list[list[str]]:
    """Transpose columns back into rows.

    Raises:
        ColumnLengthError: If the columns do not all have the same length.

    Examples:
        >>> rows_of([["1", "4"], ["2", "5"], ["3", "6"]])
        [['1', '2', '3'], ['4', '5', '6']]
    """
    lengths = {len(column) for column in columns}
    if len(lengths) > 1:
        raise ColumnLengthError(f"columns have unequal lengths: {sorted(lengths)}")
    return [list(row) for row in zip(*columns)]


def _check_inputs(records: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> None:
    if not records:
        raise EmptyInputError("no records to render")
    if not headers:
        raise EmptyInputError("no headers to render")
    for position, header in enumerate(headers):
        if not isinstance(header, str):
            raise TypeError(
                f"header {position} must be a str, got {type(header).__name__}"
            )
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise TypeError(
                f"record {index} must be a mapping, got {type(record).__name__}"
            )


def render_table(
    records: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    options: TableOptions | None = None,
) -> str:
    """Render records as a fixed-width text table.

    Args:
        records: Non-empty list of records, one per output row.
        headers: Non-empty list of field names, one per output column.
        options: Render options; defaults apply when None.

    Returns:
        ``len(records) + 2`` lines, each ending in ``"\\n"``: the header
        line, the separator rule, then one line per record. Values are
        not escaped, so a value containing a line break adds lines.

    Raises:
        EmptyInputError: If ``records`` or ``headers`` is empty.
        MissingFieldError: If a record lacks a header under ``Fail()``.
        UnprintableValueError: If a value has no text representation.
        TypeError: If a record is not a mapping or a header is not a str.
    """
    _check_inputs(records, headers)

    columns = split_into_columns(records, headers, options)
    widths = widths_of(columns)
    row_format = format_for(widths)
    logger.debug(
        "Rendering %d record(s) x %d column(s), widths=%s",
        len(records), len(headers), widths,
    )

    lines = [row_format.render(list(headers)), separator(widths) + "\n"]
    lines.extend(row_format.render(row) for row in rows_of(columns))
    return "".join(lines)


def print_table_for_columns(
    records: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    options: TableOptions | None = None,
    file: TextIO | None = None,
) -> None:
    """Render a table and write it to ``file`` (default stdout).

    The whole table is built before anything is written, so a failure
    leaves ``file`` untouched.
    """
    text = render_table(records, headers, options)
    (file or sys.stdout).write(text)
