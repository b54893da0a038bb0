"""Issues table formatter.

Renders a list of uniformly keyed records (issue listings, typically) as
an aligned, fixed-width text table with a header line and a separator
rule. Fetching the records and deciding where the text goes are left to
the caller.
"""

from issues.errors import (
    ColumnLengthError,
    EmptyInputError,
    MissingFieldError,
    TableFormatError,
    UnprintableValueError,
)
from issues.options import Fail, Placeholder, TableOptions
from issues.table_formatter import print_table_for_columns, render_table
from issues.values import printable

__version__ = "0.1.0"

__all__ = [
    "ColumnLengthError",
    "EmptyInputError",
    "Fail",
    "MissingFieldError",
    "Placeholder",
    "TableFormatError",
    "TableOptions",
    "UnprintableValueError",
    "print_table_for_columns",
    "printable",
    "render_table",
]
