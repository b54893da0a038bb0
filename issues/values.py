"""Printable conversion for record values.

Record values are mapped onto a small closed set of variants, each with
its own rule for producing display text. Nothing falls back to ``str()``:
a value outside the set raises ``UnprintableValueError`` instead of
printing whatever its ``__str__`` happens to return.

Variants::

    Text      str (and date/time/Decimal, via isoformat()/str())
    Boolean   bool                 -> 'true' / 'false'
    Integer   int                  -> decimal digits
    Float     float                -> shortest round-trip text, or fixed decimals
    Missing   None / absent key    -> the configured placeholder

Usage::

    from issues.values import printable

    printable("a")      # 'a'
    printable(99)       # '99'
    printable(2.5)      # '2.5'
    printable(True)     # 'true'
    printable(None)     # ''
"""

from __future__ import annotations

import datetime
import decimal
from dataclasses import dataclass
from typing import Any, Union

from issues.errors import UnprintableValueError
from issues.options import DEFAULT_OPTIONS, TableOptions

_TEMPORAL = (datetime.date, datetime.time)  # datetime is a date subclass


@dataclass(frozen=True)
class Text:
    value: str

    def text(self, options: TableOptions = DEFAULT_OPTIONS) -> str:
        return self.value


@dataclass(frozen=True)
class Boolean:
    value: bool

    def text(self, options: TableOptions = DEFAULT_OPTIONS) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class Integer:
    value: int

    def text(self, options: TableOptions = DEFAULT_OPTIONS) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Float:
    value: float

    def text(self, options: TableOptions = DEFAULT_OPTIONS) -> str:
        """Shortest round-trip text, or fixed-point when configured.

        Examples:
            >>> Float(0.1).text()
            '0.1'
            >>> Float(2.0).text(TableOptions(float_decimals=3))
            '2.000'
        """
        if options.float_decimals is None:
            return repr(self.value)
        return f"{self.value:.{options.float_decimals}f}"


@dataclass(frozen=True)
class Missing:
    """No value: the key was absent or mapped to None."""

    def text(self, options: TableOptions = DEFAULT_OPTIONS) -> str:
        return options.missing_text


MISSING = Missing()

Value = Union[Text, Boolean, Integer, Float, Missing]


def classify(value: Any) -> Value:
    """Wrap a raw record value in its variant.

    Args:
        value: Any value taken from a record.

    Returns:
        One of ``Text``, ``Boolean``, ``Integer``, ``Float``, ``Missing``.

    Raises:
        UnprintableValueError: If the value's type has no variant.
    """
    if value is None:
        return MISSING
    if isinstance(value, str):
        return Text(value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return Boolean(value)
    if isinstance(value, int):
        return Integer(value)
    if isinstance(value, float):
        return Float(value)
    if isinstance(value, _TEMPORAL):
        return Text(value.isoformat())
    if isinstance(value, decimal.Decimal):
        return Text(str(value))
    raise UnprintableValueError(type(value))


def printable(value: Any, options: TableOptions | None = None) -> str:
    """Return the display text for a record value.

    Args:
        value: The value to convert.
        options: Render options; defaults apply when None.

    Returns:
        The canonical text for the value's variant.

    Examples:
        >>> printable("a")
        'a'
        >>> printable(99)
        '99'
        >>> printable(None)
        ''
    """
    return classify(value).text(options or DEFAULT_OPTIONS)
