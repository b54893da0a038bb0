"""Render configuration.

``TableOptions`` collects the knobs that change how values become text.
Defaults reproduce the plain behaviour: missing fields print as an empty
string and floats print in their shortest round-trip form.

Usage::

    from issues.options import Fail, Placeholder, TableOptions

    TableOptions()                                  # Placeholder(""), canonical floats
    TableOptions(on_missing_field=Placeholder("-"))
    TableOptions(on_missing_field=Fail(), float_decimals=2)
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Placeholder:
    """Print absent fields (and ``None`` values) as ``text``."""

    text: str = ""


@dataclass(frozen=True)
class Fail:
    """Raise ``MissingFieldError`` when a record lacks a header."""


MissingFieldPolicy = Placeholder | Fail


@dataclass(frozen=True)
class TableOptions:
    """Options shared by every stage of the render pipeline.

    Args:
        on_missing_field: ``Placeholder(text)`` (default ``Placeholder("")``)
            or ``Fail()``.
        float_decimals: Fixed number of decimal places for floats, or None
            for the shortest text that round-trips (default).

    Raises:
        ValueError: If ``float_decimals`` is negative or the policy is not
            one of ``Placeholder`` / ``Fail``.
    """

    on_missing_field: MissingFieldPolicy = field(default_factory=Placeholder)
    float_decimals: int | None = None

    def __post_init__(self):
        if not isinstance(self.on_missing_field, (Placeholder, Fail)):
            raise ValueError(
                f"on_missing_field must be Placeholder or Fail, "
                f"got {self.on_missing_field!r}"
            )
        decimals = self.float_decimals
        if decimals is not None and (
            not isinstance(decimals, int) or isinstance(decimals, bool) or decimals < 0
        ):
            raise ValueError(
                f"float_decimals must be a non-negative int, got {decimals!r}"
            )

    @property
    def missing_text(self) -> str:
        """Text printed for a ``None`` value under the current policy."""
        if isinstance(self.on_missing_field, Placeholder):
            return self.on_missing_field.text
        return ""


DEFAULT_OPTIONS = TableOptions()
