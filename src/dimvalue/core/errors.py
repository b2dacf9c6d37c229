"""
dimvalue.core.errors
====================

Exception types raised by the dimensioned value framework.

Every error is also a :class:`ValueError`, so callers that only care about
"bad input" can catch that, while tests and callers that need to tell the
failure modes apart can catch the specific classes.
"""

from __future__ import annotations

MSG_UNKNOWN_UNIT = "Unknown unit: %s"
MSG_INVALID_VALUE = "'%s' cannot be parsed as a dimensioned value"


class DimensionedValueError(ValueError):
    """Base class for all errors raised by dimvalue."""


class NullArgumentError(DimensionedValueError):
    """A required argument is ``None``."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be None")
        self.name = name


class EmptyArgumentError(DimensionedValueError):
    """A required string argument is empty or blank."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Argument '{name}' must not be empty")
        self.name = name


class NumberFormatError(DimensionedValueError):
    """A numeral cannot be parsed as a finite decimal."""

    def __init__(self, text: object) -> None:
        super().__init__(f"'{text}' is not a valid decimal number")
        self.text = text


class UnknownUnitError(DimensionedValueError):
    """A unit symbol does not match any member of the requested family."""

    def __init__(self, symbol: str) -> None:
        super().__init__(MSG_UNKNOWN_UNIT % symbol)
        self.symbol = symbol


class InvalidArgumentError(DimensionedValueError):
    """An argument violates a domain constraint (e.g. a validator)."""


class InvalidFormatError(DimensionedValueError):
    """Text does not have the ``"<number> <symbol>"`` layout."""

    def __init__(self, text: str) -> None:
        super().__init__(MSG_INVALID_VALUE % text)
        self.text = text


def require_not_none(value, name: str):
    if value is None:
        raise NullArgumentError(name)
    return value


def require_not_empty(value: str | None, name: str) -> str:
    if value is None:
        raise NullArgumentError(name)
    if not value.strip():
        raise EmptyArgumentError(name)
    return value


__all__ = [
    "MSG_UNKNOWN_UNIT",
    "MSG_INVALID_VALUE",
    "DimensionedValueError",
    "NullArgumentError",
    "EmptyArgumentError",
    "NumberFormatError",
    "UnknownUnitError",
    "InvalidArgumentError",
    "InvalidFormatError",
    "require_not_none",
    "require_not_empty",
]
