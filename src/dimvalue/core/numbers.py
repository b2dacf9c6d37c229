"""
dimvalue.core.numbers
=====================

Decimal arithmetic settings shared by the whole framework, and helpers to
turn user supplied numbers into :class:`decimal.Decimal`.

Two contexts are used:

``MATH_CONTEXT``
    128 significant digits, round-half-even. Every division and every
    conversion runs under this context. Function-pair conversions widen it
    for operands whose digits would not fit, and displayed magnitudes are
    never rounded back to it.

``CANONICAL_CONTEXT``
    100 significant digits, round-half-even. Canonical magnitudes are
    normalized under this context before they are stored. The gap to the
    working precision absorbs the error of a ``from_base``/``to_base`` round
    trip, so a rendered value parses back to the same canonical magnitude.
"""

from __future__ import annotations

from decimal import (
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    Context,
    Decimal,
    InvalidOperation,
)
from fractions import Fraction
from typing import Union

from dimvalue.core.errors import (
    EmptyArgumentError,
    NullArgumentError,
    NumberFormatError,
)

MATH_CONTEXT = Context(prec=128, rounding=ROUND_HALF_EVEN)
CANONICAL_CONTEXT = Context(prec=100, rounding=ROUND_HALF_EVEN)

Numeric = Union[Decimal, int, float, Fraction, str]

_ZERO = Decimal(0)


def to_decimal(raw: object, name: str = "value") -> Decimal:
    """
    Coerce ``raw`` into a finite :class:`Decimal`.

    Accepted inputs are ``Decimal``, ``int``, ``float`` (through its shortest
    ``repr``), ``Fraction`` (divided under ``MATH_CONTEXT``) and numeral
    strings.

    Raises
    ------
    NullArgumentError
        ``raw`` is None.
    EmptyArgumentError
        ``raw`` is an empty or blank string.
    NumberFormatError
        ``raw`` cannot be parsed, or is NaN / infinite.
    TypeError
        ``raw`` has an unsupported type (``bool`` included).
    """
    if raw is None:
        raise NullArgumentError(name)

    if isinstance(raw, bool):
        raise TypeError(f"Argument '{name}' must be a number, got bool")

    if isinstance(raw, Decimal):
        result = raw
    elif isinstance(raw, int):
        result = Decimal(raw)
    elif isinstance(raw, float):
        result = Decimal(repr(raw))
    elif isinstance(raw, Fraction):
        result = MATH_CONTEXT.divide(Decimal(raw.numerator), Decimal(raw.denominator))
    elif isinstance(raw, str):
        if not raw.strip():
            raise EmptyArgumentError(name)
        try:
            result = Decimal(raw)
        except InvalidOperation:
            raise NumberFormatError(raw) from None
    else:
        raise TypeError(
            f"Argument '{name}' must be Decimal, int, float, Fraction or str, "
            f"got {type(raw).__name__}"
        )

    if not result.is_finite():
        raise NumberFormatError(raw)
    return result


def normalized(value: Decimal, context: Context = MATH_CONTEXT) -> Decimal:
    """Strip trailing zeros under ``context``; negative zero becomes zero."""
    result = context.normalize(value)
    if result.is_zero():
        return _ZERO
    return result


def stripped(value: Decimal) -> Decimal:
    """Strip trailing zeros without rounding; negative zero becomes zero."""
    digits = max(MATH_CONTEXT.prec, len(value.as_tuple().digits))
    return normalized(value, Context(prec=digits, rounding=ROUND_HALF_EVEN))


def canonical(value: Decimal) -> Decimal:
    """The stored form of a base-unit magnitude."""
    return normalized(value, CANONICAL_CONTEXT)


def plain_numeral(value: Decimal) -> str:
    """Exact numeral in positional notation (never an exponent)."""
    return format(stripped(value), "f")


def fixed_numeral(value: Decimal, precision: int) -> str:
    """Numeral with exactly ``precision`` fraction digits, rounded half-up."""
    if precision < 0:
        raise ValueError("precision must be >= 0")
    digits = max(MATH_CONTEXT.prec, value.adjusted() + precision + 2)
    context = Context(prec=digits, rounding=ROUND_HALF_UP)
    quantum = Decimal(1).scaleb(-precision)
    result = value.quantize(quantum, context=context)
    if result.is_zero():
        result = result.copy_abs()
    return format(result, "f")


__all__ = [
    "MATH_CONTEXT",
    "CANONICAL_CONTEXT",
    "Numeric",
    "to_decimal",
    "normalized",
    "stripped",
    "canonical",
    "plain_numeral",
    "fixed_numeral",
]
