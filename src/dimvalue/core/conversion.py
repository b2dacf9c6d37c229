from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext
from typing import Callable, Protocol, runtime_checkable

from dimvalue.core.numbers import MATH_CONTEXT, to_decimal

DecimalFunction = Callable[[Decimal], Decimal]

_ONE = Decimal(1)

# Digits kept beyond the span of the operand and the result.
_GUARD = 5


@runtime_checkable
class Conversion(Protocol):
    # Is this conversion purely multiplicative w.r.t. the base unit?
    @property
    def is_linear(self) -> bool: ...

    # Is this the identity (i.e. the owner is the base unit)?
    @property
    def is_identity(self) -> bool: ...

    def to_base(self, value: Decimal) -> Decimal: ...
    def from_base(self, value: Decimal) -> Decimal: ...


@dataclass(frozen=True, slots=True)
class LinearConversion(Conversion):
    """
    Conversion by a single factor, the number of units per base unit:
    ``base = local ÷ factor`` and ``local = base × factor``.

    A factor without a finite decimal expansion is given as an exact ratio,
    either as ``denominator`` or as the string ``"<numerator>/<denominator>"``;
    there are ``"1/0.3048"`` feet to the meter.
    """

    numerator: Decimal
    denominator: Decimal = _ONE

    def __post_init__(self) -> None:
        numerator, denominator = self.numerator, self.denominator
        if isinstance(numerator, str) and "/" in numerator:
            if denominator != _ONE:
                raise ValueError("factor is given twice")
            numerator, _, denominator = numerator.partition("/")
        numerator = to_decimal(numerator, "factor")
        denominator = to_decimal(denominator, "factor")
        if not (numerator > 0 and denominator > 0):
            raise ValueError("factor must be a positive, finite number")
        object.__setattr__(self, "numerator", MATH_CONTEXT.normalize(numerator))
        object.__setattr__(self, "denominator", MATH_CONTEXT.normalize(denominator))

    @classmethod
    def identity(cls) -> LinearConversion:
        return cls(_ONE)

    @property
    def factor(self) -> Decimal:
        if self.denominator == _ONE:
            return self.numerator
        return MATH_CONTEXT.normalize(MATH_CONTEXT.divide(self.numerator, self.denominator))

    @property
    def is_linear(self) -> bool:
        return True

    @property
    def is_identity(self) -> bool:
        return self.numerator == self.denominator

    def to_base(self, value: Decimal) -> Decimal:
        if self.denominator != _ONE:
            value = MATH_CONTEXT.multiply(value, self.denominator)
        return MATH_CONTEXT.divide(value, self.numerator)

    def from_base(self, value: Decimal) -> Decimal:
        value = MATH_CONTEXT.multiply(value, self.numerator)
        if self.denominator == _ONE:
            return value
        return MATH_CONTEXT.divide(value, self.denominator)

    def per(self, other: LinearConversion) -> LinearConversion:
        """Conversion of a unit composed as ``self / other`` (e.g. km per h)."""
        return LinearConversion(
            MATH_CONTEXT.multiply(self.numerator, other.denominator),
            MATH_CONTEXT.multiply(self.denominator, other.numerator),
        )


@dataclass(frozen=True, slots=True)
class FunctionConversion(Conversion):
    """
    Conversion through an explicit pair of monotonic functions.

    Used for scales with an offset (temperature), where no single factor
    exists. ``identity`` marks the base unit of the family.
    """

    forward: DecimalFunction
    backward: DecimalFunction
    identity: bool = False

    @property
    def is_linear(self) -> bool:
        return False

    @property
    def is_identity(self) -> bool:
        return self.identity

    def to_base(self, value: Decimal) -> Decimal:
        return _widened(self.forward, value)

    def from_base(self, value: Decimal) -> Decimal:
        return _widened(self.backward, value)


def _widened(function: DecimalFunction, value: Decimal) -> Decimal:
    """
    Apply ``function`` under ``MATH_CONTEXT``, widened until no digit of
    ``value`` is rounded off.

    An offset can lift a tiny magnitude to a large one (``1E-30 K`` is
    about ``-273.15 °C``).
    """
    with localcontext(MATH_CONTEXT) as context:
        result = function(value)
        span = max(value.adjusted(), result.adjusted()) - value.as_tuple().exponent + 1
        if span + _GUARD > context.prec:
            context.prec = span + _GUARD
            result = function(value)
    return result


__all__ = ["Conversion", "LinearConversion", "FunctionConversion", "DecimalFunction"]
