"""
dimvalue.core.value
===================

Defines `DimensionedValue`, the base class of every concrete value type
(``LengthValue``, ``TemperatureValue``, ...), and the stock validators.

A dimensioned value is a pair of

- a canonical magnitude, expressed in the base unit of its unit family and
  fixed at construction, and
- a display unit, used for rendering and for :meth:`DimensionedValue.value`,
  which can be relabelled with :meth:`DimensionedValue.set_unit`.

Equality, hashing and ordering only look at the canonical magnitude and the
family, so relabelling a value never changes how it compares.

Concrete value types bind themselves to a unit family when they are defined::

    class LengthValue(DimensionedValue, dimension=Length):
        __slots__ = ()

which registers them in the factory registry used by the generic arithmetic
and by the string codec.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Callable, ClassVar, Optional

from dimvalue.core.dimension import Dimension
from dimvalue.core.errors import (
    InvalidArgumentError,
    require_not_none,
)
from dimvalue.core.formatting import (
    ROOT,
    LocaleLike,
    compose,
    justify,
    parse_format_spec,
    printf,
    resolve_locale,
)
from dimvalue.core.numbers import (
    MATH_CONTEXT,
    Numeric,
    canonical,
    fixed_numeral,
    plain_numeral,
    stripped,
    to_decimal,
)
from dimvalue.core.registry import DEFAULT_REGISTRY, ValueTypeRegistry

Validator = Callable[[Dimension, Decimal], bool]

_SCALARS = (Decimal, int, float, Fraction)


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------
def accept_all(unit: Dimension, value: Decimal) -> bool:
    return True


def non_negative(unit: Dimension, value: Decimal) -> bool:
    """Reject magnitudes below zero in the base unit."""
    return not value < 0


# ---------------------------------------------------------------------------
# Core object
# ---------------------------------------------------------------------------
class DimensionedValue:
    """
    A decimal magnitude paired with a unit of one unit family.

    Parameters
    ----------
    unit : Dimension
        The unit ``value`` is expressed in; becomes the display unit.
    value : Decimal | int | float | Fraction | str
        The magnitude in ``unit``.
    validator : callable, optional
        Overrides the type's validator for this construction.

    Raises
    ------
    NullArgumentError
        ``unit`` or ``value`` is None.
    EmptyArgumentError
        ``value`` is a blank string.
    NumberFormatError
        ``value`` is not a finite numeral.
    InvalidArgumentError
        The validator rejects the value.
    TypeError
        ``unit`` belongs to another family, or ``value`` has an unsupported type.
    """

    __slots__ = ("_unit", "_value")

    dimension: ClassVar[Optional[type]] = None
    _validator: ClassVar[Validator] = staticmethod(accept_all)
    _registry: ClassVar[ValueTypeRegistry] = DEFAULT_REGISTRY

    def __init_subclass__(
        cls,
        dimension: type | None = None,
        validator: Validator | None = None,
        registry: ValueTypeRegistry | None = None,
        **kwargs,
    ) -> None:
        super().__init_subclass__(**kwargs)
        if validator is not None:
            cls._validator = staticmethod(validator)
        if registry is not None:
            cls._registry = registry
        if dimension is not None:
            cls.dimension = dimension
            cls._registry.register(dimension, cls)

    def __init__(self, unit: Dimension, value: Numeric, validator: Validator | None = None):
        require_not_none(unit, "unit")
        self._check_unit(unit)
        raw = to_decimal(value, "value")

        base = unit.to_base(raw)
        check = validator if validator is not None else type(self)._validator
        if not check(unit, base):
            raise self._rejection(unit, raw)

        self._value = canonical(base.copy_abs())
        self._unit = unit

    def _rejection(self, unit: Dimension, raw: Decimal) -> InvalidArgumentError:
        return InvalidArgumentError(
            f"{plain_numeral(raw)} {unit.symbol} is not a valid {type(self).__name__}"
        )

    def _check_unit(self, unit: object) -> None:
        family = type(self).dimension
        if family is None:
            raise TypeError(f"{type(self).__name__} is not bound to a unit family")
        if not isinstance(unit, family):
            raise TypeError(
                f"{type(self).__name__} requires a {family.__name__} unit, got {unit!r}"
            )

    # --- Accessors ---
    @property
    def unit(self) -> Dimension:
        return self._unit

    @property
    def base_unit(self) -> Dimension:
        return self._unit.base_unit

    @property
    def base_value(self) -> Decimal:
        return self._value

    def value(self) -> Decimal:
        """The magnitude in the display unit."""
        return stripped(self._unit.from_base(self._value))

    def convert(self, unit: Dimension) -> Decimal:
        """The magnitude in ``unit`` (which must be of the same family)."""
        require_not_none(unit, "unit")
        self._check_unit(unit)
        return stripped(unit.from_base(self._value))

    def set_unit(self, unit: Dimension) -> None:
        """Relabel the display unit; the canonical magnitude is untouched."""
        require_not_none(unit, "unit")
        self._check_unit(unit)
        self._unit = unit

    # --- Copies ---
    def copy(self, unit: Dimension | None = None) -> DimensionedValue:
        result = self._clone()
        if unit is not None:
            result.set_unit(unit)
        return result

    def _clone(self) -> DimensionedValue:
        cls = type(self)
        result = cls.__new__(cls)
        result._value = self._value
        result._unit = self._unit
        return result

    def __copy__(self) -> DimensionedValue:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> DimensionedValue:
        return self.copy()

    # --- Virtual construction ---
    def new_instance(self, unit: Dimension, value: Decimal) -> DimensionedValue:
        """
        Create a value of this value's own concrete type.

        The type registered for the family builds through its registered
        factory; a subclass of it builds itself. A unit of another family
        gets the type registered for that family.
        """
        cls = type(self)
        family = type(unit)
        if isinstance(unit, cls.dimension) and not (
            family in cls._registry and cls._registry.type_for(family) is cls
        ):
            return cls(unit, value)
        return cls._registry.new_instance(unit, value)

    # --- Arithmetic ---
    def multiply(self, factor: Numeric) -> DimensionedValue:
        multiplier = to_decimal(factor, "factor")
        result = self.new_instance(self.base_unit, MATH_CONTEXT.multiply(self._value, multiplier))
        result.set_unit(self._unit)
        return result

    def divide(self, divisor: Numeric) -> DimensionedValue:
        denominator = to_decimal(divisor, "divisor")
        if denominator.is_zero():
            raise InvalidArgumentError("Division by zero")
        result = self.new_instance(self.base_unit, MATH_CONTEXT.divide(self._value, denominator))
        result.set_unit(self._unit)
        return result

    def sum(self, summand: DimensionedValue, unit: Dimension | None = None) -> DimensionedValue:
        """Add ``summand``; the result shows ``unit``, or this value's unit."""
        require_not_none(summand, "summand")
        self._check_family(summand)
        result = self.new_instance(self.base_unit, MATH_CONTEXT.add(self._value, summand._value))
        result.set_unit(unit if unit is not None else self._unit)
        return result

    def __mul__(self, other: object) -> DimensionedValue:
        if isinstance(other, bool) or not isinstance(other, _SCALARS):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> DimensionedValue:
        if isinstance(other, bool) or not isinstance(other, _SCALARS):
            return NotImplemented
        return self.divide(other)

    def __add__(self, other: object) -> DimensionedValue:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.sum(other)

    # --- Equality & ordering ---
    def _check_family(self, other: DimensionedValue) -> None:
        if not isinstance(other, DimensionedValue) or other.base_unit is not self.base_unit:
            raise TypeError(
                f"Cannot combine {type(self).__name__} with {type(other).__name__}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.base_unit is other.base_unit and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self.base_unit))

    def compare_to(self, other: DimensionedValue) -> int:
        """-1, 0 or 1 as this value is less than, equal to or greater than ``other``."""
        require_not_none(other, "other")
        self._check_family(other)
        if self._value < other._value:
            return -1
        return 1 if self._value > other._value else 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, DimensionedValue):
            return NotImplemented
        return self.compare_to(other) >= 0

    # --- Rendering ---
    def _symbol(self, use_printing_symbol: bool) -> str:
        return self._unit.printing_symbol if use_printing_symbol else self._unit.symbol

    def _numeral(self, precision: int) -> str:
        if precision < 0:
            return plain_numeral(self.value())
        return fixed_numeral(self.value(), precision)

    def to_string(
        self,
        locale: LocaleLike = None,
        width: int = -1,
        precision: int = -1,
        use_printing_symbol: bool = False,
    ) -> str:
        """
        Render as ``"<numeral> <symbol>"`` in the display unit.

        A negative ``precision`` renders the exact magnitude; otherwise the
        numeral has ``precision`` fraction digits, rounded half-up. The
        numeral is left-padded so that the whole text is ``width`` long.
        """
        loc = resolve_locale(locale)
        symbol = self._symbol(use_printing_symbol)
        numeral = loc.localize(self._numeral(precision))
        return compose(numeral, symbol, width)

    def format_to(
        self,
        width: int = -1,
        precision: int = -1,
        locale: LocaleLike = None,
        left_justify: bool = False,
        use_printing_symbol: bool = False,
    ) -> str:
        text = self.to_string(locale, width, precision, use_printing_symbol)
        return justify(text, width, left_justify)

    def to_string_with(
        self,
        template: str,
        locale: LocaleLike = None,
        use_printing_symbol: bool = False,
    ) -> str:
        """Render through a printf-style template, e.g. ``"%.2f %s"``."""
        require_not_none(template, "template")
        return printf(template, (self.value(), self._symbol(use_printing_symbol)), locale)

    def _format_alternate(self, width: int, precision: int, left: bool) -> str:
        return self.format_to(width, precision, None, left, True)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        left, alternate, width, precision = parse_format_spec(format_spec)
        if precision is None:
            precision = self._unit.precision
        if alternate:
            return self._format_alternate(width, precision, left)
        return self.format_to(width, precision, None, left, False)

    def __str__(self) -> str:
        return self.to_string(ROOT)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._unit.name}, '{plain_numeral(self.value())}')"


__all__ = [
    "Validator",
    "accept_all",
    "non_negative",
    "DimensionedValue",
]
