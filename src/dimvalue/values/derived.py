"""
dimvalue.values.derived
=======================

Value types whose family is the product or quotient of other families,
with constructors that combine operand values.

Each constructor multiplies (or divides) the canonical magnitudes of its
operands, builds the result in the composite family's base unit and then
relabels it to the requested unit::

    >>> side = LengthValue(Length.METER, 2)
    >>> AreaValue.from_lengths(Area.SQUARE_CENTIMETER, side, side).value()
    Decimal('4E+4')
"""

from __future__ import annotations

from dimvalue.core.errors import InvalidArgumentError, require_not_none
from dimvalue.core.numbers import MATH_CONTEXT
from dimvalue.core.value import DimensionedValue, non_negative
from dimvalue.units.families import Area, Length, Speed, Time, Volume


def _operand(value: DimensionedValue | None, name: str, base_unit) -> DimensionedValue:
    require_not_none(value, name)
    if not isinstance(value, DimensionedValue) or value.base_unit is not base_unit:
        raise TypeError(
            f"Argument '{name}' must be a {type(base_unit).__name__} value, got {value!r}"
        )
    return value


class AreaValue(DimensionedValue, dimension=Area, validator=non_negative):
    __slots__ = ()

    @classmethod
    def from_lengths(cls, unit: Area, length: DimensionedValue, width: DimensionedValue) -> AreaValue:
        """The area of a ``length`` by ``width`` rectangle, shown in ``unit``."""
        require_not_none(unit, "unit")
        a = _operand(length, "length", Length.METER)
        b = _operand(width, "width", Length.METER)
        result = cls(Area.SQUARE_METER, MATH_CONTEXT.multiply(a.base_value, b.base_value))
        result.set_unit(unit)
        return result


class VolumeValue(DimensionedValue, dimension=Volume):
    __slots__ = ()

    @classmethod
    def from_lengths(
        cls,
        unit: Volume,
        length: DimensionedValue,
        width: DimensionedValue,
        height: DimensionedValue,
    ) -> VolumeValue:
        """The volume of a cuboid, shown in ``unit``."""
        require_not_none(unit, "unit")
        a = _operand(length, "length", Length.METER)
        b = _operand(width, "width", Length.METER)
        c = _operand(height, "height", Length.METER)
        product = MATH_CONTEXT.multiply(MATH_CONTEXT.multiply(a.base_value, b.base_value), c.base_value)
        result = cls(Volume.CUBIC_METER, product)
        result.set_unit(unit)
        return result

    @classmethod
    def from_area(cls, unit: Volume, area: DimensionedValue, height: DimensionedValue) -> VolumeValue:
        """The volume of a prism with base ``area``, shown in ``unit``."""
        require_not_none(unit, "unit")
        base = _operand(area, "area", Area.SQUARE_METER)
        c = _operand(height, "height", Length.METER)
        result = cls(Volume.CUBIC_METER, MATH_CONTEXT.multiply(base.base_value, c.base_value))
        result.set_unit(unit)
        return result


class SpeedValue(DimensionedValue, dimension=Speed):
    __slots__ = ()

    @classmethod
    def from_distance(cls, unit: Speed, distance: DimensionedValue, time: DimensionedValue) -> SpeedValue:
        """Average speed over ``distance`` covered in ``time``, shown in ``unit``."""
        require_not_none(unit, "unit")
        d = _operand(distance, "distance", Length.METER)
        t = _operand(time, "time", Time.SECOND)
        if t.base_value.is_zero():
            raise InvalidArgumentError("Division by zero")
        result = cls(Speed.METER_PER_SECOND, MATH_CONTEXT.divide(d.base_value, t.base_value))
        result.set_unit(unit)
        return result


__all__ = ["AreaValue", "VolumeValue", "SpeedValue"]
