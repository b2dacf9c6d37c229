from __future__ import annotations

from decimal import Decimal

from dimvalue.core.dimension import Dimension
from dimvalue.core.errors import InvalidArgumentError
from dimvalue.core.value import DimensionedValue, non_negative
from dimvalue.units.temperature import Temperature


class TemperatureValue(DimensionedValue, dimension=Temperature, validator=non_negative):
    """A temperature; values below absolute zero are rejected."""

    __slots__ = ()

    def _rejection(self, unit: Dimension, raw: Decimal) -> InvalidArgumentError:
        return InvalidArgumentError("Temperature cannot be less than 0 K")


__all__ = ["TemperatureValue"]
