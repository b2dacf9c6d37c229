"""
dimvalue.units.wind_force
=========================

The Beaufort scale. Each force is identified by its number and carries the
highest wind speed (in m/s) that still belongs to it; ``BFT13`` is open
ended.
"""

from __future__ import annotations

from bisect import bisect_left
from decimal import Decimal
from enum import Enum
from functools import lru_cache

from dimvalue.core.errors import require_not_none
from dimvalue.core.numbers import Numeric, to_decimal
from dimvalue.core.value import DimensionedValue
from dimvalue.units.families import Speed

_INFINITY = Decimal("Infinity")


class WindForce(Enum):
    BFT0 = (0, "0.2", "Calm")
    BFT1 = (1, "1.5", "Light Air")
    BFT2 = (2, "3.3", "Light Breeze")
    BFT3 = (3, "5.4", "Gentle Breeze")
    BFT4 = (4, "8.9", "Moderate Breeze")
    BFT5 = (5, "11.0", "Fresh Breeze")
    BFT6 = (6, "14.0", "Strong Breeze")
    BFT7 = (7, "17.0", "Moderate Gale")
    BFT8 = (8, "21.0", "Gale")
    BFT9 = (9, "24.0", "Strong Gale")
    BFT10 = (10, "28.0", "Storm")
    BFT11 = (11, "33.0", "Violent Storm")
    BFT12 = (12, "36.9", "Hurricane")
    BFT13 = (13, None, "Heavy Hurricane")

    def __init__(self, number: int, max_speed: str | None, description: str) -> None:
        self._number = number
        self._max_speed = Decimal(max_speed) if max_speed is not None else _INFINITY
        self._description = description

    @property
    def number(self) -> int:
        return self._number

    @property
    def max_speed(self) -> Decimal:
        """Upper bound (inclusive) in m/s; infinite for ``BFT13``."""
        return self._max_speed

    @property
    def description(self) -> str:
        return self._description

    @classmethod
    def determine(cls, speed: DimensionedValue | Numeric, unit: Speed = Speed.METER_PER_SECOND) -> WindForce:
        """
        Classify a wind speed.

        ``speed`` is either a value of the ``Speed`` family or a number in
        ``unit`` (m/s by default).
        """
        require_not_none(speed, "speed")
        if isinstance(speed, DimensionedValue):
            if speed.base_unit is not Speed.METER_PER_SECOND:
                raise TypeError(f"speed must be a speed value, got {type(speed).__name__}")
            meters_per_second = speed.base_value
        else:
            require_not_none(unit, "unit")
            meters_per_second = unit.to_base(to_decimal(speed, "speed")).copy_abs()

        bounds = _upper_bounds()
        return _BY_POSITION[bisect_left(bounds, meters_per_second)]

    def __str__(self) -> str:
        return self._description


@lru_cache(maxsize=None)
def _upper_bounds() -> tuple[Decimal, ...]:
    return tuple(force.max_speed for force in WindForce if force is not WindForce.BFT13)


_BY_POSITION = tuple(WindForce)


__all__ = ["WindForce"]
