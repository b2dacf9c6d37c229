"""
dimvalue.values.time
====================

`TimeValue` adds interoperability with :class:`datetime.timedelta` and an
alternate rendering that breaks a duration into calendar-like parts::

    >>> format(TimeValue(Time.SECOND, 90001), "#")
    '1d 1h 1.000s'
"""

from __future__ import annotations

from datetime import timedelta
from decimal import ROUND_HALF_EVEN, Decimal

from dimvalue.core.errors import require_not_none
from dimvalue.core.formatting import get_default_locale, justify
from dimvalue.core.numbers import MATH_CONTEXT, fixed_numeral
from dimvalue.core.value import DimensionedValue
from dimvalue.units.families import Time

# Units used by the alternate format, largest first.
_BREAKDOWN = (Time.YEAR, Time.WEEK, Time.DAY, Time.HOUR, Time.MINUTE)
_ONE = Decimal(1)


class TimeValue(DimensionedValue, dimension=Time):
    __slots__ = ()

    @classmethod
    def from_timedelta(cls, unit: Time, delta: timedelta) -> TimeValue:
        """Create a value from ``delta``, shown in ``unit``. The sign is dropped."""
        require_not_none(unit, "unit")
        require_not_none(delta, "delta")
        seconds = Decimal(delta.days * 86400 + delta.seconds) + Decimal(delta.microseconds).scaleb(-6)
        result = cls(Time.SECOND, seconds)
        result.set_unit(unit)
        return result

    def as_timedelta(self) -> timedelta:
        """
        The duration as a ``timedelta``, rounded to whole microseconds.

        Raises ``OverflowError`` beyond ``timedelta.max``.
        """
        micros = self.base_value.scaleb(6).to_integral_value(rounding=ROUND_HALF_EVEN)
        return timedelta(microseconds=int(micros))

    def breakdown(self) -> str:
        """``"<n>yr <n>w <n>d <n>h <n>min <s.sss>s"``, omitting empty parts."""
        parts: list[str] = []
        remainder = self.base_value
        for unit in _BREAKDOWN:
            count, remainder = MATH_CONTEXT.divmod(remainder, unit.to_base(_ONE))
            if count > 0:
                parts.append(f"{int(count)}{unit.symbol}")
        seconds = get_default_locale().localize(fixed_numeral(remainder, 3))
        parts.append(f"{seconds}s")
        return " ".join(parts)

    def _format_alternate(self, width: int, precision: int, left: bool) -> str:
        return justify(self.breakdown(), width, left)


__all__ = ["TimeValue"]
