"""
dimvalue.values.currency
========================

`CurrencyValue` is an amount of money in one :class:`Currency`.

It mirrors the rendering and comparison API of `DimensionedValue`, but since
there is no fixed rate between currencies it has no display unit to switch:
exchanging an amount takes an explicit conversion factor and yields a new
value. Amounts of different currencies are never equal and cannot be
ordered.
"""

from __future__ import annotations

from decimal import Decimal

from dimvalue.core.errors import InvalidArgumentError, require_not_none
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
    to_decimal,
)
from dimvalue.units.currency import Currency


class CurrencyValue:
    """
    An amount of money. The amount is stored without its sign and without
    trailing zeros.

    Raises
    ------
    NullArgumentError
        ``currency`` or ``value`` is None.
    EmptyArgumentError
        ``value`` is a blank string.
    NumberFormatError
        ``value`` is not a finite numeral.
    """

    __slots__ = ("_currency", "_value")

    def __init__(self, currency: Currency, value: Numeric) -> None:
        require_not_none(currency, "unit")
        if not isinstance(currency, Currency):
            raise TypeError(f"unit must be a Currency, got {currency!r}")
        self._currency = currency
        self._value = canonical(to_decimal(value, "value").copy_abs())

    @property
    def currency(self) -> Currency:
        return self._currency

    unit = currency

    @property
    def base_value(self) -> Decimal:
        return self._value

    def value(self) -> Decimal:
        return self._value

    # --- Copies ---
    def copy(self, currency: Currency | None = None, conversion_factor: Numeric | None = None) -> CurrencyValue:
        """
        Without arguments, a copy of this amount. With a target ``currency``,
        the amount exchanged at ``conversion_factor`` (target units per unit
        of this currency).
        """
        if currency is None:
            return CurrencyValue(self._currency, self._value)
        factor = to_decimal(require_not_none(conversion_factor, "conversion_factor"), "conversion_factor")
        return CurrencyValue(currency, MATH_CONTEXT.multiply(self._value, factor))

    def __copy__(self) -> CurrencyValue:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> CurrencyValue:
        return self.copy()

    # --- Equality & ordering ---
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self._currency is other._currency and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self._currency))

    def compare_to(self, other: CurrencyValue) -> int:
        require_not_none(other, "other")
        if self._currency is not other._currency:
            raise InvalidArgumentError("Currency differs")
        if self._value < other._value:
            return -1
        return 1 if self._value > other._value else 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, CurrencyValue):
            return NotImplemented
        return self.compare_to(other) >= 0

    # --- Rendering ---
    def _symbol(self, use_symbol: bool) -> str:
        return self._currency.symbol if use_symbol else self._currency.code

    def to_string(
        self,
        locale: LocaleLike = None,
        width: int = -1,
        precision: int | None = None,
        use_symbol: bool = False,
    ) -> str:
        """
        ``"<amount> <code>"``, or ``"<amount> <symbol>"`` with ``use_symbol``.

        ``precision`` defaults to the currency's fraction digits; a negative
        precision renders the exact amount.
        """
        if precision is None:
            precision = self._currency.default_fraction_digits
        numeral = plain_numeral(self._value) if precision < 0 else fixed_numeral(self._value, precision)
        return compose(resolve_locale(locale).localize(numeral), self._symbol(use_symbol), width)

    def format_to(
        self,
        width: int = -1,
        precision: int | None = None,
        locale: LocaleLike = None,
        left_justify: bool = False,
        use_symbol: bool = False,
    ) -> str:
        return justify(self.to_string(locale, width, precision, use_symbol), width, left_justify)

    def to_string_with(self, template: str, locale: LocaleLike = None, use_symbol: bool = False) -> str:
        require_not_none(template, "template")
        return printf(template, (self._value, self._symbol(use_symbol)), locale)

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        left, alternate, width, precision = parse_format_spec(format_spec)
        return self.format_to(width, precision, None, left, alternate)

    def __str__(self) -> str:
        return self.to_string(ROOT)

    def __repr__(self) -> str:
        return f"CurrencyValue({self._currency.name}, '{plain_numeral(self._value)}')"


__all__ = ["CurrencyValue"]
