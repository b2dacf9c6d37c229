# dimvalue.core.dimension

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Iterator

from dimvalue.core.conversion import (
    Conversion,
    DecimalFunction,
    FunctionConversion,
    LinearConversion,
)
from dimvalue.core.errors import UnknownUnitError, require_not_empty

# Mantissa digits used when a unit does not declare its own precision.
DEFAULT_PRECISION = 1

# --- Core object -------------------------------------------------------------

class Dimension(Enum):
    """
    One unit of a closed family of units (e.g. ``Length.METER``).

    A family is an ``Enum`` subclass; each member carries its symbol, its
    conversion to the family's base unit and its default display precision
    as data. Members are singletons and compare by identity.

    Subclasses provide the conversion strategy (see :class:`LinearDimension`
    and :class:`FunctionDimension`) and override :attr:`base_unit`.
    """

    _conversion: Conversion
    _symbol: str
    _precision: int
    _printing_symbol: str | None

    @property
    def base_unit(self) -> Dimension:
        raise NotImplementedError(f"{type(self).__name__} does not define a base unit")

    @property
    def conversion(self) -> Conversion:
        return self._conversion

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def printing_symbol(self) -> str:
        """Prettified symbol (``m²``, ``°C``); falls back to :attr:`symbol`."""
        return self._printing_symbol or self._symbol

    @property
    def precision(self) -> int:
        return self._precision

    @property
    def display_name(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_base_unit(self) -> bool:
        return self is self.base_unit

    def to_base(self, value: Decimal) -> Decimal:
        return self._conversion.to_base(value)

    def from_base(self, value: Decimal) -> Decimal:
        return self._conversion.from_base(value)

    # --- Lookup ---
    @classmethod
    def for_unit(cls, symbol: str) -> Dimension:
        """
        Return the member whose symbol is exactly ``symbol``.

        Raises
        ------
        NullArgumentError / EmptyArgumentError
            ``symbol`` is None or blank.
        UnknownUnitError
            No member of this family uses ``symbol``.
        """
        require_not_empty(symbol, "symbol")
        for unit in cls:
            if unit.symbol == symbol:
                return unit
        raise UnknownUnitError(symbol)

    @classmethod
    def symbols(cls) -> tuple[str, ...]:
        return tuple(unit.symbol for unit in cls)

    @classmethod
    def units(cls) -> Iterator[Dimension]:
        return iter(cls)


class LinearDimension(Dimension):
    """
    Family whose units convert by a single factor.

    Member values are ``(factor, symbol[, precision[, printing_symbol]])``;
    ``factor`` is the number of units that make one base unit, so a
    centimeter has the factor ``100`` when the base unit is the meter. A
    ratio string (``"1/0.3048"``) or a :class:`LinearConversion` is accepted
    where the factor has no finite decimal expansion.
    """

    def __init__(
        self,
        factor: Decimal | str | int | LinearConversion,
        symbol: str,
        precision: int = DEFAULT_PRECISION,
        printing_symbol: str | None = None,
    ) -> None:
        if isinstance(factor, LinearConversion):
            self._conversion = factor
        else:
            self._conversion = LinearConversion(factor)
        self._symbol = symbol
        self._precision = precision
        self._printing_symbol = printing_symbol

    @property
    def factor(self) -> Decimal:
        return self._conversion.factor


class FunctionDimension(Dimension):
    """
    Family whose units need an explicit forward/backward function pair.

    Member values are ``(from_base, to_base, symbol[, precision[,
    printing_symbol]])``. The base unit passes ``None`` for both functions.
    """

    def __init__(
        self,
        from_base: DecimalFunction | None,
        to_base: DecimalFunction | None,
        symbol: str,
        precision: int = DEFAULT_PRECISION,
        printing_symbol: str | None = None,
    ) -> None:
        if from_base is None or to_base is None:
            self._conversion = FunctionConversion(_identity, _identity, identity=True)
        else:
            self._conversion = FunctionConversion(to_base, from_base)
        self._symbol = symbol
        self._precision = precision
        self._printing_symbol = printing_symbol


def _identity(value: Decimal) -> Decimal:
    return value


__all__ = [
    "DEFAULT_PRECISION",
    "Dimension",
    "LinearDimension",
    "FunctionDimension",
]
