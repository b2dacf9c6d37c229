"""
dimvalue.core.codec
===================

Bidirectional text codec for dimensioned values.

The canonical text form is ``"<decimal> <symbol>"``: a plain decimal numeral
(``.`` as the decimal point, no grouping), a run of whitespace and a unit
symbol of the value's family, e.g. ``"15 m"`` or ``"-273.15 C"``.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Generic, Optional, Type, TypeVar

from dimvalue.core.errors import InvalidFormatError
from dimvalue.core.formatting import ROOT, LocaleLike
from dimvalue.core.numbers import to_decimal
from dimvalue.core.value import DimensionedValue

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=DimensionedValue)

_WHITESPACE_RE = re.compile(r"\s+")


class DimensionedValueCodec(Generic[V]):
    """Parses and renders values of one concrete value type."""

    __slots__ = ("_value_type",)

    def __init__(self, value_type: Type[V]) -> None:
        if value_type.dimension is None:
            raise TypeError(f"{value_type.__name__} is not bound to a unit family")
        self._value_type = value_type

    @property
    def value_type(self) -> Type[V]:
        return self._value_type

    def parse(self, text: Optional[str]) -> Optional[V]:
        """
        Turn ``"<decimal> <symbol>"`` into a value; ``None`` passes through.

        Raises
        ------
        InvalidFormatError
            ``text`` is blank or does not consist of exactly two tokens.
        NumberFormatError
            The first token is not a decimal numeral.
        UnknownUnitError
            The second token is not a symbol of the family.
        """
        if text is None:
            return None

        parts = [p for p in _WHITESPACE_RE.split(text.strip()) if p]
        if len(parts) != 2:
            logger.debug("Rejecting %r: expected '<number> <symbol>'", text)
            raise InvalidFormatError(text)

        numeral, symbol = parts
        number = to_decimal(numeral, "value")
        unit = self._value_type.dimension.for_unit(symbol)
        return self._value_type._registry.new_instance(unit, number)

    def render(
        self,
        value: Optional[V],
        width: int = -1,
        precision: int = -1,
        locale: LocaleLike = ROOT,
        use_printing_symbol: bool = False,
    ) -> Optional[str]:
        """Render ``value``; the defaults produce the canonical text form."""
        if value is None:
            return None
        return value.to_string(locale, width, precision, use_printing_symbol)

    def __repr__(self) -> str:
        return f"DimensionedValueCodec({self._value_type.__name__})"


@lru_cache(maxsize=None)
def codec_for(value_type: Type[V]) -> DimensionedValueCodec[V]:
    """Shared codec instance for ``value_type``."""
    return DimensionedValueCodec(value_type)


__all__ = ["DimensionedValueCodec", "codec_for"]
