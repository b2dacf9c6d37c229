"""
dimvalue.units.currency
=======================

ISO 4217 currencies with their display symbol and the number of fraction
digits used when an amount is rendered without an explicit precision.

Currencies are not a unit family: there is no fixed conversion between
them, so exchanges always take an explicit factor.
"""

from __future__ import annotations

from enum import Enum

from dimvalue.core.errors import UnknownUnitError, require_not_empty


class Currency(Enum):
    AUD = ("AUD", "A$", 2)
    BRL = ("BRL", "R$", 2)
    CAD = ("CAD", "CA$", 2)
    CHF = ("CHF", "CHF", 2)
    CNY = ("CNY", "CN¥", 2)
    CZK = ("CZK", "Kč", 2)
    DKK = ("DKK", "kr.", 2)
    EUR = ("EUR", "€", 2)
    GBP = ("GBP", "£", 2)
    HKD = ("HKD", "HK$", 2)
    INR = ("INR", "₹", 2)
    JPY = ("JPY", "¥", 0)
    KRW = ("KRW", "₩", 0)
    KWD = ("KWD", "KD", 3)
    MXN = ("MXN", "MX$", 2)
    NOK = ("NOK", "kr", 2)
    NZD = ("NZD", "NZ$", 2)
    PLN = ("PLN", "zł", 2)
    SEK = ("SEK", "kr", 2)
    SGD = ("SGD", "S$", 2)
    USD = ("USD", "$", 2)
    ZAR = ("ZAR", "R", 2)

    def __init__(self, code: str, symbol: str, fraction_digits: int) -> None:
        self._code = code
        self._symbol = symbol
        self._fraction_digits = fraction_digits

    @property
    def code(self) -> str:
        return self._code

    @property
    def symbol(self) -> str:
        return self._symbol

    @property
    def default_fraction_digits(self) -> int:
        return self._fraction_digits

    @classmethod
    def for_code(cls, code: str) -> Currency:
        """Look up a currency by its (case-insensitive) ISO code."""
        require_not_empty(code, "code")
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise UnknownUnitError(code) from None


__all__ = ["Currency"]
