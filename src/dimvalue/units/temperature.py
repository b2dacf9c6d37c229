"""
dimvalue.units.temperature
==========================

Temperature scales. They differ from the kelvin by an offset as well as a
factor, so every member carries an explicit ``(from_kelvin, to_kelvin)``
function pair instead of a single conversion factor.

The functions use plain operators, so they follow the active decimal context;
the conversions run them under ``MATH_CONTEXT``, widened as far as the
operand needs. The ``from_kelvin`` direction is exact for every scale
except Newton.
"""

from __future__ import annotations

from decimal import Decimal

from dimvalue.core.dimension import DEFAULT_PRECISION as _P
from dimvalue.core.dimension import FunctionDimension

# 0 °C in kelvin.
ICE_POINT = Decimal("273.15")

_V3 = Decimal(3)
_V5 = Decimal(5)
_V9 = Decimal(9)
_V32 = Decimal(32)
_V100 = Decimal(100)
_V0p525 = Decimal("0.525")
_V0p8 = Decimal("0.8")
_V1p5 = Decimal("1.5")
_V7p5 = Decimal("7.5")


def _above_ice(k: Decimal) -> Decimal:
    return k - ICE_POINT


def _kelvin(delta: Decimal) -> Decimal:
    return delta + ICE_POINT


# --- Celsius ---
def celsius_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k)


def celsius_to_kelvin(c: Decimal) -> Decimal:
    return _kelvin(c)


# --- Fahrenheit: (K - 273.15) * 9/5 + 32 ---
def fahrenheit_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k) * _V9 / _V5 + _V32


def fahrenheit_to_kelvin(f: Decimal) -> Decimal:
    return _kelvin((f - _V32) * _V5 / _V9)


# --- Rankine: K * 9/5 ---
def rankine_from_kelvin(k: Decimal) -> Decimal:
    return k * _V9 / _V5


def rankine_to_kelvin(r: Decimal) -> Decimal:
    return r * _V5 / _V9


# --- Delisle ---
def delisle_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k) * _V1p5 - _V100


def delisle_to_kelvin(d: Decimal) -> Decimal:
    return _kelvin((d + _V100) / _V1p5)


# --- Réaumur: (K - 273.15) * 0.8 ---
def reaumur_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k) * _V0p8


def reaumur_to_kelvin(r: Decimal) -> Decimal:
    return _kelvin(r / _V0p8)


# --- Newton: (K - 273.15) / 3 ---
def newton_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k) / _V3


def newton_to_kelvin(n: Decimal) -> Decimal:
    return _kelvin(n * _V3)


# --- Rømer: (K - 273.15) * 0.525 + 7.5 ---
def romer_from_kelvin(k: Decimal) -> Decimal:
    return _above_ice(k) * _V0p525 + _V7p5


def romer_to_kelvin(r: Decimal) -> Decimal:
    return _kelvin((r - _V7p5) / _V0p525)


class Temperature(FunctionDimension):
    KELVIN = (None, None, "K", 2)
    CELSIUS = (celsius_from_kelvin, celsius_to_kelvin, "C", 1, "°C")
    FAHRENHEIT = (fahrenheit_from_kelvin, fahrenheit_to_kelvin, "F", _P, "°F")
    RANKINE = (rankine_from_kelvin, rankine_to_kelvin, "Ra", 1, "°Ra")
    DELISLE = (delisle_from_kelvin, delisle_to_kelvin, "De", 1, "°De")
    REAUMUR = (reaumur_from_kelvin, reaumur_to_kelvin, "Re", _P, "°Ré")
    NEWTON = (newton_from_kelvin, newton_to_kelvin, "N", _P, "°N")
    ROMER = (romer_from_kelvin, romer_to_kelvin, "Ro", _P, "°Rø")

    @property
    def base_unit(self) -> Temperature:
        return Temperature.KELVIN


__all__ = [
    "ICE_POINT",
    "Temperature",
]
