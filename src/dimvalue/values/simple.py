"""Value types for the linear families that need nothing beyond the core."""

from __future__ import annotations

from dimvalue.core.value import DimensionedValue
from dimvalue.units.families import (
    DataSize,
    Energy,
    Force,
    Length,
    Mass,
    Power,
    Pressure,
)


class LengthValue(DimensionedValue, dimension=Length):
    __slots__ = ()


class MassValue(DimensionedValue, dimension=Mass):
    __slots__ = ()


class DataSizeValue(DimensionedValue, dimension=DataSize):
    __slots__ = ()


class EnergyValue(DimensionedValue, dimension=Energy):
    __slots__ = ()


class ForceValue(DimensionedValue, dimension=Force):
    __slots__ = ()


class PowerValue(DimensionedValue, dimension=Power):
    __slots__ = ()


class PressureValue(DimensionedValue, dimension=Pressure):
    __slots__ = ()


__all__ = [
    "LengthValue",
    "MassValue",
    "DataSizeValue",
    "EnergyValue",
    "ForceValue",
    "PowerValue",
    "PressureValue",
]
