"""
Concrete value types. Importing this package registers every type with the
default factory registry.
"""

from dimvalue.values.currency import CurrencyValue
from dimvalue.values.derived import AreaValue, SpeedValue, VolumeValue
from dimvalue.values.simple import (
    DataSizeValue,
    EnergyValue,
    ForceValue,
    LengthValue,
    MassValue,
    PowerValue,
    PressureValue,
)
from dimvalue.values.temperature import TemperatureValue
from dimvalue.values.time import TimeValue

__all__ = [
    "AreaValue",
    "CurrencyValue",
    "DataSizeValue",
    "EnergyValue",
    "ForceValue",
    "LengthValue",
    "MassValue",
    "PowerValue",
    "PressureValue",
    "SpeedValue",
    "TemperatureValue",
    "TimeValue",
    "VolumeValue",
]
