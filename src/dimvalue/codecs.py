"""
Ready-made codecs, one per shipped value type::

    >>> from dimvalue.codecs import LENGTH
    >>> LENGTH.parse("15 m")
    LengthValue(METER, '15')
"""

from dimvalue.core.codec import DimensionedValueCodec, codec_for
from dimvalue.values import (
    AreaValue,
    DataSizeValue,
    EnergyValue,
    ForceValue,
    LengthValue,
    MassValue,
    PowerValue,
    PressureValue,
    SpeedValue,
    TemperatureValue,
    TimeValue,
    VolumeValue,
)

AREA = codec_for(AreaValue)
DATA_SIZE = codec_for(DataSizeValue)
ENERGY = codec_for(EnergyValue)
FORCE = codec_for(ForceValue)
LENGTH = codec_for(LengthValue)
MASS = codec_for(MassValue)
POWER = codec_for(PowerValue)
PRESSURE = codec_for(PressureValue)
SPEED = codec_for(SpeedValue)
TEMPERATURE = codec_for(TemperatureValue)
TIME = codec_for(TimeValue)
VOLUME = codec_for(VolumeValue)

ALL: tuple[DimensionedValueCodec, ...] = (
    AREA,
    DATA_SIZE,
    ENERGY,
    FORCE,
    LENGTH,
    MASS,
    POWER,
    PRESSURE,
    SPEED,
    TEMPERATURE,
    TIME,
    VOLUME,
)

__all__ = [
    "AREA",
    "DATA_SIZE",
    "ENERGY",
    "FORCE",
    "LENGTH",
    "MASS",
    "POWER",
    "PRESSURE",
    "SPEED",
    "TEMPERATURE",
    "TIME",
    "VOLUME",
    "ALL",
]
