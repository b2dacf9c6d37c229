"""
dimvalue: arbitrary-precision dimensioned values for Python.

A dimensioned value pairs a decimal magnitude with a unit of a closed unit
family (length, mass, time, temperature, ...). Values convert between the
units of their family, compare on a canonical magnitude, render with
locale-aware decimal separators and round-trip through the text form
``"<number> <symbol>"``.

This module exposes a minimal, stable public API. Unit families, value types
and codecs are imported lazily on first attribute access.
"""

import logging
from importlib import import_module
from importlib import metadata as _metadata
from typing import Any

__author__ = "dimvalue contributors"
__license__ = "MIT"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to pyproject.toml for local dev.
try:
    __version__ = _metadata.version("dimvalue")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

_LAZY = {
    "DimensionedValue": "dimvalue.core.value",
    "DimensionedValueCodec": "dimvalue.core.codec",
    "codec_for": "dimvalue.core.codec",
    "Dimension": "dimvalue.core.dimension",
    "Locale": "dimvalue.core.formatting",
    "get_default_locale": "dimvalue.core.formatting",
    "set_default_locale": "dimvalue.core.formatting",
    "DimensionedValueError": "dimvalue.core.errors",
    "Length": "dimvalue.units",
    "Area": "dimvalue.units",
    "Volume": "dimvalue.units",
    "Mass": "dimvalue.units",
    "Time": "dimvalue.units",
    "Speed": "dimvalue.units",
    "Pressure": "dimvalue.units",
    "Force": "dimvalue.units",
    "Energy": "dimvalue.units",
    "Power": "dimvalue.units",
    "DataSize": "dimvalue.units",
    "Temperature": "dimvalue.units",
    "Currency": "dimvalue.units",
    "WindForce": "dimvalue.units",
    "LengthValue": "dimvalue.values",
    "AreaValue": "dimvalue.values",
    "VolumeValue": "dimvalue.values",
    "MassValue": "dimvalue.values",
    "TimeValue": "dimvalue.values",
    "SpeedValue": "dimvalue.values",
    "PressureValue": "dimvalue.values",
    "ForceValue": "dimvalue.values",
    "EnergyValue": "dimvalue.values",
    "PowerValue": "dimvalue.values",
    "DataSizeValue": "dimvalue.values",
    "TemperatureValue": "dimvalue.values",
    "CurrencyValue": "dimvalue.values",
}


def __getattr__(name: str) -> Any:
    module = _LAZY.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module), name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(_LAZY))


# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__", *_LAZY]
