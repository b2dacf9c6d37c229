from typing import TYPE_CHECKING, Any

from dimvalue.units.currency import Currency
from dimvalue.units.families import (
    Area,
    DataSize,
    Energy,
    Force,
    Length,
    Mass,
    Power,
    Pressure,
    Speed,
    Time,
    Volume,
)
from dimvalue.units.temperature import Temperature

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from dimvalue.units.wind_force import WindForce

# Every unit family shipped with the package, in declaration order.
FAMILIES = (
    Length,
    Area,
    Volume,
    Mass,
    Time,
    Speed,
    Pressure,
    Force,
    Energy,
    Power,
    DataSize,
    Temperature,
)


def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. ``WindForce`` depends on the value core, which is
    only imported when the Beaufort scale is first used.
    """
    if name == "WindForce":
        from dimvalue.units.wind_force import WindForce  # local import
        return WindForce
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + ["WindForce"])


__all__ = [
    "FAMILIES",
    "Length",
    "Area",
    "Volume",
    "Mass",
    "Time",
    "Speed",
    "Pressure",
    "Force",
    "Energy",
    "Power",
    "DataSize",
    "Temperature",
    "Currency",
    "WindForce",
]
