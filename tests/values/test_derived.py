from decimal import Decimal

import pytest

from dimvalue.core.errors import InvalidArgumentError, NullArgumentError
from dimvalue.units import Area, Length, Mass, Speed, Time, Volume
from dimvalue.values import (
    AreaValue,
    LengthValue,
    MassValue,
    SpeedValue,
    TimeValue,
    VolumeValue,
)

M = Length.METER


def meters(x):
    return LengthValue(M, x)


# -------------------------------
# AreaValue
# -------------------------------

def test_area_from_lengths():
    area = AreaValue.from_lengths(Area.SQUARE_METER, meters(2), meters(3))
    assert area == AreaValue(Area.SQUARE_METER, 6)
    assert area.unit is Area.SQUARE_METER


def test_area_is_shown_in_requested_unit():
    area = AreaValue.from_lengths(Area.SQUARE_CENTIMETER, meters(2), LengthValue(Length.CENTIMETER, 300))
    assert area.unit is Area.SQUARE_CENTIMETER
    assert area.value() == 60000


def test_area_rejects_negative_values():
    with pytest.raises(InvalidArgumentError):
        AreaValue(Area.SQUARE_METER, -1)
    assert AreaValue(Area.SQUARE_METER, 0).value() == 0


def test_area_operands_are_checked():
    with pytest.raises(NullArgumentError) as exc:
        AreaValue.from_lengths(Area.SQUARE_METER, None, meters(1))
    assert exc.value.name == "length"
    with pytest.raises(NullArgumentError) as exc:
        AreaValue.from_lengths(Area.SQUARE_METER, meters(1), None)
    assert exc.value.name == "width"
    with pytest.raises(NullArgumentError):
        AreaValue.from_lengths(None, meters(1), meters(1))
    with pytest.raises(TypeError):
        AreaValue.from_lengths(Area.SQUARE_METER, meters(1), MassValue(Mass.KILOGRAM, 1))


# -------------------------------
# VolumeValue
# -------------------------------

def test_volume_from_lengths():
    volume = VolumeValue.from_lengths(Volume.LITER, meters(1), meters(1), LengthValue(Length.CENTIMETER, 50))
    assert volume.unit is Volume.LITER
    assert volume.value() == 500
    assert volume.base_value == Decimal("0.5")


def test_volume_from_area():
    volume = VolumeValue.from_area(Volume.LITER, AreaValue(Area.SQUARE_METER, 2), LengthValue(Length.CENTIMETER, 50))
    assert volume == VolumeValue(Volume.CUBIC_METER, 1)
    assert volume.value() == 1000


def test_volume_operands_are_checked():
    with pytest.raises(NullArgumentError) as exc:
        VolumeValue.from_lengths(Volume.LITER, meters(1), meters(1), None)
    assert exc.value.name == "height"
    with pytest.raises(NullArgumentError) as exc:
        VolumeValue.from_area(Volume.LITER, None, meters(1))
    assert exc.value.name == "area"
    with pytest.raises(TypeError):
        VolumeValue.from_area(Volume.LITER, meters(1), meters(1))


# -------------------------------
# SpeedValue
# -------------------------------

def test_speed_from_distance():
    speed = SpeedValue.from_distance(
        Speed.KILOMETER_PER_HOUR,
        LengthValue(Length.KILOMETER, 100),
        TimeValue(Time.HOUR, 2),
    )
    assert speed.unit is Speed.KILOMETER_PER_HOUR
    assert speed.to_string(precision=2) == "50.00 km/h"
    assert abs(speed.value() - 50) < Decimal("1E-90")


def test_speed_in_base_unit_is_exact():
    speed = SpeedValue.from_distance(Speed.METER_PER_SECOND, meters(100), TimeValue(Time.SECOND, 8))
    assert speed.value() == Decimal("12.5")


def test_speed_rejects_zero_time():
    with pytest.raises(InvalidArgumentError):
        SpeedValue.from_distance(Speed.METER_PER_SECOND, meters(1), TimeValue(Time.SECOND, 0))


def test_speed_operands_are_checked():
    with pytest.raises(NullArgumentError) as exc:
        SpeedValue.from_distance(Speed.METER_PER_SECOND, None, TimeValue(Time.SECOND, 1))
    assert exc.value.name == "distance"
    with pytest.raises(TypeError):
        SpeedValue.from_distance(Speed.METER_PER_SECOND, meters(1), meters(1))
