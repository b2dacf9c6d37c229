# End-to-end behaviour of the public API, one test per documented example.

from decimal import Decimal

import pytest

from dimvalue import codecs
from dimvalue.core.errors import InvalidFormatError
from dimvalue.units import Length, Temperature, Time, Volume
from dimvalue.values import LengthValue, TemperatureValue, TimeValue, VolumeValue


def test_meter_shown_in_centimeters():
    v = LengthValue(Length.METER, 1)
    v.set_unit(Length.CENTIMETER)
    assert v.to_string(precision=0) == "100 cm"


def test_absolute_zero_in_celsius():
    t = TemperatureValue(Temperature.KELVIN, 0)
    assert t.convert(Temperature.CELSIUS) == Decimal("-273.15")
    t.set_unit(Temperature.CELSIUS)
    assert t.to_string(precision=0) == "-273 C"


def test_one_hour_in_seconds():
    assert TimeValue(Time.SECOND, 3600).convert(Time.HOUR) == 1


def test_cube_of_one_meter():
    side = LengthValue(Length.METER, 1)
    volume = VolumeValue.from_lengths(Volume.CUBIC_METER, side, side, side)
    assert volume == VolumeValue(Volume.CUBIC_METER, 1)
    assert str(volume) == "1 m^3"


def test_parse_and_render():
    assert codecs.LENGTH.render(codecs.LENGTH.parse("15 m")) == "15 m"


def test_parse_garbage():
    with pytest.raises(InvalidFormatError):
        codecs.LENGTH.parse("bogus")
