import copy
from decimal import Decimal
from fractions import Fraction

import pytest

from dimvalue.core.errors import (
    EmptyArgumentError,
    InvalidArgumentError,
    NullArgumentError,
    NumberFormatError,
)
from dimvalue import codecs
from dimvalue.core.formatting import ENGLISH, FRENCH, GERMAN
from dimvalue.core.value import DimensionedValue, accept_all, non_negative
from dimvalue.units import Area, Length, Mass, Temperature
from dimvalue.values import AreaValue, LengthValue, MassValue, TemperatureValue

M = Length.METER
CM = Length.CENTIMETER
KM = Length.KILOMETER

SHIPPED_TYPES = [codec.value_type for codec in codecs.ALL]


def _type_id(value_type):
    return value_type.__name__


class Rod(LengthValue):
    __slots__ = ()


# -------------------------------
# construction
# -------------------------------

@pytest.mark.parametrize("raw", [15, "15", Decimal("15.000"), 15.0, Fraction(30, 2)])
def test_construct_from_supported_numbers(raw):
    v = LengthValue(M, raw)
    assert v.value() == 15
    assert v.base_value == 15
    assert v.unit is M
    assert v.base_unit is M


def test_canonical_magnitude_is_in_base_unit():
    v = LengthValue(CM, 150)
    assert v.base_value == Decimal("1.5")
    assert str(v.base_value) == "1.5"
    assert v.value() == 150


def test_sign_is_dropped():
    assert LengthValue(M, -3) == LengthValue(M, 3)
    assert LengthValue(M, -3).base_value == 3


def test_construct_requires_unit():
    with pytest.raises(NullArgumentError) as exc:
        LengthValue(None, 1)
    assert exc.value.name == "unit"


def test_construct_requires_value():
    with pytest.raises(NullArgumentError) as exc:
        LengthValue(M, None)
    assert exc.value.name == "value"


def test_construct_rejects_empty_string():
    with pytest.raises(EmptyArgumentError):
        LengthValue(M, "")


def test_construct_rejects_bad_numeral():
    with pytest.raises(NumberFormatError):
        LengthValue(M, "twelve")


def test_construct_rejects_foreign_unit():
    with pytest.raises(TypeError):
        LengthValue(Mass.KILOGRAM, 1)


@pytest.mark.parametrize("value_type", SHIPPED_TYPES, ids=_type_id)
def test_every_type_rejects_missing_arguments(value_type):
    for unit in value_type.dimension:
        with pytest.raises(NullArgumentError) as exc:
            value_type(None, 1)
        assert exc.value.name == "unit"
        with pytest.raises(NullArgumentError) as exc:
            value_type(unit, None)
        assert exc.value.name == "value"
        with pytest.raises(EmptyArgumentError):
            value_type(unit, "")
        with pytest.raises(EmptyArgumentError):
            value_type(unit, "  ")
        with pytest.raises(NumberFormatError):
            value_type(unit, "twelve")


def test_base_class_is_not_bound():
    with pytest.raises(TypeError):
        DimensionedValue(M, 1)


def test_validator_override():
    with pytest.raises(InvalidArgumentError):
        LengthValue(M, 5, validator=lambda unit, value: value < 1)
    assert LengthValue(M, "0.5", validator=lambda unit, value: value < 1).value() == Decimal("0.5")


def test_validator_receives_signed_base_value():
    seen = []

    def spy(unit, value):
        seen.append((unit, value))
        return True

    LengthValue(CM, -200, validator=spy)
    assert seen == [(CM, Decimal(-2))]


def test_stock_validators():
    assert accept_all(M, Decimal(-1))
    assert non_negative(M, Decimal(0))
    assert not non_negative(M, Decimal("-0.001"))


# -------------------------------
# display unit
# -------------------------------

def test_set_unit_keeps_equality_and_hash():
    a = LengthValue(M, 1)
    b = a.copy()
    b.set_unit(CM)
    assert a == b
    assert hash(a) == hash(b)
    assert b.value() == 100
    assert a.value() == 1


@pytest.mark.parametrize("value_type", SHIPPED_TYPES, ids=_type_id)
def test_copy_to_any_unit_keeps_equality_and_hash(value_type):
    units = list(value_type.dimension)
    for unit in units:
        value = value_type(unit, "15")
        for other in units:
            moved = value.copy(other)
            assert moved == value, f"{unit.name} -> {other.name}"
            assert hash(moved) == hash(value)
            assert moved.unit is other
            assert value.unit is unit


def test_set_unit_validates_argument():
    v = LengthValue(M, 1)
    with pytest.raises(NullArgumentError):
        v.set_unit(None)
    with pytest.raises(TypeError):
        v.set_unit(Mass.KILOGRAM)


def test_convert():
    v = LengthValue(KM, 1)
    assert v.convert(M) == 1000
    assert v.convert(Length.MILE) == v.copy(Length.MILE).value()
    with pytest.raises(TypeError):
        v.convert(Mass.GRAM)


def test_copy_with_unit_is_independent():
    a = LengthValue(M, 1)
    c = a.copy(KM)
    assert c.unit is KM
    assert a.unit is M
    assert type(c) is LengthValue
    assert c == a


def test_copy_protocol():
    a = LengthValue(M, 2)
    shallow = copy.copy(a)
    deep = copy.deepcopy(a)
    assert shallow == a and deep == a
    assert shallow is not a and deep is not a
    deep.set_unit(CM)
    assert a.unit is M


# -------------------------------
# arithmetic
# -------------------------------

def test_multiply_keeps_type_and_unit():
    v = LengthValue(CM, 50) * 2
    assert type(v) is LengthValue
    assert v.unit is CM
    assert v == LengthValue(M, 1)
    assert (2 * LengthValue(CM, 50)) == v


def test_divide():
    v = LengthValue(M, 1) / 4
    assert v.value() == Decimal("0.25")
    assert LengthValue(M, 1).divide("0.5").value() == 2


def test_divide_by_zero():
    with pytest.raises(InvalidArgumentError):
        LengthValue(M, 1).divide(0)
    with pytest.raises(InvalidArgumentError):
        LengthValue(M, 1) / Decimal("0.0")


def test_operators_reject_non_numbers():
    v = LengthValue(M, 1)
    with pytest.raises(TypeError):
        v * "2"
    with pytest.raises(TypeError):
        v / True
    with pytest.raises(TypeError):
        v + 1


def test_sum():
    total = LengthValue(M, 1) + LengthValue(CM, 50)
    assert total.unit is M
    assert total.value() == Decimal("1.5")
    assert LengthValue(M, 1).sum(LengthValue(CM, 50), CM).value() == 150


def test_sum_rejects_other_family_and_none():
    with pytest.raises(TypeError):
        LengthValue(M, 1) + MassValue(Mass.KILOGRAM, 1)
    with pytest.raises(NullArgumentError):
        LengthValue(M, 1).sum(None)


def test_subclass_arithmetic_keeps_subclass():
    rod = Rod(M, 2)
    assert type(rod * 2) is Rod
    assert type(3 * rod) is Rod
    assert type(rod / 4) is Rod
    assert type(rod + LengthValue(CM, 50)) is Rod
    assert type(rod.sum(LengthValue(M, 1), CM)) is Rod
    assert (rod * 2).unit is M
    assert rod * 2 == LengthValue(M, 4)
    assert type(LengthValue(M, 1) + rod) is LengthValue
    assert type(LengthValue(M, 1) * 2) is LengthValue


def test_arithmetic_applies_validator():
    with pytest.raises(InvalidArgumentError):
        AreaValue(Area.SQUARE_METER, 1) * -1


# -------------------------------
# equality & ordering
# -------------------------------

def test_equality_across_units():
    assert LengthValue(M, 1) == LengthValue(CM, 100)
    assert len({LengthValue(M, 1), LengthValue(CM, 100), LengthValue(KM, "0.001")}) == 1


def test_inequality_across_families():
    assert LengthValue(M, 1) != MassValue(Mass.KILOGRAM, 1)
    assert LengthValue(M, 1) != 1


def test_ordering():
    small, big = LengthValue(CM, 99), LengthValue(M, 1)
    assert small < big and small <= big
    assert big > small and big >= small
    assert sorted([big, small]) == [small, big]
    assert small.compare_to(big) == -1
    assert big.compare_to(small) == 1
    assert big.compare_to(LengthValue(CM, 100)) == 0


def test_ordering_across_families_raises():
    with pytest.raises(TypeError):
        LengthValue(M, 1) < MassValue(Mass.KILOGRAM, 1)
    with pytest.raises(TypeError):
        LengthValue(M, 1).compare_to(MassValue(Mass.KILOGRAM, 1))
    with pytest.raises(TypeError):
        LengthValue(M, 1) < 2


# -------------------------------
# rendering
# -------------------------------

def test_str_is_exact_root_rendering():
    assert str(LengthValue(M, 15)) == "15 m"
    assert str(LengthValue(M, "1.50")) == "1.5 m"
    assert str(LengthValue(Length.NANOMETER, 1).copy(M)) == "0.000000001 m"


def test_to_string_precision_and_width():
    v = LengthValue(M, 15)
    assert v.to_string(precision=2) == "15.00 m"
    assert v.to_string(width=8) == "    15 m"
    assert v.to_string(width=2) == "15 m"


def test_to_string_printing_symbol():
    assert AreaValue(Area.SQUARE_METER, 2).to_string(use_printing_symbol=True) == "2 m²"
    assert AreaValue(Area.SQUARE_METER, 2).to_string() == "2 m^2"


def test_to_string_locale():
    v = LengthValue(M, "1.5")
    assert v.to_string("de") == "1,5 m"
    assert v.to_string(GERMAN, precision=2) == "1,50 m"


def test_to_string_named_locales():
    v = LengthValue(M, "1.5")
    assert v.to_string(FRENCH) == "1,5 m"
    assert v.to_string(ENGLISH) == "1.5 m"
    assert v.to_string(FRENCH, precision=3) == "1,500 m"


def test_rounded_to_zero_has_no_sign():
    t = TemperatureValue(Temperature.CELSIUS, "-0.04")
    assert t.to_string(precision=0) == "0 C"
    assert t.to_string(precision=1) == "0.0 C"
    assert f"{t:.0}" == "0 C"
    assert t.to_string(precision=2) == "-0.04 C"


def test_default_locale_applies_to_to_string_not_str(default_locale):
    default_locale("de")
    v = LengthValue(M, "1.5")
    assert v.to_string() == "1,5 m"
    assert str(v) == "1.5 m"


def test_format_to():
    v = LengthValue(M, 15)
    assert v.format_to(width=8) == "    15 m"
    assert v.format_to(width=8, left_justify=True) == "15 m    "
    assert v.format_to(precision=1, locale="de") == "15,0 m"


def test_dunder_format():
    v = LengthValue(M, "1.25")
    assert f"{v}" == "1.25 m"
    assert f"{v:.1}" == "1.3 m"
    assert f"{v:10.2}" == "    1.25 m"
    assert f"{v:-10.2}" == "1.25 m    "
    # without a precision the unit's default precision applies
    assert f"{v:8}" == "   1.3 m"


def test_dunder_format_alternate_uses_printing_symbol():
    assert f"{AreaValue(Area.SQUARE_METER, 2):#}" == "2.0 m²"


def test_dunder_format_rejects_garbage():
    with pytest.raises(ValueError):
        format(LengthValue(M, 1), ".2f")


def test_to_string_with_template():
    v = LengthValue(M, "1.005")
    assert v.to_string_with("%.2f %s", "") == "1.01 m"
    assert v.to_string_with("%.2f %s", "de") == "1,01 m"
    assert AreaValue(Area.SQUARE_METER, 1).to_string_with("%.0f %s", "", use_printing_symbol=True) == "1 m²"


def test_repr():
    assert repr(LengthValue(M, 15)) == "LengthValue(METER, '15')"
    assert repr(LengthValue(M, 1).copy(CM)) == "LengthValue(CENTIMETER, '100')"
