from decimal import Decimal
from fractions import Fraction

import pytest

from dimvalue.core.errors import (
    DimensionedValueError,
    EmptyArgumentError,
    NullArgumentError,
    NumberFormatError,
)
from dimvalue.core.numbers import (
    MATH_CONTEXT,
    canonical,
    fixed_numeral,
    normalized,
    plain_numeral,
    stripped,
    to_decimal,
)


# -------------------------------
# to_decimal
# -------------------------------

@pytest.mark.parametrize(
    "raw, expected",
    [
        (Decimal("1.50"), Decimal("1.50")),
        (15, Decimal(15)),
        (0.1, Decimal("0.1")),
        (Fraction(1, 4), Decimal("0.25")),
        ("1.5", Decimal("1.5")),
        ("-2E3", Decimal("-2000")),
    ],
)
def test_to_decimal_accepts_supported_types(raw, expected):
    assert to_decimal(raw) == expected


def test_to_decimal_none_names_argument():
    with pytest.raises(NullArgumentError) as exc:
        to_decimal(None, "height")
    assert exc.value.name == "height"


@pytest.mark.parametrize("raw", ["", "   ", "\t"])
def test_to_decimal_blank_string(raw):
    with pytest.raises(EmptyArgumentError):
        to_decimal(raw)


@pytest.mark.parametrize("raw", ["abc", "1,5", "NaN", "Infinity", "-inf", float("nan"), float("inf")])
def test_to_decimal_rejects_non_finite_and_garbage(raw):
    with pytest.raises(NumberFormatError):
        to_decimal(raw)


@pytest.mark.parametrize("raw", [True, [1], object()])
def test_to_decimal_rejects_unsupported_types(raw):
    with pytest.raises(TypeError):
        to_decimal(raw)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        to_decimal("abc")
    assert issubclass(NumberFormatError, DimensionedValueError)


# -------------------------------
# normalization
# -------------------------------

def test_normalized_strips_trailing_zeros():
    assert str(normalized(Decimal("1.500"))) == "1.5"


def test_normalized_negative_zero_is_zero():
    result = normalized(Decimal("-0.00"))
    assert result == 0
    assert not result.is_signed()


def test_stripped_keeps_every_digit():
    wide = Decimal("-273.1" + "0" * 140 + "5" + "000")
    result = stripped(wide)
    assert len(result.as_tuple().digits) == 145
    assert result == wide
    assert str(stripped(Decimal("1.500"))) == "1.5"
    assert not stripped(Decimal("-0E-3")).is_signed()


def test_canonical_keeps_one_hundred_digits():
    third = MATH_CONTEXT.divide(Decimal(1), Decimal(3))
    assert len(third.as_tuple().digits) == 128
    assert len(canonical(third).as_tuple().digits) == 100


# -------------------------------
# numerals
# -------------------------------

@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1E+2"), "100"),
        (Decimal("1.50"), "1.5"),
        (Decimal("1E-10"), "0.0000000001"),
        (Decimal("-273.15"), "-273.15"),
        (Decimal(0), "0"),
    ],
)
def test_plain_numeral_never_uses_exponents(value, expected):
    assert plain_numeral(value) == expected


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (Decimal("2.5"), 0, "3"),
        (Decimal("-273.15"), 0, "-273"),
        (Decimal("1.005"), 2, "1.01"),
        (Decimal("1E+2"), 2, "100.00"),
        (Decimal("3.14159"), 3, "3.142"),
        (Decimal("-0.004"), 2, "0.00"),
        (Decimal("-0.4"), 0, "0"),
    ],
)
def test_fixed_numeral_rounds_half_up(value, precision, expected):
    assert fixed_numeral(value, precision) == expected


def test_plain_numeral_does_not_round_wide_values():
    wide = "1." + "0" * 149 + "1"
    assert plain_numeral(Decimal(wide + "000")) == wide


def test_fixed_numeral_rejects_negative_precision():
    with pytest.raises(ValueError):
        fixed_numeral(Decimal(1), -1)
