"""
dimvalue.units.families
=======================

Unit families whose units convert by a single factor.

Each member is ``(factor, symbol[, precision[, printing_symbol]])`` where
``factor`` is the number of units in one base unit. Units whose factor has
no finite decimal expansion give it as ``"1/<size in base units>"``.
Members without an explicit precision use ``DEFAULT_PRECISION``.
"""

from __future__ import annotations

from dimvalue.core.conversion import LinearConversion
from dimvalue.core.dimension import DEFAULT_PRECISION as _P
from dimvalue.core.dimension import LinearDimension


# ---------------------------------------------------------------------------
# Length
# ---------------------------------------------------------------------------
class Length(LinearDimension):
    ANGSTROM = ("1E10", "Å")
    NANOMETER = ("1E9", "nm")
    MICROMETER = ("1E6", "µm")
    PICA = ("1/0.0003527777777778", "pica", 1)
    MILLIMETER = ("1000", "mm")
    CENTIMETER = ("100", "cm", 1)
    INCH = ("1/0.0254", "in.")
    DECIMETER = ("10", "dm")
    FOOT = ("1/0.3048", "ft.")
    YARD = ("1/0.9144", "yd.")
    METER = ("1", "m", 1)
    FATHOM = ("1/1.852", "fth.")
    CABLE = ("1/185.2", "cbl.")
    KILOMETER = ("0.001", "km", 1)
    MILE = ("1/1609.344", "mi.")
    NAUTICAL_MILE = ("1/1852", "NM")
    ASTRONOMICAL_UNIT = ("1/149597870700", "AU", 1)
    LIGHTYEAR = ("1/9460730472580800", "ly")
    PARSEC = ("1/3.0857E16", "pc", 2)

    @property
    def base_unit(self) -> Length:
        return Length.METER


# ---------------------------------------------------------------------------
# Area
# ---------------------------------------------------------------------------
class Area(LinearDimension):
    SQUARE_MILLIMETER = ("1E6", "mm^2", _P, "mm²")
    SQUARE_CENTIMETER = ("1E4", "cm^2", 1, "cm²")
    SQUARE_INCH = ("1/0.00064516", "sqin")
    SQUARE_FOOT = ("1/0.09290304", "sqft")
    SQUARE_YARD = ("1/0.83612736", "yd^2", _P, "yd²")
    SQUARE_METER = ("1", "m^2", 1, "m²")
    AR = ("0.01", "a")
    MORGEN = ("0.0004", "Mg")
    ACRE = ("1/4046.8564224", "ac")
    HEKTAR = ("0.0001", "ha")
    SQUARE_KILOMETER = ("1E-6", "km^2", 3, "km²")
    SQUARE_MILE = ("1/2589988.110336", "sqmi")

    @property
    def base_unit(self) -> Area:
        return Area.SQUARE_METER


# ---------------------------------------------------------------------------
# Volume
# ---------------------------------------------------------------------------
class Volume(LinearDimension):
    CUBIC_MILLIMETER = ("1E9", "mm^3", _P, "mm³")
    MICRO_LITER = ("1E9", "µl")
    CUBIC_CENTIMETER = ("1E6", "cm^3", _P, "cm³")
    MILLI_LITER = ("1E6", "ml")
    CENTI_LITER = ("1E5", "cl")
    CUBIC_INCH = ("1/0.000016387064", "in^3", 1, "in³")
    FLUID_OUNCE_IMPERIAL = ("1/0.0000284130625", "floz")
    DECI_LITER = ("1E4", "dl")
    PINT_LIQUID_IMPERIAL = ("1/0.00056826128524935", "pt", 1)
    CUBIC_DECIMETER = ("1000", "dm^3", 1, "dm³")
    LITER = ("1000", "l", 1)
    BUCKET = ("100", "Eimer")
    US_GALLON = ("1/0.003785411784", "USGallon", 1, "US Gallon")
    GALLON = ("1/0.00454609", "gal", 1)
    CUBIC_FOOT = ("1/0.028316846592", "ft^3", _P, "ft³")
    HEKTO_LITER = ("10", "hl", 1)
    BARREL_OIL = ("1/0.158987294928", "barrel(oil)", _P, "barrel (oil)")
    IMPERIAL_BARREL = ("1/0.16365924", "barrel(imperial)", 1, "barrel (imperial)")
    CUBIC_YARD = ("1/0.764554857984", "yd^3", _P, "yd³")
    CUBIC_METER = ("1", "m^3", 3, "m³")
    FESTMETER = ("1", "Festmeter", 1)
    TON = ("1/14.084507", "ton")
    CUBIC_KILO_METER = ("1E-9", "km^3", 3, "km³")
    CUBIC_MILE = ("1/4168181825.4406", "mi^3", _P, "mi³")

    @property
    def base_unit(self) -> Volume:
        return Volume.CUBIC_METER


# ---------------------------------------------------------------------------
# Mass
# ---------------------------------------------------------------------------
class Mass(LinearDimension):
    MILLIGRAM = ("1E6", "mg")
    GRAIN = ("1/0.00006479891", "gr.")
    CARAT = ("5000", "ct")
    GRAM = ("1000", "g")
    DRAM = ("1/0.0017718451953125", "dr.")
    OUNCE = ("1/0.028349523125", "oz.")
    TROY_OUNCE = ("1/0.0311034768", "oz.tr.")
    POUND = ("1/0.45359237", "lb.")
    KILOGRAM = ("1", "kg")
    STONE = ("1/6.35029318", "st")
    SHORT_TON = ("1/907.18474", "to.")
    TON = ("0.001", "t")
    EARTH_MASS = ("1/5.9722E24", "EarthMass")
    SOLAR_MASS = ("1/1.989E30", "SolarMass")

    @property
    def base_unit(self) -> Mass:
        return Mass.KILOGRAM


# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------
class Time(LinearDimension):
    NANOSECOND = ("1E9", "ns")
    MICROSECOND = ("1E6", "µs")
    MILLISECOND = ("1000", "ms")
    SECOND = ("1", "s")
    MINUTE = ("1/60", "min")
    HOUR = ("1/3600", "h")
    HALF_DAY = ("1/43200", "d/2", _P, "½d")
    DAY = ("1/86400", "d")
    WEEK = ("1/604800", "w")
    FORTNIGHT = ("1/1209600", "fortnight")
    BANK_MONTH = ("1/2592000", "month30")
    MONTH = ("1/2629746", "month")
    BANK_YEAR = ("1/31104000", "yr360")
    # Tropical year, 365.24219 days.
    YEAR = ("1/31556925.216", "yr")
    SIMPLE_YEAR = ("1/31556952", "yrs")
    DECADE = ("1/315569520", "decade")
    CENTURY = ("1/3155695200", "century")

    @property
    def base_unit(self) -> Time:
        return Time.SECOND


# ---------------------------------------------------------------------------
# Speed
# ---------------------------------------------------------------------------
def _per(distance: Length, duration: Time) -> LinearConversion:
    return distance.conversion.per(duration.conversion)


class Speed(LinearDimension):
    ANGSTROM_PER_WEEK = (_per(Length.ANGSTROM, Time.WEEK), "Å/w")
    FEET_PER_SECOND = (_per(Length.FOOT, Time.SECOND), "fps")
    KNOT = (_per(Length.NAUTICAL_MILE, Time.HOUR), "kn")
    KILOMETER_PER_HOUR = (_per(Length.KILOMETER, Time.HOUR), "km/h")
    METER_PER_SECOND = ("1", "m/s")
    MILE_PER_HOUR = (_per(Length.MILE, Time.HOUR), "mph")

    @property
    def base_unit(self) -> Speed:
        return Speed.METER_PER_SECOND


# ---------------------------------------------------------------------------
# Pressure
# ---------------------------------------------------------------------------
class Pressure(LinearDimension):
    MILLI_PASCAL = ("1000", "mPa")
    PASCAL = ("1", "Pa")
    NEWTON_PER_SQUAREMETER = ("1", "N/m^2", _P, "N/m²")
    HEKTO_PASCAL = ("0.01", "hPa")
    MILLI_BAR = ("0.01", "mbar")
    TORR = ("1/133.322368421", "Torr")
    MILLIMETER_OF_MERCURY = ("1/133.322368421", "mmHg")
    INCH_OF_MERCURY = ("1/3386.3881578", "inHg")
    KILO_PASCAL = ("0.001", "kPa")
    PSI = ("1/6894.757293178", "psi")
    AT = ("1/98066.5", "at")
    BAR = ("0.00001", "bar")
    ATM = ("1/101325.2738", "atm")
    MEGA_PASCAL = ("1E-6", "MPa")
    NEWTON_PER_SQUAREMILLIMETER = ("1E-6", "N/mm^2", _P, "N/mm²")

    @property
    def base_unit(self) -> Pressure:
        return Pressure.PASCAL


# ---------------------------------------------------------------------------
# Force
# ---------------------------------------------------------------------------
class Force(LinearDimension):
    MICRONEWTON = ("1E6", "µN", 1)
    DYN = ("1E5", "dyn", 1)
    POND = ("1/0.00980665", "p")
    NEWTON = ("1", "N", 1)
    KILOPOND = ("1/9.80665", "kp")
    KILONEWTON = ("0.001", "kN", 1)
    MEGAPOND = ("1/9806.65", "Mp")

    @property
    def base_unit(self) -> Force:
        return Force.NEWTON


# ---------------------------------------------------------------------------
# Energy
# ---------------------------------------------------------------------------
class Energy(LinearDimension):
    ELECTRONVOLT = ("1/1.602176634E-19", "eV")
    ERG = ("1E7", "erg")
    JOULE = ("1", "J", 1)
    CALORIE = ("1/4.1868", "cal")
    KILOJOULE = ("0.001", "kJ", 1)
    BTU = ("1/1055.05585262", "BTU")
    KILOCALORIE = ("1/4186.8", "kcal")
    KILOPONDMETER = ("1/9.80665", "kpm")
    MEGAJOULE = ("1E-6", "MJ")
    KILOWATT_HOUR = ("1/3.6E6", "kWh")
    KILOGRAM_TNT = ("1/4.184E6", "kg(TNT)")
    GIGAJOULE = ("1E-9", "GJ")
    TERAJOULE = ("1E-12", "TJ")
    KILOTON_TNT = ("1/4.184E12", "kT(TNT)")
    MEGATON_TNT = ("1/4.184E15", "MT(TNT)")
    QUAD = ("1/1055.05585262E15", "quad")
    FOE = ("1E-44", "foe")
    BETHE = ("1E-44", "B")

    @property
    def base_unit(self) -> Energy:
        return Energy.JOULE


# ---------------------------------------------------------------------------
# Power
# ---------------------------------------------------------------------------
class Power(LinearDimension):
    ERG_PER_SECOND = ("1E7", "erg/s")
    MICROWATT = ("1E6", "µW")
    MILLIWATT = ("1000", "mW")
    WATT = ("1", "W", 1)
    HORSE_POWER = ("1/735.49875", "HP")
    KILOWATT = ("0.001", "kW", 1)
    MEGAWATT = ("1E-6", "MW", 1)
    GIGAWATT = ("1E-9", "GW", 1)
    TERAWATT = ("1E-12", "TW", 1)

    @property
    def base_unit(self) -> Power:
        return Power.WATT


# ---------------------------------------------------------------------------
# Data size
# ---------------------------------------------------------------------------
class DataSize(LinearDimension):
    BYTE = ("1", "Byte")
    KILOBYTE = ("0.001", "kB")
    KIBIBYTE = ("1/1024", "KiB")
    MEGABYTE = ("1E-6", "MB")
    MEBIBYTE = ("1/1048576", "MiB")
    GIGABYTE = ("1E-9", "GB")
    GIBIBYTE = ("1/1073741824", "GiB")
    TERABYTE = ("1E-12", "TB")
    TEBIBYTE = ("1/1099511627776", "TiB")

    @property
    def base_unit(self) -> DataSize:
        return DataSize.BYTE


__all__ = [
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
]
