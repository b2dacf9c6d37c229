"""
dimvalue.core.formatting
========================

Number locales and the padding rules used when dimensioned values are
rendered for humans.

Only the decimal separator is locale dependent: rendered values never use
grouping separators, so a ``Locale`` is essentially a tag plus the character
that replaces the decimal point.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Dict, Union

from dimvalue.core.numbers import MATH_CONTEXT, fixed_numeral

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Locale:
    tag: str
    decimal_separator: str = "."

    def __post_init__(self) -> None:
        if len(self.decimal_separator) != 1:
            raise ValueError("decimal_separator must be a single character")

    def localize(self, numeral: str) -> str:
        """Swap the decimal point of a plain numeral for this locale's separator."""
        if self.decimal_separator == ".":
            return numeral
        return numeral.replace(".", self.decimal_separator, 1)


ROOT = Locale("")
ENGLISH = Locale("en")
GERMAN = Locale("de", ",")
FRENCH = Locale("fr", ",")

LocaleLike = Union[Locale, str, None]

# Languages that write a decimal comma. Everything else defaults to '.'.
_COMMA_LANGUAGES = frozenset({
    "bg", "ca", "cs", "da", "de", "el", "es", "et", "fi", "fr", "hr", "hu",
    "id", "is", "it", "lt", "lv", "nb", "nl", "nn", "no", "pl", "pt", "ro",
    "ru", "sk", "sl", "sr", "sv", "tr", "uk", "vi",
})

# Territories that override their language's convention.
_TERRITORY_OVERRIDES: Dict[str, str] = {
    "de_CH": ".",
    "de_LI": ".",
    "it_CH": ".",
    "fr_CH": ".",
    "es_MX": ".",
    "es_US": ".",
    "pt_BR": ",",
}

_TAG_RE = re.compile(r"^(?P<lang>[A-Za-z]{2,3})(?:[-_](?P<region>[A-Za-z]{2}|\d{3}))?(?:[.@].*)?$")

_lock = threading.RLock()
_default_locale: Locale = ROOT


def locale_for(tag: str) -> Locale:
    """
    Return the ``Locale`` for a tag such as ``"de"``, ``"de_DE"``, ``"en-US"``
    or ``"de_DE.UTF-8"``. The empty tag is the root locale.

    Raises
    ------
    ValueError
        If the tag is not a language[_REGION] tag.
    """
    tag = tag.strip()
    if not tag or tag in ("C", "POSIX"):
        return ROOT

    m = _TAG_RE.match(tag)
    if m is None:
        raise ValueError(f"Invalid locale tag: {tag!r}")

    lang = m.group("lang").lower()
    region = m.group("region")
    key = f"{lang}_{region.upper()}" if region else lang

    separator = _TERRITORY_OVERRIDES.get(key)
    if separator is None:
        separator = "," if lang in _COMMA_LANGUAGES else "."
        if region:
            logger.debug("No territory override for %s; using language default %r", key, separator)
    return Locale(key, separator)


def resolve_locale(locale: LocaleLike) -> Locale:
    """``None`` means the configured default locale."""
    if locale is None:
        return get_default_locale()
    if isinstance(locale, Locale):
        return locale
    if isinstance(locale, str):
        return locale_for(locale)
    raise TypeError(f"locale must be Locale, str or None, got {type(locale).__name__}")


def get_default_locale() -> Locale:
    with _lock:
        return _default_locale


def set_default_locale(locale: Locale | str) -> Locale:
    """Set the process-wide default locale; returns the previous one."""
    global _default_locale
    new_locale = resolve_locale(locale) if locale is not None else ROOT
    with _lock:
        previous = _default_locale
        _default_locale = new_locale
    return previous


# --- printf-style templates ---------------------------------------------------

_PLACEHOLDER_RE = re.compile(
    r"%(?P<flags>[-+ 0]*)(?P<width>\d+)?(?:\.(?P<precision>\d+))?(?P<conv>[fFeEgGsSn%])"
)


def printf(template: str, args: tuple, locale: LocaleLike = None) -> str:
    """
    Render a printf-style ``template`` with ``args``.

    Supported placeholders are ``%f``/``%e``/``%g`` (and upper case variants)
    for numbers, ``%s``/``%S`` for text, ``%n`` and ``%%``; each takes the
    optional flags ``-``, ``+``, blank and ``0``, a width and a precision.
    Numbers are rendered from their exact decimal value, rounded half-up,
    using the decimal separator of ``locale``.

    Raises
    ------
    ValueError
        The template references more arguments than given or contains an
        unsupported placeholder.
    """
    loc = resolve_locale(locale)
    pending = list(args)
    out: list[str] = []
    pos = 0

    for m in _PLACEHOLDER_RE.finditer(template):
        literal = template[pos:m.start()]
        if "%" in literal:
            raise ValueError(f"Unsupported placeholder in template {template!r}")
        out.append(literal)
        pos = m.end()

        conv = m.group("conv")
        if conv == "%":
            out.append("%")
            continue
        if conv == "n":
            out.append("\n")
            continue
        if not pending:
            raise ValueError(f"Template {template!r} needs more than {len(args)} arguments")

        arg = pending.pop(0)
        flags = m.group("flags")
        width = m.group("width") or ""
        left = "-" in flags

        if conv in "sS":
            text = str(arg)
            if conv == "S":
                text = text.upper()
            out.append(text.ljust(int(width)) if left and width else text.rjust(int(width or 0)))
            continue

        number = arg if isinstance(arg, Decimal) else Decimal(str(arg))
        precision = m.group("precision")
        if precision is None and conv in "fF":
            precision = "6"
        if precision is not None and conv in "fF":
            # Round half-up here so formatting itself never has to round.
            number = Decimal(fixed_numeral(number, int(precision)))

        spec = "<" if left else ""
        if "+" in flags:
            spec += "+"
        elif " " in flags:
            spec += " "
        if "0" in flags and not left:
            spec += "0"
        spec += width
        if precision is not None:
            spec += "." + precision
        spec += conv

        with localcontext() as ctx:
            ctx.prec = MATH_CONTEXT.prec
            ctx.rounding = ROUND_HALF_UP
            out.append(loc.localize(format(number, spec)))

    tail = template[pos:]
    if "%" in tail:
        raise ValueError(f"Unsupported placeholder in template {template!r}")
    out.append(tail)
    return "".join(out)


def pad_left(text: str, width: int) -> str:
    return text.rjust(width) if width > 0 else text


def pad_right(text: str, width: int) -> str:
    return text.ljust(width) if width > 0 else text


def justify(text: str, width: int, left: bool) -> str:
    """
    Apply the width/justification flags of a format specification.

    Left justification trims the text first and pads on the right; the
    default pads on the left. Text longer than ``width`` is returned as is.
    """
    if left and width > len(text.strip()):
        return pad_right(text.strip(), width)
    return pad_left(text, width)


def compose(numeral: str, symbol: str, width: int = -1) -> str:
    """``"<numeral> <symbol>"`` with the numeral padded so the text fills ``width``."""
    return f"{pad_left(numeral, width - len(symbol) - 1)} {symbol}"


def parse_format_spec(spec: str) -> tuple[bool, bool, int, int | None]:
    """
    Split a ``[-][#][width][.precision]`` format spec.

    Returns ``(left_justify, alternate, width, precision)``; an absent width
    is -1 and an absent precision is None.
    """
    i = 0
    left = alternate = False
    while i < len(spec) and spec[i] in "-#":
        if spec[i] == "-":
            left = True
        else:
            alternate = True
        i += 1
    width_part, dot, precision_part = spec[i:].partition(".")
    if (width_part and not width_part.isdigit()) or (dot and not precision_part.isdigit()):
        raise ValueError(f"Invalid format specifier '{spec}'")
    width = int(width_part) if width_part else -1
    precision = int(precision_part) if dot else None
    return left, alternate, width, precision


__all__ = [
    "Locale",
    "LocaleLike",
    "ROOT",
    "ENGLISH",
    "GERMAN",
    "FRENCH",
    "locale_for",
    "resolve_locale",
    "get_default_locale",
    "set_default_locale",
    "printf",
    "pad_left",
    "pad_right",
    "justify",
    "compose",
    "parse_format_spec",
]
