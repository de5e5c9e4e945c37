"""Currency formatting helpers."""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

_SUFFIXES = ("", "K", "M", "B", "T")


def _round_compact(value: float) -> Decimal:
    # One integer digit (or less) keeps two significant digits; otherwise whole units.
    if value >= 1e15:
        return Decimal(round(value))
    exact = Decimal(repr(value))
    if value == 0:
        return Decimal(0)
    if value < 10:
        step = Decimal(1).scaleb(exact.adjusted() - 1)
    else:
        step = Decimal(1)
    return exact.quantize(step, rounding=ROUND_HALF_UP)


def _trim(value: Decimal) -> str:
    return format(value.normalize(), "f")


def format_currency(value: float) -> str:
    """Format ``value`` as short compact US dollars, e.g. ``$1.5M`` or ``-$50K``.

    Rounding follows en-US compact currency notation: amounts below ten in
    the chosen unit keep two significant digits, larger amounts are whole
    numbers, and a rounded value of 1000 moves up to the next suffix.
    """

    value = float(value)
    if math.isnan(value):
        return "$NaN"
    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    if math.isinf(magnitude):
        return f"{sign}$∞"

    exponent = 0
    while exponent < len(_SUFFIXES) - 1 and magnitude >= 1000 ** (exponent + 1):
        exponent += 1
    scaled = _round_compact(magnitude / 1000 ** exponent)
    if scaled >= 1000 and exponent < len(_SUFFIXES) - 1:
        exponent += 1
        scaled = _round_compact(magnitude / 1000 ** exponent)
    return f"{sign}${_trim(scaled)}{_SUFFIXES[exponent]}"


def format_currency_full(value: float) -> str:
    """Unabbreviated dollars with thousands separators and cents."""

    if value < 0:
        return f"-${abs(value):,.2f}"
    return f"${value:,.2f}"


def format_number(value: float, grouping: bool = False) -> str:
    """Plain number for input widgets: ``8000000000``, ``0.5`` or ``8,000,000,000``."""

    value = float(value)
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e15:
        return f"{value:,.0f}" if grouping else f"{value:.0f}"
    return f"{value:,.15g}" if grouping else f"{value:.15g}"


__all__ = ["format_currency", "format_currency_full", "format_number"]
