"""Render amounts with resolved FormatOptions.

Rules:
1. ``""`` renders as ``""``
2. Anything that is not a finite number is reported to the sink and renders as ``""``
3. Round half away from zero to 2 decimal places
4. Always 2 decimal places, unless show00 is off and the amount is whole
5. Group the integer part in threes with the thousand separator
6. Place symbol and value with the ``%s`` / ``%v`` pattern
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from . import sink
from .errors import InvalidAmountError, PriceTagError
from .types import FormatOptions

_DECIMAL_NOTATION = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def render(
    amount: Any,
    options: FormatOptions,
    show_symbol: bool = True,
    show00: bool = True,
    on_invalid: Callable[[PriceTagError], None] | None = None,
) -> str:
    """Return the localized representation of ``amount``.

    ``show00=False`` drops a ``.00`` fraction: €13.00 -> €13 but €12.10 stays.
    Invalid amounts go to ``on_invalid`` (default: stderr warning sink).
    """
    if isinstance(amount, str) and amount == "":
        return ""

    value = _to_float(amount)
    if value is None:
        (on_invalid or sink.default_sink)(InvalidAmountError(amount))
        return ""

    value = round_to_decimal(value)
    precision = get_precision(value, show00)
    number = format_number(value, precision, options)

    if not show_symbol:
        return number

    result = options.format.replace("%s", options.symbol, 1)
    return result.replace("%v", number, 1)


def is_numeric(value: Any) -> bool:
    """True if ``value`` is a renderable number or a string in decimal notation."""
    return _to_float(value) is not None


def round_to_decimal(amount: float) -> float:
    """Round half away from zero at the hundredths: 10.967 -> 10.97."""
    scaled = amount * 100
    return math.copysign(math.floor(abs(scaled) + 0.5), scaled) / 100


def get_precision(amount: float, show00: bool) -> int:
    if show00 or amount % 1 != 0:
        return 2
    return 0


def format_number(amount: float, precision: int, options: FormatOptions) -> str:
    """Format ``amount`` with separators and no symbol."""
    negative = "-" if amount < 0 else ""
    whole, _, fraction = f"{abs(amount):.{precision}f}".partition(".")

    number = negative + _group(whole, options.thousand)
    if precision:
        number += options.decimal + fraction
    return number


def _group(digits: str, thousand: str) -> str:
    if len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return thousand.join(groups)


def _to_float(amount: Any) -> float | None:
    if isinstance(amount, bool):
        return None
    if isinstance(amount, str):
        text = amount.strip()
        if not _DECIMAL_NOTATION.fullmatch(text):
            return None
        value = float(text)
    elif isinstance(amount, (int, float, Decimal)):
        try:
            value = float(amount)
        except (OverflowError, ValueError):
            return None
    else:
        return None
    # Rounding works on amount * 100, which must stay finite too
    if not math.isfinite(value * 100):
        return None
    return value
