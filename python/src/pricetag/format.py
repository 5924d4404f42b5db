"""One-shot currency formatting against the bundled data."""
from __future__ import annotations

from functools import lru_cache
from typing import Any

from .data import DEFAULT_DATA
from .dataset import parse_dataset
from .renderer import render
from .resolver import Resolver


@lru_cache(maxsize=None)
def _default_resolver() -> Resolver:
    return Resolver(parse_dataset(DEFAULT_DATA))


def format_amount(
    amount: Any,
    currency: str,
    locale: str = "en",
    *,
    show_symbol: bool = True,
    show00: bool = True,
) -> str:
    """Format ``amount`` in ``currency`` for ``locale``.

    format_amount(50, "EUR", "de-DE") -> '€50,00'
    format_amount(50, "CHF") -> '50.00 CHF'
    """
    options = _default_resolver().resolve(locale, currency)
    return render(amount, options, show_symbol=show_symbol, show00=show00)
