"""Resolve (locale, currency) pairs into FormatOptions."""
from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import InvalidInputError
from .types import Dataset, FormatOptions

_NBSP = "\u00a0"


class Resolver:
    """Look up formatting for a locale and currency, with fallbacks.

    Example::

        resolver = Resolver(load_dataset(DEFAULT_DATA))
        options = resolver.resolve("de-DE", "EUR")
        render(1234.56, options)  # '€1.234,56'

    The dataset is never modified, so one Resolver can be shared between
    threads as long as options are passed to render() explicitly.
    """

    def __init__(self, dataset: Dataset):
        self._dataset = dataset
        self._symbols = _build_index(dataset.currencies.s)
        self._formats = _build_index(dataset.locales.f)
        self._decimals = _build_index(dataset.locales.d)
        self._thousands = _build_index(dataset.locales.t)
        self._last: FormatOptions | None = None

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    def resolve(self, locale: str, currency: str) -> FormatOptions:
        """Determine the options for ``locale`` (e.g. de-AT) and ``currency`` (e.g. EUR).

        Raises:
            InvalidInputError: If the currency or locale code is empty.
        """
        if not currency:
            raise InvalidInputError("No currency code provided")
        if not locale:
            raise InvalidInputError("No locale code provided")

        defaults = self._dataset.defaults
        cc = currency.upper()
        lc = normalize_locale(locale)

        symbol = self._symbols.get(cc)
        format_ = self._formats.get(lc)
        decimal = self._decimals.get(lc)
        thousand = self._thousands.get(lc)

        if format_ is None:
            format_ = defaults.format
        if decimal is None:
            decimal = defaults.decimal
        if thousand is None:
            thousand = defaults.thousand

        # No symbol: show the code, and always with the symbol-less pattern
        if symbol is None:
            symbol = cc
            format_ = defaults.no_symbol_format

        self._last = FormatOptions(
            format=format_,
            decimal=nbsp_to_space(decimal),
            thousand=nbsp_to_space(thousand),
            symbol=symbol,
        )
        return self._last

    def current_symbol(self) -> str | None:
        """Symbol from the last resolve() call, or None."""
        return self._last.symbol if self._last else None


def look_for(table: Mapping[str, Sequence[str]], query: str) -> str | None:
    """Return the first key whose codes contain ``query``, or None."""
    for key, codes in table.items():
        for code in codes:
            if code == query:
                return key
    return None


def normalize_locale(locale: str) -> str:
    """Collapse redundant region tags: de-DE -> de, hu-HU -> hu."""
    parts = locale.lower().split("-")
    if len(parts) > 1 and parts[1] and parts[0] == parts[1]:
        return parts[0]
    return locale


def nbsp_to_space(separator: str) -> str:
    """Replace a no-break space separator with a plain space."""
    if separator[:1] == _NBSP:
        return " "
    return separator


def _build_index(table: Mapping[str, Sequence[str]]) -> dict[str, str]:
    # code -> value; setdefault keeps the first match, same as look_for()
    index: dict[str, str] = {}
    for key, codes in table.items():
        for code in codes:
            index.setdefault(code, key)
    return index
