"""Dataclasses for pricetag data and options."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Defaults:
    """Most common formatting, used when a locale has no data of its own."""
    format: str
    decimal: str
    thousand: str
    no_symbol_format: str


@dataclass(frozen=True)
class LocaleTable:
    """Locale fallbacks: value -> locale codes using it."""
    f: dict[str, tuple[str, ...]] = field(default_factory=dict)
    d: dict[str, tuple[str, ...]] = field(default_factory=dict)
    t: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class CurrencyTable:
    """Currency symbols: symbol -> currency codes using it."""
    s: dict[str, tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class Dataset:
    """Read-only locale and currency data."""
    defaults: Defaults
    locales: LocaleTable
    currencies: CurrencyTable


@dataclass(frozen=True)
class FormatOptions:
    """Resolved formatting for one (locale, currency) pair.

    ``format`` holds ``%s`` (symbol) and ``%v`` (value) placeholders,
    e.g. ``%s%v`` renders as ``€10``.
    """
    format: str
    decimal: str
    thousand: str
    symbol: str
