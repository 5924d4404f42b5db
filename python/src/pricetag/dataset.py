"""Dataset parsing and loading.

A dataset is JSON-shaped::

    {
        "defaults": {"format": "%s%v", "decimal": ".", "thousand": ",",
                     "noSymbolFormat": "%v %s"},
        "locales": {"f": {...}, "d": {...}, "t": {...}},
        "currencies": {"s": {"€": ["EUR"], ...}},
    }

It can come from a mapping, a JSON file, or an HTTP(S) URL.
"""
from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

import requests

from .errors import DatasetError
from .types import CurrencyTable, Dataset, Defaults, LocaleTable

_DEFAULT_TIMEOUT = 10.0


def parse_dataset(raw: Mapping[str, Any]) -> Dataset:
    """Parse a raw dataset mapping into a Dataset.

    Raises:
        DatasetError: If ``defaults`` is missing or a table is malformed.
    """
    if not isinstance(raw, Mapping):
        raise DatasetError(f"Dataset must be a mapping, got {type(raw).__name__}")
    if not isinstance(raw.get("defaults"), Mapping):
        raise DatasetError("Dataset is missing 'defaults'")

    locales = raw.get("locales") or {}
    currencies = raw.get("currencies") or {}
    if not isinstance(locales, Mapping):
        raise DatasetError("'locales' must be a mapping")
    if not isinstance(currencies, Mapping):
        raise DatasetError("'currencies' must be a mapping")

    return Dataset(
        defaults=_parse_defaults(raw["defaults"]),
        locales=LocaleTable(
            f=_parse_table(locales.get("f"), "locales.f"),
            d=_parse_table(locales.get("d"), "locales.d"),
            t=_parse_table(locales.get("t"), "locales.t"),
        ),
        currencies=CurrencyTable(
            s=_parse_table(currencies.get("s"), "currencies.s"),
        ),
    )


def load_dataset(
    source: Mapping[str, Any] | str | os.PathLike,
    *,
    timeout: float = _DEFAULT_TIMEOUT,
) -> Dataset:
    """Load a dataset from a mapping, a JSON file path, or an HTTP(S) URL.

    Raises:
        DatasetError: If the source cannot be read or does not parse.
    """
    if isinstance(source, Dataset):
        return source
    if isinstance(source, Mapping):
        return parse_dataset(source)

    location = os.fspath(source)
    if location.startswith(("http://", "https://")):
        return parse_dataset(_fetch(location, timeout))

    try:
        with open(location, encoding="utf-8") as fh:
            raw = json.load(fh)
    except OSError as exc:
        raise DatasetError(f"Cannot read dataset {location}: {exc}") from exc
    except ValueError as exc:
        raise DatasetError(f"Dataset {location} is not valid JSON: {exc}") from exc
    return parse_dataset(raw)


def _fetch(url: str, timeout: float) -> Any:
    try:
        resp = requests.get(url, timeout=timeout)
    except (requests.ConnectionError, requests.Timeout) as exc:
        raise DatasetError(f"Cannot fetch dataset {url}: {exc}") from exc

    if resp.status_code >= 400:
        raise DatasetError(f"Cannot fetch dataset {url}: HTTP {resp.status_code}")
    try:
        return resp.json()
    except ValueError as exc:
        raise DatasetError(f"Dataset {url} is not valid JSON: {exc}") from exc


def _parse_defaults(raw: Mapping[str, Any]) -> Defaults:
    missing = [
        key for key in ("format", "decimal", "thousand", "noSymbolFormat")
        if not isinstance(raw.get(key), str)
    ]
    if missing:
        raise DatasetError(f"'defaults' is missing {', '.join(missing)}")

    return Defaults(
        format=raw["format"],
        decimal=raw["decimal"],
        thousand=raw["thousand"],
        no_symbol_format=raw["noSymbolFormat"],
    )


def _parse_table(raw: Any, name: str) -> dict[str, tuple[str, ...]]:
    if raw is None:
        return {}
    if not isinstance(raw, Mapping):
        raise DatasetError(f"'{name}' must be a mapping")

    table: dict[str, tuple[str, ...]] = {}
    for key, codes in raw.items():
        if isinstance(codes, str) or not isinstance(codes, (list, tuple)):
            raise DatasetError(f"'{name}[{key!r}]' must be a list of codes")
        table[str(key)] = tuple(str(code) for code in codes)
    return table
