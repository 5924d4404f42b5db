"""pricetag — locale and currency aware amount formatting."""
from .config import Settings, load_settings
from .data import DEFAULT_DATA
from .dataset import load_dataset, parse_dataset
from .errors import DatasetError, InvalidAmountError, InvalidInputError, PriceTagError
from .format import format_amount
from .price_tag import PriceTag
from .renderer import is_numeric, render
from .resolver import Resolver, look_for, normalize_locale
from .sink import WarningSink
from .types import (
    CurrencyTable,
    Dataset,
    Defaults,
    FormatOptions,
    LocaleTable,
)

__all__ = [
    "PriceTag",
    "Resolver",
    "render",
    "look_for",
    "normalize_locale",
    "is_numeric",
    "format_amount",
    "parse_dataset",
    "load_dataset",
    "DEFAULT_DATA",
    "Dataset",
    "Defaults",
    "LocaleTable",
    "CurrencyTable",
    "FormatOptions",
    "PriceTagError",
    "InvalidInputError",
    "InvalidAmountError",
    "DatasetError",
    "WarningSink",
    "Settings",
    "load_settings",
]
