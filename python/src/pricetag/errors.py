"""Error classes for pricetag."""
from __future__ import annotations

from typing import Any


class PriceTagError(Exception):
    """Base error for pricetag operations."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class InvalidInputError(PriceTagError):
    """Raised when a locale or currency code is missing."""

    def __init__(self, message: str):
        super().__init__("INVALID_INPUT", message)


class InvalidAmountError(PriceTagError):
    """An amount that does not parse to a finite number.

    Never raised by render(); it is handed to the warning sink instead.
    """

    def __init__(self, amount: Any):
        super().__init__("INVALID_AMOUNT", f"Amount is not valid: {amount!r}")
        self.amount = amount


class DatasetError(PriceTagError):
    """Raised when locale/currency data cannot be loaded or parsed."""

    def __init__(self, message: str):
        super().__init__("INVALID_DATASET", message)
