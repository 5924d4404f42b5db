"""PriceTag — setup() once, localize() many times.

This is the recommended interface when one locale and currency are used for
a whole screen or report. For concurrent use, call Resolver.resolve() and
render() directly and pass the options around.
"""
from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from .config import load_settings
from .data import DEFAULT_DATA
from .dataset import load_dataset
from .errors import PriceTagError
from .renderer import render
from .resolver import Resolver
from .sink import WarningSink, silent_sink
from .types import Dataset, FormatOptions


class PriceTag:
    """Currency and number formatting helper.

    Example::

        formatter = PriceTag()
        formatter.setup("de-DE", "EUR")
        formatter.localize(1234.56)  # '€1.234,56'

    Args:
        data: Dataset, raw mapping, JSON path or URL. Defaults to
            PRICETAG_DATA, then the bundled data.
        log_invalid: Emit PRICETAG_WARN to stderr for invalid amounts
            (default: PRICETAG_LOG_INVALID, true)
    """

    def __init__(
        self,
        data: Dataset | Mapping[str, Any] | str | os.PathLike | None = None,
        *,
        log_invalid: bool | None = None,
    ):
        settings = load_settings()
        if data is None:
            data = settings.data_source or DEFAULT_DATA
        if log_invalid is None:
            log_invalid = settings.log_invalid

        self._resolver = Resolver(load_dataset(data, timeout=settings.http_timeout))
        self._on_invalid = (
            WarningSink(settings.warn_throttle) if log_invalid else silent_sink
        )
        self._options: FormatOptions | None = None

    @property
    def options(self) -> FormatOptions | None:
        """Options from the last setup() call."""
        return self._options

    def setup(self, locale: str, currency: str) -> FormatOptions:
        """Resolve and store the options for ``locale`` and ``currency``.

        Raises:
            InvalidInputError: If either code is empty.
        """
        self._options = self._resolver.resolve(locale, currency)
        return self._options

    def get_currency_symbol(self) -> str:
        """Symbol from the last setup() call.

        Raises:
            PriceTagError: NOT_CONFIGURED if setup() has not been called.
        """
        return self._require_options().symbol

    def localize(
        self,
        amount: Any,
        show_symbol: bool = True,
        show00: bool = True,
    ) -> str:
        """Localized representation of ``amount`` using the stored options."""
        return render(
            amount,
            self._require_options(),
            show_symbol=show_symbol,
            show00=show00,
            on_invalid=self._on_invalid,
        )

    def _require_options(self) -> FormatOptions:
        if self._options is None:
            raise PriceTagError("NOT_CONFIGURED", "Call setup() before formatting")
        return self._options
