"""Warning sink for recoverable formatting errors.

Warnings are single PRICETAG_WARN lines on stderr, never raised.
"""
from __future__ import annotations

import sys
import time
from collections import OrderedDict

from .errors import PriceTagError

_MAX_TRACKED = 1024


class WarningSink:
    """Emit PRICETAG_WARN to stderr, throttled per (error, amount).

    Args:
        throttle_seconds: Minimum gap between identical warnings (0 = no throttle)
        max_tracked: Most (error, amount) pairs remembered for throttling
    """

    def __init__(self, throttle_seconds: float = 60.0, max_tracked: int = _MAX_TRACKED):
        self._throttle_seconds = throttle_seconds
        self._max_tracked = max_tracked
        # Oldest first: entries are (re)inserted at the end when warned
        self._last_warned: OrderedDict[tuple[str, str], float] = OrderedDict()

    def __call__(self, error: PriceTagError) -> None:
        amount = repr(getattr(error, "amount", None))
        key = (error.code, amount)
        now = time.monotonic()
        if self._throttle_seconds > 0:
            self._prune(now)
            if key in self._last_warned:
                return
            self._last_warned[key] = now
            if len(self._last_warned) > self._max_tracked:
                self._last_warned.popitem(last=False)

        print(f"PRICETAG_WARN error={error.code} amount={amount}", file=sys.stderr)

    def _prune(self, now: float) -> None:
        while self._last_warned:
            oldest = next(iter(self._last_warned.values()))
            if now - oldest < self._throttle_seconds:
                break
            self._last_warned.popitem(last=False)


def silent_sink(error: PriceTagError) -> None:
    """Discard the warning."""


default_sink = WarningSink()
