"""Price sources: a yfinance wrapper for live quotes and a static map for offline runs."""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Mapping, Optional

import yfinance as yf

from constants import (
    PRICE_FALLBACK_HISTORY_DAYS,
    PRICE_LOOKUP_BACKOFF_SECONDS,
    PRICE_LOOKUP_RETRIES,
)
from utils import sanitize_float

logger = logging.getLogger(__name__)


class YFinancePriceSource:
    """Look up the current market price of a ticker through yfinance.

    Market-data lookups fail intermittently, so each lookup is retried with
    exponential backoff. When every attempt fails, or the ticker has no quote,
    ``current_price`` returns ``None``.
    """

    def __init__(
        self,
        retries: int = PRICE_LOOKUP_RETRIES,
        backoff_seconds: float = PRICE_LOOKUP_BACKOFF_SECONDS,
        *,
        ticker_factory: Callable[[str], Any] = yf.Ticker,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._retries = max(1, retries)
        self._backoff_seconds = backoff_seconds
        self._ticker_factory = ticker_factory
        self._sleep = sleep

    def current_price(self, symbol: str) -> Optional[float]:
        for attempt in range(1, self._retries + 1):
            try:
                return self._fetch(symbol)
            except Exception as exc:
                if attempt == self._retries:
                    logger.warning("Price lookup for %s failed after %d attempts: %s", symbol, attempt, exc)
                    return None
                wait = self._backoff_seconds * 2 ** (attempt - 1)
                logger.debug("Price lookup for %s failed (%s); retrying in %.1fs", symbol, exc, wait)
                self._sleep(wait)
        return None

    def _fetch(self, symbol: str) -> Optional[float]:
        ticker = self._ticker_factory(symbol)
        price = sanitize_float(getattr(ticker.fast_info, "last_price", None))
        if price is not None:
            return price
        history = ticker.history(period=f"{PRICE_FALLBACK_HISTORY_DAYS}d", auto_adjust=False, actions=False)
        if history is None or history.empty or "Close" not in history:
            logger.info("No quote available for %s", symbol)
            return None
        close_series = history["Close"].dropna()
        if close_series.empty:
            return None
        return sanitize_float(close_series.iloc[-1])


class StaticPriceSource:
    """Serve prices from a fixed mapping; unknown symbols are unresolved."""

    def __init__(self, prices: Mapping[str, Any], fallback: Any = None) -> None:
        self._prices = {symbol.upper(): value for symbol, value in prices.items()}
        self._fallback = fallback

    def current_price(self, symbol: str) -> Optional[float]:
        key = symbol.upper()
        if key in self._prices:
            return sanitize_float(self._prices[key])
        if self._fallback is not None:
            return self._fallback.current_price(symbol)
        return None
