import unittest
from datetime import date
from types import SimpleNamespace

import pandas as pd

from clients import FixedDateSource, StaticPriceSource, SystemDateSource, YFinancePriceSource


class FakeTicker:
    def __init__(self, last_price=None, closes=None):
        self.fast_info = SimpleNamespace(last_price=last_price)
        self._closes = closes or []

    def history(self, period, auto_adjust=False, actions=False):
        return pd.DataFrame({"Close": self._closes})


class FlakyFactory:
    def __init__(self, failures, ticker):
        self.failures = failures
        self.ticker = ticker
        self.calls = 0

    def __call__(self, symbol):
        self.calls += 1
        if self.calls <= self.failures:
            raise ConnectionError("Too Many Requests")
        return self.ticker


class TestYFinancePriceSource(unittest.TestCase):
    def test_retries_with_backoff(self):
        waits = []
        factory = FlakyFactory(2, FakeTicker(last_price=250.0))
        source = YFinancePriceSource(retries=3, backoff_seconds=1.0, ticker_factory=factory, sleep=waits.append)
        self.assertEqual(source.current_price("FB"), 250.0)
        self.assertEqual(waits, [1.0, 2.0])

    def test_exhausted_retries_return_none(self):
        waits = []
        factory = FlakyFactory(5, FakeTicker(last_price=250.0))
        source = YFinancePriceSource(retries=2, backoff_seconds=0.5, ticker_factory=factory, sleep=waits.append)
        self.assertIsNone(source.current_price("FB"))
        self.assertEqual(factory.calls, 2)
        self.assertEqual(waits, [0.5])

    def test_falls_back_to_last_close(self):
        source = YFinancePriceSource(ticker_factory=lambda symbol: FakeTicker(closes=[100.0, 101.5, None]))
        self.assertEqual(source.current_price("FB"), 101.5)

    def test_no_quote(self):
        source = YFinancePriceSource(ticker_factory=lambda symbol: FakeTicker())
        self.assertIsNone(source.current_price("ZZZZ"))


class TestStaticSources(unittest.TestCase):
    def test_static_prices_are_case_insensitive(self):
        source = StaticPriceSource({"fb": 250})
        self.assertEqual(source.current_price("FB"), 250.0)
        self.assertIsNone(source.current_price("AAPL"))

    def test_static_prices_fall_back(self):
        fallback = StaticPriceSource({"AAPL": 110})
        source = StaticPriceSource({"FB": 250}, fallback=fallback)
        self.assertEqual(source.current_price("AAPL"), 110.0)

    def test_date_sources(self):
        self.assertEqual(FixedDateSource(date(2033, 3, 1)).today(), date(2033, 3, 1))
        self.assertIsInstance(SystemDateSource().today(), date)


if __name__ == "__main__":
    unittest.main()
