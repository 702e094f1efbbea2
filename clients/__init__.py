"""External collaborators: price and date sources."""

from .clock import FixedDateSource, SystemDateSource
from .yfinance_client import StaticPriceSource, YFinancePriceSource

__all__ = [
    "FixedDateSource",
    "StaticPriceSource",
    "SystemDateSource",
    "YFinancePriceSource",
]
