"""Domain-level data structures for TradeReturns."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import List, Mapping, Optional, Union

import pandas as pd

from constants import (
    DEFAULT_CATEGORY_COL,
    DEFAULT_PRICE_COL,
    DEFAULT_QUANTITY_COL,
    DEFAULT_SYMBOL_COL,
    DEFAULT_TIMESTAMP_COL,
)
from .results import RowIssue, TickerSummary


@dataclass(slots=True, frozen=True)
class SectionBounds:
    label: str
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start


@dataclass(slots=True, frozen=True)
class ColumnMap:
    category: int = DEFAULT_CATEGORY_COL
    symbol: int = DEFAULT_SYMBOL_COL
    timestamp: int = DEFAULT_TIMESTAMP_COL
    quantity: int = DEFAULT_QUANTITY_COL
    price: int = DEFAULT_PRICE_COL


@dataclass(slots=True, frozen=True)
class Quote:
    symbol: str
    as_of: date
    price: Optional[float]

    @property
    def resolved(self) -> bool:
        return self.price is not None


@dataclass(slots=True, frozen=True)
class QuoteSnapshot:
    """Quotes captured once per run; the calculator never re-queries a source."""

    as_of: date
    quotes: Mapping[str, Quote]

    def __post_init__(self) -> None:
        object.__setattr__(self, "quotes", MappingProxyType(dict(self.quotes)))

    def price_for(self, symbol: str) -> Optional[float]:
        quote = self.quotes.get(symbol)
        return None if quote is None else quote.price


@dataclass(slots=True)
class ExtractedTrades:
    frame: pd.DataFrame
    snapshot: QuoteSnapshot
    raw_cells: pd.DataFrame


@dataclass(slots=True, frozen=True)
class DataRow:
    row: int
    symbol: str
    trade_date: date
    quantity: float
    price: float
    current_price: float
    as_of: date

    @property
    def is_sell(self) -> bool:
        return self.quantity < 0


@dataclass(slots=True, frozen=True)
class GroupBoundary:
    row: int
    symbol: str


ParsedRow = Union[DataRow, GroupBoundary]


@dataclass(slots=True)
class CalculationResult:
    annotated: pd.DataFrame
    summaries: List[TickerSummary] = field(default_factory=list)
    issues: List[RowIssue] = field(default_factory=list)
