"""Domain models and value objects."""

from .errors import (
    HeaderMappingError,
    MalformedRowError,
    ReportError,
    SectionNotFoundError,
    UnresolvedPriceError,
)
from .models import (
    CalculationResult,
    ColumnMap,
    DataRow,
    ExtractedTrades,
    GroupBoundary,
    ParsedRow,
    Quote,
    QuoteSnapshot,
    SectionBounds,
)
from .results import ReturnReport, RowIssue, TickerSummary

__all__ = [
    "CalculationResult",
    "ColumnMap",
    "DataRow",
    "ExtractedTrades",
    "GroupBoundary",
    "HeaderMappingError",
    "MalformedRowError",
    "ParsedRow",
    "Quote",
    "QuoteSnapshot",
    "ReportError",
    "ReturnReport",
    "RowIssue",
    "SectionBounds",
    "SectionNotFoundError",
    "TickerSummary",
    "UnresolvedPriceError",
]
