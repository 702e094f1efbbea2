"""Application services for locating, extracting and scoring trades."""

from .pipeline import compute_ticker_returns
from .return_calculator import ReturnCalculator, parse_rows, parse_trade_date
from .summary_builder import build_summary
from .table_locator import locate_section
from .trade_extractor import TradeExtractor, capture_quotes, map_columns

__all__ = [
    "ReturnCalculator",
    "TradeExtractor",
    "build_summary",
    "capture_quotes",
    "compute_ticker_returns",
    "locate_section",
    "map_columns",
    "parse_rows",
    "parse_trade_date",
]
