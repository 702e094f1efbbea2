"""Copy a located trades section into a working table joined with frozen quotes."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

import pandas as pd

from constants import HEADER_ALIASES, HEADER_DISCRIMINATOR
from domain import ColumnMap, ExtractedTrades, HeaderMappingError, Quote, QuoteSnapshot, SectionBounds
from utils import parse_number

logger = logging.getLogger(__name__)

WORKING_COLUMNS = ["source_row", "category", "symbol", "timestamp", "quantity", "price"]
RESERVED_COLUMNS = set(WORKING_COLUMNS) | {
    "as_of",
    "current_price",
    "kind",
    "trade_date",
    "days_held",
    "annualized_return",
}


def _cell(value: Any) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def _is_header_row(cells: List[str]) -> bool:
    if len(cells) > 1 and cells[1] == HEADER_DISCRIMINATOR:
        return True
    return "Symbol" in cells and any(alias in cells for alias in HEADER_ALIASES["timestamp"])


def find_header(section: pd.DataFrame) -> Optional[List[str]]:
    for _, row in section.iterrows():
        cells = [_cell(value) for value in row.tolist()]
        if _is_header_row(cells):
            return cells
    return None


def map_columns(section: pd.DataFrame) -> ColumnMap:
    """Resolve field positions from the first header row of ``section``.

    Sections without a header row fall back to the default positions.
    """
    cells = find_header(section)
    if cells is None:
        return ColumnMap()
    positions: Dict[str, int] = {}
    for field, aliases in HEADER_ALIASES.items():
        for alias in aliases:
            if alias in cells:
                positions[field] = cells.index(alias)
                break
    missing = sorted(set(HEADER_ALIASES) - set(positions))
    if missing:
        raise HeaderMappingError(f"Header row is missing columns for: {', '.join(missing)}")
    return ColumnMap(category=0, **positions)


def raw_column_names(header: Optional[List[str]], width: int) -> List[str]:
    """Name the copied report cells after the header, or ``col_<n>`` without one."""
    names: List[str] = []
    for idx in range(width):
        name = header[idx] if header is not None and idx < len(header) else ""
        if not name or name in names or name in RESERVED_COLUMNS:
            name = f"col_{idx}"
        names.append(name)
    return names


def capture_quotes(symbols: Iterable[str], price_source: Any, date_source: Any) -> QuoteSnapshot:
    """Read the as-of date once and evaluate every symbol's price exactly once."""
    as_of = date_source.today()
    if isinstance(as_of, datetime):
        as_of = as_of.date()
    quotes: Dict[str, Quote] = {}
    for symbol in symbols:
        if not symbol or symbol in quotes:
            continue
        price = parse_number(price_source.current_price(symbol))
        if price is None:
            logger.warning("No numeric price for %s; its rows will be skipped", symbol)
        quotes[symbol] = Quote(symbol=symbol, as_of=as_of, price=price)
    return QuoteSnapshot(as_of=as_of, quotes=quotes)


class TradeExtractor:
    """Build the working trades table the return calculator reads."""

    def __init__(self, price_source: Any, date_source: Any) -> None:
        self.price_source = price_source
        self.date_source = date_source

    def extract(
        self,
        raw: pd.DataFrame,
        bounds: SectionBounds,
        snapshot: Optional[QuoteSnapshot] = None,
    ) -> ExtractedTrades:
        section = raw.iloc[bounds.start:bounds.end]
        header = find_header(section)
        columns = map_columns(section)
        width = section.shape[1]
        needed = max(columns.symbol, columns.timestamp, columns.quantity, columns.price)
        if needed >= width:
            raise HeaderMappingError(f"Column {needed} is outside the report width ({width} columns)")

        records = []
        copied = []
        for offset, (_, row) in enumerate(section.iterrows()):
            cells = [_cell(value) for value in row.tolist()]
            if _is_header_row(cells):
                continue
            source_row = bounds.start + offset
            records.append(
                {
                    "source_row": source_row,
                    "category": cells[columns.category],
                    "symbol": cells[columns.symbol],
                    "timestamp": cells[columns.timestamp],
                    "quantity": cells[columns.quantity],
                    "price": cells[columns.price],
                }
            )
            copied.append([source_row, *row.tolist()])
        frame = pd.DataFrame.from_records(records, columns=WORKING_COLUMNS)
        raw_cells = pd.DataFrame(copied, columns=["source_row", *raw_column_names(header, width)])
        raw_cells = raw_cells.set_index("source_row")
        raw_cells.index = raw_cells.index.astype(int)

        if snapshot is None:
            snapshot = capture_quotes(frame["symbol"].tolist(), self.price_source, self.date_source)

        frame["as_of"] = snapshot.as_of
        frame["current_price"] = pd.to_numeric(
            frame["symbol"].map(snapshot.price_for), errors="coerce"
        ).astype(float)
        logger.debug("Extracted %d rows from section '%s'", len(frame), bounds.label)
        return ExtractedTrades(frame=frame, snapshot=snapshot, raw_cells=raw_cells)
