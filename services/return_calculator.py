"""Per-transaction annualized returns and share-weighted per-ticker aggregates."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from constants import DAYS_PER_YEAR, TIMESTAMP_FORMAT
from domain import (
    CalculationResult,
    DataRow,
    GroupBoundary,
    MalformedRowError,
    ParsedRow,
    RowIssue,
    TickerSummary,
    UnresolvedPriceError,
)
from utils import parse_number, round_half_up, safe_div

logger = logging.getLogger(__name__)

ANNOTATED_COLUMNS = [
    "source_row",
    "kind",
    "symbol",
    "trade_date",
    "quantity",
    "price",
    "current_price",
    "as_of",
    "days_held",
    "annualized_return",
]


def parse_trade_date(text: str) -> date:
    """Parse ``YYYY-MM-DD, HH:MM:SS`` (space after the comma optional) to its date."""
    parts = [part.strip() for part in text.split(",")]
    try:
        if len(parts) == 2:
            return datetime.strptime(", ".join(parts), TIMESTAMP_FORMAT).date()
        if len(parts) == 1:
            return datetime.strptime(parts[0], "%Y-%m-%d").date()
    except ValueError as exc:
        raise MalformedRowError(f"Unparseable timestamp '{text}': {exc}") from None
    raise MalformedRowError(f"Unparseable timestamp '{text}'")


def _as_date(value: Any) -> date:
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    return value


def _parse_row(record: Dict[str, Any]) -> ParsedRow:
    symbol = str(record["symbol"])
    current_price = parse_number(record["current_price"])
    if current_price is None:
        raise UnresolvedPriceError(f"No numeric current price for '{symbol}'")

    timestamp = str(record["timestamp"]).strip()
    if not timestamp:
        return GroupBoundary(row=int(record["source_row"]), symbol=symbol)

    quantity = parse_number(record["quantity"])
    if quantity is None:
        raise MalformedRowError(f"Unparseable quantity '{record['quantity']}'")
    price = parse_number(record["price"])
    if price is None:
        raise MalformedRowError(f"Unparseable price '{record['price']}'")

    return DataRow(
        row=int(record["source_row"]),
        symbol=symbol,
        trade_date=parse_trade_date(timestamp),
        quantity=quantity,
        price=price,
        current_price=current_price,
        as_of=_as_date(record["as_of"]),
    )


def parse_rows(frame: pd.DataFrame) -> Tuple[List[ParsedRow], List[RowIssue]]:
    """Classify working rows into trades and group boundaries.

    Rows without a usable current price, and rows whose trade fields do not
    parse, are left out and reported as issues.
    """
    parsed: List[ParsedRow] = []
    issues: List[RowIssue] = []
    for record in frame.to_dict(orient="records"):
        row = int(record["source_row"])
        symbol = str(record["symbol"])
        if not symbol:
            logger.debug("Row %d has no symbol; skipped", row)
            continue
        try:
            parsed.append(_parse_row(record))
        except UnresolvedPriceError as exc:
            logger.warning("Row %d skipped: %s", row, exc)
            issues.append(RowIssue(stage="unresolved_price", row=row, symbol=symbol, message=str(exc)))
        except MalformedRowError as exc:
            logger.warning("Row %d skipped: %s", row, exc)
            issues.append(RowIssue(stage="malformed_row", row=row, symbol=symbol, message=str(exc)))
    return parsed, issues


class ReturnCalculator:
    """Accumulate share-weighted annualized returns over ticker groups."""

    def days_held(self, as_of: date, trade_date: date) -> int:
        return round_half_up((as_of - trade_date).total_seconds() / 86400)

    def annualized_return(self, current_price: float, trade_price: float, days_held: int) -> Optional[float]:
        if trade_price == 0 or days_held == 0:
            return None
        return (current_price - trade_price) / trade_price / days_held * DAYS_PER_YEAR

    def calculate(self, frame: pd.DataFrame) -> CalculationResult:
        parsed, issues = parse_rows(frame)
        annotated: List[Dict[str, Any]] = []
        summaries: List[TickerSummary] = []

        share_weighted_return_tally = 0.0
        num_shares_tally = 0.0
        pending_rows = 0

        for item in parsed:
            if isinstance(item, GroupBoundary):
                aggregate = safe_div(share_weighted_return_tally, num_shares_tally)
                if num_shares_tally == 0:
                    logger.warning("No bought shares for %s at row %d; aggregate is undefined", item.symbol, item.row)
                    issues.append(
                        RowIssue(
                            stage="zero_shares",
                            row=item.row,
                            symbol=item.symbol,
                            message="Group has no bought shares; aggregate return is undefined",
                        )
                    )
                    aggregate = np.nan
                summaries.append(
                    TickerSummary(symbol=item.symbol, annualized_return=aggregate, shares=num_shares_tally)
                )
                annotated.append(
                    {
                        "source_row": item.row,
                        "kind": "subtotal",
                        "symbol": item.symbol,
                        "quantity": num_shares_tally,
                        "annualized_return": aggregate,
                    }
                )
                share_weighted_return_tally = 0.0
                num_shares_tally = 0.0
                pending_rows = 0
                continue

            if item.is_sell:
                logger.debug("Row %d is a sell of %s; excluded", item.row, item.symbol)
                continue

            days = self.days_held(item.as_of, item.trade_date)
            annualized = self.annualized_return(item.current_price, item.price, days)
            if annualized is None:
                message = f"Return undefined for price {item.price} held {days} days"
                logger.warning("Row %d skipped: %s", item.row, message)
                issues.append(RowIssue(stage="undefined_return", row=item.row, symbol=item.symbol, message=message))
                continue

            annotated.append(
                {
                    "source_row": item.row,
                    "kind": "trade",
                    "symbol": item.symbol,
                    "trade_date": item.trade_date,
                    "quantity": item.quantity,
                    "price": item.price,
                    "current_price": item.current_price,
                    "as_of": item.as_of,
                    "days_held": days,
                    "annualized_return": annualized,
                }
            )
            share_weighted_return_tally += annualized * item.quantity
            num_shares_tally += item.quantity
            pending_rows += 1

        if pending_rows:
            logger.warning("%d trade rows after the last subtotal row were not aggregated", pending_rows)

        annotated_frame = pd.DataFrame.from_records(annotated, columns=ANNOTATED_COLUMNS)
        annotated_frame["source_row"] = annotated_frame["source_row"].astype(int)
        return CalculationResult(
            annotated=annotated_frame,
            summaries=summaries,
            issues=issues,
        )
