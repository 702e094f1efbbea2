"""Render ticker aggregates as a two-column summary table."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from domain import TickerSummary
from utils import format_percent

SUMMARY_COLUMNS = ["Symbol", "Annualized Return"]


def build_summary(summaries: Iterable[TickerSummary]) -> pd.DataFrame:
    rows = [
        {"Symbol": summary.symbol, "Annualized Return": format_percent(summary.annualized_return)}
        for summary in summaries
    ]
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
