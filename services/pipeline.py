"""Wire locator, extractor, calculator and summary builder into one run."""

from __future__ import annotations

import logging
from typing import Any, Optional

import pandas as pd

from constants import HIDDEN_WORKING_COLUMNS, SECTION_LABEL, SUMMARY_SHEET, WORKING_SHEET
from domain import ReturnReport
from persistence import Workbook

from .return_calculator import ReturnCalculator
from .summary_builder import build_summary
from .table_locator import locate_section
from .trade_extractor import TradeExtractor

logger = logging.getLogger(__name__)

CALCULATOR = ReturnCalculator()


def compute_ticker_returns(
    raw: pd.DataFrame,
    price_source: Any,
    date_source: Any,
    workbook: Optional[Workbook] = None,
    section: str = SECTION_LABEL,
) -> ReturnReport:
    """Run one full pass over ``raw`` and write the output sheets to ``workbook``.

    Sheets from an earlier run are removed first, so a run that fails on a
    missing section leaves no output tables behind.
    """
    workbook = workbook if workbook is not None else Workbook()
    workbook.delete_sheet(WORKING_SHEET)
    workbook.delete_sheet(SUMMARY_SHEET)

    bounds = locate_section(raw, section)
    logger.info("Section '%s' spans rows %d-%d", section, bounds.start, bounds.end - 1)

    extracted = TradeExtractor(price_source, date_source).extract(raw, bounds)
    result = CALCULATOR.calculate(extracted.frame)
    summary = build_summary(result.summaries)

    working = result.annotated.merge(extracted.raw_cells, left_on="source_row", right_index=True, how="left")
    workbook.create_sheet(WORKING_SHEET, working)
    workbook.hide_columns(WORKING_SHEET, [*HIDDEN_WORKING_COLUMNS, *extracted.raw_cells.columns])
    workbook.create_sheet(SUMMARY_SHEET, summary)

    return ReturnReport(
        section=section,
        as_of=extracted.snapshot.as_of.isoformat(),
        summaries=result.summaries,
        issues=result.issues,
    )
