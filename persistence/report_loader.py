"""Read a broker activity report into a raw, position-indexed table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import pandas as pd

from constants import REPORT_MAX_COLUMNS

logger = logging.getLogger(__name__)


def load_activity_report(path: str | Path, max_columns: int = REPORT_MAX_COLUMNS) -> pd.DataFrame:
    """Load a stacked activity-report CSV without assuming any header.

    Rows have different widths depending on the section they belong to, so a
    wide fixed schema of integer column labels is forced. Rows wider than that
    schema are kept, truncated to ``max_columns`` cells, with a warning. Blank
    cells become empty strings and fully empty trailing columns are dropped.
    """

    def truncate_wide_row(fields: List[str]) -> List[str]:
        logger.warning(
            "Report line starting '%s' has %d fields; keeping the first %d",
            fields[0] if fields else "",
            len(fields),
            max_columns,
        )
        return fields[:max_columns]

    raw = pd.read_csv(
        path,
        header=None,
        index_col=False,
        names=list(range(max_columns)),
        dtype=object,
        keep_default_na=False,
        skip_blank_lines=True,
        on_bad_lines=truncate_wide_row,
        engine="python",
        encoding="utf-8-sig",
    ).fillna("")
    used = [col for col in raw.columns if (raw[col] != "").any()]
    if used:
        raw = raw.loc[:, : max(used)]
    raw[0] = raw[0].str.strip()
    return raw.reset_index(drop=True)
