"""Locate a labelled section inside a stacked activity report."""

from __future__ import annotations

import pandas as pd

from constants import SECTION_LABEL
from domain import SectionBounds, SectionNotFoundError


def _label(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value).strip()


def locate_section(raw: pd.DataFrame, label: str = SECTION_LABEL) -> SectionBounds:
    """Return the first contiguous run of rows whose column 0 equals ``label``.

    The end bound is exclusive. A later, non-contiguous run of the same label
    is ignored.
    """
    if raw.empty:
        raise SectionNotFoundError(label, "not found: report is empty")

    labels = [_label(value) for value in raw.iloc[:, 0]]
    start = None
    for idx, value in enumerate(labels):
        if start is None:
            if value == label:
                start = idx
        elif value != label:
            return SectionBounds(label=label, start=start, end=idx)

    if start is None:
        raise SectionNotFoundError(label, "not found in report")
    raise SectionNotFoundError(label, "does not terminate before the end of the report")
