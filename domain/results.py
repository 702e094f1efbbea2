"""Result models returned by the return pipeline."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from utils import sanitize_float


class TickerSummary(BaseModel):
    symbol: str
    annualized_return: float | None = None
    shares: float = 0.0

    @field_validator("annualized_return", mode="before")
    @classmethod
    def _sanitize_numeric(cls, value: Any) -> Optional[float]:
        return sanitize_float(value)


class RowIssue(BaseModel):
    stage: str
    row: int
    symbol: str | None = None
    message: str


class ReturnReport(BaseModel):
    section: str
    as_of: str | None = None
    summaries: List[TickerSummary] = Field(default_factory=list)
    issues: List[RowIssue] = Field(default_factory=list)

    def to_records(self) -> List[Dict[str, Any]]:
        return [summary.model_dump() for summary in self.summaries]
