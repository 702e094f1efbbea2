"""Persistence helpers for TradeReturns."""

from .report_loader import load_activity_report
from .workbook import Workbook

__all__ = ["Workbook", "load_activity_report"]
