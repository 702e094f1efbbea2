"""Utility helpers for TradeReturns."""

from .math_utils import parse_number, round_half_up, safe_div, sanitize_float
from .formatters import (
    format_percent,
    frame_payload,
    serialize_scalar,
)

__all__ = [
    "parse_number",
    "round_half_up",
    "safe_div",
    "sanitize_float",
    "serialize_scalar",
    "frame_payload",
    "format_percent",
]
