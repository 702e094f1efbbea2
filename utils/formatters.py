"""Helpers for serialising and formatting report values."""

from datetime import date, datetime
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .math_utils import sanitize_float


def serialize_scalar(value: Any) -> Any:
    if isinstance(value, (pd.Timestamp, datetime, date)):
        return value.isoformat()
    if isinstance(value, (np.generic, float, int, np.integer, bool)):
        return sanitize_float(value)
    if isinstance(value, (list, tuple, np.ndarray)):
        return [serialize_scalar(v) for v in value]
    return value


def frame_payload(frame: pd.DataFrame) -> List[Dict[str, Any]]:
    if frame is None or frame.empty:
        return []
    records = frame.to_dict(orient="records")
    return [
        {str(key): serialize_scalar(val) for key, val in record.items()}
        for record in records
    ]


def format_percent(value: Optional[float], decimals: int = 2) -> str:
    clean = sanitize_float(value)
    if clean is None:
        return "n/a"
    return f"{clean * 100:.{decimals}f}%"

