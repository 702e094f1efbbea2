"""In-memory table store holding the sheets produced by one run."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterable, List, Set

import pandas as pd


class Workbook:
    """Named sheets of DataFrames with per-sheet hidden columns."""

    def __init__(self) -> None:
        self._sheets: Dict[str, pd.DataFrame] = {}
        self._hidden: Dict[str, Set[str]] = {}

    @property
    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def create_sheet(self, name: str, frame: pd.DataFrame) -> pd.DataFrame:
        """Create ``name`` from scratch, discarding any sheet of that name."""
        self.delete_sheet(name)
        self._sheets[name] = frame.copy()
        self._hidden[name] = set()
        return self._sheets[name]

    def get_sheet(self, name: str) -> pd.DataFrame:
        try:
            return self._sheets[name]
        except KeyError:
            raise KeyError(f"No sheet named '{name}'") from None

    def has_sheet(self, name: str) -> bool:
        return name in self._sheets

    def delete_sheet(self, name: str) -> None:
        self._sheets.pop(name, None)
        self._hidden.pop(name, None)

    def hide_columns(self, name: str, columns: Iterable[str]) -> None:
        frame = self.get_sheet(name)
        self._hidden[name].update(col for col in columns if col in frame.columns)

    def hidden_columns(self, name: str) -> Set[str]:
        self.get_sheet(name)
        return set(self._hidden[name])

    def visible_frame(self, name: str) -> pd.DataFrame:
        frame = self.get_sheet(name)
        hidden = self._hidden[name]
        return frame[[col for col in frame.columns if col not in hidden]]

    def export_csv(self, directory: str | Path, *, include_hidden: bool = False) -> List[Path]:
        out_dir = Path(directory)
        out_dir.mkdir(parents=True, exist_ok=True)
        written: List[Path] = []
        for name in self._sheets:
            frame = self.get_sheet(name) if include_hidden else self.visible_frame(name)
            path = out_dir / f"{_slug(name)}.csv"
            frame.to_csv(path, index=False)
            written.append(path)
        return written


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "_", name.lower()).strip("_")
