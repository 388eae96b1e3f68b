"""Lookup of named transaction datasets for the mining API."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from ..data.ingestion import Transaction, parse_transactions
from ..data.samples import SAMPLE_DATASETS


class DatasetCatalog:
    """Built-in samples plus ``*.txt`` files from an optional directory.

    A file named ``weekend.txt`` is exposed as ``weekend`` and shadows a
    built-in sample of the same name.
    """

    def __init__(self, directory: Optional[Path] = None, separator: str = ",") -> None:
        self.directory = directory
        self.separator = separator

    def _files(self) -> Dict[str, Path]:
        if self.directory is None or not self.directory.exists():
            return {}
        return {path.stem: path for path in sorted(self.directory.glob("*.txt"))}

    def names(self) -> List[str]:
        return sorted(set(SAMPLE_DATASETS) | set(self._files()))

    def text(self, name: str) -> str:
        files = self._files()
        if name in files:
            return files[name].read_text()
        if name in SAMPLE_DATASETS:
            return SAMPLE_DATASETS[name]
        raise KeyError(f"Unknown dataset: {name}")

    def transactions(self, name: str) -> List[Transaction]:
        return parse_transactions(self.text(name), self.separator)
