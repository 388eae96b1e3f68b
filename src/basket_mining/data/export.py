"""JSON export of mining results."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from ..config import OutputPaths
from ..workflows.pipeline import MiningResult

TABLES = ("itemsets", "rules", "tree")


def _table_path(paths: OutputPaths, table_name: str) -> Path:
    if table_name not in TABLES:
        raise KeyError(f"Unsupported table: {table_name}")
    return getattr(paths, table_name)


def write_table(rows: object, paths: OutputPaths, table_name: str) -> Path:
    target = _table_path(paths, table_name)
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w") as handle:
        json.dump(rows, handle, indent=2)
    return target


def load_table(paths: OutputPaths, table_name: str) -> object:
    with _table_path(paths, table_name).open() as handle:
        return json.load(handle)


def write_result(result: MiningResult, paths: OutputPaths) -> List[Path]:
    payload: Dict[str, object] = result.to_dict()
    written = [
        write_table(payload["itemsets"], paths, "itemsets"),
        write_table(payload["rules"], paths, "rules"),
    ]
    if result.tree is not None:
        written.append(write_table(result.tree, paths, "tree"))
    return written
