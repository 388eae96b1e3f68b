"""Helpers that turn raw text and CSV files into transactions."""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List

Transaction = List[str]


def parse_transactions(text: str, separator: str = ",") -> List[Transaction]:
    """Split ``text`` into one basket per non-blank line.

    Tokens are trimmed, empty tokens are dropped and repeated items within a
    line are kept once.
    """
    transactions: List[Transaction] = []
    for line in text.strip().splitlines():
        if not line.strip():
            continue
        basket: Transaction = []
        for token in line.split(separator):
            item = token.strip()
            if item and item not in basket:
                basket.append(item)
        if basket:
            transactions.append(basket)
    return transactions


def read_transactions(path: Path, separator: str = ",") -> List[Transaction]:
    with path.open() as handle:
        return parse_transactions(handle.read(), separator)


def read_basket_csv(
    path: Path,
    basket_column: str = "order_id",
    item_column: str = "product_id",
) -> List[Transaction]:
    """Group a long-format CSV (one row per basket/item pair) into transactions.

    Baskets keep the order in which their id first appears in the file.
    """
    baskets: Dict[str, Transaction] = {}
    with path.open(newline="") as handle:
        reader = csv.DictReader(handle)
        for row in reader:
            basket_id = (row.get(basket_column) or "").strip()
            item = (row.get(item_column) or "").strip()
            if not basket_id or not item:
                continue
            basket = baskets.setdefault(basket_id, [])
            if item not in basket:
                basket.append(item)
    return list(baskets.values())
