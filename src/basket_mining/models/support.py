"""Support counting primitives shared by both mining engines."""
from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

Itemset = Tuple[str, ...]

# Absorbs float noise such as 0.6 * 5 == 3.0000000000000004.
_COUNT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class FrequentItemset:
    items: Itemset
    count: int
    support: float

    @property
    def size(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, object]:
        return {"itemset": list(self.items), "support": self.support, "count": self.count}


def canonical_key(items: Iterable[str]) -> Itemset:
    """Return the sorted, duplicate-free tuple used as an itemset lookup key."""
    return tuple(sorted(set(items)))


def normalize_transactions(transactions: Iterable[Iterable[str]]) -> List[Tuple[str, ...]]:
    """Drop repeated items inside each transaction, keeping first-seen order."""
    normalized: List[Tuple[str, ...]] = []
    for transaction in transactions:
        normalized.append(tuple(dict.fromkeys(transaction)))
    return normalized


def min_support_count(min_support: float, transaction_count: int) -> int:
    """Smallest absolute count whose fraction of ``transaction_count`` reaches ``min_support``."""
    if transaction_count <= 0:
        return 1
    return max(1, math.ceil(min_support * transaction_count - _COUNT_TOLERANCE))


def support_count(itemset: Iterable[str], transactions: Sequence[Iterable[str]]) -> int:
    wanted = set(itemset)
    return sum(1 for transaction in transactions if wanted.issubset(transaction))


def support(itemset: Iterable[str], transactions: Sequence[Iterable[str]]) -> float:
    """Fraction of ``transactions`` that contain every item of ``itemset``.

    An empty transaction list yields 0.0 instead of dividing by zero.
    """
    if not transactions:
        return 0.0
    return support_count(itemset, transactions) / len(transactions)


def count_items(
    transactions: Sequence[Sequence[str]],
    weights: Optional[Sequence[int]] = None,
) -> Counter:
    counter: Counter = Counter()
    for index, transaction in enumerate(transactions):
        weight = weights[index] if weights is not None else 1
        for item in set(transaction):
            counter[item] += weight
    return counter


def group_by_size(
    itemset_counts: Dict[Itemset, int],
    transaction_count: int,
) -> Dict[int, List[FrequentItemset]]:
    """Bucket ``{itemset: count}`` into ``{size: [FrequentItemset, ...]}``.

    Groups are ordered by descending support, then by the itemset labels.
    """
    grouped: Dict[int, List[FrequentItemset]] = {}
    if transaction_count <= 0:
        return grouped
    for items, count in itemset_counts.items():
        entry = FrequentItemset(items=items, count=count, support=count / transaction_count)
        grouped.setdefault(entry.size, []).append(entry)
    for size in grouped:
        grouped[size].sort(key=lambda entry: (-entry.count, entry.items))
    return dict(sorted(grouped.items()))
