"""Level-wise frequent itemset mining (Apriori)."""
from __future__ import annotations

import logging
from itertools import combinations
from typing import Dict, List, Sequence, Set

from .support import Itemset, canonical_key, min_support_count, normalize_transactions

logger = logging.getLogger(__name__)


class AprioriMiner:
    """Grows frequent itemsets one size at a time, counting candidates against every transaction."""

    def __init__(self, transactions: Sequence[Sequence[str]], min_support: float) -> None:
        self.ordered = normalize_transactions(transactions)
        self.transactions = [frozenset(t) for t in self.ordered]
        self.min_support = min_support
        self.min_count = min_support_count(min_support, len(self.transactions))
        self.candidates_per_level: Dict[int, int] = {}
        self.frequent_per_level: Dict[int, int] = {}

    def _seed_candidates(self) -> List[Itemset]:
        seen: Dict[str, None] = {}
        for transaction in self.ordered:
            for item in transaction:
                seen.setdefault(item, None)
        return [(item,) for item in seen]

    def _count(self, candidates: List[Itemset]) -> Dict[Itemset, int]:
        counts: Dict[Itemset, int] = {candidate: 0 for candidate in candidates}
        for transaction in self.transactions:
            for candidate in candidates:
                if transaction.issuperset(candidate):
                    counts[candidate] += 1
        return counts

    @staticmethod
    def generate_candidates(frequent: List[Itemset], k: int) -> List[Itemset]:
        """Join frequent (k-1)-itemsets into k-itemsets whose every (k-1)-subset is frequent."""
        known: Set[Itemset] = set(frequent)
        seen: Set[Itemset] = set()
        candidates: List[Itemset] = []
        for i in range(len(frequent)):
            for j in range(i + 1, len(frequent)):
                merged = canonical_key(frequent[i] + frequent[j])
                if len(merged) != k or merged in seen:
                    continue
                seen.add(merged)
                if all(subset in known for subset in combinations(merged, k - 1)):
                    candidates.append(merged)
        return candidates

    def run(self) -> Dict[Itemset, int]:
        if not self.transactions:
            return {}
        result: Dict[Itemset, int] = {}
        candidates = self._seed_candidates()
        k = 1
        while candidates:
            self.candidates_per_level[k] = len(candidates)
            counts = self._count(candidates)
            frequent = [itemset for itemset in candidates if counts[itemset] >= self.min_count]
            logger.debug(
                "Apriori level %d: %d candidates, %d frequent", k, len(candidates), len(frequent)
            )
            if not frequent:
                break
            self.frequent_per_level[k] = len(frequent)
            for itemset in frequent:
                result[itemset] = counts[itemset]
            k += 1
            candidates = self.generate_candidates(frequent, k)
        return result


def generate_frequent_itemsets(
    transactions: Sequence[Sequence[str]], min_support: float
) -> Dict[Itemset, int]:
    """Return ``{canonical itemset: support count}`` for every frequent itemset."""
    return AprioriMiner(transactions, min_support).run()
