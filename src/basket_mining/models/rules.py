"""Association rule generation from a table of frequent itemset counts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from .support import Itemset, canonical_key, support_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssociationRule:
    antecedent: Itemset
    consequent: Itemset
    support: float
    confidence: float
    lift: float

    def to_dict(self) -> Dict[str, object]:
        return {
            "antecedent": list(self.antecedent),
            "consequent": list(self.consequent),
            "support": self.support,
            "confidence": self.confidence,
            "lift": self.lift,
        }


def _lookup(
    itemset: Itemset,
    itemset_counts: Dict[Itemset, int],
    transactions: Optional[Sequence[Sequence[str]]],
) -> int:
    count = itemset_counts.get(itemset)
    if count is not None:
        return count
    if transactions is None:
        return 0
    return support_count(itemset, transactions)


def generate_rules(
    itemset_counts: Dict[Itemset, int],
    transaction_count: int,
    min_confidence: float,
    transactions: Optional[Sequence[Sequence[str]]] = None,
) -> List[AssociationRule]:
    """Split every frequent itemset of size >= 2 into antecedent -> consequent rules.

    Counts come from ``itemset_counts``; a subset missing from it is counted
    against ``transactions`` when they are given and treated as zero otherwise.
    Rules below ``min_confidence`` are dropped. The result is ordered by
    descending confidence, ties keeping discovery order.
    """
    rules: List[AssociationRule] = []
    if transaction_count <= 0:
        return rules
    for itemset, itemset_count in itemset_counts.items():
        if len(itemset) < 2:
            continue
        itemset_support = itemset_count / transaction_count
        for size in range(1, len(itemset)):
            for antecedent in combinations(itemset, size):
                consequent = canonical_key(set(itemset) - set(antecedent))
                antecedent_count = _lookup(antecedent, itemset_counts, transactions)
                confidence = itemset_count / antecedent_count if antecedent_count else 0.0
                if confidence < min_confidence:
                    continue
                consequent_support = (
                    _lookup(consequent, itemset_counts, transactions) / transaction_count
                )
                lift = confidence / consequent_support if consequent_support else 0.0
                rules.append(
                    AssociationRule(
                        antecedent=antecedent,
                        consequent=consequent,
                        support=itemset_support,
                        confidence=confidence,
                        lift=lift,
                    )
                )
    rules.sort(key=lambda rule: rule.confidence, reverse=True)
    logger.debug("Generated %d rules at min_confidence=%.3f", len(rules), min_confidence)
    return rules
