"""Property checks for validating mining output."""
from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Sequence, Tuple

from ..models.rules import AssociationRule
from ..models.support import Itemset

_EPSILON = 1e-12


def downward_closure_violations(support_table: Dict[Itemset, float]) -> List[Tuple[Itemset, Itemset]]:
    """Return ``(itemset, subset)`` pairs where a subset is missing or less supported."""
    violations: List[Tuple[Itemset, Itemset]] = []
    for itemset, value in support_table.items():
        for size in range(1, len(itemset)):
            for subset in combinations(itemset, size):
                subset_support = support_table.get(subset)
                if subset_support is None or subset_support + _EPSILON < value:
                    violations.append((itemset, subset))
    return violations


def support_bound_violations(support_table: Dict[Itemset, float]) -> List[Itemset]:
    return [itemset for itemset, value in support_table.items() if not 0.0 <= value <= 1.0]


def rule_violations(rules: Sequence[AssociationRule], min_confidence: float) -> List[AssociationRule]:
    """Rules whose confidence leaves [min_confidence, 1] or whose sides overlap or are empty."""
    bad: List[AssociationRule] = []
    for rule in rules:
        if not rule.antecedent or not rule.consequent:
            bad.append(rule)
        elif set(rule.antecedent) & set(rule.consequent):
            bad.append(rule)
        elif not min_confidence - _EPSILON <= rule.confidence <= 1.0 + _EPSILON:
            bad.append(rule)
        elif rule.lift < 0.0:
            bad.append(rule)
    return bad


def support_table_diff(
    left: Dict[Itemset, float],
    right: Dict[Itemset, float],
) -> Dict[str, List[Itemset]]:
    """Itemsets present on one side only, plus those whose support differs."""
    return {
        "only_left": sorted(set(left) - set(right)),
        "only_right": sorted(set(right) - set(left)),
        "mismatched": sorted(key for key in set(left) & set(right) if left[key] != right[key]),
    }
