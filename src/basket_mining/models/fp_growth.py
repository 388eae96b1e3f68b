"""Frequent itemset mining by recursive FP-Tree projection (FP-Growth)."""
from __future__ import annotations

import logging
from typing import Dict, Sequence, Tuple

from .fp_tree import FPTree, conditional_tree
from .support import Itemset, canonical_key, min_support_count, normalize_transactions

logger = logging.getLogger(__name__)


class FPGrowthMiner:
    """Builds the global FP-Tree once, then mines it rarest item first."""

    def __init__(self, transactions: Sequence[Sequence[str]], min_support: float) -> None:
        self.transactions = normalize_transactions(transactions)
        self.min_support = min_support
        self.min_count = min_support_count(min_support, len(self.transactions))
        self.tree: FPTree | None = None
        self.tree_nodes = 0
        self.conditional_trees = 0

    def run(self) -> Dict[Itemset, int]:
        if not self.transactions:
            return {}
        self.tree = FPTree.build(self.transactions, self.min_count)
        self.tree_nodes = self.tree.node_count
        logger.debug(
            "FP-Tree built: %d nodes, %d frequent items", self.tree_nodes, len(self.tree.header)
        )
        patterns: Dict[Itemset, int] = {}
        self.mine(self.tree, tuple(), patterns)
        return patterns

    def mine(self, tree: FPTree, suffix: Tuple[str, ...], patterns: Dict[Itemset, int]) -> None:
        """Emit every frequent extension of ``suffix`` found in ``tree`` into ``patterns``."""
        counts = tree.item_counts
        for item in sorted(counts, key=lambda i: (counts[i], i)):
            new_suffix = (item,) + suffix
            patterns[canonical_key(new_suffix)] = counts[item]

            base = tree.conditional_pattern_base(item)
            if not base:
                continue
            projected = conditional_tree(base, self.min_count)
            if projected.is_empty():
                continue
            self.conditional_trees += 1
            logger.debug(
                "Conditional tree for %s: %d items, %d nodes",
                list(new_suffix),
                len(projected.header),
                projected.node_count,
            )
            self.mine(projected, new_suffix, patterns)


def generate_frequent_itemsets(
    transactions: Sequence[Sequence[str]], min_support: float
) -> Dict[Itemset, int]:
    """Return ``{canonical itemset: support count}`` for every frequent itemset."""
    return FPGrowthMiner(transactions, min_support).run()
