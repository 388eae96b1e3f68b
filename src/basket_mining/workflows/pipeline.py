"""Mining workflow: pick an engine, group its itemsets and derive rules."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..config import MiningConfig
from ..models.apriori import AprioriMiner
from ..models.fp_growth import FPGrowthMiner
from ..models.rules import AssociationRule, generate_rules
from ..models.support import (
    FrequentItemset,
    Itemset,
    group_by_size,
    min_support_count,
    normalize_transactions,
)

logger = logging.getLogger(__name__)


@dataclass
class MiningStats:
    duration_seconds: float = 0.0
    candidates_per_level: Dict[int, int] = field(default_factory=dict)
    frequent_per_level: Dict[int, int] = field(default_factory=dict)
    tree_nodes: int = 0
    conditional_trees: int = 0


@dataclass
class MiningResult:
    algorithm: str
    transaction_count: int
    min_support_count: int
    itemsets: Dict[int, List[FrequentItemset]]
    rules: List[AssociationRule]
    stats: MiningStats
    tree: Optional[Dict[str, object]] = None

    def support_table(self) -> Dict[Itemset, float]:
        return {entry.items: entry.support for group in self.itemsets.values() for entry in group}

    def to_dict(self) -> Dict[str, object]:
        return {
            "algorithm": self.algorithm,
            "transaction_count": self.transaction_count,
            "min_support_count": self.min_support_count,
            "itemsets": {
                size: [entry.to_dict() for entry in group] for size, group in self.itemsets.items()
            },
            "rules": [rule.to_dict() for rule in self.rules],
            "stats": {
                "duration_seconds": self.stats.duration_seconds,
                "candidates_per_level": self.stats.candidates_per_level,
                "frequent_per_level": self.stats.frequent_per_level,
                "tree_nodes": self.stats.tree_nodes,
                "conditional_trees": self.stats.conditional_trees,
            },
        }


@dataclass
class EngineComparison:
    apriori: MiningResult
    fp_growth: MiningResult

    @property
    def equivalent(self) -> bool:
        return self.apriori.support_table() == self.fp_growth.support_table()


def run_mining(transactions: Sequence[Sequence[str]], config: MiningConfig) -> MiningResult:
    """Mine frequent itemsets and association rules with the configured engine.

    Thresholds are validated before any work; an empty transaction list gives
    an empty result.
    """
    config.validate()
    baskets = normalize_transactions(transactions)
    stats = MiningStats()
    started = time.perf_counter()

    tree: Optional[Dict[str, object]] = None
    if config.algorithm == "apriori":
        apriori = AprioriMiner(baskets, config.min_support)
        counts = apriori.run()
        stats.candidates_per_level = dict(apriori.candidates_per_level)
        stats.frequent_per_level = dict(apriori.frequent_per_level)
    else:
        fp_growth = FPGrowthMiner(baskets, config.min_support)
        counts = fp_growth.run()
        stats.tree_nodes = fp_growth.tree_nodes
        stats.conditional_trees = fp_growth.conditional_trees
        if fp_growth.tree is not None:
            tree = fp_growth.tree.to_dict()

    itemsets = group_by_size(counts, len(baskets))
    ordered_counts = {entry.items: entry.count for group in itemsets.values() for entry in group}
    rules = generate_rules(ordered_counts, len(baskets), config.min_confidence, baskets)
    stats.duration_seconds = time.perf_counter() - started

    logger.info(
        "%s mined %d transactions: %d itemsets, %d rules in %.4fs",
        config.algorithm,
        len(baskets),
        len(ordered_counts),
        len(rules),
        stats.duration_seconds,
    )
    return MiningResult(
        algorithm=config.algorithm,
        transaction_count=len(baskets),
        min_support_count=min_support_count(config.min_support, len(baskets)),
        itemsets=itemsets,
        rules=rules,
        stats=stats,
        tree=tree,
    )


def compare_engines(transactions: Sequence[Sequence[str]], config: MiningConfig) -> EngineComparison:
    apriori_config = MiningConfig(config.min_support, config.min_confidence, "apriori")
    fp_config = MiningConfig(config.min_support, config.min_confidence, "fp-growth")
    comparison = EngineComparison(
        apriori=run_mining(transactions, apriori_config),
        fp_growth=run_mining(transactions, fp_config),
    )
    if not comparison.equivalent:
        logger.warning("Apriori and FP-Growth disagree on %d transactions", len(transactions))
    return comparison
