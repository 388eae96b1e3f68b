import random
from typing import List

import pytest

from basket_mining.data.ingestion import parse_transactions
from basket_mining.data.samples import SAMPLE_DATASETS
from basket_mining.models import apriori, fp_growth
from basket_mining.models.fp_growth import FPGrowthMiner


def _random_baskets(seed: int, size: int, alphabet: str, max_len: int) -> List[List[str]]:
    rng = random.Random(seed)
    baskets = []
    for _ in range(size):
        length = rng.randint(0, max_len)
        baskets.append([rng.choice(alphabet) for _ in range(length)])
    return baskets


def test_market_basket_patterns(market_basket) -> None:
    patterns = fp_growth.generate_frequent_itemsets(market_basket, 0.4)
    assert patterns[("Beer", "Diapers")] == 3
    assert patterns[("Bread", "Diapers", "Milk")] == 2
    assert patterns[("Beer", "Diapers", "Milk")] == 2
    assert ("Bread", "Cola") not in patterns


@pytest.mark.parametrize("name", sorted(SAMPLE_DATASETS))
@pytest.mark.parametrize("min_support", [0.1, 0.25, 0.4, 0.6])
def test_matches_apriori_on_samples(name: str, min_support: float) -> None:
    transactions = parse_transactions(SAMPLE_DATASETS[name])
    assert fp_growth.generate_frequent_itemsets(transactions, min_support) == (
        apriori.generate_frequent_itemsets(transactions, min_support)
    )


@pytest.mark.parametrize("seed", range(8))
def test_matches_apriori_on_random_baskets(seed: int) -> None:
    transactions = _random_baskets(seed, size=40, alphabet="abcdefgh", max_len=6)
    min_support = [0.05, 0.1, 0.2, 0.3][seed % 4]
    assert fp_growth.generate_frequent_itemsets(transactions, min_support) == (
        apriori.generate_frequent_itemsets(transactions, min_support)
    )


def test_miner_records_tree_statistics(market_basket) -> None:
    miner = FPGrowthMiner(market_basket, 0.4)
    miner.run()
    assert miner.min_count == 2
    assert miner.tree is not None
    assert miner.tree_nodes == miner.tree.node_count
    assert miner.conditional_trees > 0


def test_independent_runs_do_not_share_state(market_basket, simple_baskets) -> None:
    first = fp_growth.generate_frequent_itemsets(market_basket, 0.4)
    fp_growth.generate_frequent_itemsets(simple_baskets, 0.2)
    assert fp_growth.generate_frequent_itemsets(market_basket, 0.4) == first


def test_nothing_frequent() -> None:
    assert fp_growth.generate_frequent_itemsets([["a"], ["b"], ["c"]], 0.5) == {}
    assert fp_growth.generate_frequent_itemsets([], 0.5) == {}
