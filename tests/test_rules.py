import pytest

from basket_mining.models.fp_growth import generate_frequent_itemsets
from basket_mining.models.rules import generate_rules


def _rule(rules, antecedent, consequent):
    for rule in rules:
        if rule.antecedent == antecedent and rule.consequent == consequent:
            return rule
    raise AssertionError(f"missing rule {antecedent} -> {consequent}")


def test_market_basket_rules(market_basket) -> None:
    counts = generate_frequent_itemsets(market_basket, 0.4)
    rules = generate_rules(counts, len(market_basket), 0.6)

    diapers_beer = _rule(rules, ("Diapers",), ("Beer",))
    assert diapers_beer.confidence == pytest.approx(0.75)
    assert diapers_beer.support == pytest.approx(0.6)
    assert diapers_beer.lift == pytest.approx(0.75 / 0.6)

    beer_diapers = _rule(rules, ("Beer",), ("Diapers",))
    assert beer_diapers.confidence == pytest.approx(1.0)
    assert beer_diapers.lift == pytest.approx(1.25)

    for rule in rules:
        assert 0.6 <= rule.confidence <= 1.0
    confidences = [rule.confidence for rule in rules]
    assert confidences == sorted(confidences, reverse=True)


def test_every_split_is_enumerated(simple_baskets) -> None:
    counts = generate_frequent_itemsets(simple_baskets, 0.4)
    rules = generate_rules(counts, len(simple_baskets), 0.01)
    triple = [rule for rule in rules if len(rule.antecedent) + len(rule.consequent) == 3]
    assert len(triple) == 6
    pairs = [rule for rule in rules if len(rule.antecedent) + len(rule.consequent) == 2]
    assert len(pairs) == 6
    for rule in rules:
        assert not set(rule.antecedent) & set(rule.consequent)


def test_lift_on_all_pairs_dataset(simple_baskets) -> None:
    counts = generate_frequent_itemsets(simple_baskets, 0.4)
    rules = generate_rules(counts, len(simple_baskets), 0.5)
    a_to_b = _rule(rules, ("A",), ("B",))
    # support(A,B) = 0.6, support(A) = support(B) = 0.8
    assert a_to_b.confidence == pytest.approx(0.75)
    assert a_to_b.lift == pytest.approx(0.9375)


def test_ties_keep_discovery_order() -> None:
    counts = {("a",): 2, ("b",): 2, ("c",): 2, ("a", "b"): 2, ("b", "c"): 2}
    rules = generate_rules(counts, 4, 0.5)
    assert [(rule.antecedent, rule.consequent) for rule in rules] == [
        (("a",), ("b",)),
        (("b",), ("a",)),
        (("b",), ("c",)),
        (("c",), ("b",)),
    ]


def test_missing_subsets_fall_back_to_transactions() -> None:
    transactions = [["a", "b"], ["a", "b"], ["a"], ["c"]]
    counts = {("a", "b"): 2}
    rules = generate_rules(counts, len(transactions), 0.5, transactions)
    b_to_a = _rule(rules, ("b",), ("a",))
    assert b_to_a.confidence == pytest.approx(1.0)
    assert b_to_a.lift == pytest.approx(1 / 0.75)
    a_to_b = _rule(rules, ("a",), ("b",))
    assert a_to_b.confidence == pytest.approx(2 / 3)


def test_degenerate_counts_score_zero() -> None:
    assert generate_rules({("a", "b"): 1}, 4, 0.1) == []
    assert generate_rules({("a", "b"): 1}, 0, 0.1) == []
    rules = generate_rules({("a", "b"): 1, ("a",): 1}, 4, 0.1)
    assert len(rules) == 1
    assert rules[0].lift == 0.0
