from apriori_rules.algorithms.apriori import FrequentItemset, generate_sets
from apriori_rules.algorithms.index import build_item_index
from apriori_rules.algorithms.rules import Rule, calculate_rules
from apriori_rules.config import MiningConfig


def _scenario(rows, min_support=0.5):
    index, count = build_item_index(rows)
    levels, _ = generate_sets(index, count, MiningConfig(min_support=min_support))
    return levels, index


def test_scenario_rules(small_basket):
    levels, index = _scenario(small_basket)
    rules = calculate_rules(levels, index, 0.5)

    assert rules == [
        Rule(("B",), "A", 0.67),
        Rule(("A",), "B", 0.67),
        Rule(("C",), "B", 1.0),
        Rule(("B",), "C", 0.67),
    ]


def test_confidence_threshold_is_strict(small_basket):
    levels, index = _scenario(small_basket)

    assert calculate_rules(levels, index, 1.0) == []
    assert calculate_rules(levels, index, 0.7) == [Rule(("C",), "B", 1.0)]


def test_singletons_yield_no_rules(small_basket):
    levels, index = _scenario(small_basket)
    assert calculate_rules(levels[:1], index, 0.1) == []


def test_zero_support_left_side_skipped():
    levels = [[], [FrequentItemset(("X", "Y"), 1, 0.25)]]
    assert calculate_rules(levels, {"A": (1,)}, 0.1) == []


def test_precision():
    index = {"A": (1, 2, 3), "B": (1, 2)}
    levels = [[], [FrequentItemset(("A", "B"), 2, 0.6667)]]
    rules = calculate_rules(levels, index, 0.5, precision=4)

    assert rules == [Rule(("B",), "A", 1.0), Rule(("A",), "B", 0.6667)]


def test_left_side_does_not_alias_itemset():
    products = ("A", "B", "C")
    index = {"A": (1, 2), "B": (1, 2), "C": (1, 2)}
    levels = [[], [], [FrequentItemset(products, 2, 1.0)]]
    rules = calculate_rules(levels, index, 0.5)

    assert products == ("A", "B", "C")
    assert [r.left for r in rules] == [("B", "C"), ("A", "C"), ("A", "B")]
    assert [r.right for r in rules] == ["A", "B", "C"]
