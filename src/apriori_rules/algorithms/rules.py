# src/apriori_rules/algorithms/rules.py

from typing import Hashable, List, NamedTuple
import logging

from apriori_rules.algorithms.apriori import Levels, Products
from apriori_rules.algorithms.index import ItemIndex
from apriori_rules.algorithms.support import products_support

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    left: Products
    right: Hashable
    conf: float


def calculate_rules(
    levels: Levels,
    item_index: ItemIndex,
    min_conf: float,
    precision: int = 2,
) -> List[Rule]:
    """
    Generate single-consequent rules left -> right from frequent itemsets.

    Every itemset with 2+ items yields one candidate rule per item, with
    that item on the right and the rest on the left. A rule is kept when
      conf = support(itemset) / support(left) > min_conf
    Identical (left, right) pairs coming from different itemsets are not
    merged.
    """
    rules: List[Rule] = []

    for level in levels:
        for itemset in level:
            products = itemset.products
            if len(products) < 2:
                continue

            for i, right in enumerate(products):
                left = products[:i] + products[i + 1:]
                support = products_support(item_index, left)
                if support == 0:
                    continue
                conf = itemset.support / support
                if conf > min_conf:
                    rules.append(Rule(left, right, round(conf, precision)))

    logger.debug("%d rules above confidence %s", len(rules), min_conf)
    return rules
