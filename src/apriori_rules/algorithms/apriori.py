# src/apriori_rules/algorithms/apriori.py

from typing import FrozenSet, Hashable, List, NamedTuple, Set, Tuple
import logging

from apriori_rules.algorithms.index import ItemIndex
from apriori_rules.algorithms.support import products_support, relative_support
from apriori_rules.config import MiningConfig

logger = logging.getLogger(__name__)

Products = Tuple[Hashable, ...]


class FrequentItemset(NamedTuple):
    products: Products
    support: int
    rel_support: float


# levels[k] holds itemsets of exactly k + 1 items
Levels = List[List[FrequentItemset]]
RejectedSets = List[List[FrozenSet[Hashable]]]


def _reject(rejected: RejectedSets, k: int, products: FrozenSet[Hashable]) -> None:
    while len(rejected) <= k:
        rejected.append([])
    rejected[k].append(products)


def is_pruned(products: FrozenSet[Hashable], k: int, rejected: RejectedSets) -> bool:
    """
    True if some itemset rejected at level k is a subset of `products`.
    Level 0 never prunes.
    """
    if k == 0 or len(rejected) <= k:
        return False
    return any(r <= products for r in rejected[k])


def generate_one_element_sets(
    item_index: ItemIndex,
    transaction_count: int,
    config: MiningConfig,
    rejected: RejectedSets,
) -> List[FrequentItemset]:
    """
    Seed level 0: every indexed item is a candidate singleton.
    Infrequent singletons go to rejected level 0.
    """
    result: List[FrequentItemset] = []
    for product, tids in item_index.items():
        rel_support = relative_support(len(tids), transaction_count)
        if rel_support < config.min_support:
            _reject(rejected, 0, frozenset([product]))
            continue
        result.append(
            FrequentItemset((product,), len(tids), round(rel_support, config.support_precision))
        )
    return result


def generate_next_candidates(
    level_sets: List[FrequentItemset],
    k: int,
    rejected: RejectedSets,
    config: MiningConfig,
) -> List[Products]:
    """
    Join step (level k -> k+1), followed by the two pre-filters:
      - support-sum bound on oversized unions (optional heuristic)
      - rejection-subset pruning against rejected level k
    Pruned unions are recorded in rejected level k+1.
    Unions larger than k+2 items are not candidates at this level; when
    frequent they are reached through smaller joins at their own level.
    """
    candidates: List[Products] = []
    seen: Set[FrozenSet[Hashable]] = set()

    n = len(level_sets)
    for i in range(n):
        for j in range(i + 1, n):
            first, second = level_sets[i], level_sets[j]
            products = tuple(dict.fromkeys(first.products + second.products))
            key = frozenset(products)
            if key in seen:
                continue
            seen.add(key)

            if (
                config.support_sum_pruning
                and len(products) > k + 2
                and first.rel_support + second.rel_support < config.min_support
            ):
                _reject(rejected, k + 1, key)
                continue

            if len(products) != k + 2:
                continue

            if is_pruned(key, k, rejected):
                _reject(rejected, k + 1, key)
                continue

            candidates.append(products)
    return candidates


def generate_sets(
    item_index: ItemIndex,
    transaction_count: int,
    config: MiningConfig,
) -> Tuple[Levels, RejectedSets]:
    """
    Level-wise expansion until a join yields no candidates or a level
    accepts nothing.

    Returns:
      levels: accepted itemsets per level (level 0 always present)
      rejected: rejected itemsets per level, append-only
    """
    rejected: RejectedSets = [[]]
    levels: Levels = [generate_one_element_sets(item_index, transaction_count, config, rejected)]
    logger.debug(
        "level 0: %d accepted, %d rejected", len(levels[0]), len(rejected[0])
    )

    k = 0
    while levels[k]:
        if config.max_length is not None and k + 2 > config.max_length:
            break

        candidates = generate_next_candidates(levels[k], k, rejected, config)
        if not candidates:
            break

        accepted: List[FrequentItemset] = []
        for products in candidates:
            support = products_support(item_index, products)
            rel_support = relative_support(support, transaction_count)
            if rel_support < config.min_support:
                _reject(rejected, k + 1, frozenset(products))
                continue
            accepted.append(
                FrequentItemset(products, support, round(rel_support, config.support_precision))
            )

        logger.debug(
            "level %d: %d candidates, %d accepted, %d rejected",
            k + 1, len(candidates), len(accepted),
            len(rejected[k + 1]) if len(rejected) > k + 1 else 0,
        )
        if not accepted:
            break
        levels.append(accepted)
        k += 1

    return levels, rejected
