# src/apriori_rules/algorithms/index.py

from typing import Dict, Hashable, List, Set, Tuple
import logging

from apriori_rules.data_io import Records, iter_pairs

ItemIndex = Dict[Hashable, Tuple[Hashable, ...]]

logger = logging.getLogger(__name__)


def build_item_index(
    records: Records,
    transaction_field: str = "transaction_id",
    product_field: str = "product",
) -> Tuple[ItemIndex, int]:
    """
    Build the vertical representation:
      item -> transaction ids containing it (first-seen order)

    Returns:
      item_index: dict[item] = tuple of distinct tids
      transaction_count: number of distinct tids
    """
    memberships: Dict[Hashable, Set[Hashable]] = {}
    vertical: Dict[Hashable, List[Hashable]] = {}

    for tid, item in iter_pairs(records, transaction_field, product_field):
        items = memberships.setdefault(tid, set())
        # a repeated (tid, item) pair must not count twice
        if item in items:
            continue
        items.add(item)
        vertical.setdefault(item, []).append(tid)

    item_index: ItemIndex = {item: tuple(tids) for item, tids in vertical.items()}
    logger.debug("indexed %d items over %d transactions", len(item_index), len(memberships))
    return item_index, len(memberships)
