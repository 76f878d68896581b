# src/apriori_rules/miner.py

from typing import List, Tuple
import logging
import time

from apriori_rules.algorithms.apriori import FrequentItemset, Levels, RejectedSets, generate_sets
from apriori_rules.algorithms.index import build_item_index
from apriori_rules.algorithms.rules import Rule, calculate_rules
from apriori_rules.config import MiningConfig
from apriori_rules.data_io import Records, basic_stats

logger = logging.getLogger(__name__)


class Apriori:
    """
    Frequent itemsets and association rules for one batch of transactions.

    The whole computation runs in the constructor; afterwards the object
    only answers queries. A new input needs a new instance.

        miner = Apriori(rows, min_support=0.5, min_conf=0.5)
        miner.get_sets()   # [[FrequentItemset, ...], ...] by level
        miner.get_rules()  # [Rule, ...]

    Extra keyword options are passed to MiningConfig.
    """

    def __init__(
        self,
        records: Records,
        min_support: float = 0.2,
        min_conf: float = 0.5,
        transaction_field: str = "transaction_id",
        product_field: str = "product",
        **options,
    ):
        self.config = MiningConfig(
            min_support=min_support,
            min_conf=min_conf,
            transaction_field=transaction_field,
            product_field=product_field,
            **options,
        )

        start = time.time()
        self._item_index, self._transaction_count = build_item_index(
            records, transaction_field, product_field
        )
        self._sets, self._rejected = generate_sets(
            self._item_index, self._transaction_count, self.config
        )
        self._rules = calculate_rules(
            self._sets, self._item_index, min_conf, self.config.confidence_precision
        )
        self._elapsed = time.time() - start

        logger.info(
            "apriori: %d transactions, %d items, %d itemsets over %d levels, %d rules in %.1f ms",
            self._transaction_count,
            len(self._item_index),
            sum(len(level) for level in self._sets),
            len(self._sets),
            len(self._rules),
            self._elapsed * 1000,
        )

    @property
    def transaction_count(self) -> int:
        return self._transaction_count

    @property
    def elapsed(self) -> float:
        """Runtime of the constructor's computation, in seconds."""
        return self._elapsed

    def get_sets(self) -> Levels:
        return [list(level) for level in self._sets]

    def get_frequent_itemsets(self) -> List[FrequentItemset]:
        """All accepted itemsets, flattened in level order."""
        return [itemset for level in self._sets for itemset in level]

    def get_rejected_sets(self) -> RejectedSets:
        return [list(level) for level in self._rejected]

    def get_rules(self) -> List[Rule]:
        return list(self._rules)

    def stats(self) -> dict:
        return basic_stats(self._item_index, self._transaction_count)


def apriori(
    records: Records,
    min_support: float,
    min_conf: float,
    **options,
) -> Tuple[Levels, List[Rule], float]:
    """
    Function form of Apriori.
    Returns:
      levels: frequent itemsets grouped by level
      rules: association rules above min_conf
      elapsed_time: runtime in seconds
    """
    miner = Apriori(records, min_support, min_conf, **options)
    return miner.get_sets(), miner.get_rules(), miner.elapsed
