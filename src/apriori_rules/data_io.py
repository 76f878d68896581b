# src/apriori_rules/data_io.py

from typing import Dict, Hashable, Iterable, Iterator, Mapping, Tuple, Union

import pandas as pd

Records = Union[pd.DataFrame, Iterable[Mapping]]


def iter_pairs(
    records: Records,
    transaction_field: str,
    product_field: str,
) -> Iterator[Tuple[Hashable, Hashable]]:
    """
    Normalize input into (tid, item) pairs.

    Accepts either:
      1) a long DataFrame with one row per (transaction, item)
      2) any iterable of mappings, e.g. a list of dicts

    DataFrame rows with a missing tid or item are skipped.
    """
    if isinstance(records, pd.DataFrame):
        missing = [c for c in (transaction_field, product_field) if c not in records.columns]
        if missing:
            raise KeyError(f"missing column(s): {missing}")
        frame = records[[transaction_field, product_field]]
        for tid, item in frame.itertuples(index=False, name=None):
            if pd.isna(tid) or pd.isna(item):
                continue
            yield tid, item
        return

    for row in records:
        yield row[transaction_field], row[product_field]


def basic_stats(item_index: Dict[Hashable, Tuple], transaction_count: int) -> dict:
    """
    Simple statistics about an item index:
      - number of transactions
      - unique items
      - total (transaction, item) pairs, duplicates collapsed
    """
    return {
        "transaction_count": transaction_count,
        "unique_items": len(item_index),
        "total_items": sum(len(tids) for tids in item_index.values()),
    }
