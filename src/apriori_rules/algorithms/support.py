# src/apriori_rules/algorithms/support.py

from typing import Hashable, Iterable

from apriori_rules.algorithms.index import ItemIndex


def products_support(item_index: ItemIndex, products: Iterable[Hashable]) -> int:
    """
    Number of distinct transactions containing every item in `products`.

    Intersects the TID lists item by item; `products` must be non-empty.
    """
    tids = None
    for product in products:
        current = item_index.get(product, ())
        tids = set(current) if tids is None else tids.intersection(current)
        if not tids:
            return 0
    if tids is None:
        raise ValueError("support of an empty itemset is undefined")
    return len(tids)


def relative_support(support: int, transaction_count: int) -> float:
    if transaction_count == 0:
        return 0.0
    return support / transaction_count
