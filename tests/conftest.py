import pytest


def rows_from(transactions, tid_key="transaction_id", item_key="product"):
    return [
        {tid_key: tid, item_key: item}
        for tid, items in transactions.items()
        for item in items
    ]


@pytest.fixture
def small_basket():
    # T1={A,B}, T2={A,B,C}, T3={A}, T4={B,C}
    return rows_from({
        "T1": ["A", "B"],
        "T2": ["A", "B", "C"],
        "T3": ["A"],
        "T4": ["B", "C"],
    })


@pytest.fixture
def grocery():
    return {
        1: ["milk", "bread", "eggs"],
        2: ["milk", "bread"],
        3: ["milk", "bread", "butter"],
        4: ["bread", "butter"],
        5: ["milk", "eggs"],
        6: ["milk", "bread", "eggs", "butter"],
        7: ["bread", "eggs", "jam"],
        8: ["milk", "bread", "eggs"],
    }


@pytest.fixture
def grocery_rows(grocery):
    return rows_from(grocery)
