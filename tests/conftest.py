"""
Pytest configuration and shared fixtures
"""

import pytest

from relalg.core.config import reset_settings
from relalg.core.relation import Relation, Tuple


@pytest.fixture(autouse=True)
def default_settings():
    """Every test starts (and ends) with the default settings"""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def build():
    """Factory building an expected relation from attribute dicts"""

    def _build(*rows):
        return Relation.from_tuples("expected", [Tuple(row) for row in rows])

    return _build


@pytest.fixture
def persons():
    return Relation.from_columns(
        "Persons", {"pid": [1, 2], "name": ["Bob", "Alice"], "age": [14, 32]}
    )


@pytest.fixture
def persons2():
    return Relation.from_columns(
        "Persons2", {"pid": [3, 2], "name": ["Dave", "Alice"], "age": [40, 32]}
    )


@pytest.fixture
def persons3():
    return Relation.from_columns(
        "Persons3",
        {"pid": [3, 1, 4], "name": ["Dave", "Alice", "Eve"], "height": [1.8, 1.62, 1.66]},
    )


@pytest.fixture
def orders():
    return Relation.from_columns(
        "Orders",
        {"oid": [1, 2, 3], "ordered_by": [1, 1, 2], "total_value": [1000, 100, 10]},
    )


@pytest.fixture
def orders2():
    return Relation.from_columns(
        "Orders2",
        {"oid": [1, 2, 3, 4], "ordered_by": [1, 1, 2, 42], "total_value": [1000, 100, 10, 1]},
    )


@pytest.fixture
def points():
    return Relation.from_columns("Points", {"x": [1, 42, 1, 66], "y": [1, 4, 1, 77]})


@pytest.fixture
def temperatures():
    return Relation.from_columns("Temperatures", {"c": [40, -4]})


@pytest.fixture
def chars():
    return Relation.from_columns(
        "Chars",
        {
            "char": ["a", "b", "a", "c", "d", "e", "b", "a"],
            "x": [2, 1, 1, 1, 1, 1, 2, 3],
        },
    )
