"""
OrderBy Operator

Sorts tuples ascending by one attribute.
"""

from typing import Any, Optional

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.operators.base import UnaryOperation


class OrderBy(UnaryOperation):
    """
    ORDER BY operator (↓)

    The sort is stable: tuples with equal values keep their relative
    input order. None values go last (or first, see Settings.nulls_last).
    All other values are compared with Python's ordering.

    Works on the whole input at once, so no applied events are fired.

    Raises:
        TypeError: If the attribute holds values that can't be compared
                   with each other (e.g. ints mixed with strs)
    """

    symbol = "↓"
    per_tuple = False

    def __init__(self, attr: str, ids: Optional[IdSequence] = None):
        """
        Initialize OrderBy operator

        Args:
            attr: Attribute to sort by
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.attr = attr

    def init_result(self, relation: Relation) -> list[Tuple]:
        return list(relation.tuples)

    def finalize_result(self, result: list[Tuple], relation: Relation) -> Relation:
        null_rank = 2 if self.settings.nulls_last else 0

        def sort_key(t: Tuple) -> tuple[Any, ...]:
            value = t.get(self.attr)
            # Rank NULLs apart so they never get compared with values
            return (null_rank,) if value is None else (1, value)

        final = self.new_relation((relation,))
        final.add_tuples(sorted(result, key=sort_key))
        return final

    def __repr__(self) -> str:
        return f"OrderBy({self.attr})"
