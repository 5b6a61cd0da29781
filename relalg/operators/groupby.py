"""
GroupBy Operator

Buckets tuples by a key. Unlike every other operator, the result is not
a Relation but a mapping of group key -> list of tuples.
"""

from typing import Any, Optional, Union

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.operators.base import AttributeGetter, UnaryOperation, attribute_getter


class GroupBy(UnaryOperation):
    """
    GROUP BY operator

    Tuples keep their input order within each group, and groups appear
    in the order their first tuple was seen.

    onApplied: (key, t) - the group key t was assigned to, and t
    """

    symbol = "γ"

    def __init__(self, key: Union[str, AttributeGetter], ids: Optional[IdSequence] = None):
        """
        Initialize GroupBy operator

        Args:
            key: Attribute name, or function mapping a tuple to its group key.
                 This can be as simple as reading one attribute or as
                 involved as hashing the whole tuple.
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.key = attribute_getter(key)

    def init_result(self, relation: Relation) -> dict[Any, list[Tuple]]:
        return {}

    def apply(self, t: Tuple, groups: dict[Any, list[Tuple]], relation: Relation) -> None:
        key = self.key(t)

        # Unhashable keys (lists, dicts, sets, ...) are grouped by their string form
        try:
            hash(key)
        except TypeError:
            key = str(key)

        groups.setdefault(key, []).append(t)
        self.notify_applied(key, t)
