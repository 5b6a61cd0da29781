"""
Distinct operator - removes structurally duplicate tuples
"""

from collections.abc import Iterator
from typing import Optional

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.operators.base import UnaryOperation


class UniqueTuples:
    """
    Insertion-ordered collection of structurally distinct tuples

    Membership uses tuple equality (hash + attribute values), not object
    identity, so two separately built but equal tuples count once.
    """

    def __init__(self):
        self._seen: set[Tuple] = set()
        self.tuples: list[Tuple] = []

    def add(self, t: Tuple) -> bool:
        """Add a tuple, returning False if an equal one is already present"""
        if t in self._seen:
            return False
        self._seen.add(t)
        self.tuples.append(t)
        return True

    def __contains__(self, t: object) -> bool:
        return t in self._seen

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self.tuples)

    def __len__(self) -> int:
        return len(self.tuples)


class Distinct(UnaryOperation):
    """
    Distinct operator (ᵈ)

    Keeps the first occurrence of each tuple in input order.

    onApplied: (t, added) - the tuple, and whether it was added to the result
    """

    symbol = "ᵈ"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(ids=ids)

    def init_result(self, relation: Relation) -> UniqueTuples:
        return UniqueTuples()

    def apply(self, t: Tuple, result: UniqueTuples, relation: Relation) -> None:
        added = result.add(t)
        self.notify_applied(t, added)

    def finalize_result(self, result: UniqueTuples, relation: Relation) -> Relation:
        final = self.new_relation((relation,))
        final.add_tuples(result)
        return final
