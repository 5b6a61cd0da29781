"""
Restriction operator - implements selection (σ)

Evaluates a predicate per tuple and keeps those for which it holds.
"""

from typing import Optional, Union

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.logic.predicates import Predicate, as_predicate
from relalg.operators.base import AttributeGetter, UnaryOperation


class Restriction(UnaryOperation):
    """
    Restriction operator - keeps tuples matching a predicate

    The kept tuples are the input tuples themselves; the result relation
    adopts them.

    onApplied: (t, kept) - the tuple, and whether it passed the restriction
    """

    symbol = "σ"

    def __init__(
        self,
        predicate: Union[Predicate, AttributeGetter],
        ids: Optional[IdSequence] = None,
    ):
        """
        Initialize restriction operator

        Args:
            predicate: Predicate (or plain tuple -> bool function) to test
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.predicate = as_predicate(predicate)

    def apply(self, t: Tuple, result: list[Tuple], relation: Relation) -> None:
        kept = self.predicate.holds(t)
        if kept:
            result.append(t)
        self.notify_applied(t, kept)

    def finalize_result(self, result: list[Tuple], relation: Relation) -> Relation:
        final = self.new_relation((relation,))
        final.add_tuples(result)
        return final

    def __repr__(self) -> str:
        return f"Restriction({self.predicate!r})"


Selection = Restriction
