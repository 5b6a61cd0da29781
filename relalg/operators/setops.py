"""
Set operators - Union, Intersection and Without (difference)

All three produce a relation with the left operand's schema.
"""

from dataclasses import dataclass, field
from typing import Optional

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.generators.funnel import BiFunnelGenerator, FirstOnlyGenerator
from relalg.operators.base import BinaryOperation
from relalg.operators.distinct import UniqueTuples


class Union(BinaryOperation):
    """
    Union operator (∪)

    Scans both relations linearly (left first) and suppresses structural
    duplicates, including duplicates within one operand. Both operands
    are assumed to share a schema.

    onApplied: (t, added) - the tuple, and whether it was added (False for duplicates)
    """

    symbol = "∪"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(BiFunnelGenerator(), ids=ids)

    def init_result(self, left: Relation, right: Relation) -> UniqueTuples:
        return UniqueTuples()

    def apply(
        self, t: Tuple, _: None, result: UniqueTuples, left: Relation, right: Relation
    ) -> None:
        added = result.add(t)
        self.notify_applied(t, added)

    def finalize_result(self, result: UniqueTuples, left: Relation, right: Relation) -> Relation:
        final = self.new_relation((left, right))
        final.add_tuples(result)
        return final


@dataclass
class _IntersectionState:
    left_members: set[Tuple]
    right_members: set[Tuple]
    result: UniqueTuples = field(default_factory=UniqueTuples)


class Intersection(BinaryOperation):
    """
    Intersection operator (∩)

    For every (a, b) pair, b is kept if it also occurs in the left
    relation and a is kept if it also occurs in the right relation.
    Duplicates are suppressed in the output.

    onApplied: (t, added) - fired for b, then for a, on every pair
    """

    symbol = "∩"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(ids=ids)

    def init_result(self, left: Relation, right: Relation) -> _IntersectionState:
        return _IntersectionState(set(left.tuples), set(right.tuples))

    def apply(
        self, a: Tuple, b: Tuple, state: _IntersectionState, left: Relation, right: Relation
    ) -> None:
        added = b in state.left_members and state.result.add(b)
        self.notify_applied(b, added)

        added = a in state.right_members and state.result.add(a)
        self.notify_applied(a, added)

    def finalize_result(
        self, state: _IntersectionState, left: Relation, right: Relation
    ) -> Relation:
        final = self.new_relation((left, right))
        final.add_tuples(state.result)
        return final


@dataclass
class _WithoutState:
    excluded: set[Tuple]
    result: list[Tuple] = field(default_factory=list)


class Without(BinaryOperation):
    """
    Difference operator (−)

    Keeps the left tuples that don't occur in the right relation. The
    right relation is only consulted for membership, never iterated
    pairwise.

    onApplied: (a, kept) - each left tuple, and whether it was kept
    """

    symbol = "−"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(FirstOnlyGenerator(), ids=ids)

    def init_result(self, left: Relation, right: Relation) -> _WithoutState:
        return _WithoutState(set(right.tuples))

    def apply(
        self, a: Tuple, b: None, state: _WithoutState, left: Relation, right: Relation
    ) -> None:
        kept = a not in state.excluded
        if kept:
            state.result.append(a)
        self.notify_applied(a, kept)

    def finalize_result(self, state: _WithoutState, left: Relation, right: Relation) -> Relation:
        final = self.new_relation((left, right))
        final.add_tuples(state.result)
        return final
