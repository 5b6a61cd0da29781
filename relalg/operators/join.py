"""
Join operators

Implements cross product and the join family on top of the nested-loop
generator:

- CrossProduct: every pair of tuples
- EquiJoin: pairs whose join attributes are equal
- NaturalJoin: pairs equal on every attribute both schemas share
- LeftJoin / RightJoin / FullOuterJoin: equi-join plus null-padded
  tuples without a join partner
- LeftSemiJoin / RightSemiJoin: equi-join projected onto one side

Every variant except NaturalJoin requires schema-disjoint operands. The
check runs in before_execute(), before any pair is inspected.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from relalg.core.errors import SchemaConflictError
from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple, values_equal
from relalg.operators.base import AttributeGetter, BinaryOperation, attribute_getter
from relalg.operators.project import Projection

logger = logging.getLogger(__name__)


def _merge_schemas(left: Relation, right: Relation) -> list[str]:
    """Left schema followed by the right attributes not already present"""
    return list(dict.fromkeys(left.schema + right.schema))


class _DisjointJoin(BinaryOperation):
    """Base for operators that combine the attributes of two disjoint schemas"""

    def before_execute(self, left: Relation, right: Relation) -> None:
        if not left.schema_disjunct(right):
            shared = [attr for attr in left.schema if attr in right.schema]
            logger.debug(
                "%s rejected %r and %r, shared attributes: %s",
                self.__class__.__name__,
                left.name,
                right.name,
                shared,
            )
            raise SchemaConflictError(
                f"Can not perform {self.__class__.__name__} on relations with conjunct "
                f"schemas: {left.name} and {right.name} share {shared}"
            )

    def join_pair(self, a: Tuple, b: Tuple) -> Tuple:
        return self.new_tuple({**a.data, **b.data})

    def finalize_result(self, result: list[Tuple], left: Relation, right: Relation) -> Relation:
        final = self.new_relation((left, right))
        final.add_tuples(result)
        return final

    def derive_schema(self, left: Relation, right: Relation) -> list[str]:
        return left.schema + right.schema


class CrossProduct(_DisjointJoin):
    """
    Cross product (✕) of two relations

    onApplied: (a, b, t) - the left tuple, the right tuple, the joined tuple
    """

    symbol = "✕"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(ids=ids)

    def apply(self, a: Tuple, b: Tuple, result: list[Tuple], left: Relation, right: Relation) -> None:
        joined = self.join_pair(a, b)
        result.append(joined)
        self.notify_applied(a, b, joined)


class EquiJoin(_DisjointJoin):
    """
    Equi-join (⋈) on one value from each side

    A pair (a, b) is joined if get_a(a) equals get_b(b).

    onApplied: (a, b, t) - the left tuple, the right tuple, and the joined
    tuple or False if the pair didn't match
    """

    symbol = "⋈"

    def __init__(
        self,
        get_a: Union[str, AttributeGetter],
        get_b: Union[str, AttributeGetter],
        ids: Optional[IdSequence] = None,
    ):
        """
        Initialize equi-join

        Args:
            get_a: Attribute name or getter for the left relation's join value
            get_b: Attribute name or getter for the right relation's join value
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.get_a = attribute_getter(get_a)
        self.get_b = attribute_getter(get_b)

    def matches(self, a: Tuple, b: Tuple) -> bool:
        return values_equal(self.get_a(a), self.get_b(b))

    def apply(self, a: Tuple, b: Tuple, result: list[Tuple], left: Relation, right: Relation) -> None:
        if self.matches(a, b):
            joined = self.join_pair(a, b)
            result.append(joined)
            self.notify_applied(a, b, joined)
        else:
            self.notify_applied(a, b, False)


@dataclass
class _NaturalJoinState:
    keys: list[str]
    result: list[Tuple] = field(default_factory=list)


class NaturalJoin(BinaryOperation):
    """
    Natural join (⋈ₙ) on all attributes both schemas share

    Shared attributes appear once in the result. Without any shared
    attribute every pair matches, so the join degenerates to a cross
    product.

    onApplied: (a, b, t) - the left tuple, the right tuple, and the joined
    tuple or False if the pair didn't match
    """

    symbol = "⋈ₙ"

    def __init__(self, ids: Optional[IdSequence] = None):
        super().__init__(ids=ids)

    def init_result(self, left: Relation, right: Relation) -> _NaturalJoinState:
        keys = [attr for attr in left.schema if attr in right.schema]
        logger.debug("NaturalJoin on %s", keys or "no shared attributes (cross product)")
        return _NaturalJoinState(keys)

    def apply(
        self, a: Tuple, b: Tuple, state: _NaturalJoinState, left: Relation, right: Relation
    ) -> None:
        if all(values_equal(a.get(key), b.get(key)) for key in state.keys):
            joined = self.new_tuple({**a.data, **b.data})
            state.result.append(joined)
            self.notify_applied(a, b, joined)
        else:
            self.notify_applied(a, b, False)

    def finalize_result(self, state: _NaturalJoinState, left: Relation, right: Relation) -> Relation:
        final = self.new_relation((left, right))
        final.add_tuples(state.result)
        return final

    def derive_schema(self, left: Relation, right: Relation) -> list[str]:
        return _merge_schemas(left, right)


@dataclass
class _OuterJoinState:
    # Tuples still lacking a join partner, keyed by tuple id (insertion ordered)
    unmatched_left: dict[int, Tuple]
    unmatched_right: dict[int, Tuple]
    result: list[Tuple] = field(default_factory=list)


class _OuterJoin(EquiJoin):
    """
    Equi-join that keeps tuples without a join partner

    ``preserve`` names the side(s) whose unmatched tuples are emitted,
    padded with Settings.pad_value for the other side's attributes.
    Padded tuples follow the matched ones; left before right.
    """

    preserve = "left"

    def init_result(self, left: Relation, right: Relation) -> _OuterJoinState:
        keep_left = self.preserve in ("left", "both")
        keep_right = self.preserve in ("right", "both")
        return _OuterJoinState(
            unmatched_left={t.id: t for t in left} if keep_left else {},
            unmatched_right={t.id: t for t in right} if keep_right else {},
        )

    def apply(
        self, a: Tuple, b: Tuple, state: _OuterJoinState, left: Relation, right: Relation
    ) -> None:
        if self.matches(a, b):
            joined = self.join_pair(a, b)
            state.result.append(joined)
            state.unmatched_left.pop(a.id, None)
            state.unmatched_right.pop(b.id, None)
            self.notify_applied(a, b, joined)
        else:
            self.notify_applied(a, b, False)

    def finalize_result(self, state: _OuterJoinState, left: Relation, right: Relation) -> Relation:
        pad_value = self.settings.pad_value

        right_nulls = {attr: pad_value for attr in right.schema}
        for t in state.unmatched_left.values():
            padded = self.new_tuple({**t.data, **right_nulls})
            state.result.append(padded)
            self.notify_applied(t, False, padded)

        left_nulls = {attr: pad_value for attr in left.schema}
        for t in state.unmatched_right.values():
            padded = self.new_tuple({**left_nulls, **t.data})
            state.result.append(padded)
            self.notify_applied(False, t, padded)

        final = self.new_relation((left, right))
        final.add_tuples(state.result)
        return final

    def derive_schema(self, left: Relation, right: Relation) -> list[str]:
        return _merge_schemas(left, right)


class LeftJoin(_OuterJoin):
    """
    Left outer join (⟕)

    Every left tuple without a join partner is emitted once, with the
    right attributes null-filled.

    onApplied: (a, b, t) for every pair (t is False for non-matches),
    (a, False, t) for each padded left tuple
    """

    symbol = "⟕"
    preserve = "left"


class RightJoin(_OuterJoin):
    """
    Right outer join (⟖)

    Mirror of LeftJoin: the right relation drives the nested loop and its
    unmatched tuples are emitted with the left attributes null-filled.
    get_a still reads the left relation and get_b the right one.

    onApplied: (a, b, t) for every pair (t is False for non-matches),
    (False, b, t) for each padded right tuple
    """

    symbol = "⟖"
    preserve = "right"
    drive_from_right = True


class FullOuterJoin(_OuterJoin):
    """
    Full outer join (⟗)

    Unmatched tuples from both sides are emitted, each padded for the
    other side. Matched pairs appear exactly once.

    onApplied: (a, b, t) for every pair, (a, False, t) for padded left
    tuples, (False, b, t) for padded right tuples
    """

    symbol = "⟗"
    preserve = "both"


class _SemiJoin(_DisjointJoin):
    """
    Equi-join projected onto the schema of the preserved side

    Duplicates caused by several join partners are kept. applied events
    are forwarded from the projection step: (t, pt) with t the joined
    tuple and pt its projection.
    """

    preserve = "left"

    def __init__(
        self,
        get_a: Union[str, AttributeGetter],
        get_b: Union[str, AttributeGetter],
        ids: Optional[IdSequence] = None,
    ):
        super().__init__(ids=ids)
        self.get_a = attribute_getter(get_a)
        self.get_b = attribute_getter(get_b)

    def _drive(self, inputs: tuple) -> Any:
        left, right = inputs
        self.before_execute(left, right)

        join = EquiJoin(self.get_a, self.get_b, ids=self.ids)
        join.drive_from_right = self.preserve == "right"
        joined = join.execute(left, right)

        projection = Projection(self.derive_schema(left, right), ids=self.ids)
        projection.on_applied(self.notify_applied)
        result = projection.execute(joined)
        result.name = self.generate_result_name(left, right)
        return result

    def derive_schema(self, left: Relation, right: Relation) -> list[str]:
        return left.schema if self.preserve == "left" else right.schema


class LeftSemiJoin(_SemiJoin):
    """Left semi-join (⋉): equi-join projected onto the left schema"""

    symbol = "⋉"
    preserve = "left"


class RightSemiJoin(_SemiJoin):
    """Right semi-join (⋊): equi-join projected onto the right schema"""

    symbol = "⋊"
    preserve = "right"
