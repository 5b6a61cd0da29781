"""
Projection operator - keeps only the listed attributes
"""

from typing import Optional

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.operators.base import UnaryOperation


class Projection(UnaryOperation):
    """
    Projection operator (π)

    Builds one new tuple per input tuple holding only the requested
    attributes, in the requested order. Duplicates are kept.

    onApplied: (t, pt) - the original tuple and the projected tuple
    """

    symbol = "π"

    def __init__(self, fields: list[str], ids: Optional[IdSequence] = None):
        """
        Initialize projection operator

        Args:
            fields: Attribute names to keep
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.fields = list(fields)

    def apply(self, t: Tuple, result: list[Tuple], relation: Relation) -> None:
        projected = self.new_tuple({field: t.get(field) for field in self.fields})
        result.append(projected)
        self.notify_applied(t, projected)

    def finalize_result(self, result: list[Tuple], relation: Relation) -> Relation:
        final = self.new_relation((relation,))
        final.add_tuples(result)
        return final

    def derive_schema(self, relation: Relation) -> list[str]:
        return list(self.fields)

    def __repr__(self) -> str:
        return f"Projection({', '.join(self.fields)})"
