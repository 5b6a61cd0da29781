"""
Rename operator - renames attributes of a relation
"""

from collections.abc import Mapping
from typing import Optional

from relalg.core.errors import SchemaConflictError
from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.operators.base import UnaryOperation


class Rename(UnaryOperation):
    """
    Rename operator (ρ)

    Attributes missing from the mapping keep their name.

    onApplied: (t, rt) - the original tuple and the renamed tuple
    """

    symbol = "ρ"

    def __init__(self, mapping: Mapping[str, str], ids: Optional[IdSequence] = None):
        """
        Initialize rename operator

        Args:
            mapping: Original attribute name -> new name
            ids: Id allocation context
        """
        super().__init__(ids=ids)
        self.mapping = dict(mapping)

    def before_execute(self, relation: Relation) -> None:
        schema = self.derive_schema(relation)
        if len(set(schema)) != len(schema):
            raise SchemaConflictError(
                f"Renaming {self.mapping} would produce duplicate attributes: {schema}"
            )

    def apply(self, t: Tuple, result: list[Tuple], relation: Relation) -> None:
        renamed = self.new_tuple({self.mapping.get(k, k): t.get(k) for k in t.keys()})
        result.append(renamed)
        self.notify_applied(t, renamed)

    def finalize_result(self, result: list[Tuple], relation: Relation) -> Relation:
        final = self.new_relation((relation,))
        final.add_tuples(result)
        return final

    def derive_schema(self, relation: Relation) -> list[str]:
        return [self.mapping.get(attr, attr) for attr in relation.schema]

    def __repr__(self) -> str:
        renames = ", ".join(f"{old} -> {new}" for old, new in self.mapping.items())
        return f"Rename({renames})"
