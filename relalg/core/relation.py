"""
Tuple and Relation - the data model of the algebra

A Tuple is an immutable mapping from attribute name to value.
A Relation is a named, ordered sequence of tuples sharing one schema.

Relations are append-only. Operators only read their inputs and always
construct new relations for their output.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Any, Optional

from relalg.core.errors import (
    MissingAttributeError,
    RelationalAlgebraError,
    SchemaMismatchError,
)
from relalg.core.ids import IdSequence, default_ids

logger = logging.getLogger(__name__)


def values_equal(x: Any, y: Any) -> bool:
    """
    Deep structural equality

    Recurses into lists, tuples and dicts, and compares tuples and
    relations with their own ``equals``. Containers of different kinds
    (e.g. a list and a tuple) are never equal.

    Args:
        x: First value
        y: Second value

    Returns:
        True if both values are structurally equal
    """
    if isinstance(x, (Tuple, Relation)):
        return type(x) is type(y) and x.equals(y)

    if isinstance(x, (list, tuple)):
        if type(x) is not type(y) or len(x) != len(y):
            return False
        return all(values_equal(a, b) for a, b in zip(x, y))

    if isinstance(x, dict):
        if not isinstance(y, dict):
            return False
        return _mappings_equal(x, y)

    if isinstance(y, (Tuple, Relation, list, tuple, dict)):
        return False

    return x == y


def _mappings_equal(m1: Mapping, m2: Mapping) -> bool:
    # Same size plus one-directional lookup covers both key sets
    if len(m1) != len(m2):
        return False
    for key, value in m1.items():
        if key not in m2 or not values_equal(value, m2[key]):
            return False
    return True


def _hashable(value: Any) -> Any:
    """Convert a value into something hashable that agrees with values_equal"""
    if isinstance(value, Tuple):
        return ("tuple", value.get_hash())
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda kv: str(kv[0]))
        return ("dict", tuple((str(k), _hashable(v)) for k, v in items))
    if isinstance(value, (list, tuple)):
        return ("seq", tuple(_hashable(v) for v in value))
    if isinstance(value, (set, frozenset)):
        # set == frozenset in Python, so both hash alike
        return ("set", frozenset(_hashable(v) for v in value))
    try:
        hash(value)
        return value
    except TypeError:
        # Only the type takes part in the hash; equals() compares the values
        return ("unhashable", type(value).__name__)


class Tuple:
    """
    Immutable attribute -> value mapping

    The attribute keys form the tuple's de facto schema. Only ``index``
    and ``heritage`` change after construction, and only the relation
    that adopts the tuple changes them.

    Equality is structural: two tuples are equal if their hashes match
    and their mappings are equal key by key. The hash is computed over
    the attributes in sorted key order, so attribute insertion order
    does not matter.
    """

    def __init__(
        self,
        data: Mapping[str, Any],
        heritage: Optional[Iterable["Relation"]] = None,
        ids: Optional[IdSequence] = None,
    ):
        """
        Create a tuple

        Args:
            data: Attribute -> value mapping (copied)
            heritage: Relations that already adopted this tuple
            ids: Id allocation context (defaults to the module-level sequence)
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, but found '{type(data).__name__}'")

        self.id = (ids or default_ids).next_tuple_id()
        self._data = dict(data)
        self.index = -1
        self.heritage: list[Relation] = list(heritage) if heritage else []
        self._hash: Optional[int] = None

    @property
    def data(self) -> Mapping[str, Any]:
        """Read-only view of the attribute mapping"""
        return MappingProxyType(self._data)

    def get(self, key: str) -> Any:
        """
        Get the value of an attribute

        Raises:
            MissingAttributeError: If the tuple has no such attribute
        """
        if key not in self._data:
            raise MissingAttributeError(key)
        return self._data[key]

    def keys(self) -> list[str]:
        return list(self._data)

    def add_heritage(self, relation: "Relation") -> None:
        self.heritage.append(relation)

    def merged(self, other: "Tuple", ids: Optional[IdSequence] = None) -> "Tuple":
        """Build a new tuple holding the attributes of both tuples (other wins on clashes)"""
        return Tuple({**self._data, **other._data}, ids=ids)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def get_hash(self) -> int:
        """Compute (once) and return the structural hash"""
        if self._hash is None:
            self._hash = hash(
                tuple((key, _hashable(self._data[key])) for key in sorted(self._data))
            )
        return self._hash

    def equals(self, other: "Tuple") -> bool:
        if not isinstance(other, Tuple):
            return False
        return self.get_hash() == other.get_hash() and _mappings_equal(self._data, other._data)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.get_hash()

    def __repr__(self) -> str:
        return f"Tuple({self._data!r})"


class Relation:
    """
    Named, ordered sequence of tuples sharing one schema

    Equality is position-sensitive: two relations are equal if their
    tuple sequences are pairwise equal. Names and schemas are not
    compared. Use Distinct or OrderBy first when set semantics are needed.
    """

    def __init__(
        self,
        name: str = "",
        schema: Optional[Iterable[str]] = None,
        ids: Optional[IdSequence] = None,
    ):
        """
        Create an empty relation

        Args:
            name: Display name (not part of the relation's identity)
            schema: Ordered, unique attribute names
            ids: Id allocation context (defaults to the module-level sequence)
        """
        schema = list(schema) if schema is not None else []
        if len(set(schema)) != len(schema):
            raise ValueError(f"Schema contains duplicate attributes: {schema}")

        self.ids = ids
        self.id = (ids or default_ids).next_relation_id()
        self.name = name
        self._schema = schema
        self._tuples: list[Tuple] = []

    # Construction helpers

    @classmethod
    def from_columns(
        cls,
        name: str,
        columns: Mapping[str, Sequence[Any]],
        ids: Optional[IdSequence] = None,
    ) -> "Relation":
        """
        Build a relation from a column name -> values mapping

        Example:
            >>> Relation.from_columns("Points", {"x": [1, 42], "y": [1, 4]})
        """
        relation = cls(name, list(columns), ids=ids)
        relation.create_from_columns(columns)
        return relation

    @classmethod
    def from_rows(
        cls,
        name: str,
        schema: Iterable[str],
        rows: Iterable[Sequence[Any]],
        ids: Optional[IdSequence] = None,
    ) -> "Relation":
        """
        Build a relation from positional rows

        Raises:
            SchemaMismatchError: If a row's length differs from the schema's
        """
        relation = cls(name, schema, ids=ids)
        for row in rows:
            row = list(row)
            if len(row) != len(relation._schema):
                raise SchemaMismatchError(
                    f"Row length {len(row)} does not match schema length "
                    f"{len(relation._schema)} for relation {name}"
                )
            relation.push_tuple(Tuple(dict(zip(relation._schema, row)), ids=ids))
        return relation

    @classmethod
    def from_tuples(
        cls, name: str, tuples: Sequence[Tuple], ids: Optional[IdSequence] = None
    ) -> "Relation":
        """
        Build a relation from tuples, taking the schema from the first one

        Raises:
            RelationalAlgebraError: If no tuples are given
            SchemaMismatchError: If the tuples don't share one schema
        """
        tuples = list(tuples)
        if not tuples:
            raise RelationalAlgebraError(
                "Cannot create a relation from an empty list of tuples"
            )
        relation = cls(name, tuples[0].keys(), ids=ids)
        relation.add_tuples(tuples)
        return relation

    # Schema

    @property
    def schema(self) -> list[str]:
        return list(self._schema)

    def matches_schema(self, t: Tuple) -> bool:
        keys = t.keys()
        return len(keys) == len(self._schema) and set(keys) == set(self._schema)

    def schema_disjunct(self, other: "Relation") -> bool:
        """True if neither schema contains an attribute name of the other"""
        return not set(self._schema) & set(other._schema)

    # Population

    def push_tuple(self, t: Tuple) -> None:
        """Adopt a tuple without checking it against the schema"""
        t.index = len(self._tuples)
        t.add_heritage(self)
        self._tuples.append(t)

    def add_tuple(self, t: Tuple) -> None:
        """
        Append a tuple

        Raises:
            SchemaMismatchError: If the tuple's keys differ from the schema
        """
        if not self.matches_schema(t):
            raise SchemaMismatchError(
                f"Tuple doesn't match schema. Tuple: {t.keys()} Schema: {self._schema}"
            )
        self.push_tuple(t)

    def add_tuples(self, tuples: Iterable[Tuple]) -> None:
        for t in tuples:
            self.add_tuple(t)

    def create_from_columns(self, columns: Mapping[str, Sequence[Any]]) -> None:
        """
        Append one tuple per row of a column name -> values mapping

        The mapping keys become the schema.

        Raises:
            ValueError: If the columns have different lengths
            SchemaMismatchError: If the relation already holds tuples of another schema
        """
        schema = list(columns)
        if self._tuples and set(schema) != set(self._schema):
            raise SchemaMismatchError(
                f"Columns {schema} don't match schema {self._schema} of relation {self.name}"
            )
        self._schema = schema
        if not schema:
            return

        lengths = {len(columns[key]) for key in schema}
        if len(lengths) > 1:
            raise ValueError(f"All columns must have the same length, got {sorted(lengths)}")

        for i in range(lengths.pop()):
            self.push_tuple(Tuple({key: columns[key][i] for key in schema}, ids=self.ids))

    def create_from_rows(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Append one tuple per dict row without schema checks (deprecated)"""
        logger.warning(
            "Relation.create_from_rows is deprecated and should only be used for testing"
        )
        for row in rows:
            self.push_tuple(Tuple(row, ids=self.ids))

    def force_tuples(self, tuples: Iterable[Tuple]) -> None:
        """Append tuples bypassing schema checks (deprecated)"""
        logger.warning(
            "Relation.force_tuples bypasses schema checking and should only be used for testing"
        )
        for t in tuples:
            self.push_tuple(t)

    # Access

    @property
    def tuples(self) -> tuple[Tuple, ...]:
        return tuple(self._tuples)

    def to_dicts(self) -> list[dict[str, Any]]:
        return [t.to_dict() for t in self._tuples]

    def pretty(self, **kwargs: Any) -> str:
        """Render the relation as a table"""
        from relalg.formatters.table import TableFormatter

        return TableFormatter().format(self, **kwargs)

    def equals(self, other: "Relation") -> bool:
        if not isinstance(other, Relation) or len(self._tuples) != len(other._tuples):
            return False
        return all(a.equals(b) for a, b in zip(self._tuples, other._tuples))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Relation):
            return NotImplemented
        return self.equals(other)

    __hash__ = None  # mutable (append-only), compared structurally

    def __iter__(self) -> Iterator[Tuple]:
        return iter(self._tuples)

    def __len__(self) -> int:
        return len(self._tuples)

    def __repr__(self) -> str:
        return f"Relation({self.name!r}, schema={self._schema}, tuples={len(self._tuples)})"
