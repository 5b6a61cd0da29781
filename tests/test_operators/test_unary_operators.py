"""
Tests for the unary operators: GroupBy, Projection, Rename, Restriction,
Distinct and OrderBy
"""

import pytest

from relalg.core.config import configure
from relalg.core.errors import MissingAttributeError, SchemaConflictError
from relalg.core.relation import Relation, Tuple
from relalg.logic.predicates import Predicate
from relalg.operators import (
    Distinct,
    ExecutionTrace,
    GroupBy,
    OrderBy,
    Projection,
    Rename,
    Restriction,
    Selection,
)


class TestGroupBy:
    """Test the GroupBy operator"""

    def test_group_by_attribute(self, orders):
        """Test grouping orders by customer"""
        groups = GroupBy("ordered_by").execute(orders)

        assert list(groups) == [1, 2]
        assert [t.get("oid") for t in groups[1]] == [1, 2]
        assert [t.get("oid") for t in groups[2]] == [3]

    def test_group_by_function(self, orders):
        """Test grouping with a key function"""
        groups = GroupBy(lambda t: t.get("total_value") >= 100).execute(orders)

        assert [t.get("oid") for t in groups[True]] == [1, 2]
        assert [t.get("oid") for t in groups[False]] == [3]

    def test_groups_hold_input_tuples(self, orders):
        """Test that grouped tuples are the input tuples themselves"""
        groups = GroupBy("ordered_by").execute(orders)

        assert groups[1][0] is orders.tuples[0]

    def test_applied_events(self, orders):
        trace = ExecutionTrace()

        GroupBy("ordered_by").execute(orders, listener=trace)

        assert [(key, t.get("oid")) for key, t in trace.applications] == [(1, 1), (1, 2), (2, 3)]

    def test_unhashable_keys(self):
        """Test that list keys are grouped by their string form"""
        relation = Relation.from_columns("Tags", {"tags": [["a"], ["b"], ["a"]]})

        groups = GroupBy("tags").execute(relation)

        assert sorted(len(g) for g in groups.values()) == [1, 2]
        assert "['a']" in groups

    def test_set_keys(self):
        """Test that set keys are grouped rather than rejected"""
        relation = Relation.from_columns("Tags", {"tags": [{"a"}, {"b"}, {"a"}]})

        groups = GroupBy("tags").execute(relation)

        assert groups[str({"a"})] == [relation.tuples[0], relation.tuples[2]]
        assert len(groups) == 2

    def test_empty_relation(self):
        assert GroupBy("x").execute(Relation("Empty", ["x"])) == {}

    def test_missing_attribute(self, orders):
        with pytest.raises(MissingAttributeError):
            GroupBy("nope").execute(orders)

    def test_invalid_key(self):
        with pytest.raises(TypeError):
            GroupBy(42)


class TestProjection:
    """Test the Projection operator"""

    def test_project_single_attribute(self, persons, build):
        result = Projection(["name"]).execute(persons)

        assert result == build({"name": "Bob"}, {"name": "Alice"})
        assert result.schema == ["name"]

    def test_projection_order(self, persons):
        """Test that the result schema follows the requested order"""
        result = Projection(["age", "pid"]).execute(persons)

        assert result.schema == ["age", "pid"]
        assert result.tuples[0].keys() == ["age", "pid"]

    def test_keeps_duplicates(self, points):
        result = Projection(["x"]).execute(points)

        assert [t.get("x") for t in result] == [1, 42, 1, 66]

    def test_new_tuples(self, persons):
        """Test that projected tuples are new objects"""
        trace = ExecutionTrace()

        result = Projection(["name"]).execute(persons, listener=trace)

        original, projected = trace.applications[0]
        assert original is persons.tuples[0]
        assert projected is result.tuples[0]
        assert projected is not original

    def test_missing_attribute(self, persons):
        with pytest.raises(MissingAttributeError, match="height"):
            Projection(["height"]).execute(persons)


class TestRename:
    """Test the Rename operator"""

    def test_rename(self, persons, build):
        result = Rename({"pid": "id"}).execute(persons)

        assert result.schema == ["id", "name", "age"]
        assert result == build(
            {"id": 1, "name": "Bob", "age": 14},
            {"id": 2, "name": "Alice", "age": 32},
        )

    def test_rename_enables_join_precondition(self, persons, persons2):
        """Test that renaming makes two schemas disjoint"""
        renamed = Rename({"pid": "pid2", "name": "name2", "age": "age2"}).execute(persons2)

        assert persons.schema_disjunct(renamed)

    def test_duplicate_attribute(self, persons):
        with pytest.raises(SchemaConflictError):
            Rename({"pid": "name"}).execute(persons)

    def test_unknown_attribute_ignored(self, persons):
        result = Rename({"height": "size"}).execute(persons)

        assert result.schema == persons.schema


class TestRestriction:
    """Test the Restriction operator"""

    def test_plain_function(self, persons):
        result = Restriction(lambda t: t.get("age") > 20).execute(persons)

        assert [t.get("name") for t in result] == ["Alice"]

    def test_predicate(self, chars):
        result = Restriction(Predicate(lambda t: t.get("x") > 2)).execute(chars)

        assert result.to_dicts() == [{"char": "a", "x": 3}]

    def test_selection_alias(self):
        assert Selection is Restriction

    def test_kept_tuples_are_inputs(self, persons):
        result = Restriction(lambda t: True).execute(persons)

        assert result.tuples[0] is persons.tuples[0]
        assert result.tuples[0].heritage == [persons, result]

    def test_applied_flags(self, persons):
        trace = ExecutionTrace()

        Restriction(lambda t: t.get("age") > 20).execute(persons, listener=trace)

        assert [kept for _, kept in trace.applications] == [False, True]

    def test_nothing_kept(self, persons):
        result = Restriction(lambda t: False).execute(persons)

        assert len(result) == 0
        assert result.schema == persons.schema


class TestDistinct:
    """Test the Distinct operator"""

    def test_distinct(self, points, build):
        result = Distinct().execute(points)

        assert result == build({"x": 1, "y": 1}, {"x": 42, "y": 4}, {"x": 66, "y": 77})

    def test_attribute_order_ignored(self):
        """Test that equal tuples built in different key order collapse"""
        relation = Relation("R", ["x", "y"])
        relation.add_tuples([Tuple({"x": 1, "y": 2}), Tuple({"y": 2, "x": 1})])

        assert len(Distinct().execute(relation)) == 1

    def test_nested_values(self):
        relation = Relation.from_columns("Nested", {"v": [[1, [2]], [1, [2]], [1, (2,)]]})

        result = Distinct().execute(relation)

        assert [t.get("v") for t in result] == [[1, [2]], [1, (2,)]]

    def test_empty(self):
        assert len(Distinct().execute(Relation("Empty", ["x"]))) == 0


class TestOrderBy:
    """Test the OrderBy operator"""

    def test_stable_sort(self, chars):
        """Test that equal keys keep their input order"""
        result = OrderBy("char").execute(chars)

        assert [(t.get("char"), t.get("x")) for t in result] == [
            ("a", 2), ("a", 1), ("a", 3),
            ("b", 1), ("b", 2),
            ("c", 1), ("d", 1), ("e", 1),
        ]

    def test_sort_numbers(self, chars):
        result = OrderBy("x").execute(chars)

        assert [t.get("x") for t in result] == [1, 1, 1, 1, 1, 2, 2, 3]
        assert [t.get("char") for t in result][:5] == ["b", "a", "c", "d", "e"]

    def test_no_applied_events(self, chars):
        trace = ExecutionTrace()

        OrderBy("char").execute(chars, listener=trace)

        assert trace.applications == []
        assert len(trace) == 1

    def test_nulls_last(self):
        relation = Relation.from_columns("R", {"v": [3, None, 1]})

        assert [t.get("v") for t in OrderBy("v").execute(relation)] == [1, 3, None]

    def test_nulls_first(self):
        configure(nulls_last=False)
        relation = Relation.from_columns("R", {"v": [3, None, 1]})

        assert [t.get("v") for t in OrderBy("v").execute(relation)] == [None, 1, 3]

    def test_incomparable_values(self):
        relation = Relation.from_columns("R", {"v": [1, "a"]})

        with pytest.raises(TypeError):
            OrderBy("v").execute(relation)

    def test_input_order_untouched(self, chars):
        OrderBy("char").execute(chars)

        assert [t.get("char") for t in chars][:3] == ["a", "b", "a"]
