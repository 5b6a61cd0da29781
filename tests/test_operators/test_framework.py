"""
Tests for the shared execution lifecycle
"""

import pytest

from relalg.core.errors import SchemaConflictError
from relalg.core.ids import IdSequence
from relalg.core.relation import Relation
from relalg.generators import LinearGenerator
from relalg.operators import (
    Distinct,
    EquiJoin,
    ExecutionListener,
    ExecutionTrace,
    NaturalJoin,
    Operation,
    OrderBy,
    Projection,
    Restriction,
    UnaryOperation,
    Union,
)


def execute_counted(operation, *inputs):
    """Execute and check the notification contract"""
    applied = []
    executed = []
    operation.on_applied(lambda *payload: applied.append(payload))
    operation.on_executed(executed.append)

    result = operation.execute(*inputs)

    assert len(applied) >= len(result), "Too few applies"
    assert executed == [result], "Not executed exactly once"
    return result


class TestNotifications:
    """Test applied/executed notifications"""

    def test_executed_once_with_result(self, points):
        """Test that executed fires once carrying the result"""
        result = execute_counted(Distinct(), points)

        assert len(result) == 3

    def test_applied_payloads(self, points):
        """Test that applied payloads are operator-specific"""
        payloads = []
        op = Distinct()
        op.on_applied(lambda t, added: payloads.append(added))

        op.execute(points)

        assert payloads == [True, True, False, True]

    def test_on_applied_returns_callback(self):
        """Test that registration works as a decorator"""
        op = Distinct()

        @op.on_applied
        def listener(t, added):
            pass

        assert listener is not None

    def test_per_call_listener(self, points):
        """Test that a listener passed to execute() only sees that call"""
        op = Distinct()
        trace = ExecutionTrace()

        result = op.execute(points, listener=trace)
        op.execute(points)

        assert len(trace.applications) == 4
        assert trace.events[-1] == ("executed", (result,))
        assert trace.result is result

    def test_custom_listener(self, persons, persons2):
        """Test a listener subclass"""

        class Counter(ExecutionListener):
            def __init__(self):
                self.applied_count = 0
                self.executed_count = 0

            def applied(self, *payload):
                self.applied_count += 1

            def executed(self, result):
                self.executed_count += 1

        counter = Counter()
        Union().execute(persons, persons2, listener=counter)

        assert counter.applied_count == 4
        assert counter.executed_count == 1

    def test_reentrant_execute(self, points, temperatures):
        """Test that a callback may execute the same operation again"""
        op = Distinct()
        inner = ExecutionTrace()

        @op.on_applied
        def run_nested(t, added):
            if "x" in t and not inner.events:
                op.execute(temperatures, listener=inner)

        outer = ExecutionTrace()
        result = op.execute(points, listener=outer)

        assert len(result) == 3
        assert len(outer.applications) == 4
        assert outer.result is result
        assert len(inner.applications) == 2
        assert len(inner.result) == 2

    def test_precondition_aborts_before_iteration(self, persons, persons2):
        """Test that a failed precondition fires no notifications"""
        op = EquiJoin("pid", "pid")
        trace = ExecutionTrace()

        with pytest.raises(SchemaConflictError):
            op.execute(persons, persons2, listener=trace)

        assert trace.events == []


class TestInputsUntouched:
    """Test that operators never modify their inputs"""

    def test_inputs_unchanged(self, persons, orders):
        """Test input relations after several executions"""
        before = [t.to_dict() for t in persons]
        schema = persons.schema

        Projection(["name"]).execute(persons)
        Restriction(lambda t: t.get("age") > 20).execute(persons)
        EquiJoin("pid", "ordered_by").execute(persons, orders)

        assert persons.to_dicts() == before
        assert persons.schema == schema
        assert len(orders) == 3

    def test_result_is_new_relation(self, points):
        """Test that results are fresh relations"""
        result = Distinct().execute(points)

        assert result is not points
        assert len(points) == 4


class TestNaming:
    """Test result names and schemas"""

    def test_unary_name(self, persons):
        assert Projection(["name"]).execute(persons).name == "Personsπ"
        assert OrderBy("age").execute(persons).name == "Persons↓"

    def test_binary_name(self, persons, orders):
        assert EquiJoin("pid", "ordered_by").execute(persons, orders).name == "Persons⋈Orders"

    def test_generate_result_name(self, persons, persons2):
        assert Union().generate_result_name(persons, persons2) == "Persons∪Persons2"

    def test_derive_schema(self, persons2, persons3, orders):
        assert Projection(["name"]).derive_schema(persons2) == ["name"]
        assert EquiJoin("pid", "ordered_by").derive_schema(persons3, orders) == [
            "pid", "name", "height", "oid", "ordered_by", "total_value",
        ]
        assert NaturalJoin().derive_schema(persons2, persons3) == ["pid", "name", "age", "height"]


class TestAllocationContext:
    """Test explicit id allocation"""

    def test_result_ids_from_context(self, persons):
        """Test that created tuples and relations draw from the given ids"""
        ids = IdSequence()

        result = Projection(["name"], ids=ids).execute(persons)

        assert result.id == 0
        assert [t.id for t in result] == [0, 1]


class TestAbstractOperations:
    """Test the abstract bases"""

    def test_base_operation(self, persons):
        op = Operation(LinearGenerator())

        assert op.generate_result_name(persons) == "UNNAMED RELATION"
        with pytest.raises(NotImplementedError):
            op.execute(persons)
        with pytest.raises(NotImplementedError):
            op.apply()

    def test_unary_without_apply(self, persons):
        """Test that a concrete operator must supply apply()"""

        class Incomplete(UnaryOperation):
            pass

        with pytest.raises(NotImplementedError):
            Incomplete().execute(persons)

    def test_unary_without_apply_on_empty_relation(self):
        """Test that an empty input never reaches apply()"""

        class Incomplete(UnaryOperation):
            pass

        assert Incomplete().execute(Relation("R", ["x"])) == []
