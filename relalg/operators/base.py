"""
Base operation classes - the shared execution lifecycle

Every operator runs through the same steps:

1. before_execute(inputs...)  - precondition checks, may raise
2. init_result(inputs...)     - allocate the accumulator
3. drive the generator; apply(element..., accumulator, inputs...) per element
4. finalize_result(accumulator, inputs...) - build the result value
5. notify "executed" listeners once with the result

Operators only supply semantics (apply/init/finalize/naming). The
framework owns orchestration and holds the injected generator.

Listeners can be registered on the operation (on_applied, on_executed)
or passed to a single execute() call as an ExecutionListener.
"""

import copy
import logging
from collections.abc import Callable
from typing import Any, Optional, Union

from relalg.core.config import Settings, get_settings
from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple
from relalg.generators.base import Generator
from relalg.generators.linear import LinearGenerator
from relalg.generators.nested_loop import NestedLoopGenerator

logger = logging.getLogger(__name__)

AttributeGetter = Callable[[Tuple], Any]


def attribute_getter(attr: Union[str, AttributeGetter]) -> AttributeGetter:
    """
    Normalise an attribute name or getter function into a getter

    Args:
        attr: Attribute name, or a function taking a tuple

    Returns:
        Function extracting the value from a tuple
    """
    if isinstance(attr, str):
        return lambda t: t.get(attr)
    if callable(attr):
        return attr
    raise TypeError(f"Expected an attribute name or callable, got {type(attr).__name__}")


class ExecutionListener:
    """
    Receives the events of one execution

    applied() is called zero or more times with an operator-specific
    payload, executed() exactly once with the final result.
    """

    def applied(self, *payload: Any) -> None:
        pass

    def executed(self, result: Any) -> None:
        pass


class ExecutionTrace(ExecutionListener):
    """Listener recording the event stream of an execution"""

    def __init__(self):
        self.events: list[tuple[str, tuple]] = []

    def applied(self, *payload: Any) -> None:
        self.events.append(("applied", payload))

    def executed(self, result: Any) -> None:
        self.events.append(("executed", (result,)))

    @property
    def applications(self) -> list[tuple]:
        """Payloads of all applied events, in order"""
        return [payload for kind, payload in self.events if kind == "applied"]

    @property
    def result(self) -> Any:
        for kind, payload in reversed(self.events):
            if kind == "executed":
                return payload[0]
        return None

    def __len__(self) -> int:
        return len(self.events)


class Operation:
    """
    Base class for all algebra operators

    Subclasses pick a shape (UnaryOperation or BinaryOperation) and
    override the lifecycle hooks. Calling a hook that has no meaningful
    default on the base raises NotImplementedError.
    """

    symbol = "?"

    # False for operators working on the whole input at once (e.g. OrderBy)
    per_tuple = True

    def __init__(self, generator: Generator, ids: Optional[IdSequence] = None):
        """
        Initialize operation

        Args:
            generator: Iteration strategy feeding apply()
            ids: Id allocation context for created tuples and relations
        """
        self.generator = generator
        self.ids = ids
        self._applied_callbacks: list[Callable[..., Any]] = []
        self._executed_callbacks: list[Callable[[Any], Any]] = []
        # Only set on the per-call views made by _bind()
        self._listener: Optional[ExecutionListener] = None

    # Observers

    def on_applied(self, callback: Callable[..., Any]) -> Callable[..., Any]:
        """Register a callback invoked for every applied element"""
        self._applied_callbacks.append(callback)
        return callback

    def on_executed(self, callback: Callable[[Any], Any]) -> Callable[[Any], Any]:
        """Register a callback invoked once with the final result"""
        self._executed_callbacks.append(callback)
        return callback

    def notify_applied(self, *payload: Any) -> None:
        for callback in self._applied_callbacks:
            callback(*payload)
        if self._listener is not None:
            self._listener.applied(*payload)

    def notify_executed(self, result: Any) -> None:
        for callback in self._executed_callbacks:
            callback(result)
        if self._listener is not None:
            self._listener.executed(result)

    # Lifecycle hooks

    def before_execute(self, *inputs: Relation) -> None:
        """Hook for precondition checks, runs before any iteration"""
        pass

    def init_result(self, *inputs: Relation) -> Any:
        """Allocate the accumulator the results are collected into"""
        return []

    def apply(self, *args: Any) -> None:
        """Apply the operation to one element, mutating the accumulator"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement apply()")

    def finalize_result(self, result: Any, *inputs: Relation) -> Any:
        """Convert the accumulator into the operator's result"""
        return result

    def derive_schema(self, *inputs: Relation) -> list[str]:
        """Schema of the relation this operator produces for the given inputs"""
        raise NotImplementedError(f"{self.__class__.__name__} must implement derive_schema()")

    def generate_result_name(self, *inputs: Relation) -> str:
        return "UNNAMED RELATION"

    def execute(self, *inputs: Relation, listener: Optional[ExecutionListener] = None) -> Any:
        raise NotImplementedError(f"{self.__class__.__name__} must implement execute()")

    # Helpers for subclasses

    @property
    def settings(self) -> Settings:
        return get_settings()

    def new_tuple(self, data: dict[str, Any]) -> Tuple:
        return Tuple(data, ids=self.ids)

    def new_relation(self, inputs: tuple, schema: Optional[list[str]] = None) -> Relation:
        """Create the (empty) result relation, named after the inputs"""
        if schema is None:
            schema = self.derive_schema(*inputs)
        return Relation(self.generate_result_name(*inputs), schema, ids=self.ids)

    # Orchestration

    def _run(self, inputs: tuple, listener: Optional[ExecutionListener]) -> Any:
        logger.debug(
            "%s executing on %s",
            self.__class__.__name__,
            ", ".join(f"{r.name!r}({len(r)})" for r in inputs),
        )

        execution = self._bind(listener)
        result = execution._drive(inputs)
        execution.notify_executed(result)

        logger.debug(
            "%s produced %s",
            self.__class__.__name__,
            f"{len(result)} result(s)" if hasattr(result, "__len__") else result,
        )
        return result

    def _bind(self, listener: Optional[ExecutionListener]) -> "Operation":
        """
        Create the view one execute() call runs on

        The view shares the registered callbacks and the id context, but
        owns the listener and the generator position. Callbacks may then
        re-enter execute() on this operation without disturbing the outer
        call.
        """
        execution = copy.copy(self)
        execution.generator = copy.copy(self.generator)
        execution._listener = listener
        return execution

    def _drive(self, inputs: tuple) -> Any:
        self.before_execute(*inputs)

        accumulator = self.init_result(*inputs)
        if self.per_tuple:
            self.generator.set(*self._iteration_sequences(inputs))
            while self.generator.has_next():
                self._apply_element(self.generator.next(), accumulator, inputs)

        return self.finalize_result(accumulator, *inputs)

    def _iteration_sequences(self, inputs: tuple) -> list:
        return [r.tuples for r in inputs]

    def _apply_element(self, element: Any, accumulator: Any, inputs: tuple) -> None:
        raise NotImplementedError(f"{self.__class__.__name__} must implement _apply_element()")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class UnaryOperation(Operation):
    """
    Operation receiving exactly one operand

    apply() signature: apply(t, accumulator, relation)
    """

    def __init__(self, generator: Optional[Generator] = None, ids: Optional[IdSequence] = None):
        super().__init__(generator or LinearGenerator(), ids=ids)

    def execute(self, relation: Relation, *, listener: Optional[ExecutionListener] = None) -> Any:
        """
        Execute the operation on one relation

        Args:
            relation: Input relation (never modified)
            listener: Optional listener receiving this call's events

        Returns:
            The result value, a new Relation for most operators
        """
        return self._run((relation,), listener)

    def _apply_element(self, element: Any, accumulator: Any, inputs: tuple) -> None:
        self.apply(element, accumulator, *inputs)

    def derive_schema(self, relation: Relation) -> list[str]:
        return relation.schema

    def generate_result_name(self, relation: Relation) -> str:
        return f"{relation.name}{self.symbol}"


class BinaryOperation(Operation):
    """
    Operation receiving two operands

    apply() signature: apply(a, b, accumulator, left, right), where a
    comes from the left relation and b from the right one.

    With drive_from_right set, the generator is fed (right, left) so the
    right relation becomes the outer one. Elements are swapped back
    before apply(), so a and b always keep their operand roles.
    """

    drive_from_right = False

    def __init__(self, generator: Optional[Generator] = None, ids: Optional[IdSequence] = None):
        super().__init__(generator or NestedLoopGenerator(), ids=ids)

    def execute(
        self,
        left: Relation,
        right: Relation,
        *,
        listener: Optional[ExecutionListener] = None,
    ) -> Any:
        """
        Execute the operation over two relations

        Args:
            left: Left operand (never modified)
            right: Right operand (never modified)
            listener: Optional listener receiving this call's events

        Returns:
            The result value, a new Relation
        """
        return self._run((left, right), listener)

    def _iteration_sequences(self, inputs: tuple) -> list:
        sequences = super()._iteration_sequences(inputs)
        return sequences[::-1] if self.drive_from_right else sequences

    def _apply_element(self, element: Any, accumulator: Any, inputs: tuple) -> None:
        a, b = element
        if self.drive_from_right:
            a, b = b, a
        self.apply(a, b, accumulator, *inputs)

    def derive_schema(self, left: Relation, right: Relation) -> list[str]:
        return left.schema

    def generate_result_name(self, left: Relation, right: Relation) -> str:
        return f"{left.name}{self.symbol}{right.name}"
