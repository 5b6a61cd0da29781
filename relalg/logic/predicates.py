"""
Predicates consumed by the Restriction operator

A Predicate wraps a tuple -> bool test. Not, And and Or combine
predicates; And and Or short-circuit in list order.

Example:
    ```python
    adult = Predicate(lambda t: t.get("age") >= 18)
    named_bob = Predicate(lambda t: t.get("name") == "Bob")

    Restriction(And([adult, Not(named_bob)]))
    ```
"""

from collections.abc import Callable, Sequence
from typing import Any, Union

from relalg.core.errors import MalformedPredicateError
from relalg.core.relation import Tuple


class Predicate:
    """Wraps an arbitrary tuple -> bool test"""

    def __init__(self, test: Callable[[Tuple], Any]):
        if not callable(test):
            raise TypeError(f"Predicate test must be callable, got {type(test).__name__}")
        self.test = test

    def holds(self, t: Tuple) -> bool:
        return bool(self.test(t))

    def __call__(self, t: Tuple) -> bool:
        return self.holds(t)

    def __repr__(self) -> str:
        name = getattr(self.test, "__name__", repr(self.test))
        return f"Predicate({name})"


class Not(Predicate):
    """Negates one predicate"""

    def __init__(self, predicate: Predicate):
        if not isinstance(predicate, Predicate):
            raise TypeError(f"Expected a Predicate, but found '{type(predicate).__name__}'")
        self.predicate = predicate

    def holds(self, t: Tuple) -> bool:
        return not self.predicate.holds(t)

    def __repr__(self) -> str:
        return f"Not({self.predicate!r})"


class Conjunction(Predicate):
    """
    Base for predicates combining an ordered, non-empty list of predicates

    An empty list is rejected: the empty conjunction/disjunction is left
    undefined rather than defaulted to True/False.
    """

    def __init__(self, predicates: Sequence[Predicate]):
        predicates = list(predicates)
        if not predicates:
            raise MalformedPredicateError(
                f"{self.__class__.__name__} requires at least one predicate"
            )
        for p in predicates:
            if not isinstance(p, Predicate):
                raise TypeError(f"Expected a Predicate, but found '{type(p).__name__}'")
        self.predicates = predicates

    def holds(self, t: Tuple) -> bool:
        raise NotImplementedError(f"{self.__class__.__name__} must implement holds()")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.predicates!r})"


class And(Conjunction):
    """Holds if every predicate holds; stops at the first failing one"""

    def holds(self, t: Tuple) -> bool:
        for p in self.predicates:
            if not p.holds(t):
                return False
        return True


class Or(Conjunction):
    """Holds if any predicate holds; stops at the first succeeding one"""

    def holds(self, t: Tuple) -> bool:
        for p in self.predicates:
            if p.holds(t):
                return True
        return False


def as_predicate(test: Union[Predicate, Callable[[Tuple], Any]]) -> Predicate:
    """Wrap a plain function into a Predicate, passing predicates through"""
    if isinstance(test, Predicate):
        return test
    return Predicate(test)
