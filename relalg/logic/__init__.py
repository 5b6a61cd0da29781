"""
Predicate logic - composable boolean tests over tuples
"""

from relalg.logic.predicates import And, Conjunction, Not, Or, Predicate, as_predicate

__all__ = ["Predicate", "Not", "Conjunction", "And", "Or", "as_predicate"]
