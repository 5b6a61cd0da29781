"""
relalg - relational algebra over small in-memory relations

Set operators, unary transforms and the join family, each producing a
new relation from its inputs.
"""

import logging

__version__ = "0.1.0"

# Library logging stays silent unless the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Main API
from relalg.core.config import configure, get_settings, reset_settings
from relalg.core.errors import (
    MalformedPredicateError,
    MissingAttributeError,
    RelationalAlgebraError,
    SchemaConflictError,
    SchemaMismatchError,
)
from relalg.core.relation import Relation, Tuple
from relalg.logic.predicates import And, Not, Or, Predicate
from relalg.operators import (
    CrossProduct,
    Distinct,
    EquiJoin,
    ExecutionTrace,
    FullOuterJoin,
    GroupBy,
    Intersection,
    LeftJoin,
    LeftSemiJoin,
    NaturalJoin,
    OrderBy,
    Projection,
    Rename,
    Restriction,
    RightJoin,
    RightSemiJoin,
    Selection,
    Union,
    Without,
)

__all__ = [
    "__version__",
    "Relation",
    "Tuple",
    "Predicate",
    "Not",
    "And",
    "Or",
    "GroupBy",
    "Projection",
    "Rename",
    "Restriction",
    "Selection",
    "Distinct",
    "OrderBy",
    "Union",
    "Intersection",
    "Without",
    "CrossProduct",
    "EquiJoin",
    "NaturalJoin",
    "LeftJoin",
    "RightJoin",
    "FullOuterJoin",
    "LeftSemiJoin",
    "RightSemiJoin",
    "ExecutionTrace",
    "configure",
    "get_settings",
    "reset_settings",
    "RelationalAlgebraError",
    "SchemaMismatchError",
    "SchemaConflictError",
    "MissingAttributeError",
    "MalformedPredicateError",
]
