"""
Core data model: tuples, relations, errors and settings
"""

from relalg.core.config import Settings, configure, get_settings, reset_settings
from relalg.core.errors import (
    MalformedPredicateError,
    MissingAttributeError,
    RelationalAlgebraError,
    SchemaConflictError,
    SchemaMismatchError,
)
from relalg.core.ids import IdSequence
from relalg.core.relation import Relation, Tuple, values_equal

__all__ = [
    "Relation",
    "Tuple",
    "values_equal",
    "IdSequence",
    "Settings",
    "configure",
    "get_settings",
    "reset_settings",
    "RelationalAlgebraError",
    "SchemaMismatchError",
    "SchemaConflictError",
    "MissingAttributeError",
    "MalformedPredicateError",
]
