"""
Exceptions raised by the algebra engine

All errors are raised synchronously and abort the current execution
before any result is produced.
"""


class RelationalAlgebraError(Exception):
    """Base class for all relational algebra errors"""

    pass


class SchemaMismatchError(RelationalAlgebraError):
    """Raised when a tuple's attributes don't match the schema of the relation it is added to"""

    pass


class SchemaConflictError(RelationalAlgebraError):
    """Raised when a join or cross product is attempted on relations sharing an attribute name"""

    pass


class MissingAttributeError(RelationalAlgebraError, KeyError):
    """Raised when a tuple is accessed for an attribute it does not have"""

    def __init__(self, attribute: str):
        super().__init__(attribute)
        self.attribute = attribute

    def __str__(self) -> str:
        return f"Undefined attribute '{self.attribute}'"


class MalformedPredicateError(RelationalAlgebraError, ValueError):
    """Raised when a predicate combinator is built from an empty list"""

    pass
