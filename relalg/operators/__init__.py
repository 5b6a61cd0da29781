"""
Operators - one implementation per relational algebra operator

Execution framework:
- Operation, UnaryOperation, BinaryOperation: shared lifecycle
- ExecutionListener, ExecutionTrace: per-call observers

Operators:
- GroupBy, Projection, Rename, Restriction (Selection), Distinct, OrderBy
- Union, Intersection, Without
- CrossProduct, EquiJoin, NaturalJoin, LeftJoin, RightJoin, FullOuterJoin,
  LeftSemiJoin, RightSemiJoin

Example:
    ```python
    from relalg.operators import EquiJoin

    joined = EquiJoin("pid", "ordered_by").execute(persons, orders)
    ```
"""

from relalg.operators.base import (
    BinaryOperation,
    ExecutionListener,
    ExecutionTrace,
    Operation,
    UnaryOperation,
    attribute_getter,
)
from relalg.operators.distinct import Distinct, UniqueTuples
from relalg.operators.filter import Restriction, Selection
from relalg.operators.groupby import GroupBy
from relalg.operators.join import (
    CrossProduct,
    EquiJoin,
    FullOuterJoin,
    LeftJoin,
    LeftSemiJoin,
    NaturalJoin,
    RightJoin,
    RightSemiJoin,
)
from relalg.operators.orderby import OrderBy
from relalg.operators.project import Projection
from relalg.operators.rename import Rename
from relalg.operators.setops import Intersection, Union, Without

__all__ = [
    "Operation",
    "UnaryOperation",
    "BinaryOperation",
    "ExecutionListener",
    "ExecutionTrace",
    "attribute_getter",
    "GroupBy",
    "Projection",
    "Rename",
    "Restriction",
    "Selection",
    "Distinct",
    "UniqueTuples",
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
]
