"""
pandas interop - convert between relations and DataFrames

Missing values (NaN, NA, NaT) become None on import, so padded
outer-join results and DataFrames round-trip with the same nulls.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

try:
    import pandas as pd

    PANDAS_AVAILABLE = True
except ImportError:
    PANDAS_AVAILABLE = False
    pd = None

from relalg.core.ids import IdSequence
from relalg.core.relation import Relation

logger = logging.getLogger(__name__)


def _require_pandas() -> None:
    if not PANDAS_AVAILABLE:
        raise ImportError(
            "DataFrame conversion requires pandas library. Install `relalg[pandas]`"
        )


def _clean(value: Any) -> Any:
    """Map pandas missing-value markers to None"""
    if value is None:
        return None
    if pd.api.types.is_scalar(value) and pd.isna(value):
        return None
    return value


def relation_to_dataframe(relation: Relation) -> "pd.DataFrame":
    """
    Convert a relation to a DataFrame

    Columns follow the relation's schema order, rows follow tuple order.

    Args:
        relation: Relation to convert

    Returns:
        DataFrame with one row per tuple
    """
    _require_pandas()
    return pd.DataFrame(relation.to_dicts(), columns=relation.schema)


def relation_from_dataframe(
    name: str, df: "pd.DataFrame", ids: Optional[IdSequence] = None
) -> Relation:
    """
    Build a relation from a DataFrame

    Column labels are converted to strings. Values are converted to
    plain Python objects.

    Args:
        name: Name of the new relation
        df: Source DataFrame
        ids: Id allocation context for the created tuples

    Returns:
        New relation with the DataFrame's columns as schema
    """
    _require_pandas()

    columns = {
        str(col): [_clean(value) for value in df[col].tolist()] for col in df.columns
    }
    logger.debug("Loaded %d row(s) into relation %r", len(df), name)
    return Relation.from_columns(name, columns, ids=ids)
