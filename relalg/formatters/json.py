"""
JSON formatter for machine-readable output
"""

import json
import math
from typing import Any

from relalg.core.relation import Relation, Tuple
from relalg.formatters.base import BaseFormatter


def _json_value(value: Any) -> Any:
    # JSON has no NaN/Infinity
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, Tuple):
        return {key: _json_value(v) for key, v in value.data.items()}
    return value


class JSONFormatter(BaseFormatter):
    """Format a relation as JSON"""

    def format(self, relation: Relation, **kwargs: Any) -> str:
        """
        Format a relation as JSON

        Args:
            relation: Relation to render
            **kwargs: Options like 'compact', 'indent', 'with_schema'

        Returns:
            JSON array of row objects keyed in schema order. With
            'with_schema' the rows are wrapped in an object that also
            holds the relation's name and schema.
        """
        schema = relation.schema
        rows = [{attr: _json_value(t.get(attr)) for attr in schema} for t in relation]
        document: Any = (
            {"name": relation.name, "schema": schema, "rows": rows}
            if kwargs.get("with_schema", False)
            else rows
        )

        # Values JSON can't represent (sets, dates, ...) are written as strings
        if kwargs.get("compact", False):
            return json.dumps(document, separators=(",", ":"), default=str)
        return json.dumps(document, indent=kwargs.get("indent", 2), default=str)
