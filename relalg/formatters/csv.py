"""
CSV formatter for spreadsheets and Unix pipelines
"""

import csv
import io
from typing import Any

from relalg.core.relation import Relation
from relalg.formatters.base import BaseFormatter


class CSVFormatter(BaseFormatter):
    """Format a relation as CSV, one record per tuple in schema order"""

    def format(self, relation: Relation, **kwargs: Any) -> str:
        """
        Format a relation as CSV

        Args:
            relation: Relation to render
            **kwargs: Options like 'delimiter', 'quote_all', 'header',
                      'null' (text written for None, empty by default)

        Returns:
            CSV string; only the header line for an empty relation, and an
            empty string for a relation without schema
        """
        schema = relation.schema
        if not schema:
            return ""

        null = kwargs.get("null", "")
        buffer = io.StringIO()
        writer = csv.writer(
            buffer,
            delimiter=kwargs.get("delimiter", ","),
            quoting=csv.QUOTE_ALL if kwargs.get("quote_all") else csv.QUOTE_MINIMAL,
        )

        if kwargs.get("header", True):
            writer.writerow(schema)
        for t in relation:
            writer.writerow([null if t.get(attr) is None else t.get(attr) for attr in schema])

        return buffer.getvalue()
