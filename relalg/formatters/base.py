"""
Base formatter interface

All formatters must implement the format() method. Formatters take the
header from the relation's schema, so empty relations still show their
columns.
"""

from typing import Any

from relalg.core.relation import Relation


class BaseFormatter:
    """Base class for all relation formatters"""

    def format(self, relation: Relation, **kwargs: Any) -> str:
        """
        Format a relation for output

        Args:
            relation: Relation to render
            **kwargs: Additional formatter-specific options

        Returns:
            Formatted string ready for output
        """
        raise NotImplementedError("Formatters must implement format() method")

    def get_name(self) -> str:
        """Get formatter name"""
        return self.__class__.__name__.replace("Formatter", "").lower()

    @staticmethod
    def row_count_label(count: int) -> str:
        return f"{count} row{'s' if count != 1 else ''}"
