"""
Formatters - render a Relation as text

- TableFormatter: rich table, titled with the relation's name
- JSONFormatter: list of row objects, optionally with name and schema
- CSVFormatter: header from the schema, one record per tuple
- MarkdownFormatter: GitHub Flavored Markdown table

Example:
    ```python
    from relalg.formatters import get_formatter

    print(get_formatter("markdown").format(persons))
    ```
"""

from relalg.formatters.base import BaseFormatter
from relalg.formatters.csv import CSVFormatter
from relalg.formatters.json import JSONFormatter
from relalg.formatters.markdown import MarkdownFormatter
from relalg.formatters.table import TableFormatter

__all__ = [
    "BaseFormatter",
    "TableFormatter",
    "JSONFormatter",
    "CSVFormatter",
    "MarkdownFormatter",
    "get_formatter",
]

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "table": TableFormatter,
    "json": JSONFormatter,
    "csv": CSVFormatter,
    "markdown": MarkdownFormatter,
}


def get_formatter(format_name: str) -> BaseFormatter:
    """
    Look up a formatter by name

    Args:
        format_name: One of the FORMATTERS keys

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        return FORMATTERS[format_name]()
    except KeyError:
        raise ValueError(
            f"Unknown format: {format_name}. Available formats: {', '.join(FORMATTERS)}"
        ) from None
