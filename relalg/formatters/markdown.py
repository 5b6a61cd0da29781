"""
Markdown formatter - GitHub Flavored Markdown tables for docs and issues
"""

from typing import Any, Union

from relalg.core.relation import Relation
from relalg.formatters.base import BaseFormatter

_ALIGN_MARKERS = {"left": ":---", "center": ":---:", "right": "---:"}


def _cell(value: Any) -> str:
    if value is None:
        return "_NULL_"
    # Pipes would split the cell
    return str(value).replace("|", "\\|")


def _row(cells: list[str]) -> str:
    return "| " + " | ".join(cells) + " |"


class MarkdownFormatter(BaseFormatter):
    """Format a relation as a Markdown table"""

    def format(self, relation: Relation, **kwargs: Any) -> str:
        """
        Format a relation as a Markdown table

        Args:
            relation: Relation to render
            **kwargs: Options like 'show_footer', 'align' (one alignment for
                      all columns, or a column -> alignment dict), 'title'
                      (prefix a heading holding the relation's name)

        Returns:
            Markdown formatted table string
        """
        schema = relation.schema
        if not schema:
            return "_Empty relation._"

        align: Union[str, dict[str, str]] = kwargs.get("align", "left")
        markers = [
            _ALIGN_MARKERS.get(align if isinstance(align, str) else align.get(attr, "left"), ":---")
            for attr in schema
        ]

        lines = [_row(schema), _row(markers)]
        lines.extend(_row([_cell(t.get(attr)) for attr in schema]) for t in relation)

        if kwargs.get("title", False) and relation.name:
            lines.insert(0, f"### {relation.name}\n")

        output = "\n".join(lines)
        if kwargs.get("show_footer", True):
            output += f"\n\n_{self.row_count_label(len(relation))}_"
        return output
