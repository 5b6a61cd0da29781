"""
Rich table formatter for terminal output
"""

from typing import Any

try:
    from rich import box
    from rich.console import Console
    from rich.markup import escape
    from rich.table import Table

    RICH_AVAILABLE = True
except ImportError:
    RICH_AVAILABLE = False
    Console = None
    Table = None
    box = None
    escape = None

from relalg.core.config import get_settings
from relalg.core.relation import Relation
from relalg.formatters.base import BaseFormatter

NULL_MARKUP = "[dim]NULL[/dim]"


class TableFormatter(BaseFormatter):
    """
    Format a relation as a Rich table

    The relation's name becomes the table title and its schema the
    header row. Narrow consoles and wide schemas switch to a compact,
    non-wrapping layout.
    """

    def format(self, relation: Relation, **kwargs: Any) -> str:
        """
        Format a relation as a Rich table

        Args:
            relation: Relation to render
            **kwargs: Options like 'no_color', 'show_footer', 'max_width'
                      (per-column limit, defaults to Settings.max_display_width)
                      and 'width' (console width)

        Returns:
            Rendered table string
        """
        if not RICH_AVAILABLE:
            raise ImportError(
                "Table formatter requires rich library. Install with: pip install relalg[display]"
            )

        no_color = kwargs.get("no_color", False)
        console = Console(force_terminal=not no_color, no_color=no_color, width=kwargs.get("width"))
        schema = relation.schema
        compact = console.width < 80 or len(schema) > 8

        table = Table(
            title=relation.name or None,
            header_style="bold magenta",
            box=box.SIMPLE if compact else box.HEAVY_HEAD,
        )
        for attr in schema:
            table.add_column(
                attr,
                style="cyan",
                overflow="ellipsis",
                max_width=kwargs.get("max_width", get_settings().max_display_width),
                no_wrap=compact,
            )

        for t in relation:
            # Escape values so brackets in the data aren't read as markup
            table.add_row(
                *(NULL_MARKUP if t.get(attr) is None else escape(str(t.get(attr))) for attr in schema)
            )

        with console.capture() as capture:
            console.print(table)
            if kwargs.get("show_footer", True):
                console.print(f"[dim]{self.row_count_label(len(relation))}[/dim]")

        return capture.get()
