"""
Table rendering for Documents

Renders an aligned text table and a short summary block. Only the first
num_cols fields of a row are shown; shorter rows simply end early.

Example (header a,b,c):

    a | b  | c   |
    --+----+-----+-
    1 | 22 | 333 |
"""

from typing import List, Optional, Sequence
import logging

from ..core.document import Document
from ..io.streams import ConsoleStream

logger = logging.getLogger(__name__)

CELL_SEPARATOR = ' | '
RULE_SEPARATOR = '-+-'
NULL_DOCUMENT_NOTICE = 'CSV Document is NULL.\n'
INFO_TITLE = '--- CSV Info ---'
INFO_RULE = '-' * len(INFO_TITLE)


def compute_column_widths(doc: Document) -> List[int]:
    """
    Width of each displayed column

    Args:
        doc: Document to measure

    Returns:
        List of num_cols widths: the longest header or row field at each index
    """
    widths = [0] * doc.num_cols
    if doc.header is not None:
        for index, value in enumerate(doc.header[:doc.num_cols]):
            widths[index] = len(value)
    for row in doc.rows:
        for index, value in enumerate(row.fields[:doc.num_cols]):
            if len(value) > widths[index]:
                widths[index] = len(value)
    return widths


def _format_cells(values: Sequence[str], widths: Sequence[int]) -> str:
    cells = [value.ljust(width) + CELL_SEPARATOR for value, width in zip(values, widths)]
    return ''.join(cells) + '\n'


def render_table(doc: Optional[Document]) -> str:
    """Return the aligned table for a document"""
    if doc is None:
        return NULL_DOCUMENT_NOTICE

    widths = compute_column_widths(doc)
    lines = []

    if doc.header is not None:
        lines.append(_format_cells(doc.header, widths))
        lines.append(''.join('-' * width + RULE_SEPARATOR for width in widths) + '\n')

    for row in doc.rows:
        lines.append(_format_cells(row.fields, widths))

    return ''.join(lines)


def render_info(doc: Optional[Document]) -> str:
    """Return the summary block for a document"""
    if doc is None:
        return NULL_DOCUMENT_NOTICE

    lines = [
        INFO_TITLE,
        f"Rows:    {doc.num_rows}",
        f"Columns: {doc.num_cols}",
        f"Header:  {'Yes' if doc.header is not None else 'No'}",
        INFO_RULE,
    ]
    return '\n'.join(lines) + '\n'


class TableRenderer:
    """Writes tables and summaries to a console stream"""

    def __init__(self, console: Optional[ConsoleStream] = None):
        self.console = console or ConsoleStream()

    def show(self, doc: Optional[Document]):
        """Write the aligned table"""
        self.console.console_write(render_table(doc))
        if doc is not None:
            logger.debug(f"Rendered {doc.num_rows} rows across {doc.num_cols} columns")

    def info(self, doc: Optional[Document]):
        """Write the row/column/header summary"""
        self.console.console_write(render_info(doc))


def show(doc: Optional[Document], console: Optional[ConsoleStream] = None):
    """Convenience function to print a document as a table"""
    TableRenderer(console).show(doc)


def info(doc: Optional[Document], console: Optional[ConsoleStream] = None):
    """Convenience function to print a document summary"""
    TableRenderer(console).info(doc)
