"""
Console rendering of Documents
"""

from .table import (
    TableRenderer,
    compute_column_widths,
    render_table,
    render_info,
    show,
    info
)

__all__ = [
    'TableRenderer',
    'compute_column_widths',
    'render_table',
    'render_info',
    'show',
    'info'
]
