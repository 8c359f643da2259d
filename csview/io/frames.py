"""
pandas interop for Documents

Documents may be ragged; DataFrames are rectangular. Conversion widens the
frame to the longest row and leaves missing cells as None.
"""

from typing import List
import logging

import pandas as pd

from ..core.document import Document, Row

logger = logging.getLogger(__name__)


def _column_labels(doc: Document, width: int) -> List[str]:
    """Header fields first, generated labels for any remaining positions"""
    labels = list(doc.header) if doc.header is not None else []
    labels = labels[:width]
    seen = set(labels)
    for index in range(len(labels), width):
        label = f"column_{index}"
        while label in seen:
            label = f"_{label}"
        seen.add(label)
        labels.append(label)
    return labels


def document_to_dataframe(doc: Document) -> pd.DataFrame:
    """
    Convert a Document to a DataFrame of strings

    Args:
        doc: Document to convert

    Returns:
        DataFrame with one row per document row; width is the larger of the
        column count and the longest row
    """
    longest = max((row.num_fields for row in doc.rows), default=0)
    width = max(doc.num_cols, longest)
    labels = _column_labels(doc, width)

    records = [
        list(row.fields) + [None] * (width - row.num_fields)
        for row in doc.rows
    ]
    df = pd.DataFrame(records, columns=labels, dtype=object)

    logger.debug(f"Converted document to DataFrame with shape {df.shape}")
    return df


def document_from_dataframe(df: pd.DataFrame, include_header: bool = True) -> Document:
    """
    Build a Document from a DataFrame

    Args:
        df: Source frame; every cell is converted to str, missing values to ''
        include_header: Whether the column labels become the header

    Returns:
        Document with one row per frame row
    """
    doc = Document()
    if include_header:
        doc.set_header([str(label) for label in df.columns])

    for values in df.itertuples(index=False, name=None):
        fields = tuple('' if pd.isna(value) else str(value) for value in values)
        doc.append_row(Row(fields))

    logger.debug(f"Built document with {doc.num_rows} rows from DataFrame")
    return doc
