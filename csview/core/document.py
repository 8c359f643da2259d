"""
In-memory document model

A Document owns its rows and header outright:

    Document -> rows   -> Row -> fields
    Document -> header -> fields

Nothing is shared between documents, so release() can clear the whole tree.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union
from pathlib import Path
import logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """A single record: the ordered fields of one source line"""
    fields: Tuple[str, ...] = ()

    @property
    def num_fields(self) -> int:
        return len(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __getitem__(self, index):
        return self.fields[index]


@dataclass
class Document:
    """
    A complete CSV document

    Attributes:
        rows: Rows in source line order
        header: Header fields, or None when no header was parsed
        num_cols: Column count taken from the header, else the first row
    """
    rows: List[Row] = field(default_factory=list)
    header: Optional[List[str]] = None
    num_cols: int = 0
    released: bool = field(default=False, repr=False, compare=False)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    @property
    def has_header(self) -> bool:
        return self.header is not None

    def set_header(self, fields: Sequence[str]):
        """Install the header and fix the column count from it"""
        self.header = list(fields)
        self.num_cols = len(self.header)

    def append_row(self, row: Row):
        """
        Append a row; ragged rows are kept as they are

        The column count is taken from the first row only when no header is
        installed and nothing has set it yet.
        """
        self.rows.append(row)
        if self.header is None and self.num_cols == 0:
            self.num_cols = row.num_fields

    def release(self):
        """Drop every row and the header, leaving an empty released document"""
        if self.released:
            return

        # Rows own their fields, so clearing the list releases both
        self.rows.clear()

        if self.header is not None:
            self.header.clear()
            self.header = None

        self.num_cols = 0
        self.released = True
        logger.debug("Released document")

    def __enter__(self) -> 'Document':
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.release()
        return False


def release_document(doc: Optional[Document]):
    """Release a document; None is accepted and ignored"""
    if doc is None:
        return
    doc.release()


@contextmanager
def open_document(file_path: Union[str, Path],
                  has_header: bool,
                  config=None) -> Iterator[Optional[Document]]:
    """
    Read a document for the duration of a with-block

    Yields None if the file could not be opened. The document is released
    when the block exits, including on error.

    Args:
        file_path: Path to the CSV file
        has_header: Whether the first line is a header
        config: Optional ReaderConfig
    """
    from ..io.csv_reader import read_csv

    doc = read_csv(file_path, has_header, config=config)
    try:
        yield doc
    finally:
        release_document(doc)
