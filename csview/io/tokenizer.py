"""
Field tokenizer

Splits one line into fields. A field that starts with the quote marker runs
to the next quote marker, delimiters included; anything else runs to the next
delimiter. There is no escaping: a doubled quote marker is not a literal
quote, and an unterminated quote takes the rest of the line.
"""

from typing import List, Optional

from ..core.config import CsvDialect
from ..core.document import Row


WHITESPACE = (' ', '\t')


class Tokenizer:
    """Splits lines into Rows for one dialect"""

    def __init__(self, dialect: Optional[CsvDialect] = None):
        self.dialect = dialect or CsvDialect()

    def split_fields(self, line: str) -> List[str]:
        """
        Split a line into its field strings

        Args:
            line: One line without its terminator

        Returns:
            List of fields; empty for an empty line
        """
        delimiter = self.dialect.delimiter
        quote_char = self.dialect.quote_char
        fields: List[str] = []
        length = len(line)
        pos = 0

        while pos < length:
            quoted = line[pos] == quote_char
            if quoted:
                start = pos + 1
                end = line.find(quote_char, start)
                if end == -1:
                    # Unterminated quote: take the rest of the line
                    end = length
            else:
                start = pos
                end = line.find(delimiter, start)
                if end == -1:
                    end = length

            fields.append(line[start:end])

            pos = end
            if quoted and pos < length and line[pos] == quote_char:
                pos += 1
            if pos < length and line[pos] == delimiter:
                pos += 1
            # A whitespace delimiter is never skipped as padding
            while pos < length and line[pos] in WHITESPACE and line[pos] != delimiter:
                pos += 1

        return fields

    def tokenize(self, line: str) -> Row:
        return Row(tuple(self.split_fields(line)))


_default_tokenizer = Tokenizer()


def tokenize_line(line: str, dialect: Optional[CsvDialect] = None) -> Row:
    """Tokenize a line with the given dialect (comma and double quote by default)"""
    tokenizer = Tokenizer(dialect) if dialect is not None else _default_tokenizer
    return tokenizer.tokenize(line)
