"""
CSV Tokenizer

Splits raw CSV text into lines and quote-aware comma-delimited fields.

Known limitation: doubled quotes ("") inside a quoted field are not
unescaped. Every quote character toggles the quoted state and is dropped,
so literal embedded quotes do not survive tokenization.
"""
from typing import List

from testcase_import.core.domain.csv_row import RawLine
from testcase_import.core.domain.errors import FormatError, RowMappingError

QUOTE = '"'
DELIMITER = ','
BOM = '\ufeff'


def split_lines(content: str) -> List[str]:
    """
    Split raw file content into lines.

    Trailing blank lines are ignored, so a header followed only by a
    newline still counts as a single line.

    Args:
        content: Full raw text of the file

    Returns:
        Lines with the header line first

    Raises:
        FormatError: If fewer than 2 lines remain (no header + data)
    """
    if content is None:
        raise FormatError("CSV file must contain at least a header row and one data row")

    if content.startswith(BOM):
        content = content[len(BOM):]

    lines = content.split('\n')
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 2:
        raise FormatError("CSV file must contain at least a header row and one data row")

    return lines


def tokenize_line(line: str) -> RawLine:
    """
    Split one line into trimmed fields, honouring double-quoted commas.

    Args:
        line: A single CSV line (may end with a carriage return)

    Returns:
        List of field strings

    Raises:
        RowMappingError: If the line ends inside a quoted field
    """
    fields: RawLine = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char == DELIMITER and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    if in_quotes:
        raise RowMappingError("Unterminated quoted field")

    fields.append(''.join(current).strip())
    return fields


def is_blank(fields: RawLine) -> bool:
    """True when every field is empty after trimming."""
    return all(not field.strip() for field in fields)
