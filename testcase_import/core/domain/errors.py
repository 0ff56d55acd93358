"""
Import error taxonomy.

File-level problems abort the whole import; row-level problems are
recovered by the pipeline and reported as RowSkipWarning entries.
"""
from dataclasses import dataclass


class CsvImportError(ValueError):
    """Base class for all CSV import failures."""


class FormatError(CsvImportError):
    """The file is structurally unusable (no header + data lines)."""


class ValidationError(CsvImportError):
    """No valid test cases remain after row filtering and grouping."""


class RowMappingError(CsvImportError):
    """A single line could not be tokenized or mapped."""


@dataclass
class RowSkipWarning:
    """A data line dropped during parsing."""
    line_number: int
    reason: str
    line: str = ""

    def to_dict(self) -> dict:
        return {
            'lineNumber': self.line_number,
            'reason': self.reason,
            'line': self.line
        }
