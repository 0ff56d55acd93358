"""
Import report returned by a pipeline run.
"""
from dataclasses import dataclass, field
from typing import List

from .errors import RowSkipWarning
from .test_case import TestCaseRecord


@dataclass
class ImportReport:
    """Records produced by one import plus row and record counters.

    rows_read counts data lines that produced either an accepted row or a
    skip warning; blank lines and rows with no title, id or action are not
    counted.
    """
    records: List[TestCaseRecord] = field(default_factory=list)
    base_count: int = 0
    variant_count: int = 0
    rows_read: int = 0
    rows_accepted: int = 0
    group_count: int = 0
    skipped_rows: List[RowSkipWarning] = field(default_factory=list)
    duration_ms: float = 0.0

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_rows)

    @property
    def message(self) -> str:
        """User-facing summary line."""
        return f"Successfully imported {len(self.records)} test cases"

    def to_dict(self) -> dict:
        return {
            'message': self.message,
            'baseCount': self.base_count,
            'variantCount': self.variant_count,
            'rowsRead': self.rows_read,
            'rowsAccepted': self.rows_accepted,
            'groupCount': self.group_count,
            'skippedRows': [warning.to_dict() for warning in self.skipped_rows],
            'durationMs': round(self.duration_ms, 2),
            'testCases': [record.to_dict() for record in self.records]
        }
