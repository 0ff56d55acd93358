"""
Domain entities and value objects.
"""
from .csv_row import (
    CANONICAL_FIELDS,
    DEFAULT_STATE,
    DEFAULT_WORK_ITEM_TYPE,
    CanonicalRow,
    RawLine
)
from .errors import (
    CsvImportError,
    FormatError,
    ValidationError,
    RowMappingError,
    RowSkipWarning
)
from .test_case import (
    Category,
    Complexity,
    RiskLevel,
    Priority,
    ExecutionType,
    Classification,
    StructuredStep,
    TestCaseRecord,
    StoredTestCase
)
from .import_report import ImportReport

__all__ = [
    'CANONICAL_FIELDS',
    'DEFAULT_STATE',
    'DEFAULT_WORK_ITEM_TYPE',
    'CanonicalRow',
    'RawLine',
    'CsvImportError',
    'FormatError',
    'ValidationError',
    'RowMappingError',
    'RowSkipWarning',
    'Category',
    'Complexity',
    'RiskLevel',
    'Priority',
    'ExecutionType',
    'Classification',
    'StructuredStep',
    'TestCaseRecord',
    'StoredTestCase',
    'ImportReport',
]
