"""
CSV test case import and normalization.

Turns loosely formatted test case spreadsheets into structured test case
records, optionally expanded with Positive, Negative and Edge Case variants.
"""
from testcase_import.core.config import ImportConfig
from testcase_import.core.domain import (
    CsvImportError,
    FormatError,
    ImportReport,
    TestCaseRecord,
    ValidationError
)
from testcase_import.core.services.csv_import_pipeline import CsvImportPipeline

__version__ = "1.0.0"

__all__ = [
    'CsvImportPipeline',
    'CsvImportError',
    'FormatError',
    'ImportConfig',
    'ImportReport',
    'TestCaseRecord',
    'ValidationError',
]
