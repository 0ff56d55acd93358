"""
Core services - CSV import pipeline components.
"""
from .csv_tokenizer import split_lines, tokenize_line, is_blank
from .header_resolver import (
    HEADER_RULES,
    HeaderRule,
    normalize_header,
    resolve_header,
    resolve_headers
)
from .row_mapper import map_row, is_accepted
from .step_grouper import (
    UNNUMBERED_STEP,
    extract_step_number,
    group_rows,
    is_test_case_row
)
from .test_case_classifier import TestCaseClassifier, CategoryRule
from .test_case_synthesizer import (
    ActionKind,
    TestCaseSynthesizer,
    detect_action_kind,
    default_expected_result,
    mark_action
)
from .test_case_enhancer import TestCaseEnhancer, VariantKind
from .csv_import_pipeline import CsvImportPipeline, NO_VALID_TEST_CASES
from .metrics import StructuredLogger, StructuredFormatter

__all__ = [
    # Tokenizer
    'split_lines',
    'tokenize_line',
    'is_blank',
    # Header resolver
    'HEADER_RULES',
    'HeaderRule',
    'normalize_header',
    'resolve_header',
    'resolve_headers',
    # Row mapper
    'map_row',
    'is_accepted',
    # Grouper
    'UNNUMBERED_STEP',
    'extract_step_number',
    'group_rows',
    'is_test_case_row',
    # Classification and synthesis
    'TestCaseClassifier',
    'CategoryRule',
    'ActionKind',
    'TestCaseSynthesizer',
    'detect_action_kind',
    'default_expected_result',
    'mark_action',
    'TestCaseEnhancer',
    'VariantKind',
    # Pipeline
    'CsvImportPipeline',
    'NO_VALID_TEST_CASES',
    # Logging
    'StructuredLogger',
    'StructuredFormatter',
]
