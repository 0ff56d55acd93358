"""
Tests for the CSV test case import pipeline.

Test modules:
- unit/test_csv_tokenizer: Tests for line splitting and field tokenizing
- unit/test_header_resolver: Tests for header-to-field resolution
- unit/test_row_mapper: Tests for canonical row mapping
- unit/test_step_grouper: Tests for grouping and step ordering
- unit/test_test_case_classifier: Tests for category/complexity rules
- unit/test_test_case_synthesizer: Tests for base record assembly
- unit/test_test_case_enhancer: Tests for variant generation
- unit/test_csv_generator: Tests for the template and CSV export
- unit/test_import_config: Tests for configuration loading
- unit/test_memory_repository: Tests for the in-memory repository
- unit/test_structured_logger: Tests for structured logging
- test_csv_import_pipeline: End-to-end pipeline tests
- test_import_use_case: Tests for import and persistence
- test_workflows: Tests for the command-line workflows
"""
