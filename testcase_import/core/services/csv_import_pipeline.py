"""
CSV Import Pipeline

Single linear pass from raw CSV text to structured test case records:

    tokenize -> resolve headers -> map rows -> group/sequence
             -> classify -> synthesize -> enhance

Row-level problems are skipped with a logged warning. File-level problems
(fewer than two lines, no valid test cases) raise and produce no records.
The pipeline holds no per-import state, so one instance may serve
concurrent imports.
"""
import time
from typing import List, Optional, Tuple

from testcase_import.core.config.environment import ImportConfig
from testcase_import.core.domain.csv_row import CanonicalRow
from testcase_import.core.domain.errors import (
    CsvImportError,
    FormatError,
    RowMappingError,
    RowSkipWarning,
    ValidationError
)
from testcase_import.core.domain.import_report import ImportReport
from testcase_import.core.domain.test_case import TestCaseRecord
from testcase_import.core.services.csv_tokenizer import is_blank, split_lines, tokenize_line
from testcase_import.core.services.header_resolver import resolve_headers
from testcase_import.core.services.metrics.logger import StructuredLogger
from testcase_import.core.services.row_mapper import is_accepted, map_row
from testcase_import.core.services.step_grouper import StepGroups, group_rows
from testcase_import.core.services.test_case_classifier import TestCaseClassifier
from testcase_import.core.services.test_case_enhancer import TestCaseEnhancer
from testcase_import.core.services.test_case_synthesizer import TestCaseSynthesizer

NO_VALID_TEST_CASES = "No valid test cases found in CSV file"

LOGGER_NAME = "testcase_import.pipeline"


def pipeline_logger_name(config: ImportConfig) -> str:
    """
    Logger name for a pipeline configuration.

    StructuredLogger resets the handlers and level of its named logger, so
    pipelines with different log settings get separate child loggers of
    LOGGER_NAME. Pipelines with equal settings share one.
    """
    output = "console" if config.log_to_console else "quiet"
    return f"{LOGGER_NAME}.{str(config.log_level).lower()}.{output}"


class CsvImportPipeline:
    """Converts CSV exports into TestCaseRecord lists."""

    def __init__(
        self,
        config: Optional[ImportConfig] = None,
        classifier: Optional[TestCaseClassifier] = None,
        synthesizer: Optional[TestCaseSynthesizer] = None,
        enhancer: Optional[TestCaseEnhancer] = None,
        logger: Optional[StructuredLogger] = None
    ):
        """
        Initialize pipeline with optional collaborators.

        Args:
            config: Import settings (defaults from environment)
            classifier: Category/complexity/risk classifier
            synthesizer: Base record builder
            enhancer: Variant builder
            logger: Structured logger for row warnings and import events
        """
        self.config = config or ImportConfig.from_env()
        self.classifier = classifier or TestCaseClassifier()
        self.synthesizer = synthesizer or TestCaseSynthesizer(
            prerequisite_keywords=self.config.prerequisite_keywords,
            classifier=self.classifier
        )
        self.enhancer = enhancer or TestCaseEnhancer()
        self.logger = logger or StructuredLogger(
            name=pipeline_logger_name(self.config),
            level=self.config.log_level,
            enable_console=self.config.log_to_console
        )

    def parse_rows(self, content: str) -> Tuple[List[CanonicalRow], List[RowSkipWarning]]:
        """
        Tokenize the file and map every data line to a CanonicalRow.

        Args:
            content: Full CSV text

        Returns:
            (accepted rows in file order, skipped row warnings)

        Raises:
            FormatError: Fewer than two lines or an unreadable header
            ValidationError: No data line produced an accepted row
        """
        lines = split_lines(content)

        try:
            headers = tokenize_line(lines[0])
        except RowMappingError as e:
            raise FormatError(f"Invalid header row: {e}") from e

        mapping = resolve_headers(headers)
        if 'title' not in mapping:
            self.logger.log_title_column_missing(headers)

        rows: List[CanonicalRow] = []
        skipped: List[RowSkipWarning] = []

        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            try:
                values = tokenize_line(line)
                if is_blank(values):
                    continue
                row = map_row(values, mapping)
            except RowMappingError as e:
                skipped.append(RowSkipWarning(line_number=line_number, reason=str(e), line=line.strip()))
                self.logger.log_row_skipped(line_number, str(e))
                continue

            if is_accepted(row):
                rows.append(row)

        if not rows:
            raise ValidationError(NO_VALID_TEST_CASES)

        return rows, skipped

    def group(self, rows: List[CanonicalRow]) -> StepGroups:
        """Group rows by title; raises ValidationError when nothing remains."""
        groups = group_rows(rows, inherit_titles=self.config.inherit_titles)
        if not groups:
            raise ValidationError(NO_VALID_TEST_CASES)
        return groups

    def build_base_records(self, groups: StepGroups, user_story_id: int) -> List[TestCaseRecord]:
        """Classify and synthesize one base record per group."""
        records = []
        for title, group in groups.items():
            classification = self.classifier.classify_group(title, group)
            records.append(self.synthesizer.synthesize(title, group, user_story_id, classification))
        return records

    def convert(self, content: str, user_story_id: int) -> List[TestCaseRecord]:
        """
        Convert CSV content into base records (no enhancement).

        Args:
            content: Full CSV text
            user_story_id: Parent requirement id stamped on every record

        Returns:
            One base record per distinct test case title
        """
        rows, _ = self.parse_rows(content)
        return self.build_base_records(self.group(rows), user_story_id)

    def run(self, content: str, user_story_id: int, enhance: Optional[bool] = None) -> ImportReport:
        """
        Run the full import.

        Args:
            content: Full CSV text
            user_story_id: Parent requirement id stamped on every record
            enhance: Append variants after each base record
                (None = use config.enhance)

        Returns:
            ImportReport with the final record list

        Raises:
            FormatError: File has fewer than two lines
            ValidationError: No valid test cases remain
        """
        start = time.perf_counter()
        if enhance is None:
            enhance = self.config.enhance

        try:
            rows, skipped = self.parse_rows(content)
            groups = self.group(rows)
            base_records = self.build_base_records(groups, user_story_id)
        except CsvImportError as e:
            self.logger.log_import_failed(user_story_id, str(e))
            raise

        records: List[TestCaseRecord] = []
        variant_count = 0
        for base in base_records:
            records.append(base)
            if enhance:
                variants = self.enhancer.enhance(base)
                variant_count += len(variants)
                records.extend(variants)

        report = ImportReport(
            records=records,
            base_count=len(base_records),
            variant_count=variant_count,
            rows_read=len(rows) + len(skipped),
            rows_accepted=len(rows),
            group_count=len(groups),
            skipped_rows=skipped,
            duration_ms=(time.perf_counter() - start) * 1000
        )

        self.logger.log_import_completed(
            user_story_id=user_story_id,
            rows_accepted=report.rows_accepted,
            rows_skipped=report.skipped_count,
            groups=report.group_count,
            records=len(records),
            duration_ms=report.duration_ms
        )
        return report

    def import_records(self, content: str, user_story_id: int, enhance: Optional[bool] = None) -> List[TestCaseRecord]:
        """Run the import and return only the final record list."""
        return self.run(content, user_story_id, enhance=enhance).records
