"""
Use case: Import test cases from a CSV export.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from testcase_import.core.domain.import_report import ImportReport
from testcase_import.core.domain.test_case import StoredTestCase
from testcase_import.core.interfaces.repository import ITestCaseRepository
from testcase_import.core.services.csv_import_pipeline import CsvImportPipeline


@dataclass
class ImportResult:
    """Outcome of an import: persisted test cases plus the pipeline report."""
    message: str
    user_story_id: int
    test_cases: List[StoredTestCase] = field(default_factory=list)
    report: Optional[ImportReport] = None

    def to_dict(self) -> dict:
        return {
            'message': self.message,
            'userStoryId': self.user_story_id,
            'testCases': [tc.to_dict() for tc in self.test_cases],
            'skippedRows': [w.to_dict() for w in self.report.skipped_rows] if self.report else []
        }


class ImportTestCasesUseCase:
    """Use case for importing and persisting test cases from CSV content."""

    def __init__(
        self,
        repository: ITestCaseRepository,
        pipeline: Optional[CsvImportPipeline] = None
    ):
        """Initialize use case with dependencies.

        Args:
            repository: Persistence sink for the imported records
            pipeline: CSV import pipeline
        """
        self.repository = repository
        self.pipeline = pipeline or CsvImportPipeline()

    def execute(
        self,
        content: str,
        user_story_id: int,
        enhance: Optional[bool] = None
    ) -> ImportResult:
        """Execute the import.

        The pipeline runs to completion before anything is persisted, so a
        file-level error leaves the repository untouched.

        Args:
            content: Raw CSV text
            user_story_id: Parent requirement id
            enhance: Override for variant generation

        Returns:
            ImportResult with the stored test cases

        Raises:
            FormatError: File has fewer than two lines
            ValidationError: No valid test cases found
        """
        report = self.pipeline.run(content, user_story_id, enhance=enhance)

        stored = [self.repository.create(record) for record in report.records]

        return ImportResult(
            message=report.message,
            user_story_id=user_story_id,
            test_cases=stored,
            report=report
        )
