#!/usr/bin/env python3
"""
Test Case Import Workflows

Command-line entry point for importing CSV test case exports and for
downloading the import template.

Usage:
    testcase-import import --csv tests.csv --story-id 12345
    testcase-import import --csv ado_export.csv --story-id 12345 --inherit-titles --export-csv out.csv
    testcase-import template --output template.csv
"""
import argparse
import json
import os
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, List, Optional

from testcase_import.core.application.use_cases import ImportTestCasesUseCase
from testcase_import.core.config import ImportConfig
from testcase_import.core.domain.errors import CsvImportError
from testcase_import.core.services.csv_import_pipeline import CsvImportPipeline
from testcase_import.infrastructure.export import CSVGenerator
from testcase_import.infrastructure.storage import InMemoryTestCaseRepository


class WorkflowStatus(Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PARTIAL = "partial"


@dataclass
class WorkflowResult:
    """Result of workflow execution."""
    status: WorkflowStatus
    message: str
    data: Dict[str, Any] = None

    def __post_init__(self):
        if self.data is None:
            self.data = {}


class IWorkflow(ABC):
    """Interface for all workflows."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Workflow name."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Workflow description."""
        pass

    @abstractmethod
    def execute(self, config: ImportConfig, **kwargs) -> WorkflowResult:
        """Execute the workflow with import configuration."""
        pass

    @abstractmethod
    def validate_inputs(self, **kwargs) -> Optional[str]:
        """Validate inputs. Returns error message or None if valid."""
        pass


class ImportWorkflow(IWorkflow):
    """
    Import a CSV file into structured test cases.

    Runs the import pipeline, stores the records in an in-memory repository
    and optionally writes them to JSON and ADO-ready CSV.
    """

    @property
    def name(self) -> str:
        return "import"

    @property
    def description(self) -> str:
        return "Import test cases from a CSV export"

    def validate_inputs(self, **kwargs) -> Optional[str]:
        csv_file = kwargs.get('csv_file')
        if not csv_file:
            return "csv_file is required"
        if not os.path.isfile(csv_file):
            return f"CSV file not found: {csv_file}"
        story_id = kwargs.get('story_id')
        if not isinstance(story_id, int) or story_id <= 0:
            return "story_id must be a positive integer"
        return None

    def execute(self, config: ImportConfig, **kwargs) -> WorkflowResult:
        csv_file = kwargs['csv_file']
        story_id = kwargs['story_id']
        enhance = not kwargs.get('no_enhance', False) and config.enhance
        output_file = kwargs.get('output_file')
        export_csv = kwargs.get('export_csv')

        print(f"\nWorkflow: Import Test Cases")
        print(f"CSV: {csv_file}")
        print(f"Story ID: {story_id}")
        print(f"Mode: {'Base + variants' if enhance else 'Base records only'}\n")

        try:
            with open(csv_file, 'r', encoding='utf-8') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            return WorkflowResult(
                status=WorkflowStatus.FAILED,
                message=f"Failed to read CSV file: {e}"
            )

        repository = InMemoryTestCaseRepository()
        use_case = ImportTestCasesUseCase(repository, CsvImportPipeline(config=config))

        try:
            result = use_case.execute(content, story_id, enhance=enhance)
        except CsvImportError as e:
            return WorkflowResult(status=WorkflowStatus.FAILED, message=str(e))

        report = result.report
        print(f"  Rows accepted: {report.rows_accepted}")
        print(f"  Rows skipped: {report.skipped_count}")
        print(f"  Test cases: {report.base_count} base, {report.variant_count} variants")
        for warning in report.skipped_rows:
            print(f"    line {warning.line_number}: {warning.reason}")

        output_files: List[str] = []
        if output_file:
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(result.to_dict(), f, indent=2)
            output_files.append(output_file)

        if export_csv:
            CSVGenerator(config).generate_csv(report.records, export_csv)
            output_files.append(export_csv)

        for path in output_files:
            print(f"  Saved: {path}")

        status = WorkflowStatus.PARTIAL if report.skipped_count else WorkflowStatus.SUCCESS
        return WorkflowResult(
            status=status,
            message=result.message,
            data={
                'test_cases': len(result.test_cases),
                'skipped_rows': report.skipped_count,
                'output_files': output_files
            }
        )


class TemplateWorkflow(IWorkflow):
    """Write the CSV import template to a file or stdout."""

    @property
    def name(self) -> str:
        return "template"

    @property
    def description(self) -> str:
        return "Write the CSV import template"

    def validate_inputs(self, **kwargs) -> Optional[str]:
        return None

    def execute(self, config: ImportConfig, **kwargs) -> WorkflowResult:
        output_file = kwargs.get('output_file')
        generator = CSVGenerator(config)

        if not output_file:
            sys.stdout.write(generator.generate_template_string())
            return WorkflowResult(status=WorkflowStatus.SUCCESS, message="Template written to stdout")

        generator.generate_template(output_file)
        return WorkflowResult(
            status=WorkflowStatus.SUCCESS,
            message=f"Template saved to {output_file}",
            data={'output_files': [output_file]}
        )


class WorkflowEngine:
    """Orchestrates workflow execution with import configuration."""

    def __init__(self):
        self._workflows: Dict[str, IWorkflow] = {}
        self._register_workflows()

    def _register_workflows(self):
        """Register all available workflows."""
        for workflow in [ImportWorkflow(), TemplateWorkflow()]:
            self._workflows[workflow.name] = workflow

    def get_workflow(self, name: str) -> Optional[IWorkflow]:
        """Get workflow by name."""
        return self._workflows.get(name)

    def list_workflows(self) -> List[str]:
        """List all available workflow names."""
        return list(self._workflows.keys())

    def execute(self, workflow_name: str, config_path: str = None, **kwargs) -> WorkflowResult:
        """Execute a workflow by name with import configuration."""
        workflow = self.get_workflow(workflow_name)

        if not workflow:
            return WorkflowResult(
                status=WorkflowStatus.FAILED,
                message=f"Unknown workflow: {workflow_name}. Available: {self.list_workflows()}"
            )

        try:
            config = ImportConfig.load_from_yaml(config_path) if config_path else ImportConfig.from_env()
        except (OSError, ValueError) as e:
            return WorkflowResult(
                status=WorkflowStatus.FAILED,
                message=f"Failed to load config: {e}"
            )

        if kwargs.pop('inherit_titles', False):
            config = replace(config, inherit_titles=True)

        error = workflow.validate_inputs(**kwargs)
        if error:
            return WorkflowResult(
                status=WorkflowStatus.FAILED,
                message=f"Invalid inputs: {error}"
            )

        return workflow.execute(config, **kwargs)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="CSV Test Case Import",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Workflows:
  import      Import test cases from a CSV export
  template    Write the CSV import template

Examples:
  # Import with Positive/Negative/Edge Case variants
  testcase-import import --csv tests.csv --story-id 272889

  # Base records only, saved as JSON
  testcase-import import --csv tests.csv --story-id 272889 --no-enhance --output tests.json

  # ADO export layout (step rows without titles)
  testcase-import import --csv ado_export.csv --story-id 272889 --inherit-titles

  # Template
  testcase-import template --output template.csv
        """
    )

    # Global arguments
    parser.add_argument('--config', '-c', dest='config_path', help='YAML import profile')

    subparsers = parser.add_subparsers(dest='workflow', help='Workflow to execute')

    import_parser = subparsers.add_parser('import', help='Import test cases from CSV')
    import_parser.add_argument('--csv', dest='csv_file', required=True, help='CSV file to import')
    import_parser.add_argument('--story-id', type=int, required=True, help='Parent user story ID')
    import_parser.add_argument('--no-enhance', action='store_true',
                               help='Skip Positive/Negative/Edge Case variants')
    import_parser.add_argument('--inherit-titles', action='store_true',
                               help='Attach untitled step rows to the preceding test case')
    import_parser.add_argument('--output', dest='output_file', help='Save imported test cases to JSON')
    import_parser.add_argument('--export-csv', help='Save imported test cases as ADO-ready CSV')

    template_parser = subparsers.add_parser('template', help='Write the CSV import template')
    template_parser.add_argument('--output', dest='output_file', help='Output file (default: stdout)')

    return parser


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.workflow:
        parser.print_help()
        sys.exit(1)

    # Convert args to kwargs
    kwargs = vars(args).copy()
    workflow_name = kwargs.pop('workflow')
    config_path = kwargs.pop('config_path', None)

    engine = WorkflowEngine()
    result = engine.execute(workflow_name, config_path=config_path, **kwargs)

    # Exit code
    if result.status == WorkflowStatus.FAILED:
        print(f"\nERROR: {result.message}")
        sys.exit(1)
    elif result.status == WorkflowStatus.PARTIAL:
        print(f"\nWARNING: {result.message}")
        sys.exit(0)
    elif workflow_name != 'template' or args.output_file:
        print(f"\nSUCCESS: {result.message}")
    sys.exit(0)


if __name__ == '__main__':
    main()
