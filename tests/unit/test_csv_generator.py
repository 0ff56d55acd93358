"""
Unit tests for CSV Generator module.

Tests the import template and ADO-ready CSV export.
"""
import pytest
import sys
import tempfile
import os
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from testcase_import.core.config import ImportConfig
from testcase_import.core.domain import ExecutionType, Priority, StructuredStep, TestCaseRecord
from testcase_import.infrastructure.export import CSVGenerator


class TestCSVGenerator:
    """Test CSVGenerator functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.config = ImportConfig(
            area_path="TestProject\\TestArea",
            assigned_to="test@example.com",
            default_state="Design"
        )
        self.generator = CSVGenerator(self.config)

    def _create_record(self, external_id: str = "12345") -> TestCaseRecord:
        """Create a record for testing."""
        return TestCaseRecord(
            title="Functional Test: Login Test",
            objective="Validate login",
            prerequisites="SETUP REQUIREMENTS:",
            test_steps="1. [Navigate] Navigate to login page\n2. [Click] Click Submit",
            test_steps_structured=[
                StructuredStep(1, "Navigate to login page", "Page loads"),
                StructuredStep(2, "Click Submit, then wait", "User logged in"),
            ],
            expected_result="Page loads\nUser logged in",
            priority=Priority.LOW,
            test_type=ExecutionType.WEB,
            user_story_id=42,
            external_id=external_id
        )

    def test_generator_initialization(self):
        """Test generator initializes with config values."""
        assert self.generator.area_path == "TestProject\\TestArea"
        assert self.generator.assigned_to == "test@example.com"
        assert self.generator.default_state == "Design"

    def test_generator_without_config(self):
        """Test generator works without config."""
        generator = CSVGenerator()
        assert generator.area_path == ""
        assert generator.assigned_to == ""
        assert generator.default_state == "Design"

    def test_generator_accepts_import_config(self):
        """ImportConfig satisfies the CSV config protocol."""
        config = ImportConfig(area_path="Area", assigned_to="qa@example.com", default_state="Ready")
        generator = CSVGenerator(config)

        assert generator.area_path == "Area"
        assert generator.default_state == "Ready"

    def test_headers_correct(self):
        """Test CSV headers are correct."""
        expected_headers = [
            'ID', 'Work Item Type', 'Title', 'TestStep',
            'Step Action', 'Step Expected', 'Area Path', 'AssignedTo', 'State'
        ]
        assert CSVGenerator.HEADERS == expected_headers

    def test_generate_csv_string_layout(self):
        """Header row per test case followed by step rows."""
        content = self.generator.generate_csv_string([self._create_record()])
        lines = content.strip().split('\n')

        assert lines[0] == ','.join(CSVGenerator.HEADERS)
        assert lines[1] == (
            "12345,Test Case,Functional Test: Login Test,,,,"
            "TestProject\\TestArea,test@example.com,Design"
        )
        assert lines[2] == ",,,1,Navigate to login page,Page loads,,,"
        assert lines[3] == ',,,2,"Click Submit, then wait",User logged in,,,'
        assert len(lines) == 4

    def test_record_without_steps(self):
        record = TestCaseRecord(
            title="Login",
            objective="",
            prerequisites="",
            test_steps="Execute the test scenario as described",
            test_steps_structured=None,
            expected_result="",
            priority=Priority.LOW,
            test_type=ExecutionType.WEB,
            user_story_id=1
        )
        lines = self.generator.generate_csv_string([record]).strip().split('\n')

        assert len(lines) == 2
        assert lines[1].startswith(",Test Case,Login,")

    def test_generate_csv_file(self):
        """Test CSV file generation."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            output_path = f.name

        try:
            self.generator.generate_csv([self._create_record()], output_path)

            with open(output_path, 'r', encoding='utf-8') as f:
                content = f.read()

            assert content == self.generator.generate_csv_string([self._create_record()])
        finally:
            os.unlink(output_path)

    def test_clean_text_newlines(self):
        """Test newlines are replaced with spaces."""
        assert CSVGenerator._clean_text("Line 1\nLine 2\r\nLine 3") == "Line 1 Line 2 Line 3"

    def test_clean_text_empty(self):
        assert CSVGenerator._clean_text("") == ""
        assert CSVGenerator._clean_text(None) == ""

    def test_format_csv_value(self):
        """Values are quoted only when needed."""
        assert CSVGenerator._format_csv_value("") == ""
        assert CSVGenerator._format_csv_value("plain") == "plain"
        assert CSVGenerator._format_csv_value("a, b") == '"a, b"'


class TestTemplate:
    """Test the import template."""

    def setup_method(self):
        """Set up test fixtures."""
        self.generator = CSVGenerator()

    def test_template_header(self):
        content = self.generator.generate_template_string()
        assert content.split('\n')[0] == ','.join(CSVGenerator.HEADERS)

    def test_template_titles_on_every_row(self):
        lines = self.generator.generate_template_string().strip().split('\n')[1:]
        titles = [title for title, _ in CSVGenerator.TEMPLATE_CASES]

        assert len(titles) == 3
        assert len(lines) == sum(len(steps) for _, steps in CSVGenerator.TEMPLATE_CASES)
        for line in lines:
            assert line.split(',')[2] in titles

    def test_template_has_no_quotes(self):
        assert '"' not in self.generator.generate_template_string()

    def test_each_template_case_spans_several_steps(self):
        for _, steps in CSVGenerator.TEMPLATE_CASES:
            assert len(steps) > 1

    def test_generate_template_file(self, tmp_path):
        output_path = tmp_path / "template.csv"
        self.generator.generate_template(str(output_path))

        assert output_path.read_text(encoding='utf-8') == self.generator.generate_template_string()
