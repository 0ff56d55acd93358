"""
CSV Generator Module

Writes the downloadable import template and exports imported records back
to ADO-ready CSV. Area path, assignee and state come from an injected
configuration.
"""
import csv
import io
from typing import IO, List, Optional, Protocol, Tuple

from testcase_import.core.domain.test_case import TestCaseRecord


class ICSVConfig(Protocol):
    """Protocol for CSV configuration."""
    @property
    def area_path(self) -> str: ...
    @property
    def assigned_to(self) -> str: ...
    @property
    def default_state(self) -> str: ...


# (title, [(step, action, expected), ...]) rows of the import template
TemplateCase = Tuple[str, List[Tuple[str, str, str]]]


class CSVGenerator:
    """
    Generates import templates and ADO-ready exports.

    Supports configurable area path, assignee, and state via dependency injection.
    """

    # CSV column headers (ADO format)
    HEADERS = [
        'ID', 'Work Item Type', 'Title', 'TestStep',
        'Step Action', 'Step Expected', 'Area Path', 'AssignedTo', 'State'
    ]

    # Every template row repeats its title so the file imports without
    # title inheritance. Text avoids commas and double quotes.
    TEMPLATE_CASES: List[TemplateCase] = [
        ("User Login with Valid Credentials", [
            ("1", "Navigate to the login page", "Login page is displayed"),
            ("2", "Enter a valid username and password", "Credentials are accepted by the form"),
            ("3", "Click the Login button", "User is redirected to the dashboard"),
        ]),
        ("Search Products by Keyword", [
            ("1", "Navigate to the product catalog", "Catalog page is displayed"),
            ("2", "Enter a keyword in the search box", "Search suggestions appear"),
            ("3", "Verify the results list", "Only matching products are listed"),
        ]),
        ("Reject Invalid Email on Registration", [
            ("1", "Precondition: registration page is reachable", ""),
            ("2", "Enter an email address without a domain", "Email field is highlighted"),
            ("3", "Click the Register button", "Invalid email message is shown"),
        ]),
    ]

    TEMPLATE_STATE = "Active"

    def __init__(self, config: Optional[ICSVConfig] = None):
        """
        Initialize CSV generator with optional configuration.

        Args:
            config: Configuration object with area_path, assigned_to, default_state
        """
        self._config = config
        self._area_path = config.area_path if config else ""
        self._assigned_to = config.assigned_to if config else ""
        self._default_state = config.default_state if config else "Design"

    @property
    def area_path(self) -> str:
        """Get area path for test cases."""
        return self._area_path

    @property
    def assigned_to(self) -> str:
        """Get default assignee."""
        return self._assigned_to

    @property
    def default_state(self) -> str:
        """Get default test case state."""
        return self._default_state

    def generate_template_string(self) -> str:
        """
        Build the import template.

        One row per step, each carrying ID, Work Item Type, Title and
        State, so every row is accepted and grouped on its own.

        Returns:
            CSV content as string
        """
        output = io.StringIO()
        self._write_header(output)

        for case_number, (title, steps) in enumerate(self.TEMPLATE_CASES, start=1):
            for step, action, expected in steps:
                row = [
                    f"TC{case_number:03d}",
                    'Test Case',
                    title,
                    step,
                    action,
                    expected,
                    self._area_path,
                    self._assigned_to,
                    self.TEMPLATE_STATE
                ]
                self._write_row(output, row)

        return output.getvalue()

    def generate_template(self, output_file: str) -> None:
        """Write the import template to a file."""
        with open(output_file, 'w', newline='', encoding='utf-8') as f:
            f.write(self.generate_template_string())

    def generate_csv(self, test_cases: List[TestCaseRecord], output_file: str) -> None:
        """
        Generate ADO-ready CSV with exact column structure.

        CSV Structure:
        - One header row per test case (Work Item Type = Test Case)
        - Followed by step-per-row entries
        - Metadata columns blank on step rows
        - Plain text only (ADO-safe)
        - Newlines in text are replaced with spaces

        Args:
            test_cases: Imported records
            output_file: Output file path
        """
        with open(output_file, 'w', newline='', encoding='utf-8') as f:
            f.write(self.generate_csv_string(test_cases))

    def generate_csv_string(self, test_cases: List[TestCaseRecord]) -> str:
        """
        Generate CSV content as a string.

        Args:
            test_cases: Imported records

        Returns:
            CSV content as string
        """
        output = io.StringIO()
        self._write_header(output)

        for tc in test_cases:
            self._write_test_case(output, tc)

        return output.getvalue()

    def _write_header(self, stream: IO[str]) -> None:
        # Header row (no quotes needed)
        stream.write(','.join(self.HEADERS) + '\n')

    def _write_row(self, stream: IO[str], row: List[str]) -> None:
        formatted_row = [self._format_csv_value(val) for val in row]
        stream.write(','.join(formatted_row) + '\n')

    def _write_test_case(self, stream: IO[str], tc: TestCaseRecord) -> None:
        """Write a single test case: titled header row, then step rows."""
        row = [
            tc.external_id or '',  # ID
            'Test Case',  # Work Item Type
            self._clean_text(tc.title),  # Title
            '',  # TestStep
            '',  # Step Action
            '',  # Step Expected
            self._area_path,  # Area Path
            self._assigned_to,  # Assigned To
            self._default_state  # State
        ]
        self._write_row(stream, row)

        for step in tc.test_steps_structured or []:
            step_row = [
                '', '', '',
                str(step.step_number),
                self._clean_text(step.action),
                self._clean_text(step.expected_result),
                '', '', ''
            ]
            self._write_row(stream, step_row)

    @staticmethod
    def _clean_text(text: str) -> str:
        """
        Clean text for CSV: replace newlines with spaces.

        Args:
            text: Input text

        Returns:
            Cleaned text safe for CSV
        """
        if not text:
            return ""
        # Replace newlines and carriage returns with spaces
        text = text.replace('\r\n', ' ').replace('\n', ' ').replace('\r', ' ')
        # Remove extra whitespace
        text = ' '.join(text.split())
        return text

    @staticmethod
    def _format_csv_value(value) -> str:
        """
        Format CSV value: quote only when needed.

        Args:
            value: Value to format

        Returns:
            Properly quoted/escaped CSV value
        """
        if value == '' or value is None:
            return ''
        # Use csv module to properly escape quotes and commas
        output = io.StringIO()
        csv.writer(output, quoting=csv.QUOTE_MINIMAL).writerow([str(value)])
        return output.getvalue().rstrip('\n\r')
