"""
Step Grouper / Sequencer

Buckets canonical rows by title, keeps only test case rows, and orders the
steps inside each bucket.
"""
import re
from dataclasses import replace
from typing import Dict, List, Optional

from testcase_import.core.domain.csv_row import DEFAULT_WORK_ITEM_TYPE, CanonicalRow

StepGroups = Dict[str, List[CanonicalRow]]

# Sort key for rows without a leading step number
UNNUMBERED_STEP = 999

_LEADING_DIGITS = re.compile(r'^(\d+)')


def is_test_case_row(row: CanonicalRow) -> bool:
    """True for rows of type "Test Case" or any type containing "test"."""
    work_item_type = row.work_item_type or ''
    return work_item_type == DEFAULT_WORK_ITEM_TYPE or 'test' in work_item_type.lower()


def extract_step_number(test_step: str) -> int:
    """Leading integer of a TestStep cell, or 999 when there is none."""
    match = _LEADING_DIGITS.match(test_step or '')
    return int(match.group(1)) if match else UNNUMBERED_STEP


def group_rows(rows: List[CanonicalRow], inherit_titles: bool = False) -> StepGroups:
    """
    Group test case rows by exact title and order each group by step number.

    Args:
        rows: Accepted canonical rows in file order
        inherit_titles: Give untitled rows the title of the nearest preceding
            test case row (ADO export layout)

    Returns:
        Title -> ordered rows, in order of first appearance
    """
    groups: StepGroups = {}
    last_title: Optional[str] = None

    for row in rows:
        if not is_test_case_row(row):
            last_title = None
            continue

        if not row.title:
            if not (inherit_titles and last_title):
                continue
            row = replace(row, title=last_title)

        last_title = row.title
        groups.setdefault(row.title, []).append(row)

    # sorted() is stable, so equal step numbers keep file order
    return {
        title: sorted(group, key=lambda r: extract_step_number(r.test_step))
        for title, group in groups.items()
    }
