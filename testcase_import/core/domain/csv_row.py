"""
Canonical CSV row entity.
"""
from dataclasses import dataclass
from typing import List

# One tokenized CSV line
RawLine = List[str]

# Canonical field names, in ADO column order
CANONICAL_FIELDS = (
    'id',
    'work_item_type',
    'title',
    'test_step',
    'step_action',
    'step_expected',
    'area_path',
    'assigned_to',
    'state',
)

DEFAULT_WORK_ITEM_TYPE = "Test Case"
DEFAULT_STATE = "Active"


@dataclass(frozen=True)
class CanonicalRow:
    """A parsed CSV data row normalized to the canonical field set."""
    id: str = ""
    work_item_type: str = DEFAULT_WORK_ITEM_TYPE
    title: str = ""
    test_step: str = ""
    step_action: str = ""
    step_expected: str = ""
    area_path: str = ""
    assigned_to: str = ""
    state: str = DEFAULT_STATE

    def to_dict(self) -> dict:
        """Convert to dictionary keyed by canonical field name."""
        return {name: getattr(self, name) for name in CANONICAL_FIELDS}
