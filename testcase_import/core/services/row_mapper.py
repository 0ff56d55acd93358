"""
Row Mapper

Converts one tokenized CSV line into a CanonicalRow using the resolved
header mapping.
"""
from typing import Optional

from testcase_import.core.domain.csv_row import (
    CANONICAL_FIELDS,
    DEFAULT_STATE,
    DEFAULT_WORK_ITEM_TYPE,
    CanonicalRow,
    RawLine
)
from testcase_import.core.domain.errors import RowMappingError
from testcase_import.core.services.header_resolver import HeaderMapping

# Applied when the mapped value is empty or the column is absent
FIELD_DEFAULTS = {
    'work_item_type': DEFAULT_WORK_ITEM_TYPE,
    'state': DEFAULT_STATE,
}


def get_value(values: RawLine, index: Optional[int]) -> str:
    """Read a mapped cell; missing indices yield an empty string."""
    if index is None or index < 0 or index >= len(values):
        return ''
    value = (values[index] or '').strip()
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def map_row(values: RawLine, mapping: HeaderMapping) -> CanonicalRow:
    """
    Map tokenized fields to a CanonicalRow, applying field defaults.

    Args:
        values: Fields from one data line
        mapping: Canonical field name -> column index

    Returns:
        CanonicalRow with every field populated

    Raises:
        RowMappingError: If values is not a sequence of strings
    """
    if not isinstance(values, list):
        raise RowMappingError(f"Expected a list of fields, got {type(values).__name__}")

    row_data = {}
    for field_name in CANONICAL_FIELDS:
        try:
            value = get_value(values, mapping.get(field_name))
        except AttributeError as e:
            raise RowMappingError(f"Invalid value for {field_name}: {e}") from e
        row_data[field_name] = value or FIELD_DEFAULTS.get(field_name, '')

    return CanonicalRow(**row_data)


def is_accepted(row: CanonicalRow) -> bool:
    """
    Accept any row with a title, id or step action.

    Continuation rows that carry only step data are kept here; the grouper
    decides what to do with them.
    """
    return bool(row.title or row.id or row.step_action)
