"""
Header Resolver

Maps arbitrary, misordered CSV header names to canonical row fields using
an ordered list of keyword rules.
"""
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

HeaderMapping = Dict[str, int]


@dataclass(frozen=True)
class HeaderRule:
    """Matches a normalized header by substring or exact name."""
    field_name: str
    contains: Tuple[str, ...] = ()
    equals: Tuple[str, ...] = ()

    def matches(self, normalized: str) -> bool:
        if normalized in self.equals:
            return True
        return any(keyword in normalized for keyword in self.contains)


# Checked in order; each column commits to the first rule it satisfies.
HEADER_RULES: List[HeaderRule] = [
    HeaderRule('id', contains=('id', 'workitemid')),
    HeaderRule('work_item_type', contains=('workitemtype',), equals=('type',)),
    HeaderRule('title', contains=('title', 'name')),
    HeaderRule('test_step', contains=('teststep',), equals=('step',)),
    HeaderRule('step_action', contains=('stepaction', 'action')),
    HeaderRule('step_expected', contains=('stepexpected', 'expected')),
    HeaderRule('area_path', contains=('areapath', 'area')),
    HeaderRule('assigned_to', contains=('assignedto', 'assigned')),
    HeaderRule('state', contains=('state', 'status')),
]

_NON_ALPHANUMERIC = re.compile(r'[^a-z0-9]')


def normalize_header(name: str) -> str:
    """Lower-case a header name and drop everything but letters and digits."""
    return _NON_ALPHANUMERIC.sub('', (name or '').lower())


def resolve_header(name: str) -> Optional[str]:
    """
    Resolve one header name to a canonical field.

    Args:
        name: Raw header cell (e.g. "Work Item Type", "step_action", "ID")

    Returns:
        Canonical field name, or None if no rule matches
    """
    normalized = normalize_header(name)
    if not normalized:
        return None

    for rule in HEADER_RULES:
        if rule.matches(normalized):
            return rule.field_name
    return None


def resolve_headers(headers: List[str]) -> HeaderMapping:
    """
    Build the column index for each canonical field.

    Unmatched columns are left unmapped. When two columns resolve to the
    same field, the later column wins.

    Args:
        headers: Header line fields in column order

    Returns:
        Dict mapping canonical field name to column index
    """
    mapping: HeaderMapping = {}
    for index, header in enumerate(headers):
        field_name = resolve_header(header)
        if field_name is not None:
            mapping[field_name] = index
    return mapping
