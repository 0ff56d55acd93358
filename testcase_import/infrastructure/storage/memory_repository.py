"""
In-memory test case repository.

Thread-safe store that assigns sequential surrogate ids.
"""
from collections import OrderedDict
from threading import Lock
from typing import List, Optional

from testcase_import.core.domain.test_case import StoredTestCase, TestCaseRecord
from testcase_import.core.interfaces.repository import ITestCaseRepository


class InMemoryTestCaseRepository(ITestCaseRepository):
    """Thread-safe in-memory repository."""

    def __init__(self, start_id: int = 1):
        """Initialize repository.

        Args:
            start_id: First id handed out by create()
        """
        self._items: 'OrderedDict[int, StoredTestCase]' = OrderedDict()
        self._next_id = start_id
        self._lock = Lock()

    def create(self, record: TestCaseRecord) -> StoredTestCase:
        with self._lock:
            stored = StoredTestCase(id=self._next_id, record=record)
            self._items[stored.id] = stored
            self._next_id += 1
            return stored

    def get(self, test_case_id: int) -> Optional[StoredTestCase]:
        with self._lock:
            return self._items.get(test_case_id)

    def list_by_user_story(self, user_story_id: int) -> List[StoredTestCase]:
        with self._lock:
            return [
                item for item in self._items.values()
                if item.record.user_story_id == user_story_id
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
