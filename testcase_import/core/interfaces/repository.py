"""
Repository interfaces for data access abstraction.

Following the Repository pattern to keep persistence out of the import
pipeline.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from testcase_import.core.domain.test_case import StoredTestCase, TestCaseRecord


class ITestCaseRepository(ABC):
    """Interface for test case persistence."""

    @abstractmethod
    def create(self, record: TestCaseRecord) -> StoredTestCase:
        """Persist a record and assign its surrogate id.

        Args:
            record: Record returned by the import pipeline

        Returns:
            The stored record with id and creation timestamp
        """
        pass

    @abstractmethod
    def get(self, test_case_id: int) -> Optional[StoredTestCase]:
        """Get a stored test case by id.

        Args:
            test_case_id: Surrogate id assigned by create()

        Returns:
            Stored test case if found, None otherwise
        """
        pass

    @abstractmethod
    def list_by_user_story(self, user_story_id: int) -> List[StoredTestCase]:
        """List stored test cases for a parent requirement, in creation order.

        Args:
            user_story_id: Parent requirement id

        Returns:
            Stored test cases (empty list if none)
        """
        pass
