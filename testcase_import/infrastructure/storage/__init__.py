"""
Test case repositories.
"""
from .memory_repository import InMemoryTestCaseRepository

__all__ = ['InMemoryTestCaseRepository']
