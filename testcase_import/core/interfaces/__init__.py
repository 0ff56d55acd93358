"""
Interfaces for dependency inversion.

Collaborators outside the import pipeline depend on these abstractions,
not concrete implementations.
"""
from .repository import ITestCaseRepository

__all__ = [
    'ITestCaseRepository',
]
