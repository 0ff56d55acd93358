"""
Application use cases.
"""
from .import_test_cases import ImportTestCasesUseCase, ImportResult

__all__ = ['ImportTestCasesUseCase', 'ImportResult']
