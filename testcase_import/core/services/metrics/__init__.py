"""
Structured logging for import events.
"""
from .logger import StructuredLogger, StructuredFormatter

__all__ = [
    'StructuredLogger',
    'StructuredFormatter'
]
