"""
Export adapters.
"""
from .csv_generator import CSVGenerator, ICSVConfig

__all__ = ['CSVGenerator', 'ICSVConfig']
