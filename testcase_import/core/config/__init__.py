"""
Configuration management - externalized and extensible.
"""
from .environment import ImportConfig

__all__ = ['ImportConfig']
