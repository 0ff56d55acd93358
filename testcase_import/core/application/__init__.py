"""
Application layer - use cases orchestrating services and repositories.
"""
