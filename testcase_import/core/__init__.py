"""
Core layer - domain, configuration, interfaces, services and use cases.
"""
