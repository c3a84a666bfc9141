"""
Utilities for coverage checking, configuration and logging.
"""
