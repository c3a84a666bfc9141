"""
Core data types and exceptions for the camera coverage system.
"""
