"""
Utilities

Logging setup and async helpers.
"""
