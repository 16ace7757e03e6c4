"""
Project-wide helpers:
- configuration constants (paths, algorithm defaults)
- the exception hierarchy.
"""
