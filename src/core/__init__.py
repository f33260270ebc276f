"""
Core primitives: range and index checks with typed errors.

Pure functions with no I/O and no shared state.
"""
