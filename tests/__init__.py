"""
Test suite for range-check

Contains:
- tests/unit/          : Unit tests for individual modules
"""
