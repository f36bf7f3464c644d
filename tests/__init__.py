"""
Test suite for numeric-forms

Contains:
- tests/unit/          : Unit tests for individual modules
"""
