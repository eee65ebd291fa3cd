"""
Test suite for scriptkit

Contains:
- tests/unit/          : Unit tests for individual modules
"""
