"""
Test suite for mylib

Contains:
- tests/unit/          : Unit tests for individual modules
"""
