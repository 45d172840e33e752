"""
Test suite for intbase10

Contains:
- tests/unit/          : Unit tests for individual modules
"""
